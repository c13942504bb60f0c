# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logbook

from pathlib import Path
from typing import Any, Generator, List, Optional, TextIO, Tuple

import pytest

from coreason_logbook.context import LogbookContext
from coreason_logbook.named_logger import NamedLogger, build_logger
from coreason_logbook.registry import LoggerRegistry
from coreason_logbook.severity import Severity

# --- Mocks ---


class RecordingFactory:
    """
    Factory double that keeps every record in memory instead of writing it out.
    Records are (logger name, loguru level name, message) tuples.
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Severity, TextIO, bool]] = []
        self.records: List[Tuple[Optional[str], str, str]] = []

    def _sink(self, message: Any) -> None:
        record = message.record
        self.records.append((record["extra"].get("logger"), record["level"].name, record["message"]))

    def create(self, name: str, severity: Severity, destination: TextIO, color: bool) -> NamedLogger:
        self.calls.append((name, severity, destination, color))
        return build_logger(name, severity, self._sink)

    def messages(self) -> List[str]:
        return [message for _, _, message in self.records]


class NoneFactory:
    def create(self, name: str, severity: Severity, destination: TextIO, color: bool) -> None:
        return None


def close_all(registry: LoggerRegistry) -> None:
    for name in registry.names():
        current = registry.get(name).current
        if isinstance(current, NamedLogger):
            current.close()


# --- Fixtures ---


@pytest.fixture
def recording_factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def registry(recording_factory: RecordingFactory) -> Generator[LoggerRegistry, None, None]:
    reg = LoggerRegistry(default_factory=recording_factory)
    yield reg
    close_all(reg)


@pytest.fixture
def console_registry() -> Generator[LoggerRegistry, None, None]:
    reg = LoggerRegistry()
    yield reg
    close_all(reg)


@pytest.fixture(autouse=True)
def fresh_context() -> Generator[LogbookContext, None, None]:
    """Each test gets its own process-wide context."""
    ctx = LogbookContext()
    LogbookContext.set_instance(ctx)
    yield ctx
    close_all(ctx.registry)
    LogbookContext.set_instance(None)


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "output_file.log"


@pytest.fixture
def config_file(tmp_path: Path, log_file: Path) -> Path:
    path = tmp_path / "loggers.json"
    path.write_text(
        '{"loggers": {"svc": {"level": "debug", "file": "%s", "color": false}}}' % log_file.as_posix(),
        encoding="utf-8",
    )
    return path
