# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logbook

from typing import Any, Union

from coreason_logbook.named_logger import NamedLogger
from coreason_logbook.severity import Severity


class LoggerHandle:
    """
    Stable indirection to the current logger instance of a name.

    A handle is created once per name and never replaced. Reconfiguration swaps
    the whole instance behind it, so code holding the handle picks up the new
    level and destination without fetching it again. Readers see either the old
    or the new instance, never a mix of both.
    """

    def __init__(self, name: str, instance: NamedLogger):
        self.name = name
        self._instance = instance

    def __repr__(self) -> str:
        return f"LoggerHandle(name={self.name!r}, current={self._instance!r})"

    @property
    def current(self) -> NamedLogger:
        return self._instance

    def swap(self, instance: NamedLogger) -> NamedLogger:
        """Replaces the current instance and returns the previous one."""
        previous = self._instance
        self._instance = instance
        return previous

    # --- Logging shortcuts (delegate to the current instance) ---

    def log(self, severity: Union[Severity, str], message: str, *args: Any, **kwargs: Any) -> None:
        self._instance.log(severity, message, *args, depth=1, **kwargs)

    def trace(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._instance.log(Severity.TRACE, message, *args, depth=1, **kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._instance.log(Severity.DEBUG, message, *args, depth=1, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._instance.log(Severity.INFO, message, *args, depth=1, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._instance.log(Severity.WARN, message, *args, depth=1, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._instance.log(Severity.ERROR, message, *args, depth=1, **kwargs)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._instance.log(Severity.FATAL, message, *args, depth=1, **kwargs)

    def panic(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._instance.log(Severity.PANIC, message, *args, depth=1, **kwargs)

    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Logs at error severity with the exception being handled attached."""
        self._instance.log(Severity.ERROR, message, *args, depth=1, exception=True, **kwargs)
