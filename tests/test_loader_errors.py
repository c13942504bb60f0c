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

import pytest

from coreason_logbook.errors import ConfigUnreadableError, LogbookError
from coreason_logbook.loader import load_config


def test_config_not_found(tmp_path: Path) -> None:
    with pytest.raises(ConfigUnreadableError, match="Could not open config file"):
        load_config(tmp_path / "missing.json")


def test_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text("{invalid_json")
    with pytest.raises(ConfigUnreadableError, match="Could not decode config"):
        load_config(path)


def test_config_wrong_shape(tmp_path: Path) -> None:
    # Valid JSON but loggers is not a mapping of logger configs
    path = tmp_path / "cfg.json"
    path.write_text('{"loggers": ["svc"]}')
    with pytest.raises(ConfigUnreadableError, match="Invalid logger configuration"):
        load_config(path)


def test_config_not_an_object(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text("[]")
    with pytest.raises(ConfigUnreadableError):
        load_config(path)


def test_unsupported_source() -> None:
    with pytest.raises(ConfigUnreadableError, match="Unsupported configuration source"):
        load_config(42)  # type: ignore[arg-type]


def test_error_is_value_error_and_chained(tmp_path: Path) -> None:
    with pytest.raises(ValueError) as exc_info:
        load_config(tmp_path / "missing.json")
    assert isinstance(exc_info.value, LogbookError)
    assert isinstance(exc_info.value.__cause__, OSError)
