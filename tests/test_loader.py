# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logbook

import json
from pathlib import Path

from coreason_logbook.loader import load_config
from coreason_logbook.schemas import LogbookConfig, LoggerConfig


def test_load_from_file(config_file: Path, log_file: Path) -> None:
    cfg = load_config(config_file)
    assert cfg.loggers["svc"].level == "debug"
    assert cfg.loggers["svc"].file == log_file.as_posix()


def test_load_from_str_path(config_file: Path) -> None:
    cfg = load_config(str(config_file))
    assert "svc" in cfg.loggers


def test_load_from_mapping() -> None:
    cfg = load_config({"loggers": {"api": {"level": "warn", "color": True}}})
    assert cfg.loggers["api"] == LoggerConfig(level="warn", file="", color=True)


def test_model_passes_through() -> None:
    model = LogbookConfig(loggers={"api": LoggerConfig(level="info")})
    assert load_config(model) is model


def test_unknown_keys_ignored(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"version": 2, "loggers": {"a": {"level": "info", "rotate": True}}}))
    cfg = load_config(path)
    assert cfg.loggers["a"].level == "info"
