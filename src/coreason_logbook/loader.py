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
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from loguru import logger
from pydantic import ValidationError

from coreason_logbook.errors import ConfigUnreadableError
from coreason_logbook.schemas import LogbookConfig

ConfigSource = Union[str, Path, Mapping[str, Any], LogbookConfig]


def load_config(source: ConfigSource) -> LogbookConfig:
    """
    Resolves a logger configuration from a file path, a decoded JSON document
    or an already built model.

    Raises:
        ConfigUnreadableError: If the file cannot be read, is not valid JSON, or
            does not describe a logger configuration.
    """
    if isinstance(source, LogbookConfig):
        return source

    if isinstance(source, Mapping):
        return _validate(dict(source), "<mapping>")

    if not isinstance(source, (str, Path)):
        raise ConfigUnreadableError(f"Unsupported configuration source: {type(source).__name__}")

    config_path = Path(source)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        logger.error(f"Could not open config file {config_path}: {e}")
        raise ConfigUnreadableError(f"Could not open config file: {config_path}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Could not decode config {config_path}: {e}")
        raise ConfigUnreadableError(f"Could not decode config: {e}") from e

    return _validate(data, str(config_path))


def _validate(data: Any, origin: str) -> LogbookConfig:
    try:
        return LogbookConfig.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid logger configuration in {origin}: {e}")
        raise ConfigUnreadableError(f"Invalid logger configuration: {e}") from e
