# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logbook

from typing import Dict

from pydantic import BaseModel, Field


class LoggerConfig(BaseModel):
    """
    Configuration of a single named logger.

    The level is kept as written and parsed when the configuration is applied,
    so an unknown or missing level is reported against the logger that carries it.
    An empty file means standard output.
    """

    level: str = ""
    file: str = ""
    color: bool = False


class LogbookConfig(BaseModel):
    """
    Top-level configuration document: logical name -> logger configuration.
    """

    loggers: Dict[str, LoggerConfig] = Field(default_factory=dict)
