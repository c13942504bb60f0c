# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-logbook

"""
coreason-logbook
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .configurator import Configurator
from .context import (
    LogbookContext,
    apply_config,
    get_logger,
    get_logger_with_default,
    initialize,
    initialize_once,
)
from .errors import (
    ConfigUnreadableError,
    InvalidLevelError,
    LogbookError,
    LogFileError,
    NilLoggerError,
)
from .handle import LoggerHandle
from .interfaces import LoggerFactory
from .loader import load_config
from .named_logger import ConsoleLoggerFactory, NamedLogger, build_logger
from .registry import LoggerRegistry
from .schemas import LogbookConfig, LoggerConfig
from .severity import Severity

__all__ = [
    "LoggerRegistry",
    "LoggerHandle",
    "Configurator",
    "LogbookContext",
    "LogbookConfig",
    "LoggerConfig",
    "LoggerFactory",
    "ConsoleLoggerFactory",
    "NamedLogger",
    "Severity",
    "build_logger",
    "load_config",
    "initialize",
    "initialize_once",
    "apply_config",
    "get_logger",
    "get_logger_with_default",
    "LogbookError",
    "ConfigUnreadableError",
    "InvalidLevelError",
    "LogFileError",
    "NilLoggerError",
]
