# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logbook

import threading
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from coreason_logbook.configurator import Configurator
from coreason_logbook.handle import LoggerHandle
from coreason_logbook.interfaces import LoggerFactory
from coreason_logbook.loader import ConfigSource
from coreason_logbook.once import OnceGate
from coreason_logbook.registry import LoggerRegistry
from coreason_logbook.severity import Severity


class LogbookContext:
    """
    Global context/singleton holding the process-wide logger registry.
    """

    _instance: Optional["LogbookContext"] = None
    _instance_lock = threading.Lock()

    def __init__(self, default_factory: Optional[LoggerFactory] = None):
        self.registry = LoggerRegistry(default_factory)
        self.configurator = Configurator(self.registry)
        self._once = OnceGate()

    def initialize(self, source: ConfigSource) -> None:
        origin = source if isinstance(source, (str, Path)) else type(source).__name__
        logger.info(f"Initializing loggers from {origin}")
        self.configurator.apply_from_source(source)

    def initialize_once(self, source: ConfigSource) -> None:
        """
        Initializes at most once for the life of this context.

        Later calls, including ones racing the first, return or raise whatever
        the first call did. Their `source` is ignored.
        """
        self._once.run(self.initialize, source)

    @classmethod
    def get_instance(cls) -> "LogbookContext":
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def set_instance(cls, context: Optional["LogbookContext"]) -> None:
        """Replaces the process-wide context. None recreates it on next use."""
        with cls._instance_lock:
            cls._instance = context


# --- Public API Functions ---


def initialize_once(source: ConfigSource) -> None:
    """Loads and applies a logger configuration, only the first time it is called."""
    LogbookContext.get_instance().initialize_once(source)


def initialize(source: ConfigSource) -> None:
    """Loads and applies a logger configuration, updating existing handles in place."""
    LogbookContext.get_instance().initialize(source)


def apply_config(config: ConfigSource, factory: Optional[LoggerFactory] = None) -> None:
    """Applies a configuration, building loggers with `factory`."""
    LogbookContext.get_instance().configurator.apply(config, factory)


def get_logger(name: str) -> LoggerHandle:
    """Returns the handle for `name`; unconfigured names get an info-level default."""
    return LogbookContext.get_instance().registry.get(name)


def get_logger_with_default(name: str, severity: Union[Severity, str]) -> LoggerHandle:
    """Returns the handle for `name`; unconfigured names get a default at `severity`."""
    return LogbookContext.get_instance().registry.get_with_default_level(name, severity)
