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
from typing import Dict, List, Optional, Union

from loguru import logger

from coreason_logbook.errors import NilLoggerError
from coreason_logbook.handle import LoggerHandle
from coreason_logbook.interfaces import LoggerFactory
from coreason_logbook.named_logger import ConsoleLoggerFactory, NamedLogger, default_destination
from coreason_logbook.severity import Severity


class LoggerRegistry:
    """
    Maps logical names to logger handles.

    Each name gets at most one handle for the lifetime of the registry. Entries
    are never removed: a lookup miss inserts a default handle, and installing a
    new instance for a known name swaps it into the existing handle.

    The default factory runs under the registry lock. The lock is reentrant, so
    a factory may look up other names, but not the name it is building.
    """

    def __init__(self, default_factory: Optional[LoggerFactory] = None):
        self.default_factory: LoggerFactory = default_factory or ConsoleLoggerFactory()
        self._handles: Dict[str, LoggerHandle] = {}
        self._lock = threading.RLock()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._handles

    def __len__(self) -> int:
        with self._lock:
            return len(self._handles)

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._handles)

    def get(self, name: str) -> LoggerHandle:
        """Returns the handle for `name`, creating an info-level default on a miss."""
        return self.get_with_default_level(name, Severity.INFO)

    def get_with_default_level(self, name: str, level: Union[Severity, str]) -> LoggerHandle:
        """
        Returns the handle for `name`, creating a default at `level` on a miss.

        The default writes colorized records to standard output. An existing
        handle is returned as is, whatever its configured level.
        """
        severity = Severity.coerce(level)
        with self._lock:
            handle = self._handles.get(name)
            if handle is not None:
                return handle

            instance = self.default_factory.create(name, severity, default_destination(), True)
            if instance is None:
                raise NilLoggerError(name)

            handle = LoggerHandle(name, instance)
            self._handles[name] = handle

        logger.debug(f"Created default logger '{name}' at {severity.label}")
        return handle

    def install(self, name: str, instance: NamedLogger) -> Optional[NamedLogger]:
        """
        Installs `instance` as the current logger of `name`.

        Returns:
            The instance it replaced, or None if the name was new.
        """
        with self._lock:
            handle = self._handles.get(name)
            if handle is None:
                self._handles[name] = LoggerHandle(name, instance)
                return None
            return handle.swap(instance)
