# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logbook

from enum import IntEnum
from typing import Optional, Union

from loguru import logger

# loguru ships no level above CRITICAL; panic records get their own.
PANIC_LEVEL_NAME = "PANIC"
PANIC_LEVEL_NO = 60

try:
    logger.level(PANIC_LEVEL_NAME)
except ValueError:
    logger.level(PANIC_LEVEL_NAME, no=PANIC_LEVEL_NO, color="<RED><white><bold>")


class Severity(IntEnum):
    """
    Ordered log importance levels.

    Values are loguru severity numbers, so a severity can be handed to a sink
    directly as its minimum level. DISABLED sits above every emittable level.
    """

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50
    PANIC = PANIC_LEVEL_NO
    DISABLED = 100

    @classmethod
    def parse(cls, text: str) -> "Severity":
        """
        Parses a configuration level string (case-insensitive).

        Raises:
            ValueError: If the string is not one of the recognized names.
        """
        key = text.strip().lower() if isinstance(text, str) else ""
        severity = _BY_NAME.get(key)
        if severity is None:
            raise ValueError(f"Unknown level: {text!r}")
        return severity

    @classmethod
    def coerce(cls, value: Union["Severity", str]) -> "Severity":
        if isinstance(value, Severity):
            return value
        return cls.parse(value)

    @property
    def label(self) -> str:
        """Lowercase name as written in configuration files."""
        return self.name.lower()

    @property
    def level_name(self) -> Optional[str]:
        """The loguru level a record of this severity is emitted at."""
        return _LEVEL_NAMES.get(self)


_BY_NAME = {s.name.lower(): s for s in Severity}

_LEVEL_NAMES = {
    Severity.TRACE: "TRACE",
    Severity.DEBUG: "DEBUG",
    Severity.INFO: "INFO",
    Severity.WARN: "WARNING",
    Severity.ERROR: "ERROR",
    Severity.FATAL: "CRITICAL",
    Severity.PANIC: PANIC_LEVEL_NAME,
}
