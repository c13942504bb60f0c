# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logbook

from typing import Optional


class LogbookError(Exception):
    """Base class for every error raised while configuring named loggers."""


class ConfigUnreadableError(LogbookError, ValueError):
    """The configuration source could not be opened, decoded or validated."""


class InvalidLevelError(LogbookError, ValueError):
    """A named logger was configured with an unrecognized level."""

    def __init__(self, logger_name: str, level: str):
        self.logger_name = logger_name
        self.level = level
        super().__init__(f"Invalid level for {logger_name}: {level!r}")


class LogFileError(LogbookError, OSError):
    """The output file of a named logger could not be opened for append."""

    def __init__(self, logger_name: str, path: str, reason: Optional[str] = None):
        self.logger_name = logger_name
        self.path = path
        message = f"Failed to open log file for {logger_name}: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NilLoggerError(LogbookError, RuntimeError):
    """A logger factory returned no instance."""

    def __init__(self, logger_name: str):
        self.logger_name = logger_name
        super().__init__(f"Logger factory returned no logger for {logger_name}")
