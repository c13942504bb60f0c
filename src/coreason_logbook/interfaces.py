# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logbook

from typing import TYPE_CHECKING, Optional, Protocol, TextIO

from coreason_logbook.severity import Severity

if TYPE_CHECKING:
    from coreason_logbook.named_logger import NamedLogger


class LoggerFactory(Protocol):
    """
    Protocol for building logger instances.
    """

    def create(self, name: str, severity: Severity, destination: TextIO, color: bool) -> Optional["NamedLogger"]:
        """
        Builds a new logger instance writing to `destination`.

        Returning None is reported to the caller as a NilLoggerError.
        A registry's default factory runs under the registry lock: it may look
        up other names but must not look up the name it is building.
        """
        ...
