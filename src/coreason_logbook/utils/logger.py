# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logbook

import sys
from typing import Any, Dict

from loguru import logger as _logger

__all__ = ["logger", "ROUTING_KEY"]

# Records carrying this key in `extra` belong to a registry-owned sink.
ROUTING_KEY = "logbook_sink"


def _diagnostics_only(record: Dict[str, Any]) -> bool:
    return ROUTING_KEY not in record["extra"]


# Remove default handler
_logger.remove()

# Sink 1: Stderr (Human-readable) for the package's own diagnostics.
# Named loggers write through their own sinks and are kept out of this one.
_logger.add(
    sys.stderr,
    level="INFO",
    filter=_diagnostics_only,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    ),
)

logger: Any = _logger
