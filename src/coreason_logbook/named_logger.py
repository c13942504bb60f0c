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
import threading
import uuid
from typing import Any, Callable, Dict, Optional, TextIO, Union

from loguru import logger

from coreason_logbook.severity import Severity
from coreason_logbook.utils.logger import ROUTING_KEY

# Console layout: time, level, call site, logical name, message.
NAMED_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<magenta>{extra[logger]}</magenta> - "
    "<level>{message}</level>"
)

ANONYMOUS_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def _route(token: str) -> Callable[[Dict[str, Any]], bool]:
    def _filter(record: Dict[str, Any]) -> bool:
        return bool(record["extra"].get(ROUTING_KEY) == token)

    return _filter


class NamedLogger:
    """
    A logger instance: a loguru logger bound to a logical name and routed to a
    sink of its own.

    Instances are immutable once built. Reconfiguring a name builds a new
    instance and swaps it into the existing handle.
    """

    def __init__(
        self,
        name: str,
        severity: Severity,
        bound: Any,
        handler_id: Optional[int] = None,
        owned: Optional[TextIO] = None,
    ):
        self.name = name
        self.severity = severity
        self._bound = bound
        self._handler_id = handler_id
        self._owned = owned
        self._closed = False
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"NamedLogger(name={self.name!r}, severity={self.severity.label})"

    @property
    def closed(self) -> bool:
        return self._closed

    def enabled_for(self, severity: Severity) -> bool:
        return severity is not Severity.DISABLED and severity >= self.severity

    def log(
        self,
        severity: Union[Severity, str],
        message: str,
        *args: Any,
        depth: int = 0,
        exception: bool = False,
        **kwargs: Any,
    ) -> None:
        """
        Emits a record at `severity`.

        `depth` counts extra stack frames between the user's call site and this
        method, so that wrappers report their caller's location.
        """
        severity = Severity.coerce(severity)
        if not self.enabled_for(severity):
            return
        self._bound.opt(depth=depth + 1, exception=exception or None).log(
            severity.level_name, message, *args, **kwargs
        )

    def own(self, stream: TextIO) -> None:
        """Takes ownership of a stream, closed together with this instance."""
        self._owned = stream

    def close(self) -> None:
        """
        Detaches the sink, then closes the owned stream. Safe to call twice.

        The sink is stopped before the stream is closed, so a thread still
        holding this instance never writes to a closed file: records it emits
        after close are dropped.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            try:
                if self._handler_id is not None:
                    logger.remove(self._handler_id)
            except ValueError:
                # Sink already removed elsewhere, e.g. by a global logger.remove().
                logger.debug(f"Sink of logger '{self.name}' was already removed")
            finally:
                if self._owned is not None and not self._owned.closed:
                    self._owned.close()


def build_logger(
    name: str,
    severity: Severity,
    sink: Any,
    *,
    colorize: Optional[bool] = None,
    fmt: Optional[str] = None,
) -> NamedLogger:
    """
    Builds a NamedLogger writing to `sink`.

    Args:
        name: Logical name, attached to every record as the `logger` field.
            An empty name attaches nothing.
        severity: Minimum severity admitted by the sink.
        sink: Any loguru sink (stream, callable, path).
        colorize: Force ANSI colors on or off; None lets loguru decide.
        fmt: loguru format string. Defaults to the console layout.

    Returns:
        NamedLogger: The new instance, its sink already attached.
    """
    token = uuid.uuid4().hex
    extra: Dict[str, Any] = {ROUTING_KEY: token}
    if name:
        extra["logger"] = name

    if fmt is None:
        fmt = NAMED_FORMAT if name else ANONYMOUS_FORMAT

    handler_id = logger.add(
        sink,
        level=int(severity),
        format=fmt,
        colorize=colorize,
        filter=_route(token),
    )
    return NamedLogger(name, severity, logger.bind(**extra), handler_id=handler_id)


class ConsoleLoggerFactory:
    """
    Default factory: console-style, colorized records with call site and name.
    """

    def create(self, name: str, severity: Severity, destination: TextIO, color: bool) -> NamedLogger:
        instance = build_logger(name, severity, destination, colorize=color)
        instance.log(Severity.DEBUG, "logger created")
        return instance


def default_destination() -> TextIO:
    return sys.stdout
