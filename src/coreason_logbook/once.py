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
from types import TracebackType
from typing import Any, Callable, Optional


class OnceGate:
    """
    Runs a callable at most once and replays its outcome.

    The first caller executes the callable while holding the gate's lock;
    concurrent callers block on that lock until it finishes. Every call, first
    or later, returns the recorded value or re-raises the recorded exception.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False
        self._result: Any = None
        self._error: Optional[BaseException] = None
        self._traceback: Optional[TracebackType] = None

    @property
    def done(self) -> bool:
        return self._done

    def run(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        if not self._done:
            with self._lock:
                if not self._done:
                    try:
                        self._result = fn(*args, **kwargs)
                    except Exception as e:
                        self._error = e
                        self._traceback = e.__traceback__
                    self._done = True

        if self._error is not None:
            # Restore the first traceback so replays do not keep extending it.
            raise self._error.with_traceback(self._traceback)
        return self._result
