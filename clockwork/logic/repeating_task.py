"""
RepeatingTask – a cancellable, fixed-interval callback on the Tk event loop.

`start()` runs the callback right away and then every `interval_ms`, using
the scheduler's `after` / `after_cancel` (any Tk widget qualifies).
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class AfterScheduler(Protocol):
    def after(self, ms: int, func: Callable[[], None]) -> str: ...

    def after_cancel(self, id: str) -> None: ...


class RepeatingTask:
    """Indefinite repeating task with an initial invocation at start time."""

    def __init__(self, scheduler: AfterScheduler, interval_ms: int, callback: Callable[[], None]) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._scheduler = scheduler
        self._interval_ms = interval_ms
        self._callback = callback
        self._after_id: Optional[str] = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._run()

    def cancel(self) -> None:
        self._running = False
        if self._after_id is not None:
            after_id, self._after_id = self._after_id, None
            self._scheduler.after_cancel(after_id)

    def _run(self) -> None:
        self._after_id = None
        try:
            self._callback()
        finally:
            # a failing callback is reported by Tk, the schedule survives it
            if self._running:
                self._after_id = self._scheduler.after(self._interval_ms, self._run)
