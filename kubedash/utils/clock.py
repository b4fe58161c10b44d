"""Clock abstraction handing out cancellable timers."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """Cancel token for a scheduled callback."""

    def cancel(self) -> None: ...


class Clock(Protocol):
    """Source of time and one-shot timers."""

    def now(self) -> float: ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class EventLoopClock:
    """Clock backed by the asyncio event loop's ``call_later``.

    The loop is resolved lazily so the clock can be built before the
    application's loop starts running.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def now(self) -> float:
        return time.monotonic()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


__all__ = [
    "Clock",
    "EventLoopClock",
    "TimerHandle",
]
