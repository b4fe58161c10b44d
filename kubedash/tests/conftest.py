"""Shared fixtures for kubedash tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest


class FakeTimer:
    """Cancel token handed out by FakeClock."""

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeClock:
    """Manually advanced clock; timers fire only inside ``advance()``."""

    def __init__(self, start: float = 1000.0) -> None:
        self._now = start
        self._timers: list[FakeTimer] = []

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self._now + delay, callback)
        self._timers.append(timer)
        return timer

    @property
    def pending(self) -> int:
        """Timers neither fired nor cancelled."""
        return sum(1 for t in self._timers if not t.cancelled and not t.fired)

    def advance(self, seconds: float) -> None:
        """Move time forward, firing due timers in due order."""
        target = self._now + seconds
        while True:
            due = [
                t for t in self._timers
                if not t.cancelled and not t.fired and t.due <= target
            ]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self._now = max(self._now, timer.due)
            timer.fired = True
            timer.callback()
        self._now = target


@pytest.fixture
def fake_clock() -> FakeClock:
    """Provide a fresh FakeClock."""
    return FakeClock()
