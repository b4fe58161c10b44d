"""RefreshScheduler - periodic and manual refresh lifecycle.

The scheduler owns at most one periodic timer and at most one manual-refresh
cooldown timer. Every timer is a cancel token obtained from a ``Clock``, so
``disable_auto()`` and ``teardown()`` only ever cancel what they hold.

Usage:
    scheduler = RefreshScheduler(controller.refresh_cycle)
    scheduler.enable_auto()      # tick every 10s
    scheduler.manual_refresh()   # run now, ignore repeats for 1s
    scheduler.teardown()         # no timers left behind
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from kubedash.constants.enums import SchedulerState
from kubedash.constants.timeouts import (
    MANUAL_REFRESH_COOLDOWN,
    REFRESH_INTERVAL_DEFAULT,
)
from kubedash.utils.clock import Clock, EventLoopClock, TimerHandle

logger = logging.getLogger(__name__)

RefreshCycle = Callable[[], Awaitable[Any] | None]


class RefreshScheduler:
    """Drives refresh cycles from a periodic timer and debounced manual triggers.

    Cycles may be plain callables or coroutine functions. Coroutines are
    started as tasks and not awaited; a slow cycle never delays the next tick
    and overlapping cycles are allowed.
    """

    def __init__(
        self,
        refresh_cycle: RefreshCycle,
        *,
        clock: Clock | None = None,
        period: float = REFRESH_INTERVAL_DEFAULT,
        cooldown: float = MANUAL_REFRESH_COOLDOWN,
    ) -> None:
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        if cooldown <= 0:
            raise ValueError(f"cooldown must be positive, got {cooldown}")
        self._refresh_cycle = refresh_cycle
        self._clock: Clock = clock or EventLoopClock()
        self._period = period
        self._cooldown = cooldown
        self._periodic_timer: TimerHandle | None = None
        self._cooldown_timer: TimerHandle | None = None
        self._tasks: set[asyncio.Future[Any]] = set()
        self._torn_down = False

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> SchedulerState:
        if self._cooldown_timer is not None:
            return SchedulerState.MANUAL_COOLDOWN
        if self._periodic_timer is not None:
            return SchedulerState.SCHEDULED
        return SchedulerState.IDLE

    @property
    def auto_enabled(self) -> bool:
        return self._periodic_timer is not None

    @property
    def period(self) -> float:
        return self._period

    @property
    def outstanding_timers(self) -> int:
        """Number of timers currently held (0, 1 or 2)."""
        return sum(
            timer is not None for timer in (self._periodic_timer, self._cooldown_timer)
        )

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    # =========================================================================
    # Transitions
    # =========================================================================

    def enable_auto(self, period: float | None = None) -> None:
        """Start ticking every ``period`` seconds, replacing any active timer."""
        if self._torn_down:
            logger.warning("enable_auto() ignored: scheduler was torn down")
            return
        if period is not None:
            if period <= 0:
                raise ValueError(f"period must be positive, got {period}")
            self._period = period
        self._cancel_periodic()
        self._arm_periodic()
        logger.debug("Auto-refresh enabled (%ss)", self._period)

    def disable_auto(self) -> None:
        """Stop periodic ticks. No-op when auto-refresh is off."""
        if self._periodic_timer is None:
            return
        self._cancel_periodic()
        logger.debug("Auto-refresh disabled")

    def manual_refresh(self) -> bool:
        """Run a cycle now unless one was triggered within the cooldown.

        Returns:
            True if a cycle was started, False if the call was debounced.
        """
        if self._torn_down:
            logger.warning("manual_refresh() ignored: scheduler was torn down")
            return False
        if self._cooldown_timer is not None:
            logger.debug("Manual refresh ignored during cooldown")
            return False
        self._cooldown_timer = self._clock.call_later(
            self._cooldown, self._on_cooldown_expired
        )
        self._run_cycle("manual")
        return True

    def teardown(self) -> None:
        """Cancel every outstanding timer. Safe to call repeatedly."""
        self._cancel_periodic()
        if self._cooldown_timer is not None:
            self._cooldown_timer.cancel()
            self._cooldown_timer = None
        if not self._torn_down:
            logger.debug("Refresh scheduler torn down")
        self._torn_down = True

    # =========================================================================
    # Timer callbacks
    # =========================================================================

    def _arm_periodic(self) -> None:
        self._periodic_timer = self._clock.call_later(
            self._period, self._on_periodic_tick
        )

    def _cancel_periodic(self) -> None:
        if self._periodic_timer is not None:
            self._periodic_timer.cancel()
            self._periodic_timer = None

    def _on_periodic_tick(self) -> None:
        # Re-arm before running so a cycle that tears down also cancels the next tick
        self._periodic_timer = None
        self._arm_periodic()
        self._run_cycle("periodic")

    def _on_cooldown_expired(self) -> None:
        self._cooldown_timer = None

    # =========================================================================
    # Cycle execution
    # =========================================================================

    def _run_cycle(self, trigger: str) -> None:
        logger.debug("Starting %s refresh cycle", trigger)
        try:
            result = self._refresh_cycle()
        except Exception:
            logger.exception("Refresh cycle (%s) failed", trigger)
            return
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._on_cycle_done)

    def _on_cycle_done(self, task: asyncio.Future[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Refresh cycle failed: %s", error, exc_info=error)


__all__ = [
    "RefreshCycle",
    "RefreshScheduler",
]
