"""Utility functions and classes for kubedash."""

from kubedash.utils.clock import Clock, EventLoopClock, TimerHandle
from kubedash.utils.refresh_scheduler import RefreshCycle, RefreshScheduler

__all__ = [
    # Clock
    "Clock",
    "EventLoopClock",
    # Scheduler
    "RefreshCycle",
    "RefreshScheduler",
    "TimerHandle",
]
