"""tick-clock - Time sources, shared scheduler and dispatchers for animations."""
from __future__ import annotations

from tick_clock.clock import Clock, ManualClock
from tick_clock.config import TickConfig
from tick_clock.dispatch import DirectDispatcher, Dispatcher, QueueDispatcher
from tick_clock.scheduler import (
    BaseScheduler,
    ManualScheduler,
    ScheduleHandle,
    Scheduler,
    default_scheduler,
)

__all__ = [
    "Clock",
    "ManualClock",
    "TickConfig",
    "Dispatcher",
    "DirectDispatcher",
    "QueueDispatcher",
    "BaseScheduler",
    "Scheduler",
    "ManualScheduler",
    "ScheduleHandle",
    "default_scheduler",
]
