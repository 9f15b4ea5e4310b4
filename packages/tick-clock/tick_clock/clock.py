"""Time sources for the scheduler and animators."""
from __future__ import annotations

import time


class Clock:
    """Monotonic wall clock. ``now()`` returns seconds."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock(Clock):
    """Clock that only moves when told to. Used to drive schedulers in tests."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError("cannot advance a clock backwards")
        self._now += seconds
        return self._now

    def set(self, seconds: float) -> None:
        if seconds < self._now:
            raise ValueError("cannot move a clock backwards")
        self._now = seconds
