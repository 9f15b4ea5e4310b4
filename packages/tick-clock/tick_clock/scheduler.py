"""Shared periodic scheduler that drives every animator's ticks.

``Scheduler`` runs entries on one daemon thread. ``ManualScheduler`` has the
same registration API but only fires entries when its clock is advanced, so
engine code can be tested without waiting on the wall clock.
"""
from __future__ import annotations

import heapq
import itertools
import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, Callable

from tick_clock.clock import Clock, ManualClock
from tick_clock.config import TickConfig

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _Entry:
    due: float
    seq: int
    interval: float
    fn: Callable[[], None]
    cancelled: bool = False

    def __lt__(self, other: _Entry) -> bool:
        return (self.due, self.seq) < (other.due, other.seq)


class ScheduleHandle:
    """Registration of one recurring entry. Cancel it to stop the entry."""

    __slots__ = ("_scheduler", "_entry")

    def __init__(self, scheduler: BaseScheduler, entry: _Entry) -> None:
        self._scheduler = scheduler
        self._entry = entry

    @property
    def cancelled(self) -> bool:
        return self._entry.cancelled

    @property
    def interval(self) -> float:
        return self._entry.interval

    def cancel(self) -> None:
        """Deregister the entry. No firing starts after this returns."""
        self._scheduler._cancel(self._entry)


class BaseScheduler:
    """Entry bookkeeping shared by the threaded and manual schedulers."""

    def __init__(self, clock: Clock, config: TickConfig | None = None) -> None:
        self._clock = clock
        self._config = config if config is not None else TickConfig()
        self._lock = threading.Lock()
        self._heap: list[_Entry] = []
        self._seq = itertools.count()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def config(self) -> TickConfig:
        return self._config

    def configure(self, **changes: Any) -> TickConfig:
        """Replace config fields. Running animators keep their old snapshot."""
        self._config = replace(self._config, **changes)
        return self._config

    @property
    def active(self) -> int:
        """Number of registered, non-cancelled entries."""
        with self._lock:
            return sum(1 for e in self._heap if not e.cancelled)

    def schedule(
        self, fn: Callable[[], None], delay: float, interval: float,
    ) -> ScheduleHandle:
        """Run ``fn`` after ``delay`` seconds, then every ``interval`` seconds.

        Fixed-delay semantics: the next firing is measured from the end of
        the previous run.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        with self._lock:
            entry = _Entry(
                due=self._clock.now() + delay,
                seq=next(self._seq),
                interval=interval,
                fn=fn,
            )
            heapq.heappush(self._heap, entry)
            self._wake()
        return ScheduleHandle(self, entry)

    # --- Internal ---

    def _wake(self) -> None:
        """Called with the lock held whenever the heap changes."""

    def _cancel(self, entry: _Entry) -> None:
        with self._lock:
            entry.cancelled = True
            self._wake()

    def _discard_cancelled(self) -> None:
        while self._heap and self._heap[0].cancelled:
            heapq.heappop(self._heap)

    def _next_due(self) -> float | None:
        with self._lock:
            self._discard_cancelled()
            return self._heap[0].due if self._heap else None

    def _pop_due(self, now: float) -> _Entry | None:
        with self._lock:
            self._discard_cancelled()
            if self._heap and self._heap[0].due <= now:
                return heapq.heappop(self._heap)
            return None

    def _reschedule(self, entry: _Entry) -> None:
        with self._lock:
            if entry.cancelled:
                return
            entry.due = self._clock.now() + entry.interval
            entry.seq = next(self._seq)
            heapq.heappush(self._heap, entry)
            self._wake()


class Scheduler(BaseScheduler):
    """Threaded scheduler. One daemon thread fires every entry in due order."""

    def __init__(
        self,
        config: TickConfig | None = None,
        clock: Clock | None = None,
        name: str = "tick-scheduler",
    ) -> None:
        super().__init__(clock if clock is not None else Clock(), config)
        self._cond = threading.Condition(self._lock)
        self._name = name
        self._thread: threading.Thread | None = None
        self._shutdown = False

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def schedule(
        self, fn: Callable[[], None], delay: float, interval: float,
    ) -> ScheduleHandle:
        if self._shutdown:
            raise RuntimeError("scheduler has been shut down")
        self._ensure_thread()
        return super().schedule(fn, delay, interval)

    def shutdown(self, wait: bool = True) -> None:
        """Stop the thread. Registered entries are dropped."""
        with self._cond:
            self._shutdown = True
            for entry in self._heap:
                entry.cancelled = True
            self._heap.clear()
            self._cond.notify_all()
        thread = self._thread
        if wait and thread is not None and thread is not threading.current_thread():
            thread.join()
        logger.debug("scheduler %s shut down", self._name)

    def _wake(self) -> None:
        self._cond.notify_all()

    def _ensure_thread(self) -> None:
        with self._lock:
            if self._thread is not None:
                return
            self._thread = threading.Thread(
                target=self._run, name=self._name, daemon=True,
            )
            self._thread.start()
        logger.debug("scheduler %s started", self._name)

    def _wait_for_entry(self) -> _Entry | None:
        """Block until an entry is due. Returns None on shutdown."""
        with self._cond:
            while not self._shutdown:
                self._discard_cancelled()
                if not self._heap:
                    self._cond.wait()
                    continue
                timeout = self._heap[0].due - self._clock.now()
                if timeout <= 0:
                    return heapq.heappop(self._heap)
                self._cond.wait(timeout)
            return None

    def _run(self) -> None:
        while True:
            entry = self._wait_for_entry()
            if entry is None:
                return
            if entry.cancelled:
                continue
            try:
                entry.fn()
            except Exception:
                logger.exception("scheduled entry %r failed; cancelling it", entry.fn)
                self._cancel(entry)
                continue
            self._reschedule(entry)


class ManualScheduler(BaseScheduler):
    """Scheduler driven by an explicit ``ManualClock``. Never spawns threads."""

    def __init__(self, config: TickConfig | None = None, start: float = 0.0) -> None:
        super().__init__(ManualClock(start), config)

    @property
    def clock(self) -> ManualClock:
        return self._clock  # type: ignore[return-value]

    def run_pending(self) -> int:
        """Fire every entry due at the current clock time. Returns the count."""
        fired = 0
        now = self._clock.now()
        while True:
            entry = self._pop_due(now)
            if entry is None:
                return fired
            entry.fn()
            fired += 1
            self._reschedule(entry)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing each entry at its due time."""
        clock = self.clock
        target = clock.now() + seconds
        fired = 0
        while True:
            due = self._next_due()
            if due is None or due > target:
                break
            if due > clock.now():
                clock.set(due)
            fired += self.run_pending()
        clock.set(target)
        return fired


_default: Scheduler | None = None
_default_lock = threading.Lock()


def default_scheduler() -> Scheduler:
    """Return the process-wide scheduler, creating it on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = Scheduler(config=TickConfig.from_env())
        return _default
