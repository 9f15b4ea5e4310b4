"""Callback dispatchers: where animator notifications actually run."""
from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Protocol

Callback = Callable[[], None]


class Dispatcher(Protocol):
    def dispatch(self, fn: Callback) -> None: ...


class DirectDispatcher:
    """Runs callbacks immediately on the calling (scheduler) thread."""

    def dispatch(self, fn: Callback) -> None:
        fn()


class QueueDispatcher:
    """Queues callbacks for the thread that owns the consumer's state.

    The owner calls ``drain()`` from its own loop (e.g. once per UI frame).
    Callbacks run in the order they were dispatched.
    """

    def __init__(self) -> None:
        self._queue: deque[Callback] = deque()
        self._lock = threading.Lock()

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._queue)

    def dispatch(self, fn: Callback) -> None:
        with self._lock:
            self._queue.append(fn)

    def drain(self, limit: int | None = None) -> int:
        """Run queued callbacks on the calling thread. Returns the count run."""
        ran = 0
        while limit is None or ran < limit:
            with self._lock:
                if not self._queue:
                    break
                fn = self._queue.popleft()
            fn()
            ran += 1
        return ran
