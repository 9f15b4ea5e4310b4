"""Animator - timer state machine that turns elapsed time into eased progress.

Each animator owns one recurring entry on a shared scheduler. Every firing
advances ``fraction`` by ``1 / (fps_target * duration)``, scaled by how late
the tick ran when frame skip is enabled, then applies the loop, freeze and
back-to-start policies and hands ``easing(fraction)`` to ``on_update``.

State is only mutated under the animator's lock. Notifications are queued
while the lock is held and handed to the dispatcher after it is released, so
a callback may call back into the animator (e.g. to chain another play).
"""
from __future__ import annotations

import enum
import logging
import threading
from collections import deque
from typing import Callable

from tick_clock import (
    BaseScheduler,
    DirectDispatcher,
    Dispatcher,
    ScheduleHandle,
    default_scheduler,
)
from tick_tween import Easing, EasingLike, resolve_easing

logger = logging.getLogger(__name__)

UpdateFn = Callable[[float], None]
FinishFn = Callable[[], None]


class AnimatorState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


def _check_duration(duration: float) -> None:
    if duration <= 0:
        raise ValueError(f"duration must be positive, got {duration}")


def _check_delay(delay: float) -> None:
    if delay < 0:
        raise ValueError(f"delay must be >= 0, got {delay}")


class Animator:
    """Drives a progress fraction from 0 to 1 over ``duration`` seconds.

    Args:
        duration: Seconds for one pass from 0 to 1.
        delay: Seconds to wait before the first tick when played with
            ``skip_delay=False``.
        loop: Wrap around instead of finishing at either end.
        easing: Catalog name or function applied to the fraction on delivery.
        on_update: Called with the eased fraction after every tick.
        on_finish: Called when a pass ends or ``stop()`` is called.
        scheduler: Scheduler to register ticks on. Defaults to the
            process-wide threaded scheduler.
        dispatcher: Where callbacks run. Defaults to the scheduler thread.
    """

    def __init__(
        self,
        duration: float,
        delay: float = 0.0,
        loop: bool = False,
        easing: EasingLike = "linear",
        *,
        on_update: UpdateFn | None = None,
        on_finish: FinishFn | None = None,
        scheduler: BaseScheduler | None = None,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        _check_duration(duration)
        _check_delay(delay)
        self._duration = duration
        self._delay = delay
        self._looping = loop
        self._easing: Easing = resolve_easing(easing)
        self._on_update = on_update
        self._on_finish = on_finish
        self._scheduler = scheduler if scheduler is not None else default_scheduler()
        self._dispatcher: Dispatcher = (
            dispatcher if dispatcher is not None else DirectDispatcher()
        )

        self._fraction = 0.0
        self._reverse = False
        self._freeze = False
        self._back_to_start = False
        self._state = AnimatorState.IDLE

        # Per-run bookkeeping, captured on play().
        self._ticker: ScheduleHandle | None = None
        self._generation = 0
        self._fraction_delta = 0.0
        self._tick_interval = 0.0
        self._frame_skip = True
        self._last_tick: float | None = None

        self._lock = threading.RLock()
        self._flush_lock = threading.Lock()
        self._outbox: deque[Callable[[], None]] = deque()
        self._delivery_pending = False

    def __repr__(self) -> str:
        return (
            f"Animator(duration={self._duration}, state={self._state.value}, "
            f"fraction={self._fraction:.4f}, "
            f"direction={'backward' if self._reverse else 'forward'})"
        )

    # --- Status ---

    @property
    def fraction(self) -> float:
        """Current un-eased progress in [0, 1]."""
        return self._fraction

    @property
    def state(self) -> AnimatorState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is AnimatorState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self._state is AnimatorState.PAUSED

    @property
    def is_going_forward(self) -> bool:
        return not self._reverse

    @property
    def is_going_backward(self) -> bool:
        return self._reverse

    @property
    def scheduler(self) -> BaseScheduler:
        return self._scheduler

    # --- Configuration ---

    @property
    def duration(self) -> float:
        return self._duration

    @duration.setter
    def duration(self, duration: float) -> None:
        """Takes effect on the next play()."""
        _check_duration(duration)
        self._duration = duration

    @property
    def delay(self) -> float:
        return self._delay

    @delay.setter
    def delay(self, delay: float) -> None:
        _check_delay(delay)
        self._delay = delay

    @property
    def easing(self) -> Easing:
        return self._easing

    @easing.setter
    def easing(self, easing: EasingLike) -> None:
        self._easing = resolve_easing(easing)

    @property
    def looping(self) -> bool:
        return self._looping

    @looping.setter
    def looping(self, looping: bool) -> None:
        self._looping = looping

    @property
    def frozen(self) -> bool:
        """Keep fraction at 1 when a non-looping pass ends."""
        return self._freeze

    @frozen.setter
    def frozen(self, frozen: bool) -> None:
        self._freeze = frozen

    @property
    def back_to_start(self) -> bool:
        """When looping backward, stop at 0 instead of wrapping."""
        return self._back_to_start

    @back_to_start.setter
    def back_to_start(self, back_to_start: bool) -> None:
        self._back_to_start = back_to_start

    def loop(self, loop: bool) -> None:
        self.looping = loop

    def freeze(self, freeze: bool) -> None:
        self.frozen = freeze

    @property
    def on_update(self) -> UpdateFn | None:
        return self._on_update

    @on_update.setter
    def on_update(self, fn: UpdateFn | None) -> None:
        self._on_update = fn

    @property
    def on_finish(self) -> FinishFn | None:
        return self._on_finish

    @on_finish.setter
    def on_finish(self, fn: FinishFn | None) -> None:
        self._on_finish = fn

    # --- Controls ---

    def play(self, skip_delay: bool = True) -> None:
        """Play in the current direction. No-op while running."""
        with self._lock:
            self._play(skip_delay)
        self._flush()

    def forward(self, skip_delay: bool = True) -> None:
        """Play forward, restarting if idle or currently going backward."""
        with self._lock:
            if self._reverse or self._ticker is None:
                self._pause()
                self._reverse = False
                self._play(skip_delay)
        self._flush()

    def backward(self, skip_delay: bool = True) -> None:
        """Play backward, restarting if idle or currently going forward."""
        with self._lock:
            if not self._reverse or self._ticker is None:
                self._pause()
                self._reverse = True
                self._play(skip_delay)
        self._flush()

    def revert(self) -> None:
        """Flip direction, keeping the run state as it is."""
        with self._lock:
            self._reverse = not self._reverse
            if self._ticker is not None:
                self._pause()
                self._play(skip_delay=True)
        self._flush()

    def pause(self) -> None:
        """Halt ticking. Resumable with play(). No-op when not running."""
        with self._lock:
            self._pause()

    def cancel(self) -> None:
        """Halt, reset fraction to 0 and deliver one update of 0. No finish."""
        with self._lock:
            self._cancel()
        self._flush()

    def stop(self) -> None:
        """cancel(), then notify on_finish."""
        with self._lock:
            self._stop()
        self._flush()

    # --- Transitions (lock held) ---

    def _play(self, skip_delay: bool) -> None:
        if self._ticker is not None:
            return
        if self._freeze and self._fraction == 1.0:
            self._cancel()

        config = self._scheduler.config
        self._tick_interval = config.tick_interval
        self._frame_skip = config.frame_skip
        self._fraction_delta = 1.0 / (config.fps_target * self._duration)
        self._last_tick = None
        self._generation += 1
        generation = self._generation

        self._state = AnimatorState.RUNNING
        self._ticker = self._scheduler.schedule(
            lambda: self._run_tick(generation),
            0.0 if skip_delay else self._delay,
            self._tick_interval,
        )
        logger.debug(
            "play %s from %.4f (%d fps)",
            "backward" if self._reverse else "forward",
            self._fraction,
            config.fps_target,
        )

    def _pause(self) -> None:
        if self._ticker is None:
            return
        self._ticker.cancel()
        self._ticker = None
        self._state = AnimatorState.PAUSED
        self._last_tick = None
        logger.debug("paused at %.4f", self._fraction)

    def _cancel(self) -> None:
        self._pause()
        self._state = AnimatorState.IDLE
        self._fraction = 0.0
        self._post_update(0.0, guarded=False)

    def _stop(self) -> None:
        self._cancel()
        self._post_finish()

    def _finish_frozen(self) -> None:
        self._pause()
        self._state = AnimatorState.IDLE
        self._fraction = 1.0
        self._post_update(self._easing(1.0), guarded=False)
        self._post_finish()

    # --- Ticking ---

    def _run_tick(self, generation: int) -> None:
        with self._lock:
            # Stale firing from a run that has since been paused.
            if generation != self._generation or self._ticker is None:
                return
            # Consumer is still handling the previous frame; skip this one.
            if self._delivery_pending:
                return
            now = self._scheduler.clock.now()
            self._tick(now)
            if self._ticker is not None:
                self._last_tick = now
        self._flush()

    def _tick(self, now: float) -> None:
        if self._last_tick is None or not self._frame_skip:
            multiplier = 1.0
        else:
            multiplier = (now - self._last_tick) / self._tick_interval

        step = self._fraction_delta * multiplier
        fraction = self._fraction - step if self._reverse else self._fraction + step

        if self._looping:
            if self._back_to_start and fraction <= 0:
                self._stop()
                return
            fraction %= 1.0
            if fraction >= 1.0:
                fraction = 0.0
        elif fraction > 1:
            if self._freeze:
                self._finish_frozen()
            else:
                self._stop()
            logger.debug("finished (frozen=%s)", self._freeze)
            return
        elif fraction < 0:
            self._stop()
            return

        self._fraction = fraction
        self._post_update(self._easing(fraction), guarded=True)

    # --- Delivery ---

    def _post_update(self, value: float, guarded: bool) -> None:
        callback = self._on_update
        if guarded:
            self._delivery_pending = True

        def deliver() -> None:
            try:
                if callback is not None:
                    callback(value)
            finally:
                if guarded:
                    self._delivery_pending = False

        self._outbox.append(deliver)

    def _post_finish(self) -> None:
        callback = self._on_finish
        if callback is not None:
            self._outbox.append(callback)

    def _flush(self) -> None:
        """Hand queued notifications to the dispatcher, in order.

        Only one drain runs at a time. A thread that finds one running,
        including a callback calling back into this animator, leaves its
        notifications for that drain to deliver after the current callback
        returns. A failing callback is logged and does not stop the ticker.
        """
        while True:
            if not self._flush_lock.acquire(blocking=False):
                return
            try:
                while True:
                    with self._lock:
                        if not self._outbox:
                            break
                        fn = self._outbox.popleft()
                    try:
                        self._dispatcher.dispatch(fn)
                    except Exception:
                        logger.exception("animation callback failed")
            finally:
                self._flush_lock.release()
            with self._lock:
                if not self._outbox:
                    return
