"""Animation - an Animator that delivers keyframed values instead of fractions.

Every eased fraction the animator produces is resolved to a keyframe segment,
re-eased with the segment easing and interpolated between the segment's two
keyframe values. The result (an int, float, Point or Dimension, matching the
keyframes) goes to ``on_update``.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Union

from tick_animator import Animator, AnimatorState, FinishFn
from tick_clock import BaseScheduler, Dispatcher
from tick_tween import (
    Easing,
    EasingLike,
    interpolate_dim,
    interpolate_float,
    interpolate_int,
    interpolate_point,
    resolve_easing,
)

from tick_keyframes.cursor import SegmentCursor
from tick_keyframes.keyframes import Keyframes
from tick_keyframes.types import KeyframeValue, ValueType

logger = logging.getLogger(__name__)

ValueFn = Callable[[Any], None]
SegmentEasing = Union[EasingLike, tuple[EasingLike, EasingLike]]


def _resolve_segment_easing(easing: SegmentEasing) -> tuple[Easing, Easing]:
    if isinstance(easing, tuple):
        if len(easing) != 2:
            raise ValueError(
                f"segment_easing pair must have 2 entries, got {len(easing)}"
            )
        return resolve_easing(easing[0]), resolve_easing(easing[1])
    resolved = resolve_easing(easing)
    return resolved, resolved


class Animation:
    """Plays ``keyframes`` over ``duration`` seconds.

    Args:
        keyframes: A ``Keyframes`` collection or keyframe text to parse.
        duration: Seconds for one pass.
        delay: Seconds to wait when played with ``skip_delay=False``.
        loop: Wrap around instead of finishing.
        easing: Applied to the whole animation's progress.
        segment_easing: Applied within each segment. For Point and Dimension
            keyframes this may be an ``(x, y)`` or ``(width, height)`` pair.
        on_update: Receives the interpolated value after every tick.
        on_finish: Called when a pass ends or ``stop()`` is called.
        scheduler: Passed through to the underlying ``Animator``.
        dispatcher: Passed through to the underlying ``Animator``.
    """

    def __init__(
        self,
        keyframes: Keyframes | str,
        duration: float,
        delay: float = 0.0,
        loop: bool = False,
        easing: EasingLike = "linear",
        *,
        segment_easing: SegmentEasing = "linear",
        on_update: ValueFn | None = None,
        on_finish: FinishFn | None = None,
        scheduler: BaseScheduler | None = None,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        if isinstance(keyframes, str):
            keyframes = Keyframes.parse(keyframes)
        else:
            keyframes.validate()
        self._keyframes = keyframes
        self._cursor = SegmentCursor(keyframes)
        self._segment_easing = _resolve_segment_easing(segment_easing)
        self._on_update = on_update
        self._on_finish = on_finish
        self._value: KeyframeValue = keyframes.value_at(0)
        self._animator = Animator(
            duration,
            delay,
            loop,
            easing,
            on_update=self._handle_update,
            on_finish=self._handle_finish,
            scheduler=scheduler,
            dispatcher=dispatcher,
        )

    def __repr__(self) -> str:
        return (
            f"Animation({len(self._keyframes)} {self._keyframes.value_type.value} "
            f"keyframes, duration={self.duration}, state={self.state.value})"
        )

    # --- Values ---

    @property
    def keyframes(self) -> Keyframes:
        return self._keyframes

    @property
    def animator(self) -> Animator:
        return self._animator

    @property
    def value(self) -> KeyframeValue:
        """The last value delivered to ``on_update`` (the first keyframe's
        value before anything has played)."""
        return self._value

    @property
    def segment_index(self) -> int:
        return self._cursor.index

    def value_at(self, fraction: float) -> KeyframeValue:
        """Value for an eased fraction, without touching playback state."""
        index, local = SegmentCursor(self._keyframes).resolve(fraction, self.duration)
        return self._interpolate(index, local)

    @property
    def segment_easing(self) -> tuple[Easing, Easing]:
        return self._segment_easing

    @segment_easing.setter
    def segment_easing(self, easing: SegmentEasing) -> None:
        self._segment_easing = _resolve_segment_easing(easing)

    @property
    def on_update(self) -> ValueFn | None:
        return self._on_update

    @on_update.setter
    def on_update(self, fn: ValueFn | None) -> None:
        self._on_update = fn

    @property
    def on_finish(self) -> FinishFn | None:
        return self._on_finish

    @on_finish.setter
    def on_finish(self, fn: FinishFn | None) -> None:
        self._on_finish = fn

    def then(self, next_animation: Animation) -> Animation:
        """Play ``next_animation`` when this one finishes. Returns it."""
        previous = self._on_finish

        def chained() -> None:
            if previous is not None:
                previous()
            next_animation.play()

        self._on_finish = chained
        return next_animation

    def _handle_update(self, fraction: float) -> None:
        index, local = self._cursor.resolve(fraction, self._animator.duration)
        value = self._interpolate(index, local)
        self._value = value
        if self._on_update is not None:
            self._on_update(value)

    def _handle_finish(self) -> None:
        logger.debug("animation finished at %s", self._value)
        if self._on_finish is not None:
            self._on_finish()

    def _interpolate(self, index: int, local: float) -> KeyframeValue:
        kf = self._keyframes
        start = kf.value_at(index)
        end = kf.value_at(index + 1) if index + 1 < len(kf) else start
        ex, ey = self._segment_easing

        value_type = kf.value_type
        if value_type is ValueType.INT:
            return interpolate_int(start, end, local, ex)
        if value_type is ValueType.FLOAT:
            return interpolate_float(start, end, local, ex)
        if value_type is ValueType.POINT:
            return interpolate_point(start, end, local, ex, ey)
        return interpolate_dim(start, end, local, ex, ey)

    # --- Status ---

    @property
    def fraction(self) -> float:
        return self._animator.fraction

    @property
    def state(self) -> AnimatorState:
        return self._animator.state

    @property
    def is_running(self) -> bool:
        return self._animator.is_running

    @property
    def is_paused(self) -> bool:
        return self._animator.is_paused

    @property
    def is_going_forward(self) -> bool:
        return self._animator.is_going_forward

    @property
    def is_going_backward(self) -> bool:
        return self._animator.is_going_backward

    # --- Configuration ---

    @property
    def duration(self) -> float:
        return self._animator.duration

    @duration.setter
    def duration(self, duration: float) -> None:
        self._animator.duration = duration

    @property
    def delay(self) -> float:
        return self._animator.delay

    @delay.setter
    def delay(self, delay: float) -> None:
        self._animator.delay = delay

    @property
    def easing(self) -> Easing:
        return self._animator.easing

    @easing.setter
    def easing(self, easing: EasingLike) -> None:
        self._animator.easing = easing

    @property
    def looping(self) -> bool:
        return self._animator.looping

    @looping.setter
    def looping(self, looping: bool) -> None:
        self._animator.looping = looping

    @property
    def frozen(self) -> bool:
        return self._animator.frozen

    @frozen.setter
    def frozen(self, frozen: bool) -> None:
        self._animator.frozen = frozen

    @property
    def back_to_start(self) -> bool:
        return self._animator.back_to_start

    @back_to_start.setter
    def back_to_start(self, back_to_start: bool) -> None:
        self._animator.back_to_start = back_to_start

    def loop(self, loop: bool) -> None:
        self._animator.loop(loop)

    def freeze(self, freeze: bool) -> None:
        self._animator.freeze(freeze)

    # --- Controls ---

    def play(self, skip_delay: bool = True) -> None:
        self._animator.play(skip_delay)

    def forward(self, skip_delay: bool = True) -> None:
        self._animator.forward(skip_delay)

    def backward(self, skip_delay: bool = True) -> None:
        self._animator.backward(skip_delay)

    def revert(self) -> None:
        self._animator.revert()

    def pause(self) -> None:
        self._animator.pause()

    def cancel(self) -> None:
        self._animator.cancel()

    def stop(self) -> None:
        self._animator.stop()
