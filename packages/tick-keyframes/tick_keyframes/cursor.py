"""SegmentCursor - maps a global eased fraction onto a keyframe segment.

Segment ``i`` runs from keyframe ``i`` to keyframe ``i + 1``; the last
keyframe starts a tail segment that ends at fraction 1 and holds its value.
The cursor remembers the active segment between calls and walks from there,
forward or backward, so sequential playback in either direction costs O(1)
per frame.
"""
from __future__ import annotations

from tick_keyframes.keyframes import Keyframes
from tick_keyframes.types import Unit


class SegmentCursor:
    __slots__ = ("_keyframes", "_index")

    def __init__(self, keyframes: Keyframes) -> None:
        self._keyframes = keyframes
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    def reset(self) -> None:
        self._index = 0

    def resolve(self, fraction: float, duration: float) -> tuple[int, float]:
        """Return ``(segment index, local fraction)`` for a global fraction.

        ``duration`` is the animation's duration in seconds and is only used
        to place keyframes given in seconds.
        """
        if fraction == 0:
            self._index = 0
            return 0, 0.0

        last = len(self._keyframes) - 1
        while self._index < last and self._past(fraction, self._index + 1, duration):
            self._index += 1
        while self._index > 0 and self._before(fraction, self._index, duration):
            self._index -= 1

        previous = self._position(self._index, duration)
        if self._index < last:
            following = self._position(self._index + 1, duration)
        else:
            following = 1.0
        span = following - previous
        if span <= 0:
            # Tail segment reached past 1 by an overshooting easing.
            return self._index, 1.0
        return self._index, (fraction - previous) / span

    def _past(self, fraction: float, index: int, duration: float) -> bool:
        if self._keyframes.unit is Unit.SECOND:
            return fraction * duration > self._keyframes.instant_at(index)
        return fraction > self._keyframes.instant_at(index)

    def _before(self, fraction: float, index: int, duration: float) -> bool:
        if self._keyframes.unit is Unit.SECOND:
            return fraction * duration < self._keyframes.instant_at(index)
        return fraction < self._keyframes.instant_at(index)

    def _position(self, index: int, duration: float) -> float:
        instant = self._keyframes.instant_at(index)
        if self._keyframes.unit is Unit.SECOND:
            return instant / duration
        return instant
