"""Per-type interpolation between two values at an eased fraction."""
from __future__ import annotations

import math

from tick_tween.easing import Easing, EasingLike, linear, resolve_easing
from tick_tween.types import Dimension, Point


def _round_half_up(x: float) -> int:
    # round() is banker's rounding; tweens should not wobble at .5.
    return math.floor(x + 0.5)


def interpolate_int(
    start: int, end: int, t: float, easing: EasingLike = linear,
) -> int:
    ease = resolve_easing(easing)
    return _round_half_up((end - start) * ease(t)) + start


def interpolate_float(
    start: float, end: float, t: float, easing: EasingLike = linear,
) -> float:
    ease = resolve_easing(easing)
    return (end - start) * ease(t) + start


def _axis_easings(
    easing: EasingLike, easing_y: EasingLike | None,
) -> tuple[Easing, Easing]:
    ex = resolve_easing(easing)
    ey = ex if easing_y is None else resolve_easing(easing_y)
    return ex, ey


def interpolate_point(
    start: Point,
    end: Point,
    t: float,
    easing: EasingLike = linear,
    easing_y: EasingLike | None = None,
) -> Point:
    """Interpolate x and y independently. ``easing`` covers both axes
    unless ``easing_y`` is given."""
    ex, ey = _axis_easings(easing, easing_y)
    return Point(
        interpolate_int(start.x, end.x, t, ex),
        interpolate_int(start.y, end.y, t, ey),
    )


def interpolate_dim(
    start: Dimension,
    end: Dimension,
    t: float,
    easing: EasingLike = linear,
    easing_height: EasingLike | None = None,
) -> Dimension:
    """Interpolate width and height independently."""
    ew, eh = _axis_easings(easing, easing_height)
    return Dimension(
        interpolate_int(start.width, end.width, t, ew),
        interpolate_int(start.height, end.height, t, eh),
    )
