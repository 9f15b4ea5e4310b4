"""tick-tween - Easing curves and typed value interpolation."""
from __future__ import annotations

from tick_tween.easing import EASINGS, Easing, EasingLike, resolve_easing
from tick_tween.interpolate import (
    interpolate_dim,
    interpolate_float,
    interpolate_int,
    interpolate_point,
)
from tick_tween.types import Dimension, Point

__all__ = [
    "EASINGS",
    "Easing",
    "EasingLike",
    "resolve_easing",
    "Point",
    "Dimension",
    "interpolate_int",
    "interpolate_float",
    "interpolate_point",
    "interpolate_dim",
]
