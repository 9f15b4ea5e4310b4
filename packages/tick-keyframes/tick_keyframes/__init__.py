"""tick-keyframes - Keyframe collections, parsing and keyframed animations."""
from __future__ import annotations

from tick_keyframes.animation import Animation
from tick_keyframes.cursor import SegmentCursor
from tick_keyframes.keyframes import Keyframes
from tick_keyframes.parser import parse_keyframes
from tick_keyframes.types import (
    Keyframe,
    KeyframeError,
    KeyframeFormatError,
    KeyframeInstantError,
    KeyframeTypeError,
    KeyframeValue,
    Unit,
    ValueType,
)

__all__ = [
    "Animation",
    "SegmentCursor",
    "Keyframes",
    "parse_keyframes",
    "Keyframe",
    "KeyframeError",
    "KeyframeFormatError",
    "KeyframeInstantError",
    "KeyframeTypeError",
    "KeyframeValue",
    "Unit",
    "ValueType",
]
