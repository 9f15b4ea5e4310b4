"""Keyframe data types and errors."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from tick_tween import Dimension, Point

KeyframeValue = Union[int, float, Point, Dimension]


class Unit(enum.Enum):
    """How keyframe instants are expressed.

    PERCENT instants are a percentage of the animation's duration.
    SECOND instants are absolute seconds from the start.
    """

    PERCENT = "%"
    SECOND = "s"

    def check(self, instant: float) -> bool:
        if self is Unit.PERCENT:
            return 0 <= instant <= 100
        return instant >= 0

    def range_text(self) -> str:
        if self is Unit.PERCENT:
            return "(0 <= x <= 100)"
        return "(x >= 0)"


class ValueType(enum.Enum):
    INT = "int"
    FLOAT = "float"
    POINT = "point"
    DIM = "dim"

    def accepts(self, value: object) -> bool:
        if self is ValueType.INT:
            return isinstance(value, int) and not isinstance(value, bool)
        if self is ValueType.FLOAT:
            return isinstance(value, float)
        if self is ValueType.POINT:
            return isinstance(value, Point)
        return isinstance(value, Dimension)


@dataclass(frozen=True)
class Keyframe:
    """A value pinned to an instant. ``instant`` is in the collection's unit."""

    instant: float
    value: KeyframeValue


class KeyframeError(ValueError):
    """Base class for invalid keyframe definitions."""


class KeyframeFormatError(KeyframeError):
    """Malformed keyframe text, or a value/unit that does not match the collection."""


class KeyframeInstantError(KeyframeError):
    """An instant is out of range for its unit, or the instant-0 keyframe is missing."""


class KeyframeTypeError(TypeError):
    """A typed accessor was called for a type the collection does not hold."""
