"""Keyframes - an ordered set of (instant, value) pairs of one type and unit."""
from __future__ import annotations

import bisect
from typing import Iterator

from tick_tween import Dimension, Point

from tick_keyframes.types import (
    Keyframe,
    KeyframeFormatError,
    KeyframeInstantError,
    KeyframeTypeError,
    KeyframeValue,
    Unit,
    ValueType,
)


class Keyframes:
    """Keyframes sorted by instant, all sharing one ``ValueType`` and ``Unit``.

    Build one with ``add()`` or with ``Keyframes.parse(text)``. A collection
    is only usable by an animation once it holds exactly one keyframe at
    instant 0 (see ``validate()``). Do not modify a collection while an
    animation that uses it is running.
    """

    def __init__(self, value_type: ValueType, unit: Unit) -> None:
        self._value_type = value_type
        self._unit = unit
        self._frames: list[Keyframe] = []

    @classmethod
    def parse(cls, text: str) -> Keyframes:
        """Parse keyframe text such as ``"{0%: 0; 50%: 255; 100%: 0}"``."""
        from tick_keyframes.parser import parse_keyframes

        return parse_keyframes(text)

    @property
    def value_type(self) -> ValueType:
        return self._value_type

    @property
    def unit(self) -> Unit:
        return self._unit

    def add(self, instant: float, value: KeyframeValue) -> None:
        """Insert a keyframe, keeping the collection sorted by instant."""
        if self._value_type is ValueType.FLOAT and ValueType.INT.accepts(value):
            value = float(value)
        if not self._value_type.accepts(value):
            raise KeyframeFormatError(
                f"Type mismatch: all keyframes must hold {self._value_type.value}, "
                f"got {type(value).__name__}: {value!r}"
            )
        if not self._unit.check(instant):
            raise KeyframeInstantError(
                f"Instant out of range {self._unit.range_text()}: "
                f"{_format_instant(instant)}{self._unit.value}"
            )
        if instant == 0 and self._frames and self._frames[0].instant == 0:
            raise KeyframeInstantError("Duplicate initial instant (0 is already set)")
        bisect.insort(self._frames, Keyframe(float(instant), value), key=_instant_key)

    def validate(self) -> None:
        """Raise KeyframeInstantError unless there is exactly one keyframe at 0."""
        if not self._frames or self._frames[0].instant != 0:
            raise KeyframeInstantError(
                "Missing initial instant (add a keyframe at 0% or 0s)"
            )
        if len(self._frames) > 1 and self._frames[1].instant == 0:
            raise KeyframeInstantError("Duplicate initial instant (0 is already set)")

    # --- Lookup ---

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Keyframe]:
        return iter(self._frames)

    def __getitem__(self, index: int) -> Keyframe:
        return self._frames[index]

    def instant_at(self, index: int) -> float:
        """Instant of a keyframe. Percentages come back as a fraction of 1."""
        instant = self._frames[index].instant
        if self._unit is Unit.PERCENT:
            return instant / 100
        return instant

    def value_at(self, index: int) -> KeyframeValue:
        return self._frames[index].value

    def int_at(self, index: int) -> int:
        self._require(ValueType.INT)
        return self._frames[index].value  # type: ignore[return-value]

    def float_at(self, index: int) -> float:
        self._require(ValueType.FLOAT)
        return self._frames[index].value  # type: ignore[return-value]

    def point_at(self, index: int) -> Point:
        self._require(ValueType.POINT)
        return self._frames[index].value  # type: ignore[return-value]

    def dim_at(self, index: int) -> Dimension:
        self._require(ValueType.DIM)
        return self._frames[index].value  # type: ignore[return-value]

    def _require(self, value_type: ValueType) -> None:
        if self._value_type is not value_type:
            raise KeyframeTypeError(
                f"Keyframes hold {self._value_type.value}, "
                f"not {value_type.value}"
            )

    # --- Text ---

    def __str__(self) -> str:
        """Render in the parse grammar; ``Keyframes.parse(str(kf)) == kf``."""
        clauses = [
            f"{_format_instant(f.instant)}{self._unit.value}: {_format_value(f.value)}"
            for f in self._frames
        ]
        return "{" + "; ".join(clauses) + "}"

    def __repr__(self) -> str:
        return f"Keyframes({self._value_type.value}, {self._unit.name}, {self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Keyframes):
            return NotImplemented
        return (
            self._value_type is other._value_type
            and self._unit is other._unit
            and self._frames == other._frames
        )


def _instant_key(frame: Keyframe) -> float:
    return frame.instant


def _format_instant(instant: float) -> str:
    if float(instant).is_integer():
        return str(int(instant))
    return repr(float(instant))


def _format_value(value: KeyframeValue) -> str:
    if isinstance(value, float):
        text = repr(value)
        # The grammar recognises reals by their decimal point.
        if "." not in text:
            text = text.replace("e", ".0e")
        return text
    return str(value)
