"""Keyframe text parser.

Grammar::

    "{" instant ":" value (";" instant ":" value)* [";"] "}"

Instants are a number followed by ``%`` or ``s``; the first keyframe must
name a unit and later ones may omit it. Values are an integer literal, a
real literal (has a decimal point), ``point(x, y)`` or ``dim(w, h)``. The
first value decides the type of the whole collection; an integer in a
collection of reals is accepted as a real. Whitespace anywhere is ignored
and the surrounding braces are optional.
"""
from __future__ import annotations

import logging
import re

from tick_tween import Dimension, Point

from tick_keyframes.keyframes import Keyframes
from tick_keyframes.types import (
    KeyframeFormatError,
    KeyframeValue,
    Unit,
    ValueType,
)

logger = logging.getLogger(__name__)

_INSTANT_RE = re.compile(r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+))\s*(%|s)?$")
_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_PAIR_RE = re.compile(r"^(point|dim)\s*\(\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*\)$")


def parse_keyframes(text: str) -> Keyframes:
    """Parse keyframe text into a validated ``Keyframes`` collection.

    Raises:
        KeyframeFormatError: malformed text, or a value type or unit that
            differs from the first keyframe's.
        KeyframeInstantError: an instant out of range, or no keyframe at 0.
    """
    if text is None or not text.strip():
        raise KeyframeFormatError("Keyframe text cannot be blank")

    keyframes: Keyframes | None = None
    for clause in _strip_braces(text).split(";"):
        clause = clause.strip()
        if not clause:
            continue
        parts = clause.split(":")
        if len(parts) != 2:
            raise KeyframeFormatError(
                f"Invalid keyframe {clause!r}: expected 'instant: value'"
            )
        raw_instant, raw_value = parts[0].strip(), parts[1].strip()

        instant, unit = _parse_instant(raw_instant)
        value, value_type = _parse_value(raw_value)

        if keyframes is None:
            if unit is None:
                raise KeyframeFormatError(
                    f"Missing unit on first instant {raw_instant!r} (use % or s)"
                )
            keyframes = Keyframes(value_type, unit)
        elif unit is not None and unit is not keyframes.unit:
            raise KeyframeFormatError(
                f"Unit mismatch: expected {keyframes.unit.value}, "
                f"got {unit.value} in {clause!r}"
            )

        if keyframes.value_type is ValueType.FLOAT and value_type is ValueType.INT:
            value = float(value)  # type: ignore[arg-type]
        elif value_type is not keyframes.value_type:
            raise KeyframeFormatError(
                f"Type mismatch: expected {keyframes.value_type.value}, "
                f"got {value_type.value} in {clause!r}"
            )
        keyframes.add(instant, value)

    if keyframes is None:
        raise KeyframeFormatError("No keyframes found")
    keyframes.validate()
    logger.debug(
        "parsed %d %s keyframes (%s)",
        len(keyframes),
        keyframes.value_type.value,
        keyframes.unit.name.lower(),
    )
    return keyframes


def _strip_braces(text: str) -> str:
    opens, closes = text.count("{"), text.count("}")
    if opens == 0 and closes == 0:
        return text
    if opens > closes:
        raise KeyframeFormatError("Unclosed brace in keyframe text")
    if closes > opens:
        raise KeyframeFormatError("Unopened brace in keyframe text")
    if opens > 1:
        raise KeyframeFormatError("Nested or repeated braces in keyframe text")

    start, end = text.index("{"), text.index("}")
    if end < start:
        raise KeyframeFormatError("Unopened brace in keyframe text")
    if text[:start].strip() or text[end + 1:].strip():
        raise KeyframeFormatError("Unexpected text outside braces")
    return text[start + 1:end]


def _parse_instant(raw: str) -> tuple[float, Unit | None]:
    match = _INSTANT_RE.match(raw)
    if match is None:
        raise KeyframeFormatError(f"Invalid instant {raw!r}")
    number, symbol = match.groups()
    unit = Unit(symbol) if symbol else None
    return float(number), unit


def _parse_value(raw: str) -> tuple[KeyframeValue, ValueType]:
    if _INT_RE.match(raw):
        return int(raw), ValueType.INT
    if _FLOAT_RE.match(raw):
        return float(raw), ValueType.FLOAT
    match = _PAIR_RE.match(raw)
    if match is not None:
        kind, first, second = match.groups()
        if kind == "point":
            return Point(int(first), int(second)), ValueType.POINT
        return Dimension(int(first), int(second)), ValueType.DIM
    raise KeyframeFormatError(f"Invalid value {raw!r}")
