"""Easing functions for tween interpolation.

Every function maps a progress value in [0, 1] to an eased value with
``f(0) == 0`` and ``f(1) == 1``. Back and elastic curves overshoot the unit
range in between. Formulas follow the usual easings.net definitions.
"""
from __future__ import annotations

import math
from typing import Callable, Union

Easing = Callable[[float], float]
EasingLike = Union[str, Easing]

_BACK_C1 = 1.70158
_BACK_C2 = _BACK_C1 * 1.525
_BACK_C3 = _BACK_C1 + 1
_ELASTIC_C4 = (2 * math.pi) / 3
_ELASTIC_C5 = (2 * math.pi) / 4.5
_BOUNCE_N1 = 7.5625
_BOUNCE_D1 = 2.75


def linear(t: float) -> float:
    return t


# --- Sine ---

def ease_in_sine(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


# --- Polynomial ---

def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    return t ** 3


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t ** 3
    return 1 - (-2 * t + 2) ** 3 / 2


def ease_in_quart(t: float) -> float:
    return t ** 4


def ease_out_quart(t: float) -> float:
    return 1 - (1 - t) ** 4


def ease_in_out_quart(t: float) -> float:
    if t < 0.5:
        return 8 * t ** 4
    return 1 - (-2 * t + 2) ** 4 / 2


def ease_in_quint(t: float) -> float:
    return t ** 5


def ease_out_quint(t: float) -> float:
    return 1 - (1 - t) ** 5


def ease_in_out_quint(t: float) -> float:
    if t < 0.5:
        return 16 * t ** 5
    return 1 - (-2 * t + 2) ** 5 / 2


# --- Exponential ---
# The endpoints are special-cased: 2 ** -10 is not 0.

def ease_in_expo(t: float) -> float:
    if t == 0:
        return 0.0
    return 2 ** (10 * t - 10)


def ease_out_expo(t: float) -> float:
    if t == 1:
        return 1.0
    return 1 - 2 ** (-10 * t)


def ease_in_out_expo(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    if t < 0.5:
        return 2 ** (20 * t - 10) / 2
    return (2 - 2 ** (-20 * t + 10)) / 2


# --- Circular ---

def ease_in_circ(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def ease_out_circ(t: float) -> float:
    return math.sqrt(1 - (t - 1) ** 2)


def ease_in_out_circ(t: float) -> float:
    if t < 0.5:
        return (1 - math.sqrt(1 - (2 * t) ** 2)) / 2
    return (math.sqrt(1 - (-2 * t + 2) ** 2) + 1) / 2


# --- Back (overshoot) ---

def ease_in_back(t: float) -> float:
    return _BACK_C3 * t ** 3 - _BACK_C1 * t * t


def ease_out_back(t: float) -> float:
    u = t - 1
    return 1 + _BACK_C3 * u ** 3 + _BACK_C1 * u * u


def ease_in_out_back(t: float) -> float:
    if t < 0.5:
        u = 2 * t
        return (u * u * ((_BACK_C2 + 1) * u - _BACK_C2)) / 2
    u = 2 * t - 2
    return (u * u * ((_BACK_C2 + 1) * u + _BACK_C2) + 2) / 2


# --- Elastic ---

def ease_in_elastic(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    return -(2 ** (10 * t - 10)) * math.sin((t * 10 - 10.75) * _ELASTIC_C4)


def ease_out_elastic(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    return 2 ** (-10 * t) * math.sin((t * 10 - 0.75) * _ELASTIC_C4) + 1


def ease_in_out_elastic(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    s = math.sin((20 * t - 11.125) * _ELASTIC_C5)
    if t < 0.5:
        return -(2 ** (20 * t - 10) * s) / 2
    return (2 ** (-20 * t + 10) * s) / 2 + 1


# --- Bounce ---
# Only the out curve is piecewise; in and in-out are reflections of it.

def ease_out_bounce(t: float) -> float:
    if t < 1 / _BOUNCE_D1:
        return _BOUNCE_N1 * t * t
    if t < 2 / _BOUNCE_D1:
        t -= 1.5 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.75
    if t < 2.5 / _BOUNCE_D1:
        t -= 2.25 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.9375
    t -= 2.625 / _BOUNCE_D1
    return _BOUNCE_N1 * t * t + 0.984375


def ease_in_bounce(t: float) -> float:
    return 1 - ease_out_bounce(1 - t)


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return (1 - ease_out_bounce(1 - 2 * t)) / 2
    return (1 + ease_out_bounce(2 * t - 1)) / 2


EASINGS: dict[str, Easing] = {
    "linear": linear,
    # Short names kept for the quadratic family.
    "ease_in": ease_in_quad,
    "ease_out": ease_out_quad,
    "ease_in_out": ease_in_out_quad,
    "ease_in_sine": ease_in_sine,
    "ease_out_sine": ease_out_sine,
    "ease_in_out_sine": ease_in_out_sine,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_in_quart": ease_in_quart,
    "ease_out_quart": ease_out_quart,
    "ease_in_out_quart": ease_in_out_quart,
    "ease_in_quint": ease_in_quint,
    "ease_out_quint": ease_out_quint,
    "ease_in_out_quint": ease_in_out_quint,
    "ease_in_expo": ease_in_expo,
    "ease_out_expo": ease_out_expo,
    "ease_in_out_expo": ease_in_out_expo,
    "ease_in_circ": ease_in_circ,
    "ease_out_circ": ease_out_circ,
    "ease_in_out_circ": ease_in_out_circ,
    "ease_in_back": ease_in_back,
    "ease_out_back": ease_out_back,
    "ease_in_out_back": ease_in_out_back,
    "ease_in_elastic": ease_in_elastic,
    "ease_out_elastic": ease_out_elastic,
    "ease_in_out_elastic": ease_in_out_elastic,
    "ease_in_bounce": ease_in_bounce,
    "ease_out_bounce": ease_out_bounce,
    "ease_in_out_bounce": ease_in_out_bounce,
}


def resolve_easing(easing: EasingLike) -> Easing:
    """Look up a catalog name, or pass a user-supplied function through.

    User functions are trusted to map 0 to 0 and 1 to 1; nothing checks it.
    """
    if callable(easing):
        return easing
    try:
        return EASINGS[easing]
    except KeyError:
        raise ValueError(f"Unknown easing {easing!r}") from None
