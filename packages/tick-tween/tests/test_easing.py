"""Tests for easing functions."""

import math

import pytest
from tick_tween import EASINGS, resolve_easing
from tick_tween.easing import (
    ease_in_back,
    ease_in_bounce,
    ease_in_expo,
    ease_in_out_bounce,
    ease_in_out_expo,
    ease_in_out_sine,
    ease_out_bounce,
    ease_out_expo,
)

# Curves that overshoot [0, 1] between the endpoints.
_OVERSHOOTING = {
    "ease_in_back",
    "ease_out_back",
    "ease_in_out_back",
    "ease_in_elastic",
    "ease_out_elastic",
    "ease_in_out_elastic",
}

_SAMPLES = [i / 20 for i in range(21)]


class TestLinearEasing:
    @pytest.mark.parametrize("t", [0.0, 0.3, 0.5, 1.0])
    def test_identity(self, t):
        assert EASINGS["linear"](t) == t

    def test_resolves_by_name(self):
        assert resolve_easing("linear") is EASINGS["linear"]


class TestQuadraticEasing:
    """The short names alias the quadratic family."""

    def test_ease_in_at_half(self):
        """Ease-in easing should return 0.25 at t=0.5 (t*t)."""
        assert EASINGS["ease_in"](0.5) == 0.25

    def test_ease_out_at_half(self):
        """Ease-out easing should return 0.75 at t=0.5 (t*(2-t))."""
        assert EASINGS["ease_out"](0.5) == 0.75

    def test_ease_in_out_at_quarter(self):
        """Ease-in-out easing should return 0.125 at t=0.25 (2*t*t)."""
        assert EASINGS["ease_in_out"](0.25) == 0.125

    def test_ease_in_out_at_three_quarters(self):
        result = EASINGS["ease_in_out"](0.75)
        assert abs(result - 0.875) < 1e-9

    def test_aliases_match_full_names(self):
        assert EASINGS["ease_in"] is EASINGS["ease_in_quad"]
        assert EASINGS["ease_out"] is EASINGS["ease_out_quad"]
        assert EASINGS["ease_in_out"] is EASINGS["ease_in_out_quad"]


class TestPolynomialMidpoints:
    def test_in_curves_at_half(self):
        assert EASINGS["ease_in_cubic"](0.5) == pytest.approx(0.125)
        assert EASINGS["ease_in_quart"](0.5) == pytest.approx(0.0625)
        assert EASINGS["ease_in_quint"](0.5) == pytest.approx(0.03125)

    def test_out_curves_mirror_in_curves(self):
        for family in ("quad", "cubic", "quart", "quint", "sine", "circ"):
            ease_in = EASINGS[f"ease_in_{family}"]
            ease_out = EASINGS[f"ease_out_{family}"]
            for t in _SAMPLES:
                assert ease_out(t) == pytest.approx(1 - ease_in(1 - t), abs=1e-9), family

    def test_in_out_curves_pass_through_half(self):
        for family in ("quad", "cubic", "quart", "quint", "sine", "expo", "circ", "back", "bounce"):
            assert EASINGS[f"ease_in_out_{family}"](0.5) == pytest.approx(0.5), family


class TestSpecialCases:
    def test_expo_endpoints_are_exact(self):
        assert ease_in_expo(0.0) == 0.0
        assert ease_out_expo(1.0) == 1.0
        assert ease_in_out_expo(0.0) == 0.0
        assert ease_in_out_expo(1.0) == 1.0

    def test_in_out_sine_starts_at_zero(self):
        assert ease_in_out_sine(0.0) == pytest.approx(0.0)
        assert ease_in_out_sine(1.0) == pytest.approx(1.0)

    def test_back_dips_below_zero(self):
        assert ease_in_back(0.2) < 0

    def test_elastic_overshoots(self):
        values = [EASINGS["ease_out_elastic"](t) for t in _SAMPLES]
        assert max(values) > 1.0


class TestBounce:
    def test_out_bounce_segment_boundaries(self):
        """The out curve touches the four landing heights at each segment edge."""
        assert ease_out_bounce(1 / 2.75) == pytest.approx(1.0)
        assert ease_out_bounce(2 / 2.75) == pytest.approx(1.0)
        assert ease_out_bounce(2.5 / 2.75) == pytest.approx(1.0)
        assert ease_out_bounce(1.5 / 2.75) == pytest.approx(0.75)

    def test_in_bounce_is_reflected_out_bounce(self):
        """ease_in_bounce(x) == 1 - ease_out_bounce(1 - x)."""
        for t in _SAMPLES:
            assert ease_in_bounce(t) == pytest.approx(1 - ease_out_bounce(1 - t))

    def test_in_out_bounce_halves(self):
        for t in _SAMPLES:
            if t < 0.5:
                expected = (1 - ease_out_bounce(1 - 2 * t)) / 2
            else:
                expected = (1 + ease_out_bounce(2 * t - 1)) / 2
            assert ease_in_out_bounce(t) == pytest.approx(expected)


class TestEasingsDict:
    """Test EASINGS dictionary completeness."""

    def test_easings_contains_every_family(self):
        expected = {"linear", "ease_in", "ease_out", "ease_in_out"}
        for family in ("sine", "quad", "cubic", "quart", "quint", "expo",
                       "circ", "back", "elastic", "bounce"):
            for kind in ("in", "out", "in_out"):
                expected.add(f"ease_{kind}_{family}")
        assert set(EASINGS.keys()) == expected

    def test_easings_values_are_callable(self):
        """All EASINGS values should be callable functions."""
        for name, func in EASINGS.items():
            assert callable(func), f"{name} is not callable"

    def test_easings_map_zero_to_zero(self):
        """All easing functions should map 0 to 0."""
        for name, func in EASINGS.items():
            assert abs(func(0.0)) < 1e-5, f"{name}(0) != 0"

    def test_easings_map_one_to_one(self):
        """All easing functions should map 1 to 1."""
        for name, func in EASINGS.items():
            assert abs(func(1.0) - 1.0) < 1e-5, f"{name}(1) != 1"

    def test_non_overshooting_easings_stay_in_unit_range(self):
        """Every curve except back and elastic maps [0,1] into [0,1]."""
        for name, func in EASINGS.items():
            if name in _OVERSHOOTING:
                continue
            for t in _SAMPLES:
                result = func(t)
                assert -1e-9 <= result <= 1.0 + 1e-9, f"{name}({t}) = {result}"

    def test_easings_are_finite(self):
        for name, func in EASINGS.items():
            for t in _SAMPLES:
                assert math.isfinite(func(t)), name


class TestResolveEasing:
    def test_resolve_by_name(self):
        assert resolve_easing("ease_out_cubic") is EASINGS["ease_out_cubic"]

    def test_custom_function_passes_through(self):
        def custom(t):
            return t ** 0.5

        assert resolve_easing(custom) is custom

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown easing 'wobble'"):
            resolve_easing("wobble")
