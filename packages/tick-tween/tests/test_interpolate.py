"""Tests for typed interpolation."""

import pytest
from tick_tween import (
    Dimension,
    Point,
    interpolate_dim,
    interpolate_float,
    interpolate_int,
    interpolate_point,
)


class TestInterpolateInt:
    def test_endpoints(self):
        assert interpolate_int(10, 20, 0.0) == 10
        assert interpolate_int(10, 20, 1.0) == 20

    def test_midpoint(self):
        assert interpolate_int(0, 100, 0.5) == 50

    def test_rounds_half_up(self):
        """0.5 of 255 is 127.5, which rounds up to 128."""
        assert interpolate_int(0, 255, 0.5) == 128
        assert interpolate_int(0, 5, 0.5) == 3

    def test_descending_range(self):
        assert interpolate_int(100, 0, 0.25) == 75

    def test_named_easing(self):
        # ease_in is t*t: 0.5 -> 0.25
        assert interpolate_int(0, 100, 0.5, "ease_in") == 25

    def test_custom_easing(self):
        assert interpolate_int(0, 10, 0.3, lambda t: 1.0) == 10

    def test_same_endpoints_hold_value(self):
        for t in (0.0, 0.3, 0.9, 1.0):
            assert interpolate_int(42, 42, t, "ease_out_elastic") == 42


class TestInterpolateFloat:
    def test_no_rounding(self):
        assert interpolate_float(0.0, 1.0, 0.25) == 0.25

    def test_negative_range(self):
        assert interpolate_float(-1.0, 1.0, 0.75) == pytest.approx(0.5)

    def test_eased(self):
        assert interpolate_float(0.0, 10.0, 0.5, "ease_out") == pytest.approx(7.5)

    def test_unknown_easing_raises(self):
        with pytest.raises(ValueError, match="Unknown easing"):
            interpolate_float(0.0, 1.0, 0.5, "nope")


class TestInterpolatePoint:
    def test_both_axes_share_easing_by_default(self):
        result = interpolate_point(Point(0, 0), Point(100, 200), 0.5, "ease_in")
        assert result == Point(25, 50)

    def test_independent_axis_easing(self):
        result = interpolate_point(
            Point(0, 0), Point(100, 100), 0.5, "linear", "ease_in",
        )
        assert result == Point(50, 25)

    def test_returns_point(self):
        assert isinstance(interpolate_point(Point(1, 2), Point(3, 4), 0.0), Point)


class TestInterpolateDim:
    def test_linear(self):
        result = interpolate_dim(Dimension(100, 50), Dimension(200, 150), 0.5)
        assert result == Dimension(150, 100)

    def test_independent_axis_easing(self):
        result = interpolate_dim(
            Dimension(0, 0), Dimension(100, 100), 0.5, "ease_out", "linear",
        )
        assert result == Dimension(75, 50)


class TestValueTypes:
    def test_point_text(self):
        assert str(Point(3, -4)) == "point(3, -4)"

    def test_dimension_text(self):
        assert str(Dimension(640, 480)) == "dim(640, 480)"

    def test_values_are_immutable_and_hashable(self):
        p = Point(1, 2)
        with pytest.raises(Exception):
            p.x = 5  # type: ignore[misc]
        assert {p, Point(1, 2)} == {Point(1, 2)}
