"""Tests for easing and fraction clamping."""
import math

import pytest

from wobble import EASINGS, clamp_fraction, ease_in_out_circ
from wobble.easing import time_fraction


class TestEaseInOutCirc:
    """Test the circular ease-in-out curve."""

    def test_at_zero(self):
        """Should return exactly 0 at t=0."""
        assert ease_in_out_circ(0.0) == 0.0

    def test_at_half(self):
        """Should return exactly 0.5 at t=0.5."""
        assert ease_in_out_circ(0.5) == 0.5

    def test_at_one(self):
        """Should return exactly 1 at t=1."""
        assert ease_in_out_circ(1.0) == 1.0

    def test_at_quarter(self):
        """First arc: (1 - sqrt(1 - 0.25)) / 2 at t=0.25."""
        expected = (1 - math.sqrt(0.75)) / 2
        assert ease_in_out_circ(0.25) == pytest.approx(expected)

    def test_symmetric_about_half(self):
        """ease(t) + ease(1 - t) should equal 1."""
        for t in (0.05, 0.1, 0.3, 0.45):
            assert ease_in_out_circ(t) + ease_in_out_circ(1 - t) == pytest.approx(1.0)

    def test_monotonic_non_decreasing(self):
        """Samples across [0, 1] should never decrease."""
        values = [ease_in_out_circ(i / 1000) for i in range(1001)]
        for prev, cur in zip(values, values[1:]):
            assert cur >= prev

    def test_stays_in_unit_range(self):
        """All outputs for inputs in [0, 1] lie in [0, 1]."""
        for i in range(101):
            result = ease_in_out_circ(i / 100)
            assert 0.0 <= result <= 1.0, f"ease({i / 100}) = {result}"

    def test_rounding_just_past_one_does_not_raise(self):
        """A radicand that rounds negative is guarded, not a math domain error."""
        assert ease_in_out_circ(1.0 + 1e-12) == pytest.approx(1.0)


class TestClampFraction:
    """Test fraction clamping."""

    @pytest.mark.parametrize("value", [-1e9, -1.0, -1e-12, 1.0 + 1e-12, 2.0, 1e9])
    def test_out_of_range_is_clamped(self, value):
        """Far outside inputs land on the nearest bound."""
        result = clamp_fraction(value)
        assert 0.0 <= result <= 1.0
        assert result == (0.0 if value < 0 else 1.0)

    def test_in_range_passes_through(self):
        """Inputs already in [0, 1] are returned as is."""
        for value in (0.0, 0.25, 0.5, 1.0):
            assert clamp_fraction(value) == value


class TestTimeFraction:
    """Test elapsed-time fractions."""

    def test_half_elapsed(self):
        assert time_fraction(375.0, 0.0, 750.0) == 0.5

    def test_overshoot_clamps_to_one(self):
        """A missed frame far past the duration still reads 1."""
        assert time_fraction(5000.0, 0.0, 750.0) == 1.0

    def test_clock_jitter_backwards_clamps_to_zero(self):
        assert time_fraction(90.0, 100.0, 750.0) == 0.0


class TestEasingsDict:
    """Test EASINGS registry."""

    def test_contains_curves(self):
        assert set(EASINGS) == {"linear", "ease_in_out_circ"}

    def test_map_endpoints(self):
        """Every registered curve maps 0 to 0 and 1 to 1."""
        for name, func in EASINGS.items():
            assert func(0.0) == 0.0, f"{name}(0) != 0"
            assert func(1.0) == 1.0, f"{name}(1) != 1"
