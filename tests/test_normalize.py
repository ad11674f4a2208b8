"""Tests for score normalization."""

import pytest

from fatigue_sense.calibration import CalibrationBounds
from fatigue_sense.scoring.normalize import normalize, normalize_with, round_half_up, round_half_up_tenths


class TestNormalize:
    def test_endpoints(self):
        assert normalize(2, 2, 10) == 0
        assert normalize(10, 2, 10) == 100

    def test_endpoints_inverted(self):
        assert normalize(0, 0, 140, invert=True) == 100
        assert normalize(140, 0, 140, invert=True) == 0

    def test_midpoint(self):
        assert normalize(6, 2, 10) == 50

    def test_out_of_range_is_clamped(self):
        assert normalize(-50, 0, 10) == 0
        assert normalize(1e9, 0, 10) == 100
        assert normalize(-50, 0, 10, invert=True) == 100
        assert normalize(1e9, 0, 10, invert=True) == 0

    def test_zero_width_range(self):
        assert normalize(5, 5, 5) == 0
        assert normalize(7, 5, 5) == 0
        assert normalize(7, 5, 5, invert=True) == 100

    def test_halves_round_up(self):
        # 1/8 of the range is exactly 12.5
        assert normalize(1, 0, 8) == 13

    @pytest.mark.parametrize("invert", [False, True])
    def test_monotonic_and_bounded(self, invert):
        values = [v / 4 for v in range(-40, 81)]  # -10 .. 20
        scores = [normalize(v, 0, 10, invert=invert) for v in values]
        assert all(isinstance(s, int) and 0 <= s <= 100 for s in scores)
        pairs = list(zip(scores, scores[1:]))
        if invert:
            assert all(a >= b for a, b in pairs)
        else:
            assert all(a <= b for a, b in pairs)

    def test_normalize_with_bounds(self):
        bounds = CalibrationBounds(min=0, max=0.18, invert=True)
        assert normalize_with(0.0, bounds) == 100
        assert normalize_with(0.18, bounds) == 0


class TestRoundHalfUp:
    def test_half_goes_up(self):
        assert round_half_up(72.5) == 73
        assert round_half_up(72.4) == 72
        assert round_half_up(0.0) == 0

    def test_tenths_half_goes_up(self):
        assert round_half_up_tenths(72.25) == 72.3
        assert round_half_up_tenths(72.24) == 72.2
        assert round_half_up_tenths(75.0) == 75.0


class TestCalibrationBounds:
    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            CalibrationBounds(min=10, max=2)

    def test_frozen(self):
        bounds = CalibrationBounds(min=0, max=1)
        with pytest.raises(ValueError):
            bounds.min = 5
