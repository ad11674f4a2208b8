"""Tests for the windowed statistics."""

from __future__ import annotations

import math

import pytest

from fatigue_sense.features import (
    axis_sway_variance,
    histogram,
    jerk,
    magnitude,
    magnitudes,
    mean,
    population_std,
    population_variance,
    rms,
    shannon_entropy,
)
from fatigue_sense.models import Vector3


class TestMagnitude:
    def test_pythagorean(self):
        assert magnitude(Vector3(x=3.0, y=4.0, z=0.0)) == 5.0

    def test_rotation_invariant(self):
        a = magnitude(Vector3(x=1.0, y=2.0, z=2.0))
        b = magnitude(Vector3(x=2.0, y=-2.0, z=1.0))
        assert a == b == 3.0

    def test_buffer(self):
        assert magnitudes([Vector3(x=0, y=0, z=2), Vector3(x=0, y=-1, z=0)]) == [2.0, 1.0]


class TestMoments:
    def test_population_variance_uses_n(self):
        assert population_variance([1.0, 2.0, 3.0, 4.0]) == pytest.approx(1.25)

    def test_std_is_exact_root_of_variance(self):
        for values in ([1.0, 2.0, 3.0, 4.0], [0.85, 1.15], [9.81, 9.7, 10.3, 9.92, 9.6]):
            assert population_std(values) == math.sqrt(population_variance(values))

    def test_variance_never_negative(self):
        for values in ([5.0] * 7, [1e-9, 2e-9], [1e6, -1e6, 3.3]):
            assert population_variance(values) >= 0

    def test_empty_inputs_are_zero(self):
        assert mean([]) == 0.0
        assert population_variance([]) == 0.0
        assert population_std([]) == 0.0
        assert rms([]) == 0.0

    def test_rms(self):
        assert rms([3.0, 4.0]) == pytest.approx(math.sqrt(12.5))


class TestJerk:
    def test_mean_absolute_difference(self):
        assert jerk([1.0, 2.0, 4.0, 3.0]) == pytest.approx((1 + 2 + 1) / 3)

    def test_fewer_than_two_samples(self):
        assert jerk([]) == 0.0
        assert jerk([9.81]) == 0.0


class TestEntropy:
    def test_constant_buffer_has_zero_entropy(self):
        assert shannon_entropy([1.0] * 50) == 0.0
        assert histogram([1.0] * 50)[0] == 50

    def test_two_even_clusters(self):
        assert shannon_entropy([0.0, 1.0] * 10) == pytest.approx(math.log(2))

    def test_maximum_lands_below_last_bin(self):
        counts = histogram([0.0, 1.0])
        assert len(counts) == 20
        assert counts[0] == 1
        assert counts[18] == 1
        assert counts[19] == 0

    def test_more_spread_means_more_entropy(self):
        peaked = [1.0] * 18 + [0.0, 2.0]
        spread = [i / 10 for i in range(20)]
        assert shannon_entropy(spread) > shannon_entropy(peaked)

    def test_empty(self):
        assert shannon_entropy([]) == 0.0


class TestAxisSway:
    def test_sums_x_and_y_variance_only(self):
        samples = [
            Vector3(x=0.0, y=1.0, z=5.0),
            Vector3(x=2.0, y=3.0, z=-5.0),
        ]
        # var(x) = 1, var(y) = 1, z ignored
        assert axis_sway_variance(samples) == pytest.approx(2.0)

    def test_differs_from_magnitude_variance(self):
        samples = [Vector3(x=1.0, y=0.0, z=0.0), Vector3(x=0.0, y=1.0, z=0.0)]
        assert population_variance(magnitudes(samples)) == 0.0
        assert axis_sway_variance(samples) == pytest.approx(0.5)
