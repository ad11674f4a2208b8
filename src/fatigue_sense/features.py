"""Windowed statistics over a finite buffer of 3-axis samples.

Every function is a pure, single pass (or two) over its input and returns a
plain ``float``.  Empty inputs yield ``0.0`` rather than raising; callers that
need a minimum sample count enforce it themselves (see
:func:`fatigue_sense.scoring.composite.check_composite_input`).

Variance and standard deviation are *population* statistics (divisor ``n``).
"""

from __future__ import annotations

import math
import statistics
from typing import Iterable, Sequence

from fatigue_sense.models import Vector3
from fatigue_sense.calibration import ENTROPY_BINS, ENTROPY_EPSILON


# ── Per-sample ────────────────────────────────────────────────


def magnitude(sample: Vector3) -> float:
    """Euclidean norm ``sqrt(x² + y² + z²)``; rotation invariant."""
    return math.sqrt(sample.x * sample.x + sample.y * sample.y + sample.z * sample.z)


def magnitudes(samples: Iterable[Vector3]) -> list[float]:
    return [magnitude(s) for s in samples]


# ── 1-D statistics ────────────────────────────────────────────


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return statistics.fmean(values)


def population_variance(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return float(statistics.pvariance(values))


def population_std(values: Sequence[float]) -> float:
    """Always exactly ``sqrt(population_variance(values))``."""
    return math.sqrt(population_variance(values))


def rms(values: Sequence[float]) -> float:
    """Root of the mean of squared values."""
    if not values:
        return 0.0
    return math.sqrt(sum(v * v for v in values) / len(values))


def jerk(values: Sequence[float]) -> float:
    """Mean absolute first difference; a proxy for abrupt movement.

    Fewer than two values have no difference to average and give ``0.0``.
    """
    if len(values) < 2:
        return 0.0
    diffs = [abs(b - a) for a, b in zip(values, values[1:])]
    return sum(diffs) / len(diffs)


def histogram(values: Sequence[float], bins: int = ENTROPY_BINS) -> list[int]:
    """Counts of *values* in *bins* equal-width bins spanning ``[min, max]``.

    The bin index is ``floor((v - min) / (max - min + ε) * (bins - 1))``, so
    the observed maximum lands just below the last index and a constant
    buffer puts every value into bin 0.
    """
    counts = [0] * bins
    if not values:
        return counts
    lo, hi = min(values), max(values)
    span = hi - lo + ENTROPY_EPSILON
    for v in values:
        counts[int(math.floor((v - lo) / span * (bins - 1)))] += 1
    return counts


def shannon_entropy(values: Sequence[float], bins: int = ENTROPY_BINS) -> float:
    """Shannon entropy (natural log) of the *values* histogram.

    Higher entropy roughly tracks more varied motion; a constant buffer
    scores ``0.0``.
    """
    total = len(values)
    if total == 0:
        return 0.0
    probs = [c / total for c in histogram(values, bins) if c > 0]
    return -sum(p * math.log(p) for p in probs) + 0.0  # no -0.0


# ── Sample-buffer statistics ──────────────────────────────────


def axis_sway_variance(samples: Sequence[Vector3]) -> float:
    """``var(x) + var(y)`` of the raw axes.

    This is the composite/visualization notion of sway and is calibrated
    differently from the magnitude variance used by the sway scorer.
    """
    return population_variance([s.x for s in samples]) + population_variance([s.y for s in samples])
