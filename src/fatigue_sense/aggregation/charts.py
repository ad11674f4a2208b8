"""Display series for the per-test charts.

These are looser visual approximations kept apart from the scoring
formulas: they describe how a run evolved over time, they never feed a
score.
"""

from __future__ import annotations

import math
from typing import Sequence

import pandas as pd

from fatigue_sense.features import magnitudes, population_variance
from fatigue_sense.models import SecondBucket, TimedSample, VariabilityPoint, WobblePoint

WOBBLE_THRESHOLD = 0.1  # magnitude jump between consecutive samples
VARIABILITY_WINDOW = 10  # samples per sliding window

# (upper bound exclusive, label) for the sliding-window std-dev
_SMOOTHNESS_BANDS: tuple[tuple[float, str], ...] = (
    (0.15, "Smooth"),
    (0.3, "Moderate"),
)
_ROUGHEST = "Irregular"


def smoothness_label(std: float) -> str:
    for upper, label in _SMOOTHNESS_BANDS:
        if std < upper:
            return label
    return _ROUGHEST


def count_wobbles(values: Sequence[float], threshold: float = WOBBLE_THRESHOLD) -> int:
    return sum(1 for a, b in zip(values, values[1:]) if abs(b - a) > threshold)


def sway_wobble_series(samples: Sequence[TimedSample]) -> list[WobblePoint]:
    """Magnitude variance and wobble count for each whole second of a run.

    Sample times are relative to the test start.  Second ``k`` (reported as
    ``k + 1``) covers ``[k·1000, (k+1)·1000)`` ms for ``k`` below
    ``ceil(max t / 1000)``; seconds without samples are skipped, so only
    occupied seconds are visited even for large ``t``.
    """
    if not samples:
        return []
    duration = math.ceil(max(s.t for s in samples) / 1000)
    by_second: dict[int, list[TimedSample]] = {}
    for s in samples:
        sec = int(s.t // 1000)
        if 0 <= sec < duration:
            by_second.setdefault(sec, []).append(s)

    points: list[WobblePoint] = []
    for sec in sorted(by_second):
        mags = magnitudes(by_second[sec])
        points.append(
            WobblePoint(
                second=sec + 1,
                variance=population_variance(mags),
                wobbles=count_wobbles(mags),
            )
        )
    return points


def movement_variability_series(
    samples: Sequence[TimedSample],
    window: int = VARIABILITY_WINDOW,
) -> list[VariabilityPoint]:
    """Sliding-window magnitude std-dev over a walking run.

    One point per window start ``i < n - window``, stamped with the first
    sample's time in seconds.
    """
    count = len(samples) - window
    if count <= 0:
        return []
    rolling = pd.Series(magnitudes(samples)).rolling(window).std(ddof=0)
    # rolling values are labelled by window end; shift back to window start
    stds = rolling.shift(-(window - 1)).iloc[:count]
    return [
        VariabilityPoint(
            time=samples[i].t / 1000,
            std=max(float(std), 0.0),
            smoothness=smoothness_label(float(std)),
        )
        for i, std in enumerate(stds)
    ]


def sway_stability_series(buckets: Sequence[SecondBucket]) -> list[float]:
    """Per-second magnitude variance (bucket std squared) for the sway chart."""
    return [b.acc_std**2 for b in buckets]
