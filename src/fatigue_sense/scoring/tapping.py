"""Finger-tapping scorer: tap rate blended with rhythm consistency."""

from __future__ import annotations

from typing import Sequence

import structlog

from fatigue_sense.calibration import TAP_JITTER, TAP_JITTER_WEIGHT, TAP_SPEED, TAP_SPEED_WEIGHT, CalibrationBounds
from fatigue_sense.errors import InsufficientDataError
from fatigue_sense.features import mean, population_std
from fatigue_sense.models import InsufficientDataPolicy, ScoredTest, TappingRaw
from fatigue_sense.scoring.normalize import normalize_with, round_half_up

logger = structlog.get_logger(__name__)


def intervals_from_timestamps(timestamps: Sequence[float]) -> list[float]:
    """Turn tap timestamps (ms) into the ``len - 1`` gaps between them."""
    return [b - a for a, b in zip(timestamps, timestamps[1:])]


def tap_interval_jitter(intervals: Sequence[float]) -> float:
    """Population std-dev of inter-tap intervals in ms.

    Not to be confused with the per-second bucket jitter of the time-series
    aggregation, which is derived from accelerometer magnitudes.
    """
    return population_std(intervals)


def compute_tapping_score(
    taps: int,
    intervals: Sequence[float],
    seconds: float,
    *,
    policy: InsufficientDataPolicy = InsufficientDataPolicy.TREAT_AS_PERFECT,
    speed_bounds: CalibrationBounds = TAP_SPEED,
    jitter_bounds: CalibrationBounds = TAP_JITTER,
) -> ScoredTest:
    """Score a tapping run.

    Parameters
    ----------
    taps : int
        Number of taps registered during the run.
    intervals : Sequence[float]
        Gaps between consecutive taps in ms (``taps - 1`` of them).
    seconds : float
        Nominal test duration.
    policy : InsufficientDataPolicy
        With no intervals, ``TREAT_AS_PERFECT`` takes jitter as 0 (a
        perfect rhythm score); ``REJECT`` raises
        :class:`InsufficientDataError`.

    Returns
    -------
    ScoredTest
        ``round(0.65 * speedScore + 0.35 * jitterScore)`` with
        :class:`TappingRaw` evidence.
    """
    if seconds <= 0:
        raise ValueError(f"test duration must be positive, got {seconds}")
    if not intervals and policy is InsufficientDataPolicy.REJECT:
        raise InsufficientDataError("No tap intervals recorded.", required=1, received=0)

    taps_per_sec = taps / seconds
    avg_interval = mean(intervals)
    jitter = tap_interval_jitter(intervals)

    speed_score = normalize_with(taps_per_sec, speed_bounds)
    jitter_score = normalize_with(jitter, jitter_bounds)
    score = round_half_up(TAP_SPEED_WEIGHT * speed_score + TAP_JITTER_WEIGHT * jitter_score)

    logger.debug(
        "scoring.tapping_scored",
        taps=taps,
        speed_score=speed_score,
        jitter_score=jitter_score,
        score=score,
    )
    return ScoredTest(
        score=score,
        raw=TappingRaw(
            taps=taps,
            taps_per_sec=taps_per_sec,
            avg_interval=avg_interval,
            jitter=jitter,
        ),
    )
