"""Composite fatigue estimator for a single uploaded accelerometer stream.

This is the upload-and-analyze dashboard path and is independent of the three
discrete motor tests.  Gyroscope data travels with uploads but does not enter
the score.
"""

from __future__ import annotations

from typing import Sequence

import structlog

from fatigue_sense.calibration import (
    COMPOSITE_ENTROPY_WEIGHT,
    COMPOSITE_JERK_WEIGHT,
    COMPOSITE_RMS_WEIGHT,
    COMPOSITE_SWAY_WEIGHT,
    MIN_COMPOSITE_SAMPLES,
)
from fatigue_sense.errors import InsufficientDataError
from fatigue_sense.features import axis_sway_variance, jerk, magnitudes, rms, shannon_entropy
from fatigue_sense.models import CompositeRaw, CompositeResult, Vector3
from fatigue_sense.scoring.normalize import round_half_up_tenths

logger = structlog.get_logger(__name__)


def check_composite_input(acc: Sequence[Vector3], minimum: int = MIN_COMPOSITE_SAMPLES) -> None:
    """Enforce the caller-side minimum sample count.

    :func:`compute_fatigue_score` trusts its input; API handlers and the CLI
    call this first and turn the error into a client-facing rejection.
    """
    if len(acc) < minimum:
        raise InsufficientDataError(
            "Not enough IMU data",
            required=minimum,
            received=len(acc),
        )


def compute_composite_metrics(acc: Sequence[Vector3]) -> CompositeRaw:
    mags = magnitudes(acc)
    return CompositeRaw(
        rms=rms(mags),
        jerk=jerk(mags),
        sway=axis_sway_variance(acc),
        entropy=shannon_entropy(mags),
    )


def compute_fatigue_score(acc: Sequence[Vector3]) -> CompositeResult:
    """Estimate overall fatigue (0-100, higher is fresher) from one stream.

    ``raw = 25·rms + 350·jerk + 12·sway + 2·entropy`` and the score is
    ``max(0, 100 - raw)`` rounded half up to one decimal.  No validation happens
    here; see :func:`check_composite_input`.
    """
    metrics = compute_composite_metrics(acc)
    raw_score = (
        metrics.rms * COMPOSITE_RMS_WEIGHT
        + metrics.jerk * COMPOSITE_JERK_WEIGHT
        + metrics.sway * COMPOSITE_SWAY_WEIGHT
        + metrics.entropy * COMPOSITE_ENTROPY_WEIGHT
    )
    fatigue_score = round_half_up_tenths(max(0.0, 100.0 - raw_score))

    logger.debug("scoring.composite_scored", samples=len(acc), raw_score=raw_score, fatigue_score=fatigue_score)
    return CompositeResult(fatigue_score=fatigue_score, metrics=metrics)
