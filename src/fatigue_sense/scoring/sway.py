"""Standing-sway scorer: postural stability from magnitude variance."""

from __future__ import annotations

from typing import Sequence

import structlog

from fatigue_sense.calibration import SWAY_VARIANCE, CalibrationBounds
from fatigue_sense.errors import InsufficientDataError
from fatigue_sense.features import population_variance
from fatigue_sense.models import InsufficientDataPolicy, ScoredTest, SwayRaw
from fatigue_sense.scoring.normalize import normalize_with

logger = structlog.get_logger(__name__)


def compute_sway_score(
    buffer: Sequence[float],
    *,
    policy: InsufficientDataPolicy = InsufficientDataPolicy.TREAT_AS_PERFECT,
    bounds: CalibrationBounds = SWAY_VARIANCE,
) -> ScoredTest:
    """Score a sway run from its acceleration magnitudes.

    0.005 variance (very stable) scores 100, 0.08 (very unstable) scores 0.
    The per-axis ``var(x) + var(y)`` sway of the composite estimator is a
    different quantity and is not used here.
    """
    if not buffer and policy is InsufficientDataPolicy.REJECT:
        raise InsufficientDataError("Sway buffer is empty.", required=1, received=0)

    variance = population_variance(buffer)
    score = normalize_with(variance, bounds)

    logger.debug("scoring.sway_scored", samples=len(buffer), variance=variance, score=score)
    return ScoredTest(score=score, raw=SwayRaw(variance=variance))
