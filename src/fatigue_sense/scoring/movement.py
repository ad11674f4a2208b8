"""Short-walk scorer: gait smoothness around a target std-dev."""

from __future__ import annotations

from typing import Sequence

import structlog

from fatigue_sense.calibration import MOVEMENT_DEVIATION, MOVEMENT_TARGET_STD, CalibrationBounds
from fatigue_sense.errors import InsufficientDataError
from fatigue_sense.features import population_std
from fatigue_sense.models import InsufficientDataPolicy, MovementRaw, ScoredTest
from fatigue_sense.scoring.normalize import normalize_with

logger = structlog.get_logger(__name__)


def compute_movement_score(
    buffer: Sequence[float],
    *,
    policy: InsufficientDataPolicy = InsufficientDataPolicy.TREAT_AS_PERFECT,
    target_std: float = MOVEMENT_TARGET_STD,
    bounds: CalibrationBounds = MOVEMENT_DEVIATION,
) -> ScoredTest:
    """Score a walking run from its acceleration magnitudes.

    The score peaks when the magnitude std-dev equals *target_std* and falls
    off on both sides: a phone that barely moves is penalised as much as a
    rough gait the same distance above the target.
    """
    if not buffer and policy is InsufficientDataPolicy.REJECT:
        raise InsufficientDataError("Movement buffer is empty.", required=1, received=0)

    std = population_std(buffer)
    score = normalize_with(abs(std - target_std), bounds)

    logger.debug("scoring.movement_scored", samples=len(buffer), std=std, score=score)
    return ScoredTest(score=score, raw=MovementRaw(std=std))
