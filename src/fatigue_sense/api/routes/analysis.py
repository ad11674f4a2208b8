"""Upload-and-analyze route for a single accelerometer stream."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, HTTPException

from fatigue_sense.api.schemas import AnalyzeRequest, AnalyzeResponse
from fatigue_sense.config import get_settings
from fatigue_sense.errors import InsufficientDataError
from fatigue_sense.scoring import check_composite_input, compute_fatigue_score

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["analysis"])


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(req: AnalyzeRequest):
    """Composite fatigue score of an uploaded session.

    Rejects uploads with fewer accelerometer samples than
    ``min_analyze_samples`` (10 by default) with a 400.
    """
    try:
        check_composite_input(req.acc, get_settings().min_analyze_samples)
    except InsufficientDataError as exc:
        logger.info("analysis.rejected", received=exc.received, required=exc.required)
        raise HTTPException(400, str(exc)) from exc

    result = compute_fatigue_score(req.acc)
    return AnalyzeResponse(
        fatigue_score=result.fatigue_score,
        metrics=result.metrics,
        metadata=req.metadata,
        gyro_samples=len(req.gyro),
        test_results=req.test_results,
    )
