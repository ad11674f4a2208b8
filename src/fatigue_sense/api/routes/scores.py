"""Per-test scoring routes used by clients that do not score on-device."""

from __future__ import annotations

from fastapi import APIRouter

from fatigue_sense.api.schemas import BufferRequest, SessionScoreRequest, SessionScoreResponse, TappingRequest
from fatigue_sense.models import TestResult, TestType
from fatigue_sense.scoring import (
    build_test_result,
    compute_movement_score,
    compute_sway_score,
    compute_tapping_score,
    interpret_score,
    session_fatigue_score,
)

router = APIRouter(prefix="/scores", tags=["scores"])


@router.post("/tapping", response_model=TestResult)
async def score_tapping(req: TappingRequest):
    scored = compute_tapping_score(req.taps, req.intervals, req.seconds)
    return build_test_result(TestType.TAPPING, scored)


@router.post("/sway", response_model=TestResult)
async def score_sway(req: BufferRequest):
    return build_test_result(TestType.SWAY, compute_sway_score(req.buffer))


@router.post("/movement", response_model=TestResult)
async def score_movement(req: BufferRequest):
    return build_test_result(TestType.MOVEMENT, compute_movement_score(req.buffer))


@router.post("/session", response_model=SessionScoreResponse)
async def score_session(req: SessionScoreRequest):
    """Overall score from the latest result of each test type."""
    score = session_fatigue_score(req.results)
    return SessionScoreResponse(
        fatigue_score=score,
        interpretation=interpret_score(score) if score is not None else None,
    )
