"""Time-series chart routes over raw IMU samples.

Samples are posted by the caller (the storage layer lives elsewhere); each
one is validated on its own and invalid ones are skipped and counted.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from fatigue_sense.aggregation import aggregate_per_day, aggregate_tapping_rhythm, session_chart
from fatigue_sense.api.schemas import DailySummaryResponse, SamplesRequest
from fatigue_sense.ingest import parse_records
from fatigue_sense.models import ImuRecord, SessionSeries, TappingRhythm

router = APIRouter(prefix="/timeseries", tags=["timeseries"])


def _valid_records(raw: list[Any]) -> tuple[list[ImuRecord], int]:
    if not raw:
        raise HTTPException(400, "samples array is required")
    records, skipped = parse_records(raw)
    if not records:
        raise HTTPException(
            400,
            "No valid samples found. Each sample must have timestamp, acc, gyro, and type.",
        )
    return records, skipped


@router.post("/session", response_model=SessionSeries)
async def session_series(req: SamplesRequest):
    """1-second aggregated series of one session."""
    records, _ = _valid_records(req.samples)
    return session_chart(records)


@router.post("/daily-summary", response_model=DailySummaryResponse)
async def daily_summary(req: SamplesRequest):
    """One row per calendar day across all posted sessions."""
    records, skipped = _valid_records(req.samples)
    return DailySummaryResponse(days=aggregate_per_day(records), skipped=skipped)


@router.post("/tapping-rhythm", response_model=TappingRhythm)
async def tapping_rhythm(req: SamplesRequest):
    records, _ = _valid_records(req.samples)
    return aggregate_tapping_rhythm(records)
