"""Request / response models shared across API route modules."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat
from pydantic.alias_generators import to_camel

from fatigue_sense.ingest import MobileExport
from fatigue_sense.models import CompositeRaw, DayRecord, TestResult

# /analyze accepts exactly the mobile export shape
AnalyzeRequest = MobileExport


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fatigue_score: float
    metrics: CompositeRaw
    metadata: dict[str, Any] | None = None
    gyro_samples: int = Field(0, alias="gyroSamples")
    test_results: list[TestResult] | None = Field(None, alias="testResults")


class _CamelRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class TappingRequest(_CamelRequest):
    taps: int = Field(ge=0)
    intervals: list[FiniteFloat] = Field(default_factory=list)
    seconds: FiniteFloat = Field(15.0, gt=0)


class BufferRequest(_CamelRequest):
    """Magnitudes collected during a sway or movement run."""
    buffer: list[FiniteFloat]


class SessionScoreRequest(_CamelRequest):
    results: list[TestResult]


class SessionScoreResponse(BaseModel):
    fatigue_score: int | None
    interpretation: str | None


class SamplesRequest(BaseModel):
    """Raw samples; each item is validated individually and may be skipped."""
    samples: list[Any]


class DailySummaryResponse(_CamelRequest):
    days: list[DayRecord]
    skipped: int = 0
