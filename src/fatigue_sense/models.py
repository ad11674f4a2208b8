"""Shared Pydantic models used across the framework.

Raw metric payloads keep the camelCase keys the mobile client writes
(``tapsPerSec``, ``avgInterval``) on the wire, while Python code uses
snake_case attribute names.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator, model_validator
from pydantic.alias_generators import to_camel


# ── Enums ─────────────────────────────────────────────────────


class TestType(str, Enum):
    """The three motor tasks run by the mobile client."""

    __test__ = False  # keep pytest from collecting this as a test class

    TAPPING = "tapping"
    SWAY = "sway"
    MOVEMENT = "movement"


class InsufficientDataPolicy(str, Enum):
    """What a scorer does when its input holds no usable data.

    ``TREAT_AS_PERFECT`` keeps the historical behaviour: an empty interval
    list yields zero jitter and therefore a perfect rhythm score.
    ``REJECT`` raises :class:`~fatigue_sense.errors.InsufficientDataError`.
    """

    TREAT_AS_PERFECT = "treat_as_perfect"
    REJECT = "reject"


# ── Time ──────────────────────────────────────────────────────


def to_utc(ts: datetime) -> datetime:
    """Aware UTC copy of *ts*; naive values are read as server-local time."""
    return ts.astimezone(timezone.utc)


# ── Samples ───────────────────────────────────────────────────


class Vector3(BaseModel):
    """One inertial reading on three axes.

    Non-finite values are rejected here so that NaN never reaches an
    aggregate.
    """

    model_config = ConfigDict(frozen=True)

    x: FiniteFloat
    y: FiniteFloat
    z: FiniteFloat


class TimedSample(Vector3):
    """A :class:`Vector3` stamped with ``t`` in milliseconds.

    ``t`` is relative to the test start for mobile buffers and an epoch
    offset for exported sessions; the statistics never look at it.
    """

    t: FiniteFloat = 0.0


class ImuRecord(BaseModel):
    """A persisted accelerometer + gyroscope sample of one test run."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, frozen=True)

    session_id: str = ""
    timestamp: datetime
    acc: Vector3
    gyro: Vector3
    type: TestType


# ── Raw metrics (one closed model per test type) ──────────────


class _RawMetrics(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid",
        frozen=True,
    )


class TappingRaw(_RawMetrics):
    taps: int
    taps_per_sec: float
    avg_interval: float
    jitter: float = Field(description="Population std-dev of inter-tap intervals (ms).")


class SwayRaw(_RawMetrics):
    variance: float = Field(description="Population variance of acceleration magnitude.")


class MovementRaw(_RawMetrics):
    std: float = Field(description="Population std-dev of acceleration magnitude.")


class CompositeRaw(_RawMetrics):
    rms: float
    jerk: float
    sway: float = Field(description="var(x) + var(y), per axis rather than magnitude.")
    entropy: float


RawMetrics = Union[TappingRaw, SwayRaw, MovementRaw]

_RAW_BY_TYPE: dict[TestType, type[BaseModel]] = {
    TestType.TAPPING: TappingRaw,
    TestType.SWAY: SwayRaw,
    TestType.MOVEMENT: MovementRaw,
}


# ── Scoring results ───────────────────────────────────────────


class ScoredTest(BaseModel):
    """Output of a single-test scorer, before it is stamped as a result."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    raw: RawMetrics


class TestResult(BaseModel):
    """One completed test run.  Immutable once produced; ``at`` is aware UTC."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    type: TestType
    score: int = Field(ge=0, le=100)
    raw: RawMetrics
    at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("at")
    @classmethod
    def _at_as_utc(cls, v: datetime) -> datetime:
        return to_utc(v)

    @model_validator(mode="before")
    @classmethod
    def _coerce_raw(cls, data: Any) -> Any:
        """Parse ``raw`` with the model matching ``type``."""
        if isinstance(data, dict) and isinstance(data.get("raw"), dict):
            try:
                raw_model = _RAW_BY_TYPE[TestType(data.get("type"))]
            except (KeyError, ValueError):
                return data
            data = {**data, "raw": raw_model.model_validate(data["raw"])}
        return data

    @model_validator(mode="after")
    def _check_raw_matches_type(self) -> TestResult:
        expected = _RAW_BY_TYPE[self.type]
        if not isinstance(self.raw, expected):
            raise ValueError(
                f"{self.type.value} result carries {type(self.raw).__name__}, expected {expected.__name__}"
            )
        return self


class CompositeResult(BaseModel):
    """Single-stream fatigue estimate from the upload-and-analyze path."""

    fatigue_score: float = Field(ge=0, description="100 minus the weighted metric sum, 1 decimal.")
    metrics: CompositeRaw


# ── Aggregation outputs ───────────────────────────────────────


class _Bucket(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class SecondBucket(_Bucket):
    """Per-second means of one session's raw samples."""

    timestamp: datetime
    avg_acc_x: float
    avg_acc_y: float
    avg_acc_z: float
    avg_gyro_x: float
    avg_gyro_y: float
    avg_gyro_z: float
    acc_magnitude: float = Field(description="Magnitude of the per-axis means.")
    acc_std: float = Field(description="Population std-dev of per-sample magnitudes.")
    type: TestType
    count: int


class DayRecord(_Bucket):
    """One calendar day of the cross-session dashboard.

    Metrics of a test type with no data that day are ``0``; only
    ``total_samples`` tells "no data" apart from "zero activity".
    """

    day: str
    sway_variance: float = 0.0
    movement_std: float = 0.0
    tapping_avg: float = 0.0
    total_samples: int = 0


class RhythmBucket(_Bucket):
    timestamp: datetime
    taps_per_second: int
    bucket_magnitude_jitter: float = Field(
        alias="jitter",
        description="Std-dev of in-bucket magnitudes; not the tap-interval jitter.",
    )


class TappingRhythm(_Bucket):
    buckets: list[RhythmBucket] = Field(default_factory=list)
    avg_taps_per_second: float = 0.0
    avg_jitter: float = 0.0


# ── Visualization series ──────────────────────────────────────


class WobblePoint(_Bucket):
    second: int
    variance: float
    wobbles: int


class VariabilityPoint(_Bucket):
    time: float
    std: float
    smoothness: str


class SessionSeries(_Bucket):
    """Chart-ready per-second series of one session."""

    buckets: list[SecondBucket] = Field(default_factory=list)
    type: TestType | None = None
    sample_count: int = 0
