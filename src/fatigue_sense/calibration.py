"""Calibration constants for the fatigue scorers.

The bounds encode empirically chosen "healthy range" endpoints.  They are
fixed configuration: changing one is a deployment decision, never a request
parameter.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from fatigue_sense.models import TestType


class CalibrationBounds(BaseModel):
    """Normalization scale ``(min, max, invert)`` for one raw metric.

    ``invert`` is set when a *lower* raw value is better (jitter, variance).
    """

    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    invert: bool = False

    @model_validator(mode="after")
    def _ordered(self) -> CalibrationBounds:
        if self.max < self.min:
            raise ValueError(f"calibration max ({self.max}) is below min ({self.min})")
        return self


class TestProtocol(BaseModel):
    """Nominal duration and sensor sampling interval of one motor task."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    seconds: float
    sample_interval_ms: int


# ── Normalizer ────────────────────────────────────────────────

NORMALIZE_EPSILON = 1e-6

# ── Tapping ───────────────────────────────────────────────────

TAP_SPEED = CalibrationBounds(min=2, max=10)  # taps / second
TAP_JITTER = CalibrationBounds(min=0, max=140, invert=True)  # ms
TAP_SPEED_WEIGHT = 0.65
TAP_JITTER_WEIGHT = 0.35

# ── Sway ──────────────────────────────────────────────────────

SWAY_VARIANCE = CalibrationBounds(min=0.005, max=0.08, invert=True)

# ── Movement ──────────────────────────────────────────────────

MOVEMENT_TARGET_STD = 0.15
MOVEMENT_DEVIATION = CalibrationBounds(min=0, max=0.18, invert=True)

# ── Composite (single-stream) estimator ───────────────────────

COMPOSITE_RMS_WEIGHT = 25.0
COMPOSITE_JERK_WEIGHT = 350.0
COMPOSITE_SWAY_WEIGHT = 12.0
COMPOSITE_ENTROPY_WEIGHT = 2.0
MIN_COMPOSITE_SAMPLES = 10

# ── Windowed statistics ───────────────────────────────────────

ENTROPY_BINS = 20
ENTROPY_EPSILON = 1e-6

# ── Test protocol used by the mobile client ───────────────────

TEST_PROTOCOLS: dict[TestType, TestProtocol] = {
    TestType.TAPPING: TestProtocol(seconds=15, sample_interval_ms=50),
    TestType.SWAY: TestProtocol(seconds=20, sample_interval_ms=50),
    TestType.MOVEMENT: TestProtocol(seconds=30, sample_interval_ms=25),
}
