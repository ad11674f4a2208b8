"""Shared pytest fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from fatigue_sense.models import ImuRecord, TestType, TimedSample, Vector3

T0 = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def t0() -> datetime:
    """Noon UTC, so the calendar day is the same in nearly every server zone."""
    return T0


@pytest.fixture
def make_record() -> Callable[..., ImuRecord]:
    """Factory for :class:`ImuRecord` stamped at an offset from ``t0``."""

    def _make(
        offset_ms: float,
        acc: tuple[float, float, float],
        test_type: TestType = TestType.SWAY,
        gyro: tuple[float, float, float] = (0.0, 0.0, 0.0),
        start: datetime = T0,
        session_id: str = "session_1",
    ) -> ImuRecord:
        return ImuRecord(
            session_id=session_id,
            timestamp=start + timedelta(milliseconds=offset_ms),
            acc=Vector3(x=acc[0], y=acc[1], z=acc[2]),
            gyro=Vector3(x=gyro[0], y=gyro[1], z=gyro[2]),
            type=test_type,
        )

    return _make


@pytest.fixture
def still_acc() -> list[Vector3]:
    """Exactly ten identical samples: the smallest accepted upload."""
    return [Vector3(x=0.0, y=0.0, z=1.0) for _ in range(10)]


@pytest.fixture
def steady_tapping() -> dict:
    """100 taps at a perfectly even 100 ms over the 15 s protocol."""
    return {"taps": 100, "intervals": [100.0] * 99, "seconds": 15}


@pytest.fixture
def walk_samples() -> list[TimedSample]:
    """25 ms samples whose vertical axis swings around gravity."""
    return [
        TimedSample(x=0.0, y=0.0, z=1.0 + (0.2 if i % 2 else -0.1) * (1 + i % 3), t=i * 25.0)
        for i in range(40)
    ]
