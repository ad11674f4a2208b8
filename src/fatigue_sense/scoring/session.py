"""Session roll-up: stamping results and the overall session score."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from fatigue_sense.features import mean
from fatigue_sense.models import ScoredTest, TestResult, TestType
from fatigue_sense.scoring.normalize import round_half_up

# (lower bound, label), checked top-down
_INTERPRETATION_BANDS: tuple[tuple[int, str], ...] = (
    (80, "Excellent"),
    (60, "Good"),
    (40, "Moderate Fatigue"),
    (20, "High Fatigue"),
)
_LOWEST_BAND = "Severe Fatigue"


def build_test_result(test_type: TestType, scored: ScoredTest, at: datetime | None = None) -> TestResult:
    """Freeze a scorer's output into the :class:`TestResult` of one run."""
    return TestResult(type=test_type, score=scored.score, raw=scored.raw, at=at or datetime.now(timezone.utc))


def latest_results(results: Iterable[TestResult]) -> dict[TestType, TestResult]:
    """Most recent result of each test type (by ``at``; later entries win ties)."""
    latest: dict[TestType, TestResult] = {}
    for r in results:
        current = latest.get(r.type)
        if current is None or r.at >= current.at:
            latest[r.type] = r
    return latest


def session_fatigue_score(results: Iterable[TestResult]) -> int | None:
    """Rounded mean of the latest score per test type, ``None`` if no tests ran."""
    scores = [r.score for r in latest_results(results).values()]
    if not scores:
        return None
    return round_half_up(mean(scores))


def interpret_score(score: float) -> str:
    for lower, label in _INTERPRETATION_BANDS:
        if score >= lower:
            return label
    return _LOWEST_BAND
