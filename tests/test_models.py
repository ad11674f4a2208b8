"""Tests for data models and the ingestion boundary."""

import json
import math

import pytest
from pydantic import ValidationError

from fatigue_sense.ingest import load_export, parse_records
from fatigue_sense.models import (
    ImuRecord,
    MovementRaw,
    SwayRaw,
    TappingRaw,
    TestResult,
    TestType,
    Vector3,
)


class TestSamples:
    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_axis_rejected(self, bad):
        with pytest.raises(ValidationError):
            Vector3(x=bad, y=0.0, z=1.0)

    def test_record_accepts_camel_case(self):
        rec = ImuRecord.model_validate(
            {
                "sessionId": "s1",
                "timestamp": "2024-03-01T12:00:00Z",
                "acc": {"x": 0, "y": 0, "z": 1},
                "gyro": {"x": 0, "y": 0, "z": 0},
                "type": "tapping",
            }
        )
        assert rec.session_id == "s1"
        assert rec.type == TestType.TAPPING


class TestTestResult:
    def test_raw_parsed_by_type(self):
        result = TestResult.model_validate(
            {
                "type": "tapping",
                "score": 73,
                "raw": {"taps": 100, "tapsPerSec": 6.67, "avgInterval": 100, "jitter": 0},
                "at": 1709294400000,
            }
        )
        assert isinstance(result.raw, TappingRaw)
        assert result.raw.avg_interval == 100.0

    def test_raw_must_match_type(self):
        with pytest.raises(ValidationError):
            TestResult(type=TestType.SWAY, score=50, raw=MovementRaw(std=0.1))

    def test_unknown_raw_field_rejected(self):
        with pytest.raises(ValidationError):
            TestResult.model_validate({"type": "sway", "score": 50, "raw": {"variance": 0.01, "extra": 1}})

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_bounds(self, score):
        with pytest.raises(ValidationError):
            TestResult(type=TestType.SWAY, score=score, raw=SwayRaw(variance=0.01))

    def test_immutable(self):
        result = TestResult(type=TestType.SWAY, score=90, raw=SwayRaw(variance=0.01))
        with pytest.raises(ValidationError):
            result.score = 10


class TestParseRecords:
    def test_invalid_records_are_counted(self):
        good = {
            "timestamp": "2024-03-01T12:00:00Z",
            "acc": {"x": 0, "y": 0, "z": 1},
            "gyro": {"x": 0, "y": 0, "z": 0},
            "type": "sway",
        }
        raw = [
            good,
            {**good, "gyro": None},
            {**good, "type": "jumping"},
            {**good, "acc": {"x": math.nan, "y": 0, "z": 1}},
            "not a sample",
        ]
        records, skipped = parse_records(raw)
        assert len(records) == 1
        assert skipped == 4


class TestLoadExport:
    def test_reads_mobile_export(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(
            json.dumps(
                {
                    "acc": [{"x": 0, "y": 0, "z": 1, "t": 50 * i} for i in range(12)],
                    "gyro": [{"x": 0, "y": 0, "z": 0, "t": 0}],
                    "testResults": [{"type": "sway", "score": 88, "raw": {"variance": 0.01}, "at": 1709294400000}],
                    "metadata": {"deviceId": "pixel"},
                }
            )
        )
        export = load_export(path)
        assert len(export.acc) == 12
        assert len(export.gyro) == 1
        assert export.test_results[0].score == 88
        assert export.metadata == {"deviceId": "pixel"}
