"""Ingestion boundary — validate raw payloads before they reach the core.

Everything past this module assumes finite numbers and known test types.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from fatigue_sense.models import ImuRecord, TestResult, Vector3

logger = structlog.get_logger(__name__)


class MobileExport(BaseModel):
    """A session exported by the mobile client (or posted to ``/analyze``)."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    acc: list[Vector3] = Field(default_factory=list)
    gyro: list[Vector3] = Field(default_factory=list)
    timestamp: str | None = None
    test_results: list[TestResult] | None = None
    metadata: dict[str, Any] | None = None


def parse_records(raw: Iterable[Any]) -> tuple[list[ImuRecord], int]:
    """Validate raw sample dicts, dropping the invalid ones.

    Returns the valid :class:`ImuRecord` objects and the number skipped
    (missing fields, unknown test type, non-finite numbers).
    """
    records: list[ImuRecord] = []
    skipped = 0
    for item in raw:
        try:
            records.append(ImuRecord.model_validate(item))
        except ValidationError as exc:
            skipped += 1
            logger.debug("ingest.record_skipped", errors=exc.error_count())
    if skipped:
        logger.info("ingest.records_skipped", skipped=skipped, accepted=len(records))
    return records, skipped


def load_export(path: Path) -> MobileExport:
    """Read a mobile export JSON file.

    Raises :class:`pydantic.ValidationError` for malformed content and
    :class:`json.JSONDecodeError` for files that are not JSON at all.
    """
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    return MobileExport.model_validate(data)
