"""Time-bucketed re-aggregation of persisted IMU samples.

Three groupings feed the dashboard charts:

- **per second** within one session (means per axis, magnitude wobble);
- **per day** across all of a user's sessions, one row per calendar day;
- **tapping rhythm**, per-second sample counts and magnitude jitter of the
  tapping run.

Timestamps are handled in UTC; naive datetimes are read as server-local time.
Day labels use the server-local zone.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

import pandas as pd
import structlog

from fatigue_sense.models import (
    DayRecord,
    ImuRecord,
    RhythmBucket,
    SecondBucket,
    SessionSeries,
    TappingRhythm,
    TestType,
    to_utc,
)

logger = structlog.get_logger(__name__)

_AXES = ("x", "y", "z")


# ── Frame construction ────────────────────────────────────────


def local_day(ts: datetime) -> str:
    """``YYYY-MM-DD`` of *ts* in the server-local time zone (naive *ts* is already local)."""
    return ts.astimezone().strftime("%Y-%m-%d")


def records_to_dataframe(records: Sequence[ImuRecord]) -> pd.DataFrame:
    """Flatten records into one row per sample, sorted by time.

    Columns: ``timestamp`` (UTC), ``session_id``, ``type``, ``acc_x`` …
    ``gyro_z`` and ``acc_mag``.
    """
    df = pd.DataFrame(
        [
            {
                "timestamp": to_utc(r.timestamp),
                "session_id": r.session_id,
                "type": r.type.value,
                **{f"acc_{a}": getattr(r.acc, a) for a in _AXES},
                **{f"gyro_{a}": getattr(r.gyro, a) for a in _AXES},
            }
            for r in records
        ]
    )
    if df.empty:
        return df
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
    df["acc_mag"] = (df["acc_x"] ** 2 + df["acc_y"] ** 2 + df["acc_z"] ** 2) ** 0.5
    return df.sort_values("timestamp", kind="stable").reset_index(drop=True)


def _population_std(series: pd.Series) -> float:
    return float(series.std(ddof=0))


# ── Per-second buckets ────────────────────────────────────────


def aggregate_per_second(records: Sequence[ImuRecord]) -> list[SecondBucket]:
    """Group samples by the second containing them, ascending.

    Empty seconds are simply absent; there is no gap filling.
    """
    df = records_to_dataframe(records)
    if df.empty:
        return []

    grouped = df.groupby(df["timestamp"].dt.floor("s"), sort=True)
    means = grouped[[f"{s}_{a}" for s in ("acc", "gyro") for a in _AXES]].mean()
    acc_std = grouped["acc_mag"].agg(_population_std)
    first_type = grouped["type"].first()
    counts = grouped.size()

    buckets = [
        SecondBucket(
            timestamp=ts.to_pydatetime(),
            avg_acc_x=float(row.acc_x),
            avg_acc_y=float(row.acc_y),
            avg_acc_z=float(row.acc_z),
            avg_gyro_x=float(row.gyro_x),
            avg_gyro_y=float(row.gyro_y),
            avg_gyro_z=float(row.gyro_z),
            acc_magnitude=float((row.acc_x**2 + row.acc_y**2 + row.acc_z**2) ** 0.5),
            acc_std=float(acc_std[ts]),
            type=TestType(first_type[ts]),
            count=int(counts[ts]),
        )
        for ts, row in means.iterrows()
    ]
    logger.debug("aggregation.per_second", samples=len(df), buckets=len(buckets))
    return buckets


def session_chart(records: Sequence[ImuRecord]) -> SessionSeries:
    """Per-second buckets of one session plus its test type and sample total."""
    buckets = aggregate_per_second(records)
    if not buckets:
        return SessionSeries()
    return SessionSeries(
        buckets=buckets,
        type=buckets[0].type,
        sample_count=sum(b.count for b in buckets),
    )


# ── Per-day summary ───────────────────────────────────────────


def aggregate_per_day(records: Sequence[ImuRecord]) -> list[DayRecord]:
    """Collapse all samples into one :class:`DayRecord` per calendar day.

    Within each (day, type) group the magnitude mean and population std-dev
    are computed; the day row then carries the sway std squared, the
    movement std and the tapping mean, each ``0`` when that type has no
    samples that day.
    """
    df = records_to_dataframe(records)
    if df.empty:
        return []

    df["day"] = df["timestamp"].map(lambda ts: local_day(ts.to_pydatetime()))
    grouped = df.groupby(["day", "type"], sort=True)["acc_mag"]
    stats = pd.DataFrame(
        {
            "avg": grouped.mean(),
            "std": grouped.agg(_population_std),
            "count": grouped.size(),
        }
    )

    days: list[DayRecord] = []
    for day, rows in stats.groupby(level="day", sort=True):
        by_type = rows.droplevel("day")
        present = set(by_type.index)
        days.append(
            DayRecord(
                day=str(day),
                sway_variance=float(by_type.at[TestType.SWAY.value, "std"] ** 2)
                if TestType.SWAY.value in present
                else 0.0,
                movement_std=float(by_type.at[TestType.MOVEMENT.value, "std"])
                if TestType.MOVEMENT.value in present
                else 0.0,
                tapping_avg=float(by_type.at[TestType.TAPPING.value, "avg"])
                if TestType.TAPPING.value in present
                else 0.0,
                total_samples=int(by_type["count"].sum()),
            )
        )
    logger.debug("aggregation.per_day", samples=len(df), days=len(days))
    return days


# ── Tapping rhythm ────────────────────────────────────────────


def aggregate_tapping_rhythm(records: Sequence[ImuRecord]) -> TappingRhythm:
    """Per-second sample counts and magnitude jitter of the tapping samples.

    The bucket jitter approximates rhythm from raw accelerometer spread
    because discrete tap times are not stored; it is not comparable with
    the tap-interval jitter of the tapping scorer.
    """
    df = records_to_dataframe([r for r in records if r.type is TestType.TAPPING])
    if df.empty:
        return TappingRhythm()

    grouped = df.groupby(df["timestamp"].dt.floor("s"), sort=True)["acc_mag"]
    counts = grouped.size()
    jitter = grouped.agg(_population_std)

    buckets = [
        RhythmBucket(
            timestamp=ts.to_pydatetime(),
            taps_per_second=int(counts[ts]),
            bucket_magnitude_jitter=float(jitter[ts]),
        )
        for ts in counts.index
    ]
    return TappingRhythm(
        buckets=buckets,
        avg_taps_per_second=sum(b.taps_per_second for b in buckets) / len(buckets),
        avg_jitter=sum(b.bucket_magnitude_jitter for b in buckets) / len(buckets),
    )
