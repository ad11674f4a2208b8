"""Time-bucketed aggregation and chart series over stored IMU samples."""

from fatigue_sense.aggregation.charts import (
    movement_variability_series,
    sway_stability_series,
    sway_wobble_series,
)
from fatigue_sense.aggregation.timeseries import (
    aggregate_per_day,
    aggregate_per_second,
    aggregate_tapping_rhythm,
    session_chart,
)

__all__ = [
    "aggregate_per_day",
    "aggregate_per_second",
    "aggregate_tapping_rhythm",
    "movement_variability_series",
    "session_chart",
    "sway_stability_series",
    "sway_wobble_series",
]
