"""Tabular (pandas) views of rollups for table and print rendering.

Cells that do not apply are NaN rather than 0: distance for series-based
activities, series for distance-based activities, and every figure on a
placeholder day row.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from metrics_engine.math.duration import format_duration
from metrics_engine.models.aggregates import ActivityRollup, ActivityTotals, WeekRollup
from metrics_engine.registry import ActivityRegistry, classify

ACTIVITY_COLUMNS = [
    "activity",
    "kind",
    "unit",
    "distance",
    "duration_seconds",
    "duration",
    "series_count",
    "repetition_count",
    "workout_count",
    "block_count",
    "set_count",
]

DAY_COLUMNS = [
    "day_number",
    "day_name",
    "date",
    "workout_count",
    "activity",
    "distance",
    "duration_seconds",
    "series_count",
    "repetition_count",
]

_FLOAT_COLUMNS = ("distance", "duration_seconds", "series_count", "repetition_count")


def activity_frame(
    activity_rollup: ActivityRollup, registry: ActivityRegistry | None = None
) -> pd.DataFrame:
    """One row per activity, largest distance first."""
    classifier = registry.classify if registry else classify
    records = []
    for totals in activity_rollup.by_distance():
        activity_class = classifier(totals.activity)
        distance, series = _applicable(totals, activity_class.is_distance_based)
        records.append({
            "activity": totals.activity.display_name,
            "kind": activity_class.kind.name.lower(),
            "unit": activity_class.unit,
            "distance": distance,
            "duration_seconds": totals.duration_seconds,
            "duration": format_duration(totals.duration_seconds),
            "series_count": series,
            "repetition_count": totals.repetition_count,
            "workout_count": totals.workout_count,
            "block_count": totals.block_count,
            "set_count": totals.set_count,
        })
    return _typed(pd.DataFrame.from_records(records, columns=ACTIVITY_COLUMNS))


def day_breakdown_frame(
    week: WeekRollup, registry: ActivityRegistry | None = None
) -> pd.DataFrame:
    """One row per activity per day; one NaN row for an empty day."""
    classifier = registry.classify if registry else classify
    records = []
    for row in week.day_rows:
        record = {
            "day_number": row.day_number,
            "day_name": row.day_name,
            "date": row.day_date,
            "workout_count": row.workout_count,
            "activity": "—",
            "distance": np.nan,
            "duration_seconds": np.nan,
            "series_count": np.nan,
            "repetition_count": np.nan,
        }
        if row.totals is not None:
            is_distance = classifier(row.totals.activity).is_distance_based
            distance, series = _applicable(row.totals, is_distance)
            record.update({
                "activity": row.totals.activity.display_name,
                "distance": distance,
                "duration_seconds": row.totals.duration_seconds,
                "series_count": series,
                "repetition_count": row.totals.repetition_count,
            })
        records.append(record)
    return _typed(pd.DataFrame.from_records(records, columns=DAY_COLUMNS))


def _applicable(totals: ActivityTotals, is_distance: bool) -> tuple[float, float]:
    if is_distance:
        return totals.distance, np.nan
    return np.nan, totals.series_count


def _typed(frame: pd.DataFrame) -> pd.DataFrame:
    for column in _FLOAT_COLUMNS:
        if column in frame.columns:
            frame[column] = frame[column].astype(np.float64)
    return frame
