"""JSON serialization of rollups for the display and print collaborators.

Converts WeekRollup / MultiWeekRollup / ActivityRollup values into plain
dicts with camelCase keys, the shape the editor front end already consumes.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from typing import Any

from metrics_engine.aggregation.rollup import grand_total
from metrics_engine.math.duration import format_duration
from metrics_engine.models.aggregates import (
    ActivityRollup,
    ActivityTotals,
    DayBreakdownRow,
    GrandTotal,
    MultiWeekRollup,
    WeekRollup,
)
from metrics_engine.registry import ActivityRegistry, classify


def activity_totals_to_dict(
    totals: ActivityTotals, registry: ActivityRegistry | None = None
) -> dict[str, Any]:
    """One activity bucket as a dict."""
    activity_class = registry.classify(totals.activity) if registry else classify(totals.activity)
    return {
        "activity": totals.activity.value,
        "displayName": totals.activity.display_name,
        "kind": activity_class.kind.name.lower(),
        "unit": activity_class.unit,
        "distance": totals.distance,
        "durationSeconds": totals.duration_seconds,
        "duration": format_duration(totals.duration_seconds),
        "seriesCount": totals.series_count,
        "repetitionCount": totals.repetition_count,
        "workoutCount": totals.workout_count,
        "blockCount": totals.block_count,
        "setCount": totals.set_count,
    }


def grand_total_to_dict(total: GrandTotal) -> dict[str, Any]:
    return {
        "distance": total.distance,
        "durationSeconds": total.duration_seconds,
        "duration": format_duration(total.duration_seconds),
        "seriesCount": total.series_count,
        "repetitionCount": total.repetition_count,
        "workoutCount": total.workout_count,
        "blockCount": total.block_count,
        "setCount": total.set_count,
    }


def rollup_to_dict(
    activity_rollup: ActivityRollup, registry: ActivityRegistry | None = None
) -> dict[str, Any]:
    """Activities ordered by distance (largest first) plus their grand total."""
    return {
        "activities": [
            activity_totals_to_dict(t, registry) for t in activity_rollup.by_distance()
        ],
        "totals": grand_total_to_dict(grand_total(activity_rollup)),
    }


def week_to_dict(
    week: WeekRollup, registry: ActivityRegistry | None = None
) -> dict[str, Any]:
    """A week rollup with its per-day rows."""
    result = {
        "weekNumber": week.week_number,
        "period": (
            {"name": week.period.name, "color": week.period.color}
            if week.period is not None
            else None
        ),
        "days": [_day_row_to_dict(row, registry) for row in week.day_rows],
        "workoutCount": week.workout_count,
    }
    result.update(rollup_to_dict(week.rollup, registry))
    return result


def multi_week_to_dict(
    overview: MultiWeekRollup, registry: ActivityRegistry | None = None
) -> dict[str, Any]:
    """An aggregated multi-week rollup with each week nested."""
    result = {
        "weekRange": overview.week_range_label,
        "weekNumbers": list(overview.week_numbers),
        "weeks": [week_to_dict(w, registry) for w in overview.weeks],
    }
    result.update(rollup_to_dict(overview.rollup, registry))
    return result


def to_json_string(
    value: ActivityRollup | WeekRollup | MultiWeekRollup,
    indent: int = 2,
    registry: ActivityRegistry | None = None,
) -> str:
    """Serialize any rollup level to a JSON string."""
    if isinstance(value, MultiWeekRollup):
        payload = multi_week_to_dict(value, registry)
    elif isinstance(value, WeekRollup):
        payload = week_to_dict(value, registry)
    elif isinstance(value, ActivityRollup):
        payload = rollup_to_dict(value, registry)
    else:
        raise TypeError(f"Cannot serialize {type(value).__name__}")
    return json.dumps(payload, indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _day_row_to_dict(
    row: DayBreakdownRow, registry: ActivityRegistry | None
) -> dict[str, Any]:
    return {
        "dayNumber": row.day_number,
        "dayName": row.day_name,
        "date": row.day_date.isoformat() if row.day_date is not None else None,
        "workoutCount": row.workout_count,
        "totals": (
            activity_totals_to_dict(row.totals, registry)
            if row.totals is not None
            else None
        ),
    }
