"""Stretching exclusion for totals.

Rules:
    1. Auto-exclude STRETCHING when the selection spans at least
       ``auto_exclude_min`` distinct activities and stretching is one of them.
    2. Manual-exclude STRETCHING when the user asked for it.

Only totals are affected; per-activity rows keep their stretching bucket.
"""

from __future__ import annotations

from typing import Iterable

from metrics_engine.models.aggregates import ActivityRollup
from metrics_engine.models.enums import STRETCHING_AUTO_EXCLUDE_MIN_ACTIVITIES, Activity


def should_auto_exclude_stretching(
    activities: Iterable[Activity],
    auto_exclude_min: int = STRETCHING_AUTO_EXCLUDE_MIN_ACTIVITIES,
) -> bool:
    """True when rule 1 applies to this set of activities."""
    distinct = set(activities)
    return len(distinct) >= auto_exclude_min and Activity.STRETCHING in distinct


def filter_activities_for_totals(
    activities: Iterable[Activity],
    manual_exclude: bool = False,
    auto_exclude_min: int = STRETCHING_AUTO_EXCLUDE_MIN_ACTIVITIES,
) -> list[Activity]:
    """Activities that should feed the totals, in their original order.

    Args:
        activities: Activities present in the selection.
        manual_exclude: The user's "exclude stretching" preference.
        auto_exclude_min: Distinct-activity count that triggers rule 1.
    """
    ordered = list(dict.fromkeys(activities))
    if Activity.STRETCHING not in ordered:
        return ordered
    if manual_exclude or should_auto_exclude_stretching(ordered, auto_exclude_min):
        return [a for a in ordered if a != Activity.STRETCHING]
    return ordered


def exclude_stretching(
    activity_rollup: ActivityRollup,
    manual_exclude: bool = False,
    auto_exclude_min: int = STRETCHING_AUTO_EXCLUDE_MIN_ACTIVITIES,
) -> ActivityRollup:
    """Copy of the rollup restricted to the activities that feed totals."""
    kept = filter_activities_for_totals(
        activity_rollup.activities, manual_exclude, auto_exclude_min
    )
    dropped = set(activity_rollup.activities) - set(kept)
    if not dropped:
        return activity_rollup
    return activity_rollup.without(dropped)
