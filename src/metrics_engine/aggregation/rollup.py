"""Rollup Aggregator — folds block aggregates into per-activity totals.

Grouping is by activity, never by measurement kind: SWIM and RUN stay in
separate buckets even though both are distance-based. Because every bucket
field is a plain sum (and the workout field a set union), the rollup of a
block list equals the ``+`` of the rollups of any partition of that list.
"""

from __future__ import annotations

from typing import Iterable

from metrics_engine.aggregation.block import aggregate_block
from metrics_engine.models.aggregates import (
    EMPTY_ROLLUP,
    ZERO_AGGREGATE,
    ActivityRollup,
    ActivityTotals,
    GrandTotal,
)
from metrics_engine.models.enums import Activity
from metrics_engine.models.plan import ExerciseBlock
from metrics_engine.registry import ActivityRegistry, classify


def rollup(
    blocks: Iterable[ExerciseBlock],
    registry: ActivityRegistry | None = None,
) -> ActivityRollup:
    """Aggregate blocks into per-activity totals.

    Annotation blocks are skipped entirely: they open no bucket and touch no
    workout. Unrecognised activities are collected in the UNKNOWN bucket.

    Args:
        blocks: Blocks from any number of workouts, days or weeks.
        registry: Activity taxonomy; the default taxonomy when omitted.

    Returns:
        An ActivityRollup; empty (not an error) when there are no blocks.
    """
    classifier = registry.classify if registry else classify
    buckets: dict[Activity, ActivityTotals] = {}
    for block in blocks:
        if block.is_annotation:
            continue
        activity = classifier(block.activity).activity
        contribution = ActivityTotals(
            activity=activity,
            aggregate=aggregate_block(block, registry),
            workout_ids=frozenset({block.workout_id}) if block.workout_id else frozenset(),
            block_count=1,
            set_count=len(block.sets),
        )
        buckets[activity] = buckets[activity] + contribution if activity in buckets else contribution
    return ActivityRollup(buckets=buckets)


def merge_rollups(rollups: Iterable[ActivityRollup]) -> ActivityRollup:
    """Field-wise sum of several rollups (bottom-up composition)."""
    merged = EMPTY_ROLLUP
    for part in rollups:
        merged = merged + part
    return merged


def grand_total(activity_rollup: ActivityRollup) -> GrandTotal:
    """Reduce a per-activity rollup to one ungrouped total.

    ``workout_count`` counts distinct workouts across all buckets, so a
    workout mixing SWIM and RUN blocks counts once.
    """
    combined = ZERO_AGGREGATE
    blocks = sets = 0
    workout_ids: set[str] = set()
    for totals in activity_rollup.totals:
        combined = combined + totals.aggregate
        blocks += totals.block_count
        sets += totals.set_count
        workout_ids |= totals.workout_ids
    return GrandTotal(
        distance=float(combined.distance),
        duration_seconds=float(combined.duration_seconds),
        series_count=float(combined.series_count),
        repetition_count=float(combined.repetition_count),
        workout_count=len(workout_ids),
        block_count=blocks,
        set_count=sets,
    )
