"""Aggregation: per-block figures and per-activity rollups."""

from metrics_engine.aggregation.block import aggregate_block
from metrics_engine.aggregation.exclusions import exclude_stretching, filter_activities_for_totals
from metrics_engine.aggregation.rollup import grand_total, merge_rollups, rollup

__all__ = [
    "aggregate_block",
    "exclude_stretching",
    "filter_activities_for_totals",
    "grand_total",
    "merge_rollups",
    "rollup",
]
