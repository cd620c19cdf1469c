"""Serialization module — export rollups as JSON or DataFrames."""

from metrics_engine.serialization.frames import activity_frame, day_breakdown_frame
from metrics_engine.serialization.report import (
    multi_week_to_dict,
    rollup_to_dict,
    to_json_string,
    week_to_dict,
)

__all__ = [
    "activity_frame",
    "day_breakdown_frame",
    "multi_week_to_dict",
    "rollup_to_dict",
    "to_json_string",
    "week_to_dict",
]
