"""Ingestion boundary — editor payloads to the frozen plan model."""

from metrics_engine.ingestion.mapper import (
    map_block,
    map_day,
    map_plan,
    map_set,
    map_week,
    map_workout,
)

__all__ = [
    "map_block",
    "map_day",
    "map_plan",
    "map_set",
    "map_week",
    "map_workout",
]
