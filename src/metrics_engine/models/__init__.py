"""Data models for the metrics engine."""

from metrics_engine.models.aggregates import (
    ActivityRollup,
    ActivityTotals,
    BlockAggregate,
    DayBreakdownRow,
    GrandTotal,
    MultiWeekRollup,
    WeekRollup,
)
from metrics_engine.models.enums import (
    Activity,
    BlockType,
    InputMode,
    ManualInputKind,
    MeasurementKind,
)
from metrics_engine.models.plan import (
    Day,
    ExerciseBlock,
    Period,
    Plan,
    SetRecord,
    Week,
    Workout,
)

__all__ = [
    "Activity",
    "ActivityRollup",
    "ActivityTotals",
    "BlockAggregate",
    "BlockType",
    "Day",
    "DayBreakdownRow",
    "ExerciseBlock",
    "GrandTotal",
    "InputMode",
    "ManualInputKind",
    "MeasurementKind",
    "MultiWeekRollup",
    "Period",
    "Plan",
    "SetRecord",
    "Week",
    "WeekRollup",
    "Workout",
]
