"""Training plan entity tree — the read-only snapshot the engine aggregates.

Plan → Week → Day → Workout → ExerciseBlock → SetRecord. Every level is a
frozen dataclass; the editing layer owns the lifecycle, the engine only reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from metrics_engine.models.enums import (
    Activity,
    BlockType,
    InputMode,
    ManualInputKind,
)

# Raw numeric field as delivered by the editing layer; coerced at aggregation time
RawNumber = int | float | str | None


@dataclass(frozen=True)
class SetRecord:
    """A single set ("movelap") within an exercise block.

    ``duration_seconds`` is set when the source field is already numeric
    seconds; otherwise ``duration_text`` is parsed by the duration parser.
    Raw values are kept as delivered and coerced at aggregation time.
    """

    distance: RawNumber = 0.0           # meters
    duration_text: str = ""
    duration_seconds: RawNumber = None  # numeric seconds, takes precedence over text
    repetitions: RawNumber = 0
    rest_seconds: RawNumber = 0.0


@dataclass(frozen=True)
class ExerciseBlock:
    """One exercise segment ("moveframe") of a workout.

    In MANUAL mode only ``manual_distance_or_seconds`` / ``manual_series_count``
    are authoritative; in DERIVED mode only ``sets`` is.
    """

    activity: Activity
    input_mode: InputMode
    block_id: str = ""
    workout_id: str = ""
    block_type: BlockType = BlockType.STANDARD
    manual_input_kind: ManualInputKind = ManualInputKind.METERS
    manual_distance_or_seconds: RawNumber = 0.0  # meters, or tenths of a second
    manual_series_count: RawNumber = 0
    is_macro_rest: bool = False
    is_macro_final: bool = False
    sets: tuple[SetRecord, ...] = field(default_factory=tuple)

    @property
    def is_annotation(self) -> bool:
        return self.block_type == BlockType.ANNOTATION

    @property
    def is_macro(self) -> bool:
        """Macro blocks count every set towards the series total."""
        return self.is_macro_rest or self.is_macro_final


@dataclass(frozen=True)
class Workout:
    """A training session within a day."""

    workout_id: str
    session_number: int = 1
    name: str = ""
    blocks: tuple[ExerciseBlock, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Period:
    """Descriptive training period attached to a week (name + colour)."""

    name: str
    color: str = ""


@dataclass(frozen=True)
class Day:
    """A calendar day. ``day_date`` is None in template plans."""

    day_id: str = ""
    day_date: date | None = None
    weekday: int | None = None  # 1-7, Monday = 1
    workouts: tuple[Workout, ...] = field(default_factory=tuple)

    @property
    def blocks(self) -> tuple[ExerciseBlock, ...]:
        """All blocks of the day, in workout order."""
        return tuple(block for workout in self.workouts for block in workout.blocks)


@dataclass(frozen=True)
class Week:
    """A plan week: up to seven days plus an optional period."""

    week_number: int
    days: tuple[Day, ...] = field(default_factory=tuple)
    period: Period | None = None

    @property
    def blocks(self) -> tuple[ExerciseBlock, ...]:
        return tuple(block for day in self.days for block in day.blocks)


@dataclass(frozen=True)
class Plan:
    """A training plan: weeks ordered by week number."""

    plan_id: str = ""
    weeks: tuple[Week, ...] = field(default_factory=tuple)

    def week(self, week_number: int) -> Week | None:
        """Look up a week by its number."""
        for week in self.weeks:
            if week.week_number == week_number:
                return week
        return None
