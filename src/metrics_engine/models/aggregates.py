"""Aggregation results: per-block figures, per-activity rollups, grand totals.

All results are frozen values. ``+`` on ``BlockAggregate``, ``ActivityTotals``
and ``ActivityRollup`` is a field-wise sum, which is what makes
Day → Week → Multi-Week rollups composable. Block figures are exact Fractions
so that sum does not depend on how the blocks were grouped; totals expose
them as floats.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from fractions import Fraction
from types import MappingProxyType
from typing import Iterator, Mapping

from metrics_engine.math.coercion import to_exact
from metrics_engine.models.enums import Activity
from metrics_engine.models.plan import Period


@dataclass(frozen=True)
class BlockAggregate:
    """One block's (or a sum of blocks') measurable contribution.

    Every field is stored as an exact Fraction; ints, floats and numeric
    strings are accepted and converted on construction.
    """

    distance: Fraction = Fraction(0)
    duration_seconds: Fraction = Fraction(0)
    series_count: Fraction = Fraction(0)
    repetition_count: Fraction = Fraction(0)

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, to_exact(getattr(self, f.name)))

    def __add__(self, other: BlockAggregate) -> BlockAggregate:
        if not isinstance(other, BlockAggregate):
            return NotImplemented
        return BlockAggregate(
            distance=self.distance + other.distance,
            duration_seconds=self.duration_seconds + other.duration_seconds,
            series_count=self.series_count + other.series_count,
            repetition_count=self.repetition_count + other.repetition_count,
        )

    @property
    def is_zero(self) -> bool:
        return self == ZERO_AGGREGATE


ZERO_AGGREGATE = BlockAggregate()


@dataclass(frozen=True)
class ActivityTotals:
    """Totals of one activity bucket.

    ``workout_ids`` is kept as a set rather than a count so that a workout
    contributing several blocks of the same activity is counted once, and so
    that merging two rollups stays exact.
    """

    activity: Activity
    aggregate: BlockAggregate = ZERO_AGGREGATE
    workout_ids: frozenset[str] = field(default_factory=frozenset)
    block_count: int = 0
    set_count: int = 0

    def __add__(self, other: ActivityTotals) -> ActivityTotals:
        if not isinstance(other, ActivityTotals):
            return NotImplemented
        if other.activity != self.activity:
            raise ValueError(
                f"Cannot add totals of {other.activity.value} to {self.activity.value}"
            )
        return ActivityTotals(
            activity=self.activity,
            aggregate=self.aggregate + other.aggregate,
            workout_ids=self.workout_ids | other.workout_ids,
            block_count=self.block_count + other.block_count,
            set_count=self.set_count + other.set_count,
        )

    @property
    def distance(self) -> float:
        return float(self.aggregate.distance)

    @property
    def duration_seconds(self) -> float:
        return float(self.aggregate.duration_seconds)

    @property
    def series_count(self) -> float:
        return float(self.aggregate.series_count)

    @property
    def repetition_count(self) -> float:
        return float(self.aggregate.repetition_count)

    @property
    def workout_count(self) -> int:
        return len(self.workout_ids)


@dataclass(frozen=True)
class ActivityRollup:
    """Per-activity totals over some set of blocks.

    Behaves as a read-only mapping ``Activity -> ActivityTotals``. Bucket
    order is first-seen order of the underlying blocks.
    """

    buckets: Mapping[Activity, ActivityTotals] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "buckets", MappingProxyType(dict(self.buckets)))

    def __getitem__(self, activity: Activity) -> ActivityTotals:
        return self.buckets[activity]

    def __contains__(self, activity: object) -> bool:
        return activity in self.buckets

    def __iter__(self) -> Iterator[Activity]:
        return iter(self.buckets)

    def __len__(self) -> int:
        return len(self.buckets)

    def __add__(self, other: ActivityRollup) -> ActivityRollup:
        if not isinstance(other, ActivityRollup):
            return NotImplemented
        merged: dict[Activity, ActivityTotals] = dict(self.buckets)
        for activity, totals in other.buckets.items():
            merged[activity] = merged[activity] + totals if activity in merged else totals
        return ActivityRollup(buckets=merged)

    def get(self, activity: Activity) -> ActivityTotals | None:
        return self.buckets.get(activity)

    @property
    def activities(self) -> tuple[Activity, ...]:
        return tuple(self.buckets)

    @property
    def totals(self) -> tuple[ActivityTotals, ...]:
        return tuple(self.buckets.values())

    @property
    def is_empty(self) -> bool:
        return len(self.buckets) == 0

    def by_distance(self) -> list[ActivityTotals]:
        """Totals ordered by distance, largest first (ties by identifier)."""
        return sorted(self.buckets.values(), key=lambda t: (-t.distance, t.activity.value))

    def by_activity(self) -> list[ActivityTotals]:
        """Totals ordered alphabetically by activity identifier."""
        return sorted(self.buckets.values(), key=lambda t: t.activity.value)

    def without(self, activities: frozenset[Activity] | set[Activity]) -> ActivityRollup:
        """Copy of this rollup with the given buckets dropped."""
        return ActivityRollup(
            buckets={a: t for a, t in self.buckets.items() if a not in activities}
        )


EMPTY_ROLLUP = ActivityRollup()


@dataclass(frozen=True)
class GrandTotal:
    """Flat, ungrouped reduction of an ActivityRollup."""

    distance: float = 0.0
    duration_seconds: float = 0.0
    series_count: float = 0.0
    repetition_count: float = 0.0
    workout_count: int = 0
    block_count: int = 0
    set_count: int = 0


@dataclass(frozen=True)
class DayBreakdownRow:
    """One row of a week's per-day table.

    A day with no measurable blocks yields a single placeholder row with
    ``activity`` and ``totals`` set to None.
    """

    day_number: int  # 1-based position within the week
    day_name: str
    day_date: date | None = None
    workout_count: int = 0
    activity: Activity | None = None
    totals: ActivityTotals | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.totals is None


@dataclass(frozen=True)
class WeekRollup:
    """Rollup of a single week plus its per-day breakdown."""

    week_number: int
    rollup: ActivityRollup = EMPTY_ROLLUP
    day_rows: tuple[DayBreakdownRow, ...] = field(default_factory=tuple)
    period: Period | None = None

    @property
    def workout_count(self) -> int:
        """All workouts scheduled in the week, measurable or not."""
        per_day = {row.day_number: row.workout_count for row in self.day_rows}
        return sum(per_day.values())


@dataclass(frozen=True)
class MultiWeekRollup:
    """Aggregated rollup over an arbitrary list of weeks."""

    rollup: ActivityRollup = EMPTY_ROLLUP
    weeks: tuple[WeekRollup, ...] = field(default_factory=tuple)

    @property
    def week_numbers(self) -> tuple[int, ...]:
        return tuple(sorted(w.week_number for w in self.weeks))

    @property
    def week_range_label(self) -> str:
        """Human label such as 'Weeks 3-6 (4 weeks)'."""
        numbers = self.week_numbers
        if not numbers:
            return ""
        return f"Weeks {numbers[0]}-{numbers[-1]} ({len(numbers)} weeks)"

    @property
    def workout_count(self) -> int:
        """Distinct workouts touched across all weeks and activities."""
        ids: set[str] = set()
        for totals in self.rollup.totals:
            ids |= totals.workout_ids
        return len(ids)
