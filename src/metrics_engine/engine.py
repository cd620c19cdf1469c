"""MetricsEngine — the orchestrator that rolls a plan subtree up into totals."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from metrics_engine import config
from metrics_engine.aggregation.block import aggregate_block
from metrics_engine.aggregation.exclusions import exclude_stretching
from metrics_engine.aggregation.rollup import grand_total, merge_rollups, rollup
from metrics_engine.cache import RollupCache
from metrics_engine.models.aggregates import (
    ActivityRollup,
    BlockAggregate,
    DayBreakdownRow,
    GrandTotal,
    MultiWeekRollup,
    WeekRollup,
)
from metrics_engine.models.enums import DAY_NAMES
from metrics_engine.models.plan import Day, ExerciseBlock, Week, Workout
from metrics_engine.registry import ActivityRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MetricsEngine:
    """Computes per-activity rollups for a workout, a day, a week, or many weeks.

    The engine is a pure read-side projection: it never mutates the snapshot
    it is given and every call returns freshly allocated results. Week and
    multi-week rollups are built bottom-up from day rollups, which is
    equivalent to rolling up all leaf blocks at once.

    Usage:
        engine = MetricsEngine()
        day_totals = engine.rollup_day(day)
        week = engine.rollup_week(week)
        overview = engine.rollup_weeks(plan.weeks)
        engine.grand_total(overview.rollup)
    """

    def __init__(
        self,
        registry: ActivityRegistry | None = None,
        cache: RollupCache | None = None,
    ) -> None:
        self.registry = registry or ActivityRegistry()
        self.cache = cache

    def aggregate_block(self, block: ExerciseBlock) -> BlockAggregate:
        """One block's distance, duration, series and repetitions."""
        return aggregate_block(block, self.registry)

    def rollup_blocks(self, blocks: Iterable[ExerciseBlock]) -> ActivityRollup:
        """Per-activity totals over an arbitrary block list."""
        return rollup(blocks, self.registry)

    def rollup_workout(self, workout: Workout) -> ActivityRollup:
        """Per-activity totals of a single workout."""
        return self._cached("workout", workout, lambda: self.rollup_blocks(workout.blocks))

    def rollup_day(self, day: Day) -> ActivityRollup:
        """Per-activity totals of a single day across all its workouts."""
        return self._cached("day", day, lambda: self.rollup_blocks(day.blocks))

    def rollup_week(self, week: Week) -> WeekRollup:
        """Rollup of a week with its per-day breakdown.

        Args:
            week: Frozen week snapshot.

        Returns:
            A WeekRollup whose ``rollup`` is the sum of the day rollups and
            whose ``day_rows`` hold one row per activity per day (or one
            placeholder row for a day with nothing to measure).
        """
        return self._cached("week", week, lambda: self._build_week(week))

    def rollup_weeks(self, weeks: Iterable[Week]) -> MultiWeekRollup:
        """Aggregated rollup over an arbitrary list of weeks.

        Workouts are counted by identifier, so the same workout reached
        through two weeks is counted once; distinct workouts always count.
        """
        week_rollups = tuple(self.rollup_week(week) for week in weeks)
        combined = merge_rollups(w.rollup for w in week_rollups)
        result = MultiWeekRollup(rollup=combined, weeks=week_rollups)
        logger.debug(
            "Rolled up %s: %d activities, %d workouts",
            result.week_range_label or "no weeks",
            len(combined),
            result.workout_count,
        )
        return result

    def grand_total(
        self,
        activity_rollup: ActivityRollup,
        apply_stretching_rules: bool = False,
        manual_exclude: bool | None = None,
    ) -> GrandTotal:
        """Flat total across activities.

        Args:
            activity_rollup: Any per-activity rollup.
            apply_stretching_rules: Drop STRETCHING per the exclusion rules
                before reducing.
            manual_exclude: The user's "exclude stretching" preference;
                defaults to ``METRICS_EXCLUDE_STRETCHING``.
        """
        if apply_stretching_rules:
            activity_rollup = exclude_stretching(
                activity_rollup,
                manual_exclude=config.EXCLUDE_STRETCHING if manual_exclude is None else manual_exclude,
                auto_exclude_min=config.STRETCHING_AUTO_EXCLUDE_MIN,
            )
        return grand_total(activity_rollup)

    def day_breakdown(self, week: Week) -> tuple[DayBreakdownRow, ...]:
        """Per-day table rows of a week."""
        return self.rollup_week(week).day_rows

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_week(self, week: Week) -> WeekRollup:
        day_rollups: list[ActivityRollup] = []
        rows: list[DayBreakdownRow] = []

        for position, day in enumerate(week.days, start=1):
            day_rollup = self.rollup_day(day)
            day_rollups.append(day_rollup)
            rows.extend(self._day_rows(position, day, day_rollup))

        combined = merge_rollups(day_rollups)
        logger.debug(
            "Week %d: %d days, %d activities",
            week.week_number, len(week.days), len(combined),
        )
        return WeekRollup(
            week_number=week.week_number,
            rollup=combined,
            day_rows=tuple(rows),
            period=week.period,
        )

    @staticmethod
    def _day_rows(
        position: int, day: Day, day_rollup: ActivityRollup
    ) -> list[DayBreakdownRow]:
        name = day_name(day, position)
        workout_count = len(day.workouts)
        if day_rollup.is_empty:
            return [
                DayBreakdownRow(
                    day_number=position,
                    day_name=name,
                    day_date=day.day_date,
                    workout_count=workout_count,
                )
            ]
        return [
            DayBreakdownRow(
                day_number=position,
                day_name=name,
                day_date=day.day_date,
                workout_count=workout_count,
                activity=totals.activity,
                totals=totals,
            )
            for totals in day_rollup.totals
        ]

    def _cached(self, level: str, subtree: Any, compute: Callable[[], T]) -> T:
        if self.cache is None:
            return compute()
        return self.cache.get_or_compute(level, subtree, compute)


def day_name(day: Day, position: int) -> str:
    """Weekday name of a day: explicit weekday, then date, then position."""
    if day.weekday is not None and 1 <= day.weekday <= len(DAY_NAMES):
        return DAY_NAMES[day.weekday - 1]
    if day.day_date is not None:
        return DAY_NAMES[day.day_date.weekday()]
    if 1 <= position <= len(DAY_NAMES):
        return DAY_NAMES[position - 1]
    return f"Day {position}"
