"""Shared test fixtures: block/workout/day/week builders and sample plans."""

from __future__ import annotations

from datetime import date
from typing import Callable

import pytest

from metrics_engine.models.enums import Activity, BlockType, InputMode, ManualInputKind
from metrics_engine.models.plan import Day, ExerciseBlock, SetRecord, Week, Workout


@pytest.fixture
def swim_set() -> SetRecord:
    """50 m swim rep in one minute."""
    return SetRecord(distance=50, duration_text="00:01:00")


@pytest.fixture
def block_factory() -> Callable[..., ExerciseBlock]:
    """Factory fixture for ExerciseBlock instances.

    Usage:
        block = block_factory(Activity.SWIM, sets=[swim_set, swim_set])
        block = block_factory(Activity.YOGA, mode=InputMode.MANUAL, series=4)
    """

    def factory(
        activity: Activity = Activity.SWIM,
        mode: InputMode = InputMode.DERIVED,
        sets: list[SetRecord] | tuple[SetRecord, ...] = (),
        workout_id: str = "w1",
        block_id: str = "b1",
        manual_value: float | str | None = 0.0,
        manual_kind: ManualInputKind = ManualInputKind.METERS,
        series: float | str | None = 0,
        block_type: BlockType = BlockType.STANDARD,
        macro_rest: bool = False,
        macro_final: bool = False,
    ) -> ExerciseBlock:
        return ExerciseBlock(
            activity=activity,
            input_mode=mode,
            block_id=block_id,
            workout_id=workout_id,
            block_type=block_type,
            manual_input_kind=manual_kind,
            manual_distance_or_seconds=manual_value,
            manual_series_count=series,
            is_macro_rest=macro_rest,
            is_macro_final=macro_final,
            sets=tuple(sets),
        )

    return factory


@pytest.fixture
def swim_workout_factory(
    block_factory: Callable[..., ExerciseBlock], swim_set: SetRecord
) -> Callable[..., Workout]:
    """Workout with two derived swim blocks of two 50 m / 1 min sets each."""

    def factory(workout_id: str = "w1") -> Workout:
        blocks = tuple(
            block_factory(
                Activity.SWIM,
                sets=[swim_set, swim_set],
                workout_id=workout_id,
                block_id=f"{workout_id}-b{i}",
            )
            for i in (1, 2)
        )
        return Workout(workout_id=workout_id, blocks=blocks)

    return factory


@pytest.fixture
def swim_week_factory(
    swim_workout_factory: Callable[..., Workout],
) -> Callable[..., Week]:
    """One-day week holding a single two-block swim workout.

    Usage:
        week = swim_week_factory(week_number=2, workout_id="w2")
    """

    def factory(week_number: int = 1, workout_id: str = "w1") -> Week:
        day = Day(
            day_id=f"week-{week_number}/day-1",
            weekday=1,
            workouts=(swim_workout_factory(workout_id),),
        )
        return Week(week_number=week_number, days=(day,))

    return factory


@pytest.fixture
def mixed_week(block_factory: Callable[..., ExerciseBlock]) -> Week:
    """Three dated days: swim + stretching on Monday, rest on Tuesday, yoga and run on Wednesday."""
    monday = Day(
        day_id="d1",
        day_date=date(2024, 3, 4),
        workouts=(
            Workout(
                workout_id="mon-1",
                blocks=(
                    block_factory(
                        Activity.SWIM,
                        sets=[SetRecord(distance=400, duration_text="00:08:00")],
                        workout_id="mon-1",
                    ),
                    block_factory(
                        Activity.STRETCHING,
                        mode=InputMode.MANUAL,
                        series=2,
                        workout_id="mon-1",
                    ),
                ),
            ),
        ),
    )
    tuesday = Day(day_id="d2", day_date=date(2024, 3, 5))
    wednesday = Day(
        day_id="d3",
        day_date=date(2024, 3, 6),
        workouts=(
            Workout(
                workout_id="wed-1",
                blocks=(
                    block_factory(
                        Activity.YOGA,
                        sets=[
                            SetRecord(repetitions=3),
                            SetRecord(repetitions=1, rest_seconds=0),
                        ],
                        workout_id="wed-1",
                    ),
                ),
            ),
            Workout(
                workout_id="wed-2",
                blocks=(
                    block_factory(
                        Activity.RUN,
                        mode=InputMode.MANUAL,
                        manual_value=5000,
                        workout_id="wed-2",
                    ),
                ),
            ),
        ),
    )
    return Week(week_number=10, days=(monday, tuesday, wednesday))
