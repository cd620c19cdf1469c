"""Tests for the plan entity tree and the activity enumeration."""

from __future__ import annotations

import dataclasses

import pytest

from metrics_engine.models.enums import Activity, BlockType, InputMode
from metrics_engine.models.plan import Day, ExerciseBlock, Plan, Week, Workout


class TestActivity:
    def test_parse_known_identifier(self) -> None:
        assert Activity.parse("SWIM") is Activity.SWIM

    def test_parse_normalises_case_and_whitespace(self) -> None:
        assert Activity.parse("  body_building ") is Activity.BODY_BUILDING

    def test_parse_unknown_identifier(self) -> None:
        assert Activity.parse("UNDERWATER_HOCKEY") is Activity.UNKNOWN

    def test_parse_missing_identifier(self) -> None:
        assert Activity.parse(None) is Activity.UNKNOWN
        assert Activity.parse(42) is Activity.UNKNOWN

    def test_display_name_replaces_underscores(self) -> None:
        assert Activity.TECHNICAL_MOVES.display_name == "TECHNICAL MOVES"
        assert Activity.RUN.display_name == "RUN"


class TestExerciseBlock:
    def test_is_frozen(self) -> None:
        block = ExerciseBlock(activity=Activity.RUN, input_mode=InputMode.DERIVED)
        with pytest.raises(dataclasses.FrozenInstanceError):
            block.activity = Activity.SWIM  # type: ignore[misc]

    def test_macro_flags(self) -> None:
        assert not ExerciseBlock(Activity.YOGA, InputMode.DERIVED).is_macro
        assert ExerciseBlock(Activity.YOGA, InputMode.DERIVED, is_macro_rest=True).is_macro
        assert ExerciseBlock(Activity.YOGA, InputMode.DERIVED, is_macro_final=True).is_macro

    def test_annotation(self) -> None:
        block = ExerciseBlock(Activity.UNKNOWN, InputMode.DERIVED, block_type=BlockType.ANNOTATION)
        assert block.is_annotation


class TestTree:
    def test_day_blocks_in_workout_order(self) -> None:
        a = ExerciseBlock(Activity.SWIM, InputMode.DERIVED, block_id="a")
        b = ExerciseBlock(Activity.RUN, InputMode.DERIVED, block_id="b")
        c = ExerciseBlock(Activity.BIKE, InputMode.DERIVED, block_id="c")
        day = Day(workouts=(Workout("w1", blocks=(a, b)), Workout("w2", blocks=(c,))))
        assert [blk.block_id for blk in day.blocks] == ["a", "b", "c"]
        assert Week(week_number=1, days=(day, Day())).blocks == (a, b, c)

    def test_empty_day_has_no_blocks(self) -> None:
        assert Day().blocks == ()

    def test_plan_week_lookup(self) -> None:
        plan = Plan(weeks=(Week(week_number=1), Week(week_number=2)))
        assert plan.week(2) is plan.weeks[1]
        assert plan.week(9) is None
