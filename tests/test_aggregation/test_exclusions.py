"""Tests for stretching exclusion from totals."""

from __future__ import annotations

from metrics_engine.aggregation.exclusions import (
    exclude_stretching,
    filter_activities_for_totals,
    should_auto_exclude_stretching,
)
from metrics_engine.models.aggregates import ActivityRollup, ActivityTotals, BlockAggregate
from metrics_engine.models.enums import Activity

FOUR_WITH_STRETCHING = [Activity.SWIM, Activity.RUN, Activity.BIKE, Activity.STRETCHING]


def _rollup(*activities: Activity) -> ActivityRollup:
    return ActivityRollup(buckets={
        a: ActivityTotals(activity=a, aggregate=BlockAggregate(series_count=1)) for a in activities
    })


class TestAutoExclusion:
    def test_four_activities_with_stretching(self) -> None:
        assert should_auto_exclude_stretching(FOUR_WITH_STRETCHING)

    def test_three_activities_with_stretching(self) -> None:
        assert not should_auto_exclude_stretching(FOUR_WITH_STRETCHING[1:])

    def test_without_stretching(self) -> None:
        assert not should_auto_exclude_stretching(
            [Activity.SWIM, Activity.RUN, Activity.BIKE, Activity.YOGA]
        )

    def test_duplicates_do_not_count(self) -> None:
        assert not should_auto_exclude_stretching(
            [Activity.SWIM, Activity.SWIM, Activity.RUN, Activity.STRETCHING]
        )

    def test_custom_threshold(self) -> None:
        assert should_auto_exclude_stretching([Activity.RUN, Activity.STRETCHING], auto_exclude_min=2)


class TestFilterActivities:
    def test_keeps_order_and_dedups(self) -> None:
        assert filter_activities_for_totals(
            [Activity.RUN, Activity.SWIM, Activity.RUN, Activity.STRETCHING]
        ) == [Activity.RUN, Activity.SWIM, Activity.STRETCHING]

    def test_manual_exclusion(self) -> None:
        assert filter_activities_for_totals(
            [Activity.RUN, Activity.STRETCHING], manual_exclude=True
        ) == [Activity.RUN]

    def test_auto_exclusion(self) -> None:
        assert Activity.STRETCHING not in filter_activities_for_totals(FOUR_WITH_STRETCHING)


class TestExcludeStretching:
    def test_drops_bucket(self) -> None:
        result = exclude_stretching(_rollup(*FOUR_WITH_STRETCHING))
        assert Activity.STRETCHING not in result
        assert len(result) == 3

    def test_nothing_to_drop_returns_same_rollup(self) -> None:
        original = _rollup(Activity.RUN, Activity.STRETCHING)
        assert exclude_stretching(original) is original

    def test_manual_flag(self) -> None:
        result = exclude_stretching(_rollup(Activity.STRETCHING), manual_exclude=True)
        assert result.is_empty
