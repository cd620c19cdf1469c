"""Tests for ActivityRegistry — the activity taxonomy lookup."""

from __future__ import annotations

import pytest

from metrics_engine.exceptions import MetricsEngineError, TaxonomyConflictError
from metrics_engine.models.enums import DISTANCE_BASED_ACTIVITIES, Activity, InputMode, MeasurementKind
from metrics_engine.models.plan import ExerciseBlock
from metrics_engine.registry import ActivityRegistry, classify


class TestActivityRegistry:
    def test_distance_based_activity(self) -> None:
        swim = ActivityRegistry().classify(Activity.SWIM)
        assert swim.kind == MeasurementKind.DISTANCE
        assert swim.unit == "m"
        assert swim.is_distance_based

    def test_series_based_activity(self) -> None:
        yoga = ActivityRegistry().classify(Activity.YOGA)
        assert yoga.kind == MeasurementKind.SERIES
        assert yoga.unit is None

    def test_every_member_is_classified(self) -> None:
        registry = ActivityRegistry()
        for activity in Activity:
            assert registry.classify(activity).activity is activity

    def test_unknown_identifier(self) -> None:
        result = ActivityRegistry().classify("NOT_A_SPORT")
        assert result.activity is Activity.UNKNOWN
        assert result.kind == MeasurementKind.SERIES

    def test_string_identifier(self) -> None:
        assert ActivityRegistry().classify("run").activity is Activity.RUN

    def test_classification_is_stable(self) -> None:
        registry = ActivityRegistry()
        assert registry.classify("BIKE") is registry.classify("BIKE")

    def test_classification_ignores_input_mode(self) -> None:
        manual = ExerciseBlock(Activity.ROWING, InputMode.MANUAL)
        derived = ExerciseBlock(Activity.ROWING, InputMode.DERIVED)
        assert classify(manual.activity) == classify(derived.activity)

    def test_distance_activities(self) -> None:
        assert set(ActivityRegistry().distance_activities) == set(DISTANCE_BASED_ACTIVITIES)

    def test_kind_helpers(self) -> None:
        registry = ActivityRegistry()
        assert registry.kind_of("SKI") == MeasurementKind.DISTANCE
        assert registry.is_distance_based(Activity.HIKING)
        assert not registry.is_distance_based(Activity.BOXING)


class TestRegister:
    def test_register_unit(self) -> None:
        registry = ActivityRegistry()
        registry.register(Activity.SWIM, MeasurementKind.DISTANCE, unit="yd")
        assert registry.classify(Activity.SWIM).unit == "yd"

    def test_register_does_not_leak_into_default_taxonomy(self) -> None:
        ActivityRegistry().register(Activity.RUN, MeasurementKind.DISTANCE, unit="km")
        assert classify(Activity.RUN).unit == "m"

    def test_series_activities_have_no_unit(self) -> None:
        entry = ActivityRegistry().register(Activity.YOGA, MeasurementKind.SERIES, unit="poses")
        assert entry.unit is None

    def test_conflicting_kind_raises(self) -> None:
        registry = ActivityRegistry()
        with pytest.raises(TaxonomyConflictError, match="SWIM") as exc_info:
            registry.register(Activity.SWIM, MeasurementKind.SERIES)
        assert isinstance(exc_info.value, MetricsEngineError)
        assert exc_info.value.existing == "DISTANCE"
        assert exc_info.value.requested == "SERIES"
        assert registry.classify(Activity.SWIM).kind == MeasurementKind.DISTANCE
