"""Block aggregation strategies, one per input mode × measurement kind.

Each strategy reads only the fields that are authoritative for its
combination and leaves every other output field at zero, so a manual
series block can never report distance, a derived distance block can never
report series, and so on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fractions import Fraction

from metrics_engine.math.coercion import to_exact, to_number
from metrics_engine.math.duration import parse_duration
from metrics_engine.models.aggregates import BlockAggregate
from metrics_engine.models.enums import (
    MANUAL_TIME_UNITS_PER_SECOND,
    InputMode,
    ManualInputKind,
    MeasurementKind,
)
from metrics_engine.models.plan import ExerciseBlock, SetRecord


class BlockStrategy(ABC):
    """Base class for block aggregation strategies."""

    input_mode: InputMode
    kind: MeasurementKind

    @abstractmethod
    def aggregate(self, block: ExerciseBlock) -> BlockAggregate:
        """Compute the block's contribution."""
        ...


class ManualDistanceStrategy(BlockStrategy):
    """Manual summary on a distance-based activity.

    ``manual_input_kind`` selects the authoritative field: METERS reads the
    value as distance, TIME reads it as tenths of a second. Series and
    repetitions are always zero.
    """

    input_mode = InputMode.MANUAL
    kind = MeasurementKind.DISTANCE

    def aggregate(self, block: ExerciseBlock) -> BlockAggregate:
        value = to_exact(block.manual_distance_or_seconds)
        if block.manual_input_kind == ManualInputKind.TIME:
            return BlockAggregate(duration_seconds=value / MANUAL_TIME_UNITS_PER_SECOND)
        return BlockAggregate(distance=value)


class ManualSeriesStrategy(BlockStrategy):
    """Manual summary on a series-based activity.

    Manual mode has no per-set repetition data, so the series count doubles
    as the repetition count. Any set list on the block is ignored.
    """

    input_mode = InputMode.MANUAL
    kind = MeasurementKind.SERIES

    def aggregate(self, block: ExerciseBlock) -> BlockAggregate:
        series = to_exact(block.manual_series_count)
        return BlockAggregate(series_count=series, repetition_count=series)


class DerivedDistanceStrategy(BlockStrategy):
    """Distance and duration summed over the block's sets."""

    input_mode = InputMode.DERIVED
    kind = MeasurementKind.DISTANCE

    def aggregate(self, block: ExerciseBlock) -> BlockAggregate:
        distance = Fraction(0)
        duration = Fraction(0)
        for record in block.sets:
            distance += to_exact(record.distance)
            duration += to_exact(set_duration_seconds(record))
        return BlockAggregate(distance=distance, duration_seconds=duration)


class DerivedSeriesStrategy(BlockStrategy):
    """Series and repetitions counted over the block's sets.

    A set counts as one series when the block is a macro, when it has more
    than one repetition, or when it has exactly one repetition followed by
    rest. A single repetition with no rest is a sequencing placeholder and is
    left out of the series count. Repetitions are summed over every set.
    """

    input_mode = InputMode.DERIVED
    kind = MeasurementKind.SERIES

    def aggregate(self, block: ExerciseBlock) -> BlockAggregate:
        series = 0
        repetitions = Fraction(0)
        for record in block.sets:
            if counts_as_series(record, is_macro=block.is_macro):
                series += 1
            repetitions += to_exact(record.repetitions)
        return BlockAggregate(series_count=series, repetition_count=repetitions)


# ---------------------------------------------------------------------------
# Set-level rules
# ---------------------------------------------------------------------------


def set_duration_seconds(record: SetRecord) -> float:
    """Duration of one set in seconds.

    A numeric ``duration_seconds`` is used as-is; otherwise the textual
    ``duration_text`` goes through the duration parser.
    """
    if record.duration_seconds is not None and record.duration_seconds != "":
        return to_number(record.duration_seconds)
    return parse_duration(record.duration_text)


def counts_as_series(record: SetRecord, is_macro: bool = False) -> bool:
    """Whether a set contributes one unit to its block's series count."""
    if is_macro:
        return True
    repetitions = to_number(record.repetitions)
    if repetitions > 1:
        return True
    return repetitions == 1 and to_number(record.rest_seconds) > 0


_STRATEGIES: dict[tuple[InputMode, MeasurementKind], BlockStrategy] = {
    (s.input_mode, s.kind): s
    for s in (
        ManualDistanceStrategy(),
        ManualSeriesStrategy(),
        DerivedDistanceStrategy(),
        DerivedSeriesStrategy(),
    )
}


def strategy_for(input_mode: object, kind: MeasurementKind) -> BlockStrategy | None:
    """Look up the strategy for a mode × kind combination, None if there is none."""
    return _STRATEGIES.get((input_mode, kind))
