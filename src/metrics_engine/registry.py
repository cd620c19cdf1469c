"""Activity taxonomy registry — the Activity Classifier."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from metrics_engine.exceptions import TaxonomyConflictError
from metrics_engine.models.enums import (
    DEFAULT_DISTANCE_UNIT,
    DISTANCE_BASED_ACTIVITIES,
    Activity,
    MeasurementKind,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivityClass:
    """Classification of one activity identifier.

    ``unit`` is only set for distance-based activities.
    """

    activity: Activity
    kind: MeasurementKind
    unit: str | None = None

    @property
    def is_distance_based(self) -> bool:
        return self.kind == MeasurementKind.DISTANCE

    @property
    def bucket_label(self) -> str:
        return self.activity.value


class ActivityRegistry:
    """Static lookup from activity identifier to measurement kind and unit.

    Every member of ``Activity`` is classified on construction: the
    distance-based list maps to DISTANCE with the default unit, everything
    else (UNKNOWN included) to SERIES. ``classify`` is total and never raises,
    and a classification does not depend on any block instance.

    Usage:
        registry = ActivityRegistry()
        registry.classify("SWIM").kind        # MeasurementKind.DISTANCE
        registry.classify("NOT_A_SPORT")      # UNKNOWN, SERIES
    """

    def __init__(self) -> None:
        self._classes: dict[Activity, ActivityClass] = {}
        for activity in Activity:
            if activity in DISTANCE_BASED_ACTIVITIES:
                self._classes[activity] = ActivityClass(
                    activity, MeasurementKind.DISTANCE, DEFAULT_DISTANCE_UNIT
                )
            else:
                self._classes[activity] = ActivityClass(activity, MeasurementKind.SERIES)

    def register(
        self,
        activity: Activity,
        kind: MeasurementKind,
        unit: str | None = None,
    ) -> ActivityClass:
        """Set the display unit of an activity.

        The kind of an activity is invariant: passing a kind that differs
        from the current classification raises TaxonomyConflictError.
        """
        current = self._classes[activity]
        if current.kind != kind:
            raise TaxonomyConflictError(activity.value, current.kind.name, kind.name)
        if kind == MeasurementKind.DISTANCE:
            unit = unit or current.unit or DEFAULT_DISTANCE_UNIT
        else:
            unit = None
        entry = ActivityClass(activity, kind, unit)
        self._classes[activity] = entry
        return entry

    def classify(self, activity: object) -> ActivityClass:
        """Classify an identifier; unknown identifiers fall into UNKNOWN/SERIES."""
        parsed = Activity.parse(activity)
        if parsed is Activity.UNKNOWN and activity is not Activity.UNKNOWN:
            logger.debug("Unrecognised activity %r classified as UNKNOWN", activity)
        return self._classes[parsed]

    def kind_of(self, activity: object) -> MeasurementKind:
        return self.classify(activity).kind

    def is_distance_based(self, activity: object) -> bool:
        return self.classify(activity).is_distance_based

    @property
    def distance_activities(self) -> list[Activity]:
        """All activities currently classified as distance-based."""
        return [a for a, c in self._classes.items() if c.is_distance_based]


_DEFAULT_REGISTRY = ActivityRegistry()


def classify(activity: object) -> ActivityClass:
    """Classify an activity against the default taxonomy."""
    return _DEFAULT_REGISTRY.classify(activity)
