"""Custom exception hierarchy for the metrics engine.

Aggregation itself never raises on malformed data; these cover misuse of the
engine's configuration surface.
"""

from __future__ import annotations


class MetricsEngineError(Exception):
    """Base exception for all metrics_engine errors."""


class TaxonomyConflictError(MetricsEngineError):
    """An activity was re-registered with a different measurement kind."""

    def __init__(self, activity: str, existing: str, requested: str) -> None:
        super().__init__(
            f"Activity {activity} is already classified as {existing}; "
            f"refusing to reclassify it as {requested}"
        )
        self.activity = activity
        self.existing = existing
        self.requested = requested
