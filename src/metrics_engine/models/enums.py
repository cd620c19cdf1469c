"""Enumerations and fixed constants for the metrics engine.

The activity taxonomy is closed: every identifier the editor can produce is a
member of ``Activity``, and anything else lands in ``Activity.UNKNOWN``.
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Activity(str, Enum):
    """Activity identifiers ("sports") a block can be planned for."""

    SWIM = "SWIM"
    BIKE = "BIKE"
    SPINNING = "SPINNING"
    RUN = "RUN"
    BODY_BUILDING = "BODY_BUILDING"
    ROWING = "ROWING"
    SKATE = "SKATE"
    GYMNASTIC = "GYMNASTIC"
    STRETCHING = "STRETCHING"
    PILATES = "PILATES"
    YOGA = "YOGA"
    SKI = "SKI"
    SNOWBOARD = "SNOWBOARD"
    TECHNICAL_MOVES = "TECHNICAL_MOVES"
    FREE_MOVES = "FREE_MOVES"
    SOCCER = "SOCCER"
    BASKETBALL = "BASKETBALL"
    TENNIS = "TENNIS"
    VOLLEYBALL = "VOLLEYBALL"
    GOLF = "GOLF"
    BOXING = "BOXING"
    MARTIAL_ARTS = "MARTIAL_ARTS"
    CLIMBING = "CLIMBING"
    HIKING = "HIKING"
    WALKING = "WALKING"
    DANCING = "DANCING"
    CALISTENIC = "CALISTENIC"
    CROSSFIT = "CROSSFIT"
    SPARTAN = "SPARTAN"
    TRIATHLON = "TRIATHLON"
    TRACK_FIELD = "TRACK_FIELD"
    UNKNOWN = "UNKNOWN"  # Forward-compatible bucket for unrecognised identifiers

    @classmethod
    def parse(cls, value: object) -> Activity:
        """Map a raw identifier to a member; anything unrecognised is UNKNOWN."""
        if isinstance(value, Activity):
            return value
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.UNKNOWN

    @property
    def display_name(self) -> str:
        """Identifier with underscores shown as spaces, e.g. 'BODY BUILDING'."""
        return self.value.replace("_", " ")


class MeasurementKind(IntEnum):
    """What an activity's primary quantity is."""

    DISTANCE = auto()  # distance (and secondarily duration)
    SERIES = auto()    # count of series and repetitions


class InputMode(IntEnum):
    """How a block's totals are sourced. Never inferred from data presence."""

    MANUAL = auto()   # summary fields typed in by the user
    DERIVED = auto()  # summed from the block's set list


class ManualInputKind(IntEnum):
    """Which manual field is authoritative for a distance-based block."""

    METERS = auto()
    TIME = auto()  # stored as tenths of a second


class BlockType(IntEnum):
    """Block ("moveframe") types."""

    STANDARD = auto()
    BATTERY = auto()
    ANNOTATION = auto()  # free text only, never measured


# ---------------------------------------------------------------------------
# Activity taxonomy
# ---------------------------------------------------------------------------
# Activities measured by distance/duration; every other identifier is series-based.
DISTANCE_BASED_ACTIVITIES = frozenset({
    Activity.SWIM,
    Activity.BIKE,
    Activity.SPINNING,
    Activity.RUN,
    Activity.ROWING,
    Activity.SKATE,
    Activity.SKI,
    Activity.SNOWBOARD,
    Activity.WALKING,
    Activity.HIKING,
})

DEFAULT_DISTANCE_UNIT = "m"

# ---------------------------------------------------------------------------
# Unit conversions
# ---------------------------------------------------------------------------
# Manual "time" input on distance blocks is persisted as tenths of a second
MANUAL_TIME_UNITS_PER_SECOND = 10

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600

# ---------------------------------------------------------------------------
# Totals presentation
# ---------------------------------------------------------------------------
DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Stretching drops out of totals once a selection spans this many activities
STRETCHING_AUTO_EXCLUDE_MIN_ACTIVITIES = 4
