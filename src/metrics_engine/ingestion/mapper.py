"""Pure functions mapping editor/persistence payloads to the frozen plan model.

No I/O — takes the dicts the editing layer already holds (weeks → days →
workouts → moveframes → movelaps) and returns typed, validated snapshots.
Activity identifiers are validated against the closed ``Activity``
enumeration here, and every block leaves with an explicit input mode.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional

from metrics_engine.math.coercion import is_numeric
from metrics_engine.math.duration import parse_rest
from metrics_engine.models.enums import Activity, BlockType, InputMode, ManualInputKind
from metrics_engine.models.plan import (
    Day,
    ExerciseBlock,
    Period,
    Plan,
    SetRecord,
    Week,
    Workout,
)

logger = logging.getLogger(__name__)


def map_plan(raw: Any) -> Plan:
    """Map a workout plan payload (``{"id", "weeks": [...]}``) to a Plan."""
    if not isinstance(raw, dict):
        logger.debug("Plan payload is %s, not a dict; mapped as empty", type(raw).__name__)
        return Plan()
    weeks = tuple(
        map_week(w, fallback_number=i)
        for i, w in enumerate(_as_list(raw.get("weeks")), start=1)
    )
    return Plan(plan_id=_extract_id(raw), weeks=weeks)


def map_week(raw: Any, fallback_number: int = 1) -> Week:
    """Map a week payload. Missing or malformed week numbers use the position."""
    if not isinstance(raw, dict):
        return Week(week_number=fallback_number)

    week_number = _extract_int(raw.get("weekNumber"))
    if week_number is None:
        week_number = fallback_number

    raw_days = _as_list(raw.get("days"))
    week_id = _extract_id(raw) or f"week-{week_number}"
    days = tuple(
        map_day(d, fallback_id=f"{week_id}/day-{i}")
        for i, d in enumerate(raw_days, start=1)
    )
    return Week(
        week_number=week_number,
        days=days,
        period=_extract_period(raw, raw_days),
    )


def map_day(raw: Any, fallback_id: str = "day") -> Day:
    """Map a day payload; template days have no date."""
    if not isinstance(raw, dict):
        return Day(day_id=fallback_id)

    day_id = _extract_id(raw) or fallback_id
    weekday = _extract_int(raw.get("weekday"))
    workouts = tuple(
        map_workout(w, fallback_id=f"{day_id}/workout-{i}")
        for i, w in enumerate(_as_list(raw.get("workouts")), start=1)
    )
    return Day(
        day_id=day_id,
        day_date=_extract_date(raw.get("date")),
        weekday=weekday if weekday is not None and 1 <= weekday <= 7 else None,
        workouts=workouts,
    )


def map_workout(raw: Any, fallback_id: str = "workout") -> Workout:
    """Map a workout payload and stamp its identifier on every block."""
    if not isinstance(raw, dict):
        return Workout(workout_id=fallback_id)

    workout_id = _extract_id(raw) or fallback_id
    blocks = tuple(
        map_block(mf, workout_id=workout_id, fallback_id=f"{workout_id}/block-{i}")
        for i, mf in enumerate(_as_list(raw.get("moveframes")), start=1)
    )
    session = _extract_int(raw.get("sessionNumber"))
    return Workout(
        workout_id=workout_id,
        session_number=session if session is not None else 1,
        name=str(raw.get("name") or ""),
        blocks=blocks,
    )


def map_block(raw: Any, workout_id: str = "", fallback_id: str = "block") -> ExerciseBlock:
    """Map a moveframe payload to an ExerciseBlock.

    Keys read: ``sport``, ``type``, ``inputMode`` / ``manualMode``,
    ``manualInputType``, ``manualDistanceOrSeconds`` / ``distance``,
    ``manualSeriesCount`` / ``repetitions``, ``macroRest``, ``macroFinal``,
    ``movelaps``.
    """
    if not isinstance(raw, dict):
        # Nothing measurable; kept so block positions stay stable
        return ExerciseBlock(
            activity=Activity.UNKNOWN,
            input_mode=InputMode.DERIVED,
            block_id=fallback_id,
            workout_id=workout_id,
            block_type=BlockType.ANNOTATION,
        )

    activity = Activity.parse(raw.get("sport"))
    if activity is Activity.UNKNOWN and raw.get("sport") not in (None, "", "UNKNOWN"):
        logger.debug("Unknown sport %r on block %s", raw.get("sport"), _extract_id(raw) or fallback_id)

    return ExerciseBlock(
        activity=activity,
        input_mode=_extract_input_mode(raw),
        block_id=_extract_id(raw) or fallback_id,
        workout_id=workout_id,
        block_type=_extract_block_type(raw.get("type")),
        manual_input_kind=_extract_manual_input_kind(raw.get("manualInputType")),
        manual_distance_or_seconds=_first_present(raw, "manualDistanceOrSeconds", "distance"),
        manual_series_count=_first_present(raw, "manualSeriesCount", "repetitions"),
        is_macro_rest=_truthy(raw.get("macroRest")),
        is_macro_final=_truthy(raw.get("macroFinal")),
        sets=tuple(map_set(lap) for lap in _as_list(raw.get("movelaps"))),
    )


def map_set(raw: Any) -> SetRecord:
    """Map a movelap payload to a SetRecord.

    A numeric ``time`` is already seconds; a textual one is kept for the
    duration parser. ``pause`` goes through the rest parser.
    """
    if not isinstance(raw, dict):
        return SetRecord()

    time_value = raw.get("durationSeconds", raw.get("time"))
    if is_numeric(time_value):
        duration_seconds, duration_text = time_value, ""
    else:
        duration_seconds, duration_text = None, str(time_value or "")

    return SetRecord(
        distance=raw.get("distance"),
        duration_text=duration_text,
        duration_seconds=duration_seconds,
        repetitions=_first_present(raw, "reps", "repetitions"),
        rest_seconds=parse_rest(_first_present(raw, "pause", "restSeconds")),
    )


# ---------------------------------------------------------------------------
# Field extractors: missing or malformed values map to neutral ones
# ---------------------------------------------------------------------------


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _extract_id(raw: dict[str, Any]) -> str:
    value = raw.get("id")
    return str(value) if value not in (None, "") else ""


def _extract_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def _extract_date(value: Any) -> Optional[date]:
    """Accept date/datetime objects and ISO strings; anything else is None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            logger.debug("Unparseable day date %r", value)
            return None
    return None


def _extract_period(raw: dict[str, Any], raw_days: list[Any]) -> Optional[Period]:
    """Week period from a nested ``period`` dict, else from the first day naming one."""
    period = raw.get("period")
    if isinstance(period, dict) and period.get("name"):
        return Period(name=str(period["name"]), color=str(period.get("color") or ""))
    for day in raw_days:
        if isinstance(day, dict) and day.get("periodName"):
            return Period(name=str(day["periodName"]), color=str(day.get("periodColor") or ""))
    return None


def _extract_input_mode(raw: dict[str, Any]) -> InputMode:
    """Explicit ``inputMode`` wins, then the ``manualMode`` flag, else DERIVED.

    The set list is never consulted.
    """
    mode = raw.get("inputMode")
    if isinstance(mode, InputMode):
        return mode
    if isinstance(mode, str) and mode.strip():
        try:
            return InputMode[mode.strip().upper()]
        except KeyError:
            logger.debug("Unknown inputMode %r; falling back to manualMode flag", mode)
    return InputMode.MANUAL if _flag(raw.get("manualMode")) else InputMode.DERIVED


def _extract_manual_input_kind(value: Any) -> ManualInputKind:
    if isinstance(value, str) and value.strip().lower() == "time":
        return ManualInputKind.TIME
    return ManualInputKind.METERS


def _extract_block_type(value: Any) -> BlockType:
    if isinstance(value, str):
        try:
            return BlockType[value.strip().upper()]
        except KeyError:
            return BlockType.STANDARD
    return BlockType.STANDARD


def _first_present(raw: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _flag(value: Any) -> bool:
    """Boolean flag sent as a bool, a number or text such as ``"true"``."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def _truthy(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)
