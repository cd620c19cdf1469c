"""Duration parsing and formatting.

The editor stores set durations as free text in one of three shapes, tried in
order:

    1. Custom notation   1h23'45"6   hours, minutes, seconds, optional tenths
                                     (read from the start; trailing text is ignored)
    2. Colon notation    00:05:30    MM:SS, HH:MM:SS or HH:MM:SS:D by field count
    3. Bare number       7           whole (or decimal) minutes

Everything here is total: unmatched input parses to 0 seconds.
"""

from __future__ import annotations

import math
import re

from metrics_engine.math.coercion import is_numeric, to_number
from metrics_engine.models.enums import SECONDS_PER_HOUR, SECONDS_PER_MINUTE

_CUSTOM_NOTATION = re.compile(r"(\d+)h(\d+)'(\d+)\"(\d)?")
_REST_NOTATION = re.compile(r"(?:(\d+)')?(?:(\d+(?:\.\d+)?)\")?")


def parse_duration(text: object) -> float:
    """Convert a duration in any supported textual encoding to seconds.

    Args:
        text: Duration text such as ``1h23'45"6``, ``00:05:30`` or ``7``.
              Non-string input is treated as its string form.

    Returns:
        Duration in seconds; 0.0 for empty or unrecognised input.

    Examples:
        >>> parse_duration("00:05:30")
        330.0
        >>> parse_duration("7")
        420.0
    """
    if text is None:
        return 0.0
    value = str(text).strip()
    if not value:
        return 0.0

    if "h" in value or "'" in value:
        return _parse_custom_notation(value)
    if ":" in value:
        return _parse_colon_notation(value)
    return to_number(value) * SECONDS_PER_MINUTE


def parse_rest(text: object) -> float:
    """Convert a rest/pause value to seconds.

    Bare numbers are already seconds. Textual pauses use the picker notation:
    ``30"``, ``1'``, ``1'30"``. Anything else is 0.
    """
    if is_numeric(text):
        return to_number(text)
    if text is None:
        return 0.0
    value = str(text).strip()
    if not value:
        return 0.0

    match = _REST_NOTATION.fullmatch(value)
    if match is None or not any(match.groups()):
        return to_number(value)
    minutes = to_number(match.group(1))
    seconds = to_number(match.group(2))
    return minutes * SECONDS_PER_MINUTE + seconds


def format_duration(seconds: object) -> str:
    """Format seconds as zero-padded ``HH:MM:SS`` (fractions are floored).

    Hours are not capped, so 100 hours renders as ``100:00:00``.
    """
    total = int(math.floor(to_number(seconds)))
    hours, remainder = divmod(total, SECONDS_PER_HOUR)
    minutes, secs = divmod(remainder, SECONDS_PER_MINUTE)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_duration_short(seconds: object) -> str:
    """Format seconds as ``'1h 05m'`` or ``'45m'``; '—' when zero."""
    total_minutes = round(to_number(seconds) / SECONDS_PER_MINUTE)
    if total_minutes <= 0:
        return "—"
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}h {minutes:02d}m"
    return f"{minutes}m"


def format_duration_notation(seconds: object) -> str:
    """Format seconds in the print notation, e.g. ``01h02'03''``."""
    total = int(math.floor(to_number(seconds)))
    hours, remainder = divmod(total, SECONDS_PER_HOUR)
    minutes, secs = divmod(remainder, SECONDS_PER_MINUTE)
    return f"{hours:02d}h{minutes:02d}'{secs:02d}''"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_custom_notation(value: str) -> float:
    match = _CUSTOM_NOTATION.match(value)
    if match is None:
        return 0.0
    hours, minutes, seconds, tenths = (to_number(g) for g in match.groups())
    return (
        hours * SECONDS_PER_HOUR
        + minutes * SECONDS_PER_MINUTE
        + seconds
        + tenths / 10
    )


def _parse_colon_notation(value: str) -> float:
    parts = [to_number(p) for p in value.split(":")]
    if len(parts) == 2:
        minutes, seconds = parts
        return minutes * SECONDS_PER_MINUTE + seconds
    if len(parts) == 3:
        hours, minutes, seconds = parts
        return hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
    if len(parts) == 4:
        hours, minutes, seconds, tenths = parts
        return (
            hours * SECONDS_PER_HOUR
            + minutes * SECONDS_PER_MINUTE
            + seconds
            + tenths / 10
        )
    return 0.0
