"""Numeric coercion for raw editor fields.

Every helper here is total: malformed, missing, negative, or non-finite input
becomes 0.0 so a single bad field can only make totals smaller, never abort
the computation.
"""

from __future__ import annotations

import math
from fractions import Fraction


def to_number(value: object) -> float:
    """Coerce a raw numeric or textual field to a non-negative finite float.

    Args:
        value: int, float, numeric string, or anything else.

    Returns:
        The numeric value, or 0.0 when it is missing, malformed, negative,
        NaN, or infinite.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        try:
            number = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError, OverflowError):
            return 0.0

    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def is_numeric(value: object) -> bool:
    """True when ``value`` is a real number already (not text, not bool)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_exact(value: object) -> Fraction:
    """Coerce like ``to_number`` but return an exact decimal Fraction.

    Floats go through their shortest repr, so ``0.1`` becomes ``1/10`` rather
    than its binary expansion. Sums of exact values do not depend on the
    order they are added in.
    """
    if isinstance(value, Fraction):
        return value if value >= 0 else Fraction(0)
    return Fraction(repr(to_number(value)))
