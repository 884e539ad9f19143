"""Small numeric helpers shared by the color engine, extractors and clamping."""

from __future__ import annotations

import math


def clamp(value: float, low: float, high: float) -> float:
    """Force *value* into the closed interval [low, high]."""
    return min(high, max(low, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    Built-in ``round`` uses banker's rounding, which would make ``0.125`` of
    alpha decode to 12 instead of 13.
    """
    return math.floor(value + 0.5)


def round_to(value: float, places: int) -> float:
    scaled = value * 10**places
    if not math.isfinite(scaled):
        # Too large to carry a fractional digit; already whole.
        return value
    return math.floor(scaled + 0.5) / 10**places


def finite(value: float) -> float | None:
    """Return *value*, or None when it is infinite or NaN.

    A numeral long enough to overflow a float is syntactically valid CSS, so
    the value parsers use this to treat it as a miss.
    """
    return value if math.isfinite(value) else None


def format_number(value: float) -> str:
    """Render a number the way CSS authors write it: ``1`` not ``1.0``."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
