"""Unit normalization: turn CSS length literals into pixel values."""

from __future__ import annotations

import re
from dataclasses import dataclass

from surfacecss._numeric import finite, round_to

__all__ = ["ParsedUnit", "parse_with_unit", "UNIT_TO_PX"]

_UNIT_RE = re.compile(
    r"^(?P<number>-?(?:\d+(?:\.\d+)?|\.\d+))\s*(?P<unit>px|rem|em|%|vh|vw|pt|cm|mm)?$"
)

# Absolute conversion factors; rem/em are resolved against the base font size.
UNIT_TO_PX: dict[str, float] = {
    "pt": 4 / 3,
    "cm": 37.7953,
    "mm": 3.77953,
}

_FONT_RELATIVE = frozenset({"rem", "em"})


@dataclass(frozen=True)
class ParsedUnit:
    """A length literal and its pixel equivalent (rounded to 0.1)."""

    raw: float
    unit: str
    px: float
    was_converted: bool


def parse_with_unit(raw: str, base_font_px: float = 16.0) -> ParsedUnit | None:
    """Parse ``<number><unit>`` and convert to px.

    ``px``, ``%``, ``vh`` and ``vw`` pass through unchanged since they have no
    fixed pixel size. A bare number is treated as px. Returns None when the
    text is not a single length literal or its value overflows a float.
    """
    m = _UNIT_RE.match(raw.strip())
    if m is None:
        return None

    value = finite(float(m.group("number")))
    if value is None:
        return None
    unit = m.group("unit") or "px"

    if unit in _FONT_RELATIVE:
        px, converted = value * base_font_px, True
    elif unit in UNIT_TO_PX:
        px, converted = value * UNIT_TO_PX[unit], True
    else:
        px, converted = value, False

    if finite(px) is None:
        return None
    return ParsedUnit(raw=value, unit=unit, px=round_to(px, 1), was_converted=converted)
