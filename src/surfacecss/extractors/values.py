"""Sub-parsers for individual CSS values (shadows, filters, borders, gradients).

Each parser returns a small result object, or None when the value does not
match its grammar. None means "no data": callers leave the corresponding
settings fields untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from surfacecss._numeric import finite, round_half_up
from surfacecss.model.color import Color
from surfacecss.units import parse_with_unit

__all__ = [
    "ParsedShadow",
    "BackdropFilter",
    "ParsedBorder",
    "LinearGradient",
    "BORDER_STYLES",
    "split_top_level",
    "split_shadow_layers",
    "parse_shadow_layer",
    "parse_backdrop_filter",
    "parse_border",
    "parse_opacity",
    "parse_gradient",
]

_NUM = r"-?(?:\d+(?:\.\d+)?|\.\d+)"
_LENGTH_RE = re.compile(rf"^(?P<n>{_NUM})(?:px)?$")
_INSET_RE = re.compile(r"^inset$", re.IGNORECASE)
_ANGLE_RE = re.compile(rf"^(?P<n>{_NUM})deg$", re.IGNORECASE)
_OPACITY_RE = re.compile(rf"^(?P<n>{_NUM})(?P<pct>%)?$")

_FILTER_RE = {
    name: re.compile(rf"\b{name}\(\s*(?P<arg>[^()]*?)\s*\)", re.IGNORECASE)
    for name in ("blur", "saturate", "brightness")
}
_PERCENT_ARG_RE = re.compile(rf"^(?P<n>{_NUM})(?P<pct>%)?$")
_BORDER_WIDTH_RE = re.compile(rf"^{_NUM}(?:px|rem|em|pt)$")

BORDER_STYLES = frozenset(
    {"solid", "dashed", "dotted", "double", "groove", "ridge", "none", "hidden"}
)


def split_top_level(value: str, is_separator: Callable[[str], bool]) -> list[str]:
    """Split *value* on separator characters that sit outside parentheses.

    Empty pieces are dropped and the rest are trimmed.
    """
    parts: list[str] = []
    depth = 0
    buf: list[str] = []
    for ch in value:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif depth == 0 and is_separator(ch):
            piece = "".join(buf).strip()
            if piece:
                parts.append(piece)
            buf = []
            continue
        buf.append(ch)
    piece = "".join(buf).strip()
    if piece:
        parts.append(piece)
    return parts


def split_shadow_layers(value: str) -> list[str]:
    """Split a ``box-shadow`` value into layers without breaking ``rgba()``."""
    return split_top_level(value, lambda ch: ch == ",")


def _words(value: str) -> list[str]:
    return split_top_level(value, str.isspace)


# ---------------------------------------------------------------------------
# box-shadow
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParsedShadow:
    """One ``box-shadow`` layer. Lengths are px; alpha is a 0-100 percentage."""

    x: float
    y: float
    blur: float
    spread: float | None = None
    color: str | None = None
    alpha: int | None = None
    inset: bool = False


def parse_shadow_layer(layer: str) -> ParsedShadow | None:
    """Parse ``[inset] <x> <y> <blur> [<spread>] <color>``.

    Lengths are px or unitless numbers. The color may come first or last.
    Returns None unless there are three or four lengths, a non-negative blur
    and exactly one parseable color.
    """
    inset = False
    lengths: list[float] = []
    others: list[str] = []
    for word in _words(layer):
        if _INSET_RE.match(word):
            inset = True
            continue
        m = _LENGTH_RE.match(word)
        if m:
            length = finite(float(m.group("n")))
            if length is None:
                return None
            lengths.append(length)
        else:
            others.append(word)

    if len(lengths) not in (3, 4) or len(others) != 1:
        return None
    if lengths[2] < 0:
        return None
    color = Color.parse(others[0])
    if color is None:
        return None

    return ParsedShadow(
        x=lengths[0],
        y=lengths[1],
        blur=lengths[2],
        spread=lengths[3] if len(lengths) == 4 else None,
        color=color.to_hex(),
        alpha=round_half_up(color.a * 100),
        inset=inset,
    )


# ---------------------------------------------------------------------------
# backdrop-filter
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BackdropFilter:
    """Arguments of the filter functions found; absent ones stay None."""

    blur: float | None = None
    saturate: float | None = None
    brightness: float | None = None

    @property
    def empty(self) -> bool:
        return self.blur is None and self.saturate is None and self.brightness is None


def _percent_arg(raw: str) -> float | None:
    """``120%`` -> 120; ``1.2`` -> 120 (CSS treats bare numbers as factors)."""
    m = _PERCENT_ARG_RE.match(raw)
    if m is None:
        return None
    value = float(m.group("n"))
    return finite(value if m.group("pct") else value * 100)


def parse_backdrop_filter(value: str, base_font_px: float = 16.0) -> BackdropFilter:
    """Pull ``blur()``, ``saturate()`` and ``brightness()`` out of a filter list.

    Each function is read independently, so any subset may be present.
    """
    blur = saturate = brightness = None

    m = _FILTER_RE["blur"].search(value)
    if m:
        parsed = parse_with_unit(m.group("arg"), base_font_px)
        if parsed is not None and parsed.unit not in ("%", "vh", "vw"):
            blur = parsed.px

    m = _FILTER_RE["saturate"].search(value)
    if m:
        saturate = _percent_arg(m.group("arg"))

    m = _FILTER_RE["brightness"].search(value)
    if m:
        brightness = _percent_arg(m.group("arg"))

    return BackdropFilter(blur=blur, saturate=saturate, brightness=brightness)


# ---------------------------------------------------------------------------
# border
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParsedBorder:
    width: float | None = None
    style: str | None = None
    color: str | None = None
    alpha: int | None = None

    @property
    def empty(self) -> bool:
        return self.width is None and self.style is None and self.color is None


def parse_border(value: str, base_font_px: float = 16.0) -> ParsedBorder:
    """Split the ``border`` shorthand into width, style and color.

    The width is the first token carrying a length unit (normalized to px);
    whatever is left after removing width and style is read as the color.
    """
    width: float | None = None
    style: str | None = None
    rest: list[str] = []

    for word in _words(value):
        if width is None and _BORDER_WIDTH_RE.match(word):
            parsed = parse_with_unit(word, base_font_px)
            if parsed is not None:
                width = parsed.px
                continue
        if style is None and word.lower() in BORDER_STYLES:
            style = word.lower()
            continue
        rest.append(word)

    color_hex: str | None = None
    alpha: int | None = None
    if rest:
        color = Color.parse(" ".join(rest))
        if color is not None:
            color_hex = color.to_hex()
            alpha = round_half_up(color.a * 100)

    return ParsedBorder(width=width, style=style, color=color_hex, alpha=alpha)


# ---------------------------------------------------------------------------
# opacity
# ---------------------------------------------------------------------------


def parse_opacity(value: str) -> float | None:
    """``0.8`` or ``80%`` -> 80 (a 0-100 percentage)."""
    m = _OPACITY_RE.match(value.strip())
    if m is None:
        return None
    number = float(m.group("n"))
    return finite(number if m.group("pct") else number * 100)


# ---------------------------------------------------------------------------
# linear-gradient
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LinearGradient:
    angle: float | None = None
    first_color: Color | None = None


def _function_args(value: str, name: str) -> str | None:
    """Return the text between ``name(`` and its matching ``)``."""
    m = re.search(rf"\b{re.escape(name)}\(", value, re.IGNORECASE)
    if m is None:
        return None
    depth = 1
    for index in range(m.end(), len(value)):
        ch = value[index]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return value[m.end() : index]
    return None


def parse_gradient(value: str) -> LinearGradient | None:
    """Read the angle and first color stop of a ``linear-gradient()``."""
    args = _function_args(value, "linear-gradient")
    if args is None:
        return None

    angle: float | None = None
    first_color: Color | None = None
    for position, arg in enumerate(split_top_level(args, lambda ch: ch == ",")):
        if position == 0:
            m = _ANGLE_RE.match(arg)
            if m:
                angle = finite(float(m.group("n")))
                continue
        words = _words(arg)
        color = Color.parse(words[0]) if words else None
        if color is not None:
            first_color = color
            break

    return LinearGradient(angle=angle, first_color=first_color)
