"""Color model: an immutable RGBA value with multi-format parsing.

Supported input formats:
    #rgb  #rgba  #rrggbb  #rrggbbaa
    rgb(255, 0, 0)  rgba(255 0 0 / 50%)
    hsl(210, 50%, 40%)  hsla(210 50% 40% / 0.5)
    oklch(62.8% 0.258 29.2)  oklch(0.628 0.258 29.2 / 0.5)
    a handful of CSS named colors

Every operation returns a new ``Color``; instances are never modified.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from surfacecss._numeric import clamp, format_number, round_half_up

__all__ = ["Color", "ShadowPair", "NAMED_COLORS"]

_NUM = r"(?:\d+(?:\.\d+)?|\.\d+)"

_OKLCH_RE = re.compile(
    rf"""
    ^oklch\(\s*
    (?P<l>{_NUM}%?)\s+                  # lightness, fraction or percent
    (?P<c>{_NUM})\s+                    # chroma
    (?P<h>{_NUM})(?:deg)?\s*            # hue angle
    (?:/\s*(?P<a>{_NUM}%?))?\s*         # optional alpha
    \)$
    """,
    re.VERBOSE | re.IGNORECASE,
)

_HSL_RE = re.compile(
    rf"""
    ^hsla?\(\s*
    (?P<h>{_NUM})(?:deg)?\s*[,\s]\s*
    (?P<s>{_NUM})%\s*[,\s]\s*
    (?P<l>{_NUM})%\s*
    (?:[,/]\s*(?P<a>{_NUM}%?))?\s*
    \)$
    """,
    re.VERBOSE | re.IGNORECASE,
)

_RGB_RE = re.compile(
    rf"""
    ^rgba?\(\s*
    (?P<r>{_NUM})\s*[,\s]\s*
    (?P<g>{_NUM})\s*[,\s]\s*
    (?P<b>{_NUM})\s*
    (?:[,/]\s*(?P<a>{_NUM}%?))?\s*
    \)$
    """,
    re.VERBOSE | re.IGNORECASE,
)

_HEX_RE = re.compile(r"^#?(?P<digits>[0-9a-fA-F]+)$")

NAMED_COLORS: dict[str, str] = {
    "white": "#ffffff",
    "black": "#000000",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "transparent": "#00000000",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "grey": "#808080",
    "navy": "#000080",
    "teal": "#008080",
}


def _alpha(raw: str | None) -> float:
    """Decode an alpha component written as a fraction or a percentage."""
    if not raw:
        return 1.0
    if raw.endswith("%"):
        return float(raw[:-1]) / 100
    return float(raw)


def _linearize(channel: int) -> float:
    value = channel / 255
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def _gamma_encode(linear: float) -> float:
    if linear <= 0.0031308:
        return 12.92 * linear
    return 1.055 * max(0.0, linear) ** (1 / 2.4) - 0.055


@dataclass(frozen=True)
class ShadowPair:
    """Light and dark shadow colors suggested for a neumorphic surface."""

    light: Color
    dark: Color


@dataclass(frozen=True)
class Color:
    """An sRGB color with 8-bit channels and a fractional alpha.

    The constructor rounds and clamps every channel, so ``r``, ``g`` and ``b``
    are always integers in [0, 255] and ``a`` is in [0, 1].
    """

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", round_half_up(clamp(self.r, 0, 255)))
        object.__setattr__(self, "g", round_half_up(clamp(self.g, 0, 255)))
        object.__setattr__(self, "b", round_half_up(clamp(self.b, 0, 255)))
        object.__setattr__(self, "a", float(clamp(self.a, 0.0, 1.0)))

    # --- constructors ---------------------------------------------------------

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        return cls(r, g, b, a)  # type: ignore[arg-type]

    @classmethod
    def from_hex(cls, value: str) -> Color | None:
        """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

        Short forms double each digit. Returns None for anything else.
        """
        match = _HEX_RE.match(value.strip())
        if match is None:
            return None
        digits = match.group("digits")
        if len(digits) in (3, 4):
            digits = "".join(d * 2 for d in digits)
        elif len(digits) not in (6, 8):
            return None
        r = int(digits[0:2], 16)
        g = int(digits[2:4], 16)
        b = int(digits[4:6], 16)
        a = int(digits[6:8], 16) if len(digits) == 8 else 255
        return cls(r, g, b, a / 255)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> Color:
        """Build a color from hue (degrees), saturation and lightness (percent)."""
        h = h % 360 if math.isfinite(h) else 0.0
        sn = clamp(s, 0, 100) / 100
        ln = clamp(l, 0, 100) / 100
        chroma = (1 - abs(2 * ln - 1)) * sn
        x = chroma * (1 - abs((h / 60) % 2 - 1))
        m = ln - chroma / 2

        if h < 60:
            r, g, b = chroma, x, 0.0
        elif h < 120:
            r, g, b = x, chroma, 0.0
        elif h < 180:
            r, g, b = 0.0, chroma, x
        elif h < 240:
            r, g, b = 0.0, x, chroma
        elif h < 300:
            r, g, b = x, 0.0, chroma
        else:
            r, g, b = chroma, 0.0, x

        return cls((r + m) * 255, (g + m) * 255, (b + m) * 255, a)  # type: ignore[arg-type]

    @classmethod
    def from_oklch(cls, lightness: float, chroma: float, hue: float, a: float = 1.0) -> Color:
        """Convert OKLCH (lightness as a 0-1 fraction) to sRGB.

        Lightness is clamped to [0, 1] and chroma to [0, 1]; out-of-gamut
        results are clamped per channel.
        """
        lightness = clamp(lightness, 0.0, 1.0)
        chroma = clamp(chroma, 0.0, 1.0)
        h_rad = math.radians(hue % 360 if math.isfinite(hue) else 0.0)
        ok_a = chroma * math.cos(h_rad)
        ok_b = chroma * math.sin(h_rad)

        l_ = lightness + 0.3963377774 * ok_a + 0.2158037573 * ok_b
        m_ = lightness - 0.1055613458 * ok_a - 0.0638541728 * ok_b
        s_ = lightness - 0.0894841775 * ok_a - 1.2914855480 * ok_b

        l3, m3, s3 = l_**3, m_**3, s_**3

        r_lin = 4.0767416621 * l3 - 3.3077115913 * m3 + 0.2309699292 * s3
        g_lin = -1.2684380046 * l3 + 2.6097574011 * m3 - 0.3413193965 * s3
        b_lin = -0.0041960863 * l3 - 0.7034186147 * m3 + 1.7076147010 * s3

        return cls(
            _gamma_encode(r_lin) * 255,  # type: ignore[arg-type]
            _gamma_encode(g_lin) * 255,  # type: ignore[arg-type]
            _gamma_encode(b_lin) * 255,  # type: ignore[arg-type]
            a,
        )

    @classmethod
    def parse(cls, value: str) -> Color | None:
        """Parse any supported color syntax; None when nothing matches."""
        v = value.strip()
        if not v:
            return None

        if v.startswith("#"):
            return cls.from_hex(v)

        m = _OKLCH_RE.match(v)
        if m:
            raw_l = m.group("l")
            lightness = float(raw_l[:-1]) / 100 if raw_l.endswith("%") else float(raw_l)
            return cls.from_oklch(
                lightness, float(m.group("c")), float(m.group("h")), _alpha(m.group("a"))
            )

        m = _HSL_RE.match(v)
        if m:
            return cls.from_hsl(
                float(m.group("h")),
                float(m.group("s")),
                float(m.group("l")),
                _alpha(m.group("a")),
            )

        m = _RGB_RE.match(v)
        if m:
            return cls.from_rgba(
                float(m.group("r")),
                float(m.group("g")),
                float(m.group("b")),
                _alpha(m.group("a")),
            )

        named = NAMED_COLORS.get(v.lower())
        if named is not None:
            return cls.from_hex(named)
        return None

    # --- formatting -----------------------------------------------------------

    def to_hex(self) -> str:
        """Opaque ``#rrggbb``; alpha is dropped."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_rgba_string(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {format_number(self.a)})"

    def to_rgba_string_with_alpha(self, alpha: float) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {clamp(alpha, 0.0, 1.0):.2f})"

    # --- transforms -----------------------------------------------------------

    def _to_hsl(self) -> tuple[int, int, int]:
        r, g, b = self.r / 255, self.g / 255, self.b / 255
        high, low = max(r, g, b), min(r, g, b)
        lightness = (high + low) / 2
        delta = high - low
        if delta == 0:
            return 0, 0, round_half_up(lightness * 100)

        saturation = delta / (1 - abs(2 * lightness - 1))
        if high == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6
        return (
            round_half_up(hue * 360),
            round_half_up(saturation * 100),
            round_half_up(lightness * 100),
        )

    def lighten(self, amount: float) -> Color:
        """Raise HSL lightness by ``amount * 100`` points."""
        h, s, l = self._to_hsl()
        return Color.from_hsl(h, s, clamp(l + amount * 100, 0, 100), self.a)

    def darken(self, amount: float) -> Color:
        """Lower HSL lightness by ``amount * 100`` points."""
        h, s, l = self._to_hsl()
        return Color.from_hsl(h, s, clamp(l - amount * 100, 0, 100), self.a)

    def with_alpha(self, a: float) -> Color:
        return Color.from_rgba(self.r, self.g, self.b, clamp(a, 0.0, 1.0))

    # --- WCAG -----------------------------------------------------------------

    def relative_luminance(self) -> float:
        """WCAG 2.1 relative luminance in [0, 1]."""
        return (
            0.2126 * _linearize(self.r)
            + 0.7152 * _linearize(self.g)
            + 0.0722 * _linearize(self.b)
        )

    def contrast_with(self, other: Color) -> float:
        """WCAG contrast ratio between two colors, in [1, 21]."""
        l1 = self.relative_luminance()
        l2 = other.relative_luminance()
        lighter, darker = max(l1, l2), min(l1, l2)
        return clamp((lighter + 0.05) / (darker + 0.05), 1.0, 21.0)

    def generate_neumorphism_shadows(self, intensity: float) -> ShadowPair:
        """Suggest the light/dark shadow pair for a surface of this color."""
        h, s, l = self._to_hsl()
        delta = intensity / 100 * 32
        light = Color.from_hsl(h, max(0, s - 5), clamp(l + delta, 0, 100))
        dark = Color.from_hsl(h, min(100, s + 8), clamp(l - delta, 0, 100))
        return ShadowPair(light=light, dark=dark)
