"""Settings -> CSS generators, one per effect mode, plus the built-in presets.

The parser's decode constants (the glow alpha factor, the neumorphism
gradient angles) mirror the encoding used here; change both together.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Callable, Mapping

from surfacecss._numeric import format_number, round_half_up
from surfacecss.model.color import Color
from surfacecss.model.settings import (
    DEFAULT_SETTINGS,
    EffectMode,
    GlassmorphismSettings,
    GlowSettings,
    LiquidGlassSettings,
    NeumorphismSettings,
    NeuShape,
    Settings,
    SettingsError,
    ensure_settings,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "GENERATORS",
    "GeneratedCSS",
    "PRESETS",
    "Preset",
    "generate_css",
    "generate_glassmorphism_css",
    "generate_glow_css",
    "generate_liquid_glass_css",
    "generate_neumorphism_css",
    "get_preset",
]


@dataclass(frozen=True)
class GeneratedCSS:
    """A full CSS rule plus the property -> value pairs it declares."""

    css: str
    properties: dict[str, str]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rgb(hex_color: str) -> Color:
    color = Color.parse(hex_color)
    if color is None:
        raise SettingsError(f"Invalid color: {hex_color!r}")
    return color


def _rgba(color: Color, alpha: str) -> str:
    return f"rgba({color.r}, {color.g}, {color.b}, {alpha})"


def _px(value: float) -> str:
    return f"{format_number(value)}px"


def _fraction(percent: float) -> str:
    """``12`` -> ``0.12``."""
    return format_number(percent / 100)


def _shift(hex_color: str, amount: int) -> str:
    # Channels saturate at 0 and 255 through the Color constructor.
    color = _rgb(hex_color)
    shifted = Color.from_rgba(color.r + amount, color.g + amount, color.b + amount)
    return f"rgb({shifted.r}, {shifted.g}, {shifted.b})"


def _lighten(hex_color: str, percent: float) -> str:
    return _shift(hex_color, round_half_up(2.55 * percent))


def _darken(hex_color: str, percent: float) -> str:
    return _shift(hex_color, -round_half_up(2.55 * percent))


def _to_oklch(color: Color) -> str:
    """Approximate ``oklch()`` notation for a color, used in comments."""

    def linear(channel: int) -> float:
        s = channel / 255
        return s / 12.92 if s <= 0.04045 else ((s + 0.055) / 1.055) ** 2.4

    lr, lg, lb = linear(color.r), linear(color.g), linear(color.b)
    l_ = 0.4122214708 * lr + 0.5363325363 * lg + 0.0514459929 * lb
    m_ = 0.2119034982 * lr + 0.6806995451 * lg + 0.1073969566 * lb
    s_ = 0.0883024619 * lr + 0.2817188376 * lg + 0.6299787005 * lb
    l3, m3, s3 = (math.copysign(abs(v) ** (1 / 3), v) for v in (l_, m_, s_))

    lightness = 0.2104542553 * l3 + 0.7936177850 * m3 - 0.0040720468 * s3
    a = 1.9779984951 * l3 - 2.4285922050 * m3 + 0.4505937099 * s3
    b = 0.0259040371 * l3 + 0.7827717662 * m3 - 0.8086757660 * s3
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += 360
    return f"oklch({lightness * 100:.1f}% {chroma:.3f} {hue:.1f})"


def _rule(selector: str, properties: Mapping[str, str], comment: str | None = None) -> str:
    lines = [f"{selector} {{"]
    if comment:
        lines.append(f"  /* {comment} */")
    lines.extend(f"  {prop}: {value};" for prop, value in properties.items())
    lines.append("}")
    return "\n".join(lines)


def _border(width: float, color: str, alpha: float) -> str:
    return f"{_px(width)} solid {_rgba(_rgb(color), _fraction(alpha))}"


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


def generate_liquid_glass_css(s: LiquidGlassSettings) -> GeneratedCSS:
    shadow = _rgb(s.shadow_color)
    backdrop = (
        f"blur({_px(s.blur)}) saturate({format_number(s.saturation)}%) "
        f"brightness({format_number(s.brightness)}%)"
    )
    properties = {
        "background": _rgba(_rgb(s.bg_color), _fraction(s.bg_alpha)),
        "backdrop-filter": backdrop,
        "-webkit-backdrop-filter": backdrop,
        "border-radius": _px(s.border_radius),
        "border": _border(s.border_width, s.border_color, s.border_alpha),
        "box-shadow": (
            f"{_px(s.shadow_x)} {_px(s.shadow_y)} {_px(s.shadow_blur)} {_px(s.shadow_spread)} "
            f"{_rgba(shadow, _fraction(s.shadow_alpha))}"
        ),
    }
    return GeneratedCSS(css=_rule(".liquid-glass", properties), properties=properties)


def generate_glassmorphism_css(s: GlassmorphismSettings) -> GeneratedCSS:
    shadow = _rgb(s.shadow_color)
    backdrop = f"blur({_px(s.blur)}) saturate({format_number(s.saturation)}%)"
    properties = {
        "background": _rgba(_rgb(s.bg_color), _fraction(s.bg_alpha)),
        "backdrop-filter": backdrop,
        "-webkit-backdrop-filter": backdrop,
        "border-radius": _px(s.border_radius),
        "border": _border(s.border_width, s.border_color, s.border_alpha),
        "box-shadow": (
            f"{_px(s.shadow_x)} {_px(s.shadow_y)} {_px(s.shadow_blur)} "
            f"{_rgba(shadow, _fraction(s.shadow_alpha))}"
        ),
    }
    return GeneratedCSS(css=_rule(".glassmorphism", properties), properties=properties)


def generate_neumorphism_css(s: NeumorphismSettings) -> GeneratedCSS:
    light = _rgb(s.light_color)
    dark = _rgb(s.dark_color)
    d = format_number(s.distance)
    blur = _px(s.blur)
    alpha = _fraction(s.intensity)

    inset = "inset " if s.shape is NeuShape.PRESSED else ""
    shadow = (
        f"{inset}{d}px {d}px {blur} {_rgba(dark, alpha)}, "
        f"{inset}-{d}px -{d}px {blur} {_rgba(light, alpha)}"
    )

    if s.shape is NeuShape.CONCAVE:
        background = f"linear-gradient(145deg, {_darken(s.bg_color, 5)}, {_lighten(s.bg_color, 5)})"
    elif s.shape is NeuShape.CONVEX:
        background = f"linear-gradient(145deg, {_lighten(s.bg_color, 5)}, {_darken(s.bg_color, 5)})"
    else:
        background = s.bg_color

    properties = {
        "border-radius": _px(s.border_radius),
        "background": background,
        "box-shadow": shadow,
    }
    return GeneratedCSS(css=_rule(".neumorphism", properties), properties=properties)


def generate_glow_css(s: GlowSettings) -> GeneratedCSS:
    glow = _rgb(s.glow_color)
    intensity = s.glow_intensity / 100

    layers = [
        f"0 0 {_px(s.glow_blur)} {_px(s.glow_spread)} {_rgba(glow, f'{intensity * 0.6:.2f}')}",
        (
            f"0 0 {_px(round_half_up(s.glow_blur * 0.5))} {_px(round_half_up(s.glow_spread * 0.4))} "
            f"{_rgba(glow, f'{intensity * 0.3:.2f}')}"
        ),
    ]
    if s.inner_glow > 0:
        layers.append(
            f"inset 0 0 {_px(round_half_up(s.inner_glow * 0.8))} "
            f"{_rgba(glow, f'{s.inner_glow / 100 * 0.5:.2f}')}"
        )

    backdrop = (
        f"blur({_px(s.blur)}) saturate({format_number(s.saturation)}%) "
        f"brightness({format_number(s.brightness)}%)"
    )
    properties = {
        "background": _rgba(_rgb(s.bg_color), _fraction(s.bg_alpha)),
        "border-radius": _px(s.border_radius),
        "border": _border(s.border_width, s.border_color, s.border_alpha),
        "box-shadow": ", ".join(layers),
        "backdrop-filter": backdrop,
        "-webkit-backdrop-filter": backdrop,
    }
    css = _rule(".glow", properties, comment=f"Glow color in oklch: {_to_oklch(glow)}")
    return GeneratedCSS(css=css, properties=properties)


GENERATORS: Mapping[EffectMode, Callable[..., GeneratedCSS]] = {
    EffectMode.LIQUID_GLASS: generate_liquid_glass_css,
    EffectMode.GLASSMORPHISM: generate_glassmorphism_css,
    EffectMode.NEUMORPHISM: generate_neumorphism_css,
    EffectMode.GLOW: generate_glow_css,
}


def generate_css(mode: EffectMode | str, settings: Settings | None = None) -> GeneratedCSS:
    """Render *settings* (or the mode defaults) as a CSS rule.

    Raises :class:`SettingsError` for an unknown mode, a settings record of
    the wrong type, or a color field that cannot be parsed.
    """
    try:
        mode = EffectMode(mode)
    except ValueError as exc:
        raise SettingsError(f"Unknown effect mode: {mode!r}") from exc
    if settings is None:
        settings = DEFAULT_SETTINGS[mode]
    return GENERATORS[mode](ensure_settings(mode, settings))


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Preset:
    id: str
    name: str
    mode: EffectMode
    color: str  # swatch shown next to the preset name
    settings: Settings


def _preset(id: str, name: str, mode: EffectMode, color: str, **overrides: object) -> Preset:
    settings = dataclasses.replace(DEFAULT_SETTINGS[mode], **overrides)
    return Preset(id=id, name=name, mode=mode, color=color, settings=settings)


_LG = EffectMode.LIQUID_GLASS
_GM = EffectMode.GLASSMORPHISM
_GLOW = EffectMode.GLOW

PRESETS: tuple[Preset, ...] = (
    _preset("liquid-crystal", "Liquid Crystal", _LG, "#a78bfa",
            blur=24, bg_alpha=8, saturation=140, brightness=115),
    _preset("fluid-amber", "Fluid Amber", _LG, "#f59e0b",
            bg_color="#f59e0b", bg_alpha=15, blur=18),
    _preset("ice-ripple", "Ice Ripple", _GM, "#67e8f9",
            bg_color="#67e8f9", bg_alpha=8, blur=20),
    _preset("mercury-drop", "Mercury Drop", _LG, "#94a3b8",
            bg_color="#94a3b8", bg_alpha=18, refraction_intensity=50),
    _preset("ocean-wave", "Ocean Wave", _GM, "#3b82f6",
            bg_color="#3b82f6", bg_alpha=12, blur=22),
    _preset("crystal-mist", "Crystal Mist", _GM, "#e2e8f0",
            bg_color="#e2e8f0", bg_alpha=6, blur=28),
    _preset("molten-glass", "Molten Glass", _LG, "#ef4444",
            bg_color="#ef4444", bg_alpha=14, brightness=120),
    _preset("silk-veil", "Silk Veil", _GM, "#f0abfc",
            bg_color="#f0abfc", bg_alpha=10, blur=14),
    _preset("plasma-flow", "Plasma Flow", _LG, "#8b5cf6",
            bg_color="#8b5cf6", bg_alpha=16, saturation=150),
    _preset("frost-lens", "Frost Lens", _GM, "#bfdbfe",
            bg_color="#bfdbfe", bg_alpha=8, blur=30),
    _preset("aurora-gel", "Aurora Gel", _LG, "#34d399",
            bg_color="#34d399", bg_alpha=12, saturation=130),
    _preset("nebula-prism", "Nebula Prism", _LG, "#ec4899",
            bg_color="#ec4899", bg_alpha=14, brightness=115),
    _preset("solar-flare", "Solar Flare", _GLOW, "#facc15"),
    _preset("neon-pulse", "Neon Pulse", _GLOW, "#22d3ee",
            glow_color="#22d3ee", border_color="#22d3ee", bg_color="#0a192f"),
    _preset("ember-ring", "Ember Ring", _GLOW, "#f97316",
            glow_color="#f97316", border_color="#f97316", glow_intensity=70, inner_glow=30),
    _preset("toxic-haze", "Toxic Haze", _GLOW, "#4ade80",
            glow_color="#4ade80", border_color="#4ade80", bg_color="#0d1117", glow_blur=80),
)


def get_preset(preset_id: str) -> Preset:
    for preset in PRESETS:
        if preset.id == preset_id:
            return preset
    raise KeyError(preset_id)
