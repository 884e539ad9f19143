"""Settings model: one immutable record per effect mode.

Each field declares its kind (numeric, color or enum) in its dataclass
metadata; the registry combines these descriptors with the numeric ranges.
Defaults are the stock values the generator ships with.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import Any, Mapping, Union


class EffectMode(StrEnum):
    LIQUID_GLASS = "liquid-glass"
    GLASSMORPHISM = "glassmorphism"
    NEUMORPHISM = "neumorphism"
    GLOW = "glow"


class NeuShape(StrEnum):
    FLAT = "flat"
    CONCAVE = "concave"
    CONVEX = "convex"
    PRESSED = "pressed"


class FieldKind(Enum):
    NUMERIC = "numeric"
    COLOR = "color"
    ENUM = "enum"


class SettingsError(ValueError):
    """Raised when a settings record cannot be built or does not fit the mode."""


def _numeric(default: float) -> Any:
    return field(default=default, metadata={"kind": FieldKind.NUMERIC})


def _color(default: str) -> Any:
    return field(default=default, metadata={"kind": FieldKind.COLOR})


def _enum(default: Enum) -> Any:
    return field(default=default, metadata={"kind": FieldKind.ENUM})


@dataclass(frozen=True)
class LiquidGlassSettings:
    blur: float = _numeric(20)
    opacity: float = _numeric(80)
    border_radius: float = _numeric(16)
    bg_color: str = _color("#ffffff")
    bg_alpha: float = _numeric(12)
    border_color: str = _color("#ffffff")
    border_alpha: float = _numeric(20)
    border_width: float = _numeric(1)
    refraction_intensity: float = _numeric(30)
    shadow_x: float = _numeric(0)
    shadow_y: float = _numeric(8)
    shadow_blur: float = _numeric(32)
    shadow_spread: float = _numeric(0)
    shadow_color: str = _color("#000000")
    shadow_alpha: float = _numeric(25)
    saturation: float = _numeric(120)
    brightness: float = _numeric(110)


@dataclass(frozen=True)
class GlassmorphismSettings:
    blur: float = _numeric(16)
    opacity: float = _numeric(75)
    border_radius: float = _numeric(12)
    bg_color: str = _color("#ffffff")
    bg_alpha: float = _numeric(10)
    border_color: str = _color("#ffffff")
    border_alpha: float = _numeric(18)
    border_width: float = _numeric(1)
    shadow_x: float = _numeric(0)
    shadow_y: float = _numeric(4)
    shadow_blur: float = _numeric(30)
    shadow_color: str = _color("#000000")
    shadow_alpha: float = _numeric(20)
    saturation: float = _numeric(100)


@dataclass(frozen=True)
class NeumorphismSettings:
    border_radius: float = _numeric(16)
    bg_color: str = _color("#e0e5ec")
    distance: float = _numeric(6)
    intensity: float = _numeric(15)
    blur: float = _numeric(12)
    shape: NeuShape = _enum(NeuShape.FLAT)
    light_color: str = _color("#ffffff")
    dark_color: str = _color("#a3b1c6")


@dataclass(frozen=True)
class GlowSettings:
    border_radius: float = _numeric(24)
    bg_color: str = _color("#1a1a2e")
    bg_alpha: float = _numeric(85)
    glow_color: str = _color("#facc15")
    glow_intensity: float = _numeric(60)
    glow_spread: float = _numeric(30)
    glow_blur: float = _numeric(60)
    inner_glow: float = _numeric(20)
    border_color: str = _color("#facc15")
    border_alpha: float = _numeric(40)
    border_width: float = _numeric(1)
    blur: float = _numeric(8)
    saturation: float = _numeric(150)
    brightness: float = _numeric(110)


Settings = Union[LiquidGlassSettings, GlassmorphismSettings, NeumorphismSettings, GlowSettings]

SETTINGS_TYPES: Mapping[EffectMode, type] = {
    EffectMode.LIQUID_GLASS: LiquidGlassSettings,
    EffectMode.GLASSMORPHISM: GlassmorphismSettings,
    EffectMode.NEUMORPHISM: NeumorphismSettings,
    EffectMode.GLOW: GlowSettings,
}

DEFAULT_SETTINGS: Mapping[EffectMode, Settings] = {
    mode: cls() for mode, cls in SETTINGS_TYPES.items()
}


def field_kind(f: dataclasses.Field) -> FieldKind:  # type: ignore[type-arg]
    return f.metadata["kind"]


# --- (de)serialisation --------------------------------------------------------

_CAMEL_RE = re.compile(r"(?<!^)([A-Z])")


def _to_snake(key: str) -> str:
    return _CAMEL_RE.sub(r"_\1", key).lower()


def _to_camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def ensure_settings(mode: EffectMode, settings: object) -> Settings:
    """Check that *settings* is the record type *mode* works with."""
    expected = SETTINGS_TYPES[mode]
    if not isinstance(settings, expected):
        raise SettingsError(
            f"{mode} expects {expected.__name__}, got {type(settings).__name__}"
        )
    return settings  # type: ignore[return-value]


def settings_from_dict(
    mode: EffectMode | str, data: Mapping[str, Any], base: Settings | None = None
) -> Settings:
    """Build a settings record for *mode* from a plain mapping.

    Keys may be snake_case or camelCase. Missing keys keep the value from
    *base* (or the mode default); unknown keys raise :class:`SettingsError`.
    """
    try:
        mode = EffectMode(mode)
    except ValueError as exc:
        raise SettingsError(f"Unknown effect mode: {mode!r}") from exc

    cls = SETTINGS_TYPES[mode]
    seed = ensure_settings(mode, base) if base is not None else DEFAULT_SETTINGS[mode]
    fields = {f.name: f for f in dataclasses.fields(cls)}

    updates: dict[str, Any] = {}
    for raw_key, value in data.items():
        key = _to_snake(raw_key)
        if key not in fields:
            raise SettingsError(f"Unknown {mode} setting: {raw_key!r}")
        kind = field_kind(fields[key])
        try:
            if kind is FieldKind.NUMERIC:
                if isinstance(value, bool):
                    raise TypeError("booleans are not numbers")
                updates[key] = float(value)
            elif kind is FieldKind.ENUM:
                updates[key] = NeuShape(value)
            else:
                updates[key] = str(value)
        except (TypeError, ValueError) as exc:
            raise SettingsError(f"Invalid value for {raw_key!r}: {value!r}") from exc

    return dataclasses.replace(seed, **updates)


def settings_to_dict(settings: Settings, camel_case: bool = False) -> dict[str, Any]:
    """Flatten a settings record into JSON-ready values."""
    data: dict[str, Any] = {}
    for f in dataclasses.fields(settings):  # type: ignore[arg-type]
        value = getattr(settings, f.name)
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, float) and value.is_integer():
            value = int(value)
        data[_to_camel(f.name) if camel_case else f.name] = value
    return data
