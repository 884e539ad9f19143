"""Property registry: the per-mode CSS vocabulary and numeric setting ranges.

These tables are the only source for deciding whether a property is
recognized (ghost classification) and what bounds a numeric field has
(clamping). They are read-only mappings built once at import time.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from surfacecss.model.settings import SETTINGS_TYPES, EffectMode, FieldKind, field_kind

__all__ = [
    "PROPERTIES_BY_MODE",
    "SETTING_RANGES",
    "SETTING_FIELDS",
    "FieldSpec",
    "is_known_property",
    "range_for",
]

Range = tuple[float, float]


def _freeze(table: dict[EffectMode, dict]) -> Mapping[EffectMode, Mapping]:
    return MappingProxyType({mode: MappingProxyType(inner) for mode, inner in table.items()})


# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------

PROPERTIES_BY_MODE: Mapping[EffectMode, Mapping[str, str]] = _freeze({
    EffectMode.LIQUID_GLASS: {
        "background": "Background color and opacity",
        "backdrop-filter": "Blur, saturation, and brightness filters",
        "-webkit-backdrop-filter": "WebKit prefix for backdrop-filter",
        "border-radius": "Corner rounding (px)",
        "border": "Border shorthand (width style color)",
        "box-shadow": "Drop shadow layers",
        "opacity": "Element-level opacity",
    },
    EffectMode.GLASSMORPHISM: {
        "background": "Background color and opacity",
        "backdrop-filter": "Blur and saturation filters",
        "-webkit-backdrop-filter": "WebKit prefix for backdrop-filter",
        "border-radius": "Corner rounding (px)",
        "border": "Border shorthand",
        "box-shadow": "Drop shadow",
        "opacity": "Element-level opacity",
    },
    EffectMode.NEUMORPHISM: {
        "background": "Background color or shape gradient",
        "border-radius": "Corner rounding (px)",
        "box-shadow": "Dual-shadow for 3-D depth",
    },
    EffectMode.GLOW: {
        "background": "Background color and opacity",
        "backdrop-filter": "Blur, saturation, and brightness filters",
        "-webkit-backdrop-filter": "WebKit prefix for backdrop-filter",
        "border-radius": "Corner rounding (px)",
        "border": "Border shorthand (width style color)",
        "box-shadow": "Glow shadow layers (outer + inner)",
        "opacity": "Element-level opacity",
    },
})


# ---------------------------------------------------------------------------
# Numeric ranges (used by the clamp pass only)
# ---------------------------------------------------------------------------

SETTING_RANGES: Mapping[EffectMode, Mapping[str, Range]] = _freeze({
    EffectMode.LIQUID_GLASS: {
        "blur": (0, 60),
        "opacity": (0, 100),
        "border_radius": (0, 50),
        "bg_alpha": (0, 100),
        "border_alpha": (0, 100),
        "border_width": (0, 5),
        "refraction_intensity": (0, 100),
        "shadow_x": (-20, 20),
        "shadow_y": (-20, 20),
        "shadow_blur": (0, 80),
        "shadow_spread": (-20, 20),
        "shadow_alpha": (0, 100),
        "saturation": (50, 200),
        "brightness": (50, 200),
    },
    EffectMode.GLASSMORPHISM: {
        "blur": (0, 50),
        "opacity": (0, 100),
        "border_radius": (0, 50),
        "bg_alpha": (0, 100),
        "border_alpha": (0, 100),
        "border_width": (0, 5),
        "shadow_x": (-20, 20),
        "shadow_y": (-20, 20),
        "shadow_blur": (0, 60),
        "shadow_alpha": (0, 100),
        "saturation": (50, 200),
    },
    EffectMode.NEUMORPHISM: {
        "border_radius": (0, 50),
        "distance": (1, 20),
        "intensity": (1, 50),
        "blur": (1, 40),
    },
    EffectMode.GLOW: {
        "border_radius": (0, 100),
        "bg_alpha": (0, 100),
        "glow_intensity": (0, 100),
        "glow_spread": (0, 100),
        "glow_blur": (0, 200),
        "inner_glow": (0, 100),
        "border_alpha": (0, 100),
        "border_width": (0, 5),
        "blur": (0, 40),
        "saturation": (50, 300),
        "brightness": (50, 300),
    },
})


# ---------------------------------------------------------------------------
# Field descriptors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldSpec:
    """Name, kind and (for ranged numeric fields) bounds of a settings field."""

    name: str
    kind: FieldKind
    range: Range | None = None


def _build_field_specs() -> Mapping[EffectMode, tuple[FieldSpec, ...]]:
    table: dict[EffectMode, tuple[FieldSpec, ...]] = {}
    for mode, cls in SETTINGS_TYPES.items():
        ranges = SETTING_RANGES[mode]
        specs = []
        for f in dataclasses.fields(cls):
            kind = field_kind(f)
            if f.name in ranges and kind is not FieldKind.NUMERIC:
                raise TypeError(f"{mode}: range declared for non-numeric field {f.name!r}")
            specs.append(FieldSpec(name=f.name, kind=kind, range=ranges.get(f.name)))
        unknown = set(ranges) - {s.name for s in specs}
        if unknown:
            raise TypeError(f"{mode}: ranges for unknown fields {sorted(unknown)}")
        table[mode] = tuple(specs)
    return MappingProxyType(table)


SETTING_FIELDS: Mapping[EffectMode, tuple[FieldSpec, ...]] = _build_field_specs()


def is_known_property(mode: EffectMode, prop: str) -> bool:
    return prop in PROPERTIES_BY_MODE[mode]


def range_for(mode: EffectMode, field_name: str) -> Range | None:
    return SETTING_RANGES[mode].get(field_name)
