"""Extractors for the translucent modes: liquid-glass and glassmorphism."""

from __future__ import annotations

import dataclasses

from surfacecss.config import EngineConfig
from surfacecss.extractors.common import (
    Lookup,
    Updates,
    read_backdrop_filter,
    read_background,
    read_border,
    read_border_radius,
    read_opacity,
    read_shadow_layers,
)
from surfacecss.model.diagnostic import Diagnostic
from surfacecss.model.settings import GlassmorphismSettings, LiquidGlassSettings


def _read_drop_shadow(
    get: Lookup, diagnostics: list[Diagnostic], *, with_spread: bool
) -> Updates:
    """The first non-inset ``box-shadow`` layer is the drop shadow."""
    _, layers = read_shadow_layers(get, diagnostics)
    shadow = next((layer for layer in layers if not layer.inset), None)
    if shadow is None:
        return {}
    updates: Updates = {
        "shadow_x": shadow.x,
        "shadow_y": shadow.y,
        "shadow_blur": shadow.blur,
    }
    if with_spread and shadow.spread is not None:
        updates["shadow_spread"] = shadow.spread
    if shadow.color is not None:
        updates["shadow_color"] = shadow.color
    if shadow.alpha is not None:
        updates["shadow_alpha"] = shadow.alpha
    return updates


def _read_glass(
    get: Lookup,
    diagnostics: list[Diagnostic],
    config: EngineConfig,
    *,
    liquid: bool,
) -> Updates:
    updates: Updates = {}
    updates.update(read_background(get, diagnostics))
    updates.update(
        read_backdrop_filter(get, diagnostics, config.base_font_px, with_brightness=liquid)
    )
    updates.update(read_border_radius(get, diagnostics, config.base_font_px))
    updates.update(read_border(get, diagnostics, config.base_font_px))
    updates.update(_read_drop_shadow(get, diagnostics, with_spread=liquid))
    updates.update(read_opacity(get, diagnostics))
    return updates


def extract_liquid_glass(
    get: Lookup,
    current: LiquidGlassSettings,
    diagnostics: list[Diagnostic],
    config: EngineConfig,
) -> LiquidGlassSettings:
    return dataclasses.replace(current, **_read_glass(get, diagnostics, config, liquid=True))


def extract_glassmorphism(
    get: Lookup,
    current: GlassmorphismSettings,
    diagnostics: list[Diagnostic],
    config: EngineConfig,
) -> GlassmorphismSettings:
    return dataclasses.replace(current, **_read_glass(get, diagnostics, config, liquid=False))
