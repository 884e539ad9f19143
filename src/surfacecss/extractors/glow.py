"""Extractor for the glow mode."""

from __future__ import annotations

import dataclasses

from surfacecss._numeric import round_half_up
from surfacecss.config import EngineConfig
from surfacecss.extractors.common import (
    Lookup,
    Updates,
    read_backdrop_filter,
    read_background,
    read_border,
    read_border_radius,
    read_shadow_layers,
)
from surfacecss.model.diagnostic import Diagnostic
from surfacecss.model.settings import GlowSettings

# The generator writes the outer layer's alpha as intensity * 0.6; decoding
# must use the same factor.
GLOW_ALPHA_FACTOR = 0.6


def _read_glow_layers(get: Lookup, diagnostics: list[Diagnostic]) -> Updates:
    """Outer glow = non-inset layer with the largest blur; inner glow = an inset layer."""
    _, layers = read_shadow_layers(get, diagnostics)
    updates: Updates = {}

    outer_layers = [layer for layer in layers if not layer.inset]
    if outer_layers:
        outer = max(outer_layers, key=lambda layer: layer.blur)
        if outer.color is not None:
            updates["glow_color"] = outer.color
        updates["glow_blur"] = round_half_up(outer.blur)
        if outer.spread is not None:
            updates["glow_spread"] = round_half_up(outer.spread)
        if outer.alpha is not None:
            updates["glow_intensity"] = round_half_up(outer.alpha / GLOW_ALPHA_FACTOR)

    inner = next((layer for layer in layers if layer.inset), None)
    if inner is not None:
        updates["inner_glow"] = round_half_up(inner.blur)
    return updates


def extract_glow(
    get: Lookup,
    current: GlowSettings,
    diagnostics: list[Diagnostic],
    config: EngineConfig,
) -> GlowSettings:
    updates: Updates = {}
    updates.update(read_background(get, diagnostics))
    updates.update(
        read_backdrop_filter(get, diagnostics, config.base_font_px, with_brightness=True)
    )
    updates.update(read_border_radius(get, diagnostics, config.base_font_px))
    updates.update(read_border(get, diagnostics, config.base_font_px))
    updates.update(_read_glow_layers(get, diagnostics))
    return dataclasses.replace(current, **updates)
