"""Extractor for the neumorphism mode.

Soft-UI surfaces are described by a background (flat color or a diagonal
gradient hinting at the shape) and a pair of shadows: one darker and one
lighter than the surface.
"""

from __future__ import annotations

import dataclasses
import logging

from surfacecss._numeric import round_half_up
from surfacecss.config import EngineConfig
from surfacecss.extractors.common import (
    Lookup,
    Updates,
    read_border_radius,
    read_shadow_layers,
    unparseable,
)
from surfacecss.extractors.values import ParsedShadow, parse_gradient
from surfacecss.model.color import Color
from surfacecss.model.diagnostic import Diagnostic, Severity
from surfacecss.model.settings import NeumorphismSettings, NeuShape

logger = logging.getLogger(__name__)

# Gradient angles the generator uses for each shape, and the tolerance around them.
CONVEX_ANGLES = (135.0, 145.0)
CONCAVE_ANGLES = (315.0, 45.0)
ANGLE_TOLERANCE = 15.0


def shape_from_angle(angle: float) -> NeuShape | None:
    """Map a gradient angle in degrees to the neumorphic shape it suggests."""
    normalized = angle % 360
    if any(abs(normalized - a) < ANGLE_TOLERANCE for a in CONVEX_ANGLES):
        return NeuShape.CONVEX
    if any(abs(normalized - a) < ANGLE_TOLERANCE for a in CONCAVE_ANGLES):
        return NeuShape.CONCAVE
    return None


def _read_background(get: Lookup, diagnostics: list[Diagnostic]) -> Updates:
    decl = get("background")
    if decl is None:
        return {}

    if "linear-gradient" in decl.value.lower():
        gradient = parse_gradient(decl.value)
        updates: Updates = {}
        if gradient is not None:
            if gradient.angle is not None:
                shape = shape_from_angle(gradient.angle)
                if shape is not None:
                    updates["shape"] = shape
            if gradient.first_color is not None:
                updates["bg_color"] = gradient.first_color.to_hex()
        if "bg_color" not in updates:
            diagnostics.append(unparseable(decl, "gradient color stop"))
        return updates

    color = Color.parse(decl.value)
    if color is None:
        diagnostics.append(unparseable(decl, "color value"))
        return {}
    return {"bg_color": color.to_hex()}


def _luminance(hex_color: str | None) -> float | None:
    if hex_color is None:
        return None
    color = Color.from_hex(hex_color)
    return color.relative_luminance() if color is not None else None


def _pick_pair(
    layers: list[ParsedShadow], bg_luminance: float | None
) -> tuple[ParsedShadow | None, ParsedShadow | None]:
    """Choose the (dark, light) layers relative to the surface luminance.

    When no luminance comparison decides, the first layer counts as dark and
    the second as light.
    """

    def compare(layer: ParsedShadow, darker: bool) -> bool:
        lum = _luminance(layer.color)
        if lum is None or bg_luminance is None:
            return False
        return lum < bg_luminance if darker else lum > bg_luminance

    dark = next((layer for layer in layers if compare(layer, True)), None)
    if dark is None and layers:
        dark = layers[0]
    rest = [layer for layer in layers if layer is not dark]
    light = next((layer for layer in rest if compare(layer, False)), None)
    if light is None and rest:
        light = rest[0]
    return dark, light


def _read_shadows(
    get: Lookup, diagnostics: list[Diagnostic], bg_color: str, intensity: float
) -> Updates:
    decl, layers = read_shadow_layers(get, diagnostics)
    if decl is None:
        return {}

    updates: Updates = {}
    if any(word.lower() == "inset" for word in decl.value.replace(",", " ").split()):
        updates["shape"] = NeuShape.PRESSED

    # Pressed surfaces carry only inset layers; otherwise inset ones are ignored.
    candidates = [layer for layer in layers if not layer.inset] or layers
    dark, light = _pick_pair(candidates, _luminance(bg_color))

    if dark is not None:
        updates["distance"] = round_half_up(abs(dark.x or dark.y or 0))
        updates["blur"] = round_half_up(dark.blur)
        if dark.alpha is not None:
            updates["intensity"] = dark.alpha
            intensity = dark.alpha
        if dark.color is not None:
            updates["dark_color"] = dark.color
    if light is not None and light.color is not None:
        updates["light_color"] = light.color

    if dark is not None and light is None:
        surface = Color.from_hex(bg_color)
        if surface is not None:
            pair = surface.generate_neumorphism_shadows(intensity)
            logger.debug("single neumorphism shadow layer; suggesting %s", pair)
            diagnostics.append(
                Diagnostic(
                    message=(
                        "Only one shadow layer found. Auto-suggesting: "
                        f"light={pair.light.to_hex()}, dark={pair.dark.to_hex()} based on bgColor."
                    ),
                    severity=Severity.INFO,
                    line=decl.line,
                    column=decl.column,
                    property="box-shadow",
                    rule="shadow-suggestion",
                )
            )
    return updates


def extract_neumorphism(
    get: Lookup,
    current: NeumorphismSettings,
    diagnostics: list[Diagnostic],
    config: EngineConfig,
) -> NeumorphismSettings:
    updates: Updates = {}
    updates.update(
        read_border_radius(get, diagnostics, config.base_font_px, report_conversion=False)
    )
    updates.update(_read_background(get, diagnostics))
    bg_color = updates.get("bg_color", current.bg_color)
    updates.update(_read_shadows(get, diagnostics, bg_color, current.intensity))
    return dataclasses.replace(current, **updates)
