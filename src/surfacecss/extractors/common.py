"""Declaration readers shared by several effect modes.

Each reader looks up one property, runs the matching sub-parser and returns
a dict of settings-field updates (empty when the property is absent or
yields nothing). Readers append warnings for values they cannot read.
"""

from __future__ import annotations

from typing import Any, Callable

from surfacecss._numeric import format_number, round_half_up
from surfacecss.model.color import Color
from surfacecss.model.declaration import CSSDeclaration
from surfacecss.model.diagnostic import Diagnostic, Severity
from surfacecss.extractors.values import (
    ParsedShadow,
    parse_backdrop_filter,
    parse_border,
    parse_opacity,
    parse_shadow_layer,
    split_shadow_layers,
)
from surfacecss.units import parse_with_unit

Lookup = Callable[[str], CSSDeclaration | None]
Updates = dict[str, Any]


def unparseable(decl: CSSDeclaration, what: str) -> Diagnostic:
    return Diagnostic(
        message=f"Could not parse '{decl.property}' {what}: \"{decl.value}\"",
        severity=Severity.WARNING,
        line=decl.line,
        column=decl.column,
        property=decl.property,
        rule="unparseable-value",
    )


def read_background(get: Lookup, diagnostics: list[Diagnostic]) -> Updates:
    """``background`` as a plain color -> bg_color / bg_alpha."""
    decl = get("background")
    if decl is None:
        return {}
    color = Color.parse(decl.value)
    if color is None:
        diagnostics.append(unparseable(decl, "color value"))
        return {}
    return {"bg_color": color.to_hex(), "bg_alpha": round_half_up(color.a * 100)}


def read_backdrop_filter(
    get: Lookup,
    diagnostics: list[Diagnostic],
    base_font_px: float,
    *,
    with_brightness: bool,
) -> Updates:
    """``backdrop-filter`` (or its ``-webkit-`` alias) -> blur / saturation / brightness."""
    decl = get("backdrop-filter") or get("-webkit-backdrop-filter")
    if decl is None:
        return {}
    parsed = parse_backdrop_filter(decl.value, base_font_px)
    if parsed.empty:
        diagnostics.append(unparseable(decl, "filter list"))
        return {}
    updates: Updates = {}
    if parsed.blur is not None:
        updates["blur"] = parsed.blur
    if parsed.saturate is not None:
        updates["saturation"] = parsed.saturate
    if with_brightness and parsed.brightness is not None:
        updates["brightness"] = parsed.brightness
    return updates


def read_border_radius(
    get: Lookup,
    diagnostics: list[Diagnostic],
    base_font_px: float,
    *,
    report_conversion: bool = True,
) -> Updates:
    """First token of ``border-radius``, normalized to px."""
    decl = get("border-radius")
    if decl is None:
        return {}
    words = decl.value.split()
    parsed = parse_with_unit(words[0], base_font_px) if words else None
    if parsed is None:
        diagnostics.append(unparseable(decl, "length"))
        return {}
    if parsed.was_converted and report_conversion:
        diagnostics.append(
            Diagnostic(
                message=(
                    f"border-radius: converted {format_number(parsed.raw)}{parsed.unit}"
                    f" -> {format_number(parsed.px)}px"
                ),
                severity=Severity.INFO,
                line=decl.line,
                column=decl.column,
                property="border-radius",
                rule="unit-conversion",
            )
        )
    return {"border_radius": parsed.px}


def read_border(get: Lookup, diagnostics: list[Diagnostic], base_font_px: float) -> Updates:
    """``border`` shorthand -> border_width / border_color / border_alpha."""
    decl = get("border")
    if decl is None:
        return {}
    parsed = parse_border(decl.value, base_font_px)
    if parsed.empty:
        diagnostics.append(unparseable(decl, "shorthand"))
        return {}
    updates: Updates = {}
    if parsed.width is not None:
        updates["border_width"] = parsed.width
    if parsed.color is not None:
        updates["border_color"] = parsed.color
    if parsed.alpha is not None:
        updates["border_alpha"] = parsed.alpha
    return updates


def read_opacity(get: Lookup, diagnostics: list[Diagnostic]) -> Updates:
    decl = get("opacity")
    if decl is None:
        return {}
    value = parse_opacity(decl.value)
    if value is None:
        diagnostics.append(unparseable(decl, "value"))
        return {}
    return {"opacity": value}


def read_shadow_layers(
    get: Lookup, diagnostics: list[Diagnostic]
) -> tuple[CSSDeclaration | None, list[ParsedShadow]]:
    """Parse every ``box-shadow`` layer, dropping the ones that do not match.

    Warns when the property is present but no layer could be read.
    """
    decl = get("box-shadow")
    if decl is None:
        return None, []
    layers = [parse_shadow_layer(layer) for layer in split_shadow_layers(decl.value)]
    parsed = [layer for layer in layers if layer is not None]
    if not parsed:
        diagnostics.append(unparseable(decl, "shadow"))
    return decl, parsed
