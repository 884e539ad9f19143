"""surfacecss model layer -- public type re-exports."""

from surfacecss.model.color import NAMED_COLORS, Color, ShadowPair
from surfacecss.model.declaration import CSSDeclaration
from surfacecss.model.diagnostic import Diagnostic, Severity
from surfacecss.model.result import AccessibilityInfo, GhostProperty, ParseResult
from surfacecss.model.settings import (
    DEFAULT_SETTINGS,
    SETTINGS_TYPES,
    EffectMode,
    FieldKind,
    GlassmorphismSettings,
    GlowSettings,
    LiquidGlassSettings,
    NeumorphismSettings,
    NeuShape,
    Settings,
    SettingsError,
    ensure_settings,
    settings_from_dict,
    settings_to_dict,
)

__all__ = [
    # color
    "Color",
    "ShadowPair",
    "NAMED_COLORS",
    # declaration
    "CSSDeclaration",
    # diagnostic
    "Severity",
    "Diagnostic",
    # result
    "GhostProperty",
    "AccessibilityInfo",
    "ParseResult",
    # settings
    "EffectMode",
    "NeuShape",
    "FieldKind",
    "Settings",
    "SettingsError",
    "LiquidGlassSettings",
    "GlassmorphismSettings",
    "NeumorphismSettings",
    "GlowSettings",
    "SETTINGS_TYPES",
    "DEFAULT_SETTINGS",
    "ensure_settings",
    "settings_from_dict",
    "settings_to_dict",
]
