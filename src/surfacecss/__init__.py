"""surfacecss: parse effect CSS back into validated, range-bounded settings."""

from surfacecss.config import DEFAULT_CONFIG, EngineConfig
from surfacecss.engine import parse_and_validate_css
from surfacecss.generators import GeneratedCSS, generate_css
from surfacecss.model import (
    DEFAULT_SETTINGS,
    AccessibilityInfo,
    Color,
    CSSDeclaration,
    Diagnostic,
    EffectMode,
    GhostProperty,
    GlassmorphismSettings,
    GlowSettings,
    LiquidGlassSettings,
    NeumorphismSettings,
    NeuShape,
    ParseResult,
    Settings,
    SettingsError,
    Severity,
    settings_from_dict,
    settings_to_dict,
)
from surfacecss.parser import ParseError, walk_css

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # orchestration
    "parse_and_validate_css",
    "walk_css",
    "generate_css",
    "GeneratedCSS",
    "ParseError",
    # configuration
    "EngineConfig",
    "DEFAULT_CONFIG",
    # model
    "AccessibilityInfo",
    "Color",
    "CSSDeclaration",
    "Diagnostic",
    "EffectMode",
    "GhostProperty",
    "GlassmorphismSettings",
    "GlowSettings",
    "LiquidGlassSettings",
    "NeumorphismSettings",
    "NeuShape",
    "ParseResult",
    "Settings",
    "SettingsError",
    "Severity",
    "DEFAULT_SETTINGS",
    "settings_from_dict",
    "settings_to_dict",
]
