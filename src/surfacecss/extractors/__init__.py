"""Per-mode value extractors: map recognized declarations onto settings."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from surfacecss.config import EngineConfig
from surfacecss.extractors.common import Lookup
from surfacecss.extractors.glass import extract_glassmorphism, extract_liquid_glass
from surfacecss.extractors.glow import extract_glow
from surfacecss.extractors.neumorphism import extract_neumorphism
from surfacecss.model.diagnostic import Diagnostic
from surfacecss.model.settings import EffectMode, Settings, ensure_settings

__all__ = [
    "EXTRACTORS",
    "Lookup",
    "extract_settings",
    "extract_liquid_glass",
    "extract_glassmorphism",
    "extract_neumorphism",
    "extract_glow",
]

Extractor = Callable[[Lookup, Any, list[Diagnostic], EngineConfig], Settings]

EXTRACTORS: Mapping[EffectMode, Extractor] = {
    EffectMode.LIQUID_GLASS: extract_liquid_glass,
    EffectMode.GLASSMORPHISM: extract_glassmorphism,
    EffectMode.NEUMORPHISM: extract_neumorphism,
    EffectMode.GLOW: extract_glow,
}


def extract_settings(
    mode: EffectMode,
    get: Lookup,
    current: Settings,
    diagnostics: list[Diagnostic],
    config: EngineConfig,
) -> Settings:
    """Run the extractor for *mode*, merging onto *current*.

    Raises :class:`~surfacecss.model.settings.SettingsError` if *current* is
    not the settings type *mode* works with.
    """
    baseline = ensure_settings(mode, current)
    return EXTRACTORS[mode](get, baseline, diagnostics, config)
