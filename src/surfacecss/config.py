from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    base_font_px: float = 16.0  # rem/em -> px
    page_luminance: float = 0.5  # assumed page behind translucent surfaces
    aa_threshold: float = 4.5
    aaa_threshold: float = 7.0


DEFAULT_CONFIG = EngineConfig()
