"""Accessibility analysis: WCAG contrast of text placed on the effect surface."""

from __future__ import annotations

import logging

from surfacecss._numeric import clamp
from surfacecss.config import DEFAULT_CONFIG, EngineConfig
from surfacecss.model.color import Color
from surfacecss.model.result import AccessibilityInfo
from surfacecss.model.settings import EffectMode, Settings

logger = logging.getLogger(__name__)

BLACK = "#000000"
WHITE = "#ffffff"


def _surface(mode: EffectMode, settings: Settings) -> tuple[str | None, float]:
    """Background color and alpha (0-100) of the surface for *mode*."""
    bg_color = getattr(settings, "bg_color", None)
    if mode is EffectMode.NEUMORPHISM:
        return bg_color, 100.0
    return bg_color, float(getattr(settings, "bg_alpha", 100))


def _recommendation(ratio: float, passes_aa: bool, passes_aaa: bool) -> str:
    if passes_aaa:
        return f"Excellent contrast ({ratio:.1f}:1), passes WCAG AAA."
    if passes_aa:
        return (
            f"Good contrast ({ratio:.1f}:1), passes WCAG AA. "
            "Consider increasing bg_alpha for AAA."
        )
    return (
        f"Low contrast ({ratio:.1f}:1), fails WCAG AA. "
        "Text readability on this surface may be poor."
    )


def analyze_accessibility(
    mode: EffectMode, settings: Settings, config: EngineConfig = DEFAULT_CONFIG
) -> AccessibilityInfo | None:
    """Contrast of the best text color (black or white) on the surface.

    The page behind a translucent surface is unknown, so the surface is
    composited over a mid-gray of luminance ``config.page_luminance``.
    Returns None when the background color cannot be resolved.
    """
    bg_hex, bg_alpha = _surface(mode, settings)
    if not isinstance(bg_hex, str) or not bg_hex:
        return None
    bg = Color.parse(bg_hex)
    if bg is None:
        logger.debug("accessibility skipped: unresolvable bg_color %r", bg_hex)
        return None

    try:
        blend = bg_alpha / 100
        effective = bg.relative_luminance() * blend + config.page_luminance * (1 - blend)
        black_contrast = (effective + 0.05) / 0.05
        white_contrast = 1.05 / (effective + 0.05)
    except (TypeError, ValueError, ZeroDivisionError) as exc:
        logger.debug("accessibility skipped: %s", exc)
        return None

    if white_contrast > black_contrast:
        recommended, ratio = WHITE, white_contrast
    else:
        recommended, ratio = BLACK, black_contrast
    ratio = clamp(ratio, 1.0, 21.0)

    passes_aa = ratio >= config.aa_threshold
    passes_aaa = ratio >= config.aaa_threshold
    return AccessibilityInfo(
        contrast_ratio=ratio,
        passes_aa=passes_aa,
        passes_aaa=passes_aaa,
        recommended_text_color=recommended,
        recommendation=_recommendation(ratio, passes_aa, passes_aaa),
    )
