"""Tests for the WCAG contrast analysis of effect surfaces."""

import pytest

from surfacecss.accessibility import analyze_accessibility
from surfacecss.config import EngineConfig
from surfacecss.model.settings import (
    EffectMode,
    GlassmorphismSettings,
    GlowSettings,
    NeumorphismSettings,
)


class TestAnalyzeAccessibility:
    def test_opaque_black_surface(self) -> None:
        info = analyze_accessibility(
            EffectMode.GLASSMORPHISM, GlassmorphismSettings(bg_color="#000000", bg_alpha=100)
        )
        assert info is not None
        assert info.contrast_ratio == pytest.approx(21.0)
        assert info.passes_aa is True
        assert info.passes_aaa is True
        assert info.recommended_text_color == "#ffffff"
        assert info.recommendation.startswith("Excellent")

    def test_opaque_white_surface(self) -> None:
        info = analyze_accessibility(
            EffectMode.GLASSMORPHISM, GlassmorphismSettings(bg_color="#ffffff", bg_alpha=100)
        )
        assert info is not None
        assert info.recommended_text_color == "#000000"
        assert info.contrast_ratio == pytest.approx(21.0)

    def test_translucent_surface_blends_with_page(self) -> None:
        info = analyze_accessibility(
            EffectMode.GLASSMORPHISM, GlassmorphismSettings(bg_color="#ffffff", bg_alpha=12)
        )
        assert info is not None
        # 1.0 * 0.12 + 0.5 * 0.88 = 0.56
        assert info.contrast_ratio == pytest.approx(0.61 / 0.05)
        assert info.recommended_text_color == "#000000"

    def test_fully_transparent_uses_page_only(self) -> None:
        info = analyze_accessibility(
            EffectMode.GLOW, GlowSettings(bg_color="#000000", bg_alpha=0)
        )
        assert info is not None
        assert info.contrast_ratio == pytest.approx(0.55 / 0.05)

    def test_neumorphism_is_opaque(self) -> None:
        info = analyze_accessibility(EffectMode.NEUMORPHISM, NeumorphismSettings(bg_color="#000000"))
        assert info is not None
        assert info.recommended_text_color == "#ffffff"
        assert info.contrast_ratio == pytest.approx(21.0)

    def test_aa_only(self) -> None:
        # Effective luminance 0.2 gives 0.25 / 0.05 = 5:1 with black text.
        config = EngineConfig(page_luminance=0.2)
        info = analyze_accessibility(
            EffectMode.GLOW, GlowSettings(bg_color="#000000", bg_alpha=0), config
        )
        assert info is not None
        assert info.passes_aa is True
        assert info.passes_aaa is False
        assert info.recommendation.startswith("Good")

    def test_low_contrast(self) -> None:
        config = EngineConfig(aa_threshold=20.0, aaa_threshold=21.0)
        info = analyze_accessibility(
            EffectMode.GLOW, GlowSettings(bg_color="#808080", bg_alpha=100), config
        )
        assert info is not None
        assert info.passes_aa is False
        assert info.passes_aaa is False
        assert info.recommendation.startswith("Low")

    @pytest.mark.parametrize("color", ["#1a1a2e", "#e0e5ec", "#facc15", "#3b82f6", "#777777"])
    @pytest.mark.parametrize("alpha", [0, 35, 100])
    def test_bounds_and_aaa_implies_aa(self, color: str, alpha: int) -> None:
        info = analyze_accessibility(
            EffectMode.GLOW, GlowSettings(bg_color=color, bg_alpha=alpha)
        )
        assert info is not None
        assert 1.0 <= info.contrast_ratio <= 21.0
        if info.passes_aaa:
            assert info.passes_aa

    def test_unresolvable_color(self) -> None:
        info = analyze_accessibility(
            EffectMode.GLASSMORPHISM, GlassmorphismSettings(bg_color="not-a-color")
        )
        assert info is None

    def test_to_dict_rounds_ratio(self) -> None:
        info = analyze_accessibility(
            EffectMode.GLASSMORPHISM, GlassmorphismSettings(bg_color="#ffffff", bg_alpha=12)
        )
        assert info is not None
        assert info.to_dict()["contrast_ratio"] == pytest.approx(12.2)
