"""Tests for range clamping and the semantic rule engine."""

from __future__ import annotations

import dataclasses

import pytest

from surfacecss.model.diagnostic import Diagnostic, Severity
from surfacecss.model.settings import (
    DEFAULT_SETTINGS,
    EffectMode,
    GlassmorphismSettings,
    GlowSettings,
    LiquidGlassSettings,
    NeumorphismSettings,
    NeuShape,
)
from surfacecss.registry import SETTING_RANGES, range_for
from surfacecss.validation import (
    RULES_BY_MODE,
    SemanticRule,
    clamp_settings,
    run_semantic_rules,
)


def _fired(mode: EffectMode, settings: object) -> set[str | None]:
    return {d.rule for d in run_semantic_rules(mode, settings)}  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Clamping
# ---------------------------------------------------------------------------


class TestClamp:
    def test_in_range_untouched(self) -> None:
        settings = GlassmorphismSettings()
        outcome = clamp_settings(EffectMode.GLASSMORPHISM, settings)
        assert outcome.settings is settings
        assert outcome.clamped_fields == []
        assert outcome.diagnostics == []

    def test_above_max(self) -> None:
        outcome = clamp_settings(EffectMode.GLASSMORPHISM, GlassmorphismSettings(blur=999))
        assert outcome.settings.blur == 50
        assert outcome.clamped_fields == ["blur"]
        diag = outcome.diagnostics[0]
        assert diag.severity is Severity.INFO
        assert diag.rule == "clamped"
        assert diag.message == "'blur' value 999 clamped to 50 (valid range: 0-50)"

    def test_below_min(self) -> None:
        outcome = clamp_settings(EffectMode.NEUMORPHISM, NeumorphismSettings(distance=0))
        assert outcome.settings.distance == 1
        assert outcome.clamped_fields == ["distance"]

    def test_negative_range(self) -> None:
        outcome = clamp_settings(EffectMode.LIQUID_GLASS, LiquidGlassSettings(shadow_x=-35))
        assert outcome.settings.shadow_x == -20
        assert "(valid range: -20-20)" in outcome.diagnostics[0].message

    def test_non_numeric_fields_pass_through(self) -> None:
        settings = NeumorphismSettings(bg_color="not-a-color", shape=NeuShape.PRESSED, blur=100)
        outcome = clamp_settings(EffectMode.NEUMORPHISM, settings)
        assert outcome.settings.bg_color == "not-a-color"
        assert outcome.settings.shape is NeuShape.PRESSED
        assert outcome.clamped_fields == ["blur"]

    def test_several_fields(self) -> None:
        settings = GlowSettings(glow_blur=500, saturation=10, border_width=9)
        outcome = clamp_settings(EffectMode.GLOW, settings)
        assert sorted(outcome.clamped_fields) == ["border_width", "glow_blur", "saturation"]
        assert len(outcome.diagnostics) == 3

    @pytest.mark.parametrize("mode", list(EffectMode))
    def test_every_ranged_field_hits_its_registered_bounds(self, mode: EffectMode) -> None:
        ranged = {name: range_for(mode, name) for name in SETTING_RANGES[mode]}
        too_high = dataclasses.replace(
            DEFAULT_SETTINGS[mode], **{name: high + 1 for name, (_, high) in ranged.items()}
        )
        outcome = clamp_settings(mode, too_high)
        assert sorted(outcome.clamped_fields) == sorted(ranged)
        for name, (_, high) in ranged.items():
            assert getattr(outcome.settings, name) == high

    @pytest.mark.parametrize("mode", list(EffectMode))
    def test_idempotent(self, mode: EffectMode) -> None:
        ranged = SETTING_RANGES[mode]
        wild = dataclasses.replace(
            DEFAULT_SETTINGS[mode], **{name: high * 3 + 7 for name, (_, high) in ranged.items()}
        )
        once = clamp_settings(mode, wild)
        twice = clamp_settings(mode, once.settings)
        assert twice.settings == once.settings
        assert twice.clamped_fields == []
        for name, (low, high) in ranged.items():
            assert low <= getattr(once.settings, name) <= high


# ---------------------------------------------------------------------------
# Semantic rules
# ---------------------------------------------------------------------------


class TestRuleTables:
    def test_every_mode_has_rules(self) -> None:
        assert set(RULES_BY_MODE) == set(EffectMode)

    def test_rule_ids(self) -> None:
        assert [r.id for r in RULES_BY_MODE[EffectMode.LIQUID_GLASS]] == [
            "blur-performance",
            "opacity-blur-imbalance",
            "border-invisible",
            "refraction-saturation-conflict",
            "shadow-invisible",
        ]
        assert [r.id for r in RULES_BY_MODE[EffectMode.GLASSMORPHISM]] == [
            "blur-performance",
            "opacity-blur-imbalance",
            "saturation-extreme",
            "border-too-wide",
        ]
        assert [r.id for r in RULES_BY_MODE[EffectMode.NEUMORPHISM]] == [
            "distance-blur-ratio",
            "intensity-extreme",
            "distance-flat",
            "radius-mismatch",
        ]
        assert [r.id for r in RULES_BY_MODE[EffectMode.GLOW]] == [
            "glow-blur-extreme",
            "glow-invisible",
            "inner-glow-no-outer",
        ]

    @pytest.mark.parametrize("mode", list(EffectMode))
    def test_defaults_are_clean(self, mode: EffectMode) -> None:
        assert run_semantic_rules(mode, DEFAULT_SETTINGS[mode]) == []


class TestLiquidGlassRules:
    MODE = EffectMode.LIQUID_GLASS

    def test_blur_performance(self) -> None:
        assert "blur-performance" in _fired(self.MODE, LiquidGlassSettings(blur=41))
        assert "blur-performance" not in _fired(self.MODE, LiquidGlassSettings(blur=40))

    def test_blur_performance_is_warning(self) -> None:
        diags = run_semantic_rules(self.MODE, LiquidGlassSettings(blur=41))
        assert diags[0].severity is Severity.WARNING
        assert diags[0].property == "blur"

    def test_opacity_blur_imbalance(self) -> None:
        assert "opacity-blur-imbalance" in _fired(self.MODE, LiquidGlassSettings(bg_alpha=61, blur=7))
        assert "opacity-blur-imbalance" not in _fired(self.MODE, LiquidGlassSettings(bg_alpha=60, blur=7))
        assert "opacity-blur-imbalance" not in _fired(self.MODE, LiquidGlassSettings(bg_alpha=61, blur=8))

    def test_border_invisible(self) -> None:
        assert "border-invisible" in _fired(self.MODE, LiquidGlassSettings(border_alpha=2))
        assert "border-invisible" not in _fired(self.MODE, LiquidGlassSettings(border_alpha=3))

    def test_refraction_saturation_conflict(self) -> None:
        assert "refraction-saturation-conflict" in _fired(
            self.MODE, LiquidGlassSettings(refraction_intensity=71, saturation=79)
        )
        assert "refraction-saturation-conflict" not in _fired(
            self.MODE, LiquidGlassSettings(refraction_intensity=70, saturation=79)
        )

    def test_shadow_invisible(self) -> None:
        assert "shadow-invisible" in _fired(self.MODE, LiquidGlassSettings(shadow_alpha=0))
        assert "shadow-invisible" not in _fired(self.MODE, LiquidGlassSettings(shadow_alpha=3))


class TestGlassmorphismRules:
    MODE = EffectMode.GLASSMORPHISM

    def test_blur_performance(self) -> None:
        assert "blur-performance" in _fired(self.MODE, GlassmorphismSettings(blur=31))
        assert "blur-performance" not in _fired(self.MODE, GlassmorphismSettings(blur=30))

    def test_opacity_blur_imbalance(self) -> None:
        assert "opacity-blur-imbalance" in _fired(self.MODE, GlassmorphismSettings(bg_alpha=80, blur=2))

    def test_saturation_extreme(self) -> None:
        assert "saturation-extreme" in _fired(self.MODE, GlassmorphismSettings(saturation=181))
        assert "saturation-extreme" not in _fired(self.MODE, GlassmorphismSettings(saturation=180))

    def test_border_too_wide(self) -> None:
        assert "border-too-wide" in _fired(self.MODE, GlassmorphismSettings(border_width=4))
        assert "border-too-wide" not in _fired(self.MODE, GlassmorphismSettings(border_width=3))


class TestNeumorphismRules:
    MODE = EffectMode.NEUMORPHISM

    def test_distance_blur_ratio(self) -> None:
        assert "distance-blur-ratio" in _fired(self.MODE, NeumorphismSettings(distance=10, blur=9))
        assert "distance-blur-ratio" not in _fired(self.MODE, NeumorphismSettings(distance=10, blur=10))

    def test_intensity_extreme(self) -> None:
        assert "intensity-extreme" in _fired(self.MODE, NeumorphismSettings(intensity=36))
        assert "intensity-extreme" not in _fired(self.MODE, NeumorphismSettings(intensity=35))

    def test_distance_flat(self) -> None:
        assert "distance-flat" in _fired(self.MODE, NeumorphismSettings(distance=1))
        assert "distance-flat" not in _fired(self.MODE, NeumorphismSettings(distance=2))

    def test_radius_mismatch(self) -> None:
        fired = _fired(self.MODE, NeumorphismSettings(shape=NeuShape.CONVEX, border_radius=3))
        assert "radius-mismatch" in fired
        flat = _fired(self.MODE, NeumorphismSettings(shape=NeuShape.FLAT, border_radius=3))
        assert "radius-mismatch" not in flat
        rounded = _fired(self.MODE, NeumorphismSettings(shape=NeuShape.CONVEX, border_radius=4))
        assert "radius-mismatch" not in rounded


class TestGlowRules:
    MODE = EffectMode.GLOW

    def test_glow_blur_extreme(self) -> None:
        assert "glow-blur-extreme" in _fired(self.MODE, GlowSettings(glow_blur=151))
        assert "glow-blur-extreme" not in _fired(self.MODE, GlowSettings(glow_blur=150))

    def test_glow_invisible(self) -> None:
        assert "glow-invisible" in _fired(self.MODE, GlowSettings(glow_intensity=4))
        assert "glow-invisible" not in _fired(self.MODE, GlowSettings(glow_intensity=5))

    def test_inner_glow_no_outer(self) -> None:
        fired = _fired(self.MODE, GlowSettings(inner_glow=41, glow_intensity=9))
        assert "inner-glow-no-outer" in fired
        assert "inner-glow-no-outer" not in _fired(self.MODE, GlowSettings(inner_glow=40, glow_intensity=9))
        assert "inner-glow-no-outer" not in _fired(self.MODE, GlowSettings(inner_glow=41, glow_intensity=10))

    def test_several_rules_fire_together(self) -> None:
        fired = _fired(self.MODE, GlowSettings(glow_blur=200, glow_intensity=0, inner_glow=60))
        assert fired == {"glow-blur-extreme", "glow-invisible", "inner-glow-no-outer"}


class TestExtraRules:
    def test_extra_rules_run_after_builtins(self) -> None:
        extra = SemanticRule(
            id="no-black-glass",
            severity=Severity.ERROR,
            message="Black glass is not allowed.",
            check=lambda s: s.bg_color == "#000000",
            property="bg_color",
        )
        settings = GlassmorphismSettings(bg_color="#000000", blur=45)
        diags = run_semantic_rules(EffectMode.GLASSMORPHISM, settings, extra_rules=[extra])
        assert [d.rule for d in diags] == ["blur-performance", "no-black-glass"]
        assert isinstance(diags[-1], Diagnostic)
        assert diags[-1].is_error


# ---------------------------------------------------------------------------
# Diagnostic model
# ---------------------------------------------------------------------------


class TestDiagnostic:
    def test_severity_flags(self) -> None:
        error = Diagnostic(message="x", severity=Severity.ERROR, property="blur")
        warning = Diagnostic(message="y", severity=Severity.WARNING)
        assert error.is_error and not error.is_warning
        assert warning.is_warning and not warning.is_error
        assert error.property == "blur"

    def test_property_location_in_str(self) -> None:
        diag = Diagnostic(message="too blurry", severity=Severity.WARNING, property="blur")
        assert str(diag) == "WARNING [blur]: too blurry"

    def test_to_dict_omits_missing_fields(self) -> None:
        diag = Diagnostic(message="m", severity=Severity.INFO, rule="clamped")
        assert diag.to_dict() == {"message": "m", "severity": "info", "rule": "clamped"}
