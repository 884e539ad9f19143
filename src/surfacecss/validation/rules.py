"""Semantic rules for effect settings.

Each rule is a predicate over the clamped settings of one mode. When the
predicate holds, the rule's diagnostic is reported; every rule is evaluated,
so several can fire for the same settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from surfacecss.model.diagnostic import Diagnostic, Severity
from surfacecss.model.settings import EffectMode, NeuShape, Settings


@dataclass(frozen=True)
class SemanticRule:
    """A declarative design or performance check.

    Attributes:
        id: Stable identifier, reported as the diagnostic's rule.
        severity: Severity of the diagnostic when the rule fires.
        message: Text of the diagnostic.
        check: Predicate over the settings; True means the rule fires.
        property: Settings field the rule is about, if a single one.
    """

    id: str
    severity: Severity
    message: str
    check: Callable[[Any], bool]
    property: str | None = None

    def evaluate(self, settings: Settings) -> Diagnostic | None:
        if not self.check(settings):
            return None
        return Diagnostic(
            message=self.message,
            severity=self.severity,
            property=self.property,
            rule=self.id,
        )


# ---------------------------------------------------------------------------
# liquid-glass
# ---------------------------------------------------------------------------

LIQUID_GLASS_RULES: tuple[SemanticRule, ...] = (
    SemanticRule(
        id="blur-performance",
        severity=Severity.WARNING,
        property="blur",
        check=lambda s: s.blur > 40,
        message="blur > 40px is GPU-intensive and can cause jank on mobile. Values <= 30px are recommended.",
    ),
    SemanticRule(
        id="opacity-blur-imbalance",
        severity=Severity.INFO,
        property="bg_alpha",
        check=lambda s: s.bg_alpha > 60 and s.blur < 8,
        message="High background opacity with low blur diminishes the liquid-glass refraction effect.",
    ),
    SemanticRule(
        id="border-invisible",
        severity=Severity.INFO,
        property="border_alpha",
        check=lambda s: s.border_alpha < 3,
        message="border_alpha is nearly 0, so the border will be invisible.",
    ),
    SemanticRule(
        id="refraction-saturation-conflict",
        severity=Severity.INFO,
        check=lambda s: s.refraction_intensity > 70 and s.saturation < 80,
        message="High refraction_intensity with low saturation produces grey, washed-out refraction highlights.",
    ),
    SemanticRule(
        id="shadow-invisible",
        severity=Severity.INFO,
        property="shadow_alpha",
        check=lambda s: s.shadow_alpha < 3,
        message="shadow_alpha is nearly 0, so the shadow will be invisible.",
    ),
)


# ---------------------------------------------------------------------------
# glassmorphism
# ---------------------------------------------------------------------------

GLASSMORPHISM_RULES: tuple[SemanticRule, ...] = (
    SemanticRule(
        id="blur-performance",
        severity=Severity.WARNING,
        property="blur",
        check=lambda s: s.blur > 30,
        message="blur > 30px is GPU-intensive. Typical glassmorphism uses 10-20px.",
    ),
    SemanticRule(
        id="opacity-blur-imbalance",
        severity=Severity.INFO,
        property="bg_alpha",
        check=lambda s: s.bg_alpha > 60 and s.blur < 8,
        message="High background opacity with low blur eliminates the glass transparency effect.",
    ),
    SemanticRule(
        id="saturation-extreme",
        severity=Severity.WARNING,
        property="saturation",
        check=lambda s: s.saturation > 180,
        message="saturation > 180% produces unnatural oversaturated color fringing through the glass.",
    ),
    SemanticRule(
        id="border-too-wide",
        severity=Severity.INFO,
        property="border_width",
        check=lambda s: s.border_width > 3,
        message="Borders wider than 3px are unusual for glassmorphism.",
    ),
)


# ---------------------------------------------------------------------------
# neumorphism
# ---------------------------------------------------------------------------

NEUMORPHISM_RULES: tuple[SemanticRule, ...] = (
    SemanticRule(
        id="distance-blur-ratio",
        severity=Severity.INFO,
        property="blur",
        check=lambda s: s.blur < s.distance,
        message="blur should be >= distance for natural-looking neumorphism.",
    ),
    SemanticRule(
        id="intensity-extreme",
        severity=Severity.WARNING,
        property="intensity",
        check=lambda s: s.intensity > 35,
        message="intensity > 35% makes shadows harsh and unrealistic.",
    ),
    SemanticRule(
        id="distance-flat",
        severity=Severity.INFO,
        property="distance",
        check=lambda s: s.distance <= 1,
        message="Very small distance produces a flat look with no 3-D depth.",
    ),
    SemanticRule(
        id="radius-mismatch",
        severity=Severity.INFO,
        property="border_radius",
        check=lambda s: s.shape != NeuShape.FLAT and s.border_radius < 4,
        message="Shaped neumorphism normally uses a rounded border-radius (>= 8px).",
    ),
)


# ---------------------------------------------------------------------------
# glow
# ---------------------------------------------------------------------------

GLOW_RULES: tuple[SemanticRule, ...] = (
    SemanticRule(
        id="glow-blur-extreme",
        severity=Severity.WARNING,
        property="glow_blur",
        check=lambda s: s.glow_blur > 150,
        message="glow_blur > 150px is very GPU-intensive and may cause performance issues.",
    ),
    SemanticRule(
        id="glow-invisible",
        severity=Severity.INFO,
        property="glow_intensity",
        check=lambda s: s.glow_intensity < 5,
        message="glow_intensity is nearly 0, so the glow effect will be invisible.",
    ),
    SemanticRule(
        id="inner-glow-no-outer",
        severity=Severity.INFO,
        check=lambda s: s.inner_glow > 40 and s.glow_intensity < 10,
        message="Strong inner glow without outer glow looks like an inset shadow rather than a glow effect.",
    ),
)


RULES_BY_MODE: Mapping[EffectMode, tuple[SemanticRule, ...]] = MappingProxyType({
    EffectMode.LIQUID_GLASS: LIQUID_GLASS_RULES,
    EffectMode.GLASSMORPHISM: GLASSMORPHISM_RULES,
    EffectMode.NEUMORPHISM: NEUMORPHISM_RULES,
    EffectMode.GLOW: GLOW_RULES,
})


def run_semantic_rules(
    mode: EffectMode,
    settings: Settings,
    extra_rules: list[SemanticRule] | None = None,
) -> list[Diagnostic]:
    """Evaluate every rule for *mode* (plus *extra_rules*) against *settings*."""
    rules: list[SemanticRule] = list(RULES_BY_MODE[mode])
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostic = rule.evaluate(settings)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
    return diagnostics
