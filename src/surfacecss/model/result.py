"""Result model: everything a single parse call reports back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from surfacecss._numeric import round_to
from surfacecss.model.diagnostic import Diagnostic, Severity
from surfacecss.model.settings import Settings, settings_to_dict


@dataclass(frozen=True)
class GhostProperty:
    """A declaration whose property the active mode does not use."""

    property: str
    value: str
    reason: str
    line: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "property": self.property,
            "value": self.value,
            "reason": self.reason,
        }
        if self.line is not None:
            data["line"] = self.line
        return data


@dataclass(frozen=True)
class AccessibilityInfo:
    """WCAG 2.1 contrast snapshot for text placed on the generated surface."""

    contrast_ratio: float
    passes_aa: bool
    passes_aaa: bool
    recommended_text_color: str
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "contrast_ratio": round_to(self.contrast_ratio, 2),
            "passes_aa": self.passes_aa,
            "passes_aaa": self.passes_aaa,
            "recommended_text_color": self.recommended_text_color,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class ParseResult:
    """Output of :func:`surfacecss.engine.parse_and_validate_css`.

    ``settings`` is None only when the input could not be parsed at all (or
    the call itself was invalid); every other problem is reported through
    ``diagnostics`` and leaves a usable settings record.
    """

    settings: Settings | None
    diagnostics: tuple[Diagnostic, ...] = ()
    ghost_properties: tuple[GhostProperty, ...] = ()
    clamped_fields: tuple[str, ...] = ()
    accessibility: AccessibilityInfo | None = None

    @property
    def ok(self) -> bool:
        return self.settings is not None

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    def to_dict(self) -> dict[str, Any]:
        return {
            "settings": settings_to_dict(self.settings) if self.settings is not None else None,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "ghost_properties": [g.to_dict() for g in self.ghost_properties],
            "clamped_fields": list(self.clamped_fields),
            "accessibility": self.accessibility.to_dict() if self.accessibility else None,
        }
