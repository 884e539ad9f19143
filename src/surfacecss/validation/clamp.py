"""Range enforcement for extracted settings."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field

from surfacecss._numeric import clamp, format_number
from surfacecss.model.diagnostic import Diagnostic, Severity
from surfacecss.model.settings import EffectMode, FieldKind, Settings
from surfacecss.registry import SETTING_FIELDS, range_for

logger = logging.getLogger(__name__)


@dataclass
class ClampOutcome:
    settings: Settings
    diagnostics: list[Diagnostic] = field(default_factory=list)
    clamped_fields: list[str] = field(default_factory=list)


def clamp_settings(mode: EffectMode, settings: Settings) -> ClampOutcome:
    """Force every ranged numeric field of *settings* into its registered range.

    Fields that change are listed in ``clamped_fields`` with one info
    diagnostic each. Values already in range are left alone, so clamping
    twice is the same as clamping once.
    """
    updates: dict[str, float] = {}
    outcome = ClampOutcome(settings=settings)

    for descriptor in SETTING_FIELDS[mode]:
        bounds = range_for(mode, descriptor.name)
        if descriptor.kind is not FieldKind.NUMERIC or bounds is None:
            continue
        value = getattr(settings, descriptor.name)
        low, high = bounds
        clamped = clamp(value, low, high)
        if clamped == value:
            continue
        updates[descriptor.name] = clamped
        outcome.clamped_fields.append(descriptor.name)
        outcome.diagnostics.append(
            Diagnostic(
                message=(
                    f"'{descriptor.name}' value {format_number(value)} clamped to "
                    f"{format_number(clamped)} (valid range: "
                    f"{format_number(low)}-{format_number(high)})"
                ),
                severity=Severity.INFO,
                property=descriptor.name,
                rule="clamped",
            )
        )
        logger.debug("clamped %s.%s: %s -> %s", mode, descriptor.name, value, clamped)

    if updates:
        outcome.settings = dataclasses.replace(settings, **updates)
    return outcome
