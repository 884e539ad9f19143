"""Orchestrator: CSS text in, validated settings and diagnostics out.

Pipeline stages, in order:

1. Walk      -- grammar parse, or tolerant tokenizer after a syntax error
2. Classify  -- every declaration is either in the mode vocabulary or a ghost
3. Extract   -- the mode extractor merges recognized values onto the baseline
4. Clamp     -- numeric fields forced into their registered ranges
5. Rules     -- semantic design/performance checks on the clamped settings
6. Contrast  -- WCAG analysis of text on the resulting surface
"""

from __future__ import annotations

import logging

from surfacecss.accessibility import analyze_accessibility
from surfacecss.config import DEFAULT_CONFIG, EngineConfig
from surfacecss.extractors import extract_settings
from surfacecss.model.declaration import CSSDeclaration
from surfacecss.model.diagnostic import Diagnostic, Severity
from surfacecss.model.result import GhostProperty, ParseResult
from surfacecss.model.settings import EffectMode, Settings, SettingsError
from surfacecss.parser import walk_css
from surfacecss.registry import is_known_property
from surfacecss.validation import clamp_settings, run_semantic_rules

logger = logging.getLogger(__name__)


def _failure(message: str, diagnostics: list[Diagnostic] | None = None) -> ParseResult:
    diagnostics = list(diagnostics or [])
    diagnostics.append(Diagnostic(message=message, severity=Severity.ERROR))
    return ParseResult(settings=None, diagnostics=tuple(diagnostics))


def _ghost(decl: CSSDeclaration, mode: EffectMode) -> GhostProperty:
    return GhostProperty(
        property=decl.property,
        value=decl.value,
        line=decl.line,
        reason=f"'{decl.property}' is not used by {mode}, it will be ignored.",
    )


def parse_and_validate_css(
    mode: EffectMode | str,
    css: str,
    baseline: Settings,
    config: EngineConfig | None = None,
) -> ParseResult:
    """Parse *css* for *mode*, merging recognized values onto *baseline*.

    Never raises. A syntax error that leaves no declarations, an unknown mode
    or a baseline of the wrong settings type all produce ``settings=None``
    and an error diagnostic; every other problem is reported alongside a
    usable settings record.
    """
    config = config or DEFAULT_CONFIG

    try:
        mode = EffectMode(mode)
    except ValueError:
        return _failure(f"Unknown effect mode: {mode!r}")

    walked = walk_css(css)
    diagnostics: list[Diagnostic] = []
    if walked.syntax_error is not None:
        diagnostics.append(walked.syntax_error)
        if not walked.declarations:
            logger.debug("no declarations recovered from %d chars of CSS", len(css))
            return ParseResult(settings=None, diagnostics=tuple(diagnostics))

    # Last declaration of a property wins, as in the cascade. Ghosts follow
    # the same rule: one per property, carrying the winning value and line.
    by_property: dict[str, CSSDeclaration] = {}
    for decl in walked.declarations:
        by_property[decl.property] = decl
    ghosts = [
        _ghost(decl, mode)
        for prop, decl in by_property.items()
        if not is_known_property(mode, prop)
    ]

    try:
        extracted = extract_settings(
            mode, by_property.get, baseline, diagnostics, config
        )
    except SettingsError as exc:
        return _failure(str(exc), diagnostics)
    except (TypeError, ValueError, ArithmeticError) as exc:
        logger.debug("extraction failed for %s", mode, exc_info=True)
        return _failure(f"Could not apply CSS to {mode} settings: {exc}", diagnostics)

    clamped = clamp_settings(mode, extracted)
    diagnostics.extend(clamped.diagnostics)
    diagnostics.extend(run_semantic_rules(mode, clamped.settings))

    accessibility = analyze_accessibility(mode, clamped.settings, config)

    logger.debug(
        "%s: %d declaration(s), %d ghost(s), %d clamped, %d diagnostic(s)",
        mode,
        len(walked.declarations),
        len(ghosts),
        len(clamped.clamped_fields),
        len(diagnostics),
    )
    return ParseResult(
        settings=clamped.settings,
        diagnostics=tuple(diagnostics),
        ghost_properties=tuple(ghosts),
        clamped_fields=tuple(clamped.clamped_fields),
        accessibility=accessibility,
    )
