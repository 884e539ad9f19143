"""Post-extraction validation: range clamping and semantic rules."""

from surfacecss.validation.clamp import ClampOutcome, clamp_settings
from surfacecss.validation.rules import RULES_BY_MODE, SemanticRule, run_semantic_rules

__all__ = [
    "ClampOutcome",
    "clamp_settings",
    "RULES_BY_MODE",
    "SemanticRule",
    "run_semantic_rules",
]
