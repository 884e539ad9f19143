"""Grammar-first declaration walker with a tolerant fallback."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from pathlib import Path

from lark import Lark, Token, Tree
from lark.exceptions import LarkError

from surfacecss.model.declaration import CSSDeclaration
from surfacecss.model.diagnostic import Diagnostic
from surfacecss.parser.errors import ParseError
from surfacecss.parser.fallback import fallback_walk

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


@dataclass
class WalkResult:
    """Declarations in source order plus the syntax error, if one occurred."""

    declarations: list[CSSDeclaration] = field(default_factory=list)
    syntax_error: Diagnostic | None = None


def _declaration_list(tree: Tree, source: str) -> list[CSSDeclaration]:
    """Read declarations off the top of the parse tree.

    Only ``start``, ``rule_block`` and ``declarations`` are descended into;
    values are sliced from *source* using the span Lark records on each
    ``value`` node, so however deeply groups nest, nothing here recurses.
    """
    if tree.data == "start":
        tree = tree.children[0]  # type: ignore[assignment]
    if tree.data == "rule_block":
        tree = next(c for c in tree.children if isinstance(c, Tree))

    declarations: list[CSSDeclaration] = []
    for node in tree.children:
        if not isinstance(node, Tree) or node.data != "declaration":
            continue
        prop = next(t for t in node.children if isinstance(t, Token) and t.type == "PROPERTY")
        value: Tree = node.children[-1]  # type: ignore[assignment]
        declarations.append(
            CSSDeclaration(
                property=str(prop).strip().lower(),
                value=source[value.meta.start_pos : value.meta.end_pos].strip(),
                line=prop.line or 0,
                column=prop.column or 0,
            )
        )
    return declarations


@functools.cache
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
        keep_all_tokens=True,
        propagate_positions=True,
    )


def _position(value: object) -> int | None:
    # Lark reports -1 for positions at end of input.
    if isinstance(value, int) and value > 0:
        return value
    return None


def parse_declarations(source: str) -> list[CSSDeclaration]:
    """Parse a CSS fragment strictly; raises :class:`ParseError` on bad syntax."""
    try:
        tree = _parser().parse(source)
    except (LarkError, RecursionError) as e:
        lines = str(e).strip().splitlines()
        message = lines[0] if lines else "CSS syntax error"
        raise ParseError(
            message,
            line=_position(getattr(e, "line", None)),
            column=_position(getattr(e, "column", None)),
        ) from e
    return _declaration_list(tree, source)


def walk_css(source: str) -> WalkResult:
    """Read declarations from *source*, never raising.

    A syntax error is captured as an error diagnostic and the tolerant
    tokenizer takes over, so the result may still carry declarations.
    """
    try:
        return WalkResult(declarations=parse_declarations(source))
    except ParseError as exc:
        logger.debug("grammar parse failed (%s); using fallback tokenizer", exc)
        declarations = fallback_walk(source)
        logger.debug("fallback tokenizer recovered %d declaration(s)", len(declarations))
        return WalkResult(declarations=declarations, syntax_error=exc.to_diagnostic())
