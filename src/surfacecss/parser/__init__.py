"""CSS declaration parsing: Lark grammar first, tolerant tokenizer second."""

from surfacecss.parser.errors import ParseError
from surfacecss.parser.fallback import fallback_walk
from surfacecss.parser.walker import WalkResult, parse_declarations, walk_css

__all__ = ["ParseError", "WalkResult", "fallback_walk", "parse_declarations", "walk_css"]
