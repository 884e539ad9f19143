"""Tolerant declaration tokenizer used when the grammar rejects the input.

It strips an optional leading ``selector {`` and trailing ``}``, then scans
character by character, splitting only on semicolons outside parentheses.
Each chunk is split on its first colon into property and value; chunks with
an empty property or value are dropped.
"""

from __future__ import annotations

import re

from surfacecss.model.declaration import CSSDeclaration

__all__ = ["fallback_walk"]

_OPEN_RE = re.compile(r"^[^{]*\{")
_CLOSE_RE = re.compile(r"\}[^}]*$")
_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")


def _blank_comments(source: str) -> str:
    """Replace comments with spaces, keeping newlines so positions hold."""
    return _COMMENT_RE.sub(lambda m: re.sub(r"[^\n]", " ", m.group()), source)


def _location(source: str, offset: int) -> tuple[int, int]:
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _emit(source: str, start: int, end: int, out: list[CSSDeclaration]) -> None:
    chunk = source[start:end]
    colon = chunk.find(":")
    if colon <= 0:
        return
    prop = chunk[:colon].strip().lower()
    value = chunk[colon + 1 :].strip()
    if not prop or not value:
        return
    offset = start + len(chunk) - len(chunk.lstrip())
    line, column = _location(source, offset)
    out.append(CSSDeclaration(property=prop, value=value, line=line, column=column))


def fallback_walk(source: str) -> list[CSSDeclaration]:
    """Best-effort declaration scan; never raises."""
    text = _blank_comments(source)

    opening = _OPEN_RE.match(text)
    start = opening.end() if opening else 0
    closing = _CLOSE_RE.search(text, start)
    end = closing.start() if closing else len(text)

    declarations: list[CSSDeclaration] = []
    depth = 0
    chunk_start = start
    for index in range(start, end):
        ch = text[index]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == ";" and depth == 0:
            _emit(text, chunk_start, index, declarations)
            chunk_start = index + 1
    _emit(text, chunk_start, end, declarations)
    return declarations
