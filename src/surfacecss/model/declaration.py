"""Declaration model: one ``property: value`` pair read from CSS source."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CSSDeclaration:
    """A declaration with its 1-based source position.

    ``property`` is lowercased and trimmed; ``value`` is trimmed but otherwise
    kept verbatim.
    """

    property: str
    value: str
    line: int
    column: int
