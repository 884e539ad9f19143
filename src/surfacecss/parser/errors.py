"""Parser error types."""

from __future__ import annotations

from surfacecss.model.diagnostic import Diagnostic, Severity


class ParseError(Exception):
    """Raised when CSS source cannot be parsed by the declaration grammar.

    ``line`` and ``column`` are 1-based and None when Lark could not place
    the error (typically an unexpected end of input).
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        super().__init__(message)

    def to_diagnostic(self) -> Diagnostic:
        """The ``syntax`` error diagnostic reported for this failure."""
        return Diagnostic(
            message=str(self),
            severity=Severity.ERROR,
            line=self.line,
            column=self.column,
            rule="syntax",
        )
