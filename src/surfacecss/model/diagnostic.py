"""Diagnostic model: structured messages produced while parsing effect CSS."""

from __future__ import annotations

import builtins
from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the parsed CSS or the resulting settings.

    Attributes:
        message: Human-readable description of the finding.
        severity: How serious the issue is.
        line: 1-based source line, if the finding maps to one.
        column: 1-based source column, if known.
        property: The CSS property or settings field involved.
        rule: Identifier of the check that produced this diagnostic.
    """

    message: str
    severity: Severity
    line: int | None = None
    column: int | None = None
    # Shadows the builtin for the rest of the class body.
    property: str | None = None
    rule: str | None = None

    @builtins.property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @builtins.property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "message": self.message,
            "severity": self.severity.value,
        }
        for key in ("line", "column", "property", "rule"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [line {self.line}"
            if self.column is not None:
                location += f":{self.column}"
            location += "]"
        elif self.property:
            location = f" [{self.property}]"
        return f"{self.severity.value.upper()}{location}: {self.message}"
