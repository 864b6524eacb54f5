"""Diagnostic model: structured messages about recovered stylesheet problems."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding produced while parsing a stylesheet.

    Attributes:
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        line: 1-based line of the offending position, if known.
        column: 1-based column of the offending position, if known.
        property_name: The declaration involved, if applicable.
    """

    severity: Severity
    message: str
    line: int | None = None
    column: int | None = None
    property_name: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [line {self.line}, column {self.column}]"
        if self.property_name:
            location += f" [property={self.property_name}]"
        return f"{self.severity.value}{location}: {self.message}"
