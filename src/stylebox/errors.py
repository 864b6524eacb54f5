"""Error hierarchy for stylebox."""

from __future__ import annotations


class StyleboxError(Exception):
    """Base error for all stylebox errors."""


class StylesheetSyntaxError(StyleboxError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class StructuralError(StyleboxError):
    """Raised when a styled tree or box tree violates a structural precondition.

    Examples: a layout root whose display is ``none``, or asking an anonymous
    block box for the styled node it was generated from.
    """
