"""Hand-written recursive-descent parser for stylesheets.

Syntax example:
    h1, h2, .title { margin-top: 8px; color: #cc0000; }
    #main.wide { width: 600px; margin-left: auto; margin-right: auto; }
    * { display: block; }

The parser walks the source once with a single cursor and at most one
character of lookahead.  The first error aborts the parse unless declaration
recovery is requested, in which case a malformed declaration is skipped and
reported as a :class:`~stylebox.diagnostic.Diagnostic`.
"""

from __future__ import annotations

import logging
import string
from typing import Callable

from stylebox.diagnostic import Diagnostic, Severity
from stylebox.errors import StylesheetSyntaxError
from stylebox.stylesheet.model import (
    Declaration,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    specificity,
)
from stylebox.stylesheet.values import Color, Keyword, Length, Unit, Value

__all__ = ["StylesheetParser", "parse", "parse_declarations"]

logger = logging.getLogger(__name__)

_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-_")
_NUMBER_CHARS = frozenset(string.digits + ".")
_HEX_DIGITS = frozenset(string.hexdigits)


def _is_identifier_char(c: str) -> bool:
    return c in _IDENTIFIER_CHARS


class StylesheetParser:
    """Cursor over stylesheet source text.

    Args:
        source: The stylesheet text.
        recover: Skip malformed declarations instead of aborting.  Selector
            and rule-structure errors always abort.
    """

    def __init__(self, source: str, *, recover: bool = False) -> None:
        self.source = source
        self.pos = 0
        self.recover = recover
        self.diagnostics: list[Diagnostic] = []

    # --- entry points -------------------------------------------------------

    def parse(self) -> Stylesheet:
        """Parse the whole source as a sequence of rules."""
        rules: list[Rule] = []
        while True:
            self._consume_whitespace()
            if self._eof():
                break
            rules.append(self._parse_rule())
        logger.debug("Parsed %d rule(s), %d diagnostic(s)", len(rules), len(self.diagnostics))
        return Stylesheet(rules=tuple(rules))

    def parse_declaration_list(self) -> list[Declaration]:
        """Parse the whole source as declarations without surrounding braces."""
        declarations: list[Declaration] = []
        while True:
            self._consume_whitespace()
            if self._eof():
                break
            declaration = self._parse_declaration_or_skip()
            if declaration is not None:
                declarations.append(declaration)
        return declarations

    # --- cursor primitives --------------------------------------------------

    def _eof(self) -> bool:
        return self.pos >= len(self.source)

    def _next_char(self) -> str:
        """Return the current character without consuming it."""
        if self._eof():
            raise self._error("Unexpected end of input")
        return self.source[self.pos]

    def _consume_char(self) -> str:
        c = self._next_char()
        self.pos += 1
        return c

    def _consume_while(self, test: Callable[[str], bool]) -> str:
        start = self.pos
        while not self._eof() and test(self.source[self.pos]):
            self.pos += 1
        return self.source[start:self.pos]

    def _consume_whitespace(self) -> None:
        self._consume_while(str.isspace)

    def _expect(self, expected: str, message: str) -> None:
        if self._eof() or self.source[self.pos] != expected:
            raise self._error(message)
        self.pos += 1

    def _error(self, message: str, pos: int | None = None) -> StylesheetSyntaxError:
        """Build a syntax error pointing at *pos* (the cursor by default)."""
        if pos is None:
            pos = self.pos
        line = self.source.count("\n", 0, pos) + 1
        column = pos - (self.source.rfind("\n", 0, pos) + 1) + 1
        return StylesheetSyntaxError(message, line=line, column=column)

    def _parse_identifier(self, what: str | None = None) -> str:
        """Consume an identifier; when *what* is given it must be non-empty."""
        identifier = self._consume_while(_is_identifier_char)
        if not identifier and what is not None:
            raise self._error(f"Expected {what}")
        return identifier

    # --- selectors ----------------------------------------------------------

    def _parse_rule(self) -> Rule:
        selectors = self._parse_selectors()
        declarations = self._parse_declarations()
        return Rule(selectors=tuple(selectors), declarations=tuple(declarations))

    def _parse_selectors(self) -> list[Selector]:
        """Parse a comma separated selector group, most specific first."""
        selectors: list[Selector] = []
        while True:
            selectors.append(self._parse_simple_selector())
            self._consume_whitespace()
            if self._eof():
                raise self._error("Unexpected end of input in selector list")
            c = self.source[self.pos]
            if c == ",":
                self.pos += 1
                self._consume_whitespace()
            elif c == "{":
                break
            else:
                raise self._error(f"Unexpected character {c!r} in selector list")

        # list.sort is stable, also with reverse=True.
        selectors.sort(key=specificity, reverse=True)
        return selectors

    def _parse_simple_selector(self) -> SimpleSelector:
        """Parse one simple selector, e.g. ``type#id.class1.class2``."""
        tag_name: str | None = None
        selector_id: str | None = None
        classes: list[str] = []
        while not self._eof():
            c = self.source[self.pos]
            if c == "#":
                self.pos += 1
                selector_id = self._parse_identifier("id after '#'")
            elif c == ".":
                self.pos += 1
                classes.append(self._parse_identifier("class name after '.'"))
            elif c == "*":
                self.pos += 1
            elif _is_identifier_char(c):
                tag_name = self._parse_identifier()
            else:
                break
        return SimpleSelector(tag_name=tag_name, id=selector_id, classes=tuple(classes))

    # --- declarations -------------------------------------------------------

    def _parse_declarations(self) -> list[Declaration]:
        """Parse ``{ <declaration>* }``."""
        self._expect("{", "Expected '{'")
        declarations: list[Declaration] = []
        while True:
            self._consume_whitespace()
            if self._eof():
                raise self._error("Unterminated rule: expected '}'")
            if self.source[self.pos] == "}":
                self.pos += 1
                break
            declaration = self._parse_declaration_or_skip()
            if declaration is not None:
                declarations.append(declaration)
        return declarations

    def _parse_declaration_or_skip(self) -> Declaration | None:
        if not self.recover:
            return self._parse_declaration()
        start = self.pos
        try:
            return self._parse_declaration()
        except StylesheetSyntaxError as exc:
            name = self._consume_name_at(start)
            self._skip_declaration()
            diagnostic = Diagnostic(
                severity=Severity.WARNING,
                message=f"Skipped malformed declaration: {exc.message}",
                line=exc.line,
                column=exc.column,
                property_name=name or None,
            )
            self.diagnostics.append(diagnostic)
            logger.warning("%s", diagnostic)
            return None

    def _consume_name_at(self, start: int) -> str:
        """Return the property name that begins at *start* without moving the cursor."""
        end = start
        while end < len(self.source) and _is_identifier_char(self.source[end]):
            end += 1
        return self.source[start:end]

    def _skip_declaration(self) -> None:
        """Skip past the next ';', or up to (not past) the closing '}'."""
        self._consume_while(lambda c: c not in ";}")
        if not self._eof() and self.source[self.pos] == ";":
            self.pos += 1

    def _parse_declaration(self) -> Declaration:
        """Parse a single ``<property>: <value>;`` declaration."""
        name = self._parse_identifier("property name")
        self._consume_whitespace()
        self._expect(":", f"Expected ':' after property {name!r}")
        self._consume_whitespace()
        value = self._parse_value()
        self._consume_whitespace()
        self._expect(";", f"Expected ';' after value of {name!r}")
        return Declaration(name=name, value=value)

    # --- values -------------------------------------------------------------

    def _parse_value(self) -> Value:
        c = self._next_char()
        if c in string.digits:
            return self._parse_length()
        if c == "#":
            return self._parse_color()
        return Keyword(self._parse_identifier("value"))

    def _parse_length(self) -> Length:
        start = self.pos
        number = self._consume_while(lambda c: c in _NUMBER_CHARS)
        if number.count(".") > 1:
            raise self._error(f"Invalid number {number!r}", start)
        unit_start = self.pos
        unit_name = self._parse_identifier().lower()
        try:
            unit = Unit(unit_name)
        except ValueError:
            raise self._error(f"Unrecognized unit {unit_name!r}", unit_start) from None
        return Length(float(number), unit)

    def _parse_color(self) -> Color:
        self._expect("#", "Expected '#'")
        start = self.pos
        digits = self.source[start:start + 6]
        if len(digits) < 6 or not all(c in _HEX_DIGITS for c in digits):
            raise self._error("Expected 6 hex digits in color", start)
        self.pos += 6
        return Color(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
            a=255,
        )


def parse(source: str, *, recover: bool = False) -> Stylesheet:
    """Parse stylesheet *source* into a :class:`Stylesheet`.

    Raises :class:`~stylebox.errors.StylesheetSyntaxError` on the first
    error.  With ``recover=True`` malformed declarations are skipped instead;
    use :class:`StylesheetParser` directly to read the resulting diagnostics.
    """
    return StylesheetParser(source, recover=recover).parse()


def parse_declarations(source: str) -> list[Declaration]:
    """Parse a bare declaration list such as ``"width: 50px; display: block;"``."""
    return StylesheetParser(source).parse_declaration_list()
