"""Tests for the stylesheet parser."""

from pathlib import Path

import pytest

from stylebox.diagnostic import Severity
from stylebox.errors import StylesheetSyntaxError
from stylebox.stylesheet import (
    Color,
    Declaration,
    Keyword,
    Length,
    SimpleSelector,
    StylesheetParser,
    Unit,
    parse,
    parse_declarations,
    specificity,
)

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSimpleSelectors:
    def _selector(self, text: str) -> SimpleSelector:
        sheet = parse(f"{text} {{ }}")
        assert len(sheet.rules) == 1
        assert len(sheet.rules[0].selectors) == 1
        return sheet.rules[0].selectors[0]

    def test_tag(self) -> None:
        assert self._selector("div") == SimpleSelector(tag_name="div")

    def test_id(self) -> None:
        assert self._selector("#main") == SimpleSelector(id="main")

    def test_classes_keep_duplicates(self) -> None:
        sel = self._selector(".a.b.a")
        assert sel.classes == ("a", "b", "a")

    def test_compound(self) -> None:
        sel = self._selector("div#main.note")
        assert sel == SimpleSelector(tag_name="div", id="main", classes=("note",))

    def test_order_insensitive(self) -> None:
        sel = self._selector(".note#main")
        assert sel == SimpleSelector(id="main", classes=("note",))

    def test_universal_contributes_nothing(self) -> None:
        assert self._selector("*") == SimpleSelector()
        assert self._selector("*.x") == SimpleSelector(classes=("x",))

    def test_identifier_may_contain_dashes_and_digits(self) -> None:
        sel = self._selector("h1.side-bar_2")
        assert sel == SimpleSelector(tag_name="h1", classes=("side-bar_2",))


class TestSpecificityOrdering:
    def test_sorted_descending(self) -> None:
        rule = parse("div, .b.c, #a { }").rules[0]
        assert [str(s) for s in rule.selectors] == ["#a", ".b.c", "div"]
        assert [specificity(s) for s in rule.selectors] == [
            (1, 0, 0),
            (0, 2, 0),
            (0, 0, 1),
        ]

    def test_already_sorted_group_unchanged(self) -> None:
        rule = parse("#a, .b.c, div { }").rules[0]
        assert [str(s) for s in rule.selectors] == ["#a", ".b.c", "div"]

    def test_ties_keep_source_order(self) -> None:
        rule = parse(".x, span, .y, p, .z { }").rules[0]
        assert [str(s) for s in rule.selectors] == [".x", ".y", ".z", "span", "p"]

    def test_non_increasing(self) -> None:
        rule = parse("a, #b.c, p.q.r, *, #d, em.f { }").rules[0]
        scores = [specificity(s) for s in rule.selectors]
        assert scores == sorted(scores, reverse=True)

    def test_sorting_is_per_rule(self) -> None:
        sheet = parse("p { } #a { }")
        assert str(sheet.rules[0].selectors[0]) == "p"
        assert str(sheet.rules[1].selectors[0]) == "#a"


# ---------------------------------------------------------------------------
# Declarations and values
# ---------------------------------------------------------------------------


class TestValues:
    def _value(self, text: str):
        return parse(f"p {{ x: {text}; }}").rules[0].declarations[0].value

    def test_keyword(self) -> None:
        assert self._value("auto") == Keyword("auto")

    def test_length(self) -> None:
        assert self._value("12.5px") == Length(12.5, Unit.PX)

    def test_integer_length(self) -> None:
        assert self._value("0px") == Length(0.0, Unit.PX)

    def test_unit_case_insensitive(self) -> None:
        assert self._value("10PX") == Length(10.0, Unit.PX)

    def test_color(self) -> None:
        assert self._value("#ff0080") == Color(r=255, g=0, b=128, a=255)

    def test_color_uppercase_hex(self) -> None:
        assert self._value("#FFFFFF") == Color(255, 255, 255)


class TestDeclarations:
    def test_declarations_in_order(self) -> None:
        rule = parse("p { width: 10px; display: block; color: #000000; }").rules[0]
        assert rule.declarations == (
            Declaration("width", Length(10.0)),
            Declaration("display", Keyword("block")),
            Declaration("color", Color(0, 0, 0)),
        )

    def test_whitespace_around_tokens(self) -> None:
        rule = parse("p\n{\n  width :  10px  ;\n}\n").rules[0]
        assert rule.declarations == (Declaration("width", Length(10.0)),)

    def test_empty_rule(self) -> None:
        assert parse("p {}").rules[0].declarations == ()


class TestStylesheet:
    def test_empty_source(self) -> None:
        assert parse("").rules == ()

    def test_whitespace_only(self) -> None:
        assert parse("  \n\t ").rules == ()

    def test_fixture(self) -> None:
        sheet = parse((FIXTURES / "basic.css").read_text())
        assert len(sheet.rules) == 3
        headings = sheet.rules[1]
        assert [str(s) for s in headings.selectors] == [".title", "h1", "h2"]
        main = sheet.rules[2]
        assert main.selectors[0] == SimpleSelector(id="main", classes=("wide",))
        assert Declaration("padding", Length(12.5)) in main.declarations

    def test_stylesheet_is_frozen(self) -> None:
        sheet = parse("p { }")
        with pytest.raises(AttributeError):
            sheet.rules = ()  # type: ignore[misc]

    def test_collections_cannot_be_mutated_in_place(self) -> None:
        sheet = parse("p.a, #b { width: 1px; }")
        rule = sheet.rules[0]
        with pytest.raises(AttributeError):
            sheet.rules.append(rule)  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            rule.selectors.sort()  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            rule.declarations.clear()  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            rule.selectors[1].classes.append("c")  # type: ignore[attr-defined]
        assert len(sheet.rules) == 1
        assert [str(s) for s in rule.selectors] == ["#b", "p.a"]

    def test_parsed_values_are_hashable(self) -> None:
        rule = parse("p.a, p.a { width: 1px; }").rules[0]
        assert len(set(rule.selectors)) == 1
        assert hash(rule) == hash(parse("p.a, p.a { width: 1px; }").rules[0])

    def test_rule_round_trips_to_text(self) -> None:
        rule = parse("p.a, #b { width: 1.5px; color: #0a0b0c; }").rules[0]
        assert str(rule) == "#b, p.a { width: 1.5px; color: #0a0b0c; }"

    @pytest.mark.parametrize("length", ["1234567px", "0.1234567px", "0.00001px"])
    def test_lengths_reparse_exactly(self, length: str) -> None:
        rule = parse(f"p {{ width: {length}; }}").rules[0]
        assert str(rule) == f"p {{ width: {length}; }}"
        assert parse(str(rule)).rules[0] == rule


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestSyntaxErrors:
    @pytest.mark.parametrize(
        "source",
        [
            "div > p { }",
            "div p { }",
            "div",
            "p { } }",
            "p { width 10px; }",
            "p { width: 10px }",
            "p { width: 10px;",
            "p { color: #ff00; }",
            "p { color: #fff; }",
            "p { color: #ggeeff; }",
            "p { color: #ff00ff00; }",
            "p { width: 10em; }",
            "p { width: 10; }",
            "p { width: 1.2.3px; }",
            "p { : red; }",
            "p { color: ; }",
            "#{ }",
            ". { }",
        ],
    )
    def test_rejected(self, source: str) -> None:
        with pytest.raises(StylesheetSyntaxError):
            parse(source)

    def test_unrecognized_unit_message(self) -> None:
        with pytest.raises(StylesheetSyntaxError, match="Unrecognized unit 'em'"):
            parse("p { width: 10em; }")

    def test_selector_terminator_message(self) -> None:
        with pytest.raises(StylesheetSyntaxError, match="in selector list"):
            parse("div > p { }")

    def test_error_position(self) -> None:
        with pytest.raises(StylesheetSyntaxError) as exc_info:
            parse("p { }\ndiv {\n  width: 10em;\n}")
        err = exc_info.value
        assert err.line == 3
        assert err.column == 12
        assert "line 3, column 12" in str(err)

    def test_unterminated_rule(self) -> None:
        with pytest.raises(StylesheetSyntaxError, match="Unterminated rule"):
            parse("p { width: 10px;")

    def test_no_partial_stylesheet(self) -> None:
        parser = StylesheetParser("p { width: 1px; } q { width: 1em; }")
        with pytest.raises(StylesheetSyntaxError):
            parser.parse()


# ---------------------------------------------------------------------------
# Declaration recovery
# ---------------------------------------------------------------------------


class TestRecovery:
    def test_skips_only_malformed_declaration(self) -> None:
        parser = StylesheetParser((FIXTURES / "recoverable.css").read_text(), recover=True)
        sheet = parser.parse()
        assert len(sheet.rules) == 2
        assert [d.name for d in sheet.rules[0].declarations] == ["width", "color"]
        assert len(parser.diagnostics) == 1
        diag = parser.diagnostics[0]
        assert diag.severity is Severity.WARNING
        assert diag.property_name == "height"
        assert diag.line == 3

    def test_missing_semicolon_before_brace(self) -> None:
        parser = StylesheetParser("p { width: 1px; height: 2px } q { }", recover=True)
        sheet = parser.parse()
        assert [d.name for d in sheet.rules[0].declarations] == ["width"]
        assert len(sheet.rules) == 2
        assert len(parser.diagnostics) == 1

    def test_selector_errors_still_abort(self) -> None:
        with pytest.raises(StylesheetSyntaxError):
            parse("div > p { width: 1px; }", recover=True)

    def test_unterminated_rule_still_aborts(self) -> None:
        with pytest.raises(StylesheetSyntaxError):
            parse("p { width: 1em", recover=True)

    def test_recovery_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="stylebox"):
            parse("p { width: 1em; }", recover=True)
        assert "Skipped malformed declaration" in caplog.text

    def test_clean_source_has_no_diagnostics(self) -> None:
        parser = StylesheetParser("p { width: 1px; }", recover=True)
        parser.parse()
        assert parser.diagnostics == []


# ---------------------------------------------------------------------------
# Bare declaration lists
# ---------------------------------------------------------------------------


class TestParseDeclarations:
    def test_list(self) -> None:
        assert parse_declarations("display: block; width: 5px;") == [
            Declaration("display", Keyword("block")),
            Declaration("width", Length(5.0)),
        ]

    def test_empty(self) -> None:
        assert parse_declarations("  ") == []

    def test_requires_semicolon(self) -> None:
        with pytest.raises(StylesheetSyntaxError):
            parse_declarations("display: block")
