from stylebox.stylesheet.model import (
    Declaration,
    Rule,
    Selector,
    SimpleSelector,
    Specificity,
    Stylesheet,
    specificity,
)
from stylebox.stylesheet.parser import StylesheetParser, parse, parse_declarations
from stylebox.stylesheet.values import AUTO, ZERO, Color, Keyword, Length, Unit, Value, to_px

__all__ = [
    # parser
    "parse",
    "parse_declarations",
    "StylesheetParser",
    # model
    "Stylesheet",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Specificity",
    "Declaration",
    "specificity",
    # values
    "Value",
    "Keyword",
    "Length",
    "Color",
    "Unit",
    "AUTO",
    "ZERO",
    "to_px",
]
