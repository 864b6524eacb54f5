"""Stylebox: a stylesheet parser and block layout engine."""

from stylebox.errors import StructuralError, StyleboxError, StylesheetSyntaxError
from stylebox.layout import Dimensions, LayoutBox, build_layout_tree, layout_tree
from stylebox.stylesheet import Stylesheet, parse

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "parse",
    "Stylesheet",
    "build_layout_tree",
    "layout_tree",
    "Dimensions",
    "LayoutBox",
    "StyleboxError",
    "StylesheetSyntaxError",
    "StructuralError",
]
