"""Build a StyledElement tree from JSON-compatible data.

Each node is a mapping::

    {"tag": "div", "style": "display: block; width: 200px;", "children": [...]}

``style`` holds the node's already-resolved declarations; later declarations
of the same property win.  All keys are optional.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from stylebox.errors import StructuralError
from stylebox.style.node import StyledElement
from stylebox.stylesheet.parser import parse_declarations
from stylebox.stylesheet.values import Value

__all__ = ["load_tree", "load_tree_file"]

logger = logging.getLogger(__name__)

_NODE_KEYS = frozenset({"tag", "style", "children"})


def _build_element(data: Any, path: str) -> StyledElement:
    if not isinstance(data, Mapping):
        raise StructuralError(f"{path}: expected an object, got {type(data).__name__}")
    unknown = set(data) - _NODE_KEYS
    if unknown:
        raise StructuralError(f"{path}: unknown key(s) {', '.join(sorted(unknown))}")

    tag = data.get("tag", "")
    style = data.get("style", "")
    children = data.get("children", [])
    if not isinstance(tag, str):
        raise StructuralError(f"{path}: 'tag' must be a string")
    if not isinstance(style, str):
        raise StructuralError(f"{path}: 'style' must be a string")
    if not isinstance(children, list):
        raise StructuralError(f"{path}: 'children' must be a list")

    values: dict[str, Value] = {}
    for declaration in parse_declarations(style):
        values[declaration.name] = declaration.value

    return StyledElement(
        tag_name=tag,
        specified_values=values,
        children=[
            _build_element(child, f"{path}.children[{i}]")
            for i, child in enumerate(children)
        ],
    )


def load_tree(data: Mapping[str, Any]) -> StyledElement:
    """Build a styled tree from a nested mapping.

    Raises :class:`StructuralError` for malformed tree data and
    :class:`~stylebox.errors.StylesheetSyntaxError` for malformed style text.
    """
    return _build_element(data, "root")


def load_tree_file(path: str | Path) -> StyledElement:
    """Read a JSON document from *path* and build a styled tree from it."""
    try:
        source = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise StructuralError(f"{path} is not valid UTF-8: {exc}") from exc
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise StructuralError(f"Invalid JSON in {path}: {exc}") from exc
    logger.debug("Loaded styled tree from %s", path)
    return load_tree(data)
