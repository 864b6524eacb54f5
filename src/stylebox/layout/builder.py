"""Build the box tree for a styled tree, without computing any geometry."""

from __future__ import annotations

import logging

from stylebox.errors import StructuralError
from stylebox.layout.box import BoxType, LayoutBox
from stylebox.style.node import Display, StyledNode

__all__ = ["build_layout_tree"]

logger = logging.getLogger(__name__)


def _box_type_for(display: Display) -> BoxType:
    if display is Display.BLOCK:
        return BoxType.BLOCK
    if display is Display.INLINE:
        return BoxType.INLINE
    if display is Display.NONE:
        raise StructuralError("Root node has display: none")
    raise TypeError(f"Unhandled display: {display!r}")


def build_layout_tree(style_node: StyledNode) -> LayoutBox:
    """Create the box for *style_node* and its descendants.

    Inline children of a block box are wrapped in anonymous block boxes so a
    block never has block and inline children side by side.  Nodes with
    ``display: none`` produce no box and their subtrees are not visited.
    """
    root = LayoutBox(_box_type_for(style_node.display()), style_node)

    for child in style_node.children:
        display = child.display()
        if display is Display.BLOCK:
            root.children.append(build_layout_tree(child))
        elif display is Display.INLINE:
            root.inline_container().children.append(build_layout_tree(child))
        elif display is Display.NONE:
            continue
        else:
            raise TypeError(f"Unhandled display: {display!r}")

    logger.debug(
        "Built %s box with %d child box(es)", root.box_type.value, len(root.children)
    )
    return root
