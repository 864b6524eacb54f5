"""Block layout: compute the geometry of every block box in a box tree.

Each block box is laid out in four dependent phases:

1. width, which needs the containing block's width and must precede the
   children because their available width is this box's width;
2. position, stacking the box below the content already placed in its
   containing block;
3. children, laid out in source order, each one growing this box's content
   height by its margin-box height;
4. height, where an explicit pixel ``height`` overrides the accumulated one.

Inline and anonymous boxes are left at zero size; inline formatting is not
implemented.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stylebox.layout.box import BoxType, Dimensions, LayoutBox
from stylebox.layout.builder import build_layout_tree
from stylebox.style.node import StyledNode
from stylebox.stylesheet.values import AUTO, ZERO, Length, Unit, Value, to_px

__all__ = ["UsedWidth", "layout", "layout_block", "layout_tree", "resolve_width"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UsedWidth:
    """Used horizontal values of a block box, in pixels."""

    margin_left: float
    width: float
    margin_right: float


def resolve_width(
    *,
    containing_width: float,
    width: Value = AUTO,
    margin_left: Value = AUTO,
    margin_right: Value = AUTO,
    border_left: Value = ZERO,
    border_right: Value = ZERO,
    padding_left: Value = ZERO,
    padding_right: Value = ZERO,
) -> UsedWidth:
    """Distribute *containing_width* between width and the horizontal margins.

    ``auto`` width absorbs any free space.  With an explicit width, two
    ``auto`` margins split the free space evenly, a single ``auto`` margin
    becomes 0, and with no ``auto`` at all the right margin takes up the
    difference.  When the explicit values already overflow the containing
    block, ``auto`` margins are 0.  An ``auto`` width never goes negative;
    the right margin turns negative instead.
    """
    total = sum(
        to_px(v)
        for v in (margin_left, margin_right, border_left, border_right,
                  padding_left, padding_right, width)
    )

    if width != AUTO and total > containing_width:
        if margin_left == AUTO:
            margin_left = ZERO
        if margin_right == AUTO:
            margin_right = ZERO

    underflow = containing_width - total
    width_auto = width == AUTO
    left_auto = margin_left == AUTO
    right_auto = margin_right == AUTO

    if not width_auto and not left_auto and not right_auto:
        # Over-constrained: the right margin gives way.
        margin_right = Length(to_px(margin_right) + underflow, Unit.PX)
    elif not width_auto and not left_auto and right_auto:
        margin_right = ZERO
    elif not width_auto and left_auto and not right_auto:
        margin_left = ZERO
    elif width_auto:
        if left_auto:
            margin_left = ZERO
        if right_auto:
            margin_right = ZERO
        if underflow >= 0.0:
            width = Length(underflow, Unit.PX)
        else:
            width = ZERO
            margin_right = Length(to_px(margin_right) + underflow, Unit.PX)
    else:
        margin_left = Length(underflow / 2.0, Unit.PX)
        margin_right = Length(underflow / 2.0, Unit.PX)

    return UsedWidth(
        margin_left=to_px(margin_left),
        width=to_px(width),
        margin_right=to_px(margin_right),
    )


def layout_tree(node: StyledNode, containing_block: Dimensions) -> LayoutBox:
    """Build the box tree for *node* and lay it out inside *containing_block*.

    The containing block's content width must already be set, typically to
    the viewport width.  Its height is treated as 0, starting a fresh block
    formatting context; the caller's object is left untouched.
    """
    containing_block = containing_block.copy()
    containing_block.content.height = 0.0

    root_box = build_layout_tree(node)
    layout(root_box, containing_block)
    return root_box


def layout(box: LayoutBox, containing_block: Dimensions) -> None:
    """Lay out *box* and its descendants."""
    if box.box_type is BoxType.BLOCK:
        layout_block(box, containing_block)
    elif box.box_type in (BoxType.INLINE, BoxType.ANONYMOUS):
        pass
    else:
        raise TypeError(f"Unhandled box type: {box.box_type!r}")


def layout_block(box: LayoutBox, containing_block: Dimensions) -> None:
    """Lay out a block box and its descendants."""
    _calculate_block_width(box, containing_block)
    _calculate_block_position(box, containing_block)
    _layout_block_children(box)
    _calculate_block_height(box)


def _calculate_block_width(box: LayoutBox, containing_block: Dimensions) -> None:
    style = box.get_style_node()

    width = style.value("width")
    if width is None:
        width = AUTO

    margin_left = style.lookup("margin-left", "margin", AUTO)
    margin_right = style.lookup("margin-right", "margin", AUTO)

    border_left = style.lookup("border-left-width", "border-width", ZERO)
    border_right = style.lookup("border-right-width", "border-width", ZERO)

    padding_left = style.lookup("padding-left", "padding", ZERO)
    padding_right = style.lookup("padding-right", "padding", ZERO)

    used = resolve_width(
        containing_width=containing_block.content.width,
        width=width,
        margin_left=margin_left,
        margin_right=margin_right,
        border_left=border_left,
        border_right=border_right,
        padding_left=padding_left,
        padding_right=padding_right,
    )

    d = box.dimensions
    d.content.width = used.width
    d.padding.left = to_px(padding_left)
    d.padding.right = to_px(padding_right)
    d.border.left = to_px(border_left)
    d.border.right = to_px(border_right)
    d.margin.left = used.margin_left
    d.margin.right = used.margin_right
    logger.debug(
        "Used width %.2f (margin-left %.2f, margin-right %.2f) in %.2f",
        used.width, used.margin_left, used.margin_right, containing_block.content.width,
    )


def _calculate_block_position(box: LayoutBox, containing_block: Dimensions) -> None:
    style = box.get_style_node()
    d = box.dimensions

    # Vertical auto margins are 0; to_px maps every keyword to 0.
    d.margin.top = to_px(style.lookup("margin-top", "margin", ZERO))
    d.margin.bottom = to_px(style.lookup("margin-bottom", "margin", ZERO))

    d.border.top = to_px(style.lookup("border-top-width", "border-width", ZERO))
    d.border.bottom = to_px(style.lookup("border-bottom-width", "border-width", ZERO))

    d.padding.top = to_px(style.lookup("padding-top", "padding", ZERO))
    d.padding.bottom = to_px(style.lookup("padding-bottom", "padding", ZERO))

    d.content.x = (
        containing_block.content.x + d.margin.left + d.border.left + d.padding.left
    )
    # Stack below everything already placed in the containing block.
    d.content.y = (
        containing_block.content.y
        + containing_block.content.height
        + d.margin.top
        + d.border.top
        + d.padding.top
    )


def _layout_block_children(box: LayoutBox) -> None:
    d = box.dimensions
    for child in box.children:
        layout(child, d)
        d.content.height += child.dimensions.margin_box().height


def _calculate_block_height(box: LayoutBox) -> None:
    height = box.get_style_node().value("height")
    if isinstance(height, Length) and height.unit is Unit.PX:
        box.dimensions.content.height = height.value
