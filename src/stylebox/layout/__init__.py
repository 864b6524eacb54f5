from stylebox.layout.block import UsedWidth, layout, layout_block, layout_tree, resolve_width
from stylebox.layout.box import BoxType, Dimensions, EdgeSizes, LayoutBox, Rect
from stylebox.layout.builder import build_layout_tree

__all__ = [
    # box model
    "Rect",
    "EdgeSizes",
    "Dimensions",
    "BoxType",
    "LayoutBox",
    # tree building
    "build_layout_tree",
    # block layout
    "layout_tree",
    "layout",
    "layout_block",
    "resolve_width",
    "UsedWidth",
]
