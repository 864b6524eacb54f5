"""Box model: rectangles, edge sizes, dimensions and layout boxes."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum

from stylebox.errors import StructuralError
from stylebox.style.node import StyledNode


@dataclass
class Rect:
    """An axis-aligned rectangle; y grows downward."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def expanded_by(self, edge: EdgeSizes) -> Rect:
        """Return a new rectangle grown outward by *edge* on every side."""
        return Rect(
            x=self.x - edge.left,
            y=self.y - edge.top,
            width=self.width + edge.left + edge.right,
            height=self.height + edge.top + edge.bottom,
        )


@dataclass
class EdgeSizes:
    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass
class Dimensions:
    """Content rectangle plus padding, border and margin edges.

    ``content`` is positioned in document coordinates.
    """

    content: Rect = field(default_factory=Rect)
    padding: EdgeSizes = field(default_factory=EdgeSizes)
    border: EdgeSizes = field(default_factory=EdgeSizes)
    margin: EdgeSizes = field(default_factory=EdgeSizes)

    def copy(self) -> Dimensions:
        return copy.deepcopy(self)

    def padding_box(self) -> Rect:
        """The content area plus its padding."""
        return self.content.expanded_by(self.padding)

    def border_box(self) -> Rect:
        """The content area plus padding and borders."""
        return self.padding_box().expanded_by(self.border)

    def margin_box(self) -> Rect:
        """The border box expanded by the border edges once more.

        This is the outer extent used for stacking block siblings.  Margins
        are not part of it.
        """
        return self.border_box().expanded_by(self.border)

    @classmethod
    def for_viewport(cls, width: float) -> Dimensions:
        """An initial containing block of the given content width at the origin."""
        return cls(content=Rect(width=width))


class BoxType(Enum):
    """Kind of box generated for a node."""

    BLOCK = "block"
    INLINE = "inline"
    ANONYMOUS = "anonymous"


@dataclass
class LayoutBox:
    """A node of the box tree.

    ``style_node`` is a borrowed reference into the styled tree, which must
    outlive the box tree and stay unmodified while it exists.  Anonymous
    blocks have no styled node.
    """

    box_type: BoxType
    style_node: StyledNode | None = None
    dimensions: Dimensions = field(default_factory=Dimensions)
    children: list[LayoutBox] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.box_type is BoxType.ANONYMOUS:
            if self.style_node is not None:
                raise ValueError("Anonymous block box cannot reference a styled node")
        elif self.style_node is None:
            raise ValueError(f"{self.box_type.value} box requires a styled node")

    @classmethod
    def anonymous(cls) -> LayoutBox:
        return cls(BoxType.ANONYMOUS)

    def get_style_node(self) -> StyledNode:
        if self.box_type is BoxType.ANONYMOUS or self.style_node is None:
            raise StructuralError("Anonymous block box has no style node")
        return self.style_node

    def inline_container(self) -> LayoutBox:
        """Return the box a new inline child should be appended to.

        Inline and anonymous boxes hold inline children themselves.  A block
        box reuses its last child when that is an anonymous block, and starts
        a new anonymous block otherwise.
        """
        if self.box_type in (BoxType.INLINE, BoxType.ANONYMOUS):
            return self
        if self.box_type is BoxType.BLOCK:
            if not self.children or self.children[-1].box_type is not BoxType.ANONYMOUS:
                self.children.append(LayoutBox.anonymous())
            return self.children[-1]
        raise TypeError(f"Unhandled box type: {self.box_type!r}")
