"""Styled node interface consumed by the layout engine.

Cascade and inheritance happen elsewhere.  Layout only needs each node's
resolved declarations, its display type and its children, which is what
:class:`StyledNode` describes.  :class:`StyledElement` is a plain in-memory
implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Sequence

from stylebox.stylesheet.values import Keyword, Value


class Display(Enum):
    """Box generation for a styled node."""

    BLOCK = "block"
    INLINE = "inline"
    NONE = "none"


class StyledNode(Protocol):
    """Protocol for nodes carrying resolved style values."""

    @property
    def children(self) -> Sequence[StyledNode]: ...

    def value(self, name: str) -> Value | None:
        """Return the declared value of property *name*, if any."""
        ...

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """Return the value of *name*, else of *fallback_name*, else *default*."""
        ...

    def display(self) -> Display: ...


@dataclass
class StyledElement:
    """A styled node backed by a dict of resolved values."""

    tag_name: str = ""
    specified_values: dict[str, Value] = field(default_factory=dict)
    children: list[StyledElement] = field(default_factory=list)

    def value(self, name: str) -> Value | None:
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        value = self.value(name)
        if value is None:
            value = self.value(fallback_name)
        return default if value is None else value

    def display(self) -> Display:
        """``block`` and ``none`` keywords map directly; anything else is inline."""
        value = self.value("display")
        if isinstance(value, Keyword):
            if value.name == "block":
                return Display.BLOCK
            if value.name == "none":
                return Display.NONE
        return Display.INLINE
