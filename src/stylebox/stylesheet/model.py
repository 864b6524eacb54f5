"""Stylesheet model: selectors, declarations, rules and the stylesheet itself."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from stylebox.stylesheet.values import Value

# (id count, class count, tag count), compared lexicographically.
Specificity = Tuple[int, int, int]


@dataclass(frozen=True)
class SimpleSelector:
    """A compound of an optional tag name, an optional id and class names.

    ``div#main.note.wide`` has tag ``div``, id ``main`` and classes
    ``("note", "wide")``.  The universal selector ``*`` contributes nothing.
    """

    tag_name: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()

    @property
    def specificity(self) -> Specificity:
        return (
            1 if self.id is not None else 0,
            len(self.classes),
            1 if self.tag_name is not None else 0,
        )

    def __str__(self) -> str:
        text = self.tag_name or ""
        if self.id is not None:
            text += f"#{self.id}"
        text += "".join(f".{name}" for name in self.classes)
        return text or "*"


# Only simple selectors exist today; combinators would join this union.
Selector = Union[SimpleSelector]


def specificity(selector: Selector) -> Specificity:
    """Return the specificity of any selector kind."""
    if isinstance(selector, SimpleSelector):
        return selector.specificity
    raise TypeError(f"Unhandled selector: {selector!r}")


@dataclass(frozen=True)
class Declaration:
    """A ``name: value`` pair."""

    name: str
    value: Value

    def __str__(self) -> str:
        return f"{self.name}: {self.value};"


@dataclass(frozen=True)
class Rule:
    """A selector group with its declarations.

    ``selectors`` is ordered most specific first; selectors of equal
    specificity keep their source order.
    """

    selectors: tuple[Selector, ...]
    declarations: tuple[Declaration, ...]

    def __str__(self) -> str:
        selectors = ", ".join(str(s) for s in self.selectors)
        body = " ".join(str(d) for d in self.declarations)
        return f"{selectors} {{ {body} }}" if body else f"{selectors} {{ }}"


@dataclass(frozen=True)
class Stylesheet:
    """The rules of one stylesheet, in source order."""

    rules: tuple[Rule, ...] = ()
