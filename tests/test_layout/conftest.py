"""Shared fixtures for layout tests."""

from __future__ import annotations

from typing import Callable

import pytest

from stylebox.style import StyledElement
from stylebox.stylesheet import parse_declarations

NodeFactory = Callable[..., StyledElement]


def _make_node(style: str = "", *children: StyledElement, tag: str = "") -> StyledElement:
    values = {d.name: d.value for d in parse_declarations(style)}
    return StyledElement(tag_name=tag, specified_values=values, children=list(children))


@pytest.fixture()
def node() -> NodeFactory:
    """Factory building a StyledElement from declaration text and children."""
    return _make_node
