"""CLI command: stylebox layout -- lay out a styled tree and print its boxes."""

from __future__ import annotations

import json
import sys
from typing import Any

import click

from stylebox.config import StyleboxConfig
from stylebox.errors import StyleboxError
from stylebox.layout import BoxType, Dimensions, LayoutBox, Rect, layout_tree
from stylebox.style import load_tree_file


def _rect_dict(rect: Rect) -> dict[str, float]:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def _box_label(box: LayoutBox) -> str:
    if box.box_type is BoxType.ANONYMOUS:
        return "anonymous"
    tag = getattr(box.style_node, "tag_name", "")
    return f"{box.box_type.value} <{tag}>" if tag else box.box_type.value


def _box_dict(box: LayoutBox) -> dict[str, Any]:
    d = box.dimensions
    return {
        "type": box.box_type.value,
        "tag": getattr(box.style_node, "tag_name", None),
        "content": _rect_dict(d.content),
        "padding_box": _rect_dict(d.padding_box()),
        "border_box": _rect_dict(d.border_box()),
        "margin_box": _rect_dict(d.margin_box()),
        "margin": vars(d.margin),
        "children": [_box_dict(child) for child in box.children],
    }


def _echo_outline(box: LayoutBox, depth: int = 0) -> None:
    c = box.dimensions.content
    click.echo(
        f"{'  ' * depth}{_box_label(box)}  "
        f"x={c.x:g} y={c.y:g} width={c.width:g} height={c.height:g}"
    )
    for child in box.children:
        _echo_outline(child, depth + 1)


@click.command()
@click.argument("tree", type=click.Path(exists=True, dir_okay=False))
@click.option("--width", type=float, default=None, help="Viewport width in pixels.")
@click.option("--json", "as_json", is_flag=True, help="Print the box tree as JSON.")
@click.pass_obj
def layout(config: StyleboxConfig, tree: str, width: float | None, as_json: bool) -> None:
    """Lay out a styled tree read from a JSON file.

    Each node is an object with optional "tag", "style" (declarations such as
    "display: block; width: 200px;") and "children" keys.
    """
    viewport = Dimensions.for_viewport(width if width is not None else config.viewport_width)
    try:
        root = load_tree_file(tree)
        box = layout_tree(root, viewport)
    except StyleboxError as exc:
        click.echo(f"Layout error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(_box_dict(box), indent=2))
    else:
        _echo_outline(box)
