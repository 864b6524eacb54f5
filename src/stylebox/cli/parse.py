"""CLI command: stylebox parse -- display the rules of a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylebox.errors import StylesheetSyntaxError
from stylebox.stylesheet import parse as parse_stylesheet
from stylebox.stylesheet import specificity


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
def parse(stylesheet: str) -> None:
    """Parse a stylesheet and display its rules.

    Selectors are listed most specific first, each with its
    (id, class, tag) specificity.
    """
    path = Path(stylesheet)
    try:
        sheet = parse_stylesheet(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        click.echo(f"Read error: {path.name} is not valid UTF-8: {exc}", err=True)
        sys.exit(1)
    except StylesheetSyntaxError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Stylesheet: {path.name}")
    click.echo(f"Rules: {len(sheet.rules)}")
    for index, rule in enumerate(sheet.rules, start=1):
        click.echo()
        click.echo(f"Rule {index}:")
        for selector in rule.selectors:
            a, b, c = specificity(selector)
            click.echo(f"  {selector}  specificity=({a},{b},{c})")
        for declaration in rule.declarations:
            click.echo(f"    {declaration}")
