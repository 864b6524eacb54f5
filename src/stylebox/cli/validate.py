"""CLI command: stylebox validate -- parse a stylesheet and report problems."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylebox.config import StyleboxConfig
from stylebox.errors import StylesheetSyntaxError
from stylebox.stylesheet import StylesheetParser


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--recover/--no-recover",
    default=None,
    help="Skip malformed declarations instead of failing on the first one.",
)
@click.pass_obj
def validate(config: StyleboxConfig, stylesheet: str, recover: bool | None) -> None:
    """Parse a stylesheet and report diagnostics.

    Exits with code 0 if the stylesheet parses (skipped declarations are
    reported as warnings), or code 1 on a syntax error.
    """
    path = Path(stylesheet)
    if recover is None:
        recover = config.recover_declarations

    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        click.echo(f"Read error: {path.name} is not valid UTF-8: {exc}", err=True)
        sys.exit(1)

    parser = StylesheetParser(source, recover=recover)
    try:
        sheet = parser.parse()
    except StylesheetSyntaxError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if not parser.diagnostics:
        click.echo(f"OK: {path.name} is valid ({len(sheet.rules)} rule(s))")
        sys.exit(0)

    for diag in parser.diagnostics:
        click.echo(str(diag))
    click.echo()
    click.echo(
        f"Summary: {len(sheet.rules)} rule(s), "
        f"{len(parser.diagnostics)} skipped declaration(s)"
    )
    sys.exit(0)
