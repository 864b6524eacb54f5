"""Stylebox CLI entry point: Click group with subcommands."""

from __future__ import annotations

from dataclasses import replace

import click

from stylebox import __version__
from stylebox.config import StyleboxConfig, configure_logging

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(version=__version__, prog_name="stylebox")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (default: $STYLEBOX_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Stylebox - stylesheet parser and block layout engine."""
    config = StyleboxConfig.from_env()
    if log_level:
        config = replace(config, log_level=log_level.upper())
    try:
        configure_logging(config)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    ctx.obj = config


# Import and register subcommands
from stylebox.cli.layout import layout  # noqa: E402
from stylebox.cli.parse import parse  # noqa: E402
from stylebox.cli.validate import validate  # noqa: E402

cli.add_command(parse)
cli.add_command(validate)
cli.add_command(layout)
