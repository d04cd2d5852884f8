"""gradient-parser CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from gradient_parser import __version__
from gradient_parser.config import CliConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.version_option(version=__version__, prog_name="gradient-parser")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level",
)
@click.option("--indent", default=2, type=int, help="JSON indent for parse output")
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int) -> None:
    """gradient-parser - parse CSS gradient functions into a syntax tree."""
    config = CliConfig(indent=indent, log_level=log_level.upper())
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from gradient_parser.cli.inspect import inspect  # noqa: E402
from gradient_parser.cli.parse import parse  # noqa: E402

cli.add_command(parse)
cli.add_command(inspect)
