"""CLI command: gradient-parser parse -- print the syntax tree as JSON."""

from __future__ import annotations

import json
import sys

import click

from gradient_parser.cli.source import read_source
from gradient_parser.config import CliConfig
from gradient_parser.parser import ParseError, parse as parse_gradients


@click.command()
@click.argument("text", required=False)
@click.option("--file", "file", type=click.Path(exists=True), help="Read source from a file")
@click.pass_obj
def parse(config: CliConfig | None, text: str | None, file: str | None) -> None:
    """Parse gradient source and print its syntax tree as JSON.

    Source comes from TEXT, --file, or stdin. Exits with code 1 on a parse error.
    """
    config = config or CliConfig()
    source = read_source(text, file)

    try:
        definitions = parse_gradients(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps([d.to_dict() for d in definitions], indent=config.indent))
