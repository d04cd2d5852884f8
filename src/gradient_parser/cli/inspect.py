"""CLI command: gradient-parser inspect -- display gradient structure."""

from __future__ import annotations

import sys

import click

from gradient_parser.cli.source import read_source
from gradient_parser.model import Color, ColorStop, HexColor, LiteralColor
from gradient_parser.parser import ParseError, parse as parse_gradients


def _describe_color(color: Color) -> str:
    if isinstance(color, (HexColor, LiteralColor)):
        return f"{color.kind.value} {color.value}"
    return f"{color.kind.value} [{', '.join(color.components)}]"


def _describe_stop(stop: ColorStop) -> str:
    text = _describe_color(stop.color)
    if stop.length is not None:
        text += f"  length={stop.length.value}{stop.length.unit.value}"
    return text


@click.command()
@click.argument("text", required=False)
@click.option("--file", "file", type=click.Path(exists=True), help="Read source from a file")
def inspect(text: str | None, file: str | None) -> None:
    """Parse gradient source and display its structure.

    Shows each gradient's function, orientation and color stops.
    """
    source = read_source(text, file)

    try:
        definitions = parse_gradients(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Gradients: {len(definitions)}")
    for index, definition in enumerate(definitions):
        click.echo()
        click.echo(f"[{index}] {definition.kind.value}")
        if definition.orientation is not None:
            orientation = definition.orientation
            click.echo(f"  Orientation: {orientation.kind.value} {orientation.value}")
        click.echo(f"  Color stops: {len(definition.color_stops)}")
        for stop in definition.color_stops:
            click.echo(f"    {_describe_stop(stop)}")
