"""Resolve the gradient source for a CLI command."""

from __future__ import annotations

from pathlib import Path

import click


def read_source(text: str | None, file: str | None) -> str:
    """Return TEXT, the contents of --file, or stdin, in that order of preference."""
    if text is not None and file is not None:
        raise click.UsageError("Pass either TEXT or --file, not both.")
    if text is not None:
        return text
    if file is not None:
        return Path(file).read_text(encoding="utf-8")
    return click.get_text_stream("stdin").read()
