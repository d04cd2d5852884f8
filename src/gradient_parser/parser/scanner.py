"""Scanner: the cursor over the unconsumed part of one parse's input."""

from __future__ import annotations

import re

from gradient_parser.parser.tokens import WHITESPACE

__all__ = ["Scanner"]


class Scanner:
    """Holds the remaining input of a single parse and consumes it pattern by pattern.

    A scanner belongs to exactly one parse; it is never shared between calls.
    """

    def __init__(self, text: str) -> None:
        self._source = text
        self._remaining = text

    @property
    def source(self) -> str:
        """The full text the scanner was created with."""
        return self._source

    @property
    def remaining(self) -> str:
        return self._remaining

    @property
    def at_end(self) -> bool:
        return not self._remaining

    def scan(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Skip leading whitespace, then match ``pattern`` at the cursor.

        Whitespace is consumed even when the pattern then fails. On a match the
        cursor moves past the matched text and the match object is returned;
        otherwise None is returned.
        """
        self._skip_whitespace()
        match = pattern.match(self._remaining)
        if match is not None:
            self._consume(match.end())
        return match

    def peek(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Skip leading whitespace, then test ``pattern`` at the cursor without consuming it."""
        self._skip_whitespace()
        return pattern.match(self._remaining)

    def _skip_whitespace(self) -> None:
        blank = WHITESPACE.match(self._remaining)
        if blank is not None:
            self._consume(blank.end())

    def _consume(self, size: int) -> None:
        self._remaining = self._remaining[size:]
