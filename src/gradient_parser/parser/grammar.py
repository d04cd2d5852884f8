"""Recursive-descent parser for CSS gradient functions.

Grammar:
    definitions   = [ definition ( ',' definition )* ]
    definition    = 'linear-gradient' '(' [ orientation ',' ] colorstops ')'
    orientation   = side-or-corner | angle 'deg'
    colorstops    = [ colorstop ( ',' colorstop )* ]
    colorstop     = color [ length ]
    color         = '#' hex-digits | 'rgba(' numbers ')' | 'rgb(' numbers ')' | alpha-word
    length        = number 'px' | number '%' | number 'em'
    numbers       = [ number ( ',' number )* ]

Each ``_match_*`` method either consumes one production and returns its node,
or returns None when the production does not start at the cursor. Once a
keyword, parenthesis or comma has been consumed the remaining tokens of that
production are required, and a missing one raises ParseError.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, NoReturn, TypeVar

from gradient_parser.model.color import (
    Color,
    HexColor,
    Length,
    LengthUnit,
    LiteralColor,
    RgbaColor,
    RgbColor,
)
from gradient_parser.model.gradient import ColorStop, Definition, GradientKind
from gradient_parser.model.orientation import (
    AngularOrientation,
    DirectionalOrientation,
    Orientation,
)
from gradient_parser.parser import tokens
from gradient_parser.parser.errors import ParseError
from gradient_parser.parser.scanner import Scanner

__all__ = ["GradientParser", "parse"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Tried in this order; the first unit that matches wins.
_LENGTH_RULES: tuple[tuple[LengthUnit, re.Pattern[str]], ...] = (
    (LengthUnit.PX, tokens.PIXEL_VALUE),
    (LengthUnit.PERCENT, tokens.PERCENTAGE_VALUE),
    (LengthUnit.EM, tokens.EM_VALUE),
)


class GradientParser:
    """Parser for one input string.

    Every call to ``parse`` scans the text from the start with its own Scanner.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._scanner = Scanner(text)

    def parse(self) -> list[Definition]:
        """Parse the whole input, which must be consumed completely."""
        self._scanner = Scanner(self._text)
        logger.debug("Parsing gradient source %r", self._scanner.source)
        definitions = self._match_list_definitions()
        if not self._scanner.at_end:
            self._error("Invalid input not EOF")
        return definitions

    def _error(self, message: str) -> NoReturn:
        logger.debug(
            "Gradient parse failed: %s (remaining %r)", message, self._scanner.remaining
        )
        raise ParseError(
            message, source=self._scanner.source, remaining=self._scanner.remaining
        )

    # --- combinators ----------------------------------------------------------

    def _match_listing(self, matcher: Callable[[], T | None]) -> list[T]:
        """Match a comma-separated list of ``matcher`` productions.

        The first element is optional. Every comma must be followed by another
        element.
        """
        result: list[T] = []
        item = matcher()
        if item is None:
            return result

        result.append(item)
        while self._scanner.scan(tokens.COMMA) is not None:
            item = matcher()
            if item is None:
                self._error("One extra comma")
            result.append(item)
        return result

    def _match_call(self, pattern: re.Pattern[str], body: Callable[[], T]) -> T | None:
        """Match ``<keyword>(<body>)``, committing once the keyword is seen."""
        if self._scanner.scan(pattern) is None:
            return None

        if self._scanner.scan(tokens.START_CALL) is None:
            self._error("Missing (")

        result = body()

        if self._scanner.scan(tokens.END_CALL) is None:
            self._error("Missing )")
        return result

    # --- gradients ------------------------------------------------------------

    def _match_list_definitions(self) -> list[Definition]:
        return self._match_listing(self._match_definition)

    def _match_definition(self) -> Definition | None:
        return self._match_gradient(
            GradientKind.LINEAR, tokens.LINEAR_GRADIENT, self._match_orientation
        )

    def _match_gradient(
        self,
        kind: GradientKind,
        pattern: re.Pattern[str],
        orientation_matcher: Callable[[], Orientation | None],
    ) -> Definition | None:
        def body() -> Definition:
            orientation = orientation_matcher()
            if orientation is not None and self._scanner.scan(tokens.COMMA) is None:
                self._error("Missing comma before color stops")
            color_stops = self._match_listing(self._match_color_stop)
            return Definition(
                kind=kind, orientation=orientation, color_stops=tuple(color_stops)
            )

        return self._match_call(pattern, body)

    def _match_orientation(self) -> Orientation | None:
        orientation: Orientation | None = self._match_side_or_corner()
        if orientation is None:
            orientation = self._match_angle()
        return orientation

    def _match_side_or_corner(self) -> DirectionalOrientation | None:
        match = self._scanner.scan(tokens.SIDE_OR_CORNER)
        if match is None:
            return None
        return DirectionalOrientation(match.group(0))

    def _match_angle(self) -> AngularOrientation | None:
        match = self._scanner.scan(tokens.ANGLE_VALUE)
        if match is None:
            return None
        return AngularOrientation(match.group(1))

    # --- color stops ----------------------------------------------------------

    def _match_color_stop(self) -> ColorStop | None:
        color = self._match_color()
        if color is None:
            if self._scanner.peek(tokens.EMPTY_SLOT_END) is None:
                self._error("Expected color definition")
            return None
        return ColorStop(color=color, length=self._match_length())

    def _match_color(self) -> Color | None:
        # rgba before rgb: the rgb keyword is a prefix of rgba.
        for matcher in (
            self._match_hex_color,
            self._match_rgba_color,
            self._match_rgb_color,
            self._match_literal_color,
        ):
            color = matcher()
            if color is not None:
                return color
        return None

    def _match_hex_color(self) -> HexColor | None:
        match = self._scanner.scan(tokens.HEX_COLOR)
        if match is None:
            return None
        return HexColor(match.group(1))

    def _match_rgba_color(self) -> RgbaColor | None:
        return self._match_call(
            tokens.RGBA_COLOR,
            lambda: RgbaColor(tuple(self._match_listing(self._match_number))),
        )

    def _match_rgb_color(self) -> RgbColor | None:
        return self._match_call(
            tokens.RGB_COLOR,
            lambda: RgbColor(tuple(self._match_listing(self._match_number))),
        )

    def _match_literal_color(self) -> LiteralColor | None:
        match = self._scanner.scan(tokens.LITERAL_COLOR)
        if match is None:
            return None
        return LiteralColor(match.group(0))

    def _match_number(self) -> str | None:
        match = self._scanner.scan(tokens.NUMBER)
        if match is None:
            return None
        return match.group(1)

    def _match_length(self) -> Length | None:
        for unit, pattern in _LENGTH_RULES:
            match = self._scanner.scan(pattern)
            if match is not None:
                return Length(unit=unit, value=match.group(1))
        return None


def parse(text: object) -> list[Definition]:
    """Parse gradient source into a list of Definitions.

    Non-string input is converted with ``str()``. Empty or whitespace-only
    input yields an empty list.

    Raises:
        ParseError: if the input is not a valid gradient list.
    """
    return GradientParser(str(text)).parse()
