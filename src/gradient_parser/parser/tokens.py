"""Lexical rules for gradient source.

Every pattern is matched anchored at the start of the unconsumed input (see
``Scanner.scan``), so none of them carries a ``^``.
"""

from __future__ import annotations

import re

__all__ = [
    "WHITESPACE",
    "LINEAR_GRADIENT",
    "SIDE_OR_CORNER",
    "ANGLE_VALUE",
    "PIXEL_VALUE",
    "PERCENTAGE_VALUE",
    "EM_VALUE",
    "START_CALL",
    "END_CALL",
    "COMMA",
    "EMPTY_SLOT_END",
    "HEX_COLOR",
    "LITERAL_COLOR",
    "RGB_COLOR",
    "RGBA_COLOR",
    "NUMBER",
]

WHITESPACE = re.compile(r"[\n\r\t\s]+")

LINEAR_GRADIENT = re.compile(r"linear-gradient", re.IGNORECASE)

# Corners before bare sides, so "to left top" is not cut short at "to left".
SIDE_OR_CORNER = re.compile(
    r"to (left (top|bottom)|right (top|bottom)|left|right|top|bottom)",
    re.IGNORECASE,
)
ANGLE_VALUE = re.compile(r"([0-9]+)deg")

PIXEL_VALUE = re.compile(r"([0-9]+)px")
PERCENTAGE_VALUE = re.compile(r"([0-9]+)%")
EM_VALUE = re.compile(r"([0-9]+)em")

START_CALL = re.compile(r"\(")
END_CALL = re.compile(r"\)")
COMMA = re.compile(r",")
# What may follow an empty color-stop slot.
EMPTY_SLOT_END = re.compile(r"[,)]|\Z")

HEX_COLOR = re.compile(r"#([0-9a-fA-F]+)")
LITERAL_COLOR = re.compile(r"([a-zA-Z]+)")
RGB_COLOR = re.compile(r"rgb", re.IGNORECASE)
RGBA_COLOR = re.compile(r"rgba", re.IGNORECASE)

NUMBER = re.compile(r"(([0-9]*\.[0-9]+)|([0-9]+\.?))")
