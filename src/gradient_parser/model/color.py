"""Color model: the color variants of a color stop, plus its optional length."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class ColorKind(Enum):
    """Color notations known to the parser.

    HSL is catalogued but no grammar rule produces it.
    """

    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    LITERAL = "literal"


class LengthUnit(Enum):
    """Units accepted after a color, in matching order."""

    PX = "px"
    PERCENT = "%"
    EM = "em"


@dataclass(frozen=True)
class Length:
    """Position of a color stop along the gradient line, e.g. ``50%``."""

    unit: LengthUnit
    value: str  # digits as written, e.g. "0", "100"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.unit.value, "value": self.value}


@dataclass(frozen=True)
class HexColor:
    """``#<hex-digits>``; digits stored without the ``#``, any count."""

    value: str
    kind: ClassVar[ColorKind] = ColorKind.HEX

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "value": self.value}


@dataclass(frozen=True)
class RgbColor:
    components: tuple[str, ...]
    kind: ClassVar[ColorKind] = ColorKind.RGB

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "value": list(self.components)}


@dataclass(frozen=True)
class RgbaColor:
    components: tuple[str, ...]
    kind: ClassVar[ColorKind] = ColorKind.RGBA

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "value": list(self.components)}


@dataclass(frozen=True)
class LiteralColor:
    """A bare alphabetic word such as ``red``; not checked against named colors."""

    value: str
    kind: ClassVar[ColorKind] = ColorKind.LITERAL

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "value": self.value}


Color = HexColor | RgbColor | RgbaColor | LiteralColor
