"""Gradient model: ColorStop and Definition dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from gradient_parser.model.color import Color, Length
from gradient_parser.model.orientation import Orientation


class GradientKind(Enum):
    """Gradient functions known to the parser.

    Only LINEAR is reachable from the grammar; the radial kinds are catalogued
    for consumers that dispatch on gradient type.
    """

    LINEAR = "linear-gradient"
    RADIAL = "radial-gradient"
    REPEATING_RADIAL = "repeating-radial-gradient"


@dataclass(frozen=True)
class ColorStop:
    """A color with an optional position along the gradient line."""

    color: Color
    length: Length | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": self.color.to_dict(),
            "length": self.length.to_dict() if self.length is not None else None,
        }


@dataclass(frozen=True)
class Definition:
    """One parsed gradient function call.

    Attributes:
        kind: Which gradient function was matched.
        orientation: The direction clause, or None when the call has none.
        color_stops: Color stops in source order.
    """

    kind: GradientKind
    orientation: Orientation | None = None
    color_stops: tuple[ColorStop, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "orientation": self.orientation.to_dict() if self.orientation is not None else None,
            "colorStops": [stop.to_dict() for stop in self.color_stops],
        }
