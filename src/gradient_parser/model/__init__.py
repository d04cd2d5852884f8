"""Gradient model layer -- public type re-exports."""

from gradient_parser.model.color import (
    Color,
    ColorKind,
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
    OrientationKind,
)

__all__ = [
    # gradient
    "GradientKind",
    "Definition",
    "ColorStop",
    # orientation
    "OrientationKind",
    "Orientation",
    "DirectionalOrientation",
    "AngularOrientation",
    # color
    "ColorKind",
    "Color",
    "HexColor",
    "RgbColor",
    "RgbaColor",
    "LiteralColor",
    # length
    "LengthUnit",
    "Length",
]
