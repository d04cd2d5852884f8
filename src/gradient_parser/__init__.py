"""Parser for CSS gradient functions such as ``linear-gradient(...)``."""

from gradient_parser.model import (
    AngularOrientation,
    Color,
    ColorKind,
    ColorStop,
    Definition,
    DirectionalOrientation,
    GradientKind,
    HexColor,
    Length,
    LengthUnit,
    LiteralColor,
    Orientation,
    OrientationKind,
    RgbaColor,
    RgbColor,
)
from gradient_parser.parser import ParseError, parse

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "parse",
    "ParseError",
    "GradientKind",
    "Definition",
    "ColorStop",
    "OrientationKind",
    "Orientation",
    "DirectionalOrientation",
    "AngularOrientation",
    "ColorKind",
    "Color",
    "HexColor",
    "RgbColor",
    "RgbaColor",
    "LiteralColor",
    "LengthUnit",
    "Length",
]
