"""Orientation model: the optional direction clause of a gradient."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class OrientationKind(Enum):
    DIRECTIONAL = "directional"
    ANGULAR = "angular"


@dataclass(frozen=True)
class DirectionalOrientation:
    """A side or corner phrase, kept exactly as written (e.g. ``"To Left Top"``)."""

    value: str
    kind: ClassVar[OrientationKind] = OrientationKind.DIRECTIONAL

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "value": self.value}


@dataclass(frozen=True)
class AngularOrientation:
    """An angle in degrees; ``value`` holds the digits, the ``deg`` unit is dropped."""

    value: str
    kind: ClassVar[OrientationKind] = OrientationKind.ANGULAR

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "value": self.value}


Orientation = DirectionalOrientation | AngularOrientation
