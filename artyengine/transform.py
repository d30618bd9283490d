"""Position, rotation and scale of a scene object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from artyengine.vector import Vector2


@dataclass(frozen=True)
class Transform:
    """Immutable 2D transform; rotation is in degrees."""

    position: Vector2 = Vector2.ZERO
    rotation: float = 0.0
    scale: Vector2 = Vector2.UNIT

    IDENTITY: ClassVar["Transform"]

    def __add__(self, other: Transform) -> Transform:
        return Transform(
            self.position + other.position,
            self.rotation + other.rotation,
            self.scale + other.scale,
        )

    def __sub__(self, other: Transform) -> Transform:
        return Transform(
            self.position - other.position,
            self.rotation - other.rotation,
            self.scale - other.scale,
        )

    def __mul__(self, multiplier: float) -> Transform:
        return Transform(
            self.position * multiplier,
            self.rotation * multiplier,
            self.scale * multiplier,
        )

    __rmul__ = __mul__


Transform.IDENTITY = Transform()