"""Two dimensional ray."""

from __future__ import annotations

import math
from dataclasses import dataclass

from artyengine import fmath
from artyengine.vector import Vector2


@dataclass(frozen=True, eq=False)
class Ray2:
    """Half-line starting at ``origin``; the direction is stored normalised."""

    origin: Vector2 = Vector2.ZERO
    direction: Vector2 = Vector2.UNIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.direction.safe_normal())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray2):
            return NotImplemented
        return self.origin == other.origin and self.direction.equals(other.direction)

    def point_at(self, distance: float) -> Vector2:
        """Point at the given signed distance along the ray."""
        return self.origin + distance * self.direction

    def parameter(self, point: Vector2) -> float:
        """Signed distance from the origin to the projection of ``point`` onto the ray."""
        return (point - self.origin).dot(self.direction)

    def is_on(self, point: Vector2) -> bool:
        if point == self.origin:
            return True
        return fmath.is_small_number(self.dist_squared(point))

    def dist_squared(self, point: Vector2) -> float:
        """Squared shortest distance from ``point`` to the ray."""
        distance = self.parameter(point)
        if distance < 0:
            return Vector2.dist_squared(self.origin, point)
        return Vector2.dist_squared(self.point_at(distance), point)

    def dist(self, point: Vector2) -> float:
        return math.sqrt(self.dist_squared(point))

    def closest_point(self, point: Vector2) -> Vector2:
        """Point of the ray nearest to ``point``."""
        distance = self.parameter(point)
        if distance < 0:
            return self.origin
        return self.point_at(distance)