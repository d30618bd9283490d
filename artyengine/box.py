"""Axis-aligned rectangle."""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from typing import ClassVar

from artyengine.vector import Vector2


@dataclass(frozen=True)
class Box2:
    """Axis-aligned box; a box built from corners that are not strictly ordered is empty."""

    min: Vector2 = Vector2.ZERO
    max: Vector2 = Vector2.ZERO
    _validate: InitVar[bool] = True

    EMPTY: ClassVar["Box2"]

    def __post_init__(self, _validate: bool) -> None:
        if _validate and (self.min.x >= self.max.x or self.min.y >= self.max.y):
            object.__setattr__(self, "min", Vector2.ZERO)
            object.__setattr__(self, "max", Vector2.ZERO)

    @classmethod
    def from_center(cls, center: Vector2, width: float, height: float) -> Box2:
        """Box of the given size centred on ``center``, kept as given even if degenerate."""
        half = Vector2(width * 0.5, height * 0.5)
        return cls(center - half, center + half, False)

    @property
    def center(self) -> Vector2:
        return (self.min + self.max) * 0.5

    @property
    def size(self) -> Vector2:
        return self.max - self.min

    @property
    def half(self) -> Vector2:
        return 0.5 * (self.max - self.min)

    @property
    def area(self) -> float:
        return (self.max.x - self.min.x) * (self.max.y - self.min.y)

    def contains(self, point: Vector2) -> bool:
        """Whether ``point`` lies strictly inside the box."""
        return self.min.x < point.x < self.max.x and self.min.y < point.y < self.max.y

    def contains_or_on(self, point: Vector2) -> bool:
        """Whether ``point`` lies inside the box or on its edge."""
        return self.min.x <= point.x <= self.max.x and self.min.y <= point.y <= self.max.y

    def is_on(self, point: Vector2) -> bool:
        """Whether ``point`` lies exactly on the edge."""
        return not self.contains(point) and self.contains_or_on(point)

    def intersects(self, other: Box2) -> bool:
        if self.min.x > other.max.x or other.min.x > self.max.x:
            return False
        if self.min.y > other.max.y or other.min.y > self.max.y:
            return False
        return True

    def overlap(self, other: Box2) -> Box2:
        """Intersection of the two boxes, or the empty box."""
        if not self.intersects(other):
            return Box2.EMPTY
        return Box2(
            Vector2(max(self.min.x, other.min.x), max(self.min.y, other.min.y)),
            Vector2(min(self.max.x, other.max.x), min(self.max.y, other.max.y)),
        )

    def closest_point_to(self, point: Vector2) -> Vector2:
        x = point.x
        if point.x < self.min.x:
            x = self.min.x
        elif point.x > self.max.x:
            x = self.max.x
        y = point.y
        if point.y < self.min.y:
            y = self.min.y
        elif point.y > self.max.y:
            y = self.max.y
        return Vector2(x, y)


Box2.EMPTY = Box2()