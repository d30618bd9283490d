"""Two dimensional line segment."""

from __future__ import annotations

import math
from typing import Optional

from artyengine import fmath
from artyengine.ray import Ray2
from artyengine.vector import Vector2


class Segment2:
    """Segment described by two rays pointing at each other from its ends."""

    __slots__ = ("ray1", "ray2")

    def __init__(self, start: Vector2 = Vector2.ZERO, end: Vector2 = Vector2.ZERO) -> None:
        self.ray1 = Ray2(start, end - start)
        self.ray2 = Ray2(end, start - end)

    @property
    def start(self) -> Vector2:
        return self.ray1.origin

    @property
    def end(self) -> Vector2:
        return self.ray2.origin

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment2):
            return NotImplemented
        return (self.start == other.start and self.end == other.end) or (
            self.start == other.end and self.end == other.start
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Segment2({self.start!r}, {self.end!r})"

    def _between_ends(self, point: Vector2) -> bool:
        return self.ray1.parameter(point) >= 0 and self.ray2.parameter(point) >= 0

    def is_on(self, point: Vector2) -> bool:
        return self.ray1.is_on(point) and self.ray2.is_on(point)

    def dist_squared(self, point: Vector2) -> float:
        """Squared shortest distance from ``point`` to the segment."""
        if self._between_ends(point):
            return self.ray1.dist_squared(point)
        return min(
            Vector2.dist_squared(point, self.start),
            Vector2.dist_squared(point, self.end),
        )

    def dist(self, point: Vector2) -> float:
        return math.sqrt(self.dist_squared(point))

    def closest_point(self, point: Vector2) -> Vector2:
        """Point of the segment nearest to ``point``."""
        if self._between_ends(point):
            return self.ray1.point_at(self.ray1.parameter(point))
        if self.ray1.parameter(point) < 0:
            return self.start
        return self.end

    def intersection(self, other: Segment2) -> Optional[Vector2]:
        """Crossing point with ``other``, or None for parallel or disjoint segments."""
        x1, y1 = self.start
        x2, y2 = self.end
        x3, y3 = other.start
        x4, y4 = other.end

        det = (x2 - x1) * (y4 - y3) - (y2 - y1) * (x4 - x3)
        if abs(det) < fmath.SMALL_NUMBER:
            return None

        t = ((x3 - x1) * (y4 - y3) - (y3 - y1) * (x4 - x3)) / det
        s = ((x2 - x1) * (y3 - y1) - (y2 - y1) * (x3 - x1)) / det
        if not (0 <= t <= 1 and 0 <= s <= 1):
            return None
        return Vector2(x1 + t * (x2 - x1), y1 + t * (y2 - y1))