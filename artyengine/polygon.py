"""Polygon shape with point and overlap tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import chain
from typing import Iterator, List, Optional, Sequence, Tuple

from artyengine import fmath
from artyengine.box import Box2
from artyengine.circle import Circle
from artyengine.segment import Segment2
from artyengine.vector import Vector2


@dataclass(frozen=True)
class Contact:
    """Result of an overlap test: penetration depth, separating normal and an optional point."""

    depth: float
    normal: Vector2
    point: Optional[Vector2] = None


def _edges(vertices: Sequence[Vector2]) -> Iterator[Tuple[Vector2, Vector2]]:
    """Pairs of (vertex, previous vertex) around the polygon."""
    return zip(vertices, list(vertices[-1:]) + list(vertices[:-1]))


def _corners(vertices: Sequence[Vector2]) -> Iterator[Tuple[Vector2, Vector2, Vector2]]:
    """Triples of (previous, current, next) vertex around the polygon."""
    points = list(vertices)
    return zip(points[-1:] + points[:-1], points, points[1:] + points[:1])


def _project(vertices: Sequence[Vector2], axis: Vector2) -> Tuple[float, float]:
    projections = [vertex.dot(axis) for vertex in vertices]
    return min(projections), max(projections)


class Polygon:
    """Polygon stored relative to its arithmetic mean, placed in the world by ``update_transform``."""

    def __init__(
        self,
        vertices: Optional[Sequence[Vector2]] = None,
        mean: Vector2 = Vector2.ZERO,
    ) -> None:
        self.mean = mean
        if vertices is None:
            self.init_vertices: List[Vector2] = []
            self.convex = True
            self.valid = False
        else:
            points = list(vertices)
            self.init_vertices = Polygon.simplify_vertices(points)
            self.convex = Polygon.is_convex(self.init_vertices)
            self.valid = len(points) >= 3
        self.vertices: List[Vector2] = [Vector2.ZERO] * len(self.init_vertices)

    def __repr__(self) -> str:
        return f"Polygon({self.vertices!r}, mean={self.mean!r})"

    def update_transform(
        self,
        mean: Vector2,
        degree: float = 0.0,
        scale: Vector2 = Vector2.UNIT,
    ) -> None:
        """Place the polygon at ``mean``, rotated by ``degree`` and scaled by ``scale``."""
        self.mean = mean
        points = self.init_vertices
        if scale != Vector2.UNIT:
            points = [vertex * scale for vertex in points]
        if degree != 0:
            points = [vertex.rotate(degree) for vertex in points]
        self.vertices = [vertex + mean for vertex in points]

    def extents(self) -> Box2:
        """Bounding box of the placed vertices."""
        if not self.vertices:
            raise ValueError("polygon has no vertices")
        xs = [vertex.x for vertex in self.vertices]
        ys = [vertex.y for vertex in self.vertices]
        return Box2(Vector2(min(xs), min(ys)), Vector2(max(xs), max(ys)))

    def contains(self, point: Vector2) -> bool:
        """Whether ``point`` lies inside, by counting edge crossings of a ray along +y."""
        if not self.valid:
            return False
        crossings = 0
        for current, previous in _edges(self.vertices):
            if fmath.is_small_number(current.x - previous.x):
                continue
            if not min(current.x, previous.x) < point.x <= max(current.x, previous.x):
                continue
            slope = (current.y - previous.y) / (current.x - previous.x)
            y = slope * (point.x - current.x) + current.y
            if y > point.y:
                crossings += 1
        return crossings % 2 == 1

    def _axes(self) -> Iterator[Vector2]:
        for current, previous in _edges(self.vertices):
            edge = current - previous
            yield Vector2(-edge.y, edge.x).safe_normal()

    def _segments(self) -> Iterator[Segment2]:
        for current, previous in _edges(self.vertices):
            yield Segment2(current, previous)

    def intersects_polygon(self, other: Polygon) -> Optional[Contact]:
        """Overlap with another polygon, or None.

        Convex pairs use the separating axis test; the normal then points from this
        polygon towards the other. Otherwise a vertex of ``other`` inside this polygon
        or a crossing of edges counts as a contact.
        """
        if not self.vertices or not other.vertices:
            return None

        if self.convex and other.convex:
            depth = math.inf
            normal = Vector2.ZERO
            direction = other.mean - self.mean
            for axis in chain(self._axes(), other._axes()):
                min_a, max_a = _project(self.vertices, axis)
                min_b, max_b = _project(other.vertices, axis)
                if min_a >= max_b or min_b >= max_a:
                    return None
                axis_depth = min(max_b - min_a, max_a - min_b)
                if axis_depth < depth:
                    depth = axis_depth
                    normal = axis if axis.dot(direction) > 0 else -axis
            return Contact(depth, normal)

        for point in other.vertices:
            if self.contains(point):
                nearest = min(self._segments(), key=lambda segment: segment.dist(point))
                return Contact(nearest.dist(point), point - nearest.closest_point(point), point)

        for own in self._segments():
            for theirs in other._segments():
                point = own.intersection(theirs)
                if point is not None:
                    return Contact(0.0, Vector2.ZERO, point)
        return None

    def intersects_circle(self, other: Circle) -> Optional[Contact]:
        """Overlap with a circle along this polygon's edge normals, or None."""
        if not self.vertices:
            return None
        depth = math.inf
        normal = Vector2.ZERO
        direction = other.center - self.mean
        for axis in self._axes():
            min_a, max_a = _project(self.vertices, axis)
            min_b = other.center.dot(axis) - other.radius
            max_b = min_b + other.radius * 2
            if min_a >= max_b or min_b >= max_a:
                return None
            axis_depth = min(max_b - min_a, max_a - min_b)
            if axis_depth < depth:
                depth = axis_depth
                normal = axis if axis.dot(direction) > 0 else -axis
        return Contact(depth, normal)

    @staticmethod
    def is_convex(vertices: Sequence[Vector2]) -> bool:
        """Whether all corners turn the same way; fewer than three vertices are not convex."""
        if len(vertices) < 3:
            return False
        turns = {
            (previous - current).cross(current - following) > 0
            for previous, current, following in _corners(vertices)
        }
        return len(turns) == 1

    @staticmethod
    def simplify_vertices(vertices: Sequence[Vector2]) -> List[Vector2]:
        """Drop vertices lying on a straight edge and centre the rest on their mean."""
        if len(vertices) < 3:
            return []
        kept = [
            current
            for previous, current, following in _corners(vertices)
            if not fmath.is_small_number((previous - current).cross(current - following))
        ]
        if not kept:
            return []
        offset = Polygon.arithmetic_mean(kept)
        return [point - offset for point in kept]

    @staticmethod
    def arithmetic_mean(vertices: Sequence[Vector2]) -> Vector2:
        """Average of the vertices."""
        if not vertices:
            raise ValueError("cannot average an empty set of vertices")
        total = Vector2.ZERO
        for vertex in vertices:
            total = total + vertex
        return total / len(vertices)