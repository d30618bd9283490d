"""Shape-level collision tests, contact information and separation."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from artyengine import fmath
from artyengine.box import Box2
from artyengine.circle import Circle
from artyengine.physics_types import HitResult
from artyengine.polygon import Polygon
from artyengine.vector import Vector2

Shape = Union[Circle, Box2]


class ColliderShape(Enum):
    CIRCLE = 0
    BOX = 1
    POLYGON = 2


class CollisionMode(Enum):
    NONE = 0
    TRIGGER = 1
    COLLISION = 2


def _shape_of(shape: object) -> ColliderShape:
    if isinstance(shape, Circle):
        return ColliderShape.CIRCLE
    if isinstance(shape, Box2):
        return ColliderShape.BOX
    if isinstance(shape, Polygon):
        return ColliderShape.POLYGON
    raise TypeError(f"not a collision shape: {shape!r}")


def _pair_key(first: object, second: object) -> int:
    a = _shape_of(first).value
    b = _shape_of(second).value
    key = a * a + b * b
    if key > 2:
        raise TypeError(
            f"no collision routine for {type(first).__name__} and {type(second).__name__}"
        )
    return key


def _center(shape: Shape) -> Vector2:
    return shape.center


def _split(first: Shape, second: Shape) -> Tuple[Circle, Box2]:
    if isinstance(first, Circle):
        return first, second  # type: ignore[return-value]
    return second, first  # type: ignore[return-value]


# Overlap tests

def _overlap_circle_circle(first: Circle, second: Circle) -> bool:
    return Vector2.dist_squared(first.center, second.center) <= (first.radius + second.radius) ** 2


def _overlap_circle_box(first: Shape, second: Shape) -> bool:
    circle, box = _split(first, second)
    radius = circle.radius
    pos = circle.center
    if box.contains_or_on(pos):
        return True
    r2 = radius * radius
    if pos.x < box.min.x:
        if pos.y > box.max.y:
            return Vector2.dist_squared(pos, Vector2(box.min.x, box.max.y)) <= r2
        if pos.y < box.min.y:
            return Vector2.dist_squared(pos, Vector2(box.min.x, box.min.y)) <= r2
        return box.min.x - pos.x <= radius
    if pos.x > box.max.x:
        if pos.y > box.max.y:
            return Vector2.dist_squared(pos, Vector2(box.max.x, box.max.y)) <= r2
        if pos.y < box.min.y:
            return Vector2.dist_squared(pos, Vector2(box.max.x, box.min.y)) <= r2
        return pos.x - box.max.x <= radius
    if pos.y > box.max.y:
        return pos.y - box.max.y <= radius
    return box.min.y - pos.y <= radius


def _overlap_box_box(first: Box2, second: Box2) -> bool:
    return first.intersects(second)


_OVERLAPS: Dict[int, Callable[..., bool]] = {
    0: _overlap_circle_circle,
    1: _overlap_circle_box,
    2: _overlap_box_box,
}


def overlaps(first: Shape, second: Shape) -> bool:
    """Whether two circles or boxes touch or overlap."""
    return _OVERLAPS[_pair_key(first, second)](first, second)


# Contact information

def _hit_circle_circle(first: Circle, second: Circle) -> HitResult:
    normal = (second.center - first.center).safe_normal()
    point = first.center + normal * first.radius
    return HitResult(point, normal)


def _hit_circle_box(first: Shape, second: Shape) -> HitResult:
    circle, box = _split(first, second)
    pos = circle.center
    if box.contains_or_on(pos):
        point = pos
        normal = (_center(second) - _center(first)).safe_normal()
    elif pos.x < box.min.x:
        if pos.y > box.max.y:
            point = Vector2(box.min.x, box.max.y)
            normal = (point - pos).safe_normal()
        elif pos.y < box.min.y:
            point = Vector2(box.min.x, box.min.y)
            normal = (point - pos).safe_normal()
        else:
            point = Vector2(box.min.x, pos.y)
            normal = Vector2(1.0, 0.0)
    elif pos.x > box.max.x:
        if pos.y > box.max.y:
            point = Vector2(box.max.x, box.max.y)
            normal = (point - pos).safe_normal()
        elif pos.y < box.min.y:
            point = Vector2(box.max.x, box.min.y)
            normal = (point - pos).safe_normal()
        else:
            point = Vector2(box.max.x, pos.y)
            normal = Vector2(-1.0, 0.0)
    elif pos.y > box.max.y:
        point = Vector2(pos.x, box.max.y)
        normal = Vector2(0.0, -1.0)
    else:
        point = Vector2(pos.x, box.min.y)
        normal = Vector2(0.0, 1.0)
    sign = 1.0 if first is circle else -1.0
    return HitResult(point, normal * sign)


def _hit_box_box(first: Box2, second: Box2) -> HitResult:
    overlap = first.overlap(second)
    size = overlap.size
    if size.x >= size.y:
        normal = Vector2(0.0, -1.0) if first.center.y - second.center.y > 0 else Vector2(0.0, 1.0)
    else:
        normal = Vector2(-1.0, 0.0) if first.center.x - second.center.x > 0 else Vector2(1.0, 0.0)
    return HitResult(overlap.center, normal)


_HITS: Dict[int, Callable[..., HitResult]] = {
    0: _hit_circle_circle,
    1: _hit_circle_box,
    2: _hit_box_box,
}


def hit(first: Shape, second: Shape) -> HitResult:
    """Impact point and normal of ``first`` touching ``second``; the normal points towards ``second``."""
    return _HITS[_pair_key(first, second)](first, second)


# Separation

def _separation_circle_circle(first: Circle, second: Circle, point: Vector2, normal: Vector2) -> float:
    return first.radius + second.radius - Vector2.distance(first.center, second.center)


def _separation_circle_box(first: Shape, second: Shape, point: Vector2, normal: Vector2) -> float:
    circle, _ = _split(first, second)
    return circle.radius - Vector2.distance(point, circle.center)


def _separation_box_box(first: Box2, second: Box2, point: Vector2, normal: Vector2) -> float:
    size = first.overlap(second).size
    return size.x * abs(normal.x) + size.y * abs(normal.y)


_SEPARATIONS: Dict[int, Callable[..., float]] = {
    0: _separation_circle_circle,
    1: _separation_circle_box,
    2: _separation_box_box,
}


def separation(first: Shape, second: Shape, impact_point: Vector2, impact_normal: Vector2) -> float:
    """Distance the shapes must move apart along the normal; zero or less means no push is needed."""
    depth = _SEPARATIONS[_pair_key(first, second)](first, second, impact_point, impact_normal)
    return depth - fmath.KINDA_SMALL_NUMBER


def resolve_offsets(
    first_kinematic: bool,
    second_kinematic: bool,
    impact_normal: Vector2,
    distance: float,
) -> Tuple[Vector2, Vector2]:
    """Position offsets for the first and second body that push them apart by ``distance``."""
    if distance <= 0:
        return Vector2.ZERO, Vector2.ZERO
    if first_kinematic and second_kinematic:
        return -impact_normal * distance * 0.5, impact_normal * distance * 0.5
    if first_kinematic:
        return -impact_normal * distance, Vector2.ZERO
    if second_kinematic:
        return Vector2.ZERO, impact_normal * distance
    return Vector2.ZERO, Vector2.ZERO


def collision_test_polygons(first: Polygon, second: Polygon) -> Optional[HitResult]:
    """Contact between two placed polygons, or None when they do not overlap."""
    contact = first.intersects_polygon(second)
    if contact is None:
        return None
    point = contact.point if contact.point is not None else Vector2.ZERO
    return HitResult(point, contact.normal)