"""Two dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

from artyengine import fmath

_Operand = Union["Vector2", float]


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector; y grows downwards on screen."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vector2"]
    UNIT: ClassVar["Vector2"]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        return self.x if fmath.clamp(index, 0, 1) == 0 else self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __abs__(self) -> Vector2:
        return Vector2(abs(self.x), abs(self.y))

    def __mul__(self, other: _Operand) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    def __rmul__(self, other: float) -> Vector2:
        return Vector2(self.x * other, self.y * other)

    def __truediv__(self, other: _Operand) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        return Vector2(self.x / other, self.y / other)

    # Component-wise partial ordering: true only if both axes satisfy it.
    def __gt__(self, other: Vector2) -> bool:
        return self.x > other.x and self.y > other.y

    def __lt__(self, other: Vector2) -> bool:
        return self.x < other.x and self.y < other.y

    def __ge__(self, other: Vector2) -> bool:
        return self.x >= other.x and self.y >= other.y

    def __le__(self, other: Vector2) -> bool:
        return self.x <= other.x and self.y <= other.y

    def __str__(self) -> str:
        return f"({int(self.x)},{int(self.y)})"

    def size_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def size(self) -> float:
        return math.sqrt(self.size_squared())

    def zeroed(self, tolerance: float = fmath.KINDA_SMALL_NUMBER) -> Vector2:
        """Copy with components smaller than ``tolerance`` set to zero."""
        return Vector2(
            0.0 if abs(self.x) < tolerance else self.x,
            0.0 if abs(self.y) < tolerance else self.y,
        )

    def safe_normal(self, tolerance: float = fmath.SMALL_NUMBER) -> Vector2:
        """Unit vector in the same direction, or zero if the squared length is below ``tolerance``."""
        square_sum = self.size_squared()
        if square_sum > tolerance:
            return self * fmath.inv_sqrt(square_sum)
        return Vector2.ZERO

    def clamp_axes(self, min_value: float, max_value: float) -> Vector2:
        return Vector2(
            fmath.clamp(self.x, min_value, max_value),
            fmath.clamp(self.y, min_value, max_value),
        )

    def is_nearly_zero(self, tolerance: float = fmath.KINDA_SMALL_NUMBER) -> bool:
        return abs(self.x) <= tolerance and abs(self.y) <= tolerance

    def equals(self, other: Vector2, tolerance: float = fmath.KINDA_SMALL_NUMBER) -> bool:
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - other.x * self.y

    @staticmethod
    def dist_squared(a: Vector2, b: Vector2) -> float:
        return (a - b).size_squared()

    @staticmethod
    def distance(a: Vector2, b: Vector2) -> float:
        return math.sqrt(Vector2.dist_squared(a, b))

    def to_degree(self) -> float:
        """Angle of the vector in degrees, counter-clockwise on screen."""
        if self == Vector2.ZERO:
            return 0.0
        return fmath.radian_to_degree(fmath.atan2(-self.y, self.x))

    @staticmethod
    def from_degree(angle: float) -> Vector2:
        """Unit vector pointing at ``angle`` degrees, counter-clockwise on screen."""
        radian = -fmath.degree_to_radian(angle)
        return Vector2(math.cos(radian), math.sin(radian))

    def rotate(self, angle: float) -> Vector2:
        radian = fmath.degree_to_radian(angle)
        sin = math.sin(radian)
        cos = math.cos(radian)
        return Vector2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def rotate_around(self, angle: float, center: Vector2) -> Vector2:
        return (self - center).rotate(angle) + center

    def project_onto(self, other: Vector2) -> Vector2:
        """Projection of this vector onto the line through ``other``."""
        scalar = self.dot(other) * fmath.inv_sqrt(other.size_squared())
        return other.safe_normal() * scalar


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.UNIT = Vector2(1.0, 1.0)