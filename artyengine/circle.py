"""Circle shape."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from artyengine.box import Box2
from artyengine.vector import Vector2


@dataclass
class Circle:
    """Circle whose radius scales from the radius it was built with."""

    center: Vector2 = Vector2.ZERO
    radius: float = 0.0
    rotational_inertia: float = 0.0
    init_radius: float = field(init=False)

    def __post_init__(self) -> None:
        self.init_radius = self.radius

    def extents(self) -> Box2:
        """Bounding box of the circle."""
        offset = Vector2(self.radius, self.radius)
        return Box2(self.center - offset, self.center + offset)

    def update_transform(self, center: Vector2, scale: Vector2 = Vector2.UNIT) -> None:
        """Move the circle and, for a non-unit scale, rescale it from its initial radius."""
        self.center = center
        if scale != Vector2.UNIT:
            self.radius = self.init_radius * math.sqrt(scale.x * scale.y)