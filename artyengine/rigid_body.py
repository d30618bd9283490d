"""Simple rigid body: velocity, gravity, drag and contact response."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from artyengine import fmath
from artyengine.physics_types import PhysicsMaterial
from artyengine.scene import SceneNode
from artyengine.vector import Vector2

# A contact as seen by the body: normal pointing from the other body towards
# this one, the combined material, and the other rigid body if it has one.
Contact = Tuple[Vector2, PhysicsMaterial, Optional["RigidBody"]]


class RigidBody:
    """Moves its owner node according to velocity, gravity and contacts."""

    def __init__(self, owner: Optional[SceneNode] = None) -> None:
        self.owner = owner
        self.enabled = True
        self.velocity = Vector2.ZERO
        self.max_speed = 5000.0
        self.gravity = 980.0
        self.gravity_enabled = True
        self.angular_velocity = 0.0
        self.mass = 1.0
        self.linear_drag = 0.05
        self.angular_drag = 0.0
        self._moveable = True
        self._rotatable = True

    @property
    def moveable(self) -> bool:
        return self._moveable

    @moveable.setter
    def moveable(self, value: bool) -> None:
        self._moveable = value
        if not value:
            self.velocity = Vector2.ZERO

    @property
    def rotatable(self) -> bool:
        return self._rotatable

    @rotatable.setter
    def rotatable(self, value: bool) -> None:
        self._rotatable = value
        if not value:
            self.angular_velocity = 0.0

    def add_impulse(self, impulse: Vector2) -> None:
        if self._moveable:
            self.velocity = self.velocity + impulse / self.mass

    def _dragged(self, value: float, drag: float, delta_time: float) -> float:
        buffer = value - value * drag * delta_time / self.mass
        return 0.0 if (value < 0) != (buffer < 0) else buffer

    def update(self, delta_time: float) -> None:
        """Apply linear and angular drag and rotate the owner."""
        if self.owner is None or not self.enabled:
            return

        if self._moveable and self.linear_drag:
            vx, vy = self.velocity
            if not fmath.is_small_number(vx):
                vx = self._dragged(vx, self.linear_drag, delta_time)
            if not fmath.is_small_number(vy):
                vy = self._dragged(vy, self.linear_drag, delta_time)
            self.velocity = Vector2(vx, vy)

        if self._rotatable:
            offset = self.angular_velocity * delta_time
            self.owner.add_rotation(0.0 if fmath.is_small_number(offset) else offset)
            if self.angular_drag and not fmath.is_small_number(self.angular_velocity):
                self.angular_velocity = self._dragged(
                    self.angular_velocity, self.angular_drag, delta_time
                )

    def precise_update(self, delta_time: float, contacts: Iterable[Contact] = ()) -> Vector2:
        """Apply gravity and resting contacts, then move the owner.

        Returns the offset the owner was moved by (also computed when there is
        no owner).
        """
        if not self._moveable:
            return Vector2.ZERO
        if self.gravity_enabled:
            self.velocity = Vector2(self.velocity.x, self.velocity.y + self.gravity * delta_time)
        for normal, material, other in contacts:
            self.restrict_velocity(normal, material, other, True)

        offset = self.velocity.clamp_axes(-self.max_speed, self.max_speed) * delta_time
        offset = Vector2(
            0.0 if fmath.is_small_number(offset.x) else offset.x,
            0.0 if fmath.is_small_number(offset.y) else offset.y,
        )
        if self.owner is not None:
            self.owner.add_position(offset)
        return offset

    def restrict_velocity(
        self,
        impact_normal: Vector2,
        material: PhysicsMaterial,
        other: Optional[RigidBody] = None,
        is_stay: bool = False,
    ) -> None:
        """Respond to a contact whose normal points from the obstacle towards this body.

        Against a static obstacle the normal velocity is removed (or bounced)
        and friction slows the tangential part. Against another moving body
        the normal velocities are exchanged elastically, ignoring friction.
        """
        tangent = Vector2(impact_normal.y, -impact_normal.x)
        normal_velocity = self.velocity.project_onto(impact_normal)
        tangent_velocity = self.velocity.project_onto(tangent)

        friction = material.friction
        bounciness = fmath.clamp(material.bounciness, 0.0, 1.0)

        if other is None or not other.moveable:
            if self.velocity.dot(impact_normal) < 0:
                multiplier = 1.0 - normal_velocity.size() * friction * fmath.inv_sqrt(
                    tangent_velocity.size_squared()
                )
                multiplier = fmath.clamp(multiplier, 0.0, 1.0)
                bounce = Vector2.ZERO if is_stay else normal_velocity
                self.velocity = tangent_velocity * multiplier - bounciness * bounce
            return

        other_normal = other.velocity.project_onto(impact_normal)
        other_tangent = other.velocity.project_onto(tangent)

        if (normal_velocity - other_normal).dot(impact_normal) >= 0:
            return

        total = self.mass + other.mass
        new_normal = (
            (self.mass - bounciness * other.mass) * normal_velocity
            + (1 + bounciness) * other.mass * other_normal
        ) / total
        new_other_normal = (
            (other.mass - bounciness * self.mass) * other_normal
            + (1 + bounciness) * self.mass * normal_velocity
        ) / total

        self.velocity = new_normal + tangent_velocity
        other.velocity = new_other_normal + other_tangent