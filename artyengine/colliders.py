"""Collider components, their contact bookkeeping and the spatial grid that pairs them."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from dataclasses import replace
from functools import lru_cache
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple, Union

from artyengine import collisions, fmath
from artyengine.box import Box2
from artyengine.circle import Circle
from artyengine.collision_manager import CollisionManager, CollisionType
from artyengine.collisions import ColliderShape, CollisionMode
from artyengine.delegate import MulticastDelegate
from artyengine.physics_types import HitResult, PhysicsMaterial
from artyengine.rigid_body import RigidBody
from artyengine.scene import SceneNode
from artyengine.vector import Vector2

_order = itertools.count()

Cell = Tuple[int, int]


@lru_cache(maxsize=None)
def default_collision_manager() -> CollisionManager:
    """Shared collision table filled with the default responses."""
    manager = CollisionManager()
    manager.initialize()
    return manager


class Collider(SceneNode, ABC):
    """Scene node that detects contacts with other colliders and reports them through events.

    Overlap events receive ``(collider, other, other_owner)``; hit and stay events
    receive ``(collider, other, other_owner, normal_impulse, hit_result)``.
    """

    shape_kind: ColliderShape

    def __init__(
        self,
        owner: Optional[SceneNode] = None,
        manager: Optional[CollisionManager] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(name)
        self.manager = manager if manager is not None else default_collision_manager()
        self.owner = owner
        if owner is not None:
            self.attach_to(owner)
        self.layer = 0
        self.layer_mask = 1
        self.type = CollisionType.DEFAULT
        self.tag = ""
        self.material = PhysicsMaterial()
        self.rigid_body: Optional[RigidBody] = None
        self.grid: Optional[ColliderGrid] = None
        self._mode = CollisionMode.TRIGGER
        self._collisions: Dict[Collider, None] = {}
        self._order = next(_order)

        self.on_component_begin_overlap = MulticastDelegate()
        self.on_component_end_overlap = MulticastDelegate()
        self.on_component_overlap = MulticastDelegate()
        self.on_component_hit = MulticastDelegate()
        self.on_component_stay = MulticastDelegate()

    # Configuration

    @property
    def mode(self) -> CollisionMode:
        return self._mode

    def set_type(self, collision_type: CollisionType) -> None:
        """Set the collision type and take its layer mask from the collision table."""
        self.type = collision_type
        self.layer_mask = self.manager.find_mapping(collision_type)

    def set_collision_response_to_type(self, aim_type: CollisionType, enable: bool) -> None:
        """Turn the response to ``aim_type`` on or off for this collider only."""
        bit = 1 << int(aim_type)
        if enable:
            self.layer_mask |= bit
        else:
            self.layer_mask &= ~bit

    def set_collision_mode(self, mode: CollisionMode) -> None:
        """Change the mode; switching to NONE drops every current contact."""
        if mode is CollisionMode.NONE and self._mode is not CollisionMode.NONE:
            self._schedule_clear()
        self._mode = mode

    def deactivate(self) -> None:
        super().deactivate()
        self._schedule_clear()

    @property
    def is_kinematic(self) -> bool:
        """Whether an attached rigid body lets this collider be pushed."""
        return self.rigid_body is not None and self.rigid_body.moveable

    # Shape

    @abstractmethod
    def shape(self) -> Union[Circle, Box2]:
        """Shape of the collider in world coordinates."""

    @abstractmethod
    def rect(self) -> Box2:
        """Bounding rectangle in world coordinates."""

    @abstractmethod
    def contains_point(self, point: Vector2) -> bool:
        """Whether the world point lies on the collider."""

    # Contacts

    @property
    def collisions(self) -> FrozenSet[Collider]:
        return frozenset(self._collisions)

    @property
    def is_collisions_empty(self) -> bool:
        return not self._collisions

    def collisions_of_type(self, collision_type: CollisionType) -> List[Any]:
        """Owners of the touching colliders of the given type."""
        return [other.owner for other in self._collisions if other.type == collision_type]

    def collision_hit(self, other: Collider) -> HitResult:
        """Contact information of this collider touching ``other``."""
        result = collisions.hit(self.shape(), other.shape())
        return replace(result, hit_object=other.owner, hit_component=other)

    def _mirrored(self, hit: HitResult) -> HitResult:
        return HitResult(hit.impact_point, -hit.impact_normal, self.owner, self)

    def _responds_to(self, other: Collider) -> bool:
        return self.manager.layer_mask_judge(self.layer_mask, other.type)

    def _both_colliding(self, other: Collider) -> bool:
        return self._mode is CollisionMode.COLLISION and other._mode is CollisionMode.COLLISION

    def _mover(self) -> SceneNode:
        return self.owner if self.owner is not None else self

    def _adjust(self, other: Collider, hit: HitResult) -> None:
        depth = collisions.separation(
            self.shape(), other.shape(), hit.impact_point, hit.impact_normal
        )
        mine, theirs = collisions.resolve_offsets(
            self.is_kinematic, other.is_kinematic, hit.impact_normal, depth
        )
        if mine != Vector2.ZERO:
            self._mover().add_position(mine)
        if theirs != Vector2.ZERO:
            other._mover().add_position(theirs)

    def insert(self, other: Collider) -> bool:
        """Start a contact with ``other`` if both respond and they overlap; True if one began."""
        if other is self or other in self._collisions:
            return False
        if not (self._responds_to(other) and other._responds_to(self)):
            return False
        if not collisions.overlaps(self.shape(), other.shape()):
            return False

        self._collisions[other] = None
        other._collisions[self] = None
        if self._both_colliding(other):
            hit = self.collision_hit(other)
            self.on_component_hit.broadcast(self, other, other.owner, -hit.impact_normal, hit)
            other.on_component_hit.broadcast(
                other, self, self.owner, hit.impact_normal, self._mirrored(hit)
            )
            combined = PhysicsMaterial.combine(self.material, other.material)
            if self.rigid_body is not None:
                self.rigid_body.restrict_velocity(-hit.impact_normal, combined, other.rigid_body)
            elif other.rigid_body is not None:
                other.rigid_body.restrict_velocity(hit.impact_normal, combined, self.rigid_body)
            self._adjust(other, hit)
        else:
            self.on_component_begin_overlap.broadcast(self, other, other.owner)
            other.on_component_begin_overlap.broadcast(other, self, self.owner)
        return True

    def erase(self) -> List[Collider]:
        """End contacts that no longer overlap or respond; returns the colliders let go."""
        removed = [
            other
            for other in self._collisions
            if not collisions.overlaps(self.shape(), other.shape()) or not self._responds_to(other)
        ]
        for other in removed:
            other._collisions.pop(self, None)
            self._collisions.pop(other, None)
            self.on_component_end_overlap.broadcast(self, other, other.owner)
            other.on_component_end_overlap.broadcast(other, self, self.owner)
        return removed

    def clear(self) -> None:
        """End every contact and take the collider out of the grid cells."""
        for other in list(self._collisions):
            other._collisions.pop(self, None)
            self.on_component_end_overlap.broadcast(self, other, other.owner)
            other.on_component_end_overlap.broadcast(other, self, self.owner)
        self._collisions.clear()
        if self.grid is not None:
            self.grid.remove(self)

    def _schedule_clear(self) -> None:
        if self.grid is not None:
            self.grid.schedule_clear(self)
        else:
            self.clear()

    def update(self, delta_time: float) -> None:
        """Report ongoing contacts and push apart colliding pairs."""
        if self._mode is CollisionMode.NONE or not self.enabled:
            return
        for other in list(self._collisions):
            if self._both_colliding(other):
                hit = self.collision_hit(other)
                self.on_component_stay.broadcast(self, other, other.owner, -hit.impact_normal, hit)
                other.on_component_stay.broadcast(
                    other, self, self.owner, hit.impact_normal, self._mirrored(hit)
                )
                self._adjust(other, hit)
            else:
                self.on_component_overlap.broadcast(self, other, other.owner)
                other.on_component_overlap.broadcast(other, self, self.owner)
        if self.grid is not None:
            self.grid.zone_tick(self)


class CircleCollider(Collider):
    """Circular collider whose radius follows the world scale."""

    shape_kind = ColliderShape.CIRCLE

    def __init__(
        self,
        owner: Optional[SceneNode] = None,
        manager: Optional[CollisionManager] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(owner, manager, name)
        self.radius = 0.0
        self._radius_ini = 0.0

    def _scale_factor(self) -> float:
        scale = self.world_scale
        return abs(scale.x * scale.y)

    def set_radius(self, radius: float) -> None:
        """Set the current radius; later scale changes resize it from this value."""
        self.radius = abs(radius)
        self._radius_ini = self.radius * fmath.inv_sqrt(self._scale_factor())

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self.radius = self._radius_ini * math.sqrt(self._scale_factor())

    def shape(self) -> Circle:
        return Circle(self.world_position, self.radius)

    def rect(self) -> Box2:
        return Box2.from_center(self.world_position, self.radius * 2, self.radius * 2)

    def contains_point(self, point: Vector2) -> bool:
        return Vector2.distance(self.world_position, point) <= self.radius


class BoxCollider(Collider):
    """Axis-aligned rectangular collider whose size follows the world scale."""

    shape_kind = ColliderShape.BOX

    def __init__(
        self,
        owner: Optional[SceneNode] = None,
        manager: Optional[CollisionManager] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(owner, manager, name)
        self.size = Vector2.ZERO
        self._size_ini = Vector2.ZERO

    def set_size(self, size: Vector2) -> None:
        """Set the current size; later scale changes resize it from this value."""
        self.size = abs(size)
        self._size_ini = abs(size / self.world_scale)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self.size = abs(self._size_ini * self.world_scale)

    def shape(self) -> Box2:
        return self.rect()

    def rect(self) -> Box2:
        return Box2.from_center(self.world_position, self.size.x, self.size.y)

    def contains_point(self, point: Vector2) -> bool:
        return self.rect().contains(point)


class ColliderGrid:
    """Coarse grid of zones; only colliders sharing a zone are tested against each other."""

    COLUMNS = 10
    ROWS = 6
    CELL_WIDTH = 400
    CELL_HEIGHT = 200
    ORIGIN_X = -2000

    def __init__(self) -> None:
        self._zones: Dict[Cell, Dict[Collider, None]] = {
            (i, j): {} for i in range(self.COLUMNS) for j in range(self.ROWS)
        }
        self._colliders: Dict[Collider, None] = {}
        self._cells: Dict[Collider, Tuple[Cell, Cell]] = {}
        self._pending: Dict[Collider, None] = {}

    def __contains__(self, collider: object) -> bool:
        return collider in self._colliders

    def add(self, collider: Collider) -> None:
        """Register a collider with the grid."""
        self._colliders[collider] = None
        collider.grid = self

    def unregister(self, collider: Collider) -> None:
        """Forget a collider entirely."""
        self.remove(collider)
        self._colliders.pop(collider, None)
        self._pending.pop(collider, None)
        if collider.grid is self:
            collider.grid = None

    def schedule_clear(self, collider: Collider) -> None:
        """Have ``collider`` cleared at the end of the next ``process``."""
        self._pending[collider] = None

    def _cell_of(self, point: Vector2) -> Cell:
        x = fmath.clamp(int(point.x - self.ORIGIN_X) // self.CELL_WIDTH, 0, self.COLUMNS - 1)
        y = fmath.clamp(int(point.y) // self.CELL_HEIGHT, 0, self.ROWS - 1)
        return x, y

    @staticmethod
    def _span(corners: Tuple[Cell, Cell]) -> Iterator[Cell]:
        (x0, y0), (x1, y1) = corners
        for i in range(x0, x1 + 1):
            for j in range(y0, y1 + 1):
                yield i, j

    def zone_tick(self, collider: Collider) -> None:
        """Move the collider into the zones its bounding rectangle covers."""
        if collider.mode is CollisionMode.NONE or not collider.enabled:
            return
        rect = collider.rect()
        corners = (self._cell_of(rect.min), self._cell_of(rect.max))
        if self._cells.get(collider) == corners:
            return
        self.remove(collider)
        self._cells[collider] = corners
        for cell in self._span(corners):
            self._zones[cell][collider] = None

    def remove(self, collider: Collider) -> None:
        """Take the collider out of every zone; it stays registered."""
        corners = self._cells.pop(collider, None)
        if corners is None:
            return
        for cell in self._span(corners):
            self._zones[cell].pop(collider, None)

    def colliders_at(self, x: int, y: int) -> Tuple[Collider, ...]:
        """Colliders in zone (x, y), ordered by layer."""
        zone = self._zones[(x, y)]
        return tuple(sorted(zone, key=lambda collider: (collider.layer, collider._order)))

    def process(self) -> None:
        """Refresh zones, start new contacts, end stale ones and clear scheduled colliders."""
        for collider in list(self._colliders):
            self.zone_tick(collider)
        for x, y in self._zones:
            members = self.colliders_at(x, y)
            for me in members:
                for other in members:
                    if other is not me:
                        me.insert(other)
        for collider in list(self._colliders):
            collider.erase()
        for collider in list(self._pending):
            collider.clear()
        self._pending.clear()