"""Scene nodes: objects with a local transform placed in a parent hierarchy."""

from __future__ import annotations

import itertools
from dataclasses import replace
from typing import Dict, Iterator, List, Optional, Tuple

from artyengine.delegate import MulticastDelegate
from artyengine.transform import Transform
from artyengine.vector import Vector2

_serial = itertools.count(1)


class SceneNode:
    """Object with a transform relative to its parent, and an enabled state.

    World position, rotation and scale are built up through the chain of
    parents: a child's local position is scaled by the parent's world scale,
    rotated by its world rotation and added to its world position.
    """

    def __init__(self, name: Optional[str] = None, transform: Transform = Transform.IDENTITY) -> None:
        self.name = name if name is not None else f"{type(self).__name__}_{next(_serial)}"
        self.transform = transform
        self.parent: Optional[SceneNode] = None
        self._children: Dict[SceneNode, None] = {}
        self.enabled = True
        self.destroyed = False
        self.on_activated = MulticastDelegate()
        self.on_deactivated = MulticastDelegate()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @property
    def children(self) -> Tuple[SceneNode, ...]:
        return tuple(self._children)

    # Local transform

    @property
    def local_position(self) -> Vector2:
        return self.transform.position

    @local_position.setter
    def local_position(self, position: Vector2) -> None:
        self.transform = replace(self.transform, position=position)

    @property
    def local_rotation(self) -> float:
        return self.transform.rotation

    @local_rotation.setter
    def local_rotation(self, rotation: float) -> None:
        self.transform = replace(self.transform, rotation=rotation)

    @property
    def local_scale(self) -> Vector2:
        return self.transform.scale

    @local_scale.setter
    def local_scale(self, scale: Vector2) -> None:
        self.transform = replace(self.transform, scale=scale)

    def add_position(self, offset: Vector2) -> None:
        self.local_position = self.local_position + offset

    def add_rotation(self, rotation: float) -> None:
        self.local_rotation = self.local_rotation + rotation

    # World transform

    @property
    def world_position(self) -> Vector2:
        if self.parent is None:
            return self.local_position
        parent = self.parent
        offset = (self.local_position * parent.world_scale).rotate(parent.world_rotation)
        return parent.world_position + offset

    @property
    def world_rotation(self) -> float:
        if self.parent is None:
            return self.local_rotation
        return self.parent.world_rotation + self.local_rotation

    @property
    def world_scale(self) -> Vector2:
        if self.parent is None:
            return self.local_scale
        return self.parent.world_scale * self.local_scale

    # Hierarchy

    def attach_to(self, parent: Optional[SceneNode]) -> None:
        """Make this node a child of ``parent``; None is ignored."""
        if parent is None:
            return
        if parent is self or parent in self.descendants():
            raise ValueError("a node cannot be attached to itself or its descendant")
        if self.parent is not None and self.parent is not parent:
            self.parent._children.pop(self, None)
        parent._children[self] = None
        self.parent = parent

    def detach_from(self, parent: Optional[SceneNode]) -> None:
        """Remove this node from the children of ``parent``; None is ignored."""
        if parent is None:
            return
        parent._children.pop(self, None)
        self.parent = None

    def descendants(self) -> Iterator[SceneNode]:
        """Every node below this one, depth first."""
        stack = list(self._children)
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node._children)

    def destroy(self) -> List[SceneNode]:
        """Mark this node and everything below it as destroyed.

        Returns the nodes newly destroyed, this one first; a node that was
        already destroyed yields an empty list.
        """
        if self.destroyed:
            return []
        if self.parent is not None:
            self.parent._children.pop(self, None)
        removed = [self, *self.descendants()]
        for node in removed:
            node.destroyed = True
        return removed

    # Enabled state

    def activate(self) -> None:
        self.on_activated.broadcast()
        self.enabled = True

    def deactivate(self) -> None:
        self.on_deactivated.broadcast()
        self.enabled = False