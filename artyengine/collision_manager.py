"""Collision types and the table of which types respond to each other."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple


class CollisionType(IntEnum):
    """Kind of collider; values are bit positions in a layer mask and stay below 32."""

    DEFAULT = 0
    PLAYER = 1
    HURT_BOX = 2
    ENEMY = 3
    BLOCK = 4
    ITEM = 5
    CHEST = 6
    DART = 7
    BULLET = 8


# Pairs of types that respond to each other by default.
DEFAULT_RESPONSES: Tuple[Tuple[CollisionType, CollisionType], ...] = (
    (CollisionType.HURT_BOX, CollisionType.ENEMY),
    (CollisionType.PLAYER, CollisionType.BLOCK),
    (CollisionType.ENEMY, CollisionType.BLOCK),
    (CollisionType.ITEM, CollisionType.BLOCK),
    (CollisionType.ITEM, CollisionType.HURT_BOX),
    (CollisionType.CHEST, CollisionType.HURT_BOX),
    (CollisionType.DART, CollisionType.BLOCK),
    (CollisionType.DART, CollisionType.ENEMY),
    (CollisionType.DART, CollisionType.HURT_BOX),
    (CollisionType.BULLET, CollisionType.PLAYER),
    (CollisionType.BULLET, CollisionType.BLOCK),
)


class CollisionManager:
    """Keeps, for each collision type, the bit mask of the types it responds to."""

    def __init__(self) -> None:
        self._masks: Dict[CollisionType, int] = {CollisionType.DEFAULT: 1}

    def initialize(self) -> None:
        """Fill the table with the default responses."""
        for first, second in DEFAULT_RESPONSES:
            self._add_mapping(first, second)

    def layer_mask_judge(self, layer_mask: int, other_type: CollisionType) -> bool:
        """Whether ``layer_mask`` has the bit of ``other_type`` set."""
        return bool(layer_mask & (1 << int(other_type)))

    def find_mapping(self, collision_type: CollisionType) -> int:
        """Layer mask of ``collision_type``; KeyError if the type has no entry."""
        try:
            return self._masks[collision_type]
        except KeyError:
            raise KeyError(f"no collision mapping for {collision_type!r}") from None

    def _add_mapping(self, first: CollisionType, second: CollisionType) -> None:
        self._masks[first] = self._masks.get(first, 0) | (1 << int(second))
        self._masks[second] = self._masks.get(second, 0) | (1 << int(first))