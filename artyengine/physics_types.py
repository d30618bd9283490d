"""Physics material and hit result records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from artyengine.vector import Vector2


class CombinePattern(Enum):
    """How two materials are merged on contact."""

    MIN = "min"
    MID = "mid"
    MAX = "max"


@dataclass(frozen=True)
class PhysicsMaterial:
    """Friction and bounciness of a surface."""

    friction: float = 0.4
    bounciness: float = 0.0

    @staticmethod
    def combine(
        first: PhysicsMaterial,
        second: PhysicsMaterial,
        pattern: CombinePattern = CombinePattern.MID,
    ) -> PhysicsMaterial:
        """Material acting at a contact between ``first`` and ``second``."""
        if pattern is CombinePattern.MID:
            return PhysicsMaterial(
                (first.friction + second.friction) * 0.5,
                (first.bounciness + second.bounciness) * 0.5,
            )
        pick = min if pattern is CombinePattern.MIN else max
        return PhysicsMaterial(
            pick(first.friction, second.friction),
            pick(first.bounciness, second.bounciness),
        )


@dataclass(frozen=True)
class HitResult:
    """Where and against what a collision happened."""

    impact_point: Vector2 = Vector2.ZERO
    impact_normal: Vector2 = Vector2.ZERO
    hit_object: Optional[Any] = None
    hit_component: Optional[Any] = None