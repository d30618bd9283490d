"""Smoothly following 2D camera with spring arm zoom and shake."""

from __future__ import annotations

import math
from typing import Optional

from artyengine import fmath
from artyengine.box import Box2
from artyengine.scene import SceneNode
from artyengine.transform import Transform
from artyengine.vector import Vector2


def _ease(x: float) -> float:
    x = 1.0 if x < 1 else x
    return x * x


class Camera(SceneNode):
    """Camera whose virtual position trails its world position.

    ``calculate`` advances the virtual position and spring arm length one step
    towards their targets and applies any running shake.
    """

    def __init__(self, name: Optional[str] = None, transform: Transform = Transform.IDENTITY) -> None:
        super().__init__(name, transform)
        self.frame = Box2.EMPTY
        self._virtual_position = Vector2.ZERO
        self._virtual_rotation = 0.0
        self._distance_threshold = 100.0
        self._smoothness = 30
        self._shake_intensity = 0.0
        self._shaking = False
        self._shake_decay = 5
        self._last_shake = Vector2.ZERO
        self._spring_arm_length = 20.0
        self._virtual_spring_arm_length = 100.0
        self._spring_arm_smoothness = 20

    @property
    def smoothness(self) -> int:
        return self._smoothness

    @smoothness.setter
    def smoothness(self, value: int) -> None:
        self._smoothness = fmath.clamp(value, 0, 100)

    @property
    def distance_threshold(self) -> float:
        return self._distance_threshold

    @distance_threshold.setter
    def distance_threshold(self, value: float) -> None:
        self._distance_threshold = fmath.clamp(value, 0.0, 500.0)

    @property
    def spring_arm_length(self) -> float:
        return self._spring_arm_length

    @spring_arm_length.setter
    def spring_arm_length(self, value: float) -> None:
        self._spring_arm_length = fmath.clamp(value, 1.0, 10000.0)

    @property
    def spring_arm_smoothness(self) -> int:
        return self._spring_arm_smoothness

    @spring_arm_smoothness.setter
    def spring_arm_smoothness(self, value: int) -> None:
        self._spring_arm_smoothness = fmath.clamp(value, 0, 100)

    @property
    def virtual_position(self) -> Vector2:
        return self._virtual_position

    @property
    def virtual_rotation(self) -> float:
        return self._virtual_rotation

    @property
    def virtual_spring_arm_length(self) -> float:
        return self._virtual_spring_arm_length

    @property
    def shake_intensity(self) -> float:
        return self._shake_intensity

    @property
    def shaking(self) -> bool:
        return self._shaking

    def begin_play(self) -> None:
        """Start the virtual camera exactly at the real one."""
        self._virtual_position = self.world_position
        self._virtual_rotation = self.world_rotation
        self._virtual_spring_arm_length = self._spring_arm_length

    def shake(self, intensity: int, decay: int = 10) -> None:
        """Start shaking with ``intensity`` (0..100) fading by ``decay`` (1..100)."""
        self._shake_intensity = float(fmath.clamp(intensity, 0, 100))
        self._shake_decay = fmath.clamp(decay, 1, 100)
        self._shaking = True

    def calculate(self) -> None:
        """Advance the virtual position, spring arm and shake by one step."""
        if not self.enabled:
            return

        position = self.world_position
        if self.frame != Box2.EMPTY:
            position = Vector2(
                fmath.clamp(position.x, self.frame.min.x, self.frame.max.x),
                fmath.clamp(position.y, self.frame.min.y, self.frame.max.y),
            )
        distance = Vector2.distance(self._virtual_position, position)
        if self._smoothness and distance > fmath.SMALL_NUMBER:
            ratio = distance / self._distance_threshold if self._distance_threshold else math.inf
            alpha = 0.1 / self._smoothness * _ease(ratio)
            self._virtual_position = fmath.lerp(
                self._virtual_position, position, fmath.clamp(alpha, 0.001, 0.1)
            )
        else:
            self._virtual_position = position

        if self._spring_arm_smoothness:
            self._virtual_spring_arm_length = fmath.lerp(
                self._virtual_spring_arm_length,
                self._spring_arm_length,
                0.1 / self._spring_arm_smoothness,
            )
        else:
            self._virtual_spring_arm_length = self._spring_arm_length

        if self._shaking:
            if self._shake_intensity <= 0:
                self._shaking = False
                return
            radian = fmath.degree_to_radian(fmath.rand_real(0, 360))
            self._virtual_position = self._virtual_position - self._last_shake
            self._last_shake = self._shake_intensity * Vector2(math.cos(radian), math.sin(radian))
            self._virtual_position = self._virtual_position + self._last_shake
            self._shake_intensity -= self._shake_decay * 0.005