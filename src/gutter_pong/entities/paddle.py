"""
Paddle entity for Gutter Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from gutter_pong.collision import Aabb
from gutter_pong.constants import PADDLE_SPEED

Side = Literal["PLAYER", "AI"]


@dataclass
class Paddle:
    """
    Paddle entity for the Pong scene.

    :ivar side (Side): Who drives the paddle.
    :ivar position (Position2D): Center of the paddle.
    :ivar size (Size2D): Full size of the paddle.
    :ivar velocity (Velocity2D): Displacement per tick; only vy is ever set.
    :ivar speed (float): Speed scale applied to the velocity.
    """

    side: Side
    position: Position2D
    size: Size2D
    velocity: Velocity2D
    speed: float = PADDLE_SPEED

    @property
    def aabb(self) -> Aabb:
        """Bounding box of the paddle."""
        return Aabb.from_center(self.position, self.size)
