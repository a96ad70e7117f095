"""
Ball entity for the Pong scene.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from gutter_pong.collision import Aabb
from gutter_pong.constants import BALL_SPEED


@dataclass
class Ball:
    """
    Ball entity for the Pong scene.

    :ivar position (Position2D): Center of the ball, origin at the playfield center.
    :ivar size (Size2D): Full size of the ball's bounding box.
    :ivar velocity (Velocity2D): Displacement per tick.
    :ivar speed (float): Speed scale applied to the velocity.
    """

    position: Position2D
    size: Size2D
    velocity: Velocity2D
    speed: float = BALL_SPEED

    @property
    def aabb(self) -> Aabb:
        """Bounding box of the ball."""
        return Aabb.from_center(self.position, self.size)
