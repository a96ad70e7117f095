"""
Gutter entity: the static strips along the top and bottom of the playfield.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D

from gutter_pong.collision import Aabb


@dataclass
class Gutter:
    """
    Static boundary strip. Gutters have no velocity and never move.

    :ivar position (Position2D): Center of the strip.
    :ivar size (Size2D): Full size (playfield width x gutter height).
    """

    position: Position2D
    size: Size2D

    @property
    def aabb(self) -> Aabb:
        """Bounding box of the gutter."""
        return Aabb.from_center(self.position, self.size)
