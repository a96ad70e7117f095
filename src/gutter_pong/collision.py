"""
Axis-aligned bounding box overlap and contact-side classification.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D


class Collision(Enum):
    """Side of the other box that the first box touched."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    INSIDE = "inside"


@dataclass(frozen=True)
class Aabb:
    """
    Axis-aligned box described by its center and half extents.

    :ivar center_x (float): Center X in simulation space.
    :ivar center_y (float): Center Y in simulation space (y-up).
    :ivar half_width (float): Half of the box width.
    :ivar half_height (float): Half of the box height.
    """

    center_x: float
    center_y: float
    half_width: float
    half_height: float

    @classmethod
    def from_center(cls, position: Position2D, size: Size2D) -> "Aabb":
        """Build a box from a center position and a full size."""
        return cls(
            position.x, position.y, size.width / 2, size.height / 2
        )

    @property
    def min_x(self) -> float:
        return self.center_x - self.half_width

    @property
    def max_x(self) -> float:
        return self.center_x + self.half_width

    @property
    def min_y(self) -> float:
        return self.center_y - self.half_height

    @property
    def max_y(self) -> float:
        return self.center_y + self.half_height

    def overlaps(self, other: "Aabb") -> bool:
        """Strict overlap test; boxes that only share an edge do not overlap."""
        return (
            self.min_x < other.max_x
            and self.max_x > other.min_x
            and self.min_y < other.max_y
            and self.max_y > other.min_y
        )


def _classify_x(a: Aabb, b: Aabb) -> tuple[Collision, float]:
    if a.min_x < b.min_x < a.max_x < b.max_x:
        return Collision.LEFT, b.min_x - a.max_x
    if b.min_x < a.min_x < b.max_x < a.max_x:
        return Collision.RIGHT, a.min_x - b.max_x
    return Collision.INSIDE, -math.inf


def _classify_y(a: Aabb, b: Aabb) -> tuple[Collision, float]:
    if a.min_y < b.min_y < a.max_y < b.max_y:
        return Collision.BOTTOM, b.min_y - a.max_y
    if b.min_y < a.min_y < b.max_y < a.max_y:
        return Collision.TOP, a.min_y - b.max_y
    return Collision.INSIDE, -math.inf


def collide(a: Aabb, b: Aabb) -> Collision | None:
    """
    Classify the contact between box ``a`` and box ``b``.

    Each axis reports whether ``a`` sticks out of ``b`` on the low side
    (LEFT/BOTTOM), the high side (RIGHT/TOP) or neither (INSIDE). The axis
    with the smaller penetration depth wins; on a tie the X axis wins.

    :param a: The moving box (the ball).
    :type a: Aabb

    :param b: The box it is tested against.
    :type b: Aabb

    :return: The contact side, or None when the boxes do not overlap.
    :rtype: Collision | None
    """
    if not a.overlaps(b):
        return None

    x_collision, x_depth = _classify_x(a, b)
    y_collision, y_depth = _classify_y(a, b)

    if abs(y_depth) < abs(x_depth):
        return y_collision
    return x_collision
