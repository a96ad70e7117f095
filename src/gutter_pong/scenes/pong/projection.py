"""
Projection of simulation boxes onto screen pixels.

Simulation space has its origin at the playfield center with y pointing up;
the screen has its origin top-left with y pointing down.
"""

from __future__ import annotations

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D

from gutter_pong.scenes.pong.models import Playfield, ScreenRect


def to_screen_rect(
    position: Position2D, size: Size2D, playfield: Playfield
) -> ScreenRect:
    """
    Top-left screen rect for a box centered on ``position``.

    :param position: Center of the box in simulation space.
    :type position: Position2D

    :param size: Full size of the box.
    :type size: Size2D

    :param playfield: Current play area.
    :type playfield: Playfield

    :return: (x, y, width, height) in screen pixels.
    :rtype: ScreenRect
    """
    left = playfield.half_width + position.x - size.width / 2
    top = playfield.half_height - position.y - size.height / 2
    return int(left), int(top), int(size.width), int(size.height)
