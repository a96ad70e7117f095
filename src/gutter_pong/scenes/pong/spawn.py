"""
Initial world layout, computed once from the playfield size.
"""

from __future__ import annotations

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from gutter_pong.constants import (
    BALL_SIZE,
    BALL_SPAWN_VELOCITY,
    GUTTER_HEIGHT,
    PADDLE_PADDING,
    PADDLE_SIZE,
)
from gutter_pong.entities import Ball, Gutter, Paddle
from gutter_pong.scenes.pong.models import Playfield, PongWorld


def spawn_ball() -> Ball:
    """Ball at the origin, moving with the spawn velocity."""
    vx, vy = BALL_SPAWN_VELOCITY
    return Ball(
        position=Position2D(0.0, 0.0),
        size=Size2D(*BALL_SIZE),
        velocity=Velocity2D(vx, vy),
    )


def spawn_paddles(playfield: Playfield) -> tuple[Paddle, Paddle]:
    """
    Player paddle on the right edge, AI paddle on the left edge.

    :return: (player_paddle, ai_paddle)
    :rtype: tuple[Paddle, Paddle]
    """
    x = playfield.half_width - PADDLE_PADDING
    pad_w, pad_h = PADDLE_SIZE
    player = Paddle(
        side="PLAYER",
        position=Position2D(x, 0.0),
        size=Size2D(pad_w, pad_h),
        velocity=Velocity2D(0.0, 0.0),
    )
    ai = Paddle(
        side="AI",
        position=Position2D(-x, 0.0),
        size=Size2D(pad_w, pad_h),
        velocity=Velocity2D(0.0, 0.0),
    )
    return player, ai


def spawn_gutters(playfield: Playfield) -> list[Gutter]:
    """Top and bottom gutters spanning the full playfield width."""
    y = playfield.half_height - GUTTER_HEIGHT / 2
    width = int(playfield.width)
    return [
        Gutter(position=Position2D(0.0, y), size=Size2D(width, GUTTER_HEIGHT)),
        Gutter(
            position=Position2D(0.0, -y), size=Size2D(width, GUTTER_HEIGHT)
        ),
    ]


def spawn_world(playfield: Playfield) -> PongWorld:
    """Build the starting world for the given playfield."""
    player, ai = spawn_paddles(playfield)
    return PongWorld(
        ball=spawn_ball(),
        player_paddle=player,
        ai_paddle=ai,
        gutters=spawn_gutters(playfield),
    )
