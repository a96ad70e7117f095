from __future__ import annotations

import pytest
from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from gutter_pong.constants import BALL_SIZE, GUTTER_HEIGHT, PADDLE_SIZE
from gutter_pong.entities import Ball, Gutter, Paddle
from gutter_pong.scenes.pong.models import Playfield, PongWorld
from gutter_pong.scenes.pong.spawn import spawn_world
from gutter_pong.scenes.pong.systems import TickScheduler


@pytest.fixture()
def playfield() -> Playfield:
    return Playfield(800, 600)


@pytest.fixture()
def world(playfield: Playfield) -> PongWorld:
    return spawn_world(playfield)


@pytest.fixture()
def open_world(world: PongWorld) -> PongWorld:
    """Spawned world without gutters, so the ball only meets the paddles."""
    world.gutters.clear()
    return world


@pytest.fixture()
def scheduler() -> TickScheduler:
    return TickScheduler()


@pytest.fixture()
def make_ball():
    def _make(x: float = 0.0, y: float = 0.0, vx: float = 0.0, vy: float = 0.0) -> Ball:
        return Ball(
            position=Position2D(x, y),
            size=Size2D(*BALL_SIZE),
            velocity=Velocity2D(vx, vy),
        )

    return _make


@pytest.fixture()
def make_paddle():
    def _make(side: str = "PLAYER", x: float = 0.0, y: float = 0.0) -> Paddle:
        return Paddle(
            side=side,
            position=Position2D(x, y),
            size=Size2D(*PADDLE_SIZE),
            velocity=Velocity2D(0.0, 0.0),
        )

    return _make


@pytest.fixture()
def make_gutter():
    def _make(y: float = 0.0, width: int = 100) -> Gutter:
        return Gutter(position=Position2D(0.0, y), size=Size2D(width, GUTTER_HEIGHT))

    return _make
