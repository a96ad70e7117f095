from __future__ import annotations

import pytest

from gutter_pong.controllers.cpu import CpuPaddleController
from gutter_pong.controllers.player import map_keys
from gutter_pong.scenes.pong.models import KeyState, Playfield, PongWorld, SimTickContext
from gutter_pong.scenes.pong.systems import AiControlSystem, PaddleMovementSystem, TickScheduler

# 600 / 2 - 20 - 50 / 2
LANE_LIMIT = 255.0


def test_ball_position_follows_velocity(make_ball, playfield: Playfield, scheduler: TickScheduler) -> None:
    world = PongWorld(ball=make_ball(0.0, 0.0, vx=2.0, vy=-3.0))

    for _ in range(5):
        scheduler.tick(world, playfield)

    assert world.ball.position.to_tuple() == (10.0, -15.0)
    assert world.ball.velocity.vx == 2.0
    assert world.ball.velocity.vy == -3.0


@pytest.mark.parametrize(
    ("keys", "expected"),
    [
        (KeyState(up=True), 1.0),
        (KeyState(down=True), -1.0),
        (KeyState(up=True, down=True), 1.0),
        (KeyState(), 0.0),
    ],
)
def test_map_keys(keys: KeyState, expected: float) -> None:
    assert map_keys(keys) == expected


def test_player_paddle_moves_with_keys(make_paddle, playfield: Playfield, scheduler: TickScheduler) -> None:
    world = PongWorld(player_paddle=make_paddle("PLAYER", 350.0, 0.0))

    scheduler.tick(world, playfield, KeyState(up=True))
    scheduler.tick(world, playfield, KeyState(up=True))
    assert world.player_paddle.position.to_tuple() == (350.0, 2.0)

    scheduler.tick(world, playfield, KeyState(down=True))
    assert world.player_paddle.position.to_tuple() == (350.0, 1.0)

    scheduler.tick(world, playfield, KeyState())
    assert world.player_paddle.position.to_tuple() == (350.0, 1.0)
    assert world.player_paddle.velocity.vy == 0.0
    assert world.player_paddle.velocity.vx == 0.0


def test_paddle_step_into_gutter_is_rejected(make_paddle, playfield: Playfield) -> None:
    world = PongWorld(player_paddle=make_paddle("PLAYER", 350.0, 254.0))
    world.player_paddle.velocity.vy = 1.0

    PaddleMovementSystem().step(SimTickContext(world=world, playfield=playfield))

    assert world.player_paddle.position.y == 254.0


def test_paddle_step_rejected_whole_not_clamped(make_paddle, playfield: Playfield) -> None:
    world = PongWorld(player_paddle=make_paddle("PLAYER", 350.0, 254.5))
    world.player_paddle.velocity.vy = 1.0

    PaddleMovementSystem().step(SimTickContext(world=world, playfield=playfield))

    # candidate 255.5 is out of the lane; the paddle stays, it is not clamped to 255
    assert world.player_paddle.position.y == 254.5


@pytest.mark.parametrize("keys", [KeyState(up=True), KeyState(down=True)])
def test_paddle_stays_inside_lane(make_paddle, playfield: Playfield, scheduler: TickScheduler, keys: KeyState) -> None:
    world = PongWorld(player_paddle=make_paddle("PLAYER", 350.0, 0.0))

    for _ in range(400):
        scheduler.tick(world, playfield, keys)
        assert abs(world.player_paddle.position.y) < LANE_LIMIT

    assert abs(world.player_paddle.position.y) == 254.0


def test_paddles_do_not_move_without_playfield(make_paddle, scheduler: TickScheduler) -> None:
    world = PongWorld(player_paddle=make_paddle("PLAYER", 350.0, 0.0))

    scheduler.tick(world, None, KeyState(up=True))

    assert world.player_paddle.velocity.vy == 1.0
    assert world.player_paddle.position.y == 0.0


def test_missing_key_state_stops_player_paddle(make_paddle, playfield: Playfield, scheduler: TickScheduler) -> None:
    world = PongWorld(player_paddle=make_paddle("PLAYER", 350.0, 0.0))
    world.player_paddle.velocity.vy = -1.0

    scheduler.tick(world, playfield, None)

    assert world.player_paddle.velocity.vy == 0.0
    assert world.player_paddle.position.y == 0.0


@pytest.mark.parametrize(
    ("ball_y", "expected"),
    [(10.0, 1.0), (-10.0, -1.0), (0.0, 0.0)],
)
def test_cpu_follows_ball_sign(make_ball, make_paddle, ball_y: float, expected: float) -> None:
    paddle = make_paddle("AI", -350.0, 0.0)
    controller = CpuPaddleController(paddle, make_ball(0.0, ball_y))

    assert controller.compute_move() == expected


def test_ai_system_sets_velocity(make_ball, make_paddle) -> None:
    world = PongWorld(ball=make_ball(0.0, -40.0), ai_paddle=make_paddle("AI", -350.0, 0.0))

    AiControlSystem().step(SimTickContext(world=world))

    assert world.ai_paddle.velocity.vy == -1.0
    assert world.ai_paddle.velocity.vx == 0.0


def test_ai_uses_positions_from_start_of_tick(make_ball, make_paddle, playfield: Playfield, scheduler: TickScheduler) -> None:
    # the ball starts above the paddle and ends the tick below it
    world = PongWorld(ball=make_ball(0.0, 0.5, vy=-1.0), ai_paddle=make_paddle("AI", -350.0, 0.0))

    scheduler.tick(world, playfield)

    assert world.ai_paddle.velocity.vy == 1.0
    assert world.ai_paddle.position.y == 1.0
    assert world.ball.position.y == -0.5


def test_ai_skipped_without_ball(make_paddle, playfield: Playfield, scheduler: TickScheduler) -> None:
    world = PongWorld(ai_paddle=make_paddle("AI", -350.0, 0.0))
    world.ai_paddle.velocity.vy = 1.0

    scheduler.tick(world, playfield)

    assert world.ai_paddle.velocity.vy == 1.0
    assert world.ai_paddle.position.y == 1.0


def test_ai_control_keeps_paddle_speed(world: PongWorld, playfield: Playfield, scheduler: TickScheduler) -> None:
    world.ai_paddle.speed = 3.0
    world.ball.position.y = 40.0

    scheduler.tick(world, playfield)

    assert world.ai_paddle.speed == 3.0
    assert world.ai_paddle.velocity.vy == 1.0
    assert world.ai_paddle.position.y == 3.0
