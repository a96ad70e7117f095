"""
Simulation systems for the Pong scene and the scheduler that runs them.

Every system is a small dataclass with a ``name``, an ``order`` and a
``step(ctx)`` method. A system that needs an entity, the playfield or the key
state returns early when it is missing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from mini_arcade_core.spaces.d2.geometry2d import Position2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.utils import logger

from gutter_pong.collision import Collision, collide
from gutter_pong.constants import (
    AI_SCORED_VELOCITY,
    GUTTER_HEIGHT,
    PLAYER_SCORED_VELOCITY,
)
from gutter_pong.controllers.cpu import CpuPaddleController
from gutter_pong.controllers.player import map_keys
from gutter_pong.scenes.pong.models import (
    KeyState,
    Playfield,
    PongWorld,
    Scored,
    Scorer,
    SimTickContext,
)
from gutter_pong.scenes.pong.projection import to_screen_rect


class System(Protocol):
    """Shape shared by all simulation systems."""

    name: str
    order: int

    def step(self, ctx: SimTickContext): ...


@dataclass
class PlayerInputSystem:
    """
    Map the directional keys onto the player paddle's vertical velocity.
    """

    name: str = "pong_player_input"
    order: int = 10

    def step(self, ctx: SimTickContext):
        """Set the player paddle velocity from the key state."""
        paddle = ctx.world.player_paddle
        if paddle is None:
            return

        # no key state this tick reads as no key held
        keys = ctx.keys or KeyState()
        paddle.velocity.vx = 0.0
        paddle.velocity.vy = map_keys(keys)


@dataclass
class AiControlSystem:
    """
    Point the AI paddle at the ball.
    """

    name: str = "pong_ai_control"
    order: int = 15  # after input, before paddles

    def step(self, ctx: SimTickContext):
        """Set the AI paddle velocity toward the ball."""
        ball = ctx.world.ball
        paddle = ctx.world.ai_paddle
        if ball is None or paddle is None:
            return

        controller = CpuPaddleController(paddle, ball)
        paddle.velocity.vx = 0.0
        paddle.velocity.vy = controller.compute_move()


@dataclass
class PaddleMovementSystem:
    """
    Move paddles, rejecting any step that would enter the gutters.
    """

    name: str = "pong_paddles"
    order: int = 20

    def step(self, ctx: SimTickContext):
        """Advance each paddle if its next position stays inside the lane."""
        if ctx.playfield is None:
            return

        for paddle in ctx.world.paddles():
            limit = (
                ctx.playfield.half_height
                - GUTTER_HEIGHT
                - paddle.size.height / 2
            )
            x, y = paddle.position.to_tuple()
            x, y = paddle.velocity.advance(x, y, paddle.speed)
            # all-or-nothing: an out-of-lane step is dropped, not clamped
            if abs(y) < limit:
                paddle.position = Position2D(x, y)


@dataclass
class BallMovementSystem:
    """
    Move the ball based on its velocity.
    """

    name: str = "pong_ball_move"
    order: int = 30

    def step(self, ctx: SimTickContext):
        """Move the ball based on its velocity."""
        ball = ctx.world.ball
        if ball is None:
            return

        x, y = ball.position.to_tuple()
        x, y = ball.velocity.advance(x, y, ball.speed)
        ball.position = Position2D(x, y)


@dataclass
class CollisionSystem:
    """
    Bounce the ball off paddles and gutters.

    Contacts on the LEFT or TOP side invert the matching velocity component.
    RIGHT and BOTTOM contacts leave it untouched, as does INSIDE. The ball is
    never pushed out of the box it hit.
    """

    name: str = "pong_collision"
    order: int = 40

    def step(self, ctx: SimTickContext):
        """Test the ball against every obstacle and apply each contact."""
        ball = ctx.world.ball
        if ball is None:
            return

        for obstacle in ctx.world.obstacles():
            collision = collide(ball.aabb, obstacle.aabb)
            if collision is None:
                continue

            if collision is Collision.LEFT:
                ball.velocity.vx *= -1.0
            elif collision is Collision.RIGHT:
                ball.velocity.vx *= 1.0
            elif collision is Collision.TOP:
                ball.velocity.vy *= -1.0
            elif collision is Collision.BOTTOM:
                ball.velocity.vy *= 1.0


@dataclass
class ScoreDetectionSystem:
    """
    Raise a Scored event when the ball leaves through a side edge.
    """

    name: str = "pong_score_detect"
    order: int = 50

    def step(self, ctx: SimTickContext):
        """Check the ball against the left and right edges."""
        ball = ctx.world.ball
        if ball is None or ctx.playfield is None:
            return

        half_width = ctx.playfield.half_width
        if ball.position.x > half_width:
            ctx.events.append(Scored(Scorer.AI))
        elif ball.position.x < -half_width:
            ctx.events.append(Scored(Scorer.PLAYER))


@dataclass
class BallResetSystem:
    """
    Put the ball back in the middle after a point.
    """

    name: str = "pong_ball_reset"
    order: int = 55

    def step(self, ctx: SimTickContext):
        """Serve the ball toward the side that just lost the point."""
        ball = ctx.world.ball
        if ball is None:
            return

        for event in ctx.events:
            if event.scorer is Scorer.AI:
                vx, vy = AI_SCORED_VELOCITY
            else:
                vx, vy = PLAYER_SCORED_VELOCITY
            ball.position = Position2D(0.0, 0.0)
            ball.velocity = Velocity2D(vx, vy)
            logger.debug(f"Ball reset after {event.scorer.value} scored")


@dataclass
class ScoreUpdateSystem:
    """
    Count points from this tick's Scored events.
    """

    name: str = "pong_score_update"
    order: int = 60

    def step(self, ctx: SimTickContext):
        """Increment the score for every pending event."""
        if not ctx.events:
            return

        score = ctx.world.score
        for event in ctx.events:
            if event.scorer is Scorer.AI:
                score.ai += 1
            else:
                score.player += 1

        ctx.score_changed = True
        logger.info(f"Score: {score.player} - {score.ai}")


@dataclass
class ScoreboardSyncSystem:
    """
    Refresh the scoreboard texts when the score changed this tick.
    """

    name: str = "pong_scoreboard"
    order: int = 70

    def step(self, ctx: SimTickContext):
        """Copy the counters into the scoreboard texts."""
        if not ctx.score_changed:
            return

        ctx.world.scoreboard.player_text = str(ctx.world.score.player)
        ctx.world.scoreboard.ai_text = str(ctx.world.score.ai)


@dataclass
class ProjectionSystem:
    """
    Project entity positions to screen rects for the renderer.
    """

    name: str = "pong_projection"
    order: int = 90

    def step(self, ctx: SimTickContext):
        """Rebuild the world's projections from the current positions."""
        if ctx.playfield is None:
            return

        world = ctx.world
        entities = {
            "ball": world.ball,
            "player_paddle": world.player_paddle,
            "ai_paddle": world.ai_paddle,
        }
        for i, gutter in enumerate(world.gutters):
            entities[f"gutter_{i}"] = gutter

        world.projections = {
            name: to_screen_rect(entity.position, entity.size, ctx.playfield)
            for name, entity in entities.items()
            if entity is not None
        }


def default_systems() -> list[System]:
    """One instance of every simulation system."""
    return [
        PlayerInputSystem(),
        AiControlSystem(),
        PaddleMovementSystem(),
        BallMovementSystem(),
        CollisionSystem(),
        ScoreDetectionSystem(),
        BallResetSystem(),
        ScoreUpdateSystem(),
        ScoreboardSyncSystem(),
        ProjectionSystem(),
    ]


@dataclass
class TickScheduler:
    """
    Runs the simulation systems in ascending ``order``, once per tick.
    """

    systems: list[System] = field(default_factory=default_systems)

    def __post_init__(self):
        self.systems = sorted(self.systems, key=lambda system: system.order)

    def tick(
        self,
        world: PongWorld,
        playfield: Playfield | None,
        keys: KeyState | None = None,
    ) -> tuple[Scored, ...]:
        """
        Advance the world by one tick.

        :param world: World to advance in place.
        :type world: PongWorld

        :param playfield: Current play area, or None when no window is available.
        :type playfield: Playfield | None

        :param keys: Directional key state, or None when input is unavailable.
        :type keys: KeyState | None

        :return: The Scored events raised and consumed during this tick.
        :rtype: tuple[Scored, ...]
        """
        ctx = SimTickContext(world=world, playfield=playfield, keys=keys)
        for system in self.systems:
            system.step(ctx)

        drained = tuple(ctx.events)
        ctx.events.clear()
        return drained
