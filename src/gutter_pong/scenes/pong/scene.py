"""
Pong scene: runs the simulation on mini-arcade-core and draws the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.engine.render.packet import RenderPacket
from mini_arcade_core.runtime.input_frame import InputFrame
from mini_arcade_core.runtime.window.window_port import WindowPort
from mini_arcade_core.scenes.autoreg import register_scene
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline
from mini_arcade_core.sim.protocols import SimScene

from gutter_pong.constants import (
    AI_COLOR,
    BLACK,
    PLAYER_COLOR,
    SCORE_MARGIN_X,
    SCORE_MARGIN_Y,
    WHITE,
    WINDOW_SIZE,
)
from gutter_pong.scenes.pong.models import (
    KeyState,
    Playfield,
    PongIntent,
    PongTickContext,
    PongWorld,
)
from gutter_pong.scenes.pong.spawn import spawn_world
from gutter_pong.scenes.pong.systems import TickScheduler


def window_playfield(window: WindowPort) -> Playfield | None:
    """
    Playfield matching the window's current size.

    :return: The playfield, or None while the window has no size yet.
    :rtype: Playfield | None
    """
    size = getattr(window, "size", None)
    if size is None:
        return None
    width, height = size
    return Playfield(width, height)


@dataclass
class PongInputSystem:
    """
    Process input and update intent.
    """

    name: str = "pong_input"
    order: int = 10

    def step(self, ctx: PongTickContext):
        """Read the arrow keys into an intent."""
        down = ctx.input_frame.keys_down
        ctx.intent = PongIntent(up=Key.UP in down, down=Key.DOWN in down)


@dataclass
class PongSimulationSystem:
    """
    Advance the simulation one tick with the current window size and keys.
    """

    window: WindowPort
    scheduler: TickScheduler = field(default_factory=TickScheduler)
    name: str = "pong_simulation"
    order: int = 20

    def step(self, ctx: PongTickContext):
        """Run every simulation system once."""
        ctx.playfield = window_playfield(self.window)

        keys = None
        if ctx.intent is not None:
            keys = KeyState(up=ctx.intent.up, down=ctx.intent.down)

        self.scheduler.tick(ctx.world, ctx.playfield, keys)


def _draw_projected(backend: Backend, world: PongWorld, name: str, color):
    rect = world.projections.get(name)
    if rect is None:
        return
    x, y, w, h = rect
    backend.draw_rect(x, y, w, h, color=color)


@dataclass
class DrawGutters:
    """
    Draw op for the top and bottom gutters.
    """

    world: PongWorld

    def __call__(self, backend: Backend):
        for i in range(len(self.world.gutters)):
            _draw_projected(backend, self.world, f"gutter_{i}", BLACK)


@dataclass
class DrawPaddles:
    """
    Draw op for both paddles.
    """

    world: PongWorld

    def __call__(self, backend: Backend):
        _draw_projected(backend, self.world, "player_paddle", PLAYER_COLOR)
        _draw_projected(backend, self.world, "ai_paddle", AI_COLOR)


@dataclass
class DrawBall:
    """
    Draw op for the ball.
    """

    world: PongWorld

    def __call__(self, backend: Backend):
        _draw_projected(backend, self.world, "ball", WHITE)


@dataclass
class DrawScore:
    """
    Draw op for the score: AI top-left, player right-aligned top-right.
    """

    world: PongWorld
    viewport_width: int

    def __call__(self, backend: Backend):
        ai_text = self.world.scoreboard.ai_text
        player_text = self.world.scoreboard.player_text

        player_w, _ = backend.measure_text(player_text)
        player_x = self.viewport_width - SCORE_MARGIN_X - player_w

        backend.draw_text(SCORE_MARGIN_X, SCORE_MARGIN_Y, ai_text, color=WHITE)
        backend.draw_text(player_x, SCORE_MARGIN_Y, player_text, color=WHITE)


@dataclass
class PongRenderSystem:
    """
    Render the Pong world.
    """

    name: str = "pong_render"
    order: int = 100

    def step(self, ctx: PongTickContext):
        """Collect the draw ops for this frame."""
        ctx.draw_ops = [
            DrawGutters(ctx.world),
            DrawPaddles(ctx.world),
            DrawBall(ctx.world),
        ]
        if ctx.playfield is not None:
            ctx.draw_ops.append(
                DrawScore(ctx.world, viewport_width=int(ctx.playfield.width))
            )


@register_scene("pong")
@dataclass
class PongScene(SimScene):
    """
    The game: one human paddle on the right, one CPU paddle on the left.
    """

    world: PongWorld | None = None
    systems: SystemPipeline[PongTickContext] = field(
        default_factory=SystemPipeline
    )

    def on_enter(self):
        window = self.context.services.window
        playfield = window_playfield(window) or Playfield(*WINDOW_SIZE)
        self.world = spawn_world(playfield)

        self.systems.extend(
            [
                PongInputSystem(),
                PongSimulationSystem(window),
                PongRenderSystem(),
            ]
        )

    def tick(self, input_frame: InputFrame, dt: float) -> RenderPacket:
        ctx = PongTickContext(input_frame=input_frame, dt=dt, world=self.world)
        self.systems.step(ctx)
        return RenderPacket.from_ops(ctx.draw_ops)
