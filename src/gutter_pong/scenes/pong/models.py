"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from gutter_pong.entities import Ball, Gutter, Paddle

if TYPE_CHECKING:
    from mini_arcade_core.engine.render.packet import DrawOp
    from mini_arcade_core.runtime.input_frame import InputFrame


@dataclass
class ScoreState:
    """
    Score counters. Only the score update step mutates them, and only upwards.

    :ivar player (int): Points won by the player.
    :ivar ai (int): Points won by the AI.
    """

    player: int = 0
    ai: int = 0


@dataclass
class Scoreboard:
    """
    Text shown by the scoreboard; synced from ScoreState when it changes.
    """

    player_text: str = "0"
    ai_text: str = "0"


class Scorer(Enum):
    """Side that won a point."""

    AI = "ai"
    PLAYER = "player"


@dataclass(frozen=True)
class Scored:
    """Ball left the playfield; lives only for the tick it was raised in."""

    scorer: Scorer


@dataclass(frozen=True)
class Playfield:
    """
    Logical play area, taken from the window size every tick.

    :ivar width (float): Playfield width.
    :ivar height (float): Playfield height.
    """

    width: float
    height: float

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2


@dataclass(frozen=True)
class KeyState:
    """Press state of the two directional keys."""

    up: bool = False
    down: bool = False


ScreenRect = tuple[int, int, int, int]


# Justification: many attributes needed for world state
# pylint: disable=too-many-instance-attributes
@dataclass
class PongWorld:
    """
    Pong world state.

    Entity slots are optional: a system that needs a missing entity skips
    its work for the tick.

    :ivar ball (Ball | None): The ball.
    :ivar player_paddle (Paddle | None): Keyboard-driven paddle.
    :ivar ai_paddle (Paddle | None): CPU-driven paddle.
    :ivar gutters (list[Gutter]): Top and bottom boundary strips.
    :ivar score (ScoreState): Current score.
    :ivar scoreboard (Scoreboard): Score texts for display.
    :ivar projections (dict[str, ScreenRect]): Screen rects from the last tick.
    """

    ball: Ball | None = None
    player_paddle: Paddle | None = None
    ai_paddle: Paddle | None = None
    gutters: list[Gutter] = field(default_factory=list)
    score: ScoreState = field(default_factory=ScoreState)
    scoreboard: Scoreboard = field(default_factory=Scoreboard)
    projections: dict[str, ScreenRect] = field(default_factory=dict)

    def paddles(self) -> list[Paddle]:
        """Paddles currently present, player first."""
        return [
            paddle
            for paddle in (self.player_paddle, self.ai_paddle)
            if paddle is not None
        ]

    def obstacles(self) -> Iterator[Paddle | Gutter]:
        """Every shaped entity the ball can hit."""
        yield from self.paddles()
        yield from self.gutters


# pylint: enable=too-many-instance-attributes


@dataclass
class SimTickContext:
    """
    Context for one simulation tick.

    :ivar world (PongWorld): World being advanced.
    :ivar playfield (Playfield | None): Current play area, None without a window.
    :ivar keys (KeyState | None): Directional key state, None without input.
    :ivar events (list[Scored]): Scoring events raised this tick.
    :ivar score_changed (bool): Whether the score moved this tick.
    """

    world: PongWorld
    playfield: Playfield | None = None
    keys: KeyState | None = None
    events: list[Scored] = field(default_factory=list)
    score_changed: bool = False


@dataclass(frozen=True)
class PongIntent:
    """
    Player intent for the Pong scene.

    :ivar up (bool): Up arrow held.
    :ivar down (bool): Down arrow held.
    """

    up: bool = False
    down: bool = False


@dataclass
class PongTickContext:
    """
    Context for a Pong scene frame.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last frame (unused; the simulation
        advances a fixed step per tick).
    :ivar world (PongWorld): Current Pong world state.
    :ivar intent (PongIntent | None): Player intent for this frame.
    :ivar playfield (Playfield | None): Play area used for this frame's tick.
    :ivar draw_ops (list[DrawOp]): Draw calls for the render packet.
    """

    input_frame: InputFrame
    dt: float
    world: PongWorld
    intent: PongIntent | None = None
    playfield: Playfield | None = None
    draw_ops: list[DrawOp] = field(default_factory=list)
