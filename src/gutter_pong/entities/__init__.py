"""
Entities package for Gutter Pong.
This package contains all entity definitions used in the game.
"""

from __future__ import annotations

from .ball import Ball
from .gutter import Gutter
from .paddle import Paddle, Side

__all__ = [
    "Ball",
    "Gutter",
    "Paddle",
    "Side",
]
