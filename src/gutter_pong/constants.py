"""
Game constants for Gutter Pong.
"""

from __future__ import annotations

WINDOW_SIZE = (1280, 720)
FPS = 60

# Entity sizes are full width/height, not half extents.
BALL_SIZE = (5, 5)
PADDLE_WIDTH = 10
PADDLE_HEIGHT = 50
PADDLE_SIZE = (PADDLE_WIDTH, PADDLE_HEIGHT)
GUTTER_HEIGHT = 20

# Distance from the side edge to the paddle center.
PADDLE_PADDING = 50

BALL_SPEED = 1.0
PADDLE_SPEED = 1.0

BALL_SPAWN_VELOCITY = (1.0, 1.1725)
# Serve velocities after a point; intentionally not the spawn velocity.
AI_SCORED_VELOCITY = (-1.0, 1.0)
PLAYER_SCORED_VELOCITY = (1.0, 1.0)

# Colors
BACKGROUND = (25, 0, 38)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
PLAYER_COLOR = (0, 255, 0)
AI_COLOR = (0, 0, 255)

SCORE_MARGIN_X = 15
SCORE_MARGIN_Y = 5
