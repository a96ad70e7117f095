"""
Keyboard mapping for the player paddle.
"""

from __future__ import annotations

from gutter_pong.scenes.pong.models import KeyState


def map_keys(keys: KeyState) -> float:
    """
    Map the directional keys to a vertical velocity.

    "Up" takes precedence when both keys are held.

    :return: +1.0 for up, -1.0 for down, 0.0 otherwise.
    :rtype: float
    """
    if keys.up:
        return 1.0
    if keys.down:
        return -1.0
    return 0.0
