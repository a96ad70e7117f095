"""
Minimal CPU paddle controller for Gutter Pong.
"""

from __future__ import annotations

from gutter_pong.entities import Ball, Paddle


class CpuPaddleController:
    """
    Very simple CPU:
    - Looks at the ball's center Y.
    - Moves toward it every tick; no prediction, no dead zone, no delay.

    The controller only decides a direction; the paddle's own speed is left
    alone.
    """

    def __init__(self, paddle: Paddle, ball: Ball):
        """
        :param paddle: The paddle to control.
        :type paddle: Paddle

        :param ball: The ball to track.
        :type ball: Ball
        """
        self.paddle = paddle
        self.ball = ball

    def compute_move(self) -> float:
        """
        Decide paddle move direction (y-up):
            +1.0 = up
            0.0 = level with the ball
            -1.0 = down
        """
        diff = self.ball.position.y - self.paddle.position.y
        if diff > 0:
            return 1.0
        if diff < 0:
            return -1.0
        return 0.0
