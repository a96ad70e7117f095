"""
Main application for Gutter Pong.
"""

from __future__ import annotations

from mini_arcade_core import (  # pyright: ignore[reportMissingImports]
    GameConfig,
    WindowConfig,
    run_game,
)
from mini_arcade_core.scenes.registry import SceneRegistry
from mini_arcade_core.utils import logger

# Justification: in editable installs, this module is provided by the package.
# pylint: disable=no-name-in-module
from mini_arcade_native_backend import (  # pyright: ignore[reportMissingImports]
    NativeBackend,
)

from gutter_pong.constants import BACKGROUND, FPS, WINDOW_SIZE

# pylint: enable=no-name-in-module


def run():
    """
    Main entry point for Gutter Pong.

    - Auto-discovers scenes from the `gutter_pong.scenes` package.
    - Sets up the game window with specified dimensions and background color.
    - Runs the game with the initial scene set to "pong".
    """
    scene_registry = SceneRegistry(_factories={}).discover(
        "gutter_pong.scenes"
    )

    w_width, w_height = WINDOW_SIZE
    game_config = GameConfig(
        window=WindowConfig(
            width=w_width,
            height=w_height,
            background_color=BACKGROUND,
            title="Gutter Pong",
        ),
        fps=FPS,
        backend=NativeBackend(),
    )
    logger.info("Starting Gutter Pong...")
    run_game(
        config=game_config, registry=scene_registry, initial_scene="pong"
    )


if __name__ == "__main__":
    run()
