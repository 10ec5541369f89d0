"""Helper functions for creating and running Passage games.

This module provides high-level functions to simplify game creation and setup.
Users can choose between the simple run_game() function or create_game() for
more control over the game initialization.
"""

import logging
from pathlib import Path

import arcade
from rich.logging import RichHandler

from passage.conf import settings
from passage.views import GameView


def setup_logging(log_level: str = "DEBUG") -> None:
    """Configure logging for the game.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def setup_resources(assets_handle: str) -> None:
    """Configure Arcade resource handles for game assets.

    Registers a resource handle pointing to the assets directory in the current
    working directory (user's game project).

    Args:
        assets_handle: Name of the resource handle to register.
    """
    assets_dir = Path.cwd() / "assets"
    arcade.resources.add_resource_handle(assets_handle, assets_dir.resolve())


def create_game() -> arcade.Window:
    """Create a game window showing a GameView.

    Creates an arcade.Window using the settings from your project's settings.py
    (or the module specified by PASSAGE_SETTINGS_MODULE), sets up logging and
    resource handles, and shows a GameView, which loads the scene catalog and
    systems.

    Returns:
        Configured arcade.Window with the GameView shown.
    """
    setup_logging()
    setup_resources(settings.ASSETS_HANDLE)

    window = arcade.Window(
        settings.SCREEN_WIDTH,
        settings.SCREEN_HEIGHT,
        settings.WINDOW_TITLE,
    )
    window.show_view(GameView(window))
    return window


def run_game() -> None:
    """Create and run a Passage game.

    Example:
        >>> from passage import run_game
        >>> if __name__ == "__main__":
        ...     run_game()
    """
    create_game()
    arcade.run()
