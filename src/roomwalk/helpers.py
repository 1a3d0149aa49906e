"""Helper functions for creating and running the demo.

Users can choose between the simple run_game() function or create_game() for
more control over the window before the loop starts.
"""

import logging

import arcade
from rich.logging import RichHandler

from roomwalk.conf import settings
from roomwalk.views import GameView


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the game.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_game() -> arcade.Window:
    """Create the window and show the game view.

    Uses the settings from your project's settings.py (or the module named by
    ROOMWALK_SETTINGS_MODULE).

    Returns:
        The arcade.Window with the GameView already shown.

    Example:
        >>> from roomwalk import create_game
        >>> window = create_game()
        >>> arcade.run()
    """
    setup_logging()

    window = arcade.Window(
        settings.SCREEN_WIDTH,
        settings.SCREEN_HEIGHT,
        settings.WINDOW_TITLE,
    )
    window.show_view(GameView())
    return window


def run_game() -> None:
    """Create the window and run the game loop until it is closed."""
    create_game()
    arcade.run()
