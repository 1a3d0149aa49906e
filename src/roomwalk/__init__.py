"""roomwalk - a small top-down character movement demo built on Arcade.

A window shows a room background and a player sprite with per-direction idle
and walk animations. W/A/S/D or the arrow keys move the player, clamped to the
visible canvas.

Quick start:
    # Optional settings.py in your working directory:
    # SPRITES_PATH = "materials/idle_sprites"
    # ROOMS_PATH = "materials/rooms"

    from roomwalk import run_game

    if __name__ == "__main__":
        run_game()
"""

__version__ = "0.1.0"

from roomwalk.conf import settings
from roomwalk.helpers import create_game, run_game
from roomwalk.systems import (
    AssetManager,
    GameContext,
    InputManager,
    NoticeManager,
    PlayerManager,
    RoomManager,
)
from roomwalk.types import Direction, PlayerState
from roomwalk.views import GameView

__all__ = [
    "AssetManager",
    "Direction",
    "GameContext",
    "GameView",
    "InputManager",
    "NoticeManager",
    "PlayerManager",
    "PlayerState",
    "RoomManager",
    "__version__",
    "create_game",
    "run_game",
    "settings",
]
