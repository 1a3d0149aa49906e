"""Room backgrounds and the door trigger area.

This module provides the RoomManager class. It keeps the numbered room
backgrounds handed over by the asset system and draws the current one
stretched over the canvas. Without a background for the current room the
canvas is cleared to a flat fallback colour instead.

The door area is defined and can be queried, but nothing moves the player to
another room.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

import arcade

from roomwalk.conf import settings
from roomwalk.systems.registry import SystemRegistry
from roomwalk.systems.room.base import RoomBaseManager
from roomwalk.types import Rect

if TYPE_CHECKING:
    from collections.abc import Mapping

    from roomwalk.systems.game_context import GameContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class RoomManager(RoomBaseManager):
    """Manages room backgrounds and the current room.

    Attributes:
        current_room: Number of the room being shown.
        backgrounds: Room number to background texture.
        door_area: Door trigger rectangle in canvas coordinates.
        fallback_color: RGB colour used when there is no background.
    """

    name: ClassVar[str] = "room"
    dependencies: ClassVar[list[str]] = ["assets"]

    def __init__(self) -> None:
        """Initialize the room manager with no backgrounds."""
        self.backgrounds: dict[int, arcade.Texture] = {}
        self._configure()

    def setup(self, context: GameContext) -> None:
        """Read the initial room, door area and fallback colour from settings."""
        self._configure()

    def _configure(self) -> None:
        self.current_room: int = settings.INITIAL_ROOM
        self.door_area = Rect(*settings.DOOR_AREA)
        self.fallback_color: tuple[int, int, int] = tuple(settings.FALLBACK_BACKGROUND_COLOR)

    def set_backgrounds(self, backgrounds: Mapping[int, arcade.Texture]) -> None:
        """Replace the room backgrounds."""
        self.backgrounds = dict(backgrounds)
        if self.current_room not in self.backgrounds:
            logger.info("No background for room %d, using flat colour", self.current_room)

    def get_background(self) -> arcade.Texture | None:
        """Get the current room's background, if loaded."""
        return self.backgrounds.get(self.current_room)

    def get_room_text(self) -> str:
        """Get the caption naming the current room."""
        return f"Room: {self.current_room}"

    def is_in_door_area(self, x: float, y: float) -> bool:
        """Check whether a canvas point lies inside the door area."""
        return self.door_area.contains(x, y)

    def on_draw(self, context: GameContext) -> None:
        """Draw the current room background, or the flat fallback colour."""
        background = self.get_background()
        if context.window is None:
            return
        if background is None:
            arcade.draw_lbwh_rectangle_filled(0, 0, context.window.width, context.window.height, self.fallback_color)
            return
        arcade.draw_texture_rect(background, arcade.LBWH(0, 0, context.window.width, context.window.height))

    def cleanup(self) -> None:
        """Forget all backgrounds."""
        self.backgrounds = {}
