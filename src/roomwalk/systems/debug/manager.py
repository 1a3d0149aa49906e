"""Debug overlay drawn in the bottom UI margin.

Shows the player's status line (state, direction, position) and the room
caption. Purely observational: it reads other systems and changes nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import arcade

from roomwalk.systems.base import BaseSystem
from roomwalk.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from roomwalk.systems.game_context import GameContext

TEXT_COLOR = arcade.color.BLACK
FONT_SIZE = 12
LEFT_MARGIN = 10
DEBUG_LINE_Y = 12
ROOM_LINE_Y = 34


@SystemRegistry.register
class DebugManager(BaseSystem):
    """Draws the debug status line and room caption."""

    name: ClassVar[str] = "debug"
    dependencies: ClassVar[list[str]] = ["player", "room"]

    def __init__(self) -> None:
        """Initialize the overlay with no text objects yet."""
        # Text objects (created on first draw)
        self.room_text: arcade.Text | None = None
        self.debug_text: arcade.Text | None = None

    def setup(self, context: GameContext) -> None:
        """Nothing to prepare."""

    def get_lines(self, context: GameContext) -> list[str]:
        """Get the overlay lines, top to bottom."""
        return [context.room_manager.get_room_text(), context.player_manager.get_debug_text()]

    def on_draw_ui(self, context: GameContext) -> None:
        """Draw the room caption above the player's status line."""
        room_line, debug_line = self.get_lines(context)

        if self.room_text is None or self.debug_text is None:
            self.room_text = arcade.Text(room_line, LEFT_MARGIN, ROOM_LINE_Y, TEXT_COLOR, font_size=FONT_SIZE)
            self.debug_text = arcade.Text(debug_line, LEFT_MARGIN, DEBUG_LINE_Y, TEXT_COLOR, font_size=FONT_SIZE)
        else:
            self.room_text.text = room_line
            self.debug_text.text = debug_line

        self.room_text.draw()
        self.debug_text.draw()

    def cleanup(self) -> None:
        """Drop the cached text objects."""
        self.room_text = None
        self.debug_text = None
