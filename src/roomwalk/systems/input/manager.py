"""Input latch for keyboard-driven movement.

This module provides the InputManager class, which keeps one boolean per
movement direction. Key presses set a flag, key releases clear it, and the
player system reads all four flags at the start of each tick. Key repeat is
irrelevant: a held key is simply a flag that stays set.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

import arcade

from roomwalk.systems.input.base import InputBaseManager, MovementFlags
from roomwalk.systems.registry import SystemRegistry
from roomwalk.types import Direction

if TYPE_CHECKING:
    from roomwalk.systems.game_context import GameContext

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: dict[int, Direction] = {
    arcade.key.W: Direction.UP,
    arcade.key.UP: Direction.UP,
    arcade.key.S: Direction.DOWN,
    arcade.key.DOWN: Direction.DOWN,
    arcade.key.A: Direction.LEFT,
    arcade.key.LEFT: Direction.LEFT,
    arcade.key.D: Direction.RIGHT,
    arcade.key.RIGHT: Direction.RIGHT,
}
"""Movement keys and the direction each one drives."""


@SystemRegistry.register
class InputManager(InputBaseManager):
    """Holds the up/down/left/right key-held flags.

    Responsibilities:
    - Set a flag on key press for W/A/S/D and the arrow keys
    - Clear the flag on key release
    - Ignore every other key
    - Provide an atomic snapshot of the flags to the player system

    No debouncing and no queuing: the last write to a flag wins.
    """

    name: ClassVar[str] = "input"

    def __init__(self) -> None:
        """Initialize the input manager with no keys held."""
        self._held: dict[Direction, bool] = dict.fromkeys(Direction, False)

    def setup(self, context: GameContext) -> None:
        """Start from a clean latch."""
        self.reset()

    def press(self, direction: Direction) -> None:
        """Mark a direction as held."""
        self._held[direction] = True

    def release(self, direction: Direction) -> None:
        """Mark a direction as released."""
        self._held[direction] = False

    def is_held(self, direction: Direction) -> bool:
        """Check whether a direction is currently held."""
        return self._held[direction]

    def reset(self) -> None:
        """Release every direction."""
        for direction in Direction:
            self._held[direction] = False

    def snapshot(self) -> MovementFlags:
        """Read all four direction flags at once."""
        return MovementFlags(
            up=self._held[Direction.UP],
            down=self._held[Direction.DOWN],
            left=self._held[Direction.LEFT],
            right=self._held[Direction.RIGHT],
        )

    def on_key_press(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Set the flag for a movement key."""
        direction = KEY_DIRECTIONS.get(symbol)
        if direction is None:
            return False
        self.press(direction)
        return True

    def on_key_release(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Clear the flag for a movement key."""
        direction = KEY_DIRECTIONS.get(symbol)
        if direction is None:
            return False
        self.release(direction)
        return True

    def cleanup(self) -> None:
        """Release every direction so nothing stays held across views."""
        self.reset()
