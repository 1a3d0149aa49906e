"""Base class for pluggable systems.

Systems are the building blocks of the demo, each handling one aspect of the
game (input, assets, the player, on-screen notices, ...).

Example:
    Creating a custom system::

        from roomwalk.systems.base import BaseSystem
        from roomwalk.systems.registry import SystemRegistry

        @SystemRegistry.register
        class FootstepManager(BaseSystem):
            name = "footsteps"
            dependencies = ["player"]

            def setup(self, context):
                self.steps = 0

            def update(self, delta_time, context):
                if context.player_manager.get_player().state is PlayerState.MOVING:
                    self.steps += 1
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from roomwalk.systems.game_context import GameContext


class BaseSystem(ABC):
    """Base class for all pluggable systems.

    Attributes:
        name: Unique identifier for the system. Must be defined as a class variable.
        dependencies: List of system names this system depends on. Systems are
            set up and updated in dependency order.
        role: Attribute name under which the system is exposed on GameContext
            (e.g. "player_manager"). Empty for systems that are only reachable
            through get_system().
    """

    # System identifier (must be unique across all systems)
    name: ClassVar[str]

    # Other systems this one depends on (by name)
    dependencies: ClassVar[list[str]] = []

    role: ClassVar[str] = ""

    @abstractmethod
    def setup(self, context: GameContext) -> None:
        """Initialize the system before the game loop starts.

        Args:
            context: Game context providing access to other systems.
        """

    def update(self, delta_time: float, context: GameContext) -> None:  # noqa: B027
        """Called every frame during the game loop.

        Args:
            delta_time: Time elapsed since the last frame, in seconds.
            context: Game context providing access to other systems.
        """

    def on_draw(self, context: GameContext) -> None:  # noqa: B027
        """Called during the draw phase of each frame, before UI drawing."""

    def on_draw_ui(self, context: GameContext) -> None:  # noqa: B027
        """Called during the draw phase of each frame, after world drawing."""

    def cleanup(self) -> None:  # noqa: B027
        """Called when the game view goes away or the window closes."""

    def on_key_press(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Handle key press events.

        Args:
            symbol: Arcade key constant for the pressed key.
            modifiers: Bitfield of modifier keys held.
            context: Game context providing access to other systems.

        Returns:
            True if the event was handled and should stop propagating, False otherwise.
        """
        return False

    def on_key_release(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Handle key release events.

        Returns:
            True if the event was handled and should stop propagating, False otherwise.
        """
        return False
