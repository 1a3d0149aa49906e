"""Main gameplay view.

This module provides the GameView class, the loop driver of the demo. It loads
the installed systems, creates the shared GameContext and forwards arcade's
callbacks to every system in dependency order:

- on_update(): asset handoff first, then the player's fixed ticks
- on_draw(): room background, player frame, then UI text
- on_key_press/release(): the input latch

Example usage:
    window = arcade.Window(800, 400, "Room Walk")
    window.show_view(GameView())
    arcade.run()
"""

from __future__ import annotations

import logging

import arcade

from roomwalk.conf import settings
from roomwalk.events import EventBus
from roomwalk.systems import GameContext, SystemLoader

logger = logging.getLogger(__name__)


class GameView(arcade.View):
    """Gameplay view coordinating all systems.

    Attributes:
        event_bus: Pub/sub bus shared through the context.
        system_loader: Loader holding the system instances, once set up.
        game_context: Context passed to every system, once set up.
        initialized: Whether setup() has run.
    """

    def __init__(self) -> None:
        """Initialize the view. Systems are created on first show."""
        super().__init__()
        self.event_bus = EventBus()
        self.system_loader: SystemLoader | None = None
        self.game_context: GameContext | None = None
        self.initialized: bool = False

    def setup(self) -> None:
        """Create, register and set up all installed systems."""
        self.system_loader = SystemLoader(settings.INSTALLED_SYSTEMS)
        system_instances = self.system_loader.instantiate_all()

        self.game_context = GameContext(event_bus=self.event_bus, window=self.window)
        for name, system in system_instances.items():
            self.game_context.register_system(name, system)

        self.system_loader.setup_all(self.game_context)
        logger.info("Game view ready with %d systems", len(system_instances))

    def on_show_view(self) -> None:
        """Set up systems on first show."""
        self.window.background_color = settings.FALLBACK_BACKGROUND_COLOR
        if not self.initialized:
            self.setup()
            self.initialized = True

    def on_hide_view(self) -> None:
        """Release systems when the view goes away."""
        self.cleanup()

    def on_update(self, delta_time: float) -> None:
        """Update all systems."""
        if self.system_loader and self.game_context:
            self.system_loader.update_all(delta_time, self.game_context)

    def on_draw(self) -> None:
        """Render the world, then the UI."""
        self.clear()
        if self.system_loader and self.game_context:
            self.system_loader.draw_all(self.game_context)
            self.system_loader.draw_ui_all(self.game_context)

    def on_key_press(self, symbol: int, modifiers: int) -> bool | None:
        """Forward key presses to the systems."""
        if self.system_loader and self.game_context:
            return self.system_loader.on_key_press_all(symbol, modifiers, self.game_context) or None
        return None

    def on_key_release(self, symbol: int, modifiers: int) -> bool | None:
        """Forward key releases to the systems."""
        if self.system_loader and self.game_context:
            return self.system_loader.on_key_release_all(symbol, modifiers, self.game_context) or None
        return None

    def cleanup(self) -> None:
        """Clean up every system and forget them."""
        if self.system_loader:
            self.system_loader.cleanup_all()
        self.event_bus.clear()
        self.system_loader = None
        self.game_context = None
        self.initialized = False
