"""Game context shared by all systems.

The GameContext is the one object passed to every system lifecycle call. It
owns the event bus and the registry of system instances, and exposes the
built-in systems under their role names (``context.player_manager``,
``context.input_manager``, ...). Gameplay state lives inside the systems that
own it, never in module globals, so everything a tick reads or writes is
reachable from the context.

Example usage:
    context = GameContext(event_bus=EventBus(), window=window)
    context.register_system("input", input_manager)

    flags = context.input_manager.snapshot()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import arcade

    from roomwalk.events import EventBus
    from roomwalk.systems.assets.base import AssetBaseManager
    from roomwalk.systems.base import BaseSystem
    from roomwalk.systems.input.base import InputBaseManager
    from roomwalk.systems.notice.base import NoticeBaseManager
    from roomwalk.systems.player.base import PlayerBaseManager
    from roomwalk.systems.room.base import RoomBaseManager


class GameContext:
    """Central context object providing access to all game systems.

    Attributes:
        event_bus: Publish/subscribe event system for decoupled communication.
        window: Reference to the arcade Window, or None in tests.
    """

    input_manager: InputBaseManager
    asset_manager: AssetBaseManager
    room_manager: RoomBaseManager
    player_manager: PlayerBaseManager
    notice_manager: NoticeBaseManager

    def __init__(self, event_bus: EventBus, window: arcade.Window | None = None) -> None:
        """Initialize game context.

        Args:
            event_bus: Central event system shared by all systems.
            window: The arcade Window the game draws into.
        """
        self.event_bus = event_bus
        self.window = window

        # Registry for all pluggable systems (accessed via get_system)
        self._systems: dict[str, BaseSystem] = {}

    def register_system(self, name: str, system: BaseSystem) -> None:
        """Register a system with the context.

        The system is also exposed as an attribute named after its role, if it has one.
        """
        self._systems[name] = system

        if system.role:
            setattr(self, system.role, system)

    def get_system(self, name: str) -> BaseSystem | None:
        """Get a registered system by name, or None if it is not registered."""
        return self._systems.get(name)

    def get_systems(self) -> dict[str, BaseSystem]:
        """Get all registered systems."""
        return self._systems
