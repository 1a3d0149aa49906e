"""Game systems for managing different aspects of the demo."""

from roomwalk.systems.assets import AssetManager, AssetsLoadedEvent, AssetWarningEvent
from roomwalk.systems.base import BaseSystem
from roomwalk.systems.debug import DebugManager
from roomwalk.systems.game_context import GameContext
from roomwalk.systems.input import InputManager, MovementFlags
from roomwalk.systems.loader import CircularDependencyError, MissingDependencyError, SystemLoader
from roomwalk.systems.notice import Notice, NoticeManager
from roomwalk.systems.player import CanvasBounds, PlayerEntity, PlayerManager
from roomwalk.systems.registry import SystemRegistry
from roomwalk.systems.room import RoomManager

__all__ = [
    "AssetManager",
    "AssetWarningEvent",
    "AssetsLoadedEvent",
    "BaseSystem",
    "CanvasBounds",
    "CircularDependencyError",
    "DebugManager",
    "GameContext",
    "InputManager",
    "MissingDependencyError",
    "MovementFlags",
    "Notice",
    "NoticeManager",
    "PlayerEntity",
    "PlayerManager",
    "RoomManager",
    "SystemLoader",
    "SystemRegistry",
]
