"""Room system.

This module provides the RoomManager class, which owns room backgrounds and the door area.
"""

from roomwalk.systems.room.base import RoomBaseManager
from roomwalk.systems.room.manager import RoomManager

__all__ = ["RoomBaseManager", "RoomManager"]
