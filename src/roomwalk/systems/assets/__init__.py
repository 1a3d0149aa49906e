"""Asset system.

This module provides the AssetManager class, which loads player frames and
room backgrounds on a worker thread and hands them over on the game thread.
"""

from roomwalk.systems.assets.base import AssetBaseManager
from roomwalk.systems.assets.events import AssetsLoadedEvent, AssetWarningEvent
from roomwalk.systems.assets.manager import AssetManager

__all__ = ["AssetBaseManager", "AssetManager", "AssetWarningEvent", "AssetsLoadedEvent"]
