"""Debug overlay system."""

from roomwalk.systems.debug.manager import DebugManager

__all__ = ["DebugManager"]
