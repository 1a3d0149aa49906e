"""Input system.

This module provides the InputManager class, the latch of held movement keys.
"""

from roomwalk.systems.input.base import InputBaseManager, MovementFlags
from roomwalk.systems.input.manager import KEY_DIRECTIONS, InputManager

__all__ = ["KEY_DIRECTIONS", "InputBaseManager", "InputManager", "MovementFlags"]
