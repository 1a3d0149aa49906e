"""Player management system.

This module provides the PlayerManager class, which handles player movement,
canvas clamping and per-direction animation on a fixed tick.
"""

from roomwalk.systems.player.base import AnimationSet, CanvasBounds, PlayerBaseManager, PlayerEntity
from roomwalk.systems.player.manager import MOVEMENT_STEPS, PlayerManager

__all__ = ["MOVEMENT_STEPS", "AnimationSet", "CanvasBounds", "PlayerBaseManager", "PlayerEntity", "PlayerManager"]
