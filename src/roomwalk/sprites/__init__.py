"""Sprite and background loading.

This module provides the functions that turn asset folders into textures:
per-direction player frames and numbered room backgrounds.
"""

from roomwalk.sprites.loader import LoadedAssets, load_all, load_animation_set, load_room_backgrounds

__all__ = ["LoadedAssets", "load_all", "load_animation_set", "load_room_backgrounds"]
