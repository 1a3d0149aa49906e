"""Base class for RoomManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from roomwalk.systems.base import BaseSystem

if TYPE_CHECKING:
    from collections.abc import Mapping

    import arcade


class RoomBaseManager(BaseSystem, ABC):
    """Base class for RoomManager."""

    role = "room_manager"

    @abstractmethod
    def set_backgrounds(self, backgrounds: Mapping[int, arcade.Texture]) -> None:
        """Replace the room backgrounds."""
        ...

    @abstractmethod
    def get_background(self) -> arcade.Texture | None:
        """Get the current room's background, if loaded."""
        ...

    @abstractmethod
    def get_room_text(self) -> str:
        """Get the caption naming the current room."""
        ...
