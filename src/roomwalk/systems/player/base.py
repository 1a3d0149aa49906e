"""Player entity, canvas bounds and the base class for PlayerManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from roomwalk.systems.base import BaseSystem
from roomwalk.types import Direction, PlayerState

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

AnimationSet = dict[Direction, list[Any]]
"""Per-direction ordered frame list (arcade textures at runtime)."""


@dataclass
class PlayerEntity:
    """Position, facing and animation cursor of the player.

    Positions are canvas coordinates: origin at the top-left corner, y grows
    downward, and (x, y) is the top-left corner of the sprite.

    Attributes:
        x: Horizontal position in pixels.
        y: Vertical position in pixels.
        state: IDLE or MOVING, recomputed every tick.
        current_direction: Direction of the last movement applied.
        last_moving_direction: Direction shown while at rest.
        sprite_index: Cursor into the active direction's frame list.
        idle_ticks: Idle ticks counted since the last idle frame change.
    """

    x: float = 368.0
    y: float = 268.0
    state: PlayerState = PlayerState.IDLE
    current_direction: Direction = Direction.DOWN
    last_moving_direction: Direction = Direction.DOWN
    sprite_index: int = 0
    idle_ticks: int = 0

    @property
    def active_direction(self) -> Direction:
        """Direction whose frames are animated this tick."""
        if self.state is PlayerState.MOVING:
            return self.current_direction
        return self.last_moving_direction


@dataclass(frozen=True)
class CanvasBounds:
    """Legal range of the player's top-left corner.

    The right and bottom margins keep the sprite clear of the UI chrome drawn
    along those edges.
    """

    canvas_width: float
    canvas_height: float
    sprite_width: float
    sprite_height: float
    right_margin: float = 20
    bottom_margin: float = 60

    @property
    def max_x(self) -> float:
        """Largest legal x."""
        return max(0.0, self.canvas_width - self.sprite_width - self.right_margin)

    @property
    def max_y(self) -> float:
        """Largest legal y."""
        return max(0.0, self.canvas_height - self.sprite_height - self.bottom_margin)

    def clamp(self, x: float, y: float) -> tuple[float, float]:
        """Clamp a position into the legal range."""
        return max(0.0, min(self.max_x, x)), max(0.0, min(self.max_y, y))


class PlayerBaseManager(BaseSystem, ABC):
    """Base class for PlayerManager."""

    role = "player_manager"

    @abstractmethod
    def get_player(self) -> PlayerEntity:
        """Get the player entity."""
        ...

    @abstractmethod
    def set_player_position(self, player_x: float, player_y: float) -> None:
        """Set the player position."""
        ...

    @abstractmethod
    def set_animation_set(self, animation_set: Mapping[Direction, Sequence[Any]]) -> None:
        """Replace the per-direction frames."""
        ...

    @abstractmethod
    def get_debug_text(self) -> str:
        """Get the status line describing the player."""
        ...
