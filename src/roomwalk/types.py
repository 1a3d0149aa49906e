"""Custom types and enumerations."""

from dataclasses import dataclass
from enum import Enum, auto


class Direction(Enum):
    """Facing/movement direction, also the key of an animation set."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def label(self) -> str:
        """Human readable name ("Up", "Down", ...)."""
        return self.name.capitalize()


class PlayerState(Enum):
    """Player movement state, derived every tick from the held keys."""

    IDLE = auto()
    MOVING = auto()

    @property
    def label(self) -> str:
        """Human readable name ("Idle", "Moving")."""
        return self.name.capitalize()


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in canvas coordinates (top-left origin)."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        """Check whether a point lies inside the rectangle (edges included)."""
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height
