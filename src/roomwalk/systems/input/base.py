"""Base class for InputManager."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from roomwalk.systems.base import BaseSystem
from roomwalk.types import Direction


@dataclass(frozen=True)
class MovementFlags:
    """Snapshot of the four held-direction flags, taken once per tick.

    Attributes:
        up: Up (W / Up arrow) is held.
        down: Down (S / Down arrow) is held.
        left: Left (A / Left arrow) is held.
        right: Right (D / Right arrow) is held.
    """

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def is_held(self, direction: Direction) -> bool:
        """Check a single direction flag."""
        return getattr(self, direction.name.lower())

    def any(self) -> bool:
        """Check whether any direction is held."""
        return self.up or self.down or self.left or self.right


class InputBaseManager(BaseSystem, ABC):
    """Base class for InputManager."""

    role = "input_manager"

    @abstractmethod
    def snapshot(self) -> MovementFlags:
        """Read all four direction flags at once."""
        ...
