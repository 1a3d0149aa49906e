"""Base class for NoticeManager."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from roomwalk.systems.base import BaseSystem


@dataclass
class Notice:
    """A short message shown on screen for a limited time.

    Attributes:
        text: Message to display.
        remaining: Seconds left before the notice disappears.
        warning: Whether the notice reports a problem (drawn in a warning colour).
    """

    text: str
    remaining: float
    warning: bool = False


class NoticeBaseManager(BaseSystem, ABC):
    """Base class for NoticeManager."""

    role = "notice_manager"

    @abstractmethod
    def show_notice(self, text: str, *, warning: bool = False) -> None:
        """Show a notice."""
        ...

    @abstractmethod
    def get_visible_notices(self) -> list[Notice]:
        """Get the notices that are currently drawn."""
        ...
