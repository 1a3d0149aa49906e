"""Events for asset system."""

from dataclasses import dataclass, field

from roomwalk.events import Event
from roomwalk.types import Direction


@dataclass
class AssetsLoadedEvent(Event):
    """Fired once, on the game thread, after loaded assets were handed over.

    By the time this event is published the player already has its frames and
    the room system its backgrounds.

    Attributes:
        frame_counts: Number of frames loaded per direction.
        room_count: Number of room backgrounds loaded.
    """

    frame_counts: dict[Direction, int] = field(default_factory=dict)
    room_count: int = 0


@dataclass
class AssetWarningEvent(Event):
    """Fired for every non-fatal asset problem (missing folder, unreadable file).

    Attributes:
        message: Human readable description of the problem.
    """

    message: str
