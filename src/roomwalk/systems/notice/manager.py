"""User-visible notices for asset problems and load status.

This module provides the NoticeManager class. It listens for asset events and
turns them into short on-screen messages that expire on their own, so a
missing folder is reported to the player without interrupting the game.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

import arcade

from roomwalk.conf import settings
from roomwalk.systems.assets.events import AssetsLoadedEvent, AssetWarningEvent
from roomwalk.systems.notice.base import Notice, NoticeBaseManager
from roomwalk.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from roomwalk.events import Event, EventBus
    from roomwalk.systems.game_context import GameContext

logger = logging.getLogger(__name__)

NOTICE_COLOR = arcade.color.WHITE
WARNING_COLOR = arcade.color.ORANGE
NOTICE_FONT_SIZE = 12
NOTICE_LINE_HEIGHT = 20
NOTICE_MARGIN = 10


@SystemRegistry.register
class NoticeManager(NoticeBaseManager):
    """Shows expiring notices at the top of the window.

    Attributes:
        notices: Active notices, oldest first.
        duration: Seconds a new notice stays visible.
        max_visible: Maximum number of notices drawn at once.
    """

    name: ClassVar[str] = "notice"
    dependencies: ClassVar[list[str]] = ["assets"]

    def __init__(self) -> None:
        """Initialize the notice manager with no notices."""
        self.notices: list[Notice] = []
        self.duration: float = 4.0
        self.max_visible: int = 4
        self.event_bus: EventBus | None = None

        # One reusable text object per visible line, created on first draw
        self.line_texts: list[arcade.Text] = []

    def setup(self, context: GameContext) -> None:
        """Subscribe to asset events."""
        self.duration = float(settings.NOTICE_DURATION)
        self.max_visible = int(settings.NOTICE_MAX_VISIBLE)
        self.event_bus = context.event_bus
        self.event_bus.subscribe(AssetWarningEvent, self._on_asset_warning)
        self.event_bus.subscribe(AssetsLoadedEvent, self._on_assets_loaded)

    def show_notice(self, text: str, *, warning: bool = False) -> None:
        """Show a notice for NOTICE_DURATION seconds."""
        self.notices.append(Notice(text=text, remaining=self.duration, warning=warning))

    def get_visible_notices(self) -> list[Notice]:
        """Get the newest notices, at most max_visible of them, oldest first."""
        if self.max_visible <= 0:
            return []
        return self.notices[-self.max_visible :]

    def update(self, delta_time: float, context: GameContext) -> None:
        """Count notices down and drop expired ones."""
        for notice in self.notices:
            notice.remaining -= delta_time
        self.notices = [notice for notice in self.notices if notice.remaining > 0]

    def _on_asset_warning(self, event: Event) -> None:
        if not isinstance(event, AssetWarningEvent):
            return
        logger.warning("%s", event.message)
        self.show_notice(event.message, warning=True)

    def _on_assets_loaded(self, event: Event) -> None:
        if not isinstance(event, AssetsLoadedEvent):
            return
        for direction, count in event.frame_counts.items():
            logger.info("%s: %d frames", direction.label, count)
        logger.info("Rooms: %d backgrounds", event.room_count)
        self.show_notice("Sprites loaded!")

    def on_draw_ui(self, context: GameContext) -> None:
        """Draw visible notices from the top of the window downward."""
        if context.window is None:
            return
        top = context.window.height - NOTICE_MARGIN
        for index, notice in enumerate(self.get_visible_notices()):
            y = top - index * NOTICE_LINE_HEIGHT
            color = WARNING_COLOR if notice.warning else NOTICE_COLOR

            if index >= len(self.line_texts):
                self.line_texts.append(
                    arcade.Text(notice.text, NOTICE_MARGIN, y, color, font_size=NOTICE_FONT_SIZE, anchor_y="top")
                )
            else:
                line = self.line_texts[index]
                line.text = notice.text
                line.y = y
                line.color = color

            self.line_texts[index].draw()

    def cleanup(self) -> None:
        """Unsubscribe and drop all notices."""
        if self.event_bus:
            self.event_bus.unregister_all(self)
        self.notices = []
        self.line_texts = []
