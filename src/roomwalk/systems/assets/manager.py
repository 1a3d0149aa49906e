"""Background asset loading with a single handoff on the game thread.

This module provides the AssetManager class. Decoding every frame and room
background takes long enough to stall the first frames, so the work runs on a
one-thread pool while the window already shows the default pose. The result
comes back as a Future that update() polls on the game thread. When it is done
the whole result is handed to the player and room systems in one step, so a
tick never sees a half-filled direction.

Loading is attempted exactly once, with no retry, timeout or cancellation.
"""

from __future__ import annotations

import concurrent.futures
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, ClassVar

from roomwalk.conf import settings
from roomwalk.sprites.loader import LoadedAssets, load_all
from roomwalk.systems.assets.base import AssetBaseManager
from roomwalk.systems.assets.events import AssetsLoadedEvent, AssetWarningEvent
from roomwalk.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from pathlib import Path

    from roomwalk.systems.game_context import GameContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class AssetManager(AssetBaseManager):
    """Loads sprites and rooms off the game thread and publishes them once.

    Responsibilities:
    - Submit the load to a worker thread when the game starts
    - Poll the pending Future every frame without blocking
    - Hand frames to the player system and backgrounds to the room system
    - Publish AssetWarningEvent per problem and AssetsLoadedEvent at the end
    """

    name: ClassVar[str] = "assets"

    def __init__(self) -> None:
        """Initialize the asset manager with no load in flight."""
        self._executor: ThreadPoolExecutor | None = None
        self._future: Future[LoadedAssets] | None = None
        self._loaded: bool = False

    def setup(self, context: GameContext) -> None:
        """Start loading from the configured folders."""
        self.start_loading()

    def start_loading(self, sprites_path: str | Path | None = None, rooms_path: str | Path | None = None) -> None:
        """Submit the load to the worker thread.

        Calling this again once a load was submitted does nothing.
        """
        if self._future is not None:
            return
        if sprites_path is None:
            sprites_path = settings.SPRITES_PATH
        if rooms_path is None:
            rooms_path = settings.ROOMS_PATH

        logger.info("Loading sprites from %s and rooms from %s", sprites_path, rooms_path)
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="asset_loader")
        self._future = self._executor.submit(load_all, sprites_path, rooms_path)

    def is_loaded(self) -> bool:
        """Check whether loaded assets have been handed over."""
        return self._loaded

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the worker finishes. Never called from a tick.

        Returns:
            True if the load finished within the timeout.
        """
        if self._future is None:
            return False
        done, _ = concurrent.futures.wait([self._future], timeout=timeout)
        return bool(done)

    def update(self, delta_time: float, context: GameContext) -> None:
        """Hand over the result once the worker is done."""
        if self._loaded or self._future is None or not self._future.done():
            return
        self._loaded = True
        self._shutdown_executor()

        try:
            assets = self._future.result()
        except Exception as exc:
            logger.exception("Asset loading failed")
            context.event_bus.publish(AssetWarningEvent(f"Asset loading failed: {exc}"))
            return

        self._hand_over(assets, context)

    def _hand_over(self, assets: LoadedAssets, context: GameContext) -> None:
        context.player_manager.set_animation_set(assets.animation_set)
        context.room_manager.set_backgrounds(assets.room_backgrounds)

        for message in assets.warnings:
            context.event_bus.publish(AssetWarningEvent(message))
        context.event_bus.publish(
            AssetsLoadedEvent(frame_counts=assets.frame_counts(), room_count=len(assets.room_backgrounds))
        )

    def _shutdown_executor(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None

    def cleanup(self) -> None:
        """Release the worker without waiting for it."""
        self._shutdown_executor()
