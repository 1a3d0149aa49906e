"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from PIL import Image

from roomwalk.conf import settings

if TYPE_CHECKING:
    from collections.abc import Callable, Generator
    from pathlib import Path


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        SCREEN_WIDTH=800,
        SCREEN_HEIGHT=400,
        WINDOW_TITLE="Test",
        LOG_LEVEL="DEBUG",
        PLAYER_SPEED=5.0,
        PLAYER_START_X=368.0,
        PLAYER_START_Y=268.0,
        SPRITE_WIDTH=64,
        SPRITE_HEIGHT=64,
        CANVAS_RIGHT_MARGIN=20,
        CANVAS_BOTTOM_MARGIN=60,
        TICK_INTERVAL=0.08,
        MAX_TICKS_PER_UPDATE=5,
        IDLE_FRAME_TICKS=5,
        SPRITES_PATH="missing/sprites",
        ROOMS_PATH="missing/rooms",
        INITIAL_ROOM=1,
        DOOR_AREA=(20, 20, 60, 80),
        FALLBACK_BACKGROUND_COLOR=(200, 200, 255),
        NOTICE_DURATION=4.0,
        NOTICE_MAX_VISIBLE=4,
    )
    yield
    # Reset settings after test
    settings._wrapped = None


@pytest.fixture
def write_image() -> Callable[..., Path]:
    """Return a helper that writes a solid-colour image file.

    The helper takes the target path, an RGB colour and an optional size, and
    creates parent folders as needed. JPEG files are written without alpha.
    """

    def _write(path: Path, color: tuple[int, int, int], size: tuple[int, int] = (32, 32)) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix.lower() in {".jpg", ".jpeg"}:
            Image.new("RGB", size, color).save(path, "JPEG")
        else:
            Image.new("RGBA", size, (*color, 255)).save(path, "PNG")
        return path

    return _write
