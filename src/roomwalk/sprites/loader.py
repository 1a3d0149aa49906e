"""Loading of player animation frames and room backgrounds from disk.

Frames live in one subfolder per direction under SPRITES_PATH::

    idle_sprites/
        forward/  -> Direction.UP
        back/     -> Direction.DOWN
        left/     -> Direction.LEFT
        right/    -> Direction.RIGHT

Each subfolder holds PNG frames played in lexicographic filename order
(``frame_00.png``, ``frame_01.png``, ...). Room backgrounds live under
ROOMS_PATH as ``<room number>.jpg``.

Nothing in this module raises for missing or broken files. Problems are
collected as warning strings and returned next to whatever did load, so one
bad direction or room never stops the others. These functions are safe to
call from a worker thread: they only touch the filesystem and Pillow.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from roomwalk.conf import settings
from roomwalk.sprites.helpers import load_texture
from roomwalk.types import Direction

if TYPE_CHECKING:
    from collections.abc import Mapping

    import arcade

    from roomwalk.systems.player.base import AnimationSet

logger = logging.getLogger(__name__)


@dataclass
class LoadedAssets:
    """Everything the background load produced.

    Attributes:
        animation_set: Frames per direction. Directions whose folder is missing are absent.
        room_backgrounds: Room number to background texture.
        warnings: Human readable problems met while loading.
    """

    animation_set: AnimationSet = field(default_factory=dict)
    room_backgrounds: dict[int, arcade.Texture] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def frame_counts(self) -> dict[Direction, int]:
        """Number of frames loaded per direction."""
        return {direction: len(frames) for direction, frames in self.animation_set.items()}


def direction_folders(folders: Mapping[str, str] | None = None) -> dict[Direction, str]:
    """Map DIRECTION_FOLDERS-style names ("UP", ...) onto Direction members."""
    if folders is None:
        folders = settings.DIRECTION_FOLDERS
    return {Direction[name.upper()]: folder for name, folder in folders.items()}


def load_animation_set(
    path: str | Path,
    *,
    frame_size: tuple[int, int] | None = None,
    folders: Mapping[str, str] | None = None,
    extension: str | None = None,
) -> tuple[AnimationSet, list[str]]:
    """Load the frames of every direction.

    Args:
        path: Folder containing one subfolder per direction.
        frame_size: (width, height) every frame is resized to. Defaults to
            (SPRITE_WIDTH, SPRITE_HEIGHT).
        folders: Direction name to subfolder name. Defaults to DIRECTION_FOLDERS.
        extension: Frame file extension. Defaults to SPRITE_EXTENSION.

    Returns:
        The animation set and the list of warnings. A missing subfolder leaves its
        direction out of the set; an empty one maps it to an empty list.
    """
    if frame_size is None:
        frame_size = (settings.SPRITE_WIDTH, settings.SPRITE_HEIGHT)
    if extension is None:
        extension = settings.SPRITE_EXTENSION

    root = Path(path)
    animation_set: AnimationSet = {}
    warnings: list[str] = []

    for direction, folder in direction_folders(folders).items():
        folder_path = root / folder
        if not folder_path.is_dir():
            warnings.append(f"Sprite folder not found: {folder_path}")
            continue

        frames = []
        for frame_file in _sorted_files(folder_path, extension):
            try:
                frames.append(load_texture(frame_file, frame_size))
            except OSError as exc:
                warnings.append(f"Could not load sprite {frame_file}: {exc}")

        animation_set[direction] = frames
        logger.info("Loaded %d sprites for %s", len(frames), direction.label)

    return animation_set, warnings


def load_room_backgrounds(
    path: str | Path,
    *,
    extension: str | None = None,
) -> tuple[dict[int, arcade.Texture], list[str]]:
    """Load every room background whose filename is a room number.

    Args:
        path: Folder containing ``<number><extension>`` files.
        extension: Background file extension. Defaults to ROOM_EXTENSION.

    Returns:
        Room number to texture, and the list of warnings. Files whose name is
        not an integer are skipped silently.
    """
    if extension is None:
        extension = settings.ROOM_EXTENSION

    root = Path(path)
    backgrounds: dict[int, arcade.Texture] = {}
    warnings: list[str] = []

    if not root.is_dir():
        warnings.append(f"Rooms folder not found: {root}")
        return backgrounds, warnings

    for room_file in _sorted_files(root, extension):
        try:
            room_number = int(room_file.stem)
        except ValueError:
            logger.debug("Skipping %s: name is not a room number", room_file.name)
            continue
        try:
            backgrounds[room_number] = load_texture(room_file)
        except OSError as exc:
            warnings.append(f"Could not load room {room_number} from {room_file}: {exc}")

    logger.info("Loaded %d room backgrounds", len(backgrounds))
    return backgrounds, warnings


def load_all(
    sprites_path: str | Path | None = None,
    rooms_path: str | Path | None = None,
) -> LoadedAssets:
    """Load the animation set and the room backgrounds.

    Args:
        sprites_path: Defaults to SPRITES_PATH.
        rooms_path: Defaults to ROOMS_PATH.
    """
    if sprites_path is None:
        sprites_path = settings.SPRITES_PATH
    if rooms_path is None:
        rooms_path = settings.ROOMS_PATH

    animation_set, sprite_warnings = load_animation_set(sprites_path)
    room_backgrounds, room_warnings = load_room_backgrounds(rooms_path)
    return LoadedAssets(
        animation_set=animation_set,
        room_backgrounds=room_backgrounds,
        warnings=sprite_warnings + room_warnings,
    )


def _sorted_files(folder: Path, extension: str) -> list[Path]:
    suffix = extension.lower()
    return sorted(
        (entry for entry in folder.iterdir() if entry.is_file() and entry.suffix.lower() == suffix),
        key=lambda entry: entry.name,
    )
