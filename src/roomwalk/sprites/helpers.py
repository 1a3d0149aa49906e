"""Helper functions for decoding image files into textures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import arcade
from PIL import Image

if TYPE_CHECKING:
    from pathlib import Path


def decode_image(path: Path, size: tuple[int, int] | None = None) -> Image.Image:
    """Fully decode an image file into an RGBA Pillow image.

    The file handle is closed before returning, so the result can be handed to
    another thread.

    Args:
        path: Image file to read.
        size: Optional (width, height) to resize to.

    Returns:
        The decoded RGBA image.

    Raises:
        OSError: The file is missing or is not a readable image.
    """
    with Image.open(path) as source:
        image = source.convert("RGBA")
    if size is not None and image.size != size:
        image = image.resize(size, Image.Resampling.LANCZOS)
    return image


def load_texture(path: Path, size: tuple[int, int] | None = None) -> arcade.Texture:
    """Decode an image file into an arcade texture.

    Args:
        path: Image file to read.
        size: Optional (width, height) to resize to.

    Raises:
        OSError: The file is missing or is not a readable image.
    """
    image = decode_image(path, size)
    return arcade.Texture(image, hash=f"roomwalk:{path.resolve()}:{image.width}x{image.height}")
