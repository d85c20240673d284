"""Checkerboard placeholder textures at a calculated size."""
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from PIL import Image

from .config import TextureDimsError

MAX_TEXTURE_DIMENSION = 16384

LIGHT = (200, 200, 200, 255)
DARK = (96, 96, 96, 255)


def validate_texture_dimensions(width: Optional[int], height: Optional[int]) -> None:
    """Validate dimensions before allocating a texture.

    Args:
        width: Texture width in pixels.
        height: Texture height in pixels.

    Raises:
        TextureDimsError: If a dimension is missing, zero or too large.
    """
    if width is None or height is None:
        raise TextureDimsError("Both width and height are needed to render a texture")
    if width <= 0 or height <= 0:
        raise TextureDimsError("Texture dimensions cannot be zero")
    if width > MAX_TEXTURE_DIMENSION or height > MAX_TEXTURE_DIMENSION:
        raise TextureDimsError(
            f"Texture dimensions too large "
            f"(max {MAX_TEXTURE_DIMENSION}x{MAX_TEXTURE_DIMENSION})"
        )


def render_placeholder(
    width: int,
    height: int,
    cell_size: int = 8,
    colors: Tuple[Tuple[int, int, int, int], Tuple[int, int, int, int]] = (LIGHT, DARK),
) -> Image.Image:
    """Render an RGBA checkerboard of the given size.

    Cells start at the top-left corner; partial cells are clipped at the
    right and bottom edges.

    Args:
        width: Texture width in pixels.
        height: Texture height in pixels.
        cell_size: Side of one checker cell in pixels.
        colors: (even cell, odd cell) RGBA colors.

    Returns:
        RGBA image of size (width, height).

    Raises:
        TextureDimsError: If dimensions or cell size are invalid.
    """
    validate_texture_dimensions(width, height)
    if cell_size <= 0:
        raise TextureDimsError("Cell size must be a positive integer")

    ys = np.arange(height) // cell_size
    xs = np.arange(width) // cell_size
    odd = ((ys[:, None] + xs[None, :]) % 2).astype(bool)

    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[~odd] = colors[0]
    arr[odd] = colors[1]
    # uint8 with 4 channels is read as RGBA
    return Image.fromarray(arr)


def save_placeholder(path: str, width: int, height: int, cell_size: int = 8) -> None:
    """Render a checkerboard placeholder and save it as PNG."""
    img = render_placeholder(width, height, cell_size)
    img.save(path, format="PNG")
