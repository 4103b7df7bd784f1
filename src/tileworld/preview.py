"""Preview images of generated worlds.

A lightweight stand-in for the sprite renderer: each placement becomes a
block of its tint color, so a world can be inspected without a sprite
sheet or a window.
"""

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw

from .layout import draw_order
from .terrain.config import StyleConfig
from .types import TileKind, TilePlacement


def render_preview(
    placements: list[TilePlacement],
    cols: int,
    rows: int,
    style: StyleConfig | None = None,
    cell_size: int = 4,
) -> Image.Image:
    """Render placements as colored blocks, cell_size pixels per cell.

    Grid +Y points up, so row 0 is drawn at the bottom of the image.
    Higher layers are drawn last; feature tiles are inset by one pixel
    so the ground under them stays visible.

    Args:
        placements: Tiles to draw.
        cols: Grid width in cells.
        rows: Grid height in cells.
        style: Palette for the background; defaults to StyleConfig().
        cell_size: Pixels per cell edge.

    Returns:
        RGB image of size (cols * cell_size, rows * cell_size).
    """
    if cell_size < 1:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    if style is None:
        style = StyleConfig()

    img = Image.new(
        "RGB", (cols * cell_size, rows * cell_size), style.background.as_rgb8()
    )
    draw = ImageDraw.Draw(img)
    inset = 1 if cell_size >= 3 else 0

    for placement in draw_order(placements):
        x, y = placement.position
        if not (0 <= x < cols and 0 <= y < rows):
            continue
        left = x * cell_size
        top = (rows - 1 - y) * cell_size
        pad = inset if placement.kind is not TileKind.GROUND else 0
        right = left + cell_size - 1 - pad
        bottom = top + cell_size - 1 - pad
        draw.rectangle(
            (left + pad, top + pad, right, bottom),
            fill=placement.tint.as_rgb8(),
        )

    return img


def render_noise(grid: NDArray[np.float64]) -> Image.Image:
    """Render a sampled noise grid as a grayscale image.

    Args:
        grid: Array of shape (cols, rows) with values in roughly [-1, 1].

    Returns:
        "L" mode image, white for high values, +Y up.
    """
    normalized = np.clip((grid + 1.0) / 2.0, 0.0, 1.0)
    # (cols, rows) -> (rows, cols) with row 0 at the bottom
    pixels = np.flipud((normalized * 255).astype(np.uint8).T)
    return Image.fromarray(np.ascontiguousarray(pixels))
