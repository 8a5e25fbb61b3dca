"""
Debug overlay for atlas layouts.

Draws every section outline and its index onto a transparent canvas the size
of the atlas. Useful to check a grid against a sprite sheet in an image
editor (layer the PNG over the sheet). No texture pixels are read.
"""

import logging
import math
from pathlib import Path
from typing import Tuple, Union

from PIL import Image, ImageDraw

from .geometry import Rect
from .layout import AtlasLayout

logger = logging.getLogger(__name__)

OUTLINE_COLOR: Tuple[int, int, int, int] = (255, 0, 255, 255)
LABEL_COLOR: Tuple[int, int, int, int] = (255, 255, 255, 255)
FILL_COLOR: Tuple[int, int, int, int] = (255, 0, 255, 48)


def render_layout_preview(layout: AtlasLayout, scale: int = 1) -> Image.Image:
    """
    Render section outlines and indices for a layout.

    Args:
        layout: Layout to draw
        scale: Integer upscale factor (pixel-art sheets are often tiny)

    Returns:
        RGBA image of ceil(layout.size * scale), at least 1x1
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    width = max(1, math.ceil(layout.size.x * scale))
    height = max(1, math.ceil(layout.size.y * scale))

    img = Image.new('RGBA', (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    for index, rect in enumerate(layout):
        # Pillow wants ordered corners; layouts may hold hand-made rects
        r = Rect.from_corners(rect.min * scale, rect.max * scale)
        x1, y1 = int(r.min.x), int(r.min.y)
        # Outline sits on the last pixel row/column inside the section
        x2 = max(x1, int(math.ceil(r.max.x)) - 1)
        y2 = max(y1, int(math.ceil(r.max.y)) - 1)

        draw.rectangle((x1, y1, x2, y2), fill=FILL_COLOR, outline=OUTLINE_COLOR)
        draw.text((x1 + 2, y1 + 1), str(index), fill=LABEL_COLOR)

    return img


def save_layout_preview(
    layout: AtlasLayout,
    path: Union[str, Path],
    scale: int = 1
) -> None:
    """Render a layout preview and save it as PNG."""
    img = render_layout_preview(layout, scale=scale)
    img.save(path, format='PNG')
    logger.info(f"Saved {img.width}x{img.height} layout preview to {path}")
