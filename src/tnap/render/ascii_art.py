"""
Image to ASCII art conversion.

Each output character covers a block of pixels; its glyph is picked from a
brightness ramp and it is colored with the block's average color using
24-bit ANSI escapes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Tuple

import numpy as np
from PIL import Image
from rich.align import Align
from rich.control import Control
from rich.text import Text

from ..errors import ConversionError
from .base import DrawArea, FrameRenderer
from .decode import decode

logger = logging.getLogger(__name__)

# Dark to bright.
CHAR_RAMP = " .'`^,:;Il!i><~+_-?][}{1)(|/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Terminal cells are roughly twice as tall as they are wide.
CHAR_ASPECT = 0.380025

RESET = "\x1b[0m"

LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def ascii_size(columns: int, rows: int) -> int:
    """Target ASCII width in characters for a terminal of the given size."""
    size = min(columns, rows) * 2
    logger.debug(f"ascii size: {size}")
    return size


def _fit_grid(image_size: Tuple[int, int], columns: int, rows: int) -> Tuple[int, int]:
    width_px, height_px = image_size
    width = min(ascii_size(columns, rows), columns)
    height = max(1, round(height_px / width_px * width * CHAR_ASPECT))
    if height > rows:
        width = max(1, round(width * rows / height))
        height = rows
    return width, height


def convert_to_ascii(
    image: Image.Image, size: Tuple[int, int], color: bool = True
) -> str:
    """
    Convert a decoded image to ASCII art that fits ``size``.

    Args:
        image: Decoded image
        size: Available (columns, rows)
        color: Emit ANSI truecolor escapes per character

    Returns:
        Lines of ASCII art joined by newlines

    Raises:
        ConversionError: If the image or the target area is empty
    """
    columns, rows = size
    if columns <= 0 or rows <= 0:
        raise ConversionError(f"Target size must be non-zero, got {columns}x{rows}")
    if image.width == 0 or image.height == 0:
        raise ConversionError("Image has no pixels")

    width, height = _fit_grid(image.size, columns, rows)
    logger.debug(f"target size: {width}x{height}")

    try:
        small = image.convert("RGB").resize((width, height), Image.Resampling.BOX)
    except (ValueError, OSError) as e:
        raise ConversionError(f"Failed to resize image: {e}") from e

    pixels = np.asarray(small, dtype=np.uint8)
    luminance = pixels.astype(np.float64) @ LUMINANCE_WEIGHTS
    indices = np.clip(
        (luminance / 256.0 * len(CHAR_RAMP)).astype(int), 0, len(CHAR_RAMP) - 1
    )

    lines = []
    for row_pixels, row_indices in zip(pixels, indices):
        if color:
            line = "".join(
                f"\x1b[38;2;{r};{g};{b}m{CHAR_RAMP[i]}"
                for (r, g, b), i in zip(row_pixels.tolist(), row_indices.tolist())
            )
            lines.append(line + RESET)
        else:
            lines.append("".join(CHAR_RAMP[i] for i in row_indices.tolist()))
    return "\n".join(lines)


class AsciiFrameRenderer(FrameRenderer):
    """Draw slides as colored ASCII art, centered in the draw area."""

    def prepare(self, item: Path) -> Any:
        return decode(item)

    def draw(self, handle: Any, area: DrawArea) -> None:
        art = Text.from_ansi(convert_to_ascii(handle, (area.width, area.height)))
        art.no_wrap = True
        art.overflow = "crop"

        line_count = len(art.plain.splitlines())
        offset_y = area.y + max(0, (area.height - line_count) // 2)

        self.console.control(Control.clear(), Control.home())
        self.console.control(Control.move_to(area.x, offset_y))
        self.console.print(Align.center(art, width=area.width), end="")
