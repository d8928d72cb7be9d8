"""
Native terminal image rendering via term-image.

The best supported render style (kitty, iTerm2, or colored half blocks) is
detected once when the renderer is created and reused for every slide.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.control import Control
from term_image.exceptions import TermImageError
from term_image.image import Size, auto_image_class

from ..errors import DecodeError, RenderError
from .base import DrawArea, FrameRenderer
from .decode import decode

logger = logging.getLogger(__name__)


class NativeFrameRenderer(FrameRenderer):
    """Draw slides with the terminal's own image protocol, fit to the area."""

    def __init__(self, console: Console):
        super().__init__(console)
        self._image_class = auto_image_class()
        logger.info(f"Native image style: {self._image_class.__name__}")

    def prepare(self, item: Path) -> Any:
        try:
            return self._image_class(decode(item))
        except TermImageError as e:
            raise DecodeError(f"Failed to prepare image {item}: {e}") from e

    def draw(self, handle: Any, area: DrawArea) -> None:
        try:
            handle.set_size(Size.FIT, frame_size=(area.width, area.height))
            rendered = format(handle, f"|{area.width}.-{area.height}")
        except (TermImageError, ValueError) as e:
            raise RenderError(f"Failed to render image: {e}") from e

        self.console.control(Control.clear(), Control.move_to(area.x, area.y))
        self.console.file.write(rendered)
        self.console.file.flush()
