"""
Frame renderers: ASCII art and native terminal images.
"""

from .base import DrawArea, FrameRenderer
from .decode import decode

__all__ = ["DrawArea", "FrameRenderer", "decode"]
