"""
Terminal UI helpers.
"""

from .terminal import KeyReader, fullscreen, get_terminal_size
from .theme import ICONS, THEME

__all__ = ["KeyReader", "fullscreen", "get_terminal_size", "ICONS", "THEME"]
