"""
Base class for the two ways a frame can be put on screen.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rich.console import Console


@dataclass(frozen=True)
class DrawArea:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int


class FrameRenderer(ABC):
    """
    Prepare an image once per slide, then draw it as often as needed.

    ``prepare`` does the expensive work (decode, protocol setup) and returns
    an opaque handle; ``draw`` puts that handle on screen inside an area.
    Both raise ``RenderError`` subclasses on failure.
    """

    def __init__(self, console: Console):
        self.console = console

    @abstractmethod
    def prepare(self, item: Path) -> Any:
        """Build the render state for ``item``."""
        pass

    @abstractmethod
    def draw(self, handle: Any, area: DrawArea) -> None:
        """Draw a prepared handle into ``area``."""
        pass
