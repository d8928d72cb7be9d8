"""
Slideshow wiring for the two run modes: sample theme and generated images.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from rich.console import Console
from rich.markup import escape

from .config.settings import Settings
from .core import (
    AcquisitionControl,
    AcquisitionResult,
    Acquirer,
    DisplayMode,
    ImageSource,
    Renderer,
    SharedReadySet,
    ShutdownCoordinator,
    spawn_acquirer,
)
from .errors import StructuralError
from .render.ascii_art import AsciiFrameRenderer
from .render.base import FrameRenderer
from .themes import get_files, theme_dir
from .ui.terminal import KeyReader, fullscreen
from .ui.theme import ICONS, THEME

logger = logging.getLogger(__name__)


def build_renderers(console: Console) -> Dict[DisplayMode, FrameRenderer]:
    """Create one frame renderer per display mode."""
    from .render.native import NativeFrameRenderer

    return {
        DisplayMode.ASCII: AsciiFrameRenderer(console),
        DisplayMode.NATIVE: NativeFrameRenderer(console),
    }


class SlideshowApp:
    """
    Run a slideshow over a sample theme or over freshly generated images.

    Args:
        settings: Runtime settings
        console: Console used for drawing and messages
        renderers: Frame renderers per display mode, built on first use
        key_reader: Factory for the key source used while the slideshow runs
    """

    def __init__(
        self,
        settings: Settings,
        console: Optional[Console] = None,
        renderers: Optional[Dict[DisplayMode, FrameRenderer]] = None,
        key_reader=KeyReader,
    ):
        self.settings = settings
        self.console = console or Console()
        self._renderers = renderers
        self._key_reader = key_reader

    @property
    def renderers(self) -> Dict[DisplayMode, FrameRenderer]:
        if self._renderers is None:
            self._renderers = build_renderers(self.console)
        return self._renderers

    def _build_renderer(self, ready: SharedReadySet, ascii: bool) -> Renderer:
        return Renderer(
            ready,
            self.renderers,
            mode=DisplayMode.ASCII if ascii else DisplayMode.NATIVE,
            tick_interval=self.settings.tick_interval,
        )

    def _run(self, renderer: Renderer) -> None:
        with fullscreen(self.console), self._key_reader() as keys:
            renderer.run(keys)

    def display_theme(self, theme: str, ascii: bool) -> None:
        """Show the images of a sample theme."""
        directory = theme_dir(theme, self.settings.themes_dir)
        ready = SharedReadySet(get_files(directory))
        self._run(self._build_renderer(ready, ascii))

    def output_dir(self, now: Optional[datetime] = None) -> Path:
        stamp = (now or datetime.now()).strftime("%Y_%m_%d_%H_%M")
        return self.settings.generated_dir / stamp

    def display_generated_images(
        self, prompt: str, ascii: bool, source: Optional[ImageSource] = None
    ) -> AcquisitionResult:
        """
        Show a slideshow that grows while images for ``prompt`` are generated.

        Everything that can fail at startup is checked before the acquirer
        thread is spawned.

        Returns:
            How the background generation ended
        """
        placeholder = self.settings.placeholder_image
        if not placeholder.is_file():
            raise StructuralError(f"Placeholder image {placeholder} does not exist.")

        if source is None:
            from .services.image_generation import OpenAIImageSource

            source = OpenAIImageSource(
                model=self.settings.image_model, size=self.settings.image_size
            )

        ready = SharedReadySet(placeholder=placeholder)
        renderer = self._build_renderer(ready, ascii)

        directory = self.output_dir()
        directory.mkdir(parents=True, exist_ok=True)

        control = AcquisitionControl()
        acquirer = Acquirer(
            source,
            ready,
            control,
            prompt=prompt,
            count=self.settings.max_images,
            output_dir=directory,
        )
        handle = spawn_acquirer(acquirer)
        coordinator = ShutdownCoordinator(handle, notify=self._notify)

        try:
            self._run(renderer)
        finally:
            result = coordinator.shutdown()

        self._report(result, directory)
        return result

    def _notify(self, message: str) -> None:
        self.console.print(f"  [{THEME['muted']}]{ICONS['pending']} {message}[/]")

    def _report(self, result: AcquisitionResult, directory: Path) -> None:
        if result.error is not None:
            self.console.print(
                f"  [{THEME['warning']}]{ICONS['warning']} Image generation {escape(result.summary)}[/]"
            )
        else:
            self.console.print(
                f"  [{THEME['success']}]{ICONS['success']}[/] "
                f"[{THEME['text']}]Image generation {result.summary}[/]"
            )
        if result.produced:
            self.console.print(f"  [{THEME['muted']}]Saved to {directory}[/]")
