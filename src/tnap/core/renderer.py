"""
Foreground slideshow loop.

The renderer redraws the current slide, waits for a key press for no longer
than what is left of the current tick, and advances to the next slide when
the tick expires. The ready set may grow while it runs; the cursor always
wraps over the length read at the moment of advancing.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Set, Tuple

from ..errors import RenderError, StructuralError
from ..render.base import DrawArea, FrameRenderer
from ..ui.terminal import KEY_CTRL_C, KEY_QUIT, KEY_TOGGLE_ASCII, get_terminal_size
from .ready_set import SharedReadySet

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 3.0


class DisplayMode(Enum):
    """How slides are drawn."""

    ASCII = "ascii"
    NATIVE = "native"

    def toggled(self) -> "DisplayMode":
        return DisplayMode.NATIVE if self is DisplayMode.ASCII else DisplayMode.ASCII


class RendererState(Enum):
    DISPLAYING = "displaying"
    EXITING = "exiting"


class KeySource(Protocol):
    def poll(self, timeout: float) -> Optional[str]:
        """Return a key pressed within ``timeout`` seconds, or None."""
        ...


@dataclass
class RenderState:
    """Prepared representation of one slide for one display mode."""

    item: Path
    mode: DisplayMode
    handle: Any


def _terminal_area() -> DrawArea:
    columns, rows = get_terminal_size()
    return DrawArea(0, 0, columns, rows)


class Renderer:
    """
    Slideshow state machine: DISPLAYING until the quit key, then EXITING.

    Args:
        ready: Shared list of displayable images
        renderers: One frame renderer per display mode
        mode: Display mode at start
        tick_interval: Seconds each slide stays on screen
        clock: Monotonic time source
        area: Returns the drawable area for the next frame
    """

    def __init__(
        self,
        ready: SharedReadySet,
        renderers: Mapping[DisplayMode, FrameRenderer],
        mode: DisplayMode = DisplayMode.NATIVE,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        area: Callable[[], DrawArea] = _terminal_area,
    ) -> None:
        if len(ready) == 0:
            raise StructuralError("No images available to display.")
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")

        self._ready = ready
        self._renderers = dict(renderers)
        self._mode = mode
        self._tick_interval = tick_interval
        self._clock = clock
        self._area = area

        self._cursor = 0
        self._state = RendererState.DISPLAYING
        self._render_states: Dict[DisplayMode, RenderState] = {}
        self._failed: Set[Tuple[DisplayMode, Path]] = set()

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    @property
    def state(self) -> RendererState:
        return self._state

    @property
    def current_item(self) -> Path:
        return self._ready.get(self._cursor)

    def run(self, keys: KeySource) -> None:
        """
        Run until the quit key is pressed.

        Args:
            keys: Source of key presses with a bounded wait
        """
        last_tick = self._clock()
        while self._state is RendererState.DISPLAYING:
            self.draw()

            remaining = self._tick_interval - (self._clock() - last_tick)
            key = keys.poll(max(0.0, remaining))
            if key is not None and self.handle_key(key):
                break

            if self._clock() - last_tick >= self._tick_interval:
                self.advance()
                last_tick = self._clock()

        logger.info("Slideshow exiting")

    def handle_key(self, key: str) -> bool:
        """
        React to one key press.

        Returns:
            True if the key ends the slideshow
        """
        if key in (KEY_QUIT, KEY_CTRL_C):
            self._state = RendererState.EXITING
            return True
        if key == KEY_TOGGLE_ASCII:
            self._mode = self._mode.toggled()
            logger.debug(f"Display mode switched to {self._mode.value}")
        return False

    def advance(self) -> None:
        """Move to the next slide, wrapping over the current length."""
        self._cursor = (self._cursor + 1) % len(self._ready)
        self._failed.clear()
        self._prepare(self.current_item)

    def draw(self) -> None:
        """Draw the current slide in the current mode."""
        item = self.current_item
        render_state = self._render_states.get(self._mode)
        if render_state is None or render_state.item != item:
            render_state = self._prepare(item)
        if render_state is None:
            return

        renderer = self._renderers[self._mode]
        try:
            renderer.draw(render_state.handle, self._area())
        except RenderError as e:
            logger.warning(f"Skipping frame for {render_state.item}: {e}")

    def _prepare(self, item: Path) -> Optional[RenderState]:
        """Rebuild the render state, keeping the previous one on failure."""
        previous = self._render_states.get(self._mode)
        key = (self._mode, item)
        if key in self._failed:
            return previous

        try:
            handle = self._renderers[self._mode].prepare(item)
        except RenderError as e:
            logger.warning(f"Could not prepare {item}, keeping previous frame: {e}")
            self._failed.add(key)
            return previous

        render_state = RenderState(item=item, mode=self._mode, handle=handle)
        self._render_states[self._mode] = render_state
        return render_state
