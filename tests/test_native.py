"""
Tests for the native terminal image renderer.
"""

from __future__ import annotations

import io

import pytest
from rich.console import Console
from term_image.exceptions import TermImageError
from term_image.image import BlockImage

from tnap.errors import DecodeError, RenderError
from tnap.render import native
from tnap.render.base import DrawArea
from tnap.render.native import NativeFrameRenderer


@pytest.fixture
def image_class_calls(monkeypatch):
    """Force block rendering and count how often the style is picked."""
    calls = []

    def pick_block_style():
        calls.append(BlockImage)
        return BlockImage

    monkeypatch.setattr(native, "auto_image_class", pick_block_style)
    return calls


def _console() -> Console:
    return Console(file=io.StringIO(), force_terminal=True, width=80, height=24)


def test_image_style_is_picked_once(image_class_calls, make_image) -> None:
    """Verify the render style is chosen when the renderer is built, not per slide."""
    renderer = NativeFrameRenderer(_console())

    renderer.prepare(make_image("a.png"))
    renderer.prepare(make_image("b.png"))

    assert image_class_calls == [BlockImage]


def test_prepare_wraps_decoded_image(image_class_calls, make_image) -> None:
    """Verify prepare returns an image of the chosen style."""
    renderer = NativeFrameRenderer(_console())

    handle = renderer.prepare(make_image(size=(64, 32), color=(255, 0, 0)))

    assert isinstance(handle, BlockImage)


def test_draw_fits_image_into_area(image_class_calls, make_image) -> None:
    """Verify the drawn image fits the area and reaches the console."""
    console = _console()
    renderer = NativeFrameRenderer(console)
    handle = renderer.prepare(make_image(size=(200, 100), color=(0, 128, 255)))

    renderer.draw(handle, DrawArea(0, 0, 80, 24))

    columns, rows = handle.size
    assert columns <= 80
    assert rows <= 24
    assert "\x1b[" in console.file.getvalue()


def test_broken_file_raises_decode_error(image_class_calls, make_broken_png) -> None:
    """Verify an undecodable file is reported as a decode error."""
    renderer = NativeFrameRenderer(_console())

    with pytest.raises(DecodeError):
        renderer.prepare(make_broken_png())


def test_draw_failure_raises_render_error(image_class_calls) -> None:
    """Verify term-image errors while drawing become render errors."""

    class _UnsizableImage:
        def set_size(self, *args, **kwargs) -> None:
            raise TermImageError("terminal too small")

    renderer = NativeFrameRenderer(_console())

    with pytest.raises(RenderError):
        renderer.draw(_UnsizableImage(), DrawArea(0, 0, 80, 24))
