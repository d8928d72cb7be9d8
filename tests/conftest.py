"""
Pytest configuration and fixtures.
"""

import struct
import sys
import zlib
from pathlib import Path

import pytest
from PIL import Image


def pytest_configure(config):
    """Configure pytest."""
    # Add src to path
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))


@pytest.fixture
def make_image(tmp_path):
    """Factory that writes a solid-color PNG and returns its path."""

    def _make(name: str = "image.png", size=(32, 16), color=(255, 255, 255)) -> Path:
        path = tmp_path / name
        Image.new("RGB", size, color).save(path)
        return path

    return _make


def _png_chunk(cid: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data))
        + cid
        + data
        + struct.pack(">I", zlib.crc32(cid + data) & 0xFFFFFFFF)
    )


@pytest.fixture
def make_broken_png(tmp_path):
    """
    Factory for a PNG that opens fine but fails while loading pixel data.

    The compressed pixels are split over two IDAT chunks and the type of
    the second one is garbled, so Pillow hits it only inside ``load()``.
    """

    def _make(name: str = "broken.png", size=(64, 64)) -> Path:
        width, height = size
        rows = b"".join(
            b"\x00" + bytes((x * 7 + y * 13) % 256 for x in range(width * 3))
            for y in range(height)
        )
        pixels = zlib.compress(rows)
        half = len(pixels) // 2
        header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)

        path = tmp_path / name
        path.write_bytes(
            b"\x89PNG\r\n\x1a\n"
            + _png_chunk(b"IHDR", header)
            + _png_chunk(b"IDAT", pixels[:half])
            + _png_chunk(b"\x85DAT", pixels[half:])
            + _png_chunk(b"IEND", b"")
        )
        return path

    return _make
