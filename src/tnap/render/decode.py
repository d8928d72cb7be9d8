"""
Image decoding with Pillow.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ..errors import DecodeError


def decode(item: Path) -> Image.Image:
    """
    Open and fully decode an image file.

    Args:
        item: Path to the image

    Returns:
        Decoded RGB image detached from the underlying file

    Raises:
        DecodeError: If the file is missing or is not a readable image
    """
    try:
        with Image.open(item) as img:
            img.load()
            return img.convert("RGB")
    except FileNotFoundError as e:
        raise DecodeError(f"Failed to open image: {e}") from e
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as e:
        raise DecodeError(f"Failed to decode image: {e}") from e
