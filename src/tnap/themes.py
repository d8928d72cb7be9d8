"""
Sample theme lookup and image file listing.
"""

import logging
from pathlib import Path
from typing import List

from .errors import StructuralError, ThemeNotFoundError

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp"}


def get_files(directory: Path) -> List[Path]:
    """
    List the image files in ``directory`` sorted by name.

    Raises:
        StructuralError: If the directory is missing or holds no images
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise StructuralError(f"Image directory {directory} does not exist.")

    files = sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in IMAGE_SUFFIXES
    )
    if not files:
        raise StructuralError(f"No images found in {directory}.")
    return files


def theme_dir(theme: str, themes_dir: Path) -> Path:
    """
    Resolve the directory of a sample theme.

    A theme exists when ``<themes_dir>/<theme>/<theme>_01.png`` exists.

    Raises:
        ThemeNotFoundError: If the theme has no first image
    """
    first_image = Path(themes_dir) / theme / f"{theme}_01.png"
    if not first_image.exists():
        raise ThemeNotFoundError(f"Theme '{theme}' not found.")

    directory = first_image.parent
    logger.info(f"Using theme directory {directory.resolve()}")
    return directory
