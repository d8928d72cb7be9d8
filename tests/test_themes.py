"""
Tests for theme lookup and image listing.
"""

from __future__ import annotations

import pytest

from tnap.errors import StructuralError, ThemeNotFoundError
from tnap.themes import get_files, theme_dir


def test_theme_dir_found(tmp_path, make_image) -> None:
    """Verify a theme with a first image resolves to its directory."""
    (tmp_path / "themes" / "cat").mkdir(parents=True)
    make_image("themes/cat/cat_01.png")

    assert theme_dir("cat", tmp_path / "themes") == tmp_path / "themes" / "cat"


def test_theme_dir_missing(tmp_path) -> None:
    """Verify an unknown theme raises with the theme name."""
    with pytest.raises(ThemeNotFoundError, match="Theme 'owl' not found."):
        theme_dir("owl", tmp_path)


def test_get_files_sorted_and_filtered(tmp_path, make_image) -> None:
    """Verify only image files are listed, sorted by name."""
    make_image("b.png")
    make_image("a.jpg")
    (tmp_path / "notes.txt").write_text("x")
    (tmp_path / "nested.png").mkdir()

    assert get_files(tmp_path) == [tmp_path / "a.jpg", tmp_path / "b.png"]


def test_get_files_empty_directory(tmp_path) -> None:
    """Verify a directory without images cannot start a slideshow."""
    with pytest.raises(StructuralError):
        get_files(tmp_path)


def test_get_files_missing_directory(tmp_path) -> None:
    """Verify a missing directory cannot start a slideshow."""
    with pytest.raises(StructuralError):
        get_files(tmp_path / "nope")
