"""
Terminal helpers: size queries, full-screen session, and key polling.
"""

from __future__ import annotations

import logging
import os
import select
import sys
import time
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO, Tuple

from rich.console import Console

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None

logger = logging.getLogger(__name__)

KEY_TOGGLE_ASCII = "a"
KEY_QUIT = "q"
KEY_CTRL_C = "\x03"


def get_terminal_size(fallback: Tuple[int, int] = (80, 24)) -> Tuple[int, int]:
    """
    Get the current terminal size.

    Args:
        fallback: Returned if the terminal size cannot be determined

    Returns:
        Tuple of (columns, rows)
    """
    try:
        size = os.get_terminal_size()
        return (size.columns, size.lines)
    except OSError:
        return fallback


class KeyReader:
    """
    Read single key presses from stdin without waiting for Enter.

    Use as a context manager: the terminal is switched to cbreak mode on
    entry and restored on exit. When stdin is not a TTY, ``poll`` simply
    waits out its timeout.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream or sys.stdin
        self._fd: Optional[int] = None
        self._old_settings = None

    def __enter__(self) -> "KeyReader":
        if termios is None or not self._stream.isatty():
            return self
        try:
            fd = self._stream.fileno()
            self._old_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            self._fd = fd
        except (OSError, termios.error) as e:
            logger.warning(f"Could not enable cbreak mode, keys disabled: {e}")
            self._fd = None
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._fd is not None and self._old_settings is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_settings)
        self._fd = None
        self._old_settings = None

    def poll(self, timeout: float) -> Optional[str]:
        """Wait at most ``timeout`` seconds for one key press."""
        timeout = max(0.0, timeout)
        if self._fd is None:
            time.sleep(timeout)
            return None

        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return None
        data = os.read(self._fd, 1)
        if not data:
            # End of input: the terminal hung up.
            logger.info("Key input closed")
            self._fd = None
            return None
        key = data.decode("utf-8", errors="ignore")
        if key == "\x1b":
            # Swallow the rest of an escape sequence such as an arrow key.
            while select.select([self._fd], [], [], 0.001)[0]:
                os.read(self._fd, 1)
        return key or None


@contextmanager
def fullscreen(console: Console) -> Iterator[Console]:
    """Switch to the alternate screen with a hidden cursor, restoring on exit."""
    with console.screen(hide_cursor=True):
        yield console
