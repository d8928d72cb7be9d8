"""
Append-only collection of images that are ready to be displayed.

The acquirer thread is the only writer and the renderer is the only reader.
Every access goes through one lock that is held only for the list operation
itself; decoding and drawing always happen outside of it.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterable, List, Optional, Tuple


class SharedReadySet:
    """
    Ordered, append-only list of image paths shared between two threads.

    An optional placeholder can be supplied at construction. It is shown
    until the first real image arrives and is evicted by that first append,
    in the same critical section, so the length never drops to zero.
    """

    def __init__(
        self,
        items: Iterable[Path] = (),
        placeholder: Optional[Path] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._items: List[Path] = []
        self._has_placeholder = False

        if placeholder is not None:
            self._items.append(Path(placeholder))
            self._has_placeholder = True
        self._items.extend(Path(item) for item in items)

    def append(self, item: Path) -> None:
        """Add an image; the first real image replaces the placeholder."""
        path = Path(item)
        with self._lock:
            self._items.append(path)
            if self._has_placeholder:
                del self._items[0]
                self._has_placeholder = False

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def get(self, index: int) -> Path:
        """Return the image at ``index``."""
        with self._lock:
            return self._items[index]

    def snapshot(self) -> Tuple[Path, ...]:
        """Return a copy of the current contents in append order."""
        with self._lock:
            return tuple(self._items)

    @property
    def has_placeholder(self) -> bool:
        """True until the first real image has been appended."""
        with self._lock:
            return self._has_placeholder
