"""
Graceful shutdown once the slideshow has ended.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .acquirer import AcquisitionHandle
from .control import AcquisitionResult

logger = logging.getLogger(__name__)

WAITING_NOTICE = "Waiting for image generation to finish..."


class ShutdownCoordinator:
    """
    Stop the acquirer and wait for its thread before the process exits.

    The wait is unbounded: a request already sent to the image service
    cannot be cancelled, so the join lasts as long as that request does.
    """

    def __init__(
        self,
        handle: AcquisitionHandle,
        notify: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._handle = handle
        self._notify = notify or print

    def shutdown(self) -> AcquisitionResult:
        """Request a stop, tell the user if we have to wait, then join."""
        self._handle.request_stop()

        if not self._handle.finished:
            self._notify(WAITING_NOTICE)

        result = self._handle.join()
        if result is None:
            raise RuntimeError("Acquirer thread terminated without a result")

        logger.info(f"Image generation {result.summary}")
        return result
