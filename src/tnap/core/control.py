"""
Stop/finish handshake between the slideshow and the image acquirer.

Both signals live in one small state object guarded by a condition variable,
so observers always see a consistent phase and can block on completion
instead of polling.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AcquisitionPhase(Enum):
    """Lifecycle of one acquisition run."""

    RUNNING = "running"
    STOPPING = "stopping"
    FINISHED = "finished"


@dataclass(frozen=True)
class AcquisitionResult:
    """Outcome of an acquisition run, reported at shutdown."""

    produced: int
    requested: int
    stopped_early: bool = False
    error: Optional[BaseException] = None

    @property
    def summary(self) -> str:
        """One-line description of why acquisition ended."""
        if self.error is not None:
            return (
                f"failed after {self.produced}/{self.requested} images: {self.error}"
            )
        if self.stopped_early:
            return f"stopped after {self.produced}/{self.requested} images"
        return f"completed {self.produced}/{self.requested} images"


class AcquisitionControl:
    """
    Shared state object for the stop request and the finished notification.

    The slideshow side writes the stop request; the acquirer writes the
    result exactly once. A stop request after completion is a no-op.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._phase = AcquisitionPhase.RUNNING
        self._stop_requested = False
        self._result: Optional[AcquisitionResult] = None

    @property
    def phase(self) -> AcquisitionPhase:
        with self._cond:
            return self._phase

    @property
    def stop_requested(self) -> bool:
        with self._cond:
            return self._stop_requested

    @property
    def finished(self) -> bool:
        with self._cond:
            return self._phase is AcquisitionPhase.FINISHED

    @property
    def result(self) -> Optional[AcquisitionResult]:
        with self._cond:
            return self._result

    def request_stop(self) -> None:
        """Ask the acquirer to stop before its next image."""
        with self._cond:
            self._stop_requested = True
            if self._phase is AcquisitionPhase.RUNNING:
                self._phase = AcquisitionPhase.STOPPING

    def finish(self, result: AcquisitionResult) -> None:
        """Record the final result and wake every waiter."""
        with self._cond:
            if self._phase is AcquisitionPhase.FINISHED:
                raise RuntimeError("Acquisition already finished")
            self._result = result
            self._phase = AcquisitionPhase.FINISHED
            self._cond.notify_all()

    def wait_finished(self, timeout: Optional[float] = None) -> bool:
        """Block until finished or until ``timeout`` expires."""
        with self._cond:
            return self._cond.wait_for(
                lambda: self._phase is AcquisitionPhase.FINISHED, timeout=timeout
            )
