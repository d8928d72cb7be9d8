"""
Background image acquisition.

The acquirer generates and downloads images one at a time and appends each
finished file to the shared ready set. It checks for a stop request between
images only; a request that is already in flight is always allowed to end.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional, Protocol

from ..errors import AcquisitionError
from .control import AcquisitionControl, AcquisitionResult
from .ready_set import SharedReadySet

logger = logging.getLogger(__name__)


class ImageSource(Protocol):
    """Remote collaborator that creates images and fetches them."""

    def request_generation(self, prompt: str) -> str:
        """Return a URL of a freshly generated image."""
        ...

    def materialize(self, source: str, destination: Path) -> Path:
        """Download ``source`` to ``destination`` and return the local path."""
        ...


class Acquirer:
    """Produce up to ``count`` images for ``prompt`` sequentially."""

    def __init__(
        self,
        source: ImageSource,
        ready: SharedReadySet,
        control: AcquisitionControl,
        prompt: str,
        count: int,
        output_dir: Path,
    ) -> None:
        self._source = source
        self._ready = ready
        self._control = control
        self._prompt = prompt
        self._count = count
        self._output_dir = Path(output_dir)

    @property
    def control(self) -> AcquisitionControl:
        return self._control

    def destination_for(self, index: int) -> Path:
        return self._output_dir / f"{index}.png"

    def run(self) -> AcquisitionResult:
        """
        Run the acquisition loop on the current thread.

        Always records a result on the control object, whether the loop
        completed, was stopped, or hit an error.
        """
        produced = 0
        stopped_early = False
        error: Optional[BaseException] = None

        try:
            for i in range(self._count):
                if self._control.stop_requested:
                    logger.info(f"Stop requested, skipping images {i}..{self._count - 1}")
                    stopped_early = True
                    break

                logger.info(f"{i}: Generating image...")
                url = self._source.request_generation(self._prompt)
                path = self._source.materialize(url, self.destination_for(i))
                logger.info(f"Generated image downloaded to {path}")

                self._ready.append(path)
                produced += 1
        except AcquisitionError as e:
            logger.error(f"Image acquisition failed: {e}")
            error = e
        except Exception as e:
            logger.exception(f"Unexpected error during image acquisition: {e}")
            error = e
        finally:
            result = AcquisitionResult(
                produced=produced,
                requested=self._count,
                stopped_early=stopped_early,
                error=error,
            )
            self._control.finish(result)

        return result


class AcquisitionHandle:
    """Handle to an acquirer running on its own thread."""

    def __init__(self, thread: threading.Thread, control: AcquisitionControl) -> None:
        self._thread = thread
        self._control = control

    @property
    def control(self) -> AcquisitionControl:
        return self._control

    @property
    def finished(self) -> bool:
        return self._control.finished

    def request_stop(self) -> None:
        self._control.request_stop()

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> Optional[AcquisitionResult]:
        """
        Wait for the acquirer thread to terminate.

        Returns the result, or None if ``timeout`` expired first.
        """
        self._thread.join(timeout)
        if self._thread.is_alive():
            return None
        return self._control.result


def spawn_acquirer(acquirer: Acquirer) -> AcquisitionHandle:
    """Start ``acquirer`` on a named, non-daemon thread."""
    thread_name = "tnap-acquirer"
    try:
        thread = threading.Thread(target=acquirer.run, name=thread_name)
        thread.start()
    except RuntimeError as e:
        logger.error(f"Error starting thread '{thread_name}': {e}")
        raise
    logger.info(f"Thread '{thread_name}' started successfully.")
    return AcquisitionHandle(thread, acquirer.control)
