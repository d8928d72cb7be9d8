"""
Producer/consumer core: shared ready set, acquirer, renderer, shutdown.
"""

from .acquirer import AcquisitionHandle, Acquirer, ImageSource, spawn_acquirer
from .control import AcquisitionControl, AcquisitionPhase, AcquisitionResult
from .ready_set import SharedReadySet
from .renderer import DisplayMode, Renderer, RendererState
from .shutdown import ShutdownCoordinator

__all__ = [
    "AcquisitionControl",
    "AcquisitionHandle",
    "AcquisitionPhase",
    "AcquisitionResult",
    "Acquirer",
    "DisplayMode",
    "ImageSource",
    "Renderer",
    "RendererState",
    "SharedReadySet",
    "ShutdownCoordinator",
    "spawn_acquirer",
]
