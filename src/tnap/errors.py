"""
Exception hierarchy for tnap.

Acquisition and render errors stay inside the unit that raised them; only
configuration and structural errors reach the CLI.
"""


class TnapError(Exception):
    """Base class for all tnap errors."""


class ConfigError(TnapError):
    """Settings or prompt configuration is missing or invalid."""


class ThemeNotFoundError(TnapError):
    """The requested sample theme does not exist."""


class StructuralError(TnapError):
    """The slideshow cannot start because there is nothing to display."""


class AcquisitionError(TnapError):
    """Producing a new image failed."""


class GenerationError(AcquisitionError):
    """The image generation request failed."""


class DownloadError(AcquisitionError):
    """Downloading a generated image failed."""


class RenderError(TnapError):
    """Preparing or drawing a frame failed."""


class DecodeError(RenderError):
    """An image file could not be opened or decoded."""


class ConversionError(RenderError):
    """An image could not be converted to ASCII art."""
