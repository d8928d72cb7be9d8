"""
External services used to acquire new images.
"""

from .image_generation import OpenAIImageSource

__all__ = ["OpenAIImageSource"]
