"""
tnap - terminal slideshow that grows while images are being generated.
"""

__version__ = "0.1.0"
