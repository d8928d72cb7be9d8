"""
Configuration: runtime settings and prompt lookup.
"""

from .prompts import load_prompts, read_prompt
from .settings import Settings, load_settings

__all__ = ["Settings", "load_prompts", "load_settings", "read_prompt"]
