"""
Prompt lookup from the YAML config file.

Expected layout::

    prompts:
      cat: "A watercolor painting of a sleeping cat"
      city: "A neon city at night, synthwave style"
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from ..errors import ConfigError


def load_prompts(config_path: Path) -> Dict[str, str]:
    """Load the ``prompts`` mapping from ``config_path``."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"{config_path} does not exist.") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in config file: {config_path}") from e

    if not isinstance(data, dict) or not isinstance(data.get("prompts"), dict):
        raise ConfigError(f"No 'prompts' section found in {config_path}")

    prompts = data["prompts"]
    return {str(k): str(v) for k, v in prompts.items() if isinstance(v, str)}


def read_prompt(key: str, config_path: Path) -> str:
    """
    Return the prompt stored under ``key``.

    Raises:
        ConfigError: If the file is unusable or the key is missing
    """
    prompts = load_prompts(config_path)
    if key not in prompts:
        raise ConfigError(f"Key '{key}' not found in config.")
    return prompts[key]
