"""
Runtime settings.

All values can be overridden with TNAP_* environment variables, which are
also read from a local .env file.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from ..errors import ConfigError

ENV_PREFIX = "TNAP_"


class Settings(BaseModel):
    """
    Centralized configuration for the slideshow.

    Relative paths are resolved against the current working directory.
    """

    tick_interval: float = Field(3.0, gt=0, description="Seconds per slide")
    max_images: int = Field(2, ge=1, description="Images to generate per run")
    themes_dir: Path = Field(Path("themes"), description="Sample theme directory")
    generated_dir: Path = Field(
        Path("generated_images"), description="Where generated images are saved"
    )
    placeholder_image: Path = Field(
        Path("examples") / "girl_with_headphone.png",
        description="Shown while the first image is being generated",
    )
    config_path: Path = Field(Path("config.yaml"), description="Prompt config file")
    image_model: str = Field("dall-e-3", description="Image generation model")
    image_size: str = Field("1024x1024", description="Generated image size")
    log_file: Path = Field(Path("tnap.log"), description="Log file path")


def _env_overrides(environ: Dict[str, str]) -> Dict[str, str]:
    overrides = {}
    for name in Settings.model_fields:
        value = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None and value != "":
            overrides[name] = value
    return overrides


def load_settings(environ: Optional[Dict[str, str]] = None) -> Settings:
    """
    Build settings from defaults and environment overrides.

    Args:
        environ: Environment mapping, defaults to os.environ after loading .env

    Raises:
        ConfigError: If an override has an invalid value
    """
    if environ is None:
        load_dotenv()
        environ = dict(os.environ)

    try:
        return Settings(**_env_overrides(environ))
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
