"""
Image generation with the OpenAI Images API and HTTP download.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import requests
from openai import OpenAI, OpenAIError

from ..errors import ConfigError, DownloadError, GenerationError

logger = logging.getLogger(__name__)

DOWNLOAD_CHUNK_SIZE = 64 * 1024


class OpenAIImageSource:
    """
    Generate images from a text prompt and download them to disk.

    Calls block until the service answers; there is no timeout and no retry.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "dall-e-3",
        size: str = "1024x1024",
        client: Optional[OpenAI] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the image source.

        Args:
            api_key: OpenAI API key, defaults to OPENAI_API_KEY
            model: Image model name
            size: Requested image size, e.g. "1024x1024"
            client: Preconfigured OpenAI client
            session: HTTP session used for downloads
        """
        if client is None:
            api_key = api_key or os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise ConfigError(
                    "API key not found for image generation. "
                    "Please set OPENAI_API_KEY in your environment or .env file."
                )
            client = OpenAI(api_key=api_key, max_retries=0)
        self._client = client
        self._session = session or requests.Session()
        self.model = model
        self.size = size

    def request_generation(self, prompt: str) -> str:
        """
        Ask the service for one image.

        Returns:
            URL of the generated image
        """
        try:
            response = self._client.images.generate(
                model=self.model,
                prompt=prompt,
                n=1,
                size=self.size,
                response_format="url",
            )
        except OpenAIError as e:
            raise GenerationError(f"Failed to generate an image: {e}") from e

        if not response.data or not response.data[0].url:
            raise GenerationError("Image service returned no image URL")
        return response.data[0].url

    def materialize(self, source: str, destination: Path) -> Path:
        """
        Download ``source`` to ``destination``.

        The file is written under a temporary name and renamed once complete,
        so a partially downloaded image is never visible at ``destination``.
        """
        destination = Path(destination)
        partial = destination.with_name(destination.name + ".part")
        try:
            with self._session.get(source, stream=True) as response:
                response.raise_for_status()
                with open(partial, "wb") as f:
                    for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
            partial.replace(destination)
        except (requests.RequestException, OSError) as e:
            partial.unlink(missing_ok=True)
            raise DownloadError(f"Failed to download a generated image: {e}") from e

        logger.debug(f"Downloaded {source} -> {destination}")
        return destination
