"""
Tests for the OpenAI image source with stubbed client and HTTP session.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import List

import pytest
import requests
from openai import OpenAIError

from tnap.errors import ConfigError, DownloadError, GenerationError
from tnap.services.image_generation import OpenAIImageSource


class _FakeImages:
    def __init__(self, response=None, error: Exception = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[dict] = []

    def generate(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class _FakeResponse:
    def __init__(self, chunks: List[bytes], status_error: Exception = None) -> None:
        self.chunks = chunks
        self.status_error = status_error

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        pass

    def raise_for_status(self) -> None:
        if self.status_error is not None:
            raise self.status_error

    def iter_content(self, chunk_size: int):
        return iter(self.chunks)


class _FakeSession:
    def __init__(self, response: _FakeResponse) -> None:
        self.response = response
        self.urls: List[str] = []

    def get(self, url: str, stream: bool = False):
        self.urls.append(url)
        return self.response


def _client(images: _FakeImages):
    return SimpleNamespace(images=images)


def _url_response(url):
    return SimpleNamespace(data=[SimpleNamespace(url=url)])


def test_request_generation_returns_url() -> None:
    """Verify the first image URL is returned and settings are passed on."""
    images = _FakeImages(response=_url_response("https://img.example/1.png"))
    source = OpenAIImageSource(
        client=_client(images), model="dall-e-2", size="512x512"
    )

    assert source.request_generation("a cat") == "https://img.example/1.png"
    assert images.calls[0]["prompt"] == "a cat"
    assert images.calls[0]["model"] == "dall-e-2"
    assert images.calls[0]["size"] == "512x512"
    assert images.calls[0]["n"] == 1


def test_request_generation_wraps_api_errors() -> None:
    """Verify API failures surface as generation errors."""
    images = _FakeImages(error=OpenAIError("rate limited"))
    source = OpenAIImageSource(client=_client(images))

    with pytest.raises(GenerationError, match="rate limited"):
        source.request_generation("a cat")


def test_request_generation_without_url() -> None:
    """Verify an empty response is a generation error."""
    images = _FakeImages(response=SimpleNamespace(data=[]))
    source = OpenAIImageSource(client=_client(images))

    with pytest.raises(GenerationError):
        source.request_generation("a cat")


def test_missing_api_key_is_config_error(monkeypatch) -> None:
    """Verify the source refuses to start without an API key."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(ConfigError, match="OPENAI_API_KEY"):
        OpenAIImageSource()


def test_materialize_writes_file(tmp_path) -> None:
    """Verify downloaded chunks end up at the destination."""
    session = _FakeSession(_FakeResponse([b"\x89PNG", b"", b"data"]))
    source = OpenAIImageSource(client=_client(_FakeImages()), session=session)
    destination = tmp_path / "0.png"

    result = source.materialize("https://img.example/0.png", destination)

    assert result == destination
    assert destination.read_bytes() == b"\x89PNGdata"
    assert not (tmp_path / "0.png.part").exists()
    assert session.urls == ["https://img.example/0.png"]


def test_materialize_http_error_leaves_no_file(tmp_path) -> None:
    """Verify a failed download raises and leaves nothing behind."""
    response = _FakeResponse([], status_error=requests.HTTPError("404 Not Found"))
    source = OpenAIImageSource(
        client=_client(_FakeImages()), session=_FakeSession(response)
    )
    destination = tmp_path / "0.png"

    with pytest.raises(DownloadError, match="404"):
        source.materialize("https://img.example/0.png", destination)

    assert not destination.exists()
    assert list(tmp_path.iterdir()) == []
