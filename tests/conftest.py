"""Shared pytest fixtures for httpx-extra tests."""

from __future__ import annotations

from typing import Callable, Optional

import httpx
import pytest

ResponseFactory = Callable[..., httpx.Response]


@pytest.fixture
def url() -> str:
    return "https://api.example.com/user"


@pytest.fixture
def make_response(url: str) -> ResponseFactory:
    """Build a response bound to a GET request, as a client would return it."""

    def _make(
        status_code: int,
        content: Optional[bytes] = None,
        *,
        stream: Optional[httpx.AsyncByteStream | httpx.SyncByteStream] = None,
        request_url: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        request = httpx.Request("GET", request_url or url)
        if stream is not None:
            return httpx.Response(
                status_code, headers=headers, stream=stream, request=request
            )
        return httpx.Response(
            status_code, headers=headers, content=content, request=request
        )

    return _make


@pytest.fixture
def status_error(make_response: ResponseFactory) -> httpx.HTTPStatusError:
    """A 404 status error as raised by ``Response.raise_for_status``."""
    response = make_response(404, b"missing")
    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        response.raise_for_status()
    return excinfo.value
