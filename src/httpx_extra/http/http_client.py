from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type
from types import TracebackType

import httpx

from ..env import Settings
from ..errors import ErrorWithBody, with_body_errors
from ..response import araise_for_status_with_body, raise_for_status_with_body

logger = logging.getLogger(__name__)


def _join(base_url: str, path: str) -> str:
    if path.startswith("http://") or path.startswith("https://"):
        return path
    return f"{base_url}/{path.lstrip('/')}"


def _failed(error: ErrorWithBody, method: str, url: str, redact_urls: bool) -> ErrorWithBody:
    logger.debug(
        "HTTP %s %s failed (status %s)",
        method.upper(),
        "[redacted-url]" if redact_urls else url,
        error.status_code,
    )
    if redact_urls:
        return error.without_url()
    return error


class HttpClient:
    """Thin synchronous HTTP client wrapper around httpx.

    - Normalizes base URLs and paths.
    - Applies a default timeout.
    - Raises ``ErrorWithBody`` for failed requests, with the response body
      attached when the server answered with an error status.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        *,
        redact_urls: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._redact_urls = redact_urls
        self._client = httpx.Client(timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "HttpClient":
        return cls(
            settings.base_url,
            timeout=settings.timeout,
            redact_urls=settings.redact_urls,
            **kwargs,
        )

    def _url(self, path: str) -> str:
        return _join(self._base_url, path)

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        try:
            with with_body_errors():
                resp = self._client.request(method, url, **kwargs)
                return raise_for_status_with_body(resp)
        except ErrorWithBody as exc:
            error = _failed(exc, method, url, self._redact_urls)
            raise error from error.inner

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        return self.request("POST", path, json=json, **kwargs)

    def put(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        return self.request("PUT", path, json=json, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()


class AsyncHttpClient:
    """Thin asynchronous HTTP client wrapper around httpx.AsyncClient.

    - Normalizes base URLs and paths.
    - Applies a default timeout.
    - Raises ``ErrorWithBody`` for failed requests, with the response body
      attached when the server answered with an error status.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        *,
        redact_urls: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._redact_urls = redact_urls
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "AsyncHttpClient":
        return cls(
            settings.base_url,
            timeout=settings.timeout,
            redact_urls=settings.redact_urls,
            **kwargs,
        )

    def _url(self, path: str) -> str:
        return _join(self._base_url, path)

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        try:
            with with_body_errors():
                resp = await self._client.request(method, url, **kwargs)
                return await araise_for_status_with_body(resp)
        except ErrorWithBody as exc:
            error = _failed(exc, method, url, self._redact_urls)
            raise error from error.inner

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        return await self.request("POST", path, json=json, **kwargs)

    async def put(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        return await self.request("PUT", path, json=json, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", path, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
