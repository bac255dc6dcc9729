"""Extra utilities for httpx.

The main addition is a status check that keeps the response body::

    from httpx_extra import ErrorWithBody, araise_for_status_with_body

    async def fetch_text(client: httpx.AsyncClient, url: str) -> str:
        response = await client.get(url)
        await araise_for_status_with_body(response)
        return response.text

A failing status raises ``ErrorWithBody``, rendered as httpx's own message
followed by the body, e.g.::

    Client error '403 Forbidden' for url 'https://api.github.com/user'
    For more information check: https://developer.mozilla.org/en-US/docs/Web/HTTP/Status/403, body: b"Forbidden"
"""

from .env import Settings, get_settings
from .errors import BodyOutcome, ErrorWithBody, render_body, with_body_errors
from .http.http_client import AsyncHttpClient, HttpClient
from .response import araise_for_status_with_body, raise_for_status_with_body
from .urls import with_url, without_url

__all__ = [
    "AsyncHttpClient",
    "BodyOutcome",
    "ErrorWithBody",
    "HttpClient",
    "Settings",
    "araise_for_status_with_body",
    "get_settings",
    "raise_for_status_with_body",
    "render_body",
    "with_body_errors",
    "with_url",
    "without_url",
]
