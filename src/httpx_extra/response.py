"""Status checks for ``httpx.Response`` that keep the response body."""

from __future__ import annotations

from typing import Optional

import httpx

from .errors import BodyOutcome, ErrorWithBody

# Failures that can interrupt draining a body: transport and decode errors,
# and a stream that was already consumed or closed.
_BODY_READ_ERRORS = (httpx.HTTPError, httpx.StreamError)


def _ensure_response(response: object) -> httpx.Response:
    if not isinstance(response, httpx.Response):
        raise TypeError(
            "status checks with body capture are only defined for httpx.Response, "
            f"got {type(response).__name__}"
        )
    return response


def _status_error(response: httpx.Response) -> Optional[httpx.HTTPStatusError]:
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        return exc
    return None


async def araise_for_status_with_body(response: httpx.Response) -> httpx.Response:
    """Like ``httpx.Response.raise_for_status``, but keeps the body on failure.

    Successful responses are returned as they are, with nothing read from
    their stream. For a failing status the whole body is read and an
    ``ErrorWithBody`` is raised; if reading fails, the read error takes the
    body's place and the status error is still the one reported::

        response = await client.get(url)
        await araise_for_status_with_body(response)
        data = response.json()

    Can also be registered as an ``AsyncClient`` response event hook.
    """
    status_error = _status_error(_ensure_response(response))
    if status_error is None:
        return response

    body: BodyOutcome
    try:
        body = await response.aread()
    except _BODY_READ_ERRORS as exc:
        # httpx only closes a stream it finished reading
        await response.aclose()
        body = exc
    raise ErrorWithBody(status_error, body) from status_error


def raise_for_status_with_body(response: httpx.Response) -> httpx.Response:
    """Synchronous variant of ``araise_for_status_with_body`` for ``httpx.Client``."""
    status_error = _status_error(_ensure_response(response))
    if status_error is None:
        return response

    body: BodyOutcome
    try:
        body = response.read()
    except _BODY_READ_ERRORS as exc:
        response.close()
        body = exc
    raise ErrorWithBody(status_error, body) from status_error
