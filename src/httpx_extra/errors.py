"""Error type carrying the body of a failed HTTP response."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Tuple, Union

import httpx

from . import urls

BodyOutcome = Union[bytes, httpx.HTTPError, httpx.StreamError]

_ESCAPES = {
    0x00: "\\0",
    0x09: "\\t",
    0x0A: "\\n",
    0x0D: "\\r",
    0x22: '\\"',
    0x5C: "\\\\",
}


def render_body(data: bytes) -> str:
    """Render raw bytes as a ``b"..."`` literal for diagnostics.

    Printable ASCII is kept as is, common control characters use their
    backslash escapes and every other byte is shown as ``\\xNN``. The bytes
    are never decoded as text.
    """
    parts = []
    for byte in data:
        escaped = _ESCAPES.get(byte)
        if escaped is not None:
            parts.append(escaped)
        elif 0x20 <= byte < 0x7F:
            parts.append(chr(byte))
        else:
            parts.append(f"\\x{byte:02x}")
    return 'b"' + "".join(parts) + '"'


class ErrorWithBody(Exception):
    """An ``httpx.HTTPError`` that may also carry the response body.

    Raised by ``araise_for_status_with_body`` / ``raise_for_status_with_body``
    when a response has a failing status. ``body`` holds the drained bytes, or
    the exception that interrupted draining them. It is ``None`` when the
    error was built directly from an httpx error, see ``from_error``.

    The wrapped httpx error is exposed as ``__cause__``, so tracebacks show
    the original failure (and whatever it was chained from) as well.
    """

    def __init__(self, inner: httpx.HTTPError, body: Optional[BodyOutcome] = None) -> None:
        self._inner = inner
        self._body = body
        super().__init__(self._render())
        self.__cause__ = inner

    @classmethod
    def from_error(cls, inner: httpx.HTTPError) -> "ErrorWithBody":
        """Wrap an httpx error that has no response body attached."""
        return cls(inner)

    @property
    def inner(self) -> httpx.HTTPError:
        return self._inner

    @property
    def body(self) -> Optional[BodyOutcome]:
        """Drained body bytes, the error that interrupted reading them, or ``None``.

        Read-only: use ``with_body`` to get an error with a different body.
        """
        return self._body

    @property
    def status_code(self) -> Optional[int]:
        """Status code of the failed response, if the inner error has one."""
        if isinstance(self._inner, httpx.HTTPStatusError):
            return self._inner.response.status_code
        return None

    def into_inner(self) -> httpx.HTTPError:
        return self._inner

    def into_body(self) -> Optional[BodyOutcome]:
        return self._body

    def into_parts(self) -> Tuple[httpx.HTTPError, Optional[BodyOutcome]]:
        return self._inner, self._body

    def with_body(self, body: Optional[BodyOutcome]) -> "ErrorWithBody":
        """Return a copy with ``body`` in place of the current body."""
        return type(self)(self._inner, body)

    def with_url(self, url: Union[httpx.URL, str]) -> "ErrorWithBody":
        """Return a copy reporting ``url`` (overwriting any existing)."""
        return type(self)(urls.with_url(self._inner, url), self._body)

    def without_url(self) -> "ErrorWithBody":
        """Return a copy with the URL stripped from the inner error.

        Use this before logging errors for URLs that embed secrets.
        """
        return type(self)(urls.without_url(self._inner), self._body)

    def _render(self) -> str:
        message = str(self._inner)
        if isinstance(self._body, bytes):
            message += f", body: {render_body(self._body)}"
        elif self._body is not None:
            message += f", error reading body: {self._body}"
        return message

    def __str__(self) -> str:
        return self._render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(inner={self._inner!r}, body={self._body!r})"


@contextmanager
def with_body_errors() -> Iterator[None]:
    """Re-raise any ``httpx.HTTPError`` from the block as ``ErrorWithBody``.

    Lets call sites expose a single error type whether or not a body was
    captured::

        with with_body_errors():
            response = await client.get(url)
            await araise_for_status_with_body(response)
    """
    try:
        yield
    except httpx.HTTPError as exc:
        raise ErrorWithBody.from_error(exc) from exc
