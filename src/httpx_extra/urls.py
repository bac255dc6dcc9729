"""URL association for httpx error values.

httpx keeps the request URL of a status failure inside the error message,
as a `` for url '<url>'`` clause at the end of the first line. These helpers
rewrite that clause on a copy of the error, so the rest of httpx's rendering
(status line, documentation link, redirect location) is left exactly as httpx
produced it.
"""

from __future__ import annotations

import re
from typing import TypeVar, Union

import httpx

ErrorT = TypeVar("ErrorT", bound=BaseException)

_URL_CLAUSE = re.compile(r" for url '.*'$")


def _rebuild(error: ErrorT, message: str) -> ErrorT:
    # httpx error constructors take keyword-only arguments, so bypass
    # __init__ and carry the instance state over verbatim.
    cls = type(error)
    rebuilt = cls.__new__(cls, message)
    rebuilt.__dict__.update(error.__dict__)
    rebuilt.__cause__ = error.__cause__
    rebuilt.__context__ = error.__context__
    rebuilt.__suppress_context__ = error.__suppress_context__
    return rebuilt


def with_url(error: ErrorT, url: Union[httpx.URL, str]) -> ErrorT:
    """Return a copy of ``error`` that reports ``url`` (overwriting any existing)."""
    head, sep, tail = str(error).partition("\n")
    head = _URL_CLAUSE.sub("", head, count=1) + f" for url '{httpx.URL(url)}'"
    return _rebuild(error, head + sep + tail)


def without_url(error: ErrorT) -> ErrorT:
    """Return a copy of ``error`` with its URL stripped.

    Useful when the URL carries credentials or tokens in its query string
    and the error is about to be logged or shown to a user.
    """
    head, sep, tail = str(error).partition("\n")
    return _rebuild(error, _URL_CLAUSE.sub("", head, count=1) + sep + tail)
