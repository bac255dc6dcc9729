"""Byte streams that can drop the connection part way through a body."""

from __future__ import annotations

from typing import AsyncIterator, Iterator, Optional, Sequence

import httpx


class ChunkedAsyncStream(httpx.AsyncByteStream):
    """Yields ``chunks`` and then raises ``error``, if one is given."""

    def __init__(
        self, chunks: Sequence[bytes], error: Optional[Exception] = None
    ) -> None:
        self._chunks = list(chunks)
        self._error = error
        self.chunks_sent = 0

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            self.chunks_sent += 1
            yield chunk
        if self._error is not None:
            raise self._error


class ChunkedSyncStream(httpx.SyncByteStream):
    """Synchronous counterpart of ``ChunkedAsyncStream``."""

    def __init__(
        self, chunks: Sequence[bytes], error: Optional[Exception] = None
    ) -> None:
        self._chunks = list(chunks)
        self._error = error
        self.chunks_sent = 0

    def __iter__(self) -> Iterator[bytes]:
        for chunk in self._chunks:
            self.chunks_sent += 1
            yield chunk
        if self._error is not None:
            raise self._error
