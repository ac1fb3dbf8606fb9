"""
Event sources for streaming responses.

An event source is a single-consumer async iterator of `SourceEvent`s:
`SourceOpen` when the connection is established, one `SourceMessage` per
Server-Sent Event, and `SourceError` when the transport fails. The source
ends by raising `StopAsyncIteration`.

This module also contains the SSE line framing used to build a source from
an `httpx` response or a recorded transcript.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterable, AsyncIterator, Iterable, List, Optional, Union

import httpx


@dataclass(frozen=True)
class SourceOpen:
    """The underlying connection is open."""


@dataclass(frozen=True)
class SourceMessage:
    """One Server-Sent Event."""
    data: str
    event: Optional[str] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class SourceError:
    """The transport failed; no further events follow."""
    error: BaseException


SourceEvent = Union[SourceOpen, SourceMessage, SourceError]
EventSource = AsyncIterator[SourceEvent]


class _SSEDecoder:
    """Incremental SSE field decoder, one line at a time."""

    def __init__(self) -> None:
        self._data: List[str] = []
        self._event: Optional[str] = None
        self._id: Optional[str] = None

    def decode(self, line: str) -> Optional[SourceMessage]:
        line = line.rstrip("\r\n")

        # Blank line dispatches the pending event
        if not line:
            return self.flush()

        # Comment / keep-alive
        if line.startswith(":"):
            return None

        name, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]

        if name == "data":
            self._data.append(value)
        elif name == "event":
            self._event = value
        elif name == "id":
            self._id = value
        # `retry` and unknown fields are ignored
        return None

    def flush(self) -> Optional[SourceMessage]:
        if not self._data:
            self._event = None
            return None
        message = SourceMessage(data="\n".join(self._data), event=self._event, id=self._id)
        self._data = []
        self._event = None
        return message


async def aiter_sse(lines: AsyncIterable[str], emit_open: bool = True) -> AsyncIterator[SourceEvent]:
    """
    Frame text lines into source events.

    Args:
        lines: Async iterable of SSE lines (with or without line endings)
        emit_open: Whether to yield `SourceOpen` before the first message

    Yields:
        SourceEvent values in arrival order
    """
    if emit_open:
        yield SourceOpen()

    decoder = _SSEDecoder()
    async for line in lines:
        message = decoder.decode(line)
        if message is not None:
            yield message

    # Stream closed without a trailing blank line
    message = decoder.flush()
    if message is not None:
        yield message


async def sse_from_response(response: httpx.Response) -> AsyncIterator[SourceEvent]:
    """
    Build an event source from a streaming `httpx` response.

    Non-2xx responses and transport exceptions are reported as a single
    `SourceError`, after which the source ends.

    Args:
        response: Response opened with `client.stream(...)`

    Yields:
        SourceEvent values
    """
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        yield SourceError(e)
        return

    try:
        async for event in aiter_sse(response.aiter_lines()):
            yield event
    except httpx.HTTPError as e:
        yield SourceError(e)


async def iter_source(events: Iterable[Union[SourceEvent, str]]) -> AsyncIterator[SourceEvent]:
    """
    Replay a fixed sequence of events as an event source.

    Plain strings are wrapped as `SourceMessage` payloads.
    """
    for event in events:
        if isinstance(event, str):
            yield SourceMessage(data=event)
        else:
            yield event
