"""
Public stream adapter.

`ChatStream` relays intermediate events one-to-one as public
`ChatStreamEvent`s. It never buffers or reorders; the translation functions
are exposed so each layer can be tested on its own.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Optional

from ..models.content import MessageContent
from ..models.events import (
    ChatStreamEvent,
    ContentChunk,
    ReasoningContentChunk,
    StreamChunk,
    StreamChunkEvent,
    StreamEnd,
    StreamEndEvent,
    StreamReasoningChunkEvent,
    StreamStartEvent,
    StreamToolChunk,
    ToolChunk,
)
from .types import (
    InterChunk,
    InterContentChunk,
    InterReasoningChunk,
    InterStreamChunk,
    InterStreamEnd,
    InterStreamEvent,
    InterStreamStart,
    InterToolChunk,
)


def to_stream_chunk(chunk: InterChunk) -> StreamChunk:
    if isinstance(chunk, InterContentChunk):
        return ContentChunk(text=chunk.text)
    if isinstance(chunk, InterToolChunk):
        return ToolChunk(
            index=chunk.index,
            tool=StreamToolChunk(
                id=chunk.tool.id,
                name=chunk.tool.name,
                arguments=chunk.tool.arguments,
            ),
        )
    raise TypeError(f"Unknown intermediate chunk: {type(chunk).__name__}")


def to_stream_end(end: InterStreamEnd) -> StreamEnd:
    captured_content = None
    if end.captured_content is not None:
        captured_content = MessageContent.from_text(end.captured_content)
    return StreamEnd(
        captured_usage=end.captured_usage,
        captured_content=captured_content,
        captured_reasoning_content=end.captured_reasoning_content,
        captured_tools=end.captured_tools,
    )


def to_chat_event(event: InterStreamEvent) -> ChatStreamEvent:
    """Translate one intermediate event into its public counterpart."""
    if isinstance(event, InterStreamStart):
        return StreamStartEvent()
    if isinstance(event, InterStreamChunk):
        return StreamChunkEvent(chunk=to_stream_chunk(event.chunk))
    if isinstance(event, InterReasoningChunk):
        return StreamReasoningChunkEvent(chunk=ReasoningContentChunk(text=event.content))
    if isinstance(event, InterStreamEnd):
        return StreamEndEvent(end=to_stream_end(event))
    raise TypeError(f"Unknown intermediate event: {type(event).__name__}")


class ChatStream:
    """
    Provider-agnostic stream of chat events.

    Iterate with `async for`; the stream ends after `StreamEndEvent`, or
    raises the first error it meets (no events follow an error).
    """

    def __init__(self, inter_stream: AsyncIterator[InterStreamEvent]):
        self._inter_stream = inter_stream

    def __aiter__(self) -> "ChatStream":
        return self

    async def __anext__(self) -> ChatStreamEvent:
        event = await self._inter_stream.__anext__()
        return to_chat_event(event)

    async def aclose(self) -> None:
        """Abandon the stream, releasing the underlying event source."""
        aclose = getattr(self._inter_stream, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> "ChatStream":
        return self

    async def __aexit__(self, exc_type: Any, exc: Optional[BaseException], tb: Any) -> None:
        await self.aclose()
