from __future__ import annotations

from typing import Awaitable, Callable, Optional

from ..models.events import (
    ChatStreamEvent,
    StreamChunkEvent,
    StreamEndEvent,
    StreamReasoningChunkEvent,
    StreamStartEvent,
)


class EventManager:
    """Dispatches chat stream events to optional async callbacks."""

    def __init__(
        self,
        on_start: Optional[Callable[[StreamStartEvent], Awaitable[None]]] = None,
        on_chunk: Optional[Callable[[StreamChunkEvent], Awaitable[None]]] = None,
        on_reasoning: Optional[Callable[[StreamReasoningChunkEvent], Awaitable[None]]] = None,
        on_end: Optional[Callable[[StreamEndEvent], Awaitable[None]]] = None,
        on_error: Optional[Callable[[Exception], Awaitable[None]]] = None,
    ) -> None:
        self.on_start = on_start
        self.on_chunk = on_chunk
        self.on_reasoning = on_reasoning
        self.on_end = on_end
        self.on_error = on_error

    async def emit(self, event: ChatStreamEvent) -> None:
        """Route an event to the callback registered for its type."""
        if isinstance(event, StreamStartEvent):
            await self.emit_start(event)
        elif isinstance(event, StreamChunkEvent):
            await self.emit_chunk(event)
        elif isinstance(event, StreamReasoningChunkEvent):
            await self.emit_reasoning(event)
        elif isinstance(event, StreamEndEvent):
            await self.emit_end(event)

    async def emit_start(self, event: StreamStartEvent) -> None:
        """Emit start event."""
        if self.on_start:
            await self.on_start(event)

    async def emit_chunk(self, event: StreamChunkEvent) -> None:
        """Emit chunk event."""
        if self.on_chunk:
            await self.on_chunk(event)

    async def emit_reasoning(self, event: StreamReasoningChunkEvent) -> None:
        """Emit reasoning chunk event."""
        if self.on_reasoning:
            await self.on_reasoning(event)

    async def emit_end(self, event: StreamEndEvent) -> None:
        """Emit end event."""
        if self.on_end:
            await self.on_end(event)

    async def emit_error(self, error: Exception) -> None:
        """Emit error."""
        if self.on_error:
            await self.on_error(error)
