"""Helper utilities for common streaming patterns."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..models.events import (
    ContentChunk,
    StreamChunkEvent,
    StreamEnd,
    StreamEndEvent,
    StreamReasoningChunkEvent,
    ToolChunk,
)
from .adapter import ChatStream
from .manager import EventManager


@dataclass
class CollectedStream:
    """Everything observed while draining a stream."""
    text: str = ""
    reasoning: str = ""
    tool_chunks: List[ToolChunk] = field(default_factory=list)
    end: Optional[StreamEnd] = None
    event_count: int = 0


class StreamingHelper:
    """Helper for common streaming patterns across providers."""

    @staticmethod
    async def collect(
        stream: ChatStream,
        events: Optional[EventManager] = None
    ) -> CollectedStream:
        """Drain a stream, concatenating what it relayed.

        The relayed text is collected independently of the capture options,
        so `text` is filled even when `end.captured_content` is not.

        Args:
            stream: ChatStream to drain
            events: Optional EventManager receiving every event

        Returns:
            CollectedStream with the relayed text, reasoning and tool chunks

        Raises:
            ProviderError: The stream's terminal error, after `on_error` ran
        """
        collected = CollectedStream()
        text_parts: List[str] = []
        reasoning_parts: List[str] = []

        try:
            async for event in stream:
                collected.event_count += 1

                if isinstance(event, StreamChunkEvent):
                    if isinstance(event.chunk, ContentChunk):
                        text_parts.append(event.chunk.text)
                    elif isinstance(event.chunk, ToolChunk):
                        collected.tool_chunks.append(event.chunk)
                elif isinstance(event, StreamReasoningChunkEvent):
                    reasoning_parts.append(event.get_text())
                elif isinstance(event, StreamEndEvent):
                    collected.end = event.end

                if events:
                    await events.emit(event)

        except Exception as e:
            if events:
                await events.emit_error(e)
            raise

        collected.text = "".join(text_parts)
        collected.reasoning = "".join(reasoning_parts)
        return collected
