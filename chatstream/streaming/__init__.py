"""Streaming layer for provider-agnostic chat streams.

This layer handles:
- Event sources and SSE framing
- The intermediate event algebra shared by provider streamers
- Tool-call reassembly and captured-data aggregation
- Translation into the public ChatStream events
"""

from .adapter import ChatStream, to_chat_event
from .aggregator import CaptureAggregator
from .assembler import ToolCallAssembler, ToolCallFragment, merge_fragment
from .helpers import CollectedStream, StreamingHelper
from .manager import EventManager
from .sources import (
    EventSource,
    SourceError,
    SourceEvent,
    SourceMessage,
    SourceOpen,
    aiter_sse,
    iter_source,
    sse_from_response,
)

__all__ = [
    "ChatStream",
    "to_chat_event",
    "CaptureAggregator",
    "ToolCallAssembler",
    "ToolCallFragment",
    "merge_fragment",
    "CollectedStream",
    "StreamingHelper",
    "EventManager",
    "EventSource",
    "SourceError",
    "SourceEvent",
    "SourceMessage",
    "SourceOpen",
    "aiter_sse",
    "iter_source",
    "sse_from_response",
]
