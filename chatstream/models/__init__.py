"""Data models shared across chatstream."""

from .content import ContentPart, ContentPartType, ImageSource, MessageContent
from .events import (
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
from .options import CAPTURE_ALL, DEFAULT_CAPTURE, CaptureOptions
from .tools import ToolCall
from .usage import CompletionTokensDetails, PromptTokensDetails, Usage

__all__ = [
    "ContentPart",
    "ContentPartType",
    "ImageSource",
    "MessageContent",
    "ChatStreamEvent",
    "ContentChunk",
    "ReasoningContentChunk",
    "StreamChunk",
    "StreamChunkEvent",
    "StreamEnd",
    "StreamEndEvent",
    "StreamReasoningChunkEvent",
    "StreamStartEvent",
    "StreamToolChunk",
    "ToolChunk",
    "CAPTURE_ALL",
    "DEFAULT_CAPTURE",
    "CaptureOptions",
    "ToolCall",
    "CompletionTokensDetails",
    "PromptTokensDetails",
    "Usage",
]
