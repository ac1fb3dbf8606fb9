"""
chatstream - Provider-agnostic streaming for LLM chat completions.

This package turns the Server-Sent Event streams of several LLM providers
into one sequence of normalized events:
- OpenAI and OpenAI-compatible hosts (Groq, xAI, DeepSeek, Ollama, ...)
- Content, reasoning and tool-call deltas relayed as they arrive
- Optional capture of content, reasoning, usage and tool calls into a
  final summary
"""

__version__ = "0.1.0"

from .api.client import open_chat_stream, resolve_model_iden, stream_from_response
from .config.settings import load_capture_defaults
from .models.content import ContentPart, MessageContent
from .models.events import (
    ChatStreamEvent,
    ContentChunk,
    ReasoningContentChunk,
    StreamChunkEvent,
    StreamEnd,
    StreamEndEvent,
    StreamReasoningChunkEvent,
    StreamStartEvent,
    StreamToolChunk,
    ToolChunk,
)
from .models.image import ImageRequest, ImageResponse
from .models.options import CAPTURE_ALL, DEFAULT_CAPTURE, CaptureOptions
from .models.tools import ToolCall
from .models.usage import Usage
from .providers.base import ProviderError
from .providers.errors import StreamParseError, StreamTransportError, UnsupportedOperationError
from .providers.kinds import Capability, ModelIden, ProviderKind, require_capability
from .streaming.adapter import ChatStream
from .streaming.helpers import CollectedStream, StreamingHelper
from .streaming.sources import SourceError, SourceMessage, SourceOpen, aiter_sse, iter_source

__all__ = [
    # Entry points
    "open_chat_stream",
    "stream_from_response",
    "resolve_model_iden",
    "load_capture_defaults",

    # Streams
    "ChatStream",
    "StreamingHelper",
    "CollectedStream",
    "SourceOpen",
    "SourceMessage",
    "SourceError",
    "aiter_sse",
    "iter_source",

    # Events
    "ChatStreamEvent",
    "StreamStartEvent",
    "StreamChunkEvent",
    "StreamReasoningChunkEvent",
    "StreamEndEvent",
    "StreamEnd",
    "ContentChunk",
    "ToolChunk",
    "StreamToolChunk",
    "ReasoningContentChunk",

    # Models
    "CaptureOptions",
    "DEFAULT_CAPTURE",
    "CAPTURE_ALL",
    "ContentPart",
    "MessageContent",
    "ToolCall",
    "Usage",
    "ImageRequest",
    "ImageResponse",

    # Providers
    "Capability",
    "ModelIden",
    "ProviderKind",
    "require_capability",

    # Errors
    "ProviderError",
    "StreamParseError",
    "StreamTransportError",
    "UnsupportedOperationError",
]
