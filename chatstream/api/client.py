"""
Entry points that wire an event source to a public ChatStream.

Request construction and authentication happen elsewhere; these functions
take an already-open source (or `httpx` response) and return the
normalized stream.
"""

import logging
from typing import Optional, Union

import httpx

from ..models.options import CaptureOptions
from ..providers.kinds import Capability, ModelIden, ProviderKind, require_capability
from ..providers.openai.streaming import OpenAIStreamer
from ..streaming.adapter import ChatStream
from ..streaming.sources import EventSource, sse_from_response

logger = logging.getLogger(__name__)


def resolve_model_iden(
    provider: Union[str, ProviderKind],
    model: Union[str, ModelIden],
) -> ModelIden:
    if isinstance(model, ModelIden):
        return model
    return ModelIden(ProviderKind.parse(provider), model)


def open_chat_stream(
    source: EventSource,
    model_iden: ModelIden,
    options: Optional[CaptureOptions] = None,
    stream_id: Optional[str] = None,
) -> ChatStream:
    """
    Build a normalized chat stream over an event source.

    Args:
        source: Event source of the provider response
        model_iden: Provider kind and model name
        options: Capture options for the end summary
        stream_id: Identifier for log records

    Returns:
        ChatStream yielding ChatStreamEvents

    Raises:
        UnsupportedOperationError: If the provider has no OpenAI-compatible
            stream decoder; raised before the source is consumed
    """
    require_capability(model_iden.provider, Capability.OPENAI_COMPATIBLE_STREAM)

    logger.debug(f"Opening chat stream for {model_iden}")
    streamer = OpenAIStreamer(source, model_iden, options=options, stream_id=stream_id)
    return ChatStream(streamer)


def stream_from_response(
    response: httpx.Response,
    model_iden: ModelIden,
    options: Optional[CaptureOptions] = None,
    stream_id: Optional[str] = None,
) -> ChatStream:
    """
    Build a normalized chat stream over a streaming `httpx` response.

    The response must have been opened with `client.stream(...)`; closing the
    stream does not close the response.
    """
    return open_chat_stream(sse_from_response(response), model_iden, options, stream_id)
