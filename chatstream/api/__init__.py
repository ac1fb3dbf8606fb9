"""Public API entry points."""

from .client import open_chat_stream, resolve_model_iden, stream_from_response

__all__ = ["open_chat_stream", "resolve_model_iden", "stream_from_response"]
