"""OpenAI-compatible chat completion streaming."""

from .decoder import ToolCallFragment, decode_message
from .streaming import OpenAIStreamer

__all__ = ["OpenAIStreamer", "ToolCallFragment", "decode_message"]
