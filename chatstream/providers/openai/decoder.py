"""
Delta decoder for OpenAI-compatible chat completion streams.

`decode_message` classifies one SSE payload into a tagged shape. It holds
no state between calls; reassembling tool calls and accumulating captured
data is the streamer's job.

Example tool-call fragments as sent by OpenAI:

    {"choices":[{"index":0,"delta":{"role":"assistant","content":null,"tool_calls":[{"index":0,"id":"call_VkT1","type":"function","function":{"name":"get_weather","arguments":""}}]},"finish_reason":null}]}
    {"choices":[{"index":0,"delta":{"tool_calls":[{"index":0,"function":{"arguments":"{\\""}}]},"finish_reason":null}]}
    {"choices":[{"index":0,"delta":{"tool_calls":[{"index":0,"function":{"arguments":"city"}}]},"finish_reason":null}]}
    ...
    {"choices":[{"index":0,"delta":{},"finish_reason":"tool_calls"}]}
    [DONE]
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ...config.constants import DONE_SENTINEL, GENERIC_USAGE_KEY, GROQ_USAGE_PATH
from ...core.normalization.usage import normalize_usage
from ...models.usage import Usage
from ...streaming.assembler import ToolCallFragment
from ..kinds import ProviderKind, UsageLocation, usage_location


@dataclass
class DoneSignal:
    """The literal end-of-stream sentinel."""


@dataclass
class FinishSignal:
    """The first choice carries a finish reason.

    `usage` is set only for providers that attach usage to the finish chunk.
    """
    finish_reason: str
    usage: Optional[Usage] = None


@dataclass
class ContentDelta:
    text: str


@dataclass
class ReasoningDelta:
    text: str


@dataclass
class ToolCallDelta:
    fragment: ToolCallFragment


@dataclass
class EmptyChoice:
    """A first choice with nothing recognizable in it."""


@dataclass
class UsagePayload:
    """A chunk without choices.

    `usage` is set only for providers that report usage in a trailing chunk.
    """
    usage: Optional[Usage] = None


DecodedMessage = Union[
    DoneSignal, FinishSignal, ContentDelta, ReasoningDelta, ToolCallDelta, EmptyChoice, UsagePayload
]


def _get_path(data: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _first_choice(message: Any) -> Optional[Dict[str, Any]]:
    choices = _get_path(message, "choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        return choices[0]
    return None


def finish_usage(message: Any, provider: ProviderKind) -> Optional[Usage]:
    """Usage attached to a finish chunk, for providers that put it there."""
    location = usage_location(provider)
    if location == UsageLocation.FINISH_VENDOR_KEY:
        return normalize_usage(_get_path(message, *GROQ_USAGE_PATH), provider)
    if location == UsageLocation.FINISH_USAGE_KEY:
        return normalize_usage(_get_path(message, GENERIC_USAGE_KEY), provider)
    return None


def trailing_usage(message: Any, provider: ProviderKind) -> Optional[Usage]:
    """Usage from a choice-less chunk, for providers that report it there."""
    if usage_location(provider) != UsageLocation.TRAILING_CHUNK:
        return None
    raw = _get_path(message, GENERIC_USAGE_KEY)
    # Choice-less chunks without usage (e.g. prompt_filter_results) carry nothing
    if not isinstance(raw, dict):
        return None
    return normalize_usage(raw, provider)


def parse_tool_fragment(raw: Any) -> Optional[ToolCallFragment]:
    """Read one tool-call entry; None when it is not an object."""
    if not isinstance(raw, dict):
        return None
    index = raw.get("index")
    if not isinstance(index, int) or isinstance(index, bool):
        index = 0
    function = raw.get("function")
    return ToolCallFragment(
        index=index,
        id=_as_str(raw.get("id")),
        name=_as_str(_get_path(function, "name")),
        arguments=_as_str(_get_path(function, "arguments")),
    )


def decode_choice(choice: Dict[str, Any], message: Any, provider: ProviderKind) -> DecodedMessage:
    # xAI and DeepSeek omit finish_reason entirely while streaming, others send null
    finish_reason = choice.get("finish_reason")
    if isinstance(finish_reason, str):
        return FinishSignal(finish_reason=finish_reason, usage=finish_usage(message, provider))

    delta = choice.get("delta")

    content = _get_path(delta, "content")
    if isinstance(content, str):
        return ContentDelta(text=content)

    # Only one tool call is streamed per chunk
    tool_calls = _get_path(delta, "tool_calls")
    if isinstance(tool_calls, list) and tool_calls:
        fragment = parse_tool_fragment(tool_calls[0])
        if fragment is not None:
            return ToolCallDelta(fragment=fragment)

    for key in ("reasoning_content", "reasoning"):
        reasoning = _get_path(delta, key)
        if isinstance(reasoning, str):
            return ReasoningDelta(text=reasoning)

    return EmptyChoice()


def decode_message(data: str, provider: ProviderKind) -> DecodedMessage:
    """
    Classify one SSE payload from an OpenAI-compatible stream.

    Args:
        data: Raw `data:` payload text
        provider: Provider kind, selects where usage is read from

    Returns:
        The decoded shape of the payload

    Raises:
        ValueError: If the payload is neither the sentinel nor JSON
            (`json.JSONDecodeError`)
        RecursionError: If the payload nests too deeply to decode
    """
    if data == DONE_SENTINEL:
        return DoneSignal()

    message = json.loads(data)

    choice = _first_choice(message)
    if choice is not None:
        return decode_choice(choice, message, provider)

    return UsagePayload(usage=trailing_usage(message, provider))
