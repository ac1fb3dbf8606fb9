"""
Intermediate stream event types.

Every provider streamer emits these provider-agnostic events; the public
`ChatStream` translates them into `ChatStreamEvent`s. New provider families
plug in here without touching the public event contract.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..models.tools import ToolCall
from ..models.usage import Usage


@dataclass
class InterStreamChunkTool:
    """One tool-call fragment as received: every field may be partial."""
    id: str = ""
    name: str = ""
    arguments: str = ""


@dataclass
class InterContentChunk:
    text: str


@dataclass
class InterToolChunk:
    index: int
    tool: InterStreamChunkTool


InterChunk = Union[InterContentChunk, InterToolChunk]


@dataclass
class InterStreamStart:
    """The event source opened."""


@dataclass
class InterStreamChunk:
    chunk: InterChunk


@dataclass
class InterReasoningChunk:
    content: str


@dataclass
class InterStreamEnd:
    """Terminal event carrying whatever the capture options retained."""
    # Set when CaptureOptions.capture_usage
    captured_usage: Optional[Usage] = None

    # Set when CaptureOptions.capture_content
    captured_content: Optional[str] = None

    # Set when CaptureOptions.capture_reasoning_content
    captured_reasoning_content: Optional[str] = None

    # Filled when CaptureOptions.capture_tools
    captured_tools: List[ToolCall] = field(default_factory=list)


InterStreamEvent = Union[InterStreamStart, InterStreamChunk, InterReasoningChunk, InterStreamEnd]
