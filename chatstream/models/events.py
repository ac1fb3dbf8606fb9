"""Event models for chat streams.

This module defines the public events a `ChatStream` yields, identical for
every provider.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .content import MessageContent
from .tools import ToolCall
from .usage import Usage


@dataclass
class StreamToolChunk:
    """A tool-call fragment: each field holds only the text new in this chunk."""
    id: str = ""
    name: str = ""
    arguments: str = ""


@dataclass
class ContentChunk:
    """A piece of assistant-visible text."""
    text: str


@dataclass
class ToolChunk:
    """A tool-call fragment addressed to the call at `index`."""
    index: int
    tool: StreamToolChunk


StreamChunk = Union[ContentChunk, ToolChunk]


@dataclass
class ReasoningContentChunk:
    """A piece of reasoning text."""
    text: str


StreamReasoningChunk = ReasoningContentChunk


@dataclass
class StreamEnd:
    """Summary attached to the last event of a stream.

    Each captured field is only populated when the matching capture option
    was enabled.
    """
    captured_usage: Optional[Usage] = None
    captured_content: Optional[MessageContent] = None
    captured_reasoning_content: Optional[str] = None
    captured_tools: List[ToolCall] = field(default_factory=list)

    def captured_text(self) -> Optional[str]:
        if self.captured_content is None:
            return None
        return self.captured_content.text


@dataclass
class ChatStreamEvent:
    """Base class for all chat stream events."""
    type: str = ""  # Will be set by subclasses

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type}


@dataclass
class StreamStartEvent(ChatStreamEvent):
    """The first event of a stream."""
    type: str = field(default="start", init=False)

    def __post_init__(self):
        self.type = "start"


@dataclass
class StreamChunkEvent(ChatStreamEvent):
    """A content or tool-call chunk."""
    type: str = field(default="chunk", init=False)
    chunk: Optional[StreamChunk] = None

    def __post_init__(self):
        self.type = "chunk"

    def get_text(self) -> str:
        if isinstance(self.chunk, ContentChunk):
            return self.chunk.text
        return ""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type}
        if isinstance(self.chunk, ContentChunk):
            data["content"] = self.chunk.text
        elif isinstance(self.chunk, ToolChunk):
            data["tool"] = {
                "index": self.chunk.index,
                "id": self.chunk.tool.id,
                "name": self.chunk.tool.name,
                "arguments": self.chunk.tool.arguments,
            }
        return data


@dataclass
class StreamReasoningChunkEvent(ChatStreamEvent):
    """A reasoning chunk."""
    type: str = field(default="reasoning_chunk", init=False)
    chunk: Optional[StreamReasoningChunk] = None

    def __post_init__(self):
        self.type = "reasoning_chunk"

    def get_text(self) -> str:
        return self.chunk.text if self.chunk is not None else ""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "content": self.get_text()}


@dataclass
class StreamEndEvent(ChatStreamEvent):
    """The last event of a successful stream."""
    type: str = field(default="end", init=False)
    end: StreamEnd = field(default_factory=StreamEnd)

    def __post_init__(self):
        self.type = "end"

    def to_dict(self) -> Dict[str, Any]:
        usage = self.end.captured_usage
        return {
            "type": self.type,
            "captured_usage": usage.compact().model_dump(exclude_none=True) if usage is not None else None,
            "captured_content": self.end.captured_text(),
            "captured_reasoning_content": self.end.captured_reasoning_content,
            "captured_tools": [tool.model_dump() for tool in self.end.captured_tools],
        }
