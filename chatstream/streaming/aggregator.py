"""
Captured-data aggregation for streaming responses.

The streamer owns one `CaptureAggregator` per stream and records into it
according to the stream's `CaptureOptions`. At the end of the stream the
captured data is moved into the terminal event and the aggregator is left
empty.
"""

from typing import List, Optional

from ..models.options import CaptureOptions
from ..models.tools import ToolCall
from ..models.usage import Usage
from .types import InterStreamEnd


class CaptureAggregator:
    """Accumulates content, reasoning, usage and tool calls for one stream."""

    def __init__(self, options: CaptureOptions):
        self.options = options
        self.content: Optional[str] = None
        self.reasoning_content: Optional[str] = None
        self.usage: Optional[Usage] = None
        self.tools: List[ToolCall] = []

    def add_content(self, text: str) -> None:
        if not self.options.capture_content:
            return
        self.content = text if self.content is None else self.content + text

    def add_reasoning(self, text: str) -> None:
        if not self.options.capture_reasoning_content:
            return
        self.reasoning_content = text if self.reasoning_content is None else self.reasoning_content + text

    def set_usage(self, usage: Optional[Usage]) -> bool:
        """
        Record usage once.

        The first non-empty usage recorded for a stream wins; later reports
        are ignored. An empty record only holds the place until a real one
        arrives.

        Returns:
            True if the usage was recorded
        """
        if usage is None or not self.options.capture_usage:
            return False
        if self.usage is not None and not self.usage.is_empty():
            return False
        self.usage = usage
        return True

    def add_tool(self, tool: Optional[ToolCall]) -> None:
        if tool is None or not self.options.capture_tools:
            return
        self.tools.append(tool)

    @property
    def has_usage(self) -> bool:
        return self.usage is not None

    def take(self) -> InterStreamEnd:
        """Move everything captured into an end event, leaving this empty."""
        end = InterStreamEnd(
            captured_usage=self.usage,
            captured_content=self.content,
            captured_reasoning_content=self.reasoning_content,
            captured_tools=self.tools,
        )
        self.content = None
        self.reasoning_content = None
        self.usage = None
        self.tools = []
        return end
