"""
Reassembly of streamed tool calls.

Tool calls arrive as fragments: the id and name usually come first, then
the argument JSON a few characters at a time. Fragments for one call share
an index and arrive before any fragment of the next call, so at most one
partial call needs to be held at a time.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..models.tools import ToolCall


@dataclass
class ToolCallFragment:
    """One tool-call fragment; empty strings mean "nothing new for this field"."""
    index: int
    id: str = ""
    name: str = ""
    arguments: str = ""

    def into_tool_call(self) -> ToolCall:
        """Finalize an assembled call, parsing the argument JSON permissively."""
        try:
            fn_arguments = json.loads(self.arguments) if self.arguments else None
        except json.JSONDecodeError:
            fn_arguments = None
        return ToolCall(call_id=self.id, fn_name=self.name, fn_arguments=fn_arguments)


def merge_fragment(
    current: Optional[ToolCallFragment],
    fragment: ToolCallFragment,
) -> Tuple[ToolCallFragment, Optional[ToolCallFragment]]:
    """
    Merge a fragment into the partial call being held.

    Args:
        current: The partial call held so far, if any
        fragment: The incoming fragment

    Returns:
        (new partial call, completed call to flush or None)
    """
    if current is None:
        return replace(fragment), None

    if fragment.index == current.index:
        current.id += fragment.id
        current.name += fragment.name
        current.arguments += fragment.arguments
        return current, None

    return replace(fragment), current


class ToolCallAssembler:
    """Holds the single in-flight tool call of a stream."""

    def __init__(self) -> None:
        self.partial: Optional[ToolCallFragment] = None

    def merge(self, fragment: ToolCallFragment) -> Optional[ToolCall]:
        """
        Feed one fragment.

        Returns:
            The previous call, finalized, when `fragment` starts a new index
        """
        self.partial, completed = merge_fragment(self.partial, fragment)
        if completed is None:
            return None
        return completed.into_tool_call()

    def flush(self) -> Optional[ToolCall]:
        """Finalize the held call at end of stream. Returns None if none is held."""
        partial, self.partial = self.partial, None
        if partial is None:
            return None
        return partial.into_tool_call()

    @property
    def has_partial(self) -> bool:
        return self.partial is not None
