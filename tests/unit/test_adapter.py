"""Unit tests for translating intermediate events into public events."""

import pytest

from chatstream.models.content import MessageContent
from chatstream.models.events import (
    ContentChunk,
    StreamChunkEvent,
    StreamEndEvent,
    StreamReasoningChunkEvent,
    StreamStartEvent,
    ToolChunk,
)
from chatstream.models.tools import ToolCall
from chatstream.models.usage import Usage
from chatstream.streaming.adapter import ChatStream, to_chat_event, to_stream_end
from chatstream.streaming.types import (
    InterContentChunk,
    InterReasoningChunk,
    InterStreamChunk,
    InterStreamChunkTool,
    InterStreamEnd,
    InterStreamStart,
    InterToolChunk,
)
from tests.helpers.sse_fixtures import drain


async def _replay(*events):
    for event in events:
        yield event


class TestToChatEvent:
    """Test the one-to-one translation."""

    def test_start(self):
        event = to_chat_event(InterStreamStart())
        assert isinstance(event, StreamStartEvent)
        assert event.type == "start"

    def test_content_chunk(self):
        event = to_chat_event(InterStreamChunk(InterContentChunk("Hi")))
        assert isinstance(event, StreamChunkEvent)
        assert event.chunk == ContentChunk(text="Hi")
        assert event.get_text() == "Hi"

    def test_tool_chunk_fields_copied(self):
        inter = InterStreamChunk(InterToolChunk(
            index=1,
            tool=InterStreamChunkTool(id="c2", name="lookup", arguments='{"q"'),
        ))
        event = to_chat_event(inter)

        assert isinstance(event.chunk, ToolChunk)
        assert event.chunk.index == 1
        assert event.chunk.tool.id == "c2"
        assert event.chunk.tool.name == "lookup"
        assert event.chunk.tool.arguments == '{"q"'
        assert event.get_text() == ""

    def test_reasoning_chunk(self):
        event = to_chat_event(InterReasoningChunk("hmm"))
        assert isinstance(event, StreamReasoningChunkEvent)
        assert event.get_text() == "hmm"

    def test_unknown_event_rejected(self):
        with pytest.raises(TypeError):
            to_chat_event(object())


class TestToStreamEnd:
    """Test the end summary translation."""

    def test_content_wrapped_in_message_content(self):
        tools = [ToolCall(call_id="c1", fn_name="f", fn_arguments={"a": 1})]
        end = to_stream_end(InterStreamEnd(
            captured_usage=Usage(total_tokens=5),
            captured_content="Hi there",
            captured_reasoning_content="thinking",
            captured_tools=tools,
        ))

        assert isinstance(end.captured_content, MessageContent)
        assert end.captured_text() == "Hi there"
        assert end.captured_usage.total_tokens == 5
        assert end.captured_reasoning_content == "thinking"
        assert end.captured_tools == tools

    def test_absent_content_stays_absent(self):
        end = to_stream_end(InterStreamEnd())
        assert end.captured_content is None
        assert end.captured_text() is None
        assert end.captured_usage is None
        assert end.captured_tools == []


class TestChatStream:
    """Test the public stream wrapper."""

    @pytest.mark.asyncio
    async def test_relays_in_order(self):
        stream = ChatStream(_replay(
            InterStreamStart(),
            InterStreamChunk(InterContentChunk("a")),
            InterReasoningChunk("r"),
            InterStreamEnd(captured_content="a"),
        ))

        events = await drain(stream)
        assert [e.type for e in events] == ["start", "chunk", "reasoning_chunk", "end"]
        assert isinstance(events[-1], StreamEndEvent)
        assert events[-1].end.captured_text() == "a"

    @pytest.mark.asyncio
    async def test_error_propagates(self):
        async def failing():
            yield InterStreamStart()
            raise RuntimeError("boom")

        stream = ChatStream(failing())
        assert isinstance(await stream.__anext__(), StreamStartEvent)
        with pytest.raises(RuntimeError, match="boom"):
            await stream.__anext__()

    @pytest.mark.asyncio
    async def test_context_manager_closes_inner(self):
        class Inner:
            closed = False

            def __aiter__(self):
                return self

            async def __anext__(self):
                return InterStreamStart()

            async def aclose(self):
                self.closed = True

        inner = Inner()
        async with ChatStream(inner) as stream:
            await stream.__anext__()
        assert inner.closed
