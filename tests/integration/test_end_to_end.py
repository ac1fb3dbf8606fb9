"""End-to-end tests through the public entry points."""

import json

import httpx
import pytest

from chatstream import (
    ChatStream,
    CaptureOptions,
    ContentChunk,
    StreamChunkEvent,
    StreamingHelper,
    StreamStartEvent,
    StreamTransportError,
    ToolChunk,
    UnsupportedOperationError,
    open_chat_stream,
    resolve_model_iden,
    stream_from_response,
)
from chatstream.cli import main
from tests.helpers.sse_fixtures import (
    DONE,
    TrackingSource,
    content_chunk,
    drain,
    finish_chunk,
    make_source,
    tool_chunk,
    usage_chunk,
)


def _sse_body(*payloads):
    return "".join(f"data: {payload}\n\n" for payload in payloads).encode()


@pytest.mark.integration
class TestOpenChatStream:
    """Drive full streams through open_chat_stream."""

    @pytest.mark.asyncio
    async def test_content_and_usage(self, openai_iden):
        options = CaptureOptions(capture_content=True, capture_usage=True)
        source = make_source(
            content_chunk("Hi"),
            content_chunk(" there"),
            usage_chunk(prompt_tokens=2, completion_tokens=3, total_tokens=5),
            DONE,
        )

        events = await drain(open_chat_stream(source, openai_iden, options))

        assert [e.type for e in events] == ["start", "chunk", "chunk", "end"]
        assert isinstance(events[0], StreamStartEvent)
        assert events[1].chunk == ContentChunk("Hi")
        assert events[2].chunk == ContentChunk(" there")
        end = events[-1].end
        assert end.captured_text() == "Hi there"
        assert end.captured_usage.total_tokens == 5

    @pytest.mark.asyncio
    async def test_tool_calls(self, openai_iden):
        options = CaptureOptions(capture_tools=True)
        source = make_source(
            tool_chunk(0, id="c1", name="get_weather", arguments=""),
            tool_chunk(0, arguments='{"c":1}'),
            tool_chunk(1, id="c2", name="get_time", arguments="{}"),
            DONE,
        )

        events = await drain(open_chat_stream(source, openai_iden, options))

        assert all(isinstance(e.chunk, ToolChunk) for e in events if isinstance(e, StreamChunkEvent))
        tools = events[-1].end.captured_tools
        assert [t.call_id for t in tools] == ["c1", "c2"]
        assert tools[0].fn_arguments == {"c": 1}

    def test_unsupported_provider_rejected_before_consuming(self):
        source = TrackingSource(content_chunk("a"), DONE)
        iden = resolve_model_iden("anthropic", "claude-3-haiku")

        with pytest.raises(UnsupportedOperationError):
            open_chat_stream(source, iden)
        assert source.pulls == 0

    @pytest.mark.asyncio
    async def test_collect_with_capture_off(self, groq_iden):
        source = make_source(
            content_chunk("ok"),
            finish_chunk("stop", x_groq={"usage": {"prompt_tokens": 1, "completion_tokens": 1}}),
            DONE,
        )

        collected = await StreamingHelper.collect(open_chat_stream(source, groq_iden))

        assert collected.text == "ok"
        assert collected.end.captured_content is None
        assert collected.end.captured_usage is None


@pytest.mark.integration
class TestStreamFromResponse:
    """Drive streams over httpx responses."""

    @pytest.mark.asyncio
    async def test_deepseek_over_http(self, deepseek_iden, capture_all):
        body = _sse_body(
            json.dumps({"choices": [{"index": 0, "delta": {"reasoning_content": "think"}}]}),
            json.dumps({"choices": [{"index": 0, "delta": {"content": "42"}}]}),
            finish_chunk("stop", usage={
                "prompt_tokens": 3,
                "completion_tokens": 4,
                "total_tokens": 7,
                "prompt_cache_hit_tokens": 2,
            }),
            DONE,
        )
        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=body))

        async with httpx.AsyncClient(transport=transport) as client:
            async with client.stream("POST", "https://api.deepseek.test/chat/completions") as response:
                stream = stream_from_response(response, deepseek_iden, capture_all)
                assert isinstance(stream, ChatStream)
                events = await drain(stream)

        end = events[-1].end
        assert end.captured_reasoning_content == "think"
        assert end.captured_text() == "42"
        assert end.captured_usage.total_tokens == 7
        assert end.captured_usage.prompt_tokens_details.cached_tokens == 2

    @pytest.mark.asyncio
    async def test_http_error_status_is_terminal(self, openai_iden):
        transport = httpx.MockTransport(lambda request: httpx.Response(429, headers={"Retry-After": "1"}))

        async with httpx.AsyncClient(transport=transport) as client:
            async with client.stream("POST", "https://api.openai.test/v1/chat/completions") as response:
                stream = stream_from_response(response, openai_iden)
                with pytest.raises(StreamTransportError) as exc_info:
                    await drain(stream)

        assert exc_info.value.status_code == 429
        assert exc_info.value.is_retryable is True
        assert exc_info.value.retry_after == 1.0


@pytest.mark.integration
class TestReplayCLI:
    """Replay recorded transcripts through the CLI."""

    def _write_transcript(self, tmp_path, *payloads):
        path = tmp_path / "stream.sse"
        path.write_bytes(_sse_body(*payloads))
        return str(path)

    def test_json_output(self, tmp_path, capsys):
        path = self._write_transcript(
            tmp_path,
            content_chunk("Hel"),
            content_chunk("lo"),
            finish_chunk("stop", x_groq={"usage": {"prompt_tokens": 2, "completion_tokens": 2}}),
            DONE,
        )

        exit_code = main([
            "replay", path, "--provider", "groq", "--model", "llama",
            "--capture-content", "--capture-usage", "--json",
        ])

        assert exit_code == 0
        lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert [line["type"] for line in lines] == ["start", "chunk", "chunk", "end"]
        assert lines[-1]["captured_content"] == "Hello"
        assert lines[-1]["captured_usage"] == {"prompt_tokens": 2, "completion_tokens": 2, "total_tokens": 4}

    def test_text_output(self, tmp_path, capsys):
        path = self._write_transcript(tmp_path, content_chunk("Hi"), DONE)

        assert main(["replay", path, "--capture-content"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Hi\n")
        assert "captured_content: Hi" in out

    def test_parse_error_exit_code(self, tmp_path, capsys):
        path = self._write_transcript(tmp_path, content_chunk("a"), "{broken", DONE)

        assert main(["replay", path]) == 1
        assert "Failed to parse stream payload" in capsys.readouterr().err

    def test_unknown_provider(self, tmp_path, capsys):
        path = self._write_transcript(tmp_path, DONE)

        assert main(["replay", path, "--provider", "nope"]) == 1
        assert "Unknown provider" in capsys.readouterr().err
