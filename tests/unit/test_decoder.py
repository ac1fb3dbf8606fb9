"""Unit tests for the OpenAI-compatible delta decoder."""

import json

import pytest

from chatstream.providers.kinds import ProviderKind
from chatstream.providers.openai.decoder import (
    ContentDelta,
    DoneSignal,
    EmptyChoice,
    FinishSignal,
    ReasoningDelta,
    ToolCallDelta,
    UsagePayload,
    decode_message,
    parse_tool_fragment,
)
from tests.helpers.sse_fixtures import (
    chunk,
    content_chunk,
    finish_chunk,
    reasoning_chunk,
    tool_chunk,
    usage_chunk,
)


class TestSentinelAndParsing:
    """Test sentinel detection and parse failures."""

    def test_done_sentinel(self):
        """The literal [DONE] is recognized without JSON parsing."""
        assert isinstance(decode_message("[DONE]", ProviderKind.OPENAI), DoneSignal)

    def test_malformed_json_raises(self):
        """A payload that is not JSON is a hard error."""
        with pytest.raises(json.JSONDecodeError):
            decode_message("{not json", ProviderKind.OPENAI)

    def test_deep_nesting_raises(self):
        with pytest.raises(RecursionError):
            decode_message("[" * 100000 + "]" * 100000, ProviderKind.OPENAI)

    def test_sentinel_is_exact(self):
        """A quoted sentinel is JSON, not the sentinel."""
        decoded = decode_message('"[DONE]"', ProviderKind.OPENAI)
        assert isinstance(decoded, UsagePayload)


class TestChoiceDeltas:
    """Test classification of per-choice deltas."""

    def test_content_delta(self):
        decoded = decode_message(content_chunk("Hi"), ProviderKind.OPENAI)
        assert decoded == ContentDelta(text="Hi")

    def test_reasoning_delta(self):
        decoded = decode_message(reasoning_chunk("thinking"), ProviderKind.DEEPSEEK)
        assert decoded == ReasoningDelta(text="thinking")

    def test_reasoning_alias(self):
        """Hosts that name the field `reasoning` are accepted."""
        payload = chunk([{"index": 0, "delta": {"reasoning": "hmm"}}])
        assert decode_message(payload, ProviderKind.OLLAMA) == ReasoningDelta(text="hmm")

    def test_tool_call_delta(self):
        decoded = decode_message(tool_chunk(0, id="c1", name="get_weather", arguments=""), ProviderKind.OPENAI)
        assert isinstance(decoded, ToolCallDelta)
        assert decoded.fragment.index == 0
        assert decoded.fragment.id == "c1"
        assert decoded.fragment.name == "get_weather"
        assert decoded.fragment.arguments == ""

    def test_partial_tool_call_fields_default_to_empty(self):
        decoded = decode_message(tool_chunk(0, arguments='{"'), ProviderKind.OPENAI)
        assert decoded.fragment.id == ""
        assert decoded.fragment.name == ""
        assert decoded.fragment.arguments == '{"'

    def test_only_first_tool_call_is_read(self):
        payload = chunk([{
            "index": 0,
            "delta": {"tool_calls": [
                {"index": 0, "function": {"arguments": "a"}},
                {"index": 1, "function": {"arguments": "b"}},
            ]},
        }])
        decoded = decode_message(payload, ProviderKind.OPENAI)
        assert decoded.fragment.index == 0
        assert decoded.fragment.arguments == "a"

    def test_null_content_with_tool_call(self):
        """content: null does not hide the tool call in the same delta."""
        payload = chunk([{
            "index": 0,
            "delta": {"content": None, "tool_calls": [{"index": 2, "id": "x"}]},
        }])
        decoded = decode_message(payload, ProviderKind.OPENAI)
        assert isinstance(decoded, ToolCallDelta)
        assert decoded.fragment.index == 2

    def test_empty_delta_is_empty_choice(self):
        payload = chunk([{"index": 0, "delta": {"role": "assistant"}, "finish_reason": None}])
        assert isinstance(decode_message(payload, ProviderKind.OPENAI), EmptyChoice)

    def test_content_checked_before_reasoning(self):
        payload = chunk([{"index": 0, "delta": {"content": "a", "reasoning_content": "b"}}])
        assert decode_message(payload, ProviderKind.DEEPSEEK) == ContentDelta(text="a")


class TestFinishSignal:
    """Test finish-reason handling and per-provider usage location."""

    def test_finish_reason_without_usage_for_base_dialect(self):
        decoded = decode_message(
            finish_chunk("stop", usage={"prompt_tokens": 3}), ProviderKind.OPENAI
        )
        assert decoded == FinishSignal(finish_reason="stop", usage=None)

    def test_null_finish_reason_is_not_finish(self):
        decoded = decode_message(content_chunk("x", finish_reason=None), ProviderKind.OPENAI)
        assert isinstance(decoded, ContentDelta)

    def test_absent_finish_reason_is_not_an_error(self):
        """xAI omits finish_reason entirely while active."""
        payload = chunk([{"index": 0, "delta": {"content": "Hi"}}])
        assert decode_message(payload, ProviderKind.XAI) == ContentDelta(text="Hi")

    def test_groq_usage_under_vendor_key(self):
        payload = finish_chunk("stop", x_groq={"usage": {"prompt_tokens": 7, "completion_tokens": 3}})
        decoded = decode_message(payload, ProviderKind.GROQ)
        assert isinstance(decoded, FinishSignal)
        assert decoded.usage.prompt_tokens == 7
        assert decoded.usage.completion_tokens == 3
        assert decoded.usage.total_tokens == 10

    @pytest.mark.parametrize("kind", [ProviderKind.XAI, ProviderKind.DEEPSEEK])
    def test_generic_usage_on_finish(self, kind):
        payload = finish_chunk("stop", usage={"prompt_tokens": 4, "completion_tokens": 1, "total_tokens": 5})
        decoded = decode_message(payload, kind)
        assert decoded.usage.total_tokens == 5

    def test_missing_usage_on_finish_is_empty_usage(self):
        decoded = decode_message(finish_chunk("stop"), ProviderKind.XAI)
        assert decoded.usage is not None
        assert decoded.usage.is_empty()

    def test_finish_wins_over_content_in_same_choice(self):
        decoded = decode_message(content_chunk("tail", finish_reason="length"), ProviderKind.OPENAI)
        assert decoded == FinishSignal(finish_reason="length")


class TestUsagePayload:
    """Test choice-less payloads."""

    def test_trailing_usage_base_dialect(self):
        decoded = decode_message(usage_chunk(prompt_tokens=2, completion_tokens=3), ProviderKind.OPENAI)
        assert isinstance(decoded, UsagePayload)
        assert decoded.usage.total_tokens == 5

    def test_trailing_usage_ignored_for_finish_providers(self):
        decoded = decode_message(usage_chunk(prompt_tokens=2), ProviderKind.GROQ)
        assert decoded == UsagePayload(usage=None)

    @pytest.mark.parametrize("payload", ['{"choices": null}', '{}', '[]', '42'])
    def test_payloads_without_choices_or_usage(self, payload):
        decoded = decode_message(payload, ProviderKind.OPENAI)
        assert decoded == UsagePayload(usage=None)

    def test_prompt_filter_chunk_carries_no_usage(self):
        payload = chunk([], prompt_filter_results=[{"prompt_index": 0, "content_filter_results": {}}])
        assert decode_message(payload, ProviderKind.OPENAI) == UsagePayload(usage=None)

    def test_empty_usage_object_is_kept(self):
        decoded = decode_message(chunk([], usage={}), ProviderKind.OPENAI)
        assert decoded.usage is not None
        assert decoded.usage.is_empty()


class TestParseToolFragment:
    """Test permissive tool fragment reading."""

    def test_non_object_is_ignored(self):
        assert parse_tool_fragment("nope") is None

    def test_missing_index_defaults_to_zero(self):
        fragment = parse_tool_fragment({"id": "a", "function": {"name": "f"}})
        assert fragment.index == 0
        assert fragment.name == "f"

    def test_null_fields_are_empty(self):
        fragment = parse_tool_fragment({"index": 1, "id": None, "function": {"name": None, "arguments": None}})
        assert (fragment.id, fragment.name, fragment.arguments) == ("", "", "")
