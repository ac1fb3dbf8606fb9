"""
Streamer for OpenAI-compatible chat completion streams.

`OpenAIStreamer` drives an event source and turns its messages into
intermediate stream events. Each `__anext__` call pulls from the source
until it has exactly one event to return; decoding, tool-call merging and
capture bookkeeping are synchronous, so the only suspension point is the
source itself.
"""

from __future__ import annotations

import logging
import uuid
from typing import NoReturn, Optional

from ...models.options import CaptureOptions
from ...models.usage import Usage
from ...observability.logging import StreamLogger
from ...streaming.aggregator import CaptureAggregator
from ...streaming.assembler import ToolCallAssembler
from ...streaming.sources import EventSource, SourceError, SourceMessage, SourceOpen
from ...streaming.types import (
    InterContentChunk,
    InterReasoningChunk,
    InterStreamChunk,
    InterStreamChunkTool,
    InterStreamEnd,
    InterStreamEvent,
    InterStreamStart,
    InterToolChunk,
)
from ..kinds import ModelIden
from ..errors import ErrorMapper, StreamParseError
from .decoder import (
    ContentDelta,
    DoneSignal,
    EmptyChoice,
    FinishSignal,
    ReasoningDelta,
    ToolCallDelta,
    UsagePayload,
    decode_message,
)


class OpenAIStreamer:
    """
    State machine over one OpenAI-compatible event source.

    The streamer is Active until it sees the `[DONE]` sentinel, an error,
    or the end of the source; it is Done afterwards and never pulls from
    the source again.
    """

    def __init__(
        self,
        source: EventSource,
        model_iden: ModelIden,
        options: Optional[CaptureOptions] = None,
        stream_id: Optional[str] = None,
    ):
        """
        Args:
            source: Event source yielding SourceOpen/SourceMessage/SourceError
            model_iden: Provider kind and model; the kind selects where usage is read
            options: Capture options, nothing captured when omitted
            stream_id: Identifier for log records, generated when omitted
        """
        self.model_iden = model_iden
        self.options = options or CaptureOptions()
        self.stream_id = stream_id or str(uuid.uuid4())[:8]

        self._source = source
        self._done = False
        self._captured = CaptureAggregator(self.options)
        self._tool_calls = ToolCallAssembler()
        self._events_emitted = 0
        self._messages_seen = 0

        self.logger = StreamLogger(
            model_iden.provider.value,
            model=model_iden.model_name,
            stream_id=self.stream_id,
        )

    @property
    def done(self) -> bool:
        return self._done

    def __aiter__(self) -> "OpenAIStreamer":
        return self

    async def __anext__(self) -> InterStreamEvent:
        if self._done:
            # Polling a finished source is undefined for the collaborator
            raise StopAsyncIteration

        while True:
            try:
                source_event = await self._source.__anext__()
            except StopAsyncIteration:
                self._done = True
                self.logger.debug("Event source ended without end-of-stream sentinel")
                raise
            except Exception as e:
                self._raise_transport(e)

            if isinstance(source_event, SourceOpen):
                return self._emit(InterStreamStart())

            if isinstance(source_event, SourceError):
                self._raise_transport(source_event.error)

            if isinstance(source_event, SourceMessage):
                event = self._handle_message(source_event.data)
                if event is not None:
                    return self._emit(event)

    def _handle_message(self, data: str) -> Optional[InterStreamEvent]:
        """Apply one message; returns the event to emit, or None to keep pulling."""
        self._messages_seen += 1
        if self.logger.is_enabled_for(logging.DEBUG):
            self.logger.debug(f"Message: {data!r}")

        try:
            decoded = decode_message(data, self.model_iden.provider)
        except (ValueError, RecursionError) as e:
            # JSONDecodeError is a ValueError; deep nesting exhausts the decoder
            self._done = True
            error = StreamParseError(self.model_iden, data, e)
            self.logger.error("Failed to parse stream payload", error=e)
            raise error from e

        if isinstance(decoded, DoneSignal):
            self._done = True
            return self._finish()

        if isinstance(decoded, FinishSignal):
            # More messages follow before the sentinel
            self._captured.set_usage(decoded.usage)
            return None

        if isinstance(decoded, ContentDelta):
            self._captured.add_content(decoded.text)
            return InterStreamChunk(InterContentChunk(decoded.text))

        if isinstance(decoded, ToolCallDelta):
            fragment = decoded.fragment
            self._captured.add_tool(self._tool_calls.merge(fragment))
            return InterStreamChunk(InterToolChunk(
                index=fragment.index,
                tool=InterStreamChunkTool(
                    id=fragment.id,
                    name=fragment.name,
                    arguments=fragment.arguments,
                ),
            ))

        if isinstance(decoded, ReasoningDelta):
            self._captured.add_reasoning(decoded.text)
            return InterReasoningChunk(decoded.text)

        if isinstance(decoded, EmptyChoice):
            self.logger.warning("Empty choice content")
            return None

        if isinstance(decoded, UsagePayload):
            self._captured.set_usage(decoded.usage)
            return None

        return None

    def _finish(self) -> InterStreamEnd:
        """Flush the in-flight tool call and move the captured data out."""
        self._captured.add_tool(self._tool_calls.flush())
        if not self._captured.has_usage:
            # Usage was never reported
            self._captured.set_usage(Usage())
        end = self._captured.take()

        if end.captured_usage is not None:
            self.logger.log_usage(end.captured_usage)
        self.logger.log_stream_summary({
            "events": self._events_emitted + 1,
            "messages": self._messages_seen,
            "captured_tools": len(end.captured_tools) or None,
        })
        return end

    def _emit(self, event: InterStreamEvent) -> InterStreamEvent:
        self._events_emitted += 1
        return event

    def _raise_transport(self, error: BaseException) -> NoReturn:
        self._done = True
        mapped = ErrorMapper.map_transport_error(error, self.model_iden)
        self.logger.error(
            "Stream transport error",
            error=error,
            retryable=mapped.is_retryable,
        )
        if mapped is error:
            raise mapped
        raise mapped from error

    async def aclose(self) -> None:
        """
        Abandon the stream and release the event source.

        Nothing captured so far is flushed.
        """
        self._done = True
        aclose = getattr(self._source, "aclose", None)
        if aclose is not None:
            await aclose()
