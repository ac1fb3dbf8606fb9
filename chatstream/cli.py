"""CLI entry point for chatstream."""

import argparse
import asyncio
import json
import sys
from typing import AsyncIterator, Optional

from .api.client import open_chat_stream, resolve_model_iden
from .config.settings import load_capture_defaults
from .models.events import (
    ChatStreamEvent,
    StreamChunkEvent,
    StreamEndEvent,
    StreamReasoningChunkEvent,
    ToolChunk,
)
from .models.options import CaptureOptions
from .providers.base import ProviderError
from .streaming.sources import aiter_sse


async def _read_lines(path: str) -> AsyncIterator[str]:
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            yield line


def _print_text_event(event: ChatStreamEvent) -> None:
    if isinstance(event, StreamChunkEvent):
        if isinstance(event.chunk, ToolChunk):
            tool = event.chunk.tool
            print(f"\n[tool #{event.chunk.index}] {tool.id} {tool.name} {tool.arguments}", end="", flush=True)
        else:
            print(event.get_text(), end="", flush=True)
    elif isinstance(event, StreamReasoningChunkEvent):
        print(event.get_text(), end="", flush=True)
    elif isinstance(event, StreamEndEvent):
        print()
        summary = event.to_dict()
        for key in ("captured_usage", "captured_content", "captured_reasoning_content"):
            if summary[key] is not None:
                print(f"{key}: {summary[key]}")
        for tool in summary["captured_tools"]:
            print(f"captured_tool: {json.dumps(tool)}")


async def replay(path: str, provider: str, model: str, options: CaptureOptions,
                 as_json: bool = False) -> int:
    """Replay a recorded SSE transcript and print its normalized events."""
    model_iden = resolve_model_iden(provider, model)
    stream = open_chat_stream(aiter_sse(_read_lines(path)), model_iden, options)

    try:
        async for event in stream:
            if as_json:
                print(json.dumps(event.to_dict()))
            else:
                _print_text_event(event)
    except ProviderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="chatstream CLI")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    replay_parser = subparsers.add_parser('replay', help='Normalize a recorded SSE transcript')
    replay_parser.add_argument('file', help='Path to the transcript (raw SSE lines)')
    replay_parser.add_argument('--provider', default='openai', help='Provider kind (e.g., "groq")')
    replay_parser.add_argument('--model', default='unknown', help='Model name for log records')
    replay_parser.add_argument('--capture-content', action='store_true', help='Capture content')
    replay_parser.add_argument('--capture-reasoning', action='store_true', help='Capture reasoning')
    replay_parser.add_argument('--capture-usage', action='store_true', help='Capture usage')
    replay_parser.add_argument('--capture-tools', action='store_true', help='Capture tool calls')
    replay_parser.add_argument('--json', action='store_true', help='Print one JSON object per event')

    args = parser.parse_args(argv)

    if args.command == 'replay':
        defaults = load_capture_defaults()
        options = CaptureOptions(
            capture_content=args.capture_content or defaults.capture_content,
            capture_reasoning_content=args.capture_reasoning or defaults.capture_reasoning_content,
            capture_usage=args.capture_usage or defaults.capture_usage,
            capture_tools=args.capture_tools or defaults.capture_tools,
        )
        try:
            return asyncio.run(replay(args.file, args.provider, args.model, options, args.json))
        except ProviderError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
