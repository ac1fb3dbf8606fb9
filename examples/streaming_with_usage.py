"""
Example: Streaming with Usage Data

This example streams a chat completion from an OpenAI-compatible host and
reads the captured content and usage from the end event.

    OPENAI_API_KEY=... python examples/streaming_with_usage.py
    GROQ_API_KEY=... python examples/streaming_with_usage.py groq llama-3.3-70b-versatile
"""

import asyncio
import os
import sys

import httpx

from chatstream import (
    CaptureOptions,
    StreamChunkEvent,
    StreamEndEvent,
    resolve_model_iden,
    stream_from_response,
)

ENDPOINTS = {
    "openai": ("https://api.openai.com/v1/chat/completions", "OPENAI_API_KEY"),
    "groq": ("https://api.groq.com/openai/v1/chat/completions", "GROQ_API_KEY"),
    "xai": ("https://api.x.ai/v1/chat/completions", "XAI_API_KEY"),
    "deepseek": ("https://api.deepseek.com/chat/completions", "DEEPSEEK_API_KEY"),
}


async def example_streaming_with_usage(provider: str, model: str):
    """Stream a haiku and print the usage captured at the end."""
    print(f"=== Streaming with Usage ({provider}/{model}) ===\n")

    url, key_var = ENDPOINTS[provider]
    body = {
        "model": model,
        "messages": [{"role": "user", "content": "Write a haiku about Python programming"}],
        "stream": True,
    }
    # The base dialect only sends usage when asked for it
    if provider == "openai":
        body["stream_options"] = {"include_usage": True}

    model_iden = resolve_model_iden(provider, model)
    options = CaptureOptions(capture_content=True, capture_usage=True)

    async with httpx.AsyncClient(timeout=60) as client:
        headers = {"Authorization": f"Bearer {os.environ[key_var]}"}
        async with client.stream("POST", url, json=body, headers=headers) as response:
            async with stream_from_response(response, model_iden, options) as stream:
                async for event in stream:
                    if isinstance(event, StreamChunkEvent):
                        print(event.get_text(), end="", flush=True)
                    elif isinstance(event, StreamEndEvent):
                        usage = event.end.captured_usage
                        print("\n\nUsage information:")
                        if usage is None:
                            print("  (not reported)")
                        else:
                            print(f"  Prompt tokens: {usage.prompt_tokens}")
                            print(f"  Completion tokens: {usage.completion_tokens}")
                            print(f"  Total tokens: {usage.total_tokens}")


if __name__ == "__main__":
    provider = sys.argv[1] if len(sys.argv) > 1 else "openai"
    model = sys.argv[2] if len(sys.argv) > 2 else "gpt-4o-mini"
    asyncio.run(example_streaming_with_usage(provider, model))
