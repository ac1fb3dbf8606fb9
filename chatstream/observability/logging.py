"""
Structured logging utility for stream processing.

This module provides a consistent logging interface for streamers,
ensuring structured logging with standard fields like provider, model,
and stream_id.
"""

import logging
from typing import Any, Dict, Optional

from ..models.usage import Usage


class StreamLogger:
    """Structured logger for provider streamers."""

    def __init__(self, provider_name: str, model: Optional[str] = None,
                 stream_id: Optional[str] = None):
        """
        Initialize logger for a specific provider.

        Args:
            provider_name: Name of the provider (e.g., "openai", "groq")
            model: Model name attached to every record
            stream_id: Stream identifier attached to every record
        """
        self.provider = provider_name
        self.model = model
        self.stream_id = stream_id
        self.logger = logging.getLogger(f"chatstream.providers.{provider_name}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"provider={self.provider}"]
        if self.model:
            fields.append(f"model={self.model}")
        if self.stream_id:
            fields.append(f"stream_id={self.stream_id}")

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def debug(self, message: str, **kwargs):
        """Log debug message with structured fields."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message, **kwargs))

    def info(self, message: str, **kwargs):
        """Log info message with structured fields."""
        self.logger.info(self._format_message(message, **kwargs))

    def warning(self, message: str, **kwargs):
        """Log warning message with structured fields."""
        self.logger.warning(self._format_message(message, **kwargs))

    def error(self, message: str, error: Optional[BaseException] = None, **kwargs):
        """Log error message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)

        self.logger.error(self._format_message(message, **kwargs))

    def log_usage(self, usage: Usage):
        """Log token usage information."""
        cached = None
        if usage.prompt_tokens_details is not None:
            cached = usage.prompt_tokens_details.cached_tokens
        reasoning = None
        if usage.completion_tokens_details is not None:
            reasoning = usage.completion_tokens_details.reasoning_tokens

        self.info(
            "Token usage",
            prompt_tokens=usage.prompt_tokens,
            completion_tokens=usage.completion_tokens,
            total_tokens=usage.total_tokens,
            cached_tokens=cached or None,
            reasoning_tokens=reasoning or None,
        )

    def log_stream_summary(self, summary: Dict[str, Any]):
        """Log the counters of a finished stream."""
        self.info("Stream completed", **summary)
