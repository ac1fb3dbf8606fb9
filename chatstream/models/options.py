"""
Capture configuration models.

This module provides the options that decide which parts of a stream are
retained for the final `StreamEnd` summary. Every delta is always relayed to
the caller; capture only controls what is additionally accumulated.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CaptureOptions:
    """
    Per-stream capture configuration.

    The options are fixed for the lifetime of a stream.
    """

    capture_content: bool = False
    """Accumulate content deltas into `StreamEnd.captured_content`."""

    capture_reasoning_content: bool = False
    """Accumulate reasoning deltas into `StreamEnd.captured_reasoning_content`."""

    capture_usage: bool = False
    """Capture usage accounting into `StreamEnd.captured_usage`."""

    capture_tools: bool = False
    """Collect finalized tool calls into `StreamEnd.captured_tools`."""

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "CaptureOptions":
        """Create CaptureOptions from dictionary.

        Args:
            config: Configuration dictionary

        Returns:
            CaptureOptions instance
        """
        # Filter out unknown keys
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_config = {k: bool(v) for k, v in config.items() if k in known_fields}
        return cls(**filtered_config)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "capture_content": self.capture_content,
            "capture_reasoning_content": self.capture_reasoning_content,
            "capture_usage": self.capture_usage,
            "capture_tools": self.capture_tools,
        }

    def captures_anything(self) -> bool:
        return (
            self.capture_content
            or self.capture_reasoning_content
            or self.capture_usage
            or self.capture_tools
        )


# Preset configurations for common use cases

DEFAULT_CAPTURE = CaptureOptions()
"""Relay only, nothing retained for the end summary."""

CAPTURE_ALL = CaptureOptions(
    capture_content=True,
    capture_reasoning_content=True,
    capture_usage=True,
    capture_tools=True,
)
"""Retain everything the stream carries."""
