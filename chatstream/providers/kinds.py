"""
Provider identities and capabilities.

This module is the single place where provider identity decides behavior:
where an OpenAI-compatible stream reports usage, and which operations a
provider supports at all.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet

from .errors import UnsupportedOperationError


class ProviderKind(str, Enum):
    """Supported LLM providers."""
    OPENAI = "openai"
    GROQ = "groq"
    XAI = "xai"
    DEEPSEEK = "deepseek"
    OLLAMA = "ollama"
    TOGETHER = "together"
    FIREWORKS = "fireworks"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"
    COHERE = "cohere"

    @classmethod
    def parse(cls, value: "str | ProviderKind") -> "ProviderKind":
        """Resolve a provider name case-insensitively.

        Raises:
            UnsupportedOperationError: If the name is not a known provider
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedOperationError(
                f"Unknown provider '{value}'",
                provider=str(value),
                operation="resolve",
            ) from None


@dataclass(frozen=True)
class ModelIden:
    """Resolved identity of a stream: provider kind and model name."""
    provider: ProviderKind
    model_name: str

    def __str__(self) -> str:
        return f"{self.provider.value}/{self.model_name}"


class UsageLocation(str, Enum):
    """Where an OpenAI-compatible stream carries its usage block."""
    TRAILING_CHUNK = "trailing_chunk"
    """Base dialect: a usage-only chunk after the choices are exhausted."""

    FINISH_VENDOR_KEY = "finish_vendor_key"
    """Attached to the finish chunk under a vendor key (`x_groq.usage`)."""

    FINISH_USAGE_KEY = "finish_usage_key"
    """Attached to the finish chunk under the generic `usage` key."""


class Capability(str, Enum):
    STREAMING = "streaming"
    OPENAI_COMPATIBLE_STREAM = "openai_compatible_stream"
    IMAGE_GENERATION = "image_generation"


USAGE_LOCATIONS: Dict[ProviderKind, UsageLocation] = {
    ProviderKind.GROQ: UsageLocation.FINISH_VENDOR_KEY,
    ProviderKind.XAI: UsageLocation.FINISH_USAGE_KEY,
    ProviderKind.DEEPSEEK: UsageLocation.FINISH_USAGE_KEY,
}

_OPENAI_COMPATIBLE = frozenset({
    Capability.STREAMING,
    Capability.OPENAI_COMPATIBLE_STREAM,
})

CAPABILITIES: Dict[ProviderKind, FrozenSet[Capability]] = {
    ProviderKind.OPENAI: _OPENAI_COMPATIBLE | {Capability.IMAGE_GENERATION},
    ProviderKind.GROQ: _OPENAI_COMPATIBLE,
    ProviderKind.XAI: _OPENAI_COMPATIBLE,
    ProviderKind.DEEPSEEK: _OPENAI_COMPATIBLE,
    ProviderKind.OLLAMA: _OPENAI_COMPATIBLE,
    ProviderKind.TOGETHER: _OPENAI_COMPATIBLE,
    ProviderKind.FIREWORKS: _OPENAI_COMPATIBLE,
    # Native wire formats, decoded elsewhere
    ProviderKind.ANTHROPIC: frozenset({Capability.STREAMING}),
    ProviderKind.GEMINI: frozenset({Capability.STREAMING}),
    ProviderKind.COHERE: frozenset({Capability.STREAMING}),
}


def usage_location(kind: ProviderKind) -> UsageLocation:
    """Return where `kind` reports usage in an OpenAI-compatible stream."""
    return USAGE_LOCATIONS.get(kind, UsageLocation.TRAILING_CHUNK)


def supports(kind: ProviderKind, capability: Capability) -> bool:
    return capability in CAPABILITIES.get(kind, frozenset())


def require_capability(kind: ProviderKind, capability: Capability) -> None:
    """
    Reject an operation the provider cannot perform.

    This runs before any stream or request is constructed, so the failure is
    a configuration error rather than an in-stream error.

    Raises:
        UnsupportedOperationError: If `kind` lacks `capability`
    """
    if not supports(kind, capability):
        raise UnsupportedOperationError(
            f"Provider '{kind.value}' does not support {capability.value}",
            provider=kind.value,
            operation=capability.value,
        )
