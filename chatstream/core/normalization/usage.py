"""
Usage normalization module.

This module converts the usage blocks found in provider stream chunks into
the single `Usage` model. Normalization is permissive: a missing or
malformed block yields an empty `Usage()` instead of an error.
"""

from typing import Any, Dict, Optional

from ...models.usage import CompletionTokensDetails, PromptTokensDetails, Usage
from ...providers.kinds import ProviderKind


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _first_int(data: Dict[str, Any], *keys: str) -> Optional[int]:
    for key in keys:
        value = _as_int(data.get(key))
        if value is not None:
            return value
    return None


def _prompt_details(usage_data: Dict[str, Any], provider: ProviderKind) -> Optional[PromptTokensDetails]:
    details = usage_data.get("prompt_tokens_details")
    details = details if isinstance(details, dict) else {}

    cached = _as_int(details.get("cached_tokens"))
    if cached is None and provider == ProviderKind.DEEPSEEK:
        # DeepSeek reports cache hits at the top level
        cached = _as_int(usage_data.get("prompt_cache_hit_tokens"))
    if cached is None:
        cached = _as_int(usage_data.get("cached_tokens"))

    result = PromptTokensDetails(
        cached_tokens=cached,
        audio_tokens=_as_int(details.get("audio_tokens")),
    )
    return None if result.is_empty() else result


def _completion_details(usage_data: Dict[str, Any]) -> Optional[CompletionTokensDetails]:
    details = usage_data.get("completion_tokens_details")
    if not isinstance(details, dict):
        return None

    result = CompletionTokensDetails(
        reasoning_tokens=_as_int(details.get("reasoning_tokens")),
        audio_tokens=_as_int(details.get("audio_tokens")),
        accepted_prediction_tokens=_as_int(details.get("accepted_prediction_tokens")),
        rejected_prediction_tokens=_as_int(details.get("rejected_prediction_tokens")),
    )
    return None if result.is_empty() else result


def normalize_usage(usage_data: Any, provider: ProviderKind) -> Usage:
    """
    Normalize a provider usage block into a `Usage`.

    OpenAI-compatible names are read first, with `input_tokens` and
    `output_tokens` accepted as aliases. When the provider omits
    `total_tokens` it is computed from the prompt and completion counts.

    Args:
        usage_data: Raw usage block from the chunk (any JSON value)
        provider: Provider kind for provider-specific fields

    Returns:
        Normalized Usage, empty when `usage_data` is not a dict
    """
    if not isinstance(usage_data, dict):
        return Usage()

    prompt_tokens = _first_int(usage_data, "prompt_tokens", "input_tokens")
    completion_tokens = _first_int(usage_data, "completion_tokens", "output_tokens")
    total_tokens = _first_int(usage_data, "total_tokens")

    if total_tokens is None and (prompt_tokens is not None or completion_tokens is not None):
        total_tokens = (prompt_tokens or 0) + (completion_tokens or 0)

    return Usage(
        prompt_tokens=prompt_tokens,
        prompt_tokens_details=_prompt_details(usage_data, provider),
        completion_tokens=completion_tokens,
        completion_tokens_details=_completion_details(usage_data),
        total_tokens=total_tokens,
    )
