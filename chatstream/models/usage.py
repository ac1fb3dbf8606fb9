"""Token usage records shared by every provider."""

from typing import Optional

from pydantic import BaseModel


class PromptTokensDetails(BaseModel):
    """Breakdown of the prompt token count."""
    cached_tokens: Optional[int] = None
    audio_tokens: Optional[int] = None

    def is_empty(self) -> bool:
        return self.cached_tokens is None and self.audio_tokens is None


class CompletionTokensDetails(BaseModel):
    """Breakdown of the completion token count."""
    reasoning_tokens: Optional[int] = None
    audio_tokens: Optional[int] = None
    accepted_prediction_tokens: Optional[int] = None
    rejected_prediction_tokens: Optional[int] = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.reasoning_tokens,
                self.audio_tokens,
                self.accepted_prediction_tokens,
                self.rejected_prediction_tokens,
            )
        )


class Usage(BaseModel):
    """
    Normalized usage accounting.

    Every field is optional: providers report different subsets, and an
    absent usage block normalizes to an empty `Usage()` rather than an error.
    """
    prompt_tokens: Optional[int] = None
    prompt_tokens_details: Optional[PromptTokensDetails] = None
    completion_tokens: Optional[int] = None
    completion_tokens_details: Optional[CompletionTokensDetails] = None
    total_tokens: Optional[int] = None

    def compact(self) -> "Usage":
        """Return a copy without empty detail records."""
        update = {}
        if self.prompt_tokens_details is not None and self.prompt_tokens_details.is_empty():
            update["prompt_tokens_details"] = None
        if self.completion_tokens_details is not None and self.completion_tokens_details.is_empty():
            update["completion_tokens_details"] = None
        return self.model_copy(update=update)

    def is_empty(self) -> bool:
        return (
            self.prompt_tokens is None
            and self.completion_tokens is None
            and self.total_tokens is None
        )
