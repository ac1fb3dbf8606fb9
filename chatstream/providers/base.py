"""
Base provider types.

This module defines the base exception for provider-related failures.
"""

from typing import Optional


class ProviderError(Exception):
    """
    Base exception for provider-related errors.

    This should be raised for:
    - Transport failures reported by the event source
    - Payloads that cannot be parsed
    - Operations a provider does not support

    Attributes:
        message: Error message
        provider: Provider name
        status_code: HTTP status code if applicable
        retry_after: Seconds to wait before retry if applicable
        is_retryable: Whether this error should be retried by the caller
        original_error: The original exception if wrapped
    """

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: Optional[int] = None,
        retry_after: Optional[float] = None
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status_code = status_code
        self.retry_after = retry_after
        self.is_retryable = False  # Default, set by ErrorMapper
        self.original_error: Optional[BaseException] = None
