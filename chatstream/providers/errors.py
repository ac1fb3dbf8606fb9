"""
Error types and mapping utilities for streams.

This module provides the error taxonomy surfaced by a stream and the
mapping of raw event-source failures to ProviderError instances.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import httpx

from .base import ProviderError

if TYPE_CHECKING:
    from .kinds import ModelIden


class StreamTransportError(ProviderError):
    """The event source reported a failure. Terminal for the stream."""


class StreamParseError(ProviderError):
    """
    A message payload could not be parsed. Terminal for the stream.

    Attributes:
        model_iden: Identity of the stream that failed
        payload: The raw payload text that failed to parse
        original_error: The decoder failure (`json.JSONDecodeError`, or
            `RecursionError` for payloads nested too deeply)
    """

    def __init__(
        self,
        model_iden: ModelIden,
        payload: str,
        error: Union[ValueError, RecursionError],
    ):
        super().__init__(
            message=f"Failed to parse stream payload for {model_iden}: {error}",
            provider=model_iden.provider.value,
        )
        self.model_iden = model_iden
        self.payload = payload
        self.original_error = error


class UnsupportedOperationError(ProviderError):
    """A provider was asked for an operation it does not support."""

    def __init__(self, message: str, provider: str, operation: str):
        super().__init__(message=message, provider=provider)
        self.operation = operation


class ErrorMapper:
    """Maps event-source failures to standardized ProviderError."""

    # Common HTTP status codes that indicate retryable errors
    RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    RETRYABLE_PHRASES = ('rate limit', 'too many requests', 'quota exceeded', 'too_many_requests')

    @staticmethod
    def get_status_code(error: BaseException) -> Optional[int]:
        if isinstance(error, httpx.HTTPStatusError):
            return error.response.status_code
        status_code = getattr(error, 'status_code', None)
        if isinstance(status_code, int):
            return status_code
        return None

    @staticmethod
    def is_retryable(error: BaseException) -> bool:
        """
        Determine if an error is retryable.

        Streams are never retried here; the flag is for the caller's policy.

        Args:
            error: The exception to check

        Returns:
            bool: True if the error is retryable
        """
        status_code = ErrorMapper.get_status_code(error)
        if status_code is not None and status_code in ErrorMapper.RETRYABLE_STATUS_CODES:
            return True

        # Dropped or stalled connections
        if isinstance(error, (httpx.TimeoutException, httpx.ConnectError, httpx.RemoteProtocolError)):
            return True

        error_msg = str(error).lower()
        return any(phrase in error_msg for phrase in ErrorMapper.RETRYABLE_PHRASES)

    @staticmethod
    def get_retry_after(error: BaseException) -> Optional[float]:
        """
        Extract retry-after value from error if available.

        Args:
            error: The exception to check

        Returns:
            Optional[float]: Seconds to wait before retry, or None
        """
        response = getattr(error, 'response', None)
        headers = getattr(response, 'headers', None)
        if headers is not None:
            retry_after = headers.get('Retry-After')
            if retry_after:
                try:
                    return float(retry_after)
                except ValueError:
                    pass
        return None

    @staticmethod
    def map_transport_error(error: BaseException, model_iden: ModelIden) -> StreamTransportError:
        """
        Wrap an event-source error without altering it.

        Args:
            error: The error reported by the event source
            model_iden: Identity of the failing stream

        Returns:
            StreamTransportError carrying the original error
        """
        if isinstance(error, StreamTransportError):
            return error

        mapped = StreamTransportError(
            message=f"Stream transport error for {model_iden}: {error}",
            provider=model_iden.provider.value,
            status_code=ErrorMapper.get_status_code(error),
            retry_after=ErrorMapper.get_retry_after(error),
        )
        mapped.is_retryable = ErrorMapper.is_retryable(error)
        mapped.original_error = error
        return mapped

    @staticmethod
    def get_error_classification(error: ProviderError) -> Dict[str, Any]:
        """
        Get error classification details for logging.

        Args:
            error: The ProviderError to classify

        Returns:
            Dict with error classification details
        """
        original = error.original_error
        return {
            'provider': error.provider,
            'status_code': error.status_code,
            'is_retryable': error.is_retryable,
            'retry_after': error.retry_after,
            'error_type': type(original).__name__ if original is not None else None,
            'category': ErrorMapper._categorize_error(error),
        }

    @staticmethod
    def _categorize_error(error: ProviderError) -> str:
        if isinstance(error, StreamParseError):
            return 'parse'
        if isinstance(error, UnsupportedOperationError):
            return 'unsupported'

        if error.status_code:
            if error.status_code == 401:
                return 'authentication'
            elif error.status_code == 429:
                return 'rate_limit'
            elif error.status_code >= 500:
                return 'server_error'
            elif error.status_code >= 400:
                return 'client_error'

        if isinstance(error.original_error, httpx.TimeoutException):
            return 'timeout'
        if isinstance(error.original_error, httpx.TransportError):
            return 'network'

        return 'unknown'
