"""Provider identities, capabilities and error types."""

from .base import ProviderError
from .errors import (
    ErrorMapper,
    StreamParseError,
    StreamTransportError,
    UnsupportedOperationError,
)
from .kinds import (
    Capability,
    ModelIden,
    ProviderKind,
    UsageLocation,
    require_capability,
    supports,
    usage_location,
)

__all__ = [
    "ModelIden",
    "ProviderError",
    "ErrorMapper",
    "StreamParseError",
    "StreamTransportError",
    "UnsupportedOperationError",
    "Capability",
    "ProviderKind",
    "UsageLocation",
    "require_capability",
    "supports",
    "usage_location",
]
