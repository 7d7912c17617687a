"""HTTP transport for the Translate API."""

from translate_sdk.infra.external.base_client import (
    RETRYABLE_EXCEPTIONS,
    BaseHTTPClient,
    error_from_response,
)

__all__ = [
    "RETRYABLE_EXCEPTIONS",
    "BaseHTTPClient",
    "error_from_response",
]
