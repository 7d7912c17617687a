"""Custom exception classes for the SDK."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorType(StrEnum):
    """Error kinds reported by the Translate API or the SDK itself."""

    # Authentication errors
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_API_KEY = "INVALID_API_KEY"

    # Rate limiting errors
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Job status errors
    JOB_NOT_FOUND = "JOB_NOT_FOUND"
    JOB_PROCESSING = "JOB_PROCESSING"
    JOB_NOT_READY = "JOB_NOT_READY"

    # Request/response errors
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_RESPONSE_FORMAT = "INVALID_RESPONSE_FORMAT"
    NETWORK_ERROR = "NETWORK_ERROR"

    # General errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"


ERROR_MESSAGES: dict[ErrorType, str] = {
    ErrorType.UNAUTHORIZED: "Unauthorized",
    ErrorType.INVALID_API_KEY: "Invalid API Key",
    ErrorType.RATE_LIMIT_EXCEEDED: "Rate limit exceeded",
    ErrorType.JOB_NOT_FOUND: "Job does not exist",
    ErrorType.JOB_PROCESSING: "Job is still processing. Please try again in a few moments.",
    ErrorType.JOB_NOT_READY: "Job not ready yet",
    ErrorType.INVALID_REQUEST: "Invalid request",
    ErrorType.INVALID_RESPONSE_FORMAT: "Invalid response format from API",
    ErrorType.NETWORK_ERROR: "Network error occurred",
    ErrorType.UNKNOWN_ERROR: "An unknown error occurred",
    ErrorType.VALIDATION_ERROR: "Validation error occurred",
}

ERROR_STATUS_CODES: dict[ErrorType, int] = {
    ErrorType.UNAUTHORIZED: 401,
    ErrorType.INVALID_API_KEY: 401,
    ErrorType.RATE_LIMIT_EXCEEDED: 429,
    ErrorType.JOB_NOT_FOUND: 404,
    ErrorType.JOB_PROCESSING: 425,
    ErrorType.JOB_NOT_READY: 425,
    ErrorType.INVALID_REQUEST: 400,
    ErrorType.INVALID_RESPONSE_FORMAT: 500,
    ErrorType.NETWORK_ERROR: 500,
    ErrorType.UNKNOWN_ERROR: 500,
    ErrorType.VALIDATION_ERROR: 400,
}


class SDKException(Exception):
    """Base SDK exception.

    All custom exceptions should inherit from this class.

    Attributes:
        detail: Human-readable error message.
        type: Error type identifier.
        extra: Additional context-specific information about the error.

    Example:
        raise SDKException(
            detail="Cursor could not be decoded",
            type="invalid-cursor",
            extra={"token": token},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "about:blank",
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize SDK exception.

        Args:
            detail: Human-readable error message.
            type: Error type identifier.
            extra: Additional context about the error.
        """
        self.detail = detail
        self.type = type
        self.extra = extra or {}
        super().__init__(detail)


class InvalidCursorError(SDKException):
    """Exception raised when a cursor token is malformed or unparsable.

    Example:
        raise InvalidCursorError(
            detail="Invalid cursor format",
            extra={"reason": "not base64"},
        )
    """

    def __init__(
        self,
        detail: str = "Invalid cursor format",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type="invalid-cursor", extra=extra)


class NoEarlierPageRetainedError(SDKException):
    """Exception raised when backward navigation needs an evicted history entry."""

    def __init__(
        self,
        detail: str = "No earlier page is retained in the navigation history",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type="no-earlier-page-retained", extra=extra)


class ChainNotFoundError(SDKException):
    """Exception raised when a chain name is not supported by an ecosystem.

    Example:
        raise ChainNotFoundError("eth-classic")
    """

    def __init__(self, chain_name: str) -> None:
        """Initialize chain not found exception.

        Args:
            chain_name: The name of the chain that was not found.
        """
        self.chain_name = chain_name
        super().__init__(
            detail=f'Chain with name "{chain_name}" not found.',
            type="chain-not-found",
            extra={"chain": chain_name},
        )


class TransactionError(SDKException):
    """Exception raised for any failed Translate API call.

    Attributes:
        errors: Field-keyed error messages returned by the API.
        error_type: Classified error kind.
        http_status_code: HTTP status of the failed response, if any.
        details: Raw response body or other diagnostic payload.

    Example:
        raise TransactionError(
            {"message": ["Rate limit exceeded"]},
            ErrorType.RATE_LIMIT_EXCEEDED,
            429,
        )
    """

    def __init__(
        self,
        errors: dict[str, list[str]],
        error_type: ErrorType = ErrorType.UNKNOWN_ERROR,
        http_status_code: int | None = None,
        details: Any = None,
    ) -> None:
        """Initialize transaction error.

        Args:
            errors: The validation errors.
            error_type: The type of error.
            http_status_code: The HTTP status code associated with the error.
            details: Additional error details.
        """
        self.errors = errors
        self.error_type = error_type
        self.http_status_code = http_status_code
        self.details = details
        super().__init__(
            detail=ERROR_MESSAGES.get(error_type, "Transaction validation error"),
            type=error_type.value.lower().replace("_", "-"),
            extra={"errors": errors, "http_status_code": http_status_code},
        )

    def is_error_type(self, error_type: ErrorType) -> bool:
        """Check if this error is of a specific type."""
        return self.error_type == error_type

    def is_job_not_found(self) -> bool:
        return self.error_type == ErrorType.JOB_NOT_FOUND

    def is_job_processing(self) -> bool:
        return self.error_type in (ErrorType.JOB_PROCESSING, ErrorType.JOB_NOT_READY)

    def is_rate_limited(self) -> bool:
        return self.error_type == ErrorType.RATE_LIMIT_EXCEEDED

    def is_unauthorized(self) -> bool:
        return self.error_type in (ErrorType.UNAUTHORIZED, ErrorType.INVALID_API_KEY)


__all__ = [
    "ERROR_MESSAGES",
    "ERROR_STATUS_CODES",
    "ChainNotFoundError",
    "ErrorType",
    "InvalidCursorError",
    "NoEarlierPageRetainedError",
    "SDKException",
    "TransactionError",
]
