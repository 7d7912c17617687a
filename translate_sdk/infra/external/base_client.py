"""Base HTTP client for the Translate API.

Provides:
- Connection pooling (one httpx.AsyncClient per ecosystem)
- Retry with exponential backoff for transport failures
- Request/response logging
- Mapping of failed responses to TransactionError
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from translate_sdk.core.exceptions import ErrorType, TransactionError
from translate_sdk.core.settings import ClientSettings, get_client_settings
from translate_sdk.utils.retry import RetryError, RetryStrategy, retry

logger = logging.getLogger(__name__)

ERROR_JOB_PROCESSING = "Job is still processing. Please try again in a few moments."

RETRYABLE_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


def _message_of(body: Any) -> str | None:
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str):
            return message
    return None


def error_from_response(status_code: int, body: Any) -> TransactionError:
    """Classify a failed API response.

    Args:
        status_code: HTTP status of the response.
        body: Decoded JSON body, or ``{"message": text}`` for non-JSON bodies.

    Returns:
        TransactionError carrying the most specific ErrorType available.
    """
    payload = body if isinstance(body, dict) else {}
    message = _message_of(body)

    explicit = payload.get("errorType")
    if isinstance(explicit, str) and explicit in ErrorType.__members__:
        errors = payload.get("errors") or {"message": [message or "Request failed"]}
        return TransactionError(errors, ErrorType(explicit), status_code, body)

    if status_code == 401 or message == "Unauthorized":
        return TransactionError(
            {"message": ["Invalid API Key"]}, ErrorType.INVALID_API_KEY, status_code, body
        )
    if status_code == 429 or message == "Rate limit exceeded":
        return TransactionError(
            {"message": ["Rate limit exceeded"]}, ErrorType.RATE_LIMIT_EXCEEDED, status_code, body
        )
    if message == "Job not ready yet":
        return TransactionError(
            {"message": ["Job is still processing. Please try again in a few moments."]},
            ErrorType.JOB_NOT_READY,
            status_code,
            body,
        )
    if message == "Invalid response format":
        return TransactionError(
            {"message": ["Invalid response format from API"]},
            ErrorType.INVALID_RESPONSE_FORMAT,
            status_code,
            body,
        )
    if message and "does not exist" in message:
        return TransactionError({"message": [message]}, ErrorType.JOB_NOT_FOUND, status_code, body)
    if (message and "Job is still processing" in message) or status_code == 425:
        return TransactionError(
            {"message": [message or ERROR_JOB_PROCESSING]},
            ErrorType.JOB_PROCESSING,
            status_code,
            body,
        )
    if isinstance(payload.get("errors"), dict):
        return TransactionError(payload["errors"], ErrorType.VALIDATION_ERROR, status_code, body)
    if payload.get("detail"):
        return TransactionError(
            {"message": [str(payload["detail"])]}, ErrorType.UNKNOWN_ERROR, status_code, body
        )
    return TransactionError(
        {"message": [message or "Request failed"]}, ErrorType.UNKNOWN_ERROR, status_code, body
    )


class BaseHTTPClient:
    """Base HTTP client for Translate API ecosystems.

    Example:
        ```python
        async with BaseHTTPClient("https://translate.noves.fi/evm", api_key) as client:
            chains = await client.get("chains")
        ```
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        settings: ClientSettings | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize HTTP client.

        Args:
            base_url: Base URL for the ecosystem, e.g. ``https://translate.noves.fi/evm``.
            api_key: API key sent in the ``apiKey`` header.
            settings: Timeout and retry configuration; defaults to cached settings.
            headers: Additional headers to include in all requests.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests).
        """
        self.settings = settings or get_client_settings()
        self.base_url = base_url.rstrip("/") + "/"
        self.default_headers = {**(headers or {}), "apiKey": api_key}
        self.strategy = RetryStrategy.from_settings(self.settings, RETRYABLE_EXCEPTIONS)

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.settings.timeout),
            headers=self.default_headers,
            limits=httpx.Limits(
                max_keepalive_connections=20,
                max_connections=100,
            ),
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client and release connections."""
        await self.client.aclose()

    async def __aenter__(self) -> BaseHTTPClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        return await self.client.request(method, path, params=params, json=json)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Endpoint path relative to the ecosystem base URL.
            params: Query parameters.
            json: JSON body.

        Returns:
            Decoded JSON response, or an empty dict for empty bodies.

        Raises:
            TransactionError: For error responses, undecodable bodies and
                transport failures that outlasted the retry policy.
        """
        logger.info(
            f"{method} request to {self.base_url}{path}",
            extra={"method": method, "path": path, "params": params},
        )

        start = time.perf_counter()
        try:
            response = await retry(self.strategy)(self._send)(method, path, params, json)
        except RetryError as e:
            raise TransactionError(
                {"message": [str(e.last_exception)]},
                ErrorType.NETWORK_ERROR,
                details={"attempts": e.attempts},
            ) from e
        except httpx.HTTPError as e:
            raise TransactionError({"message": [str(e)]}, ErrorType.NETWORK_ERROR) from e

        logger.info(
            f"{method} response from {self.base_url}{path}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": (time.perf_counter() - start) * 1000,
            },
        )

        body = self._decode(response)
        if response.is_error:
            raise error_from_response(response.status_code, body)
        return body

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            if response.is_error:
                return {"message": response.text}
            raise TransactionError(
                {"message": ["Invalid response format"]},
                ErrorType.INVALID_RESPONSE_FORMAT,
                response.status_code,
                response.text,
            ) from e

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("POST", path, params=params, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
