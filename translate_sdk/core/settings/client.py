"""HTTP client settings for the Translate API.

Environment variables use TRANSLATE_ prefix.
Example: TRANSLATE_API_KEY=..., TRANSLATE_TIMEOUT=10
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Connection and retry configuration for ecosystem clients.

    Attributes:
        base_url: Root URL of the Translate API; the ecosystem is appended.
        api_key: API key sent in the ``apiKey`` header.
        timeout: Request timeout in seconds.
        max_retries: Retries after the first attempt for transport failures.
        retry_initial_delay: First backoff delay in seconds.
        retry_max_delay: Upper bound for a single backoff delay.
    """

    base_url: str = Field(
        default="https://translate.noves.fi",
        description="Root URL of the Translate API",
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="API key sent with every request",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        le=600,
        description="Request timeout in seconds",
    )
    max_retries: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Retries after the first attempt for transport failures",
    )
    retry_initial_delay: float = Field(
        default=1.0,
        ge=0,
        description="Initial backoff delay in seconds",
    )
    retry_max_delay: float = Field(
        default=10.0,
        ge=0,
        description="Maximum backoff delay in seconds",
    )

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
