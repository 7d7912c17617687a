"""Pagination settings for transaction pages.

Environment variables use TRANSLATE_PAGINATION_ prefix.
Example: TRANSLATE_PAGINATION_MAX_NAVIGATION_HISTORY=25
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        max_navigation_history: Number of visited pages whose options are
            retained for backward navigation. This also bounds how many
            entries a cursor token carries, so raising it trades larger
            tokens for deeper ``previous()`` support.
    """

    max_navigation_history: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Visited pages retained for backward navigation",
    )

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATE_PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
