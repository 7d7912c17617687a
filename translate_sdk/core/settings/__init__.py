"""Pydantic Settings v2 configuration.

Each domain has its own frozen settings class and environment prefix:
- ClientSettings (TRANSLATE_): base URL, API key, timeout, retries
- PaginationSettings (TRANSLATE_PAGINATION_): navigation history depth
- LoggingSettings (TRANSLATE_LOG_): level and output format

Import settings via cached loaders:
    from translate_sdk.core.settings import get_client_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .client import ClientSettings
from .loader import (
    clear_settings_cache,
    get_client_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings

__all__ = [
    "ClientSettings",
    "LoggingSettings",
    "PaginationSettings",
    "clear_settings_cache",
    "get_client_settings",
    "get_logging_settings",
    "get_pagination_settings",
]
