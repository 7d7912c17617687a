"""Unit tests for pydantic-settings configuration."""
from __future__ import annotations

from pydantic import ValidationError
import pytest

from translate_sdk.core.settings import (
    ClientSettings,
    PaginationSettings,
    get_client_settings,
    get_pagination_settings,
)


@pytest.mark.unit
class TestSettings:
    """Tests for settings defaults, environment loading and caching."""

    def test_client_defaults(self, monkeypatch):
        monkeypatch.delenv("TRANSLATE_API_KEY", raising=False)

        settings = ClientSettings(_env_file=None)

        assert settings.base_url == "https://translate.noves.fi"
        assert settings.api_key is None
        assert settings.max_retries == 3

    def test_client_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TRANSLATE_API_KEY", "from-env")
        monkeypatch.setenv("TRANSLATE_TIMEOUT", "12.5")

        settings = get_client_settings()

        assert settings.api_key.get_secret_value() == "from-env"
        assert settings.timeout == 12.5

    def test_api_key_is_not_printed(self):
        settings = ClientSettings(api_key="super-secret")

        assert "super-secret" not in repr(settings)

    def test_pagination_default_and_bounds(self):
        assert PaginationSettings().max_navigation_history == 10
        with pytest.raises(ValidationError):
            PaginationSettings(max_navigation_history=0)

    def test_loaders_are_cached(self):
        assert get_pagination_settings() is get_pagination_settings()

    def test_settings_are_frozen(self):
        settings = PaginationSettings()

        with pytest.raises(ValidationError):
            settings.max_navigation_history = 5
