"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: isolated environment and settings cache
    - Pagination Fixtures: scripted in-memory PageFetcher
    - HTTP Fixtures: httpx.MockTransport routing helpers
"""

from __future__ import annotations

from collections.abc import Callable
import os
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from translate_sdk.core.pagination import FetchedPage, PageOptions
from translate_sdk.core.settings import ClientSettings, clear_settings_cache

# Ensure tests never read a developer's real configuration
os.environ.setdefault("TRANSLATE_API_KEY", "test-api-key")
os.environ.setdefault("TRANSLATE_LOG_CONSOLE_ENABLED", "false")


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Clear cached settings before and after every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def client_settings() -> ClientSettings:
    """Client settings with instant retries for transport failure tests."""
    return ClientSettings(
        base_url="https://translate.test",
        api_key="test-api-key",
        timeout=5,
        max_retries=2,
        retry_initial_delay=0,
        retry_max_delay=0,
    )


# ============================================================================
# Pagination Fixtures
# ============================================================================


class ScriptedFetcher:
    """In-memory PageFetcher serving a fixed list of pages.

    Page ``i`` is selected by ``PageOptions.page_number`` (absent means 0)
    and links to page ``i + 1`` until the last page. ``fetch_page`` is an
    AsyncMock so tests can assert on awaits and inject failures.

    Example:
        fetcher = ScriptedFetcher([["a", "b"], ["c"]])
        page = await TransactionsPage.create(fetcher, "eth", "0xabc")
        fetcher.fetch_page.assert_awaited_once()
    """

    def __init__(self, pages: list[list[Any]]) -> None:
        self.pages = pages
        self.fetch_page = AsyncMock(side_effect=self._serve)

    async def _serve(self, chain: str, account_address: str, options: PageOptions) -> FetchedPage:
        index = options.page_number or 0
        next_keys = options.merge(page_number=index + 1) if index + 1 < len(self.pages) else None
        return FetchedPage(items=list(self.pages[index]), next_page_keys=next_keys)

    def fail_next(self, exc: Exception) -> None:
        """Make the next fetch raise ``exc``, then resume serving pages."""
        serve = self._serve

        async def fail_once(*args: Any, **kwargs: Any) -> FetchedPage:
            self.fetch_page.side_effect = serve
            raise exc

        self.fetch_page.side_effect = fail_once

    @property
    def requested(self) -> list[PageOptions]:
        return [call.args[2] for call in self.fetch_page.await_args_list]


def make_pages(count: int, size: int = 5) -> list[list[str]]:
    """Pages of string items ``p{page}-{n}``."""
    return [[f"p{page}-{n}" for n in range(size)] for page in range(count)]


@pytest.fixture
def pages() -> list[list[str]]:
    """Three full pages and a short final page."""
    return [*make_pages(3), ["p3-0", "p3-1"]]


@pytest.fixture
def fetcher(pages) -> ScriptedFetcher:
    return ScriptedFetcher(pages)


@pytest.fixture
def make_fetcher() -> Callable[..., ScriptedFetcher]:
    """Factory for fetchers over ``count`` generated pages."""

    def factory(count: int, size: int = 5) -> ScriptedFetcher:
        return ScriptedFetcher(make_pages(count, size))

    return factory


# ============================================================================
# HTTP Fixtures
# ============================================================================


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """Build an httpx.MockTransport from a handler and record requests.

    Example:
        transport = mock_transport(lambda request: httpx.Response(200, json=[]))
        client = EVMTranslate("key", settings=client_settings, transport=transport)
        ...
        assert transport.requests[0].url.path == "/evm/chains"
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        transport = httpx.MockTransport(recording)
        transport.requests = requests
        return transport

    return factory


@pytest.fixture
def scripted() -> type[ScriptedFetcher]:
    """The ScriptedFetcher class, for tests that need custom page contents."""
    return ScriptedFetcher
