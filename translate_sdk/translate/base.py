"""Base class for ecosystem clients.

Each ecosystem client is a ``PageFetcher``: it issues the HTTP call for one
page of an account's transactions and converts the ecosystem's native
next-page signal into ``PageOptions | None``. Subclasses only override how
that signal is read from the response body.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from translate_sdk.core.exceptions import ChainNotFoundError, ErrorType, TransactionError
from translate_sdk.core.pagination import FetchedPage, PageOptions, TransactionsPage
from translate_sdk.core.settings import ClientSettings, get_client_settings
from translate_sdk.infra.external import BaseHTTPClient
from translate_sdk.utils.urls import parse_next_page_url

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

Transaction = dict[str, Any]


def invalid_response(reason: str = "Invalid response format") -> TransactionError:
    return TransactionError({"message": [reason]}, ErrorType.INVALID_RESPONSE_FORMAT)


def view_as_params(address: str | None) -> dict[str, str] | None:
    return {"viewAsAccountAddress": address} if address else None


class BaseTranslate:
    """Translate API client for one ecosystem.

    Usage:
        async with EVMTranslate(api_key) as evm:
            page = await evm.get_transactions("eth", "0xabc...", PageOptions(page_size=10))
            async for tx in page:
                print(tx["classificationData"]["description"])
    """

    ecosystem: ClassVar[str]

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create an ecosystem client.

        Args:
            api_key: API key; falls back to ``TRANSLATE_API_KEY``.
            settings: Client settings; defaults to cached settings.
            transport: Optional httpx transport for tests.

        Raises:
            ValueError: If no API key is provided or configured.
        """
        settings = settings or get_client_settings()
        if api_key is None and settings.api_key is not None:
            api_key = settings.api_key.get_secret_value()
        if not api_key:
            msg = "API key is required"
            raise ValueError(msg)

        self.http = BaseHTTPClient(
            f"{settings.base_url.rstrip('/')}/{self.ecosystem}",
            api_key,
            settings=settings,
            transport=transport,
        )

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ──────────────────────────────────────────────────────────────
    # Chains and single transactions
    # ──────────────────────────────────────────────────────────────

    async def get_chains(self) -> list[dict[str, Any]]:
        """Chains of this ecosystem currently supported by the API."""
        result = await self.http.get("chains")
        if not isinstance(result, list):
            raise invalid_response()
        return result

    async def get_chain(self, name: str) -> dict[str, Any]:
        """Look up a chain by name (case-insensitive).

        Raises:
            ChainNotFoundError: If no supported chain has that name.
        """
        for chain in await self.get_chains():
            if str(chain.get("name", "")).lower() == name.lower():
                return chain
        raise ChainNotFoundError(name)

    async def get_transaction(self, chain: str, tx_id: str) -> Transaction:
        """Classified transaction for a hash or signature."""
        return await self.get_object(f"{chain}/tx/{tx_id}")

    async def get_object(
        self,
        path: str,
        params: dict[str, str] | None = None,
        required: tuple[str, ...] = (),
    ) -> dict[str, Any]:
        """GET ``path`` and require a JSON object carrying ``required`` keys."""
        result = await self.http.get(path, params=params)
        if not isinstance(result, dict) or any(key not in result for key in required):
            raise invalid_response()
        return result

    # ──────────────────────────────────────────────────────────────
    # Paging
    # ──────────────────────────────────────────────────────────────

    def transactions_endpoint(self, chain: str, account_address: str) -> str:
        return f"{chain}/txs/{account_address}"

    async def fetch_page(
        self,
        chain: str,
        account_address: str,
        options: PageOptions,
    ) -> FetchedPage[Transaction]:
        """Fetch one page of an account's transactions."""
        return await self.fetch_endpoint_page(
            self.transactions_endpoint(chain, account_address),
            options,
        )

    async def fetch_endpoint_page(
        self,
        endpoint: str,
        options: PageOptions,
    ) -> FetchedPage[Transaction]:
        body = await self.http.get(endpoint, params=options.to_query_params())
        if not isinstance(body, dict) or not isinstance(body.get("items"), list):
            raise invalid_response()

        next_page_keys = self.next_page_keys(body, options)
        logger.debug(
            "Fetched transactions page",
            extra={
                "ecosystem": self.ecosystem,
                "endpoint": endpoint,
                "item_count": len(body["items"]),
                "has_next_page": next_page_keys is not None,
            },
        )
        return FetchedPage(items=body["items"], next_page_keys=next_page_keys)

    def next_page_keys(self, body: dict[str, Any], options: PageOptions) -> PageOptions | None:
        """Read ``hasNextPage`` + ``nextPageUrl`` from a flat response body."""
        next_url = body.get("nextPageUrl")
        if not body.get("hasNextPage") or not next_url:
            return None
        return parse_next_page_url(next_url, options)

    async def get_transactions(
        self,
        chain: str,
        account_address: str,
        options: PageOptions | None = None,
        *,
        max_navigation_history: int | None = None,
    ) -> TransactionsPage[Transaction]:
        """First page of an account's transactions as a pagination handle.

        Args:
            chain: Chain name, as listed by ``get_chains()``.
            account_address: Account to list transactions for.
            options: Filters and page size for the first page.
            max_navigation_history: Retained backward depth for this handle.
        """
        return await TransactionsPage.create(
            self,
            chain,
            account_address,
            options,
            max_navigation_history=max_navigation_history,
        )

    async def transactions_from_cursor(
        self,
        chain: str,
        account_address: str,
        cursor: str,
        *,
        max_navigation_history: int | None = None,
    ) -> TransactionsPage[Transaction]:
        """Resume a transactions pagination session from a cursor token."""
        return await TransactionsPage.from_cursor(
            self,
            chain,
            account_address,
            cursor,
            max_navigation_history=max_navigation_history,
        )


__all__ = ["BaseTranslate", "Transaction", "invalid_response", "view_as_params"]
