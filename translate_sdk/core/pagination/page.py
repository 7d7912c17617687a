"""Stateful pagination handle over an account's transactions.

``TransactionsPage`` wraps the items of one loaded page and the means to
move from it: forward with the next-page options the API returned, and
backward by replaying the options recorded in a bounded
``NavigationHistory``. Positions can be exported as opaque cursor tokens
and resumed later, possibly in another process, with ``from_cursor``.

Concurrency:
    A page handle is single-owner mutable state. ``next()`` and
    ``previous()`` read-modify-write the same fields without locking, so
    navigation calls on one instance must be awaited one at a time.
    Independent instances share nothing and are safe to use concurrently.
    Cursor tokens are immutable strings and can be shared freely.

Failures:
    A fetch failure propagates unchanged and leaves the handle exactly as
    it was; state is only committed after the fetcher returns.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, Field

from translate_sdk.core.pagination.cursor import CursorCodec, CursorMeta, EnhancedCursorData
from translate_sdk.core.pagination.history import NavigationHistory
from translate_sdk.core.pagination.iterator import TransactionsIterator
from translate_sdk.core.pagination.options import PageOptions
from translate_sdk.core.settings import get_pagination_settings

if TYPE_CHECKING:
    from translate_sdk.core.pagination.fetcher import FetchedPage, PageFetcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CursorInfo(BaseModel):
    """Read-only snapshot of the navigation available from a page.

    Attributes:
        has_next_page: Whether ``next()`` would load a page.
        has_previous_page: Whether ``previous()`` would load a page.
        next_cursor: Token resuming at the next page, or None.
        previous_cursor: Token resuming at the previous page, or None.
    """

    has_next_page: bool = Field(description="Whether a next page exists")
    has_previous_page: bool = Field(description="Whether a retained previous page exists")
    next_cursor: str | None = Field(default=None, description="Cursor for the next page")
    previous_cursor: str | None = Field(default=None, description="Cursor for the previous page")


def _resolve_max_history(max_navigation_history: int | None) -> int:
    if max_navigation_history is not None:
        return max_navigation_history
    return get_pagination_settings().max_navigation_history


class TransactionsPage(Generic[T]):
    """Pagination handle returned by ecosystem clients.

    Usage:
        page = await client.evm.get_transactions("eth", address, PageOptions(page_size=5))
        print(page.get_transactions())

        if await page.next():
            print(page.get_transactions())

        await page.previous()           # replays the first request
        token = page.get_next_cursor()  # hand to another process

        resumed = await TransactionsPage.from_cursor(client.evm, "eth", address, token)

        async for tx in resumed:        # every remaining item, across pages
            ...
    """

    def __init__(
        self,
        fetcher: PageFetcher[T],
        chain: str,
        account_address: str,
        *,
        transactions: list[T] | None = None,
        current_page_keys: PageOptions | None = None,
        next_page_keys: PageOptions | None = None,
        max_navigation_history: int | None = None,
        history: NavigationHistory | None = None,
    ) -> None:
        """Wrap an already fetched page.

        Args:
            fetcher: Collaborator used for every later fetch.
            chain: Chain name passed through to the fetcher.
            account_address: Account passed through to the fetcher.
            transactions: Items of the loaded page.
            current_page_keys: Options that produced the loaded page.
            next_page_keys: Options of the following page, None when terminal.
            max_navigation_history: Retained backward depth; defaults to settings.
            history: Pre-built history whose current entry is ``current_page_keys``.
        """
        self._fetcher = fetcher
        self._chain = chain
        self._account_address = account_address
        self._transactions: list[T] = list(transactions or [])
        self._current_page_keys = current_page_keys or PageOptions()
        self._next_page_keys = next_page_keys
        self._exhausted = False

        if history is None:
            history = NavigationHistory(max_entries=_resolve_max_history(max_navigation_history))
            history.append(self._current_page_keys)
        self._history = history

    @classmethod
    async def create(
        cls,
        fetcher: PageFetcher[T],
        chain: str,
        account_address: str,
        options: PageOptions | None = None,
        *,
        max_navigation_history: int | None = None,
    ) -> TransactionsPage[T]:
        """Fetch the first page for ``options`` and wrap it."""
        options = options or PageOptions()
        fetched = await fetcher.fetch_page(chain, account_address, options)
        return cls(
            fetcher,
            chain,
            account_address,
            transactions=fetched.items,
            current_page_keys=options,
            next_page_keys=fetched.next_page_keys,
            max_navigation_history=max_navigation_history,
        )

    # ──────────────────────────────────────────────────────────────
    # Read-only accessors
    # ──────────────────────────────────────────────────────────────

    @property
    def chain(self) -> str:
        return self._chain

    @property
    def account_address(self) -> str:
        return self._account_address

    @property
    def navigation_history(self) -> NavigationHistory:
        return self._history

    @property
    def current_page_index(self) -> int:
        """Absolute position of the loaded page in this session (0-based)."""
        return self._history.current_page_index

    @property
    def is_exhausted(self) -> bool:
        """True once iteration has consumed the last reachable page."""
        return self._exhausted

    def mark_exhausted(self) -> None:
        self._exhausted = True

    def get_transactions(self) -> list[T]:
        """Items of the loaded page; empty is valid and distinct from terminal."""
        return self._transactions

    def get_current_page_keys(self) -> PageOptions:
        return self._current_page_keys

    def get_next_page_keys(self) -> PageOptions | None:
        """Options of the next page, or None when this page is the last one."""
        return self._next_page_keys

    def get_previous_page_keys(self) -> PageOptions | None:
        if not self._history.can_go_back:
            return None
        return self._history.previous_options()

    def get_page_keys(self) -> list[PageOptions]:
        """Options of every retained page, oldest first."""
        return self._history.entries

    def has_next(self) -> bool:
        return self._next_page_keys is not None

    def has_previous(self) -> bool:
        """Whether the previous page is still retained and can be replayed."""
        return self._history.can_go_back

    # ──────────────────────────────────────────────────────────────
    # Navigation
    # ──────────────────────────────────────────────────────────────

    async def next(self) -> bool:
        """Load the next page.

        Returns:
            False without fetching when there is no next page, True otherwise.

        Raises:
            Exception: Whatever the fetcher raises; the handle is left unchanged.
        """
        next_keys = self._next_page_keys
        if next_keys is None:
            return False

        fetched = await self._fetcher.fetch_page(self._chain, self._account_address, next_keys)
        self._commit(next_keys, fetched)
        self._history.append(next_keys)

        logger.debug(
            "Loaded next transactions page",
            extra={
                "chain": self._chain,
                "account_address": self._account_address,
                "page_index": self._history.current_page_index,
                "item_count": len(self._transactions),
            },
        )
        return True

    async def previous(self) -> bool:
        """Reload the previous page by replaying the request that produced it.

        Returns:
            False without fetching when no earlier page is retained, True otherwise.

        Raises:
            Exception: Whatever the fetcher raises; the handle is left unchanged.
        """
        if not self.has_previous():
            return False

        previous_keys = self._history.previous_options()
        fetched = await self._fetcher.fetch_page(self._chain, self._account_address, previous_keys)
        self._commit(previous_keys, fetched)
        self._history.step_back()

        logger.debug(
            "Reloaded previous transactions page",
            extra={
                "chain": self._chain,
                "account_address": self._account_address,
                "page_index": self._history.current_page_index,
                "item_count": len(self._transactions),
            },
        )
        return True

    def _commit(self, options: PageOptions, fetched: FetchedPage[T]) -> None:
        self._transactions = list(fetched.items)
        self._current_page_keys = options
        self._next_page_keys = fetched.next_page_keys
        self._exhausted = False

    def __aiter__(self) -> TransactionsIterator[T]:
        return TransactionsIterator(self)

    # ──────────────────────────────────────────────────────────────
    # Cursors
    # ──────────────────────────────────────────────────────────────

    def get_cursor_info(self) -> CursorInfo:
        return CursorInfo(
            has_next_page=self.has_next(),
            has_previous_page=self.has_previous(),
            next_cursor=self.get_next_cursor(),
            previous_cursor=self.get_previous_cursor(),
        )

    def get_next_cursor(self) -> str | None:
        """Token resuming at the next page, with navigation metadata."""
        if self._next_page_keys is None:
            return None
        data = self._create_enhanced_cursor(
            self._next_page_keys,
            self._history.current_page_index + 1,
        )
        return CursorCodec.encode(data)

    def get_previous_cursor(self) -> str | None:
        """Token resuming at the previous page, with navigation metadata."""
        if not self.has_previous():
            return None
        data = self._create_enhanced_cursor(
            self._history.previous_options(),
            self._history.current_page_index - 1,
        )
        return CursorCodec.encode(data)

    def _create_enhanced_cursor(
        self,
        target_options: PageOptions,
        target_index: int,
    ) -> EnhancedCursorData:
        """Build cursor data for the page at absolute position ``target_index``.

        The embedded history is the retained path up to the target, cut to
        the newest ``max_entries`` entries.
        """
        history = self._history
        retained = history.entries
        start = history.history_start_index
        target_local = target_index - start

        window = [*retained[:target_local], target_options]
        overflow = len(window) - history.max_entries
        if overflow > 0:
            window = window[overflow:]
            start += overflow
        local = len(window) - 1

        if target_index == history.current_page_index:
            next_options = self._next_page_keys
        elif 0 <= target_local + 1 < len(retained):
            next_options = retained[target_local + 1]
        else:
            next_options = None

        last_known_index = history.history_start_index + len(retained) - 1
        meta = CursorMeta(
            current_page_index=local,
            navigation_history=window,
            can_go_back=local > 0 or start > 0,
            can_go_forward=target_index < last_known_index or self._next_page_keys is not None,
            previous_page_options=window[local - 1] if local > 0 else None,
            next_page_options=next_options,
            original_page_index=target_index if start > 0 else None,
            history_start_index=start if start > 0 else None,
        )
        return EnhancedCursorData.build(target_options, meta)

    @classmethod
    async def from_cursor(
        cls,
        fetcher: PageFetcher[T],
        chain: str,
        account_address: str,
        cursor: str,
        *,
        max_navigation_history: int | None = None,
    ) -> TransactionsPage[T]:
        """Resume a session from a cursor token.

        The token is decoded before any network call, the page for its
        embedded options is re-fetched, and the navigation history is
        rebuilt from its metadata so ``previous()`` keeps working within the
        retained window.

        Raises:
            InvalidCursorError: If the token is malformed.
        """
        data = CursorCodec.decode(cursor)
        options = data.page_options()
        max_entries = _resolve_max_history(max_navigation_history)

        fetched = await fetcher.fetch_page(chain, account_address, options)

        meta = data.cursor_meta
        if meta is not None:
            entries = [*meta.navigation_history[: meta.current_page_index], options]
            history = NavigationHistory.from_entries(
                entries,
                current_index=meta.current_page_index,
                history_start_index=meta.absolute_page_index - meta.current_page_index,
                max_entries=max_entries,
            )
        else:
            history = NavigationHistory(max_entries=max_entries)
            history.append(options)

        logger.debug(
            "Resumed transactions page from cursor",
            extra={
                "chain": chain,
                "account_address": account_address,
                "page_index": history.current_page_index,
                "enhanced": meta is not None,
            },
        )
        return cls(
            fetcher,
            chain,
            account_address,
            transactions=fetched.items,
            current_page_keys=options,
            next_page_keys=fetched.next_page_keys,
            history=history,
        )

    @staticmethod
    def decode_cursor(cursor: str) -> EnhancedCursorData:
        """Decode a cursor without touching the network.

        Raises:
            InvalidCursorError: If the token is malformed.
        """
        return CursorCodec.decode(cursor)

    @staticmethod
    def is_enhanced_cursor(decoded: Any) -> bool:
        return CursorCodec.is_enhanced(decoded)


__all__ = ["CursorInfo", "TransactionsPage"]
