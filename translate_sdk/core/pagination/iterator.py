"""Async iteration over the items of a transactions page and its successors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from translate_sdk.core.pagination.page import TransactionsPage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TransactionsIterator(Generic[T]):
    """Yield every item of the current page, then advance with ``next()``.

    Iteration drives the page handle itself, so it is not restartable: once
    the last page is consumed the handle is marked exhausted and a new
    iterator over it yields nothing. Request a fresh page to start over.

    Example:
        page = await client.evm.get_transactions("eth", address)
        async for tx in page:
            handle(tx)
    """

    def __init__(self, page: TransactionsPage[T]) -> None:
        self._page = page
        self._buffer = list(page.get_transactions()) if not page.is_exhausted else []
        self._position = 0

    def __aiter__(self) -> TransactionsIterator[T]:
        return self

    async def __anext__(self) -> T:
        while self._position >= len(self._buffer):
            if self._page.is_exhausted:
                raise StopAsyncIteration
            if not await self._page.next():
                self._page.mark_exhausted()
                logger.debug(
                    "Transaction iteration exhausted",
                    extra={"page_index": self._page.current_page_index},
                )
                raise StopAsyncIteration
            self._buffer = list(self._page.get_transactions())
            self._position = 0

        item = self._buffer[self._position]
        self._position += 1
        return item


__all__ = ["TransactionsIterator"]
