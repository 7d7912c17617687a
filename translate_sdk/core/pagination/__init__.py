"""Stateless bidirectional pagination over forward-only APIs.

Every Translate backend only exposes a "next page" pointer. This package
turns that into a page handle with ``next()``, ``previous()``, resumable
cursors and item-level async iteration:

    page = await client.svm.get_transactions("solana", address, PageOptions(page_size=20))

    while True:
        for tx in page.get_transactions():
            ...
        if not await page.next():
            break

Backward navigation replays the options that produced earlier pages, kept
in a bounded ``NavigationHistory``. Cursors are opaque base64 strings
that embed the current options plus that history, so a new process can
resume with ``TransactionsPage.from_cursor``.
"""

from translate_sdk.core.pagination.cursor import (
    CURSOR_META_KEY,
    CursorCodec,
    CursorMeta,
    EnhancedCursorData,
)
from translate_sdk.core.pagination.fetcher import FetchedPage, PageFetcher
from translate_sdk.core.pagination.history import (
    DEFAULT_MAX_NAVIGATION_HISTORY,
    NavigationHistory,
)
from translate_sdk.core.pagination.iterator import TransactionsIterator
from translate_sdk.core.pagination.options import PageOptions, SortOrder
from translate_sdk.core.pagination.page import CursorInfo, TransactionsPage

__all__ = [
    "CURSOR_META_KEY",
    "DEFAULT_MAX_NAVIGATION_HISTORY",
    # Cursor utilities
    "CursorCodec",
    "CursorInfo",
    "CursorMeta",
    "EnhancedCursorData",
    # Fetcher contract
    "FetchedPage",
    "NavigationHistory",
    "PageFetcher",
    # Options
    "PageOptions",
    "SortOrder",
    # Page handle
    "TransactionsIterator",
    "TransactionsPage",
]
