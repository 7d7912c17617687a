"""Page fetcher protocol implemented once per ecosystem."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from translate_sdk.core.pagination.options import PageOptions

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True)
class FetchedPage(Generic[T]):
    """One page as returned by a fetcher.

    Attributes:
        items: Page items in the order the API returned them.
        next_page_keys: Options for the following page, or None when terminal.
    """

    items: list[T] = field(default_factory=list)
    next_page_keys: PageOptions | None = None


@runtime_checkable
class PageFetcher(Protocol[T_co]):
    """Interface for anything that can load one page of account items.

    The fetcher owns the HTTP call and translates its ecosystem's native
    next-page signal (URL, marker, page key, page number) into a uniform
    ``PageOptions | None``. Retries, if any, belong here too.
    """

    async def fetch_page(
        self,
        chain: str,
        account_address: str,
        options: PageOptions,
    ) -> FetchedPage[T_co]:
        """Fetch the page selected by ``options``."""
        ...


__all__ = ["FetchedPage", "PageFetcher"]
