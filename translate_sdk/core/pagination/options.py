"""Page request options shared by every ecosystem.

``PageOptions`` is the filter/paging bag a caller supplies for one page
request. It is frozen once built and travels unchanged between the page
handle, the ecosystem fetcher and cursor tokens. Field names are
snake_case in Python and camelCase on the wire (query strings, cursors).

Ecosystem-private fields (``marker``, ``pageKey``, ``pageNumber`` +
``ascending``, ``ignoreTransactions``) are set by fetchers from the API's
next-page signal. Unknown fields are kept as extras and passed through.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SortOrder = Literal["asc", "desc"]

# Query parameter names that differ from the wire field name.
_QUERY_NAMES: dict[str, str] = {"pageNumber": "page"}


class PageOptions(BaseModel):
    """Filter and paging parameters for one page of transactions.

    Attributes:
        start_block: First block to include.
        end_block: Last block to include.
        start_timestamp: Lower time bound in milliseconds.
        end_timestamp: Upper time bound in milliseconds.
        sort: ``asc`` or ``desc``.
        view_as_account_address: Account whose perspective classifies transfers.
        page_size: Items per page (maximum varies by ecosystem).
        live_data: EVM only; fetch live data instead of historical paging.
        view_as_transaction_sender: EVM only.
        v5_format: Request the v5 transaction format.
        number_of_epochs: SVM staking only.
        include_prices: Include token prices in the response.
        exclude_zero_prices: Drop tokens with zero prices.
        ignore_transactions: Token of already-seen transactions (set by the API).
        page_key: TVM page key (set by the API).
        page_number: Offset page number (set by the API).
        ascending: Offset sort flag (set by the API).
        marker: XRPL ledger marker (set by the API).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    start_block: int | None = None
    end_block: int | None = None
    start_timestamp: int | None = None
    end_timestamp: int | None = None
    sort: SortOrder | None = None
    view_as_account_address: str | None = None
    page_size: int | None = Field(default=None, ge=1)
    live_data: bool | None = None
    view_as_transaction_sender: bool | None = None
    v5_format: bool | None = None
    number_of_epochs: int | None = None
    include_prices: bool | None = None
    exclude_zero_prices: bool | None = None
    ignore_transactions: str | None = None
    page_key: str | None = None
    page_number: int | None = None
    ascending: bool | None = None
    marker: str | None = None

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> PageOptions:
        """Build options from a camelCase mapping (cursor or API payload)."""
        return cls.model_validate(data)

    def to_wire(self) -> dict[str, Any]:
        """Dump to a camelCase mapping with unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_query_params(self) -> dict[str, str]:
        """Render the options as query string parameters.

        Booleans become ``true``/``false`` and ``pageNumber`` travels as ``page``.
        """
        params: dict[str, str] = {}
        for key, value in self.to_wire().items():
            if isinstance(value, bool):
                rendered = "true" if value else "false"
            elif isinstance(value, (dict, list)):
                continue
            else:
                rendered = str(value)
            params[_QUERY_NAMES.get(key, key)] = rendered
        return params

    def merge(self, **overrides: Any) -> PageOptions:
        """Return a copy with the given snake_case fields replaced."""
        return self.model_copy(update=overrides)

    def is_empty(self) -> bool:
        return not self.to_wire()


__all__ = ["PageOptions", "SortOrder"]
