"""XRPL ecosystem client."""

from __future__ import annotations

from typing import Any

from translate_sdk.core.pagination import PageOptions
from translate_sdk.translate.base import (
    BaseTranslate,
    Transaction,
    invalid_response,
    view_as_params,
)
from translate_sdk.utils.urls import parse_next_page_url


class XRPLTranslate(BaseTranslate):
    """Client for the XRP Ledger.

    Paging is driven by the ledger ``marker`` in ``nextPageSettings``. The
    marker from the body is authoritative because the URL copy may be
    missing or double-encoded.
    """

    ecosystem = "xrpl"

    async def get_transaction(
        self,
        chain: str,
        tx_id: str,
        view_as_account_address: str | None = None,
    ) -> Transaction:
        """Classified ledger transaction, optionally seen from another account."""
        return await self.get_object(
            f"{chain}/tx/{tx_id}",
            params=view_as_params(view_as_account_address),
            required=("classificationData",),
        )

    def next_page_keys(self, body: dict[str, Any], options: PageOptions) -> PageOptions | None:
        settings = body.get("nextPageSettings")
        if not isinstance(settings, dict):
            raise invalid_response()
        next_url = settings.get("nextPageUrl")
        if not next_url:
            return None
        next_keys = parse_next_page_url(next_url, options)
        marker = settings.get("marker")
        if marker:
            next_keys = next_keys.merge(marker=str(marker))
        return next_keys
