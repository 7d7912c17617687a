"""Polkadot ecosystem client."""

from __future__ import annotations

from typing import Any

from translate_sdk.core.pagination import PageOptions
from translate_sdk.translate.base import BaseTranslate, invalid_response
from translate_sdk.utils.urls import parse_next_page_url


class PolkadotTranslate(BaseTranslate):
    """Client for Polkadot chains (polkadot, bittensor, ...).

    Pagination lives in a ``nextPageSettings`` block whose ``nextPageUrl``
    narrows the block range for the following page.
    """

    ecosystem = "polkadot"

    async def get_block_transaction(self, chain: str, block_number: int, index: int) -> dict[str, Any]:
        return await self.get_transaction(chain, f"{block_number}/{index}")

    def next_page_keys(self, body: dict[str, Any], options: PageOptions) -> PageOptions | None:
        settings = body.get("nextPageSettings")
        if not isinstance(settings, dict):
            raise invalid_response()
        next_url = settings.get("nextPageUrl")
        if not settings.get("hasNextPage") or not next_url:
            return None
        return parse_next_page_url(next_url, options)
