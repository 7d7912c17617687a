"""SVM ecosystem client."""

from __future__ import annotations

from typing import Any

from translate_sdk.core.pagination import PageOptions
from translate_sdk.translate.base import BaseTranslate, invalid_response
from translate_sdk.utils.urls import parse_next_page_url


class SVMTranslate(BaseTranslate):
    """Client for SVM chains (solana).

    Responses carry no ``hasNextPage`` flag; a null ``nextPageUrl`` ends paging.
    """

    ecosystem = "svm"

    async def get_spl_tokens(self, account_address: str, chain: str = "solana") -> Any:
        """SPL token accounts owned by ``account_address``."""
        result = await self.http.get(f"{chain}/splAccounts/{account_address}")
        if not isinstance(result, (dict, list)):
            raise invalid_response()
        return result

    def next_page_keys(self, body: dict[str, Any], options: PageOptions) -> PageOptions | None:
        next_url = body.get("nextPageUrl")
        if not next_url:
            return None
        return parse_next_page_url(next_url, options)
