"""UTXO ecosystem client."""

from __future__ import annotations

from translate_sdk.translate.base import (
    BaseTranslate,
    Transaction,
    invalid_response,
    view_as_params,
)


class UTXOTranslate(BaseTranslate):
    """Client for UTXO chains (btc, ltc, doge, ...).

    Next-page URLs use offset paging: ``page`` (read as ``pageNumber``) and
    ``ascending``.
    """

    ecosystem = "utxo"

    async def get_transaction(
        self,
        chain: str,
        tx_id: str,
        view_as_account_address: str | None = None,
    ) -> Transaction:
        """Classified transaction, optionally from ``view_as_account_address``'s perspective."""
        return await self.get_object(
            f"{chain}/tx/{tx_id}",
            params=view_as_params(view_as_account_address),
        )

    async def get_addresses_by_xpub(self, xpub: str) -> list[str]:
        """Bitcoin addresses derived from an extended public key."""
        result = await self.http.get(f"btc/addresses/{xpub}")
        if not isinstance(result, list):
            raise invalid_response()
        return result
