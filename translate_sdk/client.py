"""Convenience facade bundling every ecosystem client."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from translate_sdk.core.settings import ClientSettings, get_client_settings
from translate_sdk.translate import (
    ECOSYSTEM_CLIENTS,
    BaseTranslate,
    CosmosTranslate,
    EVMTranslate,
    PolkadotTranslate,
    SVMTranslate,
    TVMTranslate,
    UTXOTranslate,
    XRPLTranslate,
)

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class TranslateClient:
    """One API key, seven ecosystems.

    Usage:
        async with TranslateClient(api_key) as client:
            page = await client.evm.get_transactions("eth", address)
            polkadot_page = await client.ecosystem("polkadot").get_transactions("bittensor", address)
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_client_settings()
        kwargs = {"settings": settings, "transport": transport}
        self.evm = EVMTranslate(api_key, **kwargs)
        self.svm = SVMTranslate(api_key, **kwargs)
        self.utxo = UTXOTranslate(api_key, **kwargs)
        self.cosmos = CosmosTranslate(api_key, **kwargs)
        self.tvm = TVMTranslate(api_key, **kwargs)
        self.polkadot = PolkadotTranslate(api_key, **kwargs)
        self.xrpl = XRPLTranslate(api_key, **kwargs)

    @property
    def clients(self) -> dict[str, BaseTranslate]:
        return {
            ecosystem: getattr(self, ecosystem)
            for ecosystem in ECOSYSTEM_CLIENTS
        }

    def ecosystem(self, name: str) -> BaseTranslate:
        """Client for an ecosystem name such as ``"evm"`` or ``"xrpl"``.

        Raises:
            KeyError: If the ecosystem is unknown.
        """
        try:
            return self.clients[name.lower()]
        except KeyError:
            msg = f"Unknown ecosystem {name!r}; expected one of {sorted(ECOSYSTEM_CLIENTS)}"
            raise KeyError(msg) from None

    async def close(self) -> None:
        """Close every ecosystem client, even when one of them fails to close.

        The first failure is re-raised once all clients have been closed.
        """
        results = await asyncio.gather(
            *(client.close() for client in self.clients.values()),
            return_exceptions=True,
        )
        errors = []
        for name, result in zip(self.clients, results, strict=True):
            if isinstance(result, Exception):
                errors.append(result)
                logger.warning(
                    f"Failed to close {name} client",
                    extra={"ecosystem": name, "error": str(result)},
                )
        if errors:
            raise errors[0]

    async def __aenter__(self) -> TranslateClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
