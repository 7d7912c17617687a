"""Cosmos ecosystem client."""

from __future__ import annotations

from translate_sdk.translate.base import BaseTranslate


class CosmosTranslate(BaseTranslate):
    """Client for Cosmos chains (cosmoshub, osmosis, ...)."""

    ecosystem = "cosmos"
