"""Ecosystem clients for the Translate API."""

from translate_sdk.translate.base import BaseTranslate, Transaction
from translate_sdk.translate.cosmos import CosmosTranslate
from translate_sdk.translate.evm import EVMTranslate, HistoryFetcher
from translate_sdk.translate.polkadot import PolkadotTranslate
from translate_sdk.translate.svm import SVMTranslate
from translate_sdk.translate.tvm import TVMTranslate
from translate_sdk.translate.utxo import UTXOTranslate
from translate_sdk.translate.xrpl import XRPLTranslate

ECOSYSTEM_CLIENTS: dict[str, type[BaseTranslate]] = {
    client.ecosystem: client
    for client in (
        EVMTranslate,
        SVMTranslate,
        UTXOTranslate,
        CosmosTranslate,
        TVMTranslate,
        PolkadotTranslate,
        XRPLTranslate,
    )
}

__all__ = [
    "ECOSYSTEM_CLIENTS",
    "BaseTranslate",
    "CosmosTranslate",
    "EVMTranslate",
    "HistoryFetcher",
    "PolkadotTranslate",
    "SVMTranslate",
    "TVMTranslate",
    "Transaction",
    "UTXOTranslate",
    "XRPLTranslate",
]
