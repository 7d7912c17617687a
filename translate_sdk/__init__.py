"""Python SDK for the Translate blockchain-data API.

Transactions are paged through ``TransactionsPage`` handles that support
``next()``, ``previous()``, resumable cursors and ``async for`` iteration
across every supported ecosystem.
"""

import logging

from translate_sdk.client import TranslateClient
from translate_sdk.core.exceptions import (
    ChainNotFoundError,
    ErrorType,
    InvalidCursorError,
    NoEarlierPageRetainedError,
    SDKException,
    TransactionError,
)
from translate_sdk.core.pagination import (
    CursorCodec,
    CursorInfo,
    EnhancedCursorData,
    FetchedPage,
    NavigationHistory,
    PageFetcher,
    PageOptions,
    TransactionsPage,
)
from translate_sdk.translate import (
    CosmosTranslate,
    EVMTranslate,
    PolkadotTranslate,
    SVMTranslate,
    TVMTranslate,
    UTXOTranslate,
    XRPLTranslate,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ChainNotFoundError",
    "CosmosTranslate",
    "CursorCodec",
    "CursorInfo",
    "EVMTranslate",
    "EnhancedCursorData",
    "ErrorType",
    "FetchedPage",
    "InvalidCursorError",
    "NavigationHistory",
    "NoEarlierPageRetainedError",
    "PageFetcher",
    "PageOptions",
    "PolkadotTranslate",
    "SDKException",
    "SVMTranslate",
    "TVMTranslate",
    "TransactionError",
    "TransactionsPage",
    "TranslateClient",
    "UTXOTranslate",
    "XRPLTranslate",
    "__version__",
]
