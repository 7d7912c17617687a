"""EVM ecosystem client."""

from __future__ import annotations

import logging
from typing import Any

from translate_sdk.core.pagination import FetchedPage, PageOptions, TransactionsPage
from translate_sdk.translate.base import (
    BaseTranslate,
    Transaction,
    invalid_response,
    view_as_params,
)

logger = logging.getLogger(__name__)


class HistoryFetcher:
    """Page fetcher over the EVM ``history`` endpoint.

    History entries are lightweight (hash, block, timestamp) and page with
    the same ``hasNextPage``/``nextPageUrl`` scheme as transactions.
    """

    def __init__(self, client: EVMTranslate) -> None:
        self._client = client

    async def fetch_page(
        self,
        chain: str,
        account_address: str,
        options: PageOptions,
    ) -> FetchedPage[Transaction]:
        return await self._client.fetch_endpoint_page(
            f"{chain}/history/{account_address}",
            options,
        )


class EVMTranslate(BaseTranslate):
    """Client for EVM chains (eth, polygon, base, ...).

    Next pages are described by ``nextPageUrl``, whose query carries the
    block range and the ``ignoreTransactions`` token of already-seen items.
    """

    ecosystem = "evm"

    @staticmethod
    def chain_path(chain: str) -> str:
        """Path segment for ``chain``; ``ethereum`` is served as ``eth``."""
        name = chain.lower()
        return "eth" if name == "ethereum" else name

    async def get_transaction(
        self,
        chain: str,
        tx_id: str,
        v5_format: bool = False,
    ) -> Transaction:
        """Classified transaction, in v2 format unless ``v5_format`` is set."""
        params = {"v5Format": "true"} if v5_format else None
        return await self.get_object(f"{chain}/tx/{tx_id}", params=params)

    async def describe_transaction(
        self,
        chain: str,
        tx_hash: str,
        view_as_account_address: str | None = None,
    ) -> dict[str, Any]:
        """One-line description and type of a transaction."""
        params = view_as_params(view_as_account_address)
        return await self.get_object(
            f"{self.chain_path(chain)}/describeTx/{tx_hash}",
            params=params,
            required=("description", "type"),
        )

    async def describe_transactions(
        self,
        chain: str,
        tx_hashes: list[str],
        view_as_account_address: str | None = None,
    ) -> list[dict[str, Any]]:
        """Descriptions for a batch of transaction hashes."""
        result = await self.http.post(
            f"{self.chain_path(chain)}/describeTxs",
            json={"txHashes": tx_hashes},
            params=view_as_params(view_as_account_address),
        )
        if not isinstance(result, list):
            raise invalid_response()
        return result

    async def get_tx_types(self) -> dict[str, Any]:
        """Transaction types the classifier can return, with their version."""
        return await self.get_object("txTypes", required=("transactionTypes", "version"))

    async def get_raw_transaction(self, chain: str, tx_hash: str) -> dict[str, Any]:
        """Raw transaction data with traces, event logs and internal transactions."""
        return await self.get_object(
            f"{self.chain_path(chain)}/raw/tx/{tx_hash}",
            required=("network", "rawTx", "rawTraces"),
        )

    # ──────────────────────────────────────────────────────────────
    # Transaction jobs
    # ──────────────────────────────────────────────────────────────

    async def start_transaction_job(
        self,
        chain: str,
        account_address: str,
        start_block: int,
        end_block: int,
        v5_format: bool = False,
        exclude_spam: bool = True,
    ) -> dict[str, Any]:
        """Start a server-side job classifying every transaction in a block range.

        Returns:
            Job handle with ``jobId`` and ``nextPageUrl``.
        """
        result = await self.http.post(
            f"{self.chain_path(chain)}/txs/job/start",
            params={
                "accountAddress": account_address,
                "startBlock": str(start_block),
                "endBlock": str(end_block),
                "v5Format": "true" if v5_format else "false",
                "excludeSpam": "true" if exclude_spam else "false",
            },
        )
        if not isinstance(result, dict) or "jobId" not in result:
            raise invalid_response()
        logger.info(
            "Started transaction job",
            extra={"chain": chain, "job_id": result["jobId"]},
        )
        return result

    async def get_transaction_job_results(
        self,
        chain: str,
        job_id: str,
        options: PageOptions | None = None,
    ) -> dict[str, Any]:
        """One page of a finished job's results.

        Raises:
            TransactionError: ``JOB_PROCESSING`` while the job is running and
                ``JOB_NOT_FOUND`` for unknown or deleted jobs.
        """
        params = options.to_query_params() if options is not None else None
        return await self.get_object(f"{self.chain_path(chain)}/txs/job/{job_id}", params=params)

    async def delete_transaction_job(self, chain: str, job_id: str) -> None:
        await self.http.delete(f"{self.chain_path(chain)}/txs/job/{job_id}")
        logger.info("Deleted transaction job", extra={"chain": chain, "job_id": job_id})

    # ──────────────────────────────────────────────────────────────
    # History
    # ──────────────────────────────────────────────────────────────

    async def history(
        self,
        chain: str,
        account_address: str,
        options: PageOptions | None = None,
        *,
        max_navigation_history: int | None = None,
    ) -> TransactionsPage[Transaction]:
        """First page of an account's transaction history (hashes only)."""
        return await TransactionsPage.create(
            HistoryFetcher(self),
            chain,
            account_address,
            options,
            max_navigation_history=max_navigation_history,
        )

    async def history_from_cursor(
        self,
        chain: str,
        account_address: str,
        cursor: str,
        *,
        max_navigation_history: int | None = None,
    ) -> TransactionsPage[Transaction]:
        return await TransactionsPage.from_cursor(
            HistoryFetcher(self),
            chain,
            account_address,
            cursor,
            max_navigation_history=max_navigation_history,
        )
