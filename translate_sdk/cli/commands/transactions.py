"""Transaction paging commands."""

import logging
import sys
from typing import Any

import click

from translate_sdk.cli.utils import coro, error, header, info, print_json, success
from translate_sdk.core.exceptions import SDKException
from translate_sdk.core.pagination import PageOptions, TransactionsPage
from translate_sdk.infra.logging import set_log_context
from translate_sdk.translate import ECOSYSTEM_CLIENTS, BaseTranslate

logger = logging.getLogger(__name__)


def build_client(ecosystem: str, api_key: str | None) -> BaseTranslate:
    return ECOSYSTEM_CLIENTS[ecosystem](api_key)


def _first(tx: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if tx.get(key):
            return tx[key]
    return None


def summarize(tx: dict[str, Any]) -> str:
    """One-line summary of a classified transaction."""
    raw = tx.get("rawTransactionData") or {}
    tx_id = (
        _first(tx, "txHash", "hash", "signature")
        or _first(raw, "transactionHash", "signature", "txid")
        or "?"
    )
    classification = tx.get("classificationData") or {}
    description = (
        _first(classification, "description", "type")
        or _first(tx, "txTypeVersion", "type")
        or ""
    )
    return f"{tx_id}  {description}".rstrip()


async def _open_page(
    client: BaseTranslate,
    chain: str,
    address: str,
    page_size: int | None,
    cursor: str | None,
    max_history: int | None,
) -> TransactionsPage[dict[str, Any]]:
    if cursor:
        return await client.transactions_from_cursor(
            chain,
            address,
            cursor,
            max_navigation_history=max_history,
        )
    options = PageOptions(page_size=page_size) if page_size else None
    return await client.get_transactions(
        chain,
        address,
        options,
        max_navigation_history=max_history,
    )


@click.command(name="txs")
@click.argument("ecosystem", type=click.Choice(sorted(ECOSYSTEM_CLIENTS), case_sensitive=False))
@click.argument("chain")
@click.argument("address")
@click.option("--page-size", type=click.IntRange(min=1), help="Items per page")
@click.option(
    "--pages",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of pages to walk forward",
)
@click.option("--cursor", help="Resume from a cursor printed by an earlier run")
@click.option(
    "--max-history",
    type=click.IntRange(min=1),
    help="Retained backward navigation depth",
)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON document instead of text")
@click.option(
    "--api-key",
    envvar="TRANSLATE_API_KEY",
    help="Translate API key (default: TRANSLATE_API_KEY)",
)
@coro
async def txs(
    ecosystem: str,
    chain: str,
    address: str,
    page_size: int | None,
    pages: int,
    cursor: str | None,
    max_history: int | None,
    as_json: bool,
    api_key: str | None,
) -> None:
    """List an account's transactions page by page.

    \b
    Examples:
      translate-sdk txs evm eth 0xabc... --page-size 10 --pages 3
      translate-sdk txs xrpl xrpl rHb9... --cursor eyJwYWdlU2l6ZSI6MTB9
    """
    ecosystem = ecosystem.lower()
    set_log_context(ecosystem=ecosystem, chain=chain)

    try:
        client = build_client(ecosystem, api_key)
    except ValueError as e:
        error(str(e))
        sys.exit(1)

    walked: list[dict[str, Any]] = []
    try:
        async with client:
            page = await _open_page(client, chain, address, page_size, cursor, max_history)
            while True:
                walked.append(
                    {
                        "pageIndex": page.current_page_index,
                        "items": page.get_transactions(),
                    },
                )
                if len(walked) >= pages or not await page.next():
                    break
            cursor_info = page.get_cursor_info()
    except SDKException as e:
        logger.debug("Command failed", extra={"error_type": e.type})
        error(f"{e.detail} ({e.type})")
        sys.exit(1)

    if as_json:
        print_json(
            {
                "pages": walked,
                "hasNextPage": cursor_info.has_next_page,
                "hasPreviousPage": cursor_info.has_previous_page,
                "nextCursor": cursor_info.next_cursor,
                "previousCursor": cursor_info.previous_cursor,
            },
        )
        return

    for entry in walked:
        header(f"Page {entry['pageIndex'] + 1} ({len(entry['items'])} transactions)")
        for tx in entry["items"]:
            click.echo(f"  {summarize(tx)}")

    if cursor_info.next_cursor:
        info(f"Next cursor: {cursor_info.next_cursor}")
    else:
        success("Reached the last page")
    if cursor_info.previous_cursor:
        info(f"Previous cursor: {cursor_info.previous_cursor}")
