"""Main CLI entry point for translate-sdk commands."""

import click

from translate_sdk import __version__
from translate_sdk.cli.commands import cursor, transactions
from translate_sdk.infra.logging import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="translate-sdk")
@click.option("--verbose", "-v", is_flag=True, help="Log SDK activity at DEBUG level")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Translate SDK CLI - browse classified blockchain transactions.

    \b
    Commands:
      txs            Page through an account's transactions
      decode-cursor  Inspect a pagination cursor offline

    \b
    Quick Start:
      export TRANSLATE_API_KEY=...
      translate-sdk txs evm eth 0xabc... --pages 2
      translate-sdk decode-cursor <token>
    """
    ctx.ensure_object(dict)
    if verbose:
        setup_logging(log_level="DEBUG", force=True)
    else:
        setup_logging()


cli.add_command(transactions.txs)
cli.add_command(cursor.decode_cursor)


if __name__ == "__main__":
    cli()
