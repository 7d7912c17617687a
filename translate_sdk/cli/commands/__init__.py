"""CLI command modules."""

from translate_sdk.cli.commands import cursor, transactions

__all__ = ["cursor", "transactions"]
