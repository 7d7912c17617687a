"""Cursor inspection commands."""

import sys

import click

from translate_sdk.cli.utils import error, print_json
from translate_sdk.core.exceptions import InvalidCursorError
from translate_sdk.core.pagination import CursorCodec


@click.command(name="decode-cursor")
@click.argument("token")
def decode_cursor(token: str) -> None:
    """Print the JSON payload of a pagination cursor.

    Works offline; nothing is fetched.
    """
    try:
        data = CursorCodec.decode(token)
    except InvalidCursorError as e:
        error(f"{e.detail}: {e.extra.get('reason', 'unknown reason')}")
        sys.exit(1)

    print_json(data.to_wire())
