"""CLI utilities for running async operations and formatting output."""

from translate_sdk.cli.utils.async_runner import coro
from translate_sdk.cli.utils.formatters import (
    error,
    header,
    info,
    print_json,
    success,
)

__all__ = [
    "coro",
    "error",
    "header",
    "info",
    "print_json",
    "success",
]
