"""Query string helpers for Translate API endpoints."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlsplit

from pydantic import ValidationError

from translate_sdk.core.exceptions import ErrorType, TransactionError
from translate_sdk.core.pagination.options import PageOptions

# Query parameter names that differ from the PageOptions wire name.
_WIRE_NAMES: dict[str, str] = {"page": "pageNumber"}

_NUMERIC_FIELDS = frozenset(
    {
        "startBlock",
        "endBlock",
        "startTimestamp",
        "endTimestamp",
        "pageSize",
        "numberOfEpochs",
        "pageNumber",
    },
)

_BOOLEAN_FIELDS = frozenset(
    {
        "liveData",
        "viewAsTransactionSender",
        "v5Format",
        "includePrices",
        "excludeZeroPrices",
        "ascending",
    },
)


def _coerce(key: str, value: str) -> Any:
    if key in _BOOLEAN_FIELDS and value in ("true", "false"):
        return value == "true"
    if key in _NUMERIC_FIELDS:
        try:
            return int(value)
        except ValueError:
            return value
    return value


def parse_query_options(url: str) -> dict[str, Any]:
    """Read the query parameters of an absolute or relative next-page URL.

    Known numeric fields become ints and known flags become booleans.
    Every other parameter, including cursors the API adds that the SDK
    does not model, is kept verbatim as a string. ``page`` is read as
    ``pageNumber``.
    """
    query = urlsplit(url).query
    values: dict[str, Any] = {}
    for key, raw in parse_qsl(query, keep_blank_values=False):
        name = _WIRE_NAMES.get(key, key)
        values[name] = _coerce(name, raw)
    return values


def parse_next_page_url(url: str, current: PageOptions | None = None) -> PageOptions:
    """Translate a next-page URL into ``PageOptions``.

    Values carried by the URL win. ``pageSize`` and ``v5Format`` are
    inherited from ``current`` when the URL omits them, so the following
    page keeps the caller's page size and format.

    Raises:
        TransactionError: ``INVALID_RESPONSE_FORMAT`` when the URL carries
            values that are not valid page options.
    """
    values = parse_query_options(url)
    if current is not None:
        inherited = current.to_wire()
        for key in ("pageSize", "v5Format"):
            if key not in values and key in inherited:
                values[key] = inherited[key]
    try:
        return PageOptions.from_wire(values)
    except ValidationError as e:
        raise TransactionError(
            {"message": ["Invalid next page URL in response"]},
            ErrorType.INVALID_RESPONSE_FORMAT,
            details={"nextPageUrl": url, "errors": e.errors(include_url=False)},
        ) from e


__all__ = ["parse_next_page_url", "parse_query_options"]
