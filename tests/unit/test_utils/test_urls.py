"""Unit tests for next-page URL parsing."""
from __future__ import annotations

import pytest

from translate_sdk.core.exceptions import ErrorType, TransactionError
from translate_sdk.core.pagination import PageOptions
from translate_sdk.utils.urls import parse_next_page_url, parse_query_options


@pytest.mark.unit
class TestParseQueryOptions:
    """Tests for query string coercion."""

    def test_coerces_numbers_and_booleans(self):
        values = parse_query_options(
            "https://translate.noves.fi/evm/eth/txs/0xabc?endBlock=100&v5Format=true&liveData=false",
        )

        assert values == {"endBlock": 100, "v5Format": True, "liveData": False}

    def test_identifier_fields_stay_strings(self):
        values = parse_query_options("/tvm/tron/txs/T1?pageKey=12345&marker=0042&sort=desc")

        assert values == {"pageKey": "12345", "marker": "0042", "sort": "desc"}

    def test_page_is_read_as_page_number(self):
        values = parse_query_options("/utxo/btc/txs/bc1?page=3&ascending=true")

        assert values == {"pageNumber": 3, "ascending": True}

    def test_unknown_numeric_looking_values_stay_strings(self):
        values = parse_query_options("/evm/eth/txs/0xabc?cursorToken=000123&endBlock=0042")

        assert values == {"cursorToken": "000123", "endBlock": 42}

    def test_url_without_query(self):
        assert parse_query_options("https://translate.noves.fi/evm/eth/txs/0xabc") == {}


@pytest.mark.unit
class TestParseNextPageUrl:
    """Tests for next-page options construction."""

    def test_builds_page_options(self):
        options = parse_next_page_url(
            "https://translate.noves.fi/evm/eth/txs/0xabc?pageSize=5&endBlock=99&ignoreTransactions=x1",
        )

        assert options == PageOptions(page_size=5, end_block=99, ignore_transactions="x1")

    def test_inherits_page_size_and_format(self):
        current = PageOptions(page_size=25, v5_format=True, start_block=1)

        options = parse_next_page_url("/svm/solana/txs/abc?beforeSignature=sig", current)

        assert options.page_size == 25
        assert options.v5_format is True
        assert options.start_block is None
        assert options.to_wire()["beforeSignature"] == "sig"

    def test_url_values_win_over_current(self):
        current = PageOptions(page_size=25)

        options = parse_next_page_url("/evm/eth/txs/0xabc?pageSize=10", current)

        assert options.page_size == 10

    def test_unknown_parameters_are_kept_verbatim(self):
        options = parse_next_page_url("/evm/eth/txs/0xabc?cursorToken=000123&flag=true")

        assert options.model_extra == {"cursorToken": "000123", "flag": "true"}
        assert options.to_wire()["cursorToken"] == "000123"

    @pytest.mark.parametrize(
        "query",
        ["pageSize=0", "sort=ASC", "endBlock=latest"],
    )
    def test_invalid_values_raise_transaction_error(self, query):
        url = f"/cosmos/cosmoshub/txs/cosmos1abc?{query}"

        with pytest.raises(TransactionError) as exc_info:
            parse_next_page_url(url)

        assert exc_info.value.error_type is ErrorType.INVALID_RESPONSE_FORMAT
        assert exc_info.value.details["nextPageUrl"] == url
