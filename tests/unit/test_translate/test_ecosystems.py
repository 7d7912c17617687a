"""Unit tests for ecosystem clients over a mocked Translate API."""
from __future__ import annotations

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from translate_sdk import TranslateClient
from translate_sdk.core.exceptions import ChainNotFoundError, ErrorType, TransactionError
from translate_sdk.core.pagination import PageOptions
from translate_sdk.core.settings import ClientSettings
from translate_sdk.translate import (
    ECOSYSTEM_CLIENTS,
    CosmosTranslate,
    EVMTranslate,
    PolkadotTranslate,
    SVMTranslate,
    TVMTranslate,
    UTXOTranslate,
    XRPLTranslate,
)

BASE = "https://translate.test"


@pytest.fixture
def build(client_settings, mock_transport):
    """Create an ecosystem client whose API answers with ``handler``."""

    def factory(client_cls, handler):
        transport = mock_transport(handler)
        return client_cls("test-key", settings=client_settings, transport=transport), transport

    return factory


def two_pages(first: dict, second: dict, *, page_param: str):
    """Handler serving ``first`` until the request carries ``page_param``."""

    def handler(request: httpx.Request) -> httpx.Response:
        if page_param in request.url.params:
            return httpx.Response(200, json=second)
        return httpx.Response(200, json=first)

    return handler


@pytest.mark.unit
class TestEcosystemPaging:
    """Each ecosystem's next-page signal becomes PageOptions."""

    @pytest.mark.asyncio
    async def test_evm_next_page_url(self, build):
        client, transport = build(
            EVMTranslate,
            two_pages(
                {
                    "items": [{"txHash": "0x1"}, {"txHash": "0x2"}],
                    "hasNextPage": True,
                    "nextPageUrl": f"{BASE}/evm/eth/txs/0xabc?endBlock=50&ignoreTransactions=t1",
                },
                {"items": [{"txHash": "0x3"}], "hasNextPage": False, "nextPageUrl": None},
                page_param="ignoreTransactions",
            ),
        )

        async with client:
            page = await client.get_transactions("eth", "0xabc", PageOptions(page_size=2))
            assert page.get_next_page_keys() == PageOptions(
                page_size=2, end_block=50, ignore_transactions="t1"
            )
            assert await page.next() is True

        assert page.get_transactions() == [{"txHash": "0x3"}]
        assert page.has_next() is False
        first, second = transport.requests
        assert first.url.path == "/evm/eth/txs/0xabc"
        assert dict(first.url.params) == {"pageSize": "2"}
        assert dict(second.url.params) == {
            "pageSize": "2",
            "endBlock": "50",
            "ignoreTransactions": "t1",
        }

    @pytest.mark.asyncio
    async def test_flat_signal_needs_has_next_page(self, build):
        client, _ = build(
            CosmosTranslate,
            lambda request: httpx.Response(
                200,
                json={"items": [], "hasNextPage": False, "nextPageUrl": f"{BASE}/cosmos/x?pageKey=1"},
            ),
        )

        async with client:
            page = await client.get_transactions("cosmoshub", "cosmos1abc")

        assert page.has_next() is False

    @pytest.mark.asyncio
    async def test_svm_url_only(self, build):
        client, transport = build(
            SVMTranslate,
            two_pages(
                {
                    "items": [{"signature": "s1"}],
                    "nextPageUrl": f"{BASE}/svm/solana/txs/abc?pageSize=1&beforeSignature=s1",
                },
                {"items": [{"signature": "s2"}], "nextPageUrl": None},
                page_param="beforeSignature",
            ),
        )

        async with client:
            page = await client.get_transactions("solana", "abc", PageOptions(page_size=1))
            items = [tx async for tx in page]

        assert items == [{"signature": "s1"}, {"signature": "s2"}]
        assert transport.requests[1].url.params["beforeSignature"] == "s1"

    @pytest.mark.asyncio
    async def test_utxo_page_number(self, build):
        client, transport = build(
            UTXOTranslate,
            two_pages(
                {
                    "items": [{"txid": "a"}],
                    "hasNextPage": True,
                    "nextPageUrl": f"{BASE}/utxo/btc/txs/bc1?page=2&ascending=false",
                },
                {"items": [{"txid": "b"}], "hasNextPage": False},
                page_param="page",
            ),
        )

        async with client:
            page = await client.get_transactions("btc", "bc1")
            await page.next()

        assert page.get_current_page_keys() == PageOptions(page_number=2, ascending=False)
        assert transport.requests[1].url.params["page"] == "2"
        assert transport.requests[1].url.params["ascending"] == "false"

    @pytest.mark.asyncio
    async def test_tvm_page_key_stays_string(self, build):
        client, _ = build(
            TVMTranslate,
            lambda request: httpx.Response(
                200,
                json={
                    "items": [],
                    "hasNextPage": True,
                    "nextPageUrl": f"{BASE}/tvm/tron/txs/T1?pageKey=000123",
                },
            ),
        )

        async with client:
            page = await client.get_transactions("tron", "T1")

        assert page.get_next_page_keys().page_key == "000123"

    @pytest.mark.asyncio
    async def test_polkadot_next_page_settings(self, build):
        client, _ = build(
            PolkadotTranslate,
            lambda request: httpx.Response(
                200,
                json={
                    "items": [{"block": 1}],
                    "nextPageSettings": {
                        "hasNextPage": True,
                        "nextPageUrl": f"{BASE}/polkadot/bittensor/txs/5F?endBlock=10",
                    },
                },
            ),
        )

        async with client:
            page = await client.get_transactions("bittensor", "5F", PageOptions(page_size=50))

        assert page.get_next_page_keys() == PageOptions(page_size=50, end_block=10)

    @pytest.mark.asyncio
    async def test_polkadot_missing_settings_is_invalid(self, build):
        client, _ = build(
            PolkadotTranslate,
            lambda request: httpx.Response(200, json={"items": []}),
        )

        async with client:
            with pytest.raises(TransactionError) as exc_info:
                await client.get_transactions("bittensor", "5F")

        assert exc_info.value.error_type is ErrorType.INVALID_RESPONSE_FORMAT

    @pytest.mark.asyncio
    async def test_xrpl_marker_overrides_url(self, build):
        client, transport = build(
            XRPLTranslate,
            two_pages(
                {
                    "items": [{"hash": "h1"}],
                    "nextPageSettings": {
                        "marker": "ledger:42",
                        "nextPageUrl": f"{BASE}/xrpl/xrpl/txs/rAbc?marker=ledger%253A42",
                    },
                },
                {"items": [], "nextPageSettings": {"marker": None, "nextPageUrl": None}},
                page_param="marker",
            ),
        )

        async with client:
            page = await client.get_transactions("xrpl", "rAbc")
            assert page.get_next_page_keys().marker == "ledger:42"
            await page.next()

        assert transport.requests[1].url.params["marker"] == "ledger:42"
        assert page.has_next() is False

    @pytest.mark.asyncio
    async def test_items_must_be_a_list(self, build):
        client, _ = build(EVMTranslate, lambda request: httpx.Response(200, json={"items": {}}))

        async with client:
            with pytest.raises(TransactionError) as exc_info:
                await client.get_transactions("eth", "0xabc")

        assert exc_info.value.error_type is ErrorType.INVALID_RESPONSE_FORMAT

    @pytest.mark.asyncio
    async def test_malformed_next_page_url_is_invalid_response(self, build):
        client, _ = build(
            CosmosTranslate,
            lambda request: httpx.Response(
                200,
                json={
                    "items": [{"hash": "h1"}],
                    "hasNextPage": True,
                    "nextPageUrl": f"{BASE}/cosmos/cosmoshub/txs/cosmos1abc?pageSize=0",
                },
            ),
        )

        async with client:
            with pytest.raises(TransactionError) as exc_info:
                await client.get_transactions("cosmoshub", "cosmos1abc")

        assert exc_info.value.error_type is ErrorType.INVALID_RESPONSE_FORMAT

    @pytest.mark.asyncio
    async def test_opaque_next_page_token_is_sent_unchanged(self, build):
        client, transport = build(
            CosmosTranslate,
            two_pages(
                {
                    "items": [{"hash": "h1"}],
                    "hasNextPage": True,
                    "nextPageUrl": f"{BASE}/cosmos/cosmoshub/txs/cosmos1abc?cursorToken=000123",
                },
                {"items": [], "hasNextPage": False},
                page_param="cursorToken",
            ),
        )

        async with client:
            page = await client.get_transactions("cosmoshub", "cosmos1abc")
            await page.next()

        assert transport.requests[1].url.params["cursorToken"] == "000123"

    @pytest.mark.asyncio
    async def test_resume_from_cursor(self, build):
        client, transport = build(
            EVMTranslate,
            lambda request: httpx.Response(200, json={"items": [], "hasNextPage": False}),
        )
        token = "eyJlbmRCbG9jayI6NTAsInBhZ2VTaXplIjoyfQ=="  # {"endBlock":50,"pageSize":2}

        async with client:
            page = await client.transactions_from_cursor("eth", "0xabc", token)

        assert page.get_current_page_keys() == PageOptions(page_size=2, end_block=50)
        assert transport.requests[0].url.params["endBlock"] == "50"


@pytest.mark.unit
class TestEcosystemEndpoints:
    """Tests for chains and single-transaction endpoints."""

    @pytest.mark.asyncio
    async def test_get_chain_is_case_insensitive(self, build):
        chains = [{"name": "eth", "ecosystem": "evm"}, {"name": "polygon", "ecosystem": "evm"}]
        client, transport = build(EVMTranslate, lambda request: httpx.Response(200, json=chains))

        async with client:
            assert await client.get_chain("Polygon") == chains[1]
            with pytest.raises(ChainNotFoundError):
                await client.get_chain("eth-classic")

        assert transport.requests[0].url.path == "/evm/chains"

    @pytest.mark.asyncio
    async def test_get_chains_rejects_non_list(self, build):
        client, _ = build(EVMTranslate, lambda request: httpx.Response(200, json={"chains": []}))

        async with client:
            with pytest.raises(TransactionError):
                await client.get_chains()

    @pytest.mark.asyncio
    async def test_evm_transaction_v5_format(self, build):
        client, transport = build(
            EVMTranslate,
            lambda request: httpx.Response(200, json={"txTypeVersion": 5}),
        )

        async with client:
            tx = await client.get_transaction("eth", "0xhash", v5_format=True)

        assert tx == {"txTypeVersion": 5}
        assert transport.requests[0].url.path == "/evm/eth/tx/0xhash"
        assert transport.requests[0].url.params["v5Format"] == "true"

    @pytest.mark.asyncio
    async def test_evm_history_endpoint(self, build):
        client, transport = build(
            EVMTranslate,
            lambda request: httpx.Response(
                200,
                json={"items": [{"transactionHash": "0x1"}], "hasNextPage": False},
            ),
        )

        async with client:
            page = await client.history("eth", "0xabc", PageOptions(page_size=100))

        assert page.get_transactions() == [{"transactionHash": "0x1"}]
        assert transport.requests[0].url.path == "/evm/eth/history/0xabc"

    @pytest.mark.asyncio
    async def test_utxo_addresses_by_xpub(self, build):
        client, transport = build(
            UTXOTranslate,
            lambda request: httpx.Response(200, json=["bc1a", "bc1b"]),
        )

        async with client:
            assert await client.get_addresses_by_xpub("xpub123") == ["bc1a", "bc1b"]

        assert transport.requests[0].url.path == "/utxo/btc/addresses/xpub123"

    @pytest.mark.asyncio
    async def test_polkadot_block_transaction(self, build):
        client, transport = build(
            PolkadotTranslate,
            lambda request: httpx.Response(200, json={"block": 10}),
        )

        async with client:
            await client.get_block_transaction("bittensor", 10, 2)

        assert transport.requests[0].url.path == "/polkadot/bittensor/tx/10/2"

    @pytest.mark.asyncio
    async def test_api_error_propagates(self, build):
        client, _ = build(
            SVMTranslate,
            lambda request: httpx.Response(429, json={"message": "Rate limit exceeded"}),
        )

        async with client:
            with pytest.raises(TransactionError) as exc_info:
                await client.get_transactions("solana", "abc")

        assert exc_info.value.is_rate_limited()

    @pytest.mark.asyncio
    async def test_evm_describe_transaction(self, build):
        client, transport = build(
            EVMTranslate,
            lambda request: httpx.Response(200, json={"description": "Sent 1 ETH", "type": "sendToken"}),
        )

        async with client:
            result = await client.describe_transaction("Ethereum", "0xhash", "0xviewer")

        assert result["type"] == "sendToken"
        request = transport.requests[0]
        assert request.url.path == "/evm/eth/describeTx/0xhash"
        assert request.url.params["viewAsAccountAddress"] == "0xviewer"

    @pytest.mark.asyncio
    async def test_evm_describe_transaction_requires_type(self, build):
        client, _ = build(
            EVMTranslate,
            lambda request: httpx.Response(200, json={"description": "Sent 1 ETH"}),
        )

        async with client:
            with pytest.raises(TransactionError) as exc_info:
                await client.describe_transaction("eth", "0xhash")

        assert exc_info.value.error_type is ErrorType.INVALID_RESPONSE_FORMAT

    @pytest.mark.asyncio
    async def test_evm_describe_transactions_posts_hashes(self, build):
        described = [{"txHash": "0x1", "type": "swap"}, {"txHash": "0x2", "type": "claim"}]
        client, transport = build(EVMTranslate, lambda request: httpx.Response(200, json=described))

        async with client:
            assert await client.describe_transactions("eth", ["0x1", "0x2"]) == described

        request = transport.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/evm/eth/describeTxs"
        assert "viewAsAccountAddress" not in request.url.params
        assert json.loads(request.content) == {"txHashes": ["0x1", "0x2"]}

    @pytest.mark.asyncio
    async def test_evm_tx_types_and_raw_transaction(self, build):
        def handler(request):
            if request.url.path.endswith("/txTypes"):
                return httpx.Response(200, json={"transactionTypes": [], "version": 1})
            return httpx.Response(200, json={"network": "eth", "rawTx": {}, "rawTraces": []})

        client, transport = build(EVMTranslate, handler)

        async with client:
            assert (await client.get_tx_types())["version"] == 1
            assert (await client.get_raw_transaction("eth", "0xhash"))["network"] == "eth"

        assert [r.url.path for r in transport.requests] == ["/evm/txTypes", "/evm/eth/raw/tx/0xhash"]

    @pytest.mark.asyncio
    async def test_evm_transaction_job_lifecycle(self, build):
        def handler(request):
            if request.method == "POST":
                return httpx.Response(200, json={"jobId": "job-1", "nextPageUrl": "/evm/eth/txs/job/job-1"})
            if request.method == "DELETE":
                return httpx.Response(204)
            return httpx.Response(200, json={"items": [{"txHash": "0x1"}], "hasNextPage": False})

        client, transport = build(EVMTranslate, handler)

        async with client:
            job = await client.start_transaction_job("ethereum", "0xabc", 1, 100)
            results = await client.get_transaction_job_results(
                "eth", job["jobId"], PageOptions(page_size=50)
            )
            await client.delete_transaction_job("eth", job["jobId"])

        assert results["items"] == [{"txHash": "0x1"}]
        start, fetch, delete = transport.requests
        assert start.url.path == "/evm/eth/txs/job/start"
        assert dict(start.url.params) == {
            "accountAddress": "0xabc",
            "startBlock": "1",
            "endBlock": "100",
            "v5Format": "false",
            "excludeSpam": "true",
        }
        assert fetch.url.path == "/evm/eth/txs/job/job-1"
        assert fetch.url.params["pageSize"] == "50"
        assert (delete.method, delete.url.path) == ("DELETE", "/evm/eth/txs/job/job-1")

    @pytest.mark.asyncio
    async def test_evm_job_still_processing(self, build):
        client, _ = build(
            EVMTranslate,
            lambda request: httpx.Response(425, json={"message": "Job is still processing"}),
        )

        async with client:
            with pytest.raises(TransactionError) as exc_info:
                await client.get_transaction_job_results("eth", "job-1")

        assert exc_info.value.is_job_processing()

    @pytest.mark.asyncio
    async def test_evm_start_job_requires_job_id(self, build):
        client, _ = build(EVMTranslate, lambda request: httpx.Response(200, json={}))

        async with client:
            with pytest.raises(TransactionError):
                await client.start_transaction_job("eth", "0xabc", 1, 2)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("client_cls", [UTXOTranslate, XRPLTranslate])
    async def test_transaction_view_as_account(self, build, client_cls):
        body = {"classificationData": {"type": "payment"}}
        client, transport = build(client_cls, lambda request: httpx.Response(200, json=body))

        async with client:
            assert await client.get_transaction("chain", "h1", view_as_account_address="acct") == body
            await client.get_transaction("chain", "h1")

        viewed, plain = transport.requests
        assert viewed.url.path == f"/{client_cls.ecosystem}/chain/tx/h1"
        assert viewed.url.params["viewAsAccountAddress"] == "acct"
        assert "viewAsAccountAddress" not in plain.url.params

    @pytest.mark.asyncio
    async def test_svm_spl_tokens(self, build):
        accounts = {"accountPubkey": "abc", "tokenAccounts": [{"pubKey": "t1"}]}
        client, transport = build(SVMTranslate, lambda request: httpx.Response(200, json=accounts))

        async with client:
            assert await client.get_spl_tokens("abc") == accounts

        assert transport.requests[0].url.path == "/svm/solana/splAccounts/abc"


@pytest.mark.unit
class TestClientConstruction:
    """Tests for API key resolution and the client bundle."""

    def test_api_key_required(self, monkeypatch):
        monkeypatch.delenv("TRANSLATE_API_KEY", raising=False)

        with pytest.raises(ValueError, match="API key is required"):
            EVMTranslate(settings=ClientSettings(_env_file=None))

    def test_api_key_from_settings(self, client_settings):
        client = XRPLTranslate(settings=client_settings)

        assert client.http.default_headers["apiKey"] == "test-api-key"
        assert client.http.base_url == "https://translate.test/xrpl/"

    def test_registry_covers_every_ecosystem(self):
        assert set(ECOSYSTEM_CLIENTS) == {
            "evm",
            "svm",
            "utxo",
            "cosmos",
            "tvm",
            "polkadot",
            "xrpl",
        }

    @pytest.mark.asyncio
    async def test_translate_client_bundle(self, client_settings):
        async with TranslateClient("key", settings=client_settings) as client:
            assert isinstance(client.evm, EVMTranslate)
            assert client.ecosystem("XRPL") is client.xrpl
            with pytest.raises(KeyError, match="Unknown ecosystem"):
                client.ecosystem("aptos")

    @pytest.mark.asyncio
    async def test_translate_client_close_survives_one_failure(self, client_settings, monkeypatch):
        client = TranslateClient("key", settings=client_settings)
        evm_http = client.evm.http
        monkeypatch.setattr(client.evm, "close", AsyncMock(side_effect=RuntimeError("boom")))

        with pytest.raises(RuntimeError, match="boom"):
            await client.close()

        for name, ecosystem_client in client.clients.items():
            if name != "evm":
                assert ecosystem_client.http.client.is_closed
        await evm_http.close()
