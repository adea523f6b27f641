"""Tests for the blockchain explorer providers."""

import threading
from decimal import Decimal

import httpx
import pytest
from conftest import json_response, text_response

from wallet_balance.errors import (
    DecodeError,
    HTTPStatusError,
    ProviderStatusError,
    TransportError,
    UnsupportedTargetCurrencyError,
)
from wallet_balance.providers import BlockchainProvider, EtherscanProvider, GenericLedgerProvider
from wallet_balance.providers.base import BaseProvider


class TestBlockchainProvider:
    """blockchain.info adapter for BTC."""

    def test_balance_converts_satoshi(self, make_client, requests_seen):
        """Test one request for all addresses and division by 10^8."""
        provider = BlockchainProvider(make_client(lambda request: text_response("190000000")))

        outcome = provider.fetch_balance(["a", "b"], "")

        assert outcome.error is None
        assert outcome.value == Decimal("1.9")
        assert len(requests_seen) == 1
        assert requests_seen[0].url.host == "blockchain.info"
        assert requests_seen[0].url.path == "/q/addressbalance/a|b"

    def test_exchange_rate_is_reciprocal(self, make_client, requests_seen):
        """Test that the BTC price of one USD is inverted."""
        provider = BlockchainProvider(make_client(lambda request: text_response("0.00002")))

        outcome = provider.fetch_exchange_rate("", "usd")

        assert outcome.error is None
        assert outcome.value == Decimal("50000")
        url = requests_seen[0].url
        assert url.path == "/tobtc"
        assert url.params["currency"] == "usd"
        assert url.params["value"] == "1"

    def test_unsupported_target_currency_fails_to_parse(self, make_client):
        """Test that an unsupported fiat code surfaces as the upstream error."""
        body = "Parameter <currency> with value XYZ is not valid."
        provider = BlockchainProvider(make_client(lambda request: text_response(body)))

        outcome = provider.fetch_exchange_rate("", "xyz")

        assert isinstance(outcome.error, DecodeError)
        assert outcome.value == 0

    def test_zero_rate_is_decode_error(self, make_client):
        """Test that a zero quote cannot be inverted."""
        provider = BlockchainProvider(make_client(lambda request: text_response("0")))

        outcome = provider.fetch_exchange_rate("", "usd")

        assert isinstance(outcome.error, DecodeError)

    def test_overlong_address_list_is_transport_error(self, make_client, requests_seen):
        """Test an address list too long for one URL fails without a request."""
        provider = BlockchainProvider(make_client(lambda request: text_response("1")))

        outcome = provider.fetch_balance(["1" * 40] * 2000, "")

        assert isinstance(outcome.error, TransportError)
        assert outcome.value == 0
        assert requests_seen == []

    def test_balance_http_error(self, make_client):
        """Test that an HTTP failure is captured with a zero balance."""
        provider = BlockchainProvider(make_client(lambda request: text_response("Checksum does not validate", 500)))

        outcome = provider.fetch_balance(["bad"], "")

        assert isinstance(outcome.error, HTTPStatusError)
        assert str(outcome.error) == "Checksum does not validate"
        assert outcome.value == 0


class TestEtherscanProvider:
    """etherscan.io adapter for ETH."""

    def test_balance_sums_all_addresses(self, make_client, requests_seen):
        """Test a single balancemulti request whose wei balances are summed."""
        body = {
            "status": "1",
            "message": "OK",
            "result": [
                {"account": "0xa", "balance": "1500000000000000000"},
                {"account": "0xb", "balance": "250000000000000000"},
            ],
        }
        provider = EtherscanProvider(make_client(lambda request: json_response(body)))

        outcome = provider.fetch_balance(["0xa", "0xb"], "key")

        assert outcome.error is None
        assert outcome.value == Decimal("1.75")
        assert len(requests_seen) == 1
        params = requests_seen[0].url.params
        assert params["module"] == "account"
        assert params["action"] == "balancemulti"
        assert params["address"] == "0xa,0xb"
        assert params["tag"] == "latest"

    def test_balance_parse_failure_aborts_sum(self, make_client):
        """Test that one malformed entry fails the whole balance."""
        body = {
            "status": "1",
            "message": "OK",
            "result": [
                {"account": "0xa", "balance": "1000000000000000000"},
                {"account": "0xb", "balance": "lots"},
            ],
        }
        provider = EtherscanProvider(make_client(lambda request: json_response(body)))

        outcome = provider.fetch_balance(["0xa", "0xb"], "")

        assert isinstance(outcome.error, DecodeError)
        assert outcome.value == 0

    def test_balance_provider_status_error(self, make_client):
        """Test that an API-level failure carries the API message."""
        body = {"status": "0", "message": "NOTOK", "result": "Error! Invalid address format"}
        provider = EtherscanProvider(make_client(lambda request: json_response(body)))

        outcome = provider.fetch_balance(["nope"], "")

        assert isinstance(outcome.error, ProviderStatusError)
        assert str(outcome.error) == "NOTOK"

    def test_exchange_rate_usd(self, make_client, requests_seen):
        """Test parsing of the ethusd quote."""
        body = {"status": "1", "message": "OK", "result": {"ethbtc": "0.05", "ethusd": "3012.55"}}
        provider = EtherscanProvider(make_client(lambda request: json_response(body)))

        outcome = provider.fetch_exchange_rate("secret", "usd")

        assert outcome.error is None
        assert outcome.value == Decimal("3012.55")
        params = requests_seen[0].url.params
        assert params["module"] == "stats"
        assert params["action"] == "ethprice"
        assert params["apikey"] == "secret"

    def test_exchange_rate_rejects_other_currencies_without_request(self, make_client, requests_seen):
        """Test that non-USD targets fail before any network call."""
        provider = EtherscanProvider(make_client(lambda request: pytest.fail("unexpected request")))

        outcome = provider.fetch_exchange_rate("secret", "eur")

        assert isinstance(outcome.error, UnsupportedTargetCurrencyError)
        assert outcome.value == 0
        assert requests_seen == []


class TestGenericLedgerProvider:
    """chainz.cryptoid.info adapter for altcoins."""

    def test_balance_one_request_per_address(self, make_client, requests_seen):
        """Test fan-out over addresses and summing of the results."""
        balances = {"a": "10", "b": "15"}
        provider = GenericLedgerProvider(
            make_client(lambda request: text_response(balances[request.url.params["a"]])), "dash"
        )

        outcome = provider.fetch_balance(["a", "b"], "key")

        assert outcome.error is None
        assert outcome.value == Decimal("25")
        assert len(requests_seen) == 2
        for request in requests_seen:
            assert request.url.host == "chainz.cryptoid.info"
            assert request.url.path == "/dash/api.dws"
            assert request.url.params["q"] == "getbalance"
            assert request.url.params["key"] == "key"
        assert sorted(request.url.params["a"] for request in requests_seen) == ["a", "b"]

    def test_balance_keeps_partial_sum_on_error(self, make_client):
        """Test that successful balances are kept alongside the error."""
        balances = {"a": "10", "b": "not a number"}
        provider = GenericLedgerProvider(
            make_client(lambda request: text_response(balances[request.url.params["a"]])), "ltc"
        )

        outcome = provider.fetch_balance(["a", "b"], "")

        assert isinstance(outcome.error, DecodeError)
        assert outcome.value == Decimal("10")

    def test_unbuildable_address_url_keeps_partial_sum(self, make_client, requests_seen):
        """Test an address that cannot be put in a URL fails only its own request."""
        provider = GenericLedgerProvider(make_client(lambda request: text_response("10")), "dash")

        outcome = provider.fetch_balance(["a", "b\x01"], "")

        assert isinstance(outcome.error, TransportError)
        assert outcome.value == Decimal("10")
        assert len(requests_seen) == 1

    def test_balance_goes_through_base_error_capture(self):
        """Test the ledger only supplies the per-address fan-out, not its own fetch_balance."""
        assert "fetch_balance" not in vars(GenericLedgerProvider)
        assert GenericLedgerProvider._fetch_balance_outcome is not BaseProvider._fetch_balance_outcome

    def test_balance_requests_run_concurrently(self, make_client, requests_seen):
        """Test that all address requests are in flight at the same time."""
        barrier = threading.Barrier(3, timeout=5)

        def handler(request: httpx.Request) -> httpx.Response:
            barrier.wait()
            return text_response("1")

        provider = GenericLedgerProvider(make_client(handler), "uno")

        outcome = provider.fetch_balance(["a", "b", "c"], "")

        assert outcome.error is None
        assert outcome.value == Decimal("3")

    def test_balance_waits_for_all_requests_after_error(self, make_client, requests_seen):
        """Test that a failure does not cancel the remaining requests."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params["a"] == "bad":
                raise httpx.ConnectError("refused", request=request)
            return text_response("2.5")

        provider = GenericLedgerProvider(make_client(handler), "bcc")

        outcome = provider.fetch_balance(["bad", "x", "y"], "")

        assert isinstance(outcome.error, TransportError)
        assert outcome.value == Decimal("5.0")
        assert len(requests_seen) == 3

    def test_exchange_rate_is_raw_ticker(self, make_client, requests_seen):
        """Test that the ticker value is used without inversion."""
        provider = GenericLedgerProvider(make_client(lambda request: text_response("95.12")), "dash")

        outcome = provider.fetch_exchange_rate("key", "usd")

        assert outcome.value == Decimal("95.12")
        params = requests_seen[0].url.params
        assert params["q"] == "ticker.usd"
        assert params["key"] == "key"
        assert requests_seen[0].url.path == "/dash/api.dws"
