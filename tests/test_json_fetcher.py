"""Tests for the status-checking JSON fetcher."""

import pytest
from conftest import json_response, text_response
from pydantic import BaseModel

from wallet_balance.errors import DecodeError, HTTPStatusError, ProviderStatusError
from wallet_balance.fetchers import JSONFetcher

URL = "https://api.etherscan.io/api?module=account&action=balancemulti&address=0,1&tag=latest"


class Entry(BaseModel):
    account: str
    balance: str


class Response(BaseModel):
    status: str
    message: str
    result: list[Entry]


def test_fetch_decodes_payload(make_client):
    """Test a successful response is decoded into the model."""
    body = {
        "status": "1",
        "message": "OK",
        "result": [{"account": "0", "balance": "190.123"}, {"account": "1", "balance": "100"}],
    }
    fetcher = JSONFetcher(make_client(lambda request: json_response(body)))

    response = fetcher.fetch(URL, Response)

    assert response.status == "1"
    assert [entry.balance for entry in response.result] == ["190.123", "100"]


def test_fetch_failed_status_uses_message(make_client):
    """Test that a failure status raises with the message field verbatim."""
    body = {"status": "0", "message": "NOTOK", "result": "Error! Invalid address format"}
    fetcher = JSONFetcher(make_client(lambda request: json_response(body)))

    with pytest.raises(ProviderStatusError) as exc_info:
        fetcher.fetch(URL, Response)

    assert str(exc_info.value) == "NOTOK"


def test_fetch_checks_status_before_payload(make_client):
    """Test that a failure status wins over a payload that would not validate."""
    body = {"status": "0", "message": "Max rate limit reached", "result": None}
    fetcher = JSONFetcher(make_client(lambda request: json_response(body)))

    with pytest.raises(ProviderStatusError, match="Max rate limit reached"):
        fetcher.fetch(URL, Response)


@pytest.mark.parametrize(
    "body",
    [
        "Hello!",
        '{"message": "OK", "result": []}',
        '{"status": 1, "message": "OK", "result": []}',
        "[1, 2, 3]",
        '{"status": "1", "message": "OK", "result": "not a list"}',
    ],
)
def test_fetch_decode_errors(make_client, body):
    """Test malformed JSON, missing status, and unexpected shapes."""
    fetcher = JSONFetcher(make_client(lambda request: text_response(body)))

    with pytest.raises(DecodeError):
        fetcher.fetch(URL, Response)


def test_fetch_http_error(make_client):
    """Test that non-2xx responses fail before any decoding."""
    fetcher = JSONFetcher(make_client(lambda request: text_response("Server Error in '/' Application.", 404)))

    with pytest.raises(HTTPStatusError, match="Server Error"):
        fetcher.fetch("https://api.etherscan.io/api2", Response)
