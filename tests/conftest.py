"""Pytest configuration for wallet-balance tests."""

from collections.abc import Callable

import httpx
import pytest

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    """Requests sent through clients created by ``make_client``."""
    return []


@pytest.fixture
def make_client(requests_seen):
    """Build an httpx client whose requests are answered by a handler function."""
    clients = []

    def _make(handler: Handler) -> httpx.Client:
        def record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(record))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


def text_response(body: str, status_code: int = 200) -> httpx.Response:
    """Plain-text response."""
    return httpx.Response(status_code, text=body)


def json_response(data: object, status_code: int = 200) -> httpx.Response:
    """JSON response."""
    return httpx.Response(status_code, json=data)
