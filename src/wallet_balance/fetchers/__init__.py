"""HTTP fetchers for numeric and JSON API responses."""

from wallet_balance.fetchers.http import DEFAULT_TIMEOUT, HTTPClient, create_http_client
from wallet_balance.fetchers.json import JSONFetcher
from wallet_balance.fetchers.number import NumberFetcher

__all__ = [
    "DEFAULT_TIMEOUT",
    "HTTPClient",
    "JSONFetcher",
    "NumberFetcher",
    "create_http_client",
]
