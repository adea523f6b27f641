"""blockchain.info provider for Bitcoin."""

from collections.abc import Sequence
from decimal import Decimal

from wallet_balance.data.currencies import (
    BLOCKCHAIN_ADDRESS_SEPARATOR,
    BLOCKCHAIN_BALANCE_URL,
    BLOCKCHAIN_RATE_URL,
    SATOSHI,
)
from wallet_balance.errors import DecodeError
from wallet_balance.fetchers.http import HTTPClient
from wallet_balance.fetchers.number import NumberFetcher
from wallet_balance.providers.base import BaseProvider


class BlockchainProvider(BaseProvider):
    """
    Fetches BTC balances and prices from https://blockchain.info/.

    The balance endpoint sums all addresses in one request and answers in
    satoshi. The price endpoint only converts fiat to BTC, so the rate is
    derived from the price of one unit of fiat.

    """

    name = "blockchain"

    def __init__(self, client: HTTPClient, currency: str = "btc") -> None:
        super().__init__(client, currency)
        self.fetcher = NumberFetcher(client)

    def _fetch_balance(self, addresses: Sequence[str], api_key: str) -> Decimal:
        url = BLOCKCHAIN_BALANCE_URL.format(addresses=BLOCKCHAIN_ADDRESS_SEPARATOR.join(addresses))
        return self.fetcher.fetch(url) / SATOSHI

    def _fetch_exchange_rate(self, api_key: str, target_currency: str) -> Decimal:
        url = BLOCKCHAIN_RATE_URL.format(target=target_currency)
        btc_per_unit = self.fetcher.fetch(url)
        if btc_per_unit == 0:
            msg = f"zero BTC price for 1 {target_currency}"
            raise DecodeError(msg)
        return 1 / btc_per_unit
