"""chainz.cryptoid.info provider for altcoins."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from decimal import Decimal

from wallet_balance.core.models import FetchOutcome
from wallet_balance.data.currencies import CRYPTOID_BALANCE_URL, CRYPTOID_RATE_URL
from wallet_balance.errors import WalletBalanceError
from wallet_balance.fetchers.http import HTTPClient
from wallet_balance.fetchers.number import NumberFetcher
from wallet_balance.providers.base import BaseProvider

logger = logging.getLogger(__name__)


class GenericLedgerProvider(BaseProvider):
    """
    Fetches altcoin balances and prices from https://chainz.cryptoid.info/.

    The explorer has no multi-address endpoint, so one request is issued per
    address, all of them concurrently.

    Parameters
    ----------
    client : HTTPClient
        HTTP client used for all requests
    currency : str
        Lower-case explorer currency code (e.g., 'dash', 'ltc')

    """

    name = "cryptoid"

    def __init__(self, client: HTTPClient, currency: str) -> None:
        super().__init__(client, currency)
        self.fetcher = NumberFetcher(client)

    def _fetch_balance_outcome(self, addresses: Sequence[str], api_key: str) -> FetchOutcome:
        """
        Fetch and sum the balance of every address.

        All requests run to completion. Successful balances are summed even
        when another request fails; the outcome then carries the partial sum
        together with the first error observed.

        Parameters
        ----------
        addresses : Sequence[str]
            Addresses to sum
        api_key : str
            Cryptoid API key

        Returns
        -------
        FetchOutcome
            Summed balance and the first error, if any

        """
        if not addresses:
            return FetchOutcome()

        total = Decimal("0")
        first_error: WalletBalanceError | None = None

        with ThreadPoolExecutor(max_workers=len(addresses)) as executor:
            futures = [executor.submit(self._fetch_address_balance, address, api_key) for address in addresses]
            for future in as_completed(futures):
                try:
                    total += future.result()
                except WalletBalanceError as e:
                    logger.debug("cryptoid %s balance request failed: %s", self.currency, e)
                    if first_error is None:
                        first_error = e

        return FetchOutcome(value=total, error=first_error)

    def _fetch_address_balance(self, address: str, api_key: str) -> Decimal:
        url = CRYPTOID_BALANCE_URL.format(currency=self.currency, api_key=api_key, address=address)
        return self.fetcher.fetch(url)

    def _fetch_exchange_rate(self, api_key: str, target_currency: str) -> Decimal:
        url = CRYPTOID_RATE_URL.format(currency=self.currency, target=target_currency, api_key=api_key)
        return self.fetcher.fetch(url)
