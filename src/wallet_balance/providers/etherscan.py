"""etherscan.io provider for Ethereum."""

from collections.abc import Sequence
from decimal import Decimal

from pydantic import BaseModel

from wallet_balance.data.currencies import (
    ETHERSCAN_BALANCE_URL,
    ETHERSCAN_RATE_URL,
    ETHERSCAN_SUCCESS_STATUS,
    ETHERSCAN_TARGET_CURRENCIES,
    WEI,
)
from wallet_balance.errors import UnsupportedTargetCurrencyError
from wallet_balance.fetchers.http import HTTPClient
from wallet_balance.fetchers.json import JSONFetcher
from wallet_balance.fetchers.number import parse_decimal
from wallet_balance.providers.base import BaseProvider


class AccountBalance(BaseModel):
    """One entry of a ``balancemulti`` result."""

    account: str
    balance: str


class BalanceMultiResponse(BaseModel):
    """Response of ``module=account&action=balancemulti``."""

    status: str
    message: str = ""
    result: list[AccountBalance]


class EthPrice(BaseModel):
    """Price quote of ``module=stats&action=ethprice``."""

    ethusd: str


class EthPriceResponse(BaseModel):
    """Response of ``module=stats&action=ethprice``."""

    status: str
    message: str = ""
    result: EthPrice


class EtherscanProvider(BaseProvider):
    """
    Fetches ETH balances and prices from https://api.etherscan.io/.

    Balances for all addresses come from a single ``balancemulti`` call and
    are reported in wei. Prices are only available in USD.

    """

    name = "etherscan"

    def __init__(self, client: HTTPClient, currency: str = "eth") -> None:
        super().__init__(client, currency)
        self.fetcher = JSONFetcher(client, success_status=ETHERSCAN_SUCCESS_STATUS)

    def _fetch_balance(self, addresses: Sequence[str], api_key: str) -> Decimal:
        url = ETHERSCAN_BALANCE_URL.format(addresses=",".join(addresses))
        response = self.fetcher.fetch(url, BalanceMultiResponse)

        total = Decimal("0")
        for entry in response.result:
            total += parse_decimal(entry.balance) / WEI
        return total

    def _fetch_exchange_rate(self, api_key: str, target_currency: str) -> Decimal:
        if target_currency not in ETHERSCAN_TARGET_CURRENCIES:
            msg = f"{target_currency} is not supported as target currency for ETH, only USD at the moment"
            raise UnsupportedTargetCurrencyError(msg)

        url = ETHERSCAN_RATE_URL.format(api_key=api_key)
        response = self.fetcher.fetch(url, EthPriceResponse)
        return parse_decimal(response.result.ethusd)
