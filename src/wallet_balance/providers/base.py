"""Base provider class with the balance and exchange-rate capability set."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from decimal import Decimal
from typing import ClassVar

from wallet_balance.core.models import FetchOutcome
from wallet_balance.errors import WalletBalanceError
from wallet_balance.fetchers.http import HTTPClient

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """
    Abstract base class for balance providers.

    Subclasses implement ``_fetch_balance`` (or ``_fetch_balance_outcome``
    when a failed fetch still yields a partial value) and
    ``_fetch_exchange_rate``, raising ``WalletBalanceError`` subclasses on
    failure. The public methods capture those errors into a ``FetchOutcome``
    so that a failed sub-fetch never raises across a thread boundary.

    Attributes
    ----------
    name : str
        Provider identifier (must be set in subclass)
    currency : str
        Currency code understood by the upstream API

    """

    name: ClassVar[str] = ""

    def __init__(self, client: HTTPClient, currency: str) -> None:
        """
        Initialize the provider.

        Parameters
        ----------
        client : HTTPClient
            HTTP client used for all requests
        currency : str
            Currency code understood by the upstream API

        """
        if not self.name:
            msg = f"{self.__class__.__name__} must define 'name' attribute"
            raise ValueError(msg)
        self.client = client
        self.currency = currency

    def fetch_balance(self, addresses: Sequence[str], api_key: str = "") -> FetchOutcome:
        """
        Fetch the aggregate balance of ``addresses``.

        Parameters
        ----------
        addresses : Sequence[str]
            Addresses to sum
        api_key : str
            API key for the upstream provider

        Returns
        -------
        FetchOutcome
            Balance in whole currency units, or the captured error

        """
        try:
            return self._fetch_balance_outcome(addresses, api_key)
        except WalletBalanceError as e:
            logger.debug("%s balance fetch for %s failed: %s", self.name, self.currency, e)
            return FetchOutcome(error=e)

    def fetch_exchange_rate(self, api_key: str, target_currency: str) -> FetchOutcome:
        """
        Fetch the price of one currency unit in ``target_currency``.

        Parameters
        ----------
        api_key : str
            API key for the upstream provider
        target_currency : str
            Lower-case fiat currency code (e.g., 'usd')

        Returns
        -------
        FetchOutcome
            Exchange rate, or the captured error

        """
        try:
            return FetchOutcome(value=self._fetch_exchange_rate(api_key, target_currency))
        except WalletBalanceError as e:
            logger.debug("%s %s/%s rate fetch failed: %s", self.name, self.currency, target_currency, e)
            return FetchOutcome(error=e)

    def _fetch_balance_outcome(self, addresses: Sequence[str], api_key: str) -> FetchOutcome:
        """Fetch the aggregate balance; override to report a partial value with its error."""
        return FetchOutcome(value=self._fetch_balance(addresses, api_key))

    def _fetch_balance(self, addresses: Sequence[str], api_key: str) -> Decimal:
        """Fetch the aggregate balance, raising on failure."""
        raise NotImplementedError

    @abstractmethod
    def _fetch_exchange_rate(self, api_key: str, target_currency: str) -> Decimal:
        """Fetch the exchange rate, raising on failure."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(currency={self.currency!r})"
