"""Provider factory mapping currency symbols to provider instances."""

from wallet_balance.core.models import CurrencySymbol
from wallet_balance.data.currencies import CURRENCY_CODES, PROVIDER_KINDS
from wallet_balance.errors import UnknownCurrencyError
from wallet_balance.fetchers.http import HTTPClient
from wallet_balance.providers.base import BaseProvider
from wallet_balance.providers.blockchain import BlockchainProvider
from wallet_balance.providers.etherscan import EtherscanProvider
from wallet_balance.providers.ledger import GenericLedgerProvider

_PROVIDER_CLASSES: dict[str, type[BaseProvider]] = {
    "blockchain": BlockchainProvider,
    "etherscan": EtherscanProvider,
    "ledger": GenericLedgerProvider,
}


class ProviderFactory:
    """
    Creates the provider for a currency symbol.

    The set of supported symbols is closed; see ``PROVIDER_KINDS``.

    Parameters
    ----------
    client : HTTPClient
        HTTP client handed to every provider created

    """

    def __init__(self, client: HTTPClient) -> None:
        self.client = client

    def create(self, symbol: str) -> BaseProvider:
        """
        Create a provider for ``symbol``.

        Parameters
        ----------
        symbol : str
            Currency ticker (e.g., 'BTC', 'DASH')

        Returns
        -------
        BaseProvider
            Provider bound to this factory's HTTP client

        Raises
        ------
        UnknownCurrencyError
            If no provider supports ``symbol``

        """
        try:
            currency = CurrencySymbol(symbol.upper())
        except ValueError as e:
            msg = f"unknown crypto-currency {symbol}"
            raise UnknownCurrencyError(msg) from e

        provider_class = _PROVIDER_CLASSES[PROVIDER_KINDS[currency]]
        return provider_class(self.client, CURRENCY_CODES[currency])

    @staticmethod
    def supported_symbols() -> list[str]:
        """
        Get all symbols a provider exists for.

        Returns
        -------
        list[str]
            Supported currency tickers

        """
        return list(PROVIDER_KINDS)

    @staticmethod
    def provider_name(symbol: str) -> str:
        """Get the name of the provider serving ``symbol``."""
        return _PROVIDER_CLASSES[PROVIDER_KINDS[CurrencySymbol(symbol.upper())]].name
