"""Exception hierarchy for balance and exchange-rate fetching."""


class WalletBalanceError(Exception):
    """Base class for all errors raised while fetching balances."""


class TransportError(WalletBalanceError):
    """Raised when a request could not be sent or its response could not be read."""


class HTTPStatusError(WalletBalanceError):
    """
    Raised when an upstream API answers with a non-2xx status.

    Parameters
    ----------
    message : str
        Response body, or the status line when the body is empty
    status_code : int
        HTTP status code of the response

    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WalletBalanceError):
    """Raised when a response body is not a valid number or JSON document."""


class ProviderStatusError(WalletBalanceError):
    """Raised when an upstream API reports a failure through its own status field."""


class UnsupportedTargetCurrencyError(WalletBalanceError):
    """Raised when a provider cannot quote a price in the requested fiat currency."""


class UnknownCurrencyError(WalletBalanceError):
    """Raised when no provider exists for a currency symbol."""


class ConfigError(WalletBalanceError):
    """Raised when the account configuration cannot be read or validated."""
