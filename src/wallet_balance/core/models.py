"""Data models for accounts, fetch outcomes, and balance reports."""

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer, field_validator


class CurrencySymbol(StrEnum):
    """Ticker symbols with a known balance provider."""

    BTC = "BTC"
    ETH = "ETH"
    BCC = "BCC"
    DASH = "DASH"
    LTC = "LTC"
    UNO = "UNO"


class Account(BaseModel):
    """
    Addresses to check for one crypto-currency.

    Attributes
    ----------
    symbol : str
        Currency ticker (e.g., 'BTC', 'DASH'), normalised to upper case
    addresses : tuple[str, ...]
        Addresses whose balances are summed, at least one
    api_key : str
        API key passed to the upstream provider, empty if not needed

    """

    model_config = ConfigDict(frozen=True)

    symbol: str
    addresses: tuple[str, ...] = Field(min_length=1)
    api_key: str = ""

    @field_validator("symbol")
    @classmethod
    def _normalise_symbol(cls, value: str) -> str:
        return value.strip().upper()


class FetchOutcome(BaseModel):
    """
    Result of a single balance or exchange-rate sub-fetch.

    Attributes
    ----------
    value : Decimal
        Fetched balance or rate, zero when the fetch failed
    error : Exception | None
        Failure captured during the fetch

    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Decimal = Decimal("0")
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """Whether the sub-fetch completed without error."""
        return self.error is None


class BalanceReport(BaseModel):
    """
    Merged balance and exchange rate for one account.

    When ``error`` is set, ``balance`` and ``rate`` hold whatever the
    sub-fetches produced and must not be displayed as financial figures.

    Attributes
    ----------
    symbol : str
        Currency ticker
    balance : Decimal
        Aggregate balance in whole currency units
    rate : Decimal
        Price of one currency unit in the target fiat currency
    error : Exception | None
        Balance error if any, otherwise exchange-rate error if any

    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    symbol: str
    balance: Decimal = Decimal("0")
    rate: Decimal = Decimal("0")
    error: Exception | None = None

    @computed_field
    @property
    def fiat_value(self) -> Decimal:
        """Balance converted to the target fiat currency."""
        return self.balance * self.rate

    @field_serializer("error")
    def _serialize_error(self, error: Exception | None) -> str | None:
        return str(error) if error is not None else None


class BalanceSummary(BaseModel):
    """
    Ranked balance reports for a whole run.

    Attributes
    ----------
    target_currency : str
        Fiat currency all rates are quoted in
    reports : list[BalanceReport]
        Reports ordered by descending fiat value
    total_fiat_value : Decimal
        Sum of fiat values over reports without errors

    """

    target_currency: str
    reports: list[BalanceReport]
    total_fiat_value: Decimal = Decimal("0")

    @property
    def errors(self) -> list[BalanceReport]:
        """Reports that carry an error."""
        return [report for report in self.reports if report.error is not None]
