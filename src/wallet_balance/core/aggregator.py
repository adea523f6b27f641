"""Balance aggregator for fetching reports for many accounts concurrently."""

import logging
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor

from wallet_balance.core.collector import ReportCollector
from wallet_balance.core.factory import ProviderFactory
from wallet_balance.core.models import Account, BalanceReport, BalanceSummary, FetchOutcome
from wallet_balance.data.currencies import DEFAULT_TARGET_CURRENCY
from wallet_balance.errors import UnknownCurrencyError

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 3


def merge_outcomes(symbol: str, balance: FetchOutcome, rate: FetchOutcome) -> BalanceReport:
    """
    Merge the balance and exchange-rate sub-fetches of one account.

    The balance error takes priority over the rate error when both failed.

    Parameters
    ----------
    symbol : str
        Currency ticker
    balance : FetchOutcome
        Outcome of the balance sub-fetch
    rate : FetchOutcome
        Outcome of the exchange-rate sub-fetch

    Returns
    -------
    BalanceReport
        Report carrying both values and at most one error

    """
    error = rate.error if balance.ok else balance.error
    return BalanceReport(symbol=symbol, balance=balance.value, rate=rate.value, error=error)


class BalanceAggregator:
    """
    Fetches balance reports for a list of accounts with bounded concurrency.

    Workflow per account:
    1. Resolve the provider for the account's symbol (via ProviderFactory)
    2. Fetch balance and exchange rate concurrently
    3. Wait for both and merge them into one BalanceReport
    4. Hand the report to the ReportCollector

    Accounts are processed by a fixed pool of ``workers`` threads. Every
    account yields exactly one report, whatever happens while fetching it.

    Parameters
    ----------
    factory : ProviderFactory
        Factory resolving symbols to providers
    workers : int
        Number of accounts processed concurrently
    target_currency : str
        Fiat currency to quote exchange rates in

    """

    def __init__(
        self,
        factory: ProviderFactory,
        workers: int = DEFAULT_WORKERS,
        target_currency: str = DEFAULT_TARGET_CURRENCY,
    ) -> None:
        if workers < 1:
            msg = "workers must be at least 1"
            raise ValueError(msg)
        self.factory = factory
        self.workers = workers
        self.target_currency = target_currency.lower()

    def run(self, accounts: Sequence[Account]) -> BalanceSummary:
        """
        Fetch reports for all accounts and rank them by fiat value.

        Parameters
        ----------
        accounts : Sequence[Account]
            Accounts to check

        Returns
        -------
        BalanceSummary
            Ranked reports and total fiat value

        """
        collector = self._collect(accounts)
        return collector.summarize(self.target_currency)

    def fetch_reports(self, accounts: Sequence[Account]) -> list[BalanceReport]:
        """
        Fetch one report per account.

        Parameters
        ----------
        accounts : Sequence[Account]
            Accounts to check

        Returns
        -------
        list[BalanceReport]
            Reports in completion order

        """
        return self._collect(accounts).wait()

    def _collect(self, accounts: Sequence[Account]) -> ReportCollector:
        collector = ReportCollector(expected=len(accounts))
        if not accounts:
            return collector

        logger.debug("Fetching %d accounts with %d workers", len(accounts), self.workers)

        # Executor shutdown on exit joins every worker
        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="balance-worker") as executor:
            for account in accounts:
                executor.submit(self._process_account, account, collector)

        return collector

    def _process_account(self, account: Account, collector: ReportCollector) -> None:
        try:
            report = self.fetch_account(account)
        except Exception as e:
            logger.exception("Unexpected failure while fetching %s", account.symbol)
            report = BalanceReport(symbol=account.symbol, error=e)
        collector.add(report)

    def fetch_account(self, account: Account) -> BalanceReport:
        """
        Fetch balance and exchange rate for one account.

        Parameters
        ----------
        account : Account
            Account to check

        Returns
        -------
        BalanceReport
            Merged report; unknown symbols yield an error report without any
            network request

        """
        try:
            provider = self.factory.create(account.symbol)
        except UnknownCurrencyError as e:
            logger.debug("No provider for %s", account.symbol)
            return BalanceReport(symbol=account.symbol, error=e)

        logger.debug("Fetching %s via %r", account.symbol, provider)

        # Both sub-fetches always run to completion before merging
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix=f"{account.symbol}-fetch") as executor:
            balance_future = executor.submit(provider.fetch_balance, account.addresses, account.api_key)
            rate_future = executor.submit(provider.fetch_exchange_rate, account.api_key, self.target_currency)

        report = merge_outcomes(account.symbol, _outcome(balance_future), _outcome(rate_future))
        if report.error is not None:
            logger.debug("%s failed: %s", account.symbol, report.error)
        return report


def _outcome(future: Future) -> FetchOutcome:
    """Resolve a finished sub-fetch, turning unexpected exceptions into an outcome."""
    try:
        return future.result()
    except Exception as e:
        logger.exception("Unexpected sub-fetch failure")
        return FetchOutcome(error=e)
