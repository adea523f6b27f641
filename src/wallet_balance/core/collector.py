"""Collects balance reports from workers and ranks them by fiat value."""

import threading
from decimal import Decimal

from wallet_balance.core.models import BalanceReport, BalanceSummary


class ReportCollector:
    """
    Thread-safe sink for the reports of one run.

    Workers call ``add`` concurrently; the consumer calls ``wait`` to block
    until every expected report has arrived.

    Parameters
    ----------
    expected : int
        Number of reports the run will produce, one per account

    """

    def __init__(self, expected: int) -> None:
        if expected < 0:
            msg = "expected report count must not be negative"
            raise ValueError(msg)
        self.expected = expected
        self._reports: list[BalanceReport] = []
        self._complete = threading.Condition()

    def add(self, report: BalanceReport) -> None:
        """
        Store a report.

        Raises
        ------
        RuntimeError
            If more than ``expected`` reports are added

        """
        with self._complete:
            if len(self._reports) >= self.expected:
                msg = f"received more than {self.expected} reports"
                raise RuntimeError(msg)
            self._reports.append(report)
            if len(self._reports) == self.expected:
                self._complete.notify_all()

    def wait(self, timeout: float | None = None) -> list[BalanceReport]:
        """
        Block until all expected reports have been added.

        Parameters
        ----------
        timeout : float | None
            Maximum seconds to wait, or None to wait indefinitely

        Returns
        -------
        list[BalanceReport]
            Reports in arrival order

        Raises
        ------
        TimeoutError
            If the reports did not all arrive within ``timeout``

        """
        with self._complete:
            if not self._complete.wait_for(lambda: len(self._reports) >= self.expected, timeout=timeout):
                msg = f"received {len(self._reports)} of {self.expected} reports"
                raise TimeoutError(msg)
            return list(self._reports)

    def __len__(self) -> int:
        with self._complete:
            return len(self._reports)

    def summarize(self, target_currency: str, timeout: float | None = None) -> BalanceSummary:
        """Wait for all reports and rank them."""
        return rank_reports(self.wait(timeout), target_currency)


def rank_reports(reports: list[BalanceReport], target_currency: str) -> BalanceSummary:
    """
    Order reports by descending fiat value and total the error-free ones.

    Reports with an error are ranked by whatever balance and rate they carry,
    typically zero, but are excluded from the total.

    Parameters
    ----------
    reports : list[BalanceReport]
        Reports to rank
    target_currency : str
        Fiat currency the rates are quoted in

    Returns
    -------
    BalanceSummary
        Ranked reports and total fiat value

    """
    ranked = sorted(reports, key=lambda report: report.fiat_value, reverse=True)
    total = sum((report.fiat_value for report in ranked if report.error is None), Decimal("0"))

    return BalanceSummary(
        target_currency=target_currency,
        reports=ranked,
        total_fiat_value=total,
    )
