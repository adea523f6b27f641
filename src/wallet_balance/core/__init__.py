"""Core functionality including models, factory, aggregator, and collector."""

from wallet_balance.core.aggregator import BalanceAggregator, merge_outcomes
from wallet_balance.core.collector import ReportCollector, rank_reports
from wallet_balance.core.factory import ProviderFactory
from wallet_balance.core.models import (
    Account,
    BalanceReport,
    BalanceSummary,
    CurrencySymbol,
    FetchOutcome,
)

__all__ = [
    "Account",
    "BalanceAggregator",
    "BalanceReport",
    "BalanceSummary",
    "CurrencySymbol",
    "FetchOutcome",
    "ProviderFactory",
    "ReportCollector",
    "merge_outcomes",
    "rank_reports",
]
