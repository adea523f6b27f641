"""Aggregate crypto-currency wallet balances and value them in fiat."""

__version__ = "0.1.0"
