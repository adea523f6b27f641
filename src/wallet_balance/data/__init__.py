"""Currency tables and configuration loading."""

from wallet_balance.data.currencies import CURRENCY_CODES, DEFAULT_TARGET_CURRENCY, PROVIDER_KINDS
from wallet_balance.data.loader import BalanceConfig, load_config, parse_config

__all__ = [
    "CURRENCY_CODES",
    "DEFAULT_TARGET_CURRENCY",
    "PROVIDER_KINDS",
    "BalanceConfig",
    "load_config",
    "parse_config",
]
