"""Balance providers for the supported blockchain explorers."""

from wallet_balance.providers.base import BaseProvider
from wallet_balance.providers.blockchain import BlockchainProvider
from wallet_balance.providers.etherscan import EtherscanProvider
from wallet_balance.providers.ledger import GenericLedgerProvider

__all__ = [
    "BaseProvider",
    "BlockchainProvider",
    "EtherscanProvider",
    "GenericLedgerProvider",
]
