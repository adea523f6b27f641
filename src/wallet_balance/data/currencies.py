"""Read-only currency tables and upstream API URL templates."""

from decimal import Decimal
from types import MappingProxyType

# Provider variant for each supported symbol
PROVIDER_KINDS = MappingProxyType(
    {
        "BTC": "blockchain",
        "ETH": "etherscan",
        "BCC": "ledger",
        "DASH": "ledger",
        "LTC": "ledger",
        "UNO": "ledger",
    }
)

# Currency codes used by the upstream explorer APIs
CURRENCY_CODES = MappingProxyType({symbol: symbol.lower() for symbol in PROVIDER_KINDS})

DEFAULT_TARGET_CURRENCY = "usd"

# blockchain.info
SATOSHI = Decimal(10**8)
BLOCKCHAIN_BALANCE_URL = "https://blockchain.info/q/addressbalance/{addresses}"
BLOCKCHAIN_ADDRESS_SEPARATOR = "%7C"  # url-encoded "|"
BLOCKCHAIN_RATE_URL = "https://blockchain.info/tobtc?currency={target}&value=1"

# etherscan.io
WEI = Decimal(10**18)
ETHERSCAN_BALANCE_URL = "https://api.etherscan.io/api?module=account&action=balancemulti&address={addresses}&tag=latest"
ETHERSCAN_RATE_URL = "https://api.etherscan.io/api?module=stats&action=ethprice&apikey={api_key}"
ETHERSCAN_SUCCESS_STATUS = "1"
ETHERSCAN_TARGET_CURRENCIES = frozenset({"usd"})

# chainz.cryptoid.info
CRYPTOID_BALANCE_URL = "https://chainz.cryptoid.info/{currency}/api.dws?q=getbalance&key={api_key}&a={address}"
CRYPTOID_RATE_URL = "https://chainz.cryptoid.info/{currency}/api.dws?q=ticker.{target}&key={api_key}"
