"""Account configuration loader."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from wallet_balance.core.models import Account
from wallet_balance.data.currencies import DEFAULT_TARGET_CURRENCY
from wallet_balance.errors import ConfigError
from wallet_balance.fetchers.http import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")


class BalanceConfig(BaseModel):
    """
    Settings for one balance run.

    Attributes
    ----------
    accounts : list[Account]
        Accounts to check
    workers : int
        Number of accounts fetched concurrently
    timeout : float
        HTTP timeout in seconds for every request
    target_currency : str
        Fiat currency to value balances in

    """

    accounts: list[Account]
    workers: int = Field(default=3, ge=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    target_currency: str = DEFAULT_TARGET_CURRENCY

    @field_validator("target_currency")
    @classmethod
    def _lower_currency(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            msg = "target currency must not be empty"
            raise ValueError(msg)
        return value


def parse_config(raw: Any) -> BalanceConfig:
    """
    Validate a decoded configuration document.

    The document is either a list of accounts or a mapping with an
    ``accounts`` list and optional run settings.

    Parameters
    ----------
    raw : Any
        Decoded YAML or JSON document

    Returns
    -------
    BalanceConfig
        Validated configuration

    Raises
    ------
    ConfigError
        If the document does not describe a valid configuration

    """
    if isinstance(raw, list):
        raw = {"accounts": raw}
    if not isinstance(raw, dict):
        msg = "configuration must be a list of accounts or a mapping with an 'accounts' key"
        raise ConfigError(msg)

    try:
        return BalanceConfig.model_validate(raw)
    except ValidationError as e:
        msg = f"invalid configuration: {e}"
        raise ConfigError(msg) from e


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> BalanceConfig:
    """
    Load the run configuration from a YAML or JSON file.

    Parameters
    ----------
    path : str | Path
        Configuration file; JSON is read as YAML

    Returns
    -------
    BalanceConfig
        Validated configuration

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed, or validated

    """
    path = Path(path)
    logger.debug("Loading configuration from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        msg = f"cannot read {path}: {e}"
        raise ConfigError(msg) from e
    except yaml.YAMLError as e:
        msg = f"cannot parse {path}: {e}"
        raise ConfigError(msg) from e

    return parse_config(raw)

