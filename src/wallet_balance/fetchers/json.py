"""Fetcher for JSON APIs that report success through a status field."""

import json
import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from wallet_balance.errors import DecodeError, ProviderStatusError
from wallet_balance.fetchers.http import HTTPClient
from wallet_balance.fetchers.number import get_response

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class JSONFetcher:
    """
    Fetches JSON documents shaped like etherscan.io responses.

    The API answers ``200 OK`` even for failed calls and signals the outcome
    with a string ``status`` field (``"1"`` on success) and a human-readable
    ``message`` field. The status is checked before the payload is decoded.

    Parameters
    ----------
    client : HTTPClient
        HTTP client used for requests
    success_status : str
        Value of the ``status`` field that marks a successful call

    """

    def __init__(self, client: HTTPClient, success_status: str = "1") -> None:
        self.client = client
        self.success_status = success_status

    def fetch(self, url: str, model: type[ModelT]) -> ModelT:
        """
        Fetch ``url`` and decode the response into ``model``.

        Parameters
        ----------
        url : str
            Request URL
        model : type[ModelT]
            Pydantic model describing the expected payload

        Returns
        -------
        ModelT
            Decoded payload

        Raises
        ------
        TransportError
            On connection, read, or timeout failures
        HTTPStatusError
            On non-2xx responses
        DecodeError
            If the body is not JSON, lacks a string ``status`` field, or does
            not match ``model``
        ProviderStatusError
            If the API reports a failure; the message is the response's
            ``message`` field

        """
        response = get_response(self.client, url)

        try:
            document = json.loads(response.text)
        except json.JSONDecodeError as e:
            msg = f"invalid JSON response: {e}"
            raise DecodeError(msg) from e

        status = document.get("status") if isinstance(document, dict) else None
        if not isinstance(status, str):
            msg = "response has no status field"
            raise DecodeError(msg)

        if status != self.success_status:
            message = document.get("message")
            logger.debug("API returned status %s for %s: %s", status, url, message)
            raise ProviderStatusError(str(message) if message is not None else f"status {status}")

        try:
            return model.model_validate(document)
        except ValidationError as e:
            msg = f"unexpected response shape: {e}"
            raise DecodeError(msg) from e
