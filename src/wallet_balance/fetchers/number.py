"""Fetcher for endpoints that answer with a bare number."""

import logging
from decimal import Decimal, InvalidOperation

import httpx

from wallet_balance.errors import DecodeError, HTTPStatusError, TransportError
from wallet_balance.fetchers.http import HTTPClient

logger = logging.getLogger(__name__)


def get_response(client: HTTPClient, url: str) -> httpx.Response:
    """
    Perform one GET request and reject non-2xx responses.

    Parameters
    ----------
    client : HTTPClient
        HTTP client to send the request with
    url : str
        Request URL

    Returns
    -------
    httpx.Response
        Successful response

    Raises
    ------
    TransportError
        If the request could not be built or sent, or the response could not
        be read
    HTTPStatusError
        If the status code is not 2xx. The message is the response body, or
        the status line when the body is empty.

    """
    logger.debug("GET %s", url)
    try:
        response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        msg = f"transport failure: {e}"
        raise TransportError(msg) from e

    if not response.is_success:
        body = response.text
        message = body if body else f"{response.status_code} {response.reason_phrase}"
        raise HTTPStatusError(message, response.status_code)

    return response


def parse_decimal(text: str) -> Decimal:
    """
    Parse a decimal number, rejecting NaN and infinities.

    Raises
    ------
    DecodeError
        If ``text`` is not a finite number

    """
    try:
        value = Decimal(text.strip())
    except InvalidOperation as e:
        msg = f"invalid number {text!r}"
        raise DecodeError(msg) from e

    if not value.is_finite():
        msg = f"invalid number {text!r}"
        raise DecodeError(msg)

    return value


class NumberFetcher:
    """
    Fetches a single numeric value from a web API.

    Parameters
    ----------
    client : HTTPClient
        HTTP client used for requests

    """

    def __init__(self, client: HTTPClient) -> None:
        self.client = client

    def fetch(self, url: str) -> Decimal:
        """
        Fetch ``url`` and parse the whole body as a number.

        Parameters
        ----------
        url : str
            Request URL

        Returns
        -------
        Decimal
            Parsed value

        Raises
        ------
        TransportError
            On connection, read, or timeout failures
        HTTPStatusError
            On non-2xx responses
        DecodeError
            If the body is not a number

        """
        response = get_response(self.client, url)
        return parse_decimal(response.text)
