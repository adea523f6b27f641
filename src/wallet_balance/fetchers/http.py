"""HTTP capability used by the fetchers."""

from typing import Protocol

import httpx

DEFAULT_TIMEOUT = 10.0


class HTTPClient(Protocol):
    """
    Anything that can perform a blocking HTTP GET.

    ``httpx.Client`` satisfies this interface; tests substitute a client
    backed by ``httpx.MockTransport``.

    """

    def get(self, url: str) -> httpx.Response:
        """
        Perform one GET request.

        Parameters
        ----------
        url : str
            Fully formed request URL

        Returns
        -------
        httpx.Response
            Response with the body already read

        """
        ...


def create_http_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """
    Create the HTTP client shared by all providers of a run.

    Parameters
    ----------
    timeout : float
        Absolute timeout in seconds applied to every request

    Returns
    -------
    httpx.Client
        Thread-safe client with connection pooling

    """
    return httpx.Client(timeout=timeout, follow_redirects=True)
