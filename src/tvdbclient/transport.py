"""HTTP transport used by the TheTVDB clients.

The clients never talk to the network directly. They hand a URL (and, for the
JSON API, the session token) to a :class:`RequestClient` and get the response
body back as text. Swap in your own implementation to add timeouts, proxies,
recording or offline fixtures; :class:`DefaultHttpClient` is used otherwise.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from tvdbclient.errors import CommunicationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class RequestClient(ABC):
    """Abstract base class for URL fetching.

    Implementations must attach ``jwt_token`` as a bearer ``Authorization``
    header when given, raise :class:`CommunicationError` for connection
    failures, non-success HTTP statuses and unreadable bodies, and return the
    full body otherwise.
    """

    @abstractmethod
    def get_url(self, url: str, jwt_token: str | None = None) -> str:
        """Perform a GET request and return the body text.

        Args:
            url: Absolute URL to fetch.
            jwt_token: Optional session token sent as a bearer credential.

        Returns:
            The response body.

        Raises:
            CommunicationError: If the request fails for any reason.
        """
        raise NotImplementedError


def _auth_headers(jwt_token: str | None) -> dict[str, str]:
    if jwt_token:
        return {"Authorization": f"Bearer {jwt_token}"}
    return {}


def _read_body(response: httpx.Response, url: str) -> str:
    """Check the status of *response* and return its decoded body."""
    if not response.is_success:
        raise CommunicationError(
            f"Unsuccessful HTTP response from url {url}: {response.status_code}"
        )
    try:
        return response.text
    except (httpx.HTTPError, UnicodeDecodeError, LookupError) as e:
        raise CommunicationError(f"Error reading response: {e}") from e


class DefaultHttpClient(RequestClient):
    """Single-shot ``httpx`` implementation of :class:`RequestClient`.

    No retries and no connection reuse between calls.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the client.

        Args:
            timeout: Seconds allowed per request.
        """
        self.timeout = timeout

    def get_url(self, url: str, jwt_token: str | None = None) -> str:
        logger.debug("Fetching URL %s", url)
        with httpx.Client(timeout=self.timeout) as client:
            try:
                response = client.get(url, headers=_auth_headers(jwt_token))
            except httpx.HTTPError as e:
                raise CommunicationError(
                    f"Error creating HTTP request: {e}"
                ) from e
            return _read_body(response, url)

    def post_json(self, url: str, payload: dict[str, Any]) -> str:
        """POST *payload* as JSON and return the body text.

        Raises:
            CommunicationError: If the request fails or the status is not 2xx.
        """
        logger.debug("Posting to URL %s", url)
        with httpx.Client(timeout=self.timeout) as client:
            try:
                response = client.post(url, json=payload)
            except httpx.HTTPError as e:
                raise CommunicationError(str(e)) from e
            return _read_body(response, url)
