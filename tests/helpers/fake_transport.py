"""No-network RequestClient stand-ins for client tests.

Provides canned responses keyed by URL substring and records every call, so
tests can assert on the URL, the bearer token and the number of round trips.
"""

from pathlib import Path

from tvdbclient.errors import CommunicationError
from tvdbclient.transport import RequestClient

FIXTURES = Path(__file__).parents[1] / "fixtures" / "tvdb"


def load_fixture(name: str) -> str:
    """Return the text of ``tests/fixtures/tvdb/<name>``."""
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeRequestClient(RequestClient):
    """Return a canned body for the first route whose key occurs in the URL."""

    def __init__(self, routes: dict[str, str]) -> None:
        self.routes = routes
        self.calls: list[tuple[str, str | None]] = []

    def get_url(self, url: str, jwt_token: str | None = None) -> str:
        self.calls.append((url, jwt_token))
        for fragment, body in self.routes.items():
            if fragment in url:
                return body
        raise CommunicationError(f"Unsuccessful HTTP response from url {url}: 404")


class FailingRequestClient(RequestClient):
    """Fail every request, counting how often it was asked."""

    def __init__(self) -> None:
        self.call_count = 0

    def get_url(self, url: str, jwt_token: str | None = None) -> str:
        self.call_count += 1
        raise CommunicationError(
            f"Fake error while doing fake request for: {url} with JWT {jwt_token}"
        )
