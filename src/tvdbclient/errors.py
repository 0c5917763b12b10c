"""Error types raised by the TheTVDB clients.

Every failure surfaced by this package is a subclass of :class:`TvdbError`, so
callers can catch the whole family with a single ``except`` clause or pick out
the specific condition they care about:

- CommunicationError: the request never produced a usable response body
  (connection failure, non-success HTTP status, unreadable body).
- DataError: a body arrived but did not have the expected shape (invalid
  JSON/XML, a required field missing or malformed).
- SeriesNotFound: the legacy XML search returned no candidates. The JSON API
  reports the same situation as an empty result list instead.
- InternalError: the client itself built an invalid request.
- Cancelled: reserved for applications that let users abort a lookup. The
  library never raises it.
"""


class TvdbError(Exception):
    """Base class for all TheTVDB client errors."""

    label = "TheTVDB error"

    def __init__(self, reason: str = "") -> None:
        """Initialize the error with a human-readable reason."""
        super().__init__(f"{self.label}: {reason}" if reason else self.label)
        self.reason = reason


class InternalError(TvdbError):
    """Raised when the client constructs an invalid request."""

    label = "Internal error"


class SeriesNotFound(TvdbError):
    """Raised by the legacy search when no series matched."""

    label = "Series not found"


class CommunicationError(TvdbError):
    """Raised on transport failures: connection, HTTP status or body read."""

    label = "Communication error"


class DataError(TvdbError):
    """Raised when a response cannot be mapped onto the expected record."""

    label = "Data error"


class Cancelled(TvdbError):
    """Reserved for interactive cancellation by an embedding application."""

    label = "Cancelled"
