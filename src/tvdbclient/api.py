"""Client for TheTVDB JSON API (https://api.thetvdb.com).

Authenticates once with :meth:`Tvdb.login`, keeps the returned session token
on the instance, and sends it as a bearer credential with every later
request. Responses are deserialized into the records in
:mod:`tvdbclient.models.v2`.

The instance holds mutable session state and does no locking; share it across
threads only behind your own synchronisation.

Example:
    api = Tvdb("YOUR-API-KEY")
    api.login()
    result = api.search(name="scrubs")
    first = result.entries[0]
    page = api.series_episodes(first, page=1)
"""

import logging
from pathlib import Path
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from tvdbclient.cache import CachingRequestClient
from tvdbclient.errors import DataError, InternalError
from tvdbclient.models.ids import EpisodeIdLike, SeriesIdLike, to_episode_id, to_series_id
from tvdbclient.models.v2 import (
    EpisodeRecordResult,
    LoginResponse,
    SeriesEpisodesResult,
    SeriesSearchResult,
)
from tvdbclient.settings import Settings
from tvdbclient.transport import DEFAULT_TIMEOUT, DefaultHttpClient, RequestClient

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _parse(model: type[M], body: str) -> M:
    """Validate a JSON *body* into *model*, mapping failures to DataError."""
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise DataError(f"Unexpected {model.__name__} response: {e}") from e


class Tvdb:
    """Main interface to the JSON API."""

    BASE_URL = "https://api.thetvdb.com"

    def __init__(
        self,
        key: str,
        http_client: RequestClient | None = None,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API with the given API key.

        Args:
            key: Your TheTVDB API key.
            http_client: Custom transport for GET requests. Defaults to a
                :class:`DefaultHttpClient`.
            base_url: API root, overridable for mirrors and tests.
            timeout: Request timeout for the default transport, in seconds.
        """
        self.key = key
        self.base_url = base_url.rstrip("/")
        self._default_client = DefaultHttpClient(timeout=timeout)
        self._http_client: RequestClient = http_client or self._default_client
        self._token: str | None = None

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, key: str | None = None
    ) -> "Tvdb":
        """Build a client from :class:`Settings` (environment / .env).

        Args:
            settings: Settings to use; loaded from the environment when None.
            key: API key overriding ``TVDB_API_KEY``.

        Raises:
            MissingAPIKeyError: If no key is given and ``TVDB_API_KEY`` is not
                configured.
        """
        settings = settings or Settings()
        if key is None:
            settings.require_keys()
            key = str(settings.TVDB_API_KEY)
        http_client: RequestClient = DefaultHttpClient(timeout=settings.TVDB_TIMEOUT)
        if settings.TVDB_CACHE_DIR:
            http_client = CachingRequestClient(http_client, Path(settings.TVDB_CACHE_DIR))
        return cls(
            key,
            http_client,
            base_url=settings.TVDB_API_URL,
            timeout=settings.TVDB_TIMEOUT,
        )

    @property
    def http_client(self) -> RequestClient:
        """Transport used for GET requests."""
        return self._http_client

    def set_http_client(self, client: RequestClient) -> None:
        """Set a custom client used to perform GET requests."""
        self._http_client = client

    @property
    def token(self) -> str | None:
        """Session token from the last successful :meth:`login`, if any."""
        return self._token

    def _url(self, path: str, params: dict[str, str | int] | None = None) -> str:
        try:
            return str(httpx.URL(f"{self.base_url}{path}", params=params))
        except httpx.InvalidURL as e:
            raise InternalError(f"Invalid URL {self.base_url}{path}: {e}") from e

    def login(self) -> str:
        """Authenticate with TheTVDB and store the session token.

        Login always goes through the default transport, even when a custom
        ``http_client`` is set.

        Returns:
            The session token.

        Raises:
            CommunicationError: If the login request fails.
            DataError: If the response carries no token.
        """
        body = self._default_client.post_json(
            self._url("/login"), {"apikey": self.key}
        )
        self._token = _parse(LoginResponse, body).token
        logger.debug("Logged in to %s", self.base_url)
        return self._token

    def search(
        self, name: str | None = None, imdb_id: str | None = None
    ) -> SeriesSearchResult:
        """Search for series by name or IMDB ID.

        An empty match list is returned as-is; it is not an error here.

        Args:
            name: Series name to search for.
            imdb_id: IMDB ID (e.g. ``"tt0285403"``) to search for.

        Returns:
            The search envelope.
        """
        params: dict[str, str | int] = {}
        if name is not None:
            params["name"] = name
        if imdb_id is not None:
            params["imdbId"] = imdb_id

        body = self._http_client.get_url(
            self._url("/search/series", params), self._token
        )
        result = _parse(SeriesSearchResult, body)
        logger.debug("Search %s returned %d series", params, len(result.entries))
        return result

    def episode(self, id: EpisodeIdLike) -> EpisodeRecordResult:
        """Full information about the given episode.

        Args:
            id: Integer id, :class:`EpisodeId` or a search entry.

        Returns:
            The episode envelope (record and/or API errors).
        """
        epid = to_episode_id(id)
        # TODO: send epid.language once the JSON client supports Accept-Language.
        body = self._http_client.get_url(
            self._url(f"/episodes/{epid.series_id}"), self._token
        )
        return _parse(EpisodeRecordResult, body)

    def series_episodes(self, id: SeriesIdLike, page: int = 1) -> SeriesEpisodesResult:
        """One page of all episodes for the given series.

        Args:
            id: Integer id, :class:`SeriesId` or a search entry.
            page: 1-based page number; follow ``result.links.next`` for more.
        """
        sid = to_series_id(id)
        body = self._http_client.get_url(
            self._url(f"/series/{sid.series_id}/episodes", {"page": page}),
            self._token,
        )
        return _parse(SeriesEpisodesResult, body)
