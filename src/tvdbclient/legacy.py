"""Client for TheTVDB legacy XML API (``http://thetvdb.com/api/``).

The legacy API needs no login: the API key is embedded in episode URLs.
Unlike :class:`tvdbclient.api.Tvdb`, a search with no matches raises
:class:`SeriesNotFound` instead of returning an empty list.

Example:
    api = LegacyTvdb("YOUR-API-KEY")
    results = api.search("Scrubs", "en")
    # Look up the 23rd episode of season 1 of the first match
    ep = api.episode(results[0], 1, 23)
    print(ep.episode_name)
"""

import logging
import xml.etree.ElementTree as ET

import httpx

from tvdbclient.errors import DataError, InternalError, SeriesNotFound
from tvdbclient.models.ids import EpisodeIdLike, to_episode_id
from tvdbclient.models.legacy import EpisodeInfo, SeriesSearchEntry
from tvdbclient.parse import (
    get_date_optional,
    get_float_optional,
    get_int_optional,
    get_int_req,
    get_text_optional,
    get_text_req,
)
from tvdbclient.transport import DEFAULT_TIMEOUT, DefaultHttpClient, RequestClient

logger = logging.getLogger(__name__)


def _parse_xml(body: str, url: str) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as e:
        raise DataError(f"Error parsing XML from TheTVDB.com ({url}): {e}") from e


def _series_from_xml(node: ET.Element) -> SeriesSearchEntry:
    return SeriesSearchEntry(
        series_id=get_int_req(node, "seriesid"),
        series_name=get_text_req(node, "SeriesName"),
        language=get_text_req(node, "language"),
        overview=get_text_optional(node, "Overview"),
        banner=get_text_optional(node, "banner"),
        imdb_id=get_text_optional(node, "IMDB_ID"),
        first_aired=get_date_optional(node, "FirstAired"),
        network=get_text_optional(node, "Network"),
        zap2it_id=get_text_optional(node, "zap2it_id"),
    )


def _episode_from_xml(node: ET.Element) -> EpisodeInfo:
    return EpisodeInfo(
        id=get_int_req(node, "id"),
        episode_name=get_text_req(node, "EpisodeName"),
        first_aired=get_date_optional(node, "FirstAired"),
        season_number=get_int_req(node, "SeasonNumber"),
        season_dvd=get_int_optional(node, "DVD_season"),
        season_combined=get_float_optional(node, "Combined_season"),
        episode_number=get_int_req(node, "EpisodeNumber"),
        episode_combined=get_float_optional(node, "Combined_episodenumber"),
        episode_dvd=get_float_optional(node, "DVD_episodenumber"),
        imdb_id=get_text_optional(node, "IMDB_ID"),
        language=get_text_req(node, "Language"),
        overview=get_text_optional(node, "Overview"),
        production_code=get_text_optional(node, "ProductionCode"),
        rating=get_float_optional(node, "Rating"),
        rating_count=get_int_optional(node, "RatingCount"),
        guest_stars=get_text_optional(node, "GuestStars"),
        director=get_text_optional(node, "Director"),
        writer=get_text_optional(node, "Writer"),
        episode_absolute=get_int_optional(node, "absolute_number"),
        airs_after_season=get_int_optional(node, "airsafter_season"),
        airs_before_episode=get_int_optional(node, "airsbefore_episode"),
        airs_before_season=get_int_optional(node, "airsbefore_season"),
        season_id=get_int_req(node, "seasonid"),
        series_id=get_int_req(node, "seriesid"),
        thumbnail=get_text_optional(node, "filename"),
        thumbnail_flag=get_int_optional(node, "EpImgFlag"),
        thumbnail_added=get_date_optional(node, "thumb_added"),
        thumbnail_width=get_int_optional(node, "thumb_width"),
        thumbnail_height=get_int_optional(node, "thumb_height"),
        last_updated=get_int_optional(node, "lastupdated"),
    )


class LegacyTvdb:
    """Main interface to the legacy XML API."""

    BASE_URL = "http://thetvdb.com"

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
            http_client: Custom transport. Defaults to a :class:`DefaultHttpClient`.
            base_url: Site root, overridable for mirrors and tests.
            timeout: Request timeout for the default transport, in seconds.
        """
        self.key = key
        self.base_url = base_url.rstrip("/")
        self.http_client: RequestClient = http_client or DefaultHttpClient(
            timeout=timeout
        )

    def _fetch_xml(self, url: str) -> ET.Element:
        logger.debug("Getting %s", url)
        return _parse_xml(self.http_client.get_url(url), url)

    def search(self, seriesname: str, lang: str = "en") -> list[SeriesSearchEntry]:
        """Search for series matching *seriesname*.

        Args:
            seriesname: Name to search for.
            lang: Two-letter language code for the results.

        Returns:
            All matches, in the order TheTVDB returned them.

        Raises:
            SeriesNotFound: If nothing matched.
            CommunicationError: If the request failed.
            DataError: If the XML or a required field was malformed.
        """
        try:
            url = str(
                httpx.URL(
                    f"{self.base_url}/api/GetSeries.php",
                    params={"seriesname": seriesname, "language": lang},
                )
            )
        except httpx.InvalidURL as e:
            raise InternalError(f"Invalid search URL: {e}") from e

        tree = self._fetch_xml(url)
        results = [_series_from_xml(child) for child in tree]
        if not results:
            raise SeriesNotFound(seriesname)
        return results

    def episode(self, epid: EpisodeIdLike, season: int, episode: int) -> EpisodeInfo:
        """Get episode information for given season/episode number.

        Args:
            epid: Integer series id, :class:`EpisodeId` or a search entry;
                the key's language selects the translation.
            season: Aired season number.
            episode: Aired episode number within the season.

        Raises:
            CommunicationError: If the request failed.
            DataError: If the document is empty or a required field is missing.
        """
        key = to_episode_id(epid)
        url = (
            f"{self.base_url}/api/{self.key}/series/{key.series_id}"
            f"/default/{season}/{episode}/{key.language}.xml"
        )
        tree = self._fetch_xml(url)
        root = next(iter(tree), None)
        if root is None:
            raise DataError(f"XML from {url} had no child elements")
        return _episode_from_xml(root)
