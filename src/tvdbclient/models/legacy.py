"""Records for TheTVDB legacy XML API (``http://thetvdb.com/api/``).

These are built field by field from the XML tree by :mod:`tvdbclient.legacy`
using the coercion helpers in :mod:`tvdbclient.parse`, rather than validated
from a document, so field names follow Python conventions and the XML element
each one comes from is noted beside it.

Upstream documentation:
- http://www.thetvdb.com/wiki/index.php?title=API:GetSeries
- http://www.thetvdb.com/wiki/index.php?title=API:Base_Episode_Record
"""

from pydantic import BaseModel, ConfigDict

from tvdbclient.models.common import Date


def _split_pipes(value: str | None) -> list[str]:
    """Split a ``|name|name|`` credit string into names."""
    if not value:
        return []
    return [part.strip() for part in value.split("|") if part.strip()]


class SeriesSearchEntry(BaseModel):
    """Series info as returned from the GetSeries search method."""

    model_config = ConfigDict(frozen=True)

    series_id: int  # seriesid (preferred over id)
    """TheTVDB's series ID."""
    series_name: str  # SeriesName
    """Series name in the language indicated by ``language``."""
    language: str  # language
    """Language this series information is in."""
    overview: str | None = None  # Overview
    banner: str | None = None  # banner
    """Relative path to the highest rated banner."""
    imdb_id: str | None = None  # IMDB_ID
    first_aired: Date | None = None  # FirstAired
    network: str | None = None  # Network
    zap2it_id: str | None = None  # zap2it_id


class EpisodeInfo(BaseModel):
    """Base episode record.

    Aired season/episode numbers are always present; DVD ordering and the
    ``combined`` fields are optional because real responses omit them.
    Credits arrive as pipe-delimited strings; use :attr:`directors`,
    :attr:`writers` and :attr:`guest_star_list` for split lists.
    """

    model_config = ConfigDict(frozen=True)

    id: int  # id
    episode_name: str  # EpisodeName
    season_number: int  # SeasonNumber
    season_dvd: int | None = None  # DVD_season
    season_combined: float | None = None  # Combined_season
    episode_number: int  # EpisodeNumber
    episode_combined: float | None = None  # Combined_episodenumber
    episode_dvd: float | None = None  # DVD_episodenumber
    first_aired: Date | None = None  # FirstAired
    imdb_id: str | None = None  # IMDB_ID
    language: str  # Language
    overview: str | None = None  # Overview
    production_code: str | None = None  # ProductionCode
    rating: float | None = None  # Rating
    """Average user rating out of 10."""
    rating_count: int | None = None  # RatingCount
    guest_stars: str | None = None  # GuestStars
    director: str | None = None  # Director
    writer: str | None = None  # Writer
    episode_absolute: int | None = None  # absolute_number
    airs_after_season: int | None = None  # airsafter_season
    airs_before_episode: int | None = None  # airsbefore_episode
    airs_before_season: int | None = None  # airsbefore_season
    season_id: int  # seasonid
    series_id: int  # seriesid
    thumbnail: str | None = None  # filename
    """Path relative to ``<mirror>/banners/`` of the episode image."""
    thumbnail_flag: int | None = None  # EpImgFlag
    """1-2 mean a proper 4:3 / 16:9 image, higher values flag a bad one."""
    thumbnail_added: Date | None = None  # thumb_added
    thumbnail_height: int | None = None  # thumb_height
    thumbnail_width: int | None = None  # thumb_width
    last_updated: int | None = None  # lastupdated
    """Unix timestamp of the last change."""

    @property
    def directors(self) -> list[str]:
        return _split_pipes(self.director)

    @property
    def writers(self) -> list[str]:
        return _split_pipes(self.writer)

    @property
    def guest_star_list(self) -> list[str]:
        return _split_pipes(self.guest_stars)
