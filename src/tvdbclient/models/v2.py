"""Response records for TheTVDB JSON API (https://api.thetvdb.com).

Each model mirrors one response shape of the token-based API. Wire names are
camelCase and mapped through an alias generator; unknown fields are ignored
and every field the API may omit defaults to None, so partially populated
responses deserialize cleanly. Only fields the API guarantees are required.

See https://api.thetvdb.com/swagger for the upstream schema.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ApiModel(BaseModel):
    """Base for JSON API records: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class LoginResponse(_ApiModel):
    """Body of ``POST /login``."""

    token: str


class SeriesSearchData(_ApiModel):
    """Info for a single series, as returned from a search query."""

    id: int | None = None
    series_name: str
    language: str | None = None
    aliases: list[str] | None = None
    banner: str | None = None
    first_aired: str | None = None
    network: str | None = None
    overview: str | None = None
    status: str | None = None
    slug: str | None = None
    imdb_id: str | None = None
    zap2it_id: str | None = None


class SeriesSearchResult(_ApiModel):
    """List of :class:`SeriesSearchData`, returned from a search."""

    data: list[SeriesSearchData] | None = None
    error: str | None = None

    @property
    def entries(self) -> list[SeriesSearchData]:
        """Matches as a list, empty when the API sent no data."""
        return list(self.data or [])


class JSONErrors(_ApiModel):
    """Soft errors the API reports alongside (or instead of) data."""

    invalid_filters: list[str] | None = None
    # a plain string on /episodes, a list elsewhere
    invalid_language: str | list[str] | None = None
    invalid_query_params: list[str] | None = None


class Episode(_ApiModel):
    """Full information for an episode (``GET /episodes/{id}``)."""

    id: int | None = None
    episode_name: str
    absolute_number: int | None = None
    aired_episode_number: int | None = None
    aired_season: int | None = None
    aired_season_id: int | None = Field(
        default=None, validation_alias=AliasChoices("airedSeasonID", "airedSeasonId")
    )
    airs_after_season: int | None = None
    airs_before_episode: int | None = None
    airs_before_season: int | None = None
    director: str | None = None
    directors: list[str] | None = None
    dvd_chapter: int | None = None
    dvd_discid: str | None = None
    dvd_episode_number: float | None = None
    dvd_season: int | None = None
    filename: str | None = None
    first_aired: str | None = None
    guest_stars: list[str] | None = None
    imdb_id: str | None = None
    last_updated: int | None = None
    last_updated_by: int | str | None = None
    overview: str | None = None
    production_code: str | None = None
    series_id: int | None = None
    show_url: str | None = None
    site_rating: float | None = None
    site_rating_count: int | None = None
    thumb_added: str | None = None
    thumb_author: int | str | None = None
    thumb_height: str | None = None
    thumb_width: str | None = None
    writers: list[str] | None = None


class EpisodeRecordResult(_ApiModel):
    """Envelope of ``GET /episodes/{id}``: the record or the API's errors."""

    data: Episode | None = None
    errors: JSONErrors | None = None


class BasicEpisode(_ApiModel):
    """Episode summary as listed by ``GET /series/{id}/episodes``."""

    id: int | None = None
    absolute_number: int | None = None
    aired_episode_number: int | None = None
    aired_season: int | None = None
    dvd_episode_number: float | None = None
    dvd_season: int | None = None
    episode_name: str | None = None
    first_aired: str | None = None
    last_updated: int | None = None
    overview: str | None = None


class Links(_ApiModel):
    """Pagination links; a missing ``next`` marks the last page."""

    first: int | None = None
    last: int | None = None
    next: int | None = None
    # the live API names this key "prev"
    previous: int | None = Field(
        default=None, validation_alias=AliasChoices("previous", "prev")
    )


class SeriesEpisodesResult(_ApiModel):
    """One page of a series' episode listing."""

    data: list[BasicEpisode] | None = None
    errors: JSONErrors | None = None
    links: Links | None = None

    @property
    def is_last_page(self) -> bool:
        """True when the API reports no further page."""
        return self.links is None or self.links.next is None
