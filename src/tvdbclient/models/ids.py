"""Lookup keys and the conversions that produce them.

Callers hold series ids in several shapes: a bare integer, a search entry from
either API generation, or an explicit key. The clients accept any of them and
normalise through :func:`to_series_id` / :func:`to_episode_id`, which dispatch
to one explicit constructor per source shape:

- ``int`` -> language is always ``"en"``.
- legacy :class:`SeriesSearchEntry` -> carries the entry's language.
- JSON :class:`SeriesSearchData` -> its language when reported, else ``"en"``.
  An entry without an id cannot name a series and raises :class:`DataError`.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from tvdbclient.errors import DataError
from tvdbclient.models import legacy, v2

DEFAULT_LANGUAGE = "en"

SearchEntry = Union[v2.SeriesSearchData, legacy.SeriesSearchEntry]


def _entry_series_id(entry: SearchEntry) -> int:
    """Return the series id of a search entry from either generation."""
    if isinstance(entry, legacy.SeriesSearchEntry):
        return entry.series_id
    if entry.id is None:
        raise DataError(f"Search entry {entry.series_name!r} has no series id")
    return entry.id


def _check_int(value: object) -> int:
    # bool is an int subclass but never a series id
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer series id, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Series id must not be negative, got {value}")
    return value


class SeriesId(BaseModel):
    """TheTVDB series ID."""

    model_config = ConfigDict(frozen=True)

    series_id: NonNegativeInt

    @classmethod
    def from_int(cls, value: int) -> "SeriesId":
        return cls(series_id=_check_int(value))

    @classmethod
    def from_search_entry(cls, entry: SearchEntry) -> "SeriesId":
        return cls(series_id=_entry_series_id(entry))


class EpisodeId(BaseModel):
    """Series ID from TheTVDB.com, along with language."""

    model_config = ConfigDict(frozen=True)

    series_id: NonNegativeInt
    language: str = Field(default=DEFAULT_LANGUAGE, min_length=1)
    """Two-letter ISO-639-1 language code."""

    @classmethod
    def from_int(cls, value: int) -> "EpisodeId":
        """Key for a bare series id; language is always ``"en"``."""
        return cls(series_id=_check_int(value), language=DEFAULT_LANGUAGE)

    @classmethod
    def from_search_entry(cls, entry: SearchEntry) -> "EpisodeId":
        """Key for a search match, keeping the match's language."""
        return cls(
            series_id=_entry_series_id(entry),
            language=entry.language or DEFAULT_LANGUAGE,
        )


SeriesIdLike = Union[int, SeriesId, EpisodeId, v2.SeriesSearchData, legacy.SeriesSearchEntry]
EpisodeIdLike = Union[int, EpisodeId, v2.SeriesSearchData, legacy.SeriesSearchEntry]


def to_series_id(value: SeriesIdLike) -> SeriesId:
    """Normalise any supported series reference into a :class:`SeriesId`.

    Raises:
        TypeError: If *value* is not a supported shape.
        ValueError: If the series id is negative.
        DataError: If *value* is a search entry without an id.
    """
    if isinstance(value, SeriesId):
        return value
    if isinstance(value, EpisodeId):
        return SeriesId(series_id=value.series_id)
    if isinstance(value, (v2.SeriesSearchData, legacy.SeriesSearchEntry)):
        return SeriesId.from_search_entry(value)
    return SeriesId.from_int(value)  # type: ignore[arg-type]


def to_episode_id(value: EpisodeIdLike) -> EpisodeId:
    """Normalise any supported series reference into an :class:`EpisodeId`.

    Raises:
        TypeError: If *value* is not a supported shape.
        ValueError: If the series id is negative.
        DataError: If *value* is a search entry without an id.
    """
    if isinstance(value, EpisodeId):
        return value
    if isinstance(value, (v2.SeriesSearchData, legacy.SeriesSearchEntry)):
        return EpisodeId.from_search_entry(value)
    return EpisodeId.from_int(value)  # type: ignore[arg-type]
