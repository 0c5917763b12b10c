"""Typed records and lookup keys for both TheTVDB API generations."""

from tvdbclient.models.common import Date
from tvdbclient.models.ids import EpisodeId, SeriesId, to_episode_id, to_series_id

__all__ = [
    "Date",
    "EpisodeId",
    "SeriesId",
    "to_episode_id",
    "to_series_id",
]
