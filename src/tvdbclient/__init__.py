# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""tvdbclient - Client library for TheTVDB series and episode metadata."""

from tvdbclient.__about__ import __version__
from tvdbclient.api import Tvdb
from tvdbclient.errors import (
    Cancelled,
    CommunicationError,
    DataError,
    InternalError,
    SeriesNotFound,
    TvdbError,
)
from tvdbclient.legacy import LegacyTvdb
from tvdbclient.models.common import Date
from tvdbclient.models.ids import EpisodeId, SeriesId, to_episode_id, to_series_id
from tvdbclient.transport import DefaultHttpClient, RequestClient

__all__ = [
    "Cancelled",
    "CommunicationError",
    "DataError",
    "Date",
    "DefaultHttpClient",
    "EpisodeId",
    "InternalError",
    "LegacyTvdb",
    "RequestClient",
    "SeriesId",
    "SeriesNotFound",
    "Tvdb",
    "TvdbError",
    "__version__",
    "to_episode_id",
    "to_series_id",
]
