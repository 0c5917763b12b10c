"""On-disk response cache for local development.

Wraps another :class:`RequestClient` and stores each response body under a
file named after the sanitised URL, so repeated runs against the same lookups
do not hit TheTVDB. Disabled unless explicitly constructed (or enabled via
``TVDB_CACHE_DIR``). Not meant for production: entries never expire and the
session token is not part of the key.
"""

import hashlib
import logging
import re
from pathlib import Path

from tvdbclient.transport import RequestClient

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path("cache")
BYPASS_CACHE: bool = False  # Can be monkeypatched to force refetching

# Most filesystems cap a single name at 255 bytes
MAX_FILENAME_LENGTH = 200
_PREFIX_LENGTH = MAX_FILENAME_LENGTH - 41

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def cache_filename(url: str) -> str:
    """Return a filesystem-safe file name for *url*.

    Names longer than :data:`MAX_FILENAME_LENGTH` keep a readable prefix and
    end in the SHA-1 of the full URL, so distinct URLs stay distinct.
    """
    name = _UNSAFE_CHARS.sub("_", url)
    if len(name) <= MAX_FILENAME_LENGTH:
        return name
    digest = hashlib.sha1(url.encode("utf-8")).hexdigest()
    return f"{name[:_PREFIX_LENGTH]}-{digest}"


class CachingRequestClient(RequestClient):
    """RequestClient decorator that reads and writes bodies under *cache_dir*."""

    def __init__(
        self, inner: RequestClient, cache_dir: Path | str = DEFAULT_CACHE_DIR
    ) -> None:
        self.inner = inner
        self.cache_dir = Path(cache_dir)

    def cache_path(self, url: str) -> Path:
        return self.cache_dir / cache_filename(url)

    def get_url(self, url: str, jwt_token: str | None = None) -> str:
        path = self.cache_path(url)
        if not BYPASS_CACHE and path.exists():
            logger.debug("Cache hit for %s (%s)", url, path)
            return path.read_text(encoding="utf-8")

        body = self.inner.get_url(url, jwt_token)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
        logger.debug("Cached %s as %s", url, path)
        return body
