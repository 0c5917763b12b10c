# WARNING: This settings loader is for LOCAL DEVELOPMENT ONLY.
# Never commit your .env file or share your API keys.
# Ensure .env is listed in .gitignore!

"""Settings loader for TheTVDB credentials and client options.

Loads the API key and endpoint overrides from environment variables or a .env
file.

Recognised .env keys:
- TVDB_API_KEY (required for any lookup)
- TVDB_API_URL (optional, JSON API base URL)
- TVDB_LEGACY_URL (optional, legacy XML API base URL)
- TVDB_TIMEOUT (optional, seconds per request)
- TVDB_CACHE_DIR (optional, enables the developer-debug response cache)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class MissingAPIKeyError(Exception):
    """Raised when a required API key is missing from the environment or .env file."""

    def __init__(self, key: str) -> None:
        """Initialize the error with the missing key name."""
        super().__init__(
            f"Missing required API key: {key}\n"
            "Set it in the environment, a .env file, or run `tvdbclient set-key`."
        )
        self.key = key


class Settings(BaseSettings):
    """Settings for TheTVDB clients.

    Loads credentials and endpoint overrides from environment variables or
    .env file.
    """

    TVDB_API_KEY: str | None = None
    TVDB_API_URL: str = "https://api.thetvdb.com"
    TVDB_LEGACY_URL: str = "http://thetvdb.com"
    TVDB_TIMEOUT: float = 30.0
    TVDB_CACHE_DIR: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def require_keys(self) -> None:
        """Raise MissingAPIKeyError if any required key is missing."""
        required = ["TVDB_API_KEY"]
        for key in required:
            if not getattr(self, key, None):
                raise MissingAPIKeyError(key)
