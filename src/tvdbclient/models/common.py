"""Value types shared by both API generations."""

from pydantic import BaseModel, ConfigDict


class Date(BaseModel):
    """Calendar date as reported by TheTVDB (air dates, thumbnail dates).

    Produced only from ``YYYY-MM-DD`` text by :func:`tvdbclient.parse.parse_date`.
    Month and day are not range-checked.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    """Year (e.g. 2001)."""
    month: int
    """Number of month (e.g. 1-12)."""
    day: int
    """Day of month (e.g. 1-31)."""

    def __str__(self) -> str:
        """Render back to ``YYYY-MM-DD``."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
