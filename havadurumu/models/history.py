"""Search history models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

HISTORY_LIMIT = 5


def format_history_time(moment: datetime) -> str:
    """Format a timestamp the way the history list shows it (e.g. '19.10 14:05')."""
    return moment.strftime("%d.%m %H:%M")


class SearchHistoryEntry(BaseModel):
    """A remembered successful search, keyed by the resolved city name."""

    model_config = ConfigDict(frozen=True)

    city: str = Field(..., min_length=1)
    time: str = ""

    @classmethod
    def create(cls, city: str, moment: datetime | None = None) -> "SearchHistoryEntry":
        """Create an entry stamped with the given (or current) local time."""
        return cls(city=city, time=format_history_time(moment or datetime.now()))


def merge_history(
    history: list[SearchHistoryEntry],
    entry: SearchHistoryEntry,
    limit: int = HISTORY_LIMIT,
) -> list[SearchHistoryEntry]:
    """Put entry at the front, drop older entries for the same city, cap at limit."""
    merged = [entry] + [h for h in history if h.city != entry.city]
    return merged[:limit]
