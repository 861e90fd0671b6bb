"""Query state for the search screen."""

from enum import Enum

from pydantic import BaseModel

from .weather import WeatherSnapshot


class Phase(str, Enum):
    """Which of the screen's states the query is in."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class QueryState(BaseModel):
    """Input text, loading flag, error message and the last snapshot."""

    city: str = ""
    loading: bool = False
    error: str = ""
    weather: WeatherSnapshot | None = None

    @property
    def phase(self) -> Phase:
        """Derive the current phase from the flags."""
        if self.loading:
            return Phase.LOADING
        if self.error:
            return Phase.FAILED
        if self.weather is not None:
            return Phase.SUCCESS
        return Phase.IDLE

    @property
    def show_weather(self) -> bool:
        """Whether the weather card should be visible."""
        return self.weather is not None and not self.loading
