"""Services for fetching weather and persisting search history."""

from .history_store import HistoryStore
from .store import KeyValueStore
from .weather_client import WeatherClient

__all__ = ["HistoryStore", "KeyValueStore", "WeatherClient"]
