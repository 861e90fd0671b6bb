"""Data models for the weather app."""

from .config import Config, HistoryConfig, Settings, WeatherApiConfig
from .history import HISTORY_LIMIT, SearchHistoryEntry, merge_history
from .presentation import Presentation, presentation_for
from .state import Phase, QueryState
from .weather import WeatherSnapshot

__all__ = [
    "HISTORY_LIMIT",
    "Config",
    "HistoryConfig",
    "Phase",
    "Presentation",
    "QueryState",
    "SearchHistoryEntry",
    "Settings",
    "WeatherApiConfig",
    "WeatherSnapshot",
    "merge_history",
    "presentation_for",
]
