"""UI components for the weather screen."""

from .history_panel import HistoryPanel
from .search_bar import SearchBar
from .status_bar import StatusBar
from .weather_card import WeatherCard

__all__ = ["HistoryPanel", "SearchBar", "StatusBar", "WeatherCard"]
