"""Weather card component for displaying current conditions."""

import math
from datetime import date

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from ..models.presentation import presentation_for
from ..models.weather import WeatherSnapshot
from .history_panel import escape_markup

TURKISH_MONTHS = (
    "Ocak",
    "Şubat",
    "Mart",
    "Nisan",
    "Mayıs",
    "Haziran",
    "Temmuz",
    "Ağustos",
    "Eylül",
    "Ekim",
    "Kasım",
    "Aralık",
)

TURKISH_WEEKDAYS = (
    "Pazartesi",
    "Salı",
    "Çarşamba",
    "Perşembe",
    "Cuma",
    "Cumartesi",
    "Pazar",
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (12.5 -> 13, -0.5 -> 0)."""
    return math.floor(value + 0.5)


def format_temperature(value: float) -> str:
    return f"{round_half_up(value)}°C"


def format_location(snapshot: WeatherSnapshot) -> str:
    """'Name, Country' (just the name when the country is missing)."""
    if snapshot.country:
        return f"{snapshot.name}, {snapshot.country}"
    return snapshot.name


def format_date(day: date) -> str:
    """Long Turkish date, e.g. '19 Ekim Pazartesi'."""
    return f"{day.day} {TURKISH_MONTHS[day.month - 1]} {TURKISH_WEEKDAYS[day.weekday()]}"


def _format_number(value: float) -> str:
    # 12.0 -> "12", 7.2 -> "7.2"
    return f"{value:g}"


def detail_tiles(snapshot: WeatherSnapshot) -> list[tuple[str, str, str]]:
    """The four detail tiles as (emoji, label, value)."""
    return [
        ("💨", "Rüzgar", f"{_format_number(snapshot.wind_kph)} km/s"),
        ("💧", "Nem", f"{snapshot.humidity}%"),
        ("👁️", "Görüş", f"{_format_number(snapshot.vis_km)} km"),
        ("🌡️", "Hissedilen", format_temperature(snapshot.feelslike_c)),
    ]


class WeatherCard(Static):
    """Card showing the most recent weather snapshot."""

    DEFAULT_CSS = """
    WeatherCard {
        height: auto;
        border: round $primary;
        padding: 1 2;
        margin-bottom: 1;
        display: none;
    }

    WeatherCard.visible {
        display: block;
    }

    WeatherCard #card-location {
        text-style: bold;
        text-align: center;
        width: 100%;
    }

    WeatherCard #card-date, WeatherCard #card-condition {
        color: $text-muted;
        text-align: center;
        width: 100%;
    }

    WeatherCard #card-emoji, WeatherCard #card-temperature {
        text-align: center;
        width: 100%;
    }

    WeatherCard #card-temperature {
        text-style: bold;
    }

    WeatherCard #card-details {
        height: auto;
        margin-top: 1;
    }

    WeatherCard .detail-tile {
        width: 1fr;
        height: auto;
        text-align: center;
        border: round $panel;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._weather: WeatherSnapshot | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="card-location")
        yield Static("", id="card-date")
        yield Static("", id="card-emoji")
        yield Static("", id="card-temperature")
        yield Static("", id="card-condition")
        with Horizontal(id="card-details"):
            for index in range(4):
                yield Static("", id=f"detail-{index}", classes="detail-tile")

    def update_weather(self, weather: WeatherSnapshot, today: date | None = None) -> None:
        """Show a snapshot."""
        self._weather = weather
        presentation = presentation_for(weather.condition_text)

        self.query_one("#card-location", Static).update(escape_markup(format_location(weather)))
        self.query_one("#card-date", Static).update(format_date(today or date.today()))
        self.query_one("#card-emoji", Static).update(presentation.emoji)
        self.query_one("#card-temperature", Static).update(format_temperature(weather.temp_c))
        self.query_one("#card-condition", Static).update(escape_markup(weather.condition_text))

        for index, (emoji, label, value) in enumerate(detail_tiles(weather)):
            self.query_one(f"#detail-{index}", Static).update(
                f"{emoji}\n[dim]{label}[/dim]\n[bold]{value}[/bold]"
            )

        self.styles.background = presentation.palette[1]
        self.styles.border = ("round", presentation.palette[2])
        self.add_class("visible")

    def clear(self) -> None:
        """Hide the card."""
        self._weather = None
        self.remove_class("visible")
