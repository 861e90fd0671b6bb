"""Tests for the weather card formatters."""

from datetime import date

import pytest

from havadurumu.components.history_panel import escape_markup
from havadurumu.components.weather_card import (
    detail_tiles,
    format_date,
    format_location,
    format_temperature,
    round_half_up,
)
from havadurumu.models.weather import WeatherSnapshot


@pytest.fixture
def snapshot(sample_api_payload):
    return WeatherSnapshot.from_api(sample_api_payload)


class TestRounding:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        "value,expected",
        [(12.5, 13), (12.4, 12), (0.5, 1), (-0.5, 0), (-1.5, -1), (-1.6, -2), (2.5, 3)],
    )
    def test_round_half_up(self, value, expected):
        """Test halves always round up."""
        assert round_half_up(value) == expected

    def test_format_temperature(self):
        """Test the degree suffix."""
        assert format_temperature(12.5) == "13°C"
        assert format_temperature(-3.2) == "-3°C"


class TestFormatting:
    """Tests for card text."""

    def test_location(self, snapshot):
        """Test name and country."""
        assert format_location(snapshot) == "London, United Kingdom"

    def test_location_without_country(self, snapshot):
        """Test a missing country shows only the name."""
        assert format_location(snapshot.model_copy(update={"country": ""})) == "London"

    def test_turkish_date(self):
        """Test the long Turkish date."""
        assert format_date(date(2026, 10, 19)) == "19 Ekim Pazartesi"
        assert format_date(date(2026, 2, 1)) == "1 Şubat Pazar"
        assert format_date(date(2026, 8, 5)) == "5 Ağustos Çarşamba"

    def test_detail_tiles(self, snapshot):
        """Test the four tiles in order."""
        assert detail_tiles(snapshot) == [
            ("💨", "Rüzgar", "15.1 km/s"),
            ("💧", "Nem", "72%"),
            ("👁️", "Görüş", "10 km"),
            ("🌡️", "Hissedilen", "10°C"),
        ]


class TestEscapeMarkup:
    """Tests for escape_markup."""

    def test_escapes_brackets(self):
        """Test brackets cannot open Rich markup tags."""
        assert escape_markup("[bold]x[/bold]") == r"\[bold\]x\[/bold\]"

    def test_plain_text_unchanged(self):
        """Test ordinary names are left alone."""
        assert escape_markup("İstanbul") == "İstanbul"
