"""Tests for the condition-to-presentation mapping."""

import pytest

from havadurumu.models.presentation import (
    DEFAULT_PALETTE,
    DEFAULT_PRESENTATION,
    presentation_for,
)

RAIN_PALETTE = ("#4a5568", "#2d3748", "#1a365d")
CLOUD_PALETTE = ("#718096", "#4a5568", "#2d3748")
SUN_PALETTE = ("#4299e1", "#63b3ed", "#fbd38d")


class TestPresentationFor:
    """Tests for presentation_for."""

    @pytest.mark.parametrize(
        "condition",
        ["Light rain", "Hafif yağmur", "RAIN", "Patchy rain possible"],
    )
    def test_rain(self, condition):
        """Test rain keywords."""
        result = presentation_for(condition)
        assert result.emoji == "🌧️"
        assert result.palette == RAIN_PALETTE

    @pytest.mark.parametrize("condition", ["Cloudy", "Parçalı bulutlu", "Partly cloudy"])
    def test_cloud(self, condition):
        """Test cloud keywords."""
        result = presentation_for(condition)
        assert result.emoji == "☁️"
        assert result.palette == CLOUD_PALETTE

    @pytest.mark.parametrize("condition", ["Sunny", "Güneşli", "Clear"])
    def test_sun(self, condition):
        """Test sun keywords."""
        result = presentation_for(condition)
        assert result.emoji == "☀️"
        assert result.palette == SUN_PALETTE

    @pytest.mark.parametrize("condition", ["Heavy snow", "Yoğun kar"])
    def test_snow_keeps_default_palette(self, condition):
        """Test snow has its own emoji on the default palette."""
        result = presentation_for(condition)
        assert result.emoji == "❄️"
        assert result.palette == DEFAULT_PALETTE

    def test_first_match_wins(self):
        """Test rain beats cloud when both appear."""
        assert presentation_for("Cloudy with rain").emoji == "🌧️"
        assert presentation_for("Rain and snow").emoji == "🌧️"

    @pytest.mark.parametrize("condition", ["", None, "Fog", "Sis", "Mist"])
    def test_default(self, condition):
        """Test unmatched and empty input fall back to the default."""
        assert presentation_for(condition) == DEFAULT_PRESENTATION
        assert presentation_for(condition).emoji == "🌤️"

    def test_pure(self):
        """Test repeated calls give the same answer."""
        assert presentation_for("Sunny") == presentation_for("Sunny")
