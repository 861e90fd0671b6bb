"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_api_payload():
    """A trimmed weatherapi.com current.json response."""
    return {
        "location": {
            "name": "London",
            "region": "City of London, Greater London",
            "country": "United Kingdom",
            "localtime": "2026-10-19 14:05",
        },
        "current": {
            "temp_c": 12.5,
            "is_day": 1,
            "condition": {"text": "Parçalı bulutlu", "code": 1003},
            "wind_kph": 15.1,
            "humidity": 72,
            "vis_km": 10.0,
            "feelslike_c": 10.4,
        },
    }


@pytest.fixture
def make_payload():
    """Factory for minimal valid API payloads."""

    def _make(name: str, country: str = "Somewhere", condition: str = "Güneşli") -> dict:
        return {
            "location": {"name": name, "country": country},
            "current": {
                "temp_c": 20.0,
                "condition": {"text": condition},
                "wind_kph": 5.0,
                "humidity": 50,
                "vis_km": 10.0,
                "feelslike_c": 19.0,
            },
        }

    return _make


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "weather": {
            "api_key": "test-key",
            "base_url": "https://api.weatherapi.com/v1/current.json",
            "lang": "tr",
        },
        "history": {
            "data_dir": "/tmp/hava-durumu-test",
            "key": "weatherHistory",
            "limit": 5,
        },
        "settings": {"log_level": "INFO"},
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path
