"""Configuration models using Pydantic for validation."""

import os
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

API_KEY_ENV_VAR = "WEATHERAPI_KEY"
DEFAULT_BASE_URL = "https://api.weatherapi.com/v1/current.json"
DEFAULT_DATA_DIR = "~/.local/share/hava-durumu"


class WeatherApiConfig(BaseModel):
    """Weather API configuration."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    lang: str = "tr"
    timeout_seconds: float | None = None  # None keeps the httpx default

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that URL is a valid HTTP/HTTPS URL."""
        try:
            parsed = urlparse(v)
            if parsed.scheme not in ("http", "https"):
                raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
            if not parsed.netloc:
                raise ValueError("URL must have a valid host")
        except Exception as e:
            raise ValueError(f"Invalid URL '{v}': {e}")
        return v

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Validate timeout is positive when set."""
        if v is not None and v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v

    def resolved_api_key(self) -> str:
        """Return the configured key, falling back to the environment."""
        return self.api_key or os.environ.get(API_KEY_ENV_VAR, "")


class HistoryConfig(BaseModel):
    """Search history persistence configuration."""

    data_dir: str = DEFAULT_DATA_DIR
    key: str = Field(default="weatherHistory", min_length=1)
    limit: int = Field(default=5, ge=1, le=20)

    @property
    def data_path(self) -> Path:
        """Data directory with ~ expanded."""
        return Path(self.data_dir).expanduser()


class Settings(BaseModel):
    """General application settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Config(BaseModel):
    """Main configuration model."""

    weather: WeatherApiConfig = Field(default_factory=WeatherApiConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    settings: Settings = Field(default_factory=Settings)

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        import json

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()
