"""Weather data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class _Location(BaseModel):
    name: str
    country: str = ""


class _Condition(BaseModel):
    text: str = ""


class _Current(BaseModel):
    temp_c: float
    condition: _Condition
    wind_kph: float
    humidity: int
    vis_km: float
    feelslike_c: float


class _CurrentResponse(BaseModel):
    """Shape of the weatherapi.com current.json body (only what we read)."""

    location: _Location
    current: _Current


class WeatherSnapshot(BaseModel):
    """Current conditions for a single query."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    temp_c: float
    condition_text: str
    wind_kph: float
    humidity: int
    vis_km: float
    feelslike_c: float

    @classmethod
    def from_api(cls, payload: Any) -> "WeatherSnapshot":
        """Build a snapshot from a current.json response body.

        Raises pydantic's ValidationError (a ValueError) when the body does
        not have the expected shape.
        """
        data = _CurrentResponse.model_validate(payload)
        return cls(
            name=data.location.name,
            country=data.location.country,
            temp_c=data.current.temp_c,
            condition_text=data.current.condition.text,
            wind_kph=data.current.wind_kph,
            humidity=data.current.humidity,
            vis_km=data.current.vis_km,
            feelslike_c=data.current.feelslike_c,
        )
