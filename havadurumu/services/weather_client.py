"""Weather client for the weatherapi.com current conditions endpoint."""

import logging

import httpx
from pydantic import ValidationError

from ..errors import FetchError
from ..models.config import DEFAULT_BASE_URL
from ..models.weather import WeatherSnapshot

logger = logging.getLogger(__name__)


class WeatherClient:
    """Fetches current conditions for a city. One request, no retries."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        lang: str = "tr",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.lang = lang
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def fetch_weather(self, city: str) -> WeatherSnapshot:
        """Fetch current weather for a city.

        Raises FetchError on any transport failure, non-2xx status or a body
        that is not the expected JSON shape.
        """
        if not city or not city.strip():
            raise ValueError("city must not be blank")

        params = {"key": self.api_key, "q": city, "lang": self.lang}
        logger.debug(f"Fetching weather for {city!r}")

        try:
            async with self._client() as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"HTTP {status} fetching weather for {city!r}")
            raise FetchError(f"HTTP {status}", status_code=status) from e

        except httpx.TimeoutException as e:
            logger.warning(f"Timeout fetching weather for {city!r}")
            raise FetchError("Request timeout") from e

        except httpx.HTTPError as e:
            logger.warning(f"Connection error fetching weather for {city!r}: {e}")
            raise FetchError(f"Connection error: {e}") from e

        except ValueError as e:
            logger.warning(f"Invalid JSON in weather response for {city!r}: {e}")
            raise FetchError(f"Invalid response body: {e}") from e

        try:
            return WeatherSnapshot.from_api(data)
        except ValidationError as e:
            logger.warning(f"Unexpected weather response shape for {city!r}: {e}")
            raise FetchError(f"Parse error: {e}") from e
