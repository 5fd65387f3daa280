"""OpenWeatherMap client: current weather, 5-day forecast and geocoding."""

import logging

import httpx

from weatherdash.config.schema import OPENWEATHER_BASE_URL, OPENWEATHER_GEO_URL
from weatherdash.ingest.errors import (
    CityNotFound,
    NetworkFailure,
    ServiceError,
    Unauthorized,
    WeatherError,
)
from weatherdash.ingest.normalize import (
    MAX_SUGGESTIONS,
    format_forecast,
    format_weather,
    parse_cities,
)
from weatherdash.models.common import ClientMode
from weatherdash.models.weather import CitySuggestion, ForecastDay, WeatherReading

logger = logging.getLogger(__name__)

MALFORMED_MESSAGE = "Unexpected response from the weather service"


class LiveClient:
    """Async wrapper over the three OpenWeatherMap read endpoints.

    One httpx.AsyncClient is shared by all calls; close it with aclose().
    """

    mode = ClientMode.LIVE

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        geo_url: str = OPENWEATHER_GEO_URL,
        units: str = "metric",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.geo_url = geo_url.rstrip("/")
        self.units = units
        self.timeout = timeout
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def get_current_weather(self, city: str) -> WeatherReading:
        resp = await self._get(
            f"{self.base_url}/weather",
            {"q": city, "appid": self.api_key, "units": self.units},
        )
        if resp.status_code == 404:
            raise CityNotFound()
        if resp.status_code == 401:
            raise Unauthorized()
        if not resp.is_success:
            logger.error("Weather API %d for city=%s: %s", resp.status_code, city, resp.text)
            raise ServiceError(resp.status_code)
        try:
            return format_weather(resp.json())
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error("Malformed weather payload for city=%s: %s", city, e)
            raise WeatherError(MALFORMED_MESSAGE, resp.status_code) from e

    async def get_forecast(self, city: str) -> list[ForecastDay]:
        resp = await self._get(
            f"{self.base_url}/forecast",
            {"q": city, "appid": self.api_key, "units": self.units},
        )
        if not resp.is_success:
            logger.error("Forecast API %d for city=%s: %s", resp.status_code, city, resp.text)
            raise ServiceError(
                resp.status_code,
                f"Error fetching forecast data ({resp.status_code})",
            )
        try:
            return format_forecast(resp.json())
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error("Malformed forecast payload for city=%s: %s", city, e)
            raise WeatherError(MALFORMED_MESSAGE, resp.status_code) from e

    async def search_cities(self, query: str) -> list[CitySuggestion]:
        """Geocode a partial city name. Best effort: failures yield []."""
        try:
            resp = await self._get(
                f"{self.geo_url}/direct",
                {"q": query, "limit": MAX_SUGGESTIONS, "appid": self.api_key},
            )
            if not resp.is_success:
                logger.warning("Geocoding API %d for query=%s", resp.status_code, query)
                return []
            return parse_cities(resp.json())
        except (WeatherError, KeyError, TypeError, ValueError) as e:
            logger.warning("City search failed for query=%s: %s", query, e)
            return []

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get(self, url: str, params: dict) -> httpx.Response:
        try:
            return await self._http.get(url, params=params)
        except httpx.RequestError as e:
            logger.error("Weather API request failed: %s -> %s", url, e)
            raise NetworkFailure() from e
