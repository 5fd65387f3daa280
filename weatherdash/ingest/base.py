"""WeatherClient interface and construction-time selection of live vs demo."""

from typing import Protocol

from weatherdash.config.schema import DashboardConfig
from weatherdash.ingest.demo_client import DemoClient
from weatherdash.ingest.openweather_client import LiveClient
from weatherdash.models.common import ClientMode
from weatherdash.models.weather import CitySuggestion, ForecastDay, WeatherReading


class WeatherClient(Protocol):
    mode: ClientMode

    async def get_current_weather(self, city: str) -> WeatherReading: ...

    async def get_forecast(self, city: str) -> list[ForecastDay]: ...

    async def search_cities(self, query: str) -> list[CitySuggestion]: ...

    async def aclose(self) -> None: ...


def build_client(config: DashboardConfig) -> WeatherClient:
    """Pick the client implementation for the configured mode."""
    if config.api.mode == ClientMode.LIVE:
        return LiveClient(
            api_key=config.api.api_key,
            base_url=config.api.base_url,
            geo_url=config.api.geo_url,
            units=config.api.units,
            timeout=config.api.timeout_seconds,
        )
    return DemoClient(
        latency=config.demo.latency_ms / 1000,
        search_latency=config.demo.search_latency_ms / 1000,
    )
