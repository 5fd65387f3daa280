"""Demo client: synthetic weather after a simulated latency, no network."""

import asyncio
import random
from collections.abc import Callable
from datetime import date, timedelta

from weatherdash.config.defaults import DEMO_CITIES, DEMO_CONDITIONS, DEMO_COUNTRY
from weatherdash.ingest.normalize import MAX_FORECAST_DAYS, MAX_SUGGESTIONS
from weatherdash.models.common import ClientMode
from weatherdash.models.weather import CitySuggestion, ForecastDay, WeatherReading


class DemoClient:
    mode = ClientMode.DEMO

    def __init__(
        self,
        latency: float = 0.5,
        search_latency: float = 0.3,
        rng: random.Random | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.latency = latency
        self.search_latency = search_latency
        self._rng = rng or random.Random()
        self._today = today

    async def get_current_weather(self, city: str) -> WeatherReading:
        await asyncio.sleep(self.latency)
        return WeatherReading(
            city=city,
            country=DEMO_COUNTRY,
            temperature_c=22,
            feels_like_c=20,
            description="partly cloudy",
            icon_id="02d",
            humidity_pct=65,
            wind_speed_mps=3.5,
            pressure_hpa=1013,
            visibility_km=10.0,
            uv_index=5,
        )

    async def get_forecast(self, city: str) -> list[ForecastDay]:
        await asyncio.sleep(self.latency)
        start = self._today()
        days = []
        for offset in range(1, MAX_FORECAST_DAYS + 1):
            description, icon_id = self._rng.choice(DEMO_CONDITIONS)
            days.append(
                ForecastDay(
                    date=start + timedelta(days=offset),
                    temperature_c=round(18 + self._rng.random() * 10),
                    description=description,
                    icon_id=icon_id,
                    humidity_pct=round(50 + self._rng.random() * 30),
                    wind_speed_mps=round(self._rng.random() * 5, 1),
                )
            )
        return days

    async def search_cities(self, query: str) -> list[CitySuggestion]:
        await asyncio.sleep(self.search_latency)
        needle = query.strip().lower()
        matches = [c for c in DEMO_CITIES if needle in c.name.lower()]
        return matches[:MAX_SUGGESTIONS]

    async def aclose(self) -> None:
        return None
