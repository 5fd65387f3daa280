"""Test doubles and payload builders shared across the suite."""

import asyncio
from datetime import date, timedelta

from weatherdash.models.common import ClientMode, Severity
from weatherdash.models.weather import CitySuggestion, ForecastDay, WeatherReading

# 2026-02-11T09:00:00Z
FORECAST_START_TS = 1770800400
THREE_HOURS = 3 * 3600


class RecordingAdapter:
    """PresentationAdapter that remembers every call and the resulting view state."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []
        self.search_value = ""
        self.loading = False
        self.error: tuple[str, str] | None = None
        self.reading: WeatherReading | None = None
        self.forecast: list[ForecastDay] = []
        self.suggestions: list[CitySuggestion] = []
        self.recent: list[str] = []
        self.notifications: list[tuple[str, Severity]] = []
        self.focused = 0

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def show_loading(self) -> None:
        self.calls.append(("show_loading", ()))
        self.loading = True

    def hide_loading(self) -> None:
        self.calls.append(("hide_loading", ()))
        self.loading = False

    def display_current_weather(self, reading: WeatherReading) -> None:
        self.calls.append(("display_current_weather", (reading,)))
        self.reading = reading

    def display_forecast(self, days: list[ForecastDay]) -> None:
        self.calls.append(("display_forecast", (days,)))
        self.forecast = days

    def display_suggestions(self, cities: list[CitySuggestion]) -> None:
        self.calls.append(("display_suggestions", (cities,)))
        self.suggestions = cities

    def clear_suggestions(self) -> None:
        self.calls.append(("clear_suggestions", ()))
        self.suggestions = []

    def display_recent_searches(self, cities: list[str]) -> None:
        self.calls.append(("display_recent_searches", (cities,)))
        self.recent = cities

    def show_error(self, title: str, message: str) -> None:
        self.calls.append(("show_error", (title, message)))
        self.error = (title, message)

    def hide_error(self) -> None:
        self.calls.append(("hide_error", ()))
        self.error = None

    def show_notification(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.calls.append(("show_notification", (message, severity)))
        self.notifications.append((message, severity))

    def get_search_value(self) -> str:
        return self.search_value.strip()

    def set_search_value(self, value: str) -> None:
        self.calls.append(("set_search_value", (value,)))
        self.search_value = value

    def focus_search(self) -> None:
        self.calls.append(("focus_search", ()))
        self.focused += 1


class FakeClient:
    """In-memory WeatherClient. Resolves city names to title case like the service does."""

    mode = ClientMode.LIVE

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.errors: dict[str, Exception] = {}
        self.delays: dict[str, float] = {}
        self.suggestions: list[CitySuggestion] = []
        self.cancelled: list[str] = []
        self.closed = False

    async def _enter(self, op: str, arg: str) -> None:
        self.calls.append((op, arg))
        try:
            await asyncio.sleep(self.delays.get(op, 0))
        except asyncio.CancelledError:
            self.cancelled.append(op)
            raise
        if op in self.errors:
            raise self.errors[op]

    async def get_current_weather(self, city: str) -> WeatherReading:
        await self._enter("current", city)
        return make_reading(city.strip().title())

    async def get_forecast(self, city: str) -> list[ForecastDay]:
        await self._enter("forecast", city)
        return make_forecast_days(date(2026, 2, 11), 5)

    async def search_cities(self, query: str) -> list[CitySuggestion]:
        await self._enter("search", query)
        return self.suggestions

    async def aclose(self) -> None:
        self.closed = True

    def ops(self, op: str) -> list[str]:
        return [arg for name, arg in self.calls if name == op]


def make_reading(city: str = "London") -> WeatherReading:
    return WeatherReading(
        city=city,
        country="GB",
        temperature_c=12,
        feels_like_c=11,
        description="broken clouds",
        icon_id="04d",
        humidity_pct=81,
        wind_speed_mps=4.63,
        pressure_hpa=1012,
        visibility_km=10.0,
    )


def make_forecast_days(start: date, count: int) -> list[ForecastDay]:
    return [
        ForecastDay(
            date=start + timedelta(days=i),
            temperature_c=10 + i,
            description="light rain",
            icon_id="10d",
            humidity_pct=70,
            wind_speed_mps=3.2,
        )
        for i in range(count)
    ]


def make_forecast_payload(
    count: int = 40, start_ts: int = FORECAST_START_TS, tz_offset: int = 0
) -> dict:
    """Build a /forecast response with `count` samples spaced three hours apart."""
    samples = [
        {
            "dt": start_ts + i * THREE_HOURS,
            "main": {"temp": 10.5 + i * 0.1, "humidity": 60 + i % 10},
            "weather": [{"description": f"sample {i}", "icon": "10d"}],
            "wind": {"speed": 2.5},
        }
        for i in range(count)
    ]
    return {
        "cod": "200",
        "cnt": count,
        "list": samples,
        "city": {"name": "London", "country": "GB", "timezone": tz_offset},
    }
