"""Normalizers: map raw OpenWeatherMap payloads onto the dashboard models."""

import logging
import math
from datetime import UTC, date, datetime, timedelta

from weatherdash.models.weather import CitySuggestion, ForecastDay, WeatherReading

logger = logging.getLogger(__name__)

MAX_FORECAST_DAYS = 5
MAX_SUGGESTIONS = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def format_weather(raw: dict) -> WeatherReading:
    """Build a WeatherReading from a /weather response."""
    main = raw["main"]
    condition = raw["weather"][0]
    wind = raw.get("wind") or {}
    return WeatherReading(
        city=raw["name"],
        country=(raw.get("sys") or {}).get("country", ""),
        temperature_c=round_half_up(float(main["temp"])),
        feels_like_c=round_half_up(float(main["feels_like"])),
        description=condition.get("description", ""),
        icon_id=condition.get("icon", ""),
        humidity_pct=int(main.get("humidity", 0)),
        wind_speed_mps=float(wind.get("speed", 0.0)),
        pressure_hpa=int(main.get("pressure", 0)),
        # Reported in metres
        visibility_km=float(raw.get("visibility", 0)) / 1000,
        uv_index=None,
    )


def format_forecast(raw: dict) -> list[ForecastDay]:
    """Collapse a 3-hour /forecast series to one entry per calendar date.

    The first sample seen for each new date wins; collection stops once
    MAX_FORECAST_DAYS dates are gathered. Dates are taken in the city's
    local time when the response carries a UTC offset, otherwise in UTC.
    """
    offset = timedelta(seconds=int((raw.get("city") or {}).get("timezone", 0)))
    samples = sorted(raw.get("list", []), key=lambda item: item["dt"])

    days: list[ForecastDay] = []
    seen: set[date] = set()
    for item in samples:
        day = _sample_date(item["dt"], offset)
        if day in seen:
            continue
        seen.add(day)
        condition = item["weather"][0]
        days.append(
            ForecastDay(
                date=day,
                temperature_c=round_half_up(float(item["main"]["temp"])),
                description=condition.get("description", ""),
                icon_id=condition.get("icon", ""),
                humidity_pct=int(item["main"].get("humidity", 0)),
                wind_speed_mps=float((item.get("wind") or {}).get("speed", 0.0)),
            )
        )
        if len(days) >= MAX_FORECAST_DAYS:
            break

    if not days:
        logger.warning("Forecast response had no samples")
    return days


def parse_cities(raw: list[dict]) -> list[CitySuggestion]:
    """Build suggestions from a geocoding /direct response."""
    return [
        CitySuggestion(
            name=city["name"],
            country=city.get("country", ""),
            state=city.get("state") or "",
            latitude=float(city["lat"]),
            longitude=float(city["lon"]),
        )
        for city in raw[:MAX_SUGGESTIONS]
    ]


def _sample_date(timestamp: int, offset: timedelta) -> date:
    return (datetime.fromtimestamp(int(timestamp), tz=UTC) + offset).date()
