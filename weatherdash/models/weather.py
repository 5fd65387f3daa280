"""Normalized weather data models."""

from dataclasses import dataclass
from datetime import date

ICON_BASE_URL = "https://openweathermap.org/img/wn"


def icon_url_for(icon_id: str) -> str:
    return f"{ICON_BASE_URL}/{icon_id}@2x.png"


@dataclass(frozen=True)
class WeatherReading:
    city: str
    country: str
    temperature_c: int
    feels_like_c: int
    description: str
    icon_id: str
    humidity_pct: int
    wind_speed_mps: float
    pressure_hpa: int
    visibility_km: float
    uv_index: int | None = None

    @property
    def icon_url(self) -> str:
        return icon_url_for(self.icon_id)


@dataclass(frozen=True)
class ForecastDay:
    date: date
    temperature_c: int
    description: str
    icon_id: str
    humidity_pct: int
    wind_speed_mps: float

    @property
    def icon_url(self) -> str:
        return icon_url_for(self.icon_id)


@dataclass(frozen=True)
class CitySuggestion:
    name: str
    country: str
    state: str
    latitude: float
    longitude: float

    @property
    def display_name(self) -> str:
        """Label shown in the suggestion list, e.g. "Portland, Oregon, US"."""
        if self.state:
            return f"{self.name}, {self.state}, {self.country}"
        return f"{self.name}, {self.country}"
