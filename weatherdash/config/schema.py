"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherdash.models.common import ClientMode

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
OPENWEATHER_GEO_URL = "https://api.openweathermap.org/geo/1.0"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    mode: ClientMode = ClientMode.DEMO
    api_key: str = ""
    base_url: str = OPENWEATHER_BASE_URL
    geo_url: str = OPENWEATHER_GEO_URL
    units: str = "metric"
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    debounce_ms: int = Field(default=300, ge=0)
    min_query_length: int = Field(default=2, ge=1)


class DemoConfig(BaseModel):
    model_config = {"extra": "forbid"}

    latency_ms: int = Field(default=500, ge=0)
    search_latency_ms: int = Field(default=300, ge=0)


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/weatherdash.db"
    recent_searches_key: str = "weather_recent_searches"
    visited_key: str = "weather_app_visited"


class UiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    welcome_delay_ms: int = Field(default=1000, ge=0)


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    search: SearchConfig = SearchConfig()
    demo: DemoConfig = DemoConfig()
    storage: StorageConfig = StorageConfig()
    ui: UiConfig = UiConfig()
