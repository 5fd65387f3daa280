"""Contract between the search controller and whatever renders the dashboard."""

from typing import Protocol

from weatherdash.models.common import Severity
from weatherdash.models.weather import CitySuggestion, ForecastDay, WeatherReading


class PresentationAdapter(Protocol):
    def show_loading(self) -> None: ...

    def hide_loading(self) -> None: ...

    def display_current_weather(self, reading: WeatherReading) -> None: ...

    def display_forecast(self, days: list[ForecastDay]) -> None: ...

    def display_suggestions(self, cities: list[CitySuggestion]) -> None: ...

    def clear_suggestions(self) -> None: ...

    def display_recent_searches(self, cities: list[str]) -> None: ...

    def show_error(self, title: str, message: str) -> None: ...

    def hide_error(self) -> None: ...

    def show_notification(self, message: str, severity: Severity = Severity.INFO) -> None: ...

    def get_search_value(self) -> str: ...

    def set_search_value(self, value: str) -> None: ...

    def focus_search(self) -> None: ...
