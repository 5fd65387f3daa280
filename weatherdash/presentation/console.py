"""Console rendering of the dashboard: prints each view change to a text stream."""

import sys
from typing import TextIO

from weatherdash.models.common import Severity
from weatherdash.models.weather import CitySuggestion, ForecastDay, WeatherReading
from weatherdash.presentation import formatters


class ConsoleAdapter:
    """PresentationAdapter that writes plain text.

    The last rendered suggestions and recent searches are kept so the
    interactive prompt can refer to them by number.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout
        self.search_value = ""
        self.suggestions: list[CitySuggestion] = []
        self.recent: list[str] = []
        self.loading = False
        self.error: tuple[str, str] | None = None

    def _print(self, text: str) -> None:
        print(text, file=self.stream, flush=True)

    def show_loading(self) -> None:
        self.loading = True
        self.error = None
        self._print("Loading...")

    def hide_loading(self) -> None:
        self.loading = False

    def display_current_weather(self, reading: WeatherReading) -> None:
        self.error = None
        self._print(formatters.format_current_weather(reading))

    def display_forecast(self, days: list[ForecastDay]) -> None:
        self._print(formatters.format_forecast(days))

    def display_suggestions(self, cities: list[CitySuggestion]) -> None:
        self.suggestions = list(cities)
        if cities:
            self._print(formatters.format_suggestions(cities))

    def clear_suggestions(self) -> None:
        self.suggestions = []

    def display_recent_searches(self, cities: list[str]) -> None:
        self.recent = list(cities)
        self._print(formatters.format_recent_searches(cities))

    def show_error(self, title: str, message: str) -> None:
        self.loading = False
        self.error = (title, message)
        self._print(formatters.format_error(title, message))

    def hide_error(self) -> None:
        self.error = None

    def show_notification(self, message: str, severity: Severity = Severity.INFO) -> None:
        self._print(formatters.format_notification(message, severity))

    def get_search_value(self) -> str:
        return self.search_value.strip()

    def set_search_value(self, value: str) -> None:
        self.search_value = value

    def focus_search(self) -> None:
        return None
