"""Search controller: debounced autocomplete, weather lookups and search history."""

import asyncio
import logging

from weatherdash.controller.debounce import Debouncer
from weatherdash.ingest.base import WeatherClient
from weatherdash.ingest.errors import NETWORK_MESSAGE, ValidationError, WeatherError
from weatherdash.models.common import ClientMode, SearchState, Severity
from weatherdash.models.weather import ForecastDay, WeatherReading
from weatherdash.presentation.adapter import PresentationAdapter
from weatherdash.storage.recent_repo import RecentSearchRepo

logger = logging.getLogger(__name__)

ERROR_TITLE = "Unable to fetch weather data"
WELCOME_MESSAGE = "Welcome! Search for a city to get started."
DEMO_MODE_MESSAGE = "Demo Mode - Using sample data"


class SearchController:
    """Wires user input to the weather client, the presentation layer and history.

    All methods run on the event loop thread; the recent-search list is only
    mutated from here.
    """

    def __init__(
        self,
        client: WeatherClient,
        ui: PresentationAdapter,
        recent: RecentSearchRepo,
        debounce_seconds: float = 0.3,
        min_query_length: int = 2,
        welcome_delay: float = 1.0,
    ):
        self.client = client
        self.ui = ui
        self.recent = recent
        self.min_query_length = min_query_length
        self.welcome_delay = welcome_delay
        self.debouncer = Debouncer(debounce_seconds)
        self.state = SearchState.IDLE
        self.current_city: str | None = None
        self.favorites: set[str] = set()
        self._welcome_task: asyncio.Task | None = None

    # --- Lifecycle ---

    def start(self) -> None:
        """Render stored history and greet first-time visitors.

        Must be called from inside the running event loop.
        """
        self.ui.display_recent_searches(self.recent.load())
        if self.client.mode == ClientMode.DEMO:
            self.ui.show_notification(DEMO_MODE_MESSAGE, Severity.INFO)
        if self.recent.is_first_visit():
            self._welcome_task = asyncio.get_running_loop().create_task(self._welcome())
        self.ui.focus_search()

    def set_client(self, client: WeatherClient) -> None:
        self.debouncer.cancel()
        self.client = client

    async def wait_pending(self) -> None:
        """Wait for a scheduled suggestion fetch and the welcome greeting."""
        await self.debouncer.wait()
        task = self._welcome_task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def aclose(self) -> None:
        self.debouncer.cancel()
        if self._welcome_task is not None and not self._welcome_task.done():
            self._welcome_task.cancel()
        await self.client.aclose()

    # --- Autocomplete ---

    def on_query_changed(self, query: str) -> None:
        self.debouncer.cancel()
        if not query.strip():
            self.ui.clear_suggestions()
            return
        self.debouncer.schedule(lambda: self._fetch_suggestions(query))

    def dismiss_suggestions(self) -> None:
        self.debouncer.cancel()
        self.ui.clear_suggestions()

    async def select_suggestion(self, city_name: str) -> SearchState:
        self.ui.set_search_value(city_name)
        self.ui.clear_suggestions()
        return await self.submit_search()

    async def _fetch_suggestions(self, query: str) -> None:
        query = query.strip()
        if len(query) < self.min_query_length:
            return
        try:
            cities = await self.client.search_cities(query)
        except Exception:
            logger.warning("Error fetching city suggestions for %r", query, exc_info=True)
            return
        self.ui.display_suggestions(cities)

    # --- Weather lookup ---

    async def submit_search(self, city: str | None = None) -> SearchState:
        """Look up current weather and forecast for a city.

        The city defaults to the current search box value. Returns the state
        the submission ended in.
        """
        self.state = SearchState.IDLE
        city = (self.ui.get_search_value() if city is None else city).strip()
        if not city:
            error = ValidationError()
            self.ui.show_notification(error.message, Severity.ERROR)
            self.ui.focus_search()
            return self.state

        self.debouncer.cancel()
        self.ui.clear_suggestions()
        self.ui.show_loading()
        self.state = SearchState.LOADING

        try:
            reading, forecast = await self._fetch_pair(city)
        except WeatherError as e:
            logger.warning("Weather lookup failed for %r: %s", city, e)
            return self._fail(e.message)
        except Exception:
            logger.exception("Unexpected error fetching weather for %r", city)
            return self._fail("")

        self.ui.hide_loading()
        self.ui.display_current_weather(reading)
        self.ui.display_forecast(forecast)
        self.current_city = reading.city
        self.save_recent_search(reading.city)
        self.ui.show_notification(f"Weather loaded for {reading.city}", Severity.SUCCESS)
        self.state = SearchState.SUCCESS
        return self.state

    async def select_recent_search(self, city: str) -> SearchState:
        self.ui.set_search_value(city)
        return await self.submit_search()

    def retry(self) -> None:
        """Clear the error panel and hand focus back to the search box."""
        self.state = SearchState.IDLE
        self.ui.hide_error()
        self.ui.focus_search()

    async def _fetch_pair(self, city: str) -> tuple[WeatherReading, list[ForecastDay]]:
        # Fail fast: the first error cancels the sibling request
        current = asyncio.ensure_future(self.client.get_current_weather(city))
        forecast = asyncio.ensure_future(self.client.get_forecast(city))
        try:
            return await asyncio.gather(current, forecast)
        except BaseException:
            for task in (current, forecast):
                task.cancel()
            raise

    def _fail(self, message: str) -> SearchState:
        self.ui.hide_loading()
        self.ui.show_error(ERROR_TITLE, message or NETWORK_MESSAGE)
        self.state = SearchState.ERROR
        return self.state

    # --- Recent searches ---

    def save_recent_search(self, city: str) -> list[str]:
        searches = self.recent.add(city)
        self.ui.display_recent_searches(searches)
        return searches

    def remove_recent_search(self, city: str) -> list[str]:
        searches = self.recent.remove(city)
        self.ui.display_recent_searches(searches)
        self.ui.show_notification(f'Removed "{city}" from recent searches', Severity.INFO)
        return searches

    # --- Favorites ---

    def toggle_favorite(self) -> bool | None:
        """Flip the favourite mark on the displayed city.

        Returns the new mark, or None when no city is on screen.
        """
        city = self.current_city
        if not city:
            return None
        if city in self.favorites:
            self.favorites.discard(city)
            self.ui.show_notification(f"Removed {city} from favorites", Severity.INFO)
            return False
        self.favorites.add(city)
        self.ui.show_notification(f"Added {city} to favorites", Severity.SUCCESS)
        return True

    async def _welcome(self) -> None:
        await asyncio.sleep(self.welcome_delay)
        self.ui.show_notification(WELCOME_MESSAGE, Severity.INFO)
        self.recent.mark_visited()
