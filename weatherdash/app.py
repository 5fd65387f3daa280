"""Application context: builds the store, client and controller once at startup."""

import logging
import sqlite3

from weatherdash.config.schema import DashboardConfig
from weatherdash.controller.search_controller import SearchController
from weatherdash.ingest.base import WeatherClient, build_client
from weatherdash.models.common import ClientMode, Severity
from weatherdash.presentation.adapter import PresentationAdapter
from weatherdash.storage.database import open_store
from weatherdash.storage.recent_repo import RecentSearchRepo

logger = logging.getLogger(__name__)


class DashboardApp:
    """Owns everything one dashboard session needs.

    Passed explicitly to whichever front end feeds it user input.
    """

    def __init__(
        self,
        config: DashboardConfig,
        ui: PresentationAdapter,
        conn: sqlite3.Connection | None = None,
        client: WeatherClient | None = None,
    ):
        self.config = config
        self.ui = ui
        self.conn = conn or open_store(config.storage.db_path)
        self.recent = RecentSearchRepo(
            self.conn,
            key=config.storage.recent_searches_key,
            visited_key=config.storage.visited_key,
        )
        self.controller = SearchController(
            client or build_client(config),
            ui,
            self.recent,
            debounce_seconds=config.search.debounce_ms / 1000,
            min_query_length=config.search.min_query_length,
            welcome_delay=config.ui.welcome_delay_ms / 1000,
        )
        logger.info("Dashboard ready in %s mode", self.controller.client.mode)

    @property
    def client(self) -> WeatherClient:
        return self.controller.client

    async def set_credential(self, api_key: str) -> None:
        """Switch to the live client with a new API key.

        Takes effect on the next request; the previous client is closed.
        """
        self.config = self.config.model_copy(
            update={
                "api": self.config.api.model_copy(
                    update={"api_key": api_key, "mode": ClientMode.LIVE}
                )
            }
        )
        previous = self.controller.client
        self.controller.set_client(build_client(self.config))
        await previous.aclose()
        logger.info("API key configured, switched to live mode")
        self.ui.show_notification("API key configured successfully", Severity.SUCCESS)

    async def aclose(self) -> None:
        await self.controller.aclose()
        self.conn.close()
