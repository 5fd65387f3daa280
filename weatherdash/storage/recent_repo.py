"""Recent-search history and first-visit flag on top of the key/value store."""

import json
import logging
import sqlite3

from weatherdash.storage import kv_repo

logger = logging.getLogger(__name__)

MAX_RECENT_SEARCHES = 5
DEFAULT_RECENT_KEY = "weather_recent_searches"
DEFAULT_VISITED_KEY = "weather_app_visited"


class RecentSearchRepo:
    """Most-recent-first list of city names, capped and case-insensitively unique.

    The list is stored as a JSON array under a single key. Every mutation
    re-reads the stored list, so the repo holds no in-memory copy.
    """

    def __init__(
        self,
        conn: sqlite3.Connection,
        key: str = DEFAULT_RECENT_KEY,
        visited_key: str = DEFAULT_VISITED_KEY,
    ):
        self.conn = conn
        self.key = key
        self.visited_key = visited_key

    def load(self) -> list[str]:
        raw = kv_repo.get_value(self.conn, self.key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.exception("Error loading recent searches, discarding")
            kv_repo.remove_value(self.conn, self.key)
            return []
        if not isinstance(data, list):
            logger.warning("Recent searches under %s is not a list, discarding", self.key)
            kv_repo.remove_value(self.conn, self.key)
            return []
        return [str(c) for c in data][:MAX_RECENT_SEARCHES]

    def add(self, city: str) -> list[str]:
        """Move city to the front, dropping case-insensitive duplicates."""
        searches = [s for s in self.load() if s.lower() != city.lower()]
        searches.insert(0, city)
        return self._save(searches[:MAX_RECENT_SEARCHES])

    def remove(self, city: str) -> list[str]:
        searches = [s for s in self.load() if s.lower() != city.lower()]
        return self._save(searches)

    def is_first_visit(self) -> bool:
        return kv_repo.get_value(self.conn, self.visited_key) is None

    def mark_visited(self) -> None:
        kv_repo.set_value(self.conn, self.visited_key, "true")

    def _save(self, searches: list[str]) -> list[str]:
        kv_repo.set_value(self.conn, self.key, json.dumps(searches))
        return searches
