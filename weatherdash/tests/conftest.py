"""Shared test fixtures."""

import sqlite3
from pathlib import Path

import pytest

from weatherdash.config.schema import DashboardConfig
from weatherdash.storage.database import open_store
from weatherdash.storage.recent_repo import RecentSearchRepo
from weatherdash.tests.helpers import FakeClient, RecordingAdapter


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def conn() -> sqlite3.Connection:
    """In-memory store with migrations applied."""
    db = open_store(":memory:")
    yield db
    db.close()


@pytest.fixture
def recent_repo(conn: sqlite3.Connection) -> RecentSearchRepo:
    return RecentSearchRepo(conn)


@pytest.fixture
def ui() -> RecordingAdapter:
    return RecordingAdapter()


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def fast_config(tmp_path: Path) -> DashboardConfig:
    """Demo config with no simulated latency and a short debounce window."""
    return DashboardConfig(
        search={"debounce_ms": 20},
        demo={"latency_ms": 0, "search_latency_ms": 0},
        storage={"db_path": str(tmp_path / "dash.db")},
        ui={"welcome_delay_ms": 0},
    )
