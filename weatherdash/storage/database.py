"""SQLite connection for the dashboard store, schema tracked by user_version."""

import sqlite3
from pathlib import Path

from weatherdash.storage.migrations import v001_initial

MEMORY_DB = ":memory:"

# Applied in order; position + 1 is the schema version the step produces.
MIGRATIONS = (v001_initial,)


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open a SQLite connection with WAL mode enabled.

    Parent directories of a file-backed database are created on demand.
    """
    if str(db_path) != MEMORY_DB:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def schema_version(conn: sqlite3.Connection) -> int:
    return conn.execute("PRAGMA user_version").fetchone()[0]


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Bring the schema up to date. Returns names of the steps applied."""
    current = schema_version(conn)
    applied = []
    for version, step in enumerate(MIGRATIONS[current:], start=current + 1):
        step.up(conn)
        conn.execute(f"PRAGMA user_version = {version}")
        conn.commit()
        applied.append(step.__name__.rsplit(".", 1)[-1])
    return applied


def open_store(db_path: str | Path) -> sqlite3.Connection:
    """Connect and bring the schema up to date."""
    conn = connect(db_path)
    run_migrations(conn)
    return conn
