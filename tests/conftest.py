"""
Pytest configuration for the sportsbook services.

Provides fixtures for:
- In-memory SQLite connections
- Initialized (schema + seed) repositories
- Settings cache isolation
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Generator

import pytest

from sportsbook.config import get_settings
from sportsbook.infrastructure.db_factory import MEMORY_PATH, get_connection
from sportsbook.repositories.events import SqliteEventsRepository
from sportsbook.repositories.races import SqliteRacesRepository
from tests.helpers import SEED_RACE_COUNT


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def db_connection() -> Generator[sqlite3.Connection, None, None]:
    """
    Provide a private in-memory database, closed after the test.
    """
    conn = get_connection(MEMORY_PATH)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture
def races_repo(db_connection: sqlite3.Connection) -> SqliteRacesRepository:
    repo = SqliteRacesRepository(db_connection, seed_count=SEED_RACE_COUNT, random_seed=7)
    repo.init()
    return repo


@pytest.fixture
def events_repo(db_connection: sqlite3.Connection) -> SqliteEventsRepository:
    repo = SqliteEventsRepository(db_connection)
    repo.init()
    return repo
