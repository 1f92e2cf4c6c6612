"""
SQLite connection factory utilities for the sportsbook services.

Provides centralized management of SQLite connections with proper lifecycle
management. The ConnectionManager singleton hands out one shared connection
per database path and closes them all on application exit.

Includes retry logic for transient "database is locked" failures using tenacity.
"""

from __future__ import annotations

import atexit
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Dict, Optional

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from sportsbook.config import get_settings
from sportsbook.utils.logging import get_logger

log = get_logger(__name__)

MEMORY_PATH = ":memory:"


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type(sqlite3.OperationalError),
    reraise=True,
)
def get_connection(path: str, timeout: Optional[float] = None) -> sqlite3.Connection:
    """
    Open a dedicated SQLite connection with automatic retry.

    Retries up to 3 times with exponential backoff for transient errors.
    Rows are returned as `sqlite3.Row` so columns can be read by name.

    Parameters
    ----------
    path : str
        Database file path, or ":memory:" for a private in-memory database.
    timeout : float | None
        Seconds to wait on a locked database. Defaults to settings.

    Raises
    ------
    sqlite3.OperationalError
        If the connection fails after all retry attempts.
    """
    if timeout is None:
        timeout = get_settings().db_timeout_seconds
    conn = sqlite3.connect(path, timeout=timeout, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


class ConnectionManager:
    """
    Thread-safe singleton that owns one long-lived connection per database path.

    Handles lifecycle management with automatic cleanup via atexit hook.
    """

    _instance: Optional["ConnectionManager"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "ConnectionManager":
        """Create or return the singleton instance."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._connections: Dict[str, sqlite3.Connection] = {}
                atexit.register(cls._instance.close_all)
            return cls._instance

    def connection(self, path: str) -> sqlite3.Connection:
        """Get or open the shared connection for `path`."""
        with self._lock:
            conn = self._connections.get(path)
            if conn is None:
                conn = get_connection(path)
                self._connections[path] = conn
                log.debug("Opened database", extra={"path": path})
            return conn

    def close_all(self) -> None:
        """
        Close all managed connections and release resources.

        This is called automatically on exit via atexit hook.
        """
        with self._lock:
            for path, conn in self._connections.items():
                try:
                    conn.close()
                except sqlite3.Error:
                    log.warning("Failed to close database", extra={"path": path})
            self._connections.clear()


def to_db_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Serialize a datetime as UTC ISO-8601 text; None stays NULL."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def from_db_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse stored timestamp text; naive values are taken as UTC."""
    if value is None or value == "":
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = [
    "ConnectionManager",
    "MEMORY_PATH",
    "from_db_timestamp",
    "get_connection",
    "to_db_timestamp",
]
