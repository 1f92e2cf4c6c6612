"""
Repository interfaces for the racing and sports verticals.

Services depend only on these protocols, so tests can swap in stubs and the
SQLite implementations stay replaceable. Repositories return records in
unspecified order; ordering is the sorter's job.
"""

from __future__ import annotations

import abc
import sqlite3
import threading
from typing import Any, List, Optional, Protocol, Sequence, runtime_checkable

from sportsbook.domain.models import Event, ListEventsFilter, ListRacesFilter, Race
from sportsbook.utils.logging import get_logger
from sportsbook.utils.once import Once

log = get_logger(__name__)


@runtime_checkable
class RacesRepository(Protocol):
    """Read access to races."""

    def init(self) -> None:
        """Create schema and seed data once; later calls are no-ops."""
        ...

    def list(self, filter: Optional[ListRacesFilter] = None) -> List[Race]:
        """
        Return all races matching the filter.

        Raises
        ------
        sqlite3.Error
            Storage failures propagate unchanged.
        """
        ...

    def get_race(self, race_id: int) -> Race:
        """
        Return the race with the given ID.

        Raises
        ------
        NoRowsError
            If no race has that ID.
        """
        ...


@runtime_checkable
class EventsRepository(Protocol):
    """Read access to sporting events."""

    def init(self) -> None:
        ...

    def list(self, filter: Optional[ListEventsFilter] = None) -> List[Event]:
        ...


class AbstractSqliteRepository(abc.ABC):
    """
    Shared plumbing for SQLite-backed repositories.

    Subclasses set `table` and implement `_create_schema` and `_seed`. `init`
    runs both at most once per repository instance and reports the same
    error to every caller if it fails. Seeding is skipped when the table
    already holds rows, so re-opening an existing database is safe.
    """

    table: str

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._lock = threading.RLock()
        self._init_once: Once[None] = Once(self._initialize)

    def init(self) -> None:
        self._init_once()

    def _initialize(self) -> None:
        # the connection context commits on success and rolls back a partial seed
        with self._lock, self._conn:
            self._create_schema()
            (count,) = self._conn.execute(f"SELECT COUNT(*) FROM {self.table}").fetchone()
            if count > 0:
                log.debug("Skipping seed", extra={"table": self.table, "rows": count})
                return
            self._seed()
            log.info("Seeded table", extra={"table": self.table})

    def _query(self, sql: str, args: Sequence[Any] = ()) -> List[sqlite3.Row]:
        with self._lock:
            return self._conn.execute(sql, tuple(args)).fetchall()

    @abc.abstractmethod
    def _create_schema(self) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def _seed(self) -> None:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = [
    "AbstractSqliteRepository",
    "EventsRepository",
    "RacesRepository",
]
