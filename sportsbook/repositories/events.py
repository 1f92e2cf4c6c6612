"""
SQLite-backed sporting events repository.
"""

from __future__ import annotations

import json
import sqlite3
from typing import Any, List, Optional, Tuple

from sportsbook.domain.models import Event, ListEventsFilter
from sportsbook.infrastructure.db_factory import from_db_timestamp, to_db_timestamp
from sportsbook.repositories.abstract import AbstractSqliteRepository
from sportsbook.repositories.seed import fixed_events
from sportsbook.utils.logging import get_logger

log = get_logger(__name__)

_COLUMNS = "id, name, advertised_start, visible, venue, sport_type, competitors"


def parse_competitors(raw: Optional[str]) -> Tuple[str, ...]:
    """
    Decode the stored JSON array of competitor names.

    NULL or empty text yields no competitors.
    """
    if not raw:
        return ()
    return tuple(str(name).strip() for name in json.loads(raw))


def _scan_event(row: sqlite3.Row) -> Event:
    return Event(
        id=row["id"],
        name=row["name"] or "",
        advertised_start_time=from_db_timestamp(row["advertised_start"]),
        visible=bool(row["visible"]),
        venue=row["venue"] or "",
        sport_type=row["sport_type"] or "",
        competitors=parse_competitors(row["competitors"]),
    )


class SqliteEventsRepository(AbstractSqliteRepository):
    """Sporting events stored in a single `events` table."""

    table = "events"

    def _create_schema(self) -> None:
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS events (
                id INTEGER PRIMARY KEY,
                name TEXT,
                advertised_start TIMESTAMP,
                visible BOOLEAN,
                venue TEXT,
                sport_type TEXT,
                competitors TEXT
            )
            """
        )

    def _seed(self) -> None:
        self._conn.executemany(
            f"INSERT OR IGNORE INTO events ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
            [
                (
                    event.id,
                    event.name,
                    to_db_timestamp(event.advertised_start_time),
                    1 if event.visible else 0,
                    event.venue,
                    event.sport_type,
                    event.competitors_json,
                )
                for event in fixed_events()
            ],
        )

    def list(self, filter: Optional[ListEventsFilter] = None) -> List[Event]:
        clauses: List[str] = []
        args: List[Any] = []

        if filter is not None and filter.visible_only:
            clauses.append("visible = ?")
            args.append(1)

        sql = f"SELECT {_COLUMNS} FROM events"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)

        rows = self._query(sql, args)
        log.debug("Listed events", extra={"rows": len(rows)})
        return [_scan_event(row) for row in rows]


__all__ = ["SqliteEventsRepository", "parse_competitors"]
