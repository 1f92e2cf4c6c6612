"""
SQLite-backed races repository.

Builds a single-table SELECT from the request filter. Visibility and meeting
constraints combine with AND; an empty meeting list adds no constraint.
"""

from __future__ import annotations

import sqlite3
from typing import Any, List, Optional, Tuple

from sportsbook.config import get_settings
from sportsbook.domain.errors import NoRowsError
from sportsbook.domain.models import ListRacesFilter, Race
from sportsbook.infrastructure.db_factory import from_db_timestamp, to_db_timestamp
from sportsbook.repositories.abstract import AbstractSqliteRepository
from sportsbook.repositories.seed import generate_races
from sportsbook.utils.logging import get_logger

log = get_logger(__name__)

_COLUMNS = "id, meeting_id, name, number, visible, advertised_start_time"


def _apply_filter(filter: Optional[ListRacesFilter]) -> Tuple[str, List[Any]]:
    """Translate a filter into a WHERE clause and its positional arguments."""
    clauses: List[str] = []
    args: List[Any] = []

    if filter is None:
        return "", args

    if filter.meeting_ids:
        placeholders = ", ".join("?" for _ in filter.meeting_ids)
        clauses.append(f"meeting_id IN ({placeholders})")
        args.extend(filter.meeting_ids)

    if filter.visible_only is not None:
        clauses.append("visible = ?")
        args.append(1 if filter.visible_only else 0)

    if not clauses:
        return "", args
    return " WHERE " + " AND ".join(clauses), args


def _scan_race(row: sqlite3.Row) -> Race:
    return Race(
        id=row["id"],
        meeting_id=row["meeting_id"],
        name=row["name"] or "",
        number=row["number"],
        visible=bool(row["visible"]),
        advertised_start_time=from_db_timestamp(row["advertised_start_time"]),
    )


class SqliteRacesRepository(AbstractSqliteRepository):
    """Races stored in a single `races` table."""

    table = "races"

    def __init__(
        self,
        conn: sqlite3.Connection,
        seed_count: Optional[int] = None,
        meeting_count: Optional[int] = None,
        random_seed: Optional[int] = None,
    ) -> None:
        super().__init__(conn)
        settings = get_settings()
        self.seed_count = settings.seed_race_count if seed_count is None else seed_count
        self.meeting_count = meeting_count or settings.seed_meeting_count
        self.random_seed = settings.seed_random_seed if random_seed is None else random_seed

    def _create_schema(self) -> None:
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS races (
                id INTEGER PRIMARY KEY,
                meeting_id INTEGER,
                name TEXT,
                number INTEGER,
                visible INTEGER,
                advertised_start_time DATETIME
            )
            """
        )

    def _seed(self) -> None:
        races = generate_races(self.seed_count, self.meeting_count, self.random_seed)
        self._conn.executemany(
            f"INSERT OR IGNORE INTO races ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
            [
                (
                    race.id,
                    race.meeting_id,
                    race.name,
                    race.number,
                    1 if race.visible else 0,
                    to_db_timestamp(race.advertised_start_time),
                )
                for race in races
            ],
        )

    def list(self, filter: Optional[ListRacesFilter] = None) -> List[Race]:
        where, args = _apply_filter(filter)
        rows = self._query(f"SELECT {_COLUMNS} FROM races{where}", args)
        log.debug("Listed races", extra={"rows": len(rows), "where": where.strip()})
        return [_scan_race(row) for row in rows]

    def get_race(self, race_id: int) -> Race:
        rows = self._query(f"SELECT {_COLUMNS} FROM races WHERE id = ?", (race_id,))
        if not rows:
            raise NoRowsError(f"no race with id {race_id}")
        return _scan_race(rows[0])


__all__ = ["SqliteRacesRepository"]
