"""
Integration tests for the SQLite repositories.

These run against private in-memory databases seeded by `init()` and verify:
1. Schema creation and seeding are idempotent
2. Visibility and meeting filters, alone and combined
3. Single race lookup and the missing-row condition
4. Row decoding, including NULL start times and competitor lists
"""

from __future__ import annotations

import sqlite3
import threading
from datetime import datetime

import pytest

from sportsbook.domain.errors import NoRowsError, RaceNotFoundError
from sportsbook.domain.models import ListEventsFilter, ListRacesFilter, Status
from sportsbook.infrastructure.db_factory import MEMORY_PATH, get_connection, to_db_timestamp
from sportsbook.repositories.abstract import EventsRepository, RacesRepository
from sportsbook.repositories.events import SqliteEventsRepository
from sportsbook.repositories.races import SqliteRacesRepository
from sportsbook.services.racing import RacingService
from tests.helpers import SEED_RACE_COUNT

THREAD_COUNT = 8


def _count(conn: sqlite3.Connection, sql: str, *args) -> int:
    return conn.execute(sql, args).fetchone()[0]


def _first_meeting_id(conn: sqlite3.Connection) -> int:
    return conn.execute("SELECT meeting_id FROM races ORDER BY id LIMIT 1").fetchone()[0]


class TestRacesRepositoryInit:
    def test_satisfies_protocol(self, races_repo: SqliteRacesRepository):
        assert isinstance(races_repo, RacesRepository)

    def test_creates_and_seeds_table(self, db_connection, races_repo):
        assert _count(db_connection, "SELECT COUNT(*) FROM races") == SEED_RACE_COUNT

    def test_init_is_idempotent(self, db_connection, races_repo):
        races_repo.init()
        races_repo.init()
        assert _count(db_connection, "SELECT COUNT(*) FROM races") == SEED_RACE_COUNT

    def test_existing_rows_are_not_reseeded(self, db_connection, races_repo):
        second = SqliteRacesRepository(db_connection, seed_count=SEED_RACE_COUNT)
        second.init()
        assert _count(db_connection, "SELECT COUNT(*) FROM races") == SEED_RACE_COUNT

    def test_concurrent_init_seeds_once(self, db_connection):
        repo = SqliteRacesRepository(db_connection, seed_count=SEED_RACE_COUNT)
        barrier = threading.Barrier(THREAD_COUNT)
        errors = []

        def worker() -> None:
            barrier.wait()
            try:
                repo.init()
            except Exception as exc:  # noqa: BLE001 - collected for the assertion below
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(THREAD_COUNT)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert _count(db_connection, "SELECT COUNT(*) FROM races") == SEED_RACE_COUNT

    def test_failed_init_reports_same_error_every_time(self, db_connection):
        repo = SqliteRacesRepository(db_connection)
        db_connection.close()

        with pytest.raises(sqlite3.ProgrammingError) as first:
            repo.init()
        with pytest.raises(sqlite3.ProgrammingError) as second:
            repo.init()

        assert first.value is second.value

    def test_failed_seed_leaves_no_partial_rows(self, db_connection):
        class FailingSeedRepository(SqliteRacesRepository):
            def _seed(self) -> None:
                super()._seed()
                raise RuntimeError("seed interrupted")

        repo = FailingSeedRepository(db_connection, seed_count=SEED_RACE_COUNT)

        with pytest.raises(RuntimeError, match="seed interrupted"):
            repo.init()

        assert _count(db_connection, "SELECT COUNT(*) FROM races") == 0
        assert repo.list() == []


class TestRacesRepositoryList:
    def test_no_filter_returns_all(self, races_repo):
        assert len(races_repo.list(None)) == SEED_RACE_COUNT
        assert len(races_repo.list(ListRacesFilter())) == SEED_RACE_COUNT

    @pytest.mark.parametrize("visible", [True, False])
    def test_visibility_filter(self, db_connection, races_repo, visible: bool):
        expected = _count(db_connection, "SELECT COUNT(*) FROM races WHERE visible = ?", int(visible))

        got = races_repo.list(ListRacesFilter(visible_only=visible))

        assert len(got) == expected
        assert all(race.visible is visible for race in got)

    def test_meeting_filter(self, db_connection, races_repo):
        meeting_id = _first_meeting_id(db_connection)
        expected = _count(db_connection, "SELECT COUNT(*) FROM races WHERE meeting_id = ?", meeting_id)

        got = races_repo.list(ListRacesFilter(meeting_ids=[meeting_id]))

        assert len(got) == expected
        assert all(race.meeting_id == meeting_id for race in got)

    def test_multiple_meeting_ids(self, db_connection, races_repo):
        expected = _count(db_connection, "SELECT COUNT(*) FROM races WHERE meeting_id IN (1, 2)")

        got = races_repo.list(ListRacesFilter(meeting_ids=[1, 2]))

        assert len(got) == expected
        assert {race.meeting_id for race in got} <= {1, 2}

    def test_empty_meeting_ids_means_no_constraint(self, races_repo):
        assert len(races_repo.list(ListRacesFilter(meeting_ids=[]))) == SEED_RACE_COUNT

    def test_unknown_meeting_id_matches_nothing(self, races_repo):
        assert races_repo.list(ListRacesFilter(meeting_ids=[10_000])) == []

    def test_combined_filters_intersect(self, db_connection, races_repo):
        meeting_id = _first_meeting_id(db_connection)

        visible = {r.id for r in races_repo.list(ListRacesFilter(visible_only=True))}
        in_meeting = {r.id for r in races_repo.list(ListRacesFilter(meeting_ids=[meeting_id]))}
        combined = races_repo.list(ListRacesFilter(visible_only=True, meeting_ids=[meeting_id]))

        assert {r.id for r in combined} == visible & in_meeting
        assert all(r.visible and r.meeting_id == meeting_id for r in combined)

    def test_status_is_never_stored(self, races_repo):
        assert all(race.status == Status.UNSPECIFIED for race in races_repo.list())


class TestRacesRepositoryGet:
    def test_existing_race(self, races_repo):
        race = races_repo.get_race(1)
        assert race.id == 1
        assert race.advertised_start_time is not None

    def test_missing_race_raises_no_rows(self, races_repo):
        with pytest.raises(NoRowsError):
            races_repo.get_race(999)

    def test_null_start_time_is_read_as_none(self, db_connection, races_repo):
        db_connection.execute(
            "INSERT INTO races (id, meeting_id, name, number, visible, advertised_start_time) "
            "VALUES (?, ?, ?, ?, ?, NULL)",
            (500, 1, "Untimed", 3, 1),
        )

        race = races_repo.get_race(500)

        assert race.advertised_start_time is None
        assert race.name == "Untimed"

    def test_service_maps_missing_row_to_not_found(self, races_repo):
        with pytest.raises(RaceNotFoundError):
            RacingService(races_repo).get_race(999)


class TestEventsRepository:
    def test_satisfies_protocol(self, events_repo):
        assert isinstance(events_repo, EventsRepository)

    def test_init_is_idempotent(self, db_connection, events_repo):
        count = _count(db_connection, "SELECT COUNT(*) FROM events")
        assert count > 0

        events_repo.init()
        SqliteEventsRepository(db_connection).init()

        assert _count(db_connection, "SELECT COUNT(*) FROM events") == count

    def test_visible_only_returns_visible_events(self, db_connection, events_repo):
        expected = _count(db_connection, "SELECT COUNT(*) FROM events WHERE visible = 1")

        got = events_repo.list(ListEventsFilter(visible_only=True))

        assert len(got) == expected
        assert all(event.visible for event in got)

    @pytest.mark.parametrize("filter", [None, ListEventsFilter(visible_only=False)])
    def test_without_visibility_returns_all(self, db_connection, events_repo, filter):
        total = _count(db_connection, "SELECT COUNT(*) FROM events")
        assert len(events_repo.list(filter)) == total

    def test_decodes_all_fields(self, db_connection, events_repo, now: datetime):
        db_connection.execute(
            "INSERT INTO events (id, name, advertised_start, visible, venue, sport_type, competitors) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            (999, "Test Event", to_db_timestamp(now), 1, "Test Venue", "Test Sport",
             '["Competitor A", "Competitor B"]'),
        )

        event = next(e for e in events_repo.list() if e.id == 999)

        assert event.name == "Test Event"
        assert event.visible is True
        assert event.venue == "Test Venue"
        assert event.sport_type == "Test Sport"
        assert event.competitors == ("Competitor A", "Competitor B")
        assert event.advertised_start_time == now

    def test_competitors_with_commas(self, db_connection):
        repo = SqliteEventsRepository(db_connection)
        repo._create_schema()
        db_connection.execute(
            "INSERT INTO events (id, name, advertised_start, visible, venue, sport_type, competitors) "
            "VALUES (1, 'E', NULL, 1, 'V', 'S', ?)",
            ('["Team, Inc.", "Other, Ltd."]',),
        )

        (event,) = repo.list()

        assert event.competitors == ("Team, Inc.", "Other, Ltd.")
        assert event.advertised_start_time is None

    def test_storage_errors_propagate(self):
        conn = get_connection(MEMORY_PATH)
        repo = SqliteEventsRepository(conn)
        # schema never created
        with pytest.raises(sqlite3.OperationalError):
            repo.list()
        conn.close()
