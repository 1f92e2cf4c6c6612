"""Stub repositories and record factories shared by the test suite."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from sportsbook.domain.errors import NoRowsError
from sportsbook.domain.models import Event, ListEventsFilter, ListRacesFilter, Race

HOUR = timedelta(hours=1)
SEED_RACE_COUNT = 100


class StubRacesRepository:
    """In-memory races repository recording its calls."""

    def __init__(
        self,
        races: Optional[List[Race]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.races = races or []
        self.error = error
        self.list_calls: List[Optional[ListRacesFilter]] = []
        self.get_calls: List[int] = []

    def init(self) -> None:
        return None

    def list(self, filter: Optional[ListRacesFilter] = None) -> List[Race]:
        self.list_calls.append(filter)
        if self.error is not None:
            raise self.error
        return list(self.races)

    def get_race(self, race_id: int) -> Race:
        self.get_calls.append(race_id)
        if self.error is not None:
            raise self.error
        for race in self.races:
            if race.id == race_id:
                return race
        raise NoRowsError(f"no race with id {race_id}")


class StubEventsRepository:
    """In-memory events repository recording its calls."""

    def __init__(
        self,
        events: Optional[List[Event]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.events = events or []
        self.error = error
        self.list_calls: List[Optional[ListEventsFilter]] = []

    def init(self) -> None:
        return None

    def list(self, filter: Optional[ListEventsFilter] = None) -> List[Event]:
        self.list_calls.append(filter)
        if self.error is not None:
            raise self.error
        return list(self.events)


def make_race(
    race_id: int,
    start: Optional[datetime] = None,
    name: str = "",
    number: int = 1,
    meeting_id: int = 100,
    visible: bool = True,
) -> Race:
    return Race(
        id=race_id,
        meeting_id=meeting_id,
        name=name or f"Race {race_id}",
        number=number,
        visible=visible,
        advertised_start_time=start,
    )


def make_event(
    event_id: int,
    start: Optional[datetime] = None,
    name: str = "",
    venue: str = "Venue",
    visible: bool = True,
) -> Event:
    return Event(
        id=event_id,
        name=name or f"Event {event_id}",
        advertised_start_time=start,
        visible=visible,
        venue=venue,
        sport_type="Soccer",
        competitors=("Team A", "Team B"),
    )

