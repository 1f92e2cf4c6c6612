"""
Repositories package for the sportsbook services.

Re-exports the repository protocols and the SQLite implementations so
downstream code can import from `sportsbook.repositories` directly.
"""

from sportsbook.repositories.abstract import (
    AbstractSqliteRepository,
    EventsRepository,
    RacesRepository,
)
from sportsbook.repositories.events import SqliteEventsRepository
from sportsbook.repositories.races import SqliteRacesRepository

__all__ = [
    # Interfaces
    "AbstractSqliteRepository",
    "EventsRepository",
    "RacesRepository",
    # SQLite implementations
    "SqliteEventsRepository",
    "SqliteRacesRepository",
]
