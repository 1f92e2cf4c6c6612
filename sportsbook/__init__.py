"""
Sportsbook - racing and sports listing services over SQLite.

Two parallel verticals share one pipeline:

- Repository: filtered SELECT against a single SQLite table
- Status deriver: OPEN / CLOSED / UNSPECIFIED from the advertised start time
- Sorter: start time (default), name, or a vertical-specific key

Racing additionally supports looking up a single race by ID.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from sportsbook.config import Settings, get_settings
from sportsbook.domain import (
    DomainError,
    ErrorCode,
    Event,
    ListEventsFilter,
    ListRacesFilter,
    Race,
    SortBy,
    SortOrder,
    Status,
)
from sportsbook.repositories import SqliteEventsRepository, SqliteRacesRepository
from sportsbook.services import RacingService, SportsService, sort_events, sort_races
from sportsbook.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "DomainError",
    "ErrorCode",
    "Event",
    "ListEventsFilter",
    "ListRacesFilter",
    "Race",
    "SortBy",
    "SortOrder",
    "Status",
    # Repositories
    "SqliteEventsRepository",
    "SqliteRacesRepository",
    # Services
    "RacingService",
    "SportsService",
    "sort_events",
    "sort_races",
    # Logging
    "configure_logging",
    "get_logger",
]
