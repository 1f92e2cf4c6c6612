"""
Domain package for the sportsbook services.

Exports the core records, filters, enums and errors used by the repositories,
services, and CLI. Keep this package focused on data definitions.
"""

from sportsbook.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidRaceIdError,
    NoRowsError,
    RaceNotFoundError,
    ServiceError,
)
from sportsbook.domain.models import (
    Event,
    EventStatus,
    ListEventsFilter,
    ListRacesFilter,
    Race,
    RaceStatus,
    SortBy,
    SortOrder,
    Status,
)

__all__ = [
    "DomainError",
    "ErrorCode",
    "Event",
    "EventStatus",
    "InvalidRaceIdError",
    "ListEventsFilter",
    "ListRacesFilter",
    "NoRowsError",
    "Race",
    "RaceNotFoundError",
    "RaceStatus",
    "ServiceError",
    "SortBy",
    "SortOrder",
    "Status",
]
