"""
Services package for the sportsbook.

Services depend only on the repository protocols. They derive statuses,
apply ordering, and map lookup failures onto domain errors.
"""

from sportsbook.services.racing import RacingService, validate_race_id
from sportsbook.services.sorting import sort_events, sort_races
from sportsbook.services.sports import SportsService
from sportsbook.services.status import (
    check_event_status,
    check_race_status,
    update_events_status,
    update_races_status,
)

__all__ = [
    "RacingService",
    "SportsService",
    "check_event_status",
    "check_race_status",
    "sort_events",
    "sort_races",
    "update_events_status",
    "update_races_status",
    "validate_race_id",
]
