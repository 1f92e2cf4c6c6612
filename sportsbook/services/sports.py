"""Sports service: lists events with statuses in the requested order."""

from __future__ import annotations

from typing import List, Optional

from sportsbook.domain.models import Event, ListEventsFilter
from sportsbook.repositories.abstract import EventsRepository
from sportsbook.services.sorting import sort_events
from sportsbook.services.status import update_events_status
from sportsbook.utils.logging import get_logger

log = get_logger(__name__)


class SportsService:
    def __init__(self, events_repo: EventsRepository) -> None:
        self._events_repo = events_repo

    def list_events(self, filter: Optional[ListEventsFilter] = None) -> List[Event]:
        events = self._events_repo.list(filter)
        events = update_events_status(events)
        sorted_events = sort_events(events, filter)
        log.debug("Listed events", extra={"count": len(sorted_events)})
        return sorted_events


__all__ = ["SportsService"]
