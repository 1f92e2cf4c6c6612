"""
Ordering of listed races and events.

Every sort returns a new list and leaves its input untouched. Without a filter,
or when the filter leaves a field unset, records are ordered by advertised
start time ascending. Records with no start time always come last, in both
ascending and descending order. A key that does not apply to the vertical
falls back to start time.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar, Union

from sportsbook.domain.models import Event, ListEventsFilter, ListRacesFilter, Race, SortBy, SortOrder

R = TypeVar("R", Race, Event)

KeyFunc = Callable[[Any], Any]


def _resolve(
    filter: Optional[Union[ListRacesFilter, ListEventsFilter]],
) -> Tuple[SortBy, SortOrder]:
    sort_by = SortBy.ADVERTISED_START_TIME
    sort_order = SortOrder.ASC
    if filter is None:
        return sort_by, sort_order
    if filter.sort_by is not None and filter.sort_by != SortBy.UNSPECIFIED:
        sort_by = filter.sort_by
    if filter.sort_order is not None and filter.sort_order != SortOrder.UNSPECIFIED:
        sort_order = filter.sort_order
    return sort_by, sort_order


def _start_key(record: Union[Race, Event]) -> datetime:
    start = record.advertised_start_time
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    return start


def sort_by_advertised_start_time(records: Sequence[R], order: SortOrder) -> List[R]:
    """
    Order by advertised start time; records without one go to the tail.
    """
    timed = [r for r in records if r.advertised_start_time is not None]
    untimed = [r for r in records if r.advertised_start_time is None]
    ordered = sorted(timed, key=_start_key, reverse=order == SortOrder.DESC)
    return ordered + untimed


def sort_by_field(records: Sequence[R], key: KeyFunc, order: SortOrder) -> List[R]:
    return sorted(records, key=key, reverse=order == SortOrder.DESC)


_RACE_KEYS: Dict[SortBy, KeyFunc] = {
    SortBy.NAME: lambda race: race.name,
    SortBy.NUMBER: lambda race: race.number,
}

_EVENT_KEYS: Dict[SortBy, KeyFunc] = {
    SortBy.NAME: lambda event: event.name,
    SortBy.VENUE: lambda event: event.venue,
}


def _sort(records: Sequence[R], keys: Dict[SortBy, KeyFunc], filter: Any) -> List[R]:
    sort_by, sort_order = _resolve(filter)
    key = keys.get(sort_by)
    if key is None:
        return sort_by_advertised_start_time(records, sort_order)
    return sort_by_field(records, key, sort_order)


def sort_races(races: Sequence[Race], filter: Optional[ListRacesFilter] = None) -> List[Race]:
    """Sort races by start time (default), name, or race number."""
    return _sort(races, _RACE_KEYS, filter)


def sort_events(events: Sequence[Event], filter: Optional[ListEventsFilter] = None) -> List[Event]:
    """Sort events by start time (default), name, or venue."""
    return _sort(events, _EVENT_KEYS, filter)


__all__ = [
    "sort_by_advertised_start_time",
    "sort_by_field",
    "sort_events",
    "sort_races",
]
