"""
Lifecycle status derivation for races and events.

A record with no advertised start time is UNSPECIFIED. Otherwise it is CLOSED
when the start time is strictly before now and OPEN from the start time on.
Status is computed fresh on every call and never stored.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Sequence, TypeVar

from sportsbook.domain.models import Event, Race, Status

R = TypeVar("R", Race, Event)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def derive_status(start: Optional[datetime], now: Optional[datetime] = None) -> Status:
    """Map an advertised start time to a lifecycle status."""
    if start is None:
        return Status.UNSPECIFIED
    if now is None:
        now = _now()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    if start < now:
        return Status.CLOSED
    return Status.OPEN


def check_race_status(race: Race, now: Optional[datetime] = None) -> Status:
    return derive_status(race.advertised_start_time, now)


def check_event_status(event: Event, now: Optional[datetime] = None) -> Status:
    return derive_status(event.advertised_start_time, now)


def _with_status(record: R, now: datetime) -> R:
    return record.model_copy(update={"status": derive_status(record.advertised_start_time, now)})


def update_races_status(races: Sequence[Race]) -> List[Race]:
    """
    Return new races carrying their derived status.

    The input is left untouched; only the `status` field differs.
    """
    now = _now()
    return [_with_status(race, now) for race in races]


def update_events_status(events: Sequence[Event]) -> List[Event]:
    """
    Return new events carrying their derived status.

    The input is left untouched; only the `status` field differs.
    """
    now = _now()
    return [_with_status(event, now) for event in events]


__all__ = [
    "check_event_status",
    "check_race_status",
    "derive_status",
    "update_events_status",
    "update_races_status",
]
