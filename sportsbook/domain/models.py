"""
Domain models for the racing and sports verticals.

Races and events are immutable once read from storage. The `status` field is
never persisted; it is derived from `advertised_start_time` on every read and
attached with `model_copy`, which leaves the original record untouched.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class Status(str, Enum):
    """Lifecycle status derived from the advertised start time."""

    UNSPECIFIED = "UNSPECIFIED"
    OPEN = "OPEN"
    CLOSED = "CLOSED"


RaceStatus = Status
EventStatus = Status


class SortBy(str, Enum):
    UNSPECIFIED = "UNSPECIFIED"
    ADVERTISED_START_TIME = "ADVERTISED_START_TIME"
    NAME = "NAME"
    NUMBER = "NUMBER"
    VENUE = "VENUE"


class SortOrder(str, Enum):
    UNSPECIFIED = "UNSPECIFIED"
    ASC = "ASC"
    DESC = "DESC"


_FROZEN = {
    "frozen": True,
    "populate_by_name": True,
    "arbitrary_types_allowed": False,
}


class Race(BaseModel):
    """
    Representation of a single row in the `races` table.
    """

    id: int = Field(..., description="Primary key.")
    meeting_id: int = Field(..., description="Meeting the race belongs to.")
    name: str = Field(..., description="Official name of the race.")
    number: int = Field(..., description="Race number within its meeting.")
    visible: bool = Field(False, description="Whether the race is visible.")
    advertised_start_time: Optional[datetime] = Field(
        None, description="Advertised start; absent is valid."
    )
    status: Status = Field(Status.UNSPECIFIED, description="Derived, never stored.")

    model_config = _FROZEN


class Event(BaseModel):
    """
    Representation of a single row in the `events` table.
    """

    id: int = Field(..., description="Primary key.")
    name: str = Field(..., description="Name of the sporting event.")
    advertised_start_time: Optional[datetime] = Field(
        None, description="Advertised start; absent is valid."
    )
    visible: bool = Field(False, description="Whether the event is visible.")
    venue: str = Field("", description="Where the event takes place.")
    sport_type: str = Field("", description="Sport, e.g. Soccer or Tennis.")
    competitors: Tuple[str, ...] = Field((), description="Participating teams or athletes.")
    status: Status = Field(Status.UNSPECIFIED, description="Derived, never stored.")

    model_config = _FROZEN


class ListRacesFilter(BaseModel):
    """
    Request-scoped constraints and ordering for listing races.

    `visible_only` restricts to visible (True) or hidden (False) races when set.
    An empty `meeting_ids` list applies no meeting constraint at all.
    """

    visible_only: Optional[bool] = None
    meeting_ids: List[int] = Field(default_factory=list)
    sort_by: Optional[SortBy] = None
    sort_order: Optional[SortOrder] = None


class ListEventsFilter(BaseModel):
    """
    Request-scoped constraints and ordering for listing events.

    `visible_only=True` restricts to visible events; False returns all events.
    """

    visible_only: bool = False
    sort_by: Optional[SortBy] = None
    sort_order: Optional[SortOrder] = None


__all__ = [
    "Event",
    "EventStatus",
    "ListEventsFilter",
    "ListRacesFilter",
    "Race",
    "RaceStatus",
    "SortBy",
    "SortOrder",
    "Status",
]
