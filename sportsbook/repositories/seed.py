"""
Seed data for the racing and sports databases.

Races are generated deterministically from a seeded `random.Random`, so the
same settings always produce the same rows (start times are relative to the
moment of seeding). Events are a small fixed set covering open, closed, and
hidden cases.
"""

from __future__ import annotations

import json
import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

_PLACES = [
    "Flemington", "Randwick", "Caulfield", "Eagle Farm", "Morphettville",
    "Ascot", "Moonee Valley", "Rosehill", "Doomben", "Sandown",
    "Ellerslie", "Riccarton", "Warrnambool", "Bendigo", "Kembla Grange",
]
_SUFFIXES = ["Stakes", "Cup", "Plate", "Handicap", "Classic", "Sprint", "Mile", "Quality"]


@dataclass(frozen=True)
class RaceSeed:
    id: int
    meeting_id: int
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime


@dataclass(frozen=True)
class EventSeed:
    id: int
    name: str
    advertised_start_time: datetime
    visible: bool
    venue: str
    sport_type: str
    competitors: Tuple[str, ...]

    @property
    def competitors_json(self) -> str:
        return json.dumps(list(self.competitors))


def generate_races(
    count: int,
    meeting_count: int,
    seed: int,
    now: Optional[datetime] = None,
) -> List[RaceSeed]:
    """
    Generate `count` races spread over `meeting_count` meetings.

    Start times fall within two days either side of `now`.
    """
    rng = random.Random(seed)
    now = now or datetime.now(timezone.utc)
    window_minutes = 2 * 24 * 60

    races: List[RaceSeed] = []
    for i in range(1, count + 1):
        offset = timedelta(minutes=rng.randint(-window_minutes, window_minutes))
        races.append(
            RaceSeed(
                id=i,
                meeting_id=rng.randint(1, meeting_count),
                name=f"{rng.choice(_PLACES)} {rng.choice(_SUFFIXES)}",
                number=rng.randint(1, 12),
                visible=rng.choice([True, False]),
                advertised_start_time=now + offset,
            )
        )
    return races


def fixed_events(now: Optional[datetime] = None) -> List[EventSeed]:
    now = now or datetime.now(timezone.utc)
    return [
        EventSeed(
            id=1,
            name="Premier League: Liverpool vs Manchester United",
            advertised_start_time=now + timedelta(hours=24),
            visible=True,
            venue="Anfield",
            sport_type="Soccer",
            competitors=("Liverpool FC", "Manchester United"),
        ),
        EventSeed(
            id=2,
            name="NBA: Lakers vs Celtics",
            advertised_start_time=now + timedelta(hours=48),
            visible=True,
            venue="Staples Center",
            sport_type="Basketball",
            competitors=("Los Angeles Lakers", "Boston Celtics"),
        ),
        EventSeed(
            id=3,
            name="Wimbledon: Final",
            advertised_start_time=now - timedelta(hours=2),
            visible=True,
            venue="All England Club",
            sport_type="Tennis",
            competitors=("Novak Djokovic", "Rafael Nadal"),
        ),
        EventSeed(
            id=4,
            name="F1: Monaco Grand Prix",
            advertised_start_time=now + timedelta(hours=72),
            visible=False,
            venue="Circuit de Monaco",
            sport_type="Formula 1",
            competitors=("Red Bull", "Ferrari", "Mercedes"),
        ),
        EventSeed(
            id=5,
            name="UFC 300",
            advertised_start_time=now + timedelta(hours=12),
            visible=True,
            venue="T-Mobile Arena",
            sport_type="MMA",
            competitors=("Jon Jones", "Ciryl Gane"),
        ),
    ]


__all__ = ["EventSeed", "RaceSeed", "fixed_events", "generate_races"]
