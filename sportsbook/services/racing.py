"""
Racing service.

Lists races (repository -> status -> sort) and looks up single races, mapping
repository failures onto domain errors the CLI can report.
"""

from __future__ import annotations

from typing import List, Optional

from sportsbook.domain.errors import InvalidRaceIdError, NoRowsError, RaceNotFoundError, ServiceError
from sportsbook.domain.models import ListRacesFilter, Race
from sportsbook.repositories.abstract import RacesRepository
from sportsbook.services.sorting import sort_races
from sportsbook.services.status import check_race_status, update_races_status
from sportsbook.utils.logging import get_logger

log = get_logger(__name__)


def validate_race_id(race_id: int) -> None:
    """Reject non-positive race IDs before any storage is touched."""
    if race_id <= 0:
        raise InvalidRaceIdError()


class RacingService:
    """Service for race listing and lookup."""

    def __init__(self, races_repo: RacesRepository) -> None:
        self._races_repo = races_repo

    def list_races(self, filter: Optional[ListRacesFilter] = None) -> List[Race]:
        """
        Return races matching the filter, with statuses, in the requested order.

        Storage errors propagate unchanged.
        """
        races = self._races_repo.list(filter)
        races = update_races_status(races)
        sorted_races = sort_races(races, filter)
        log.debug("Listed races", extra={"count": len(sorted_races)})
        return sorted_races

    def get_race(self, race_id: int) -> Race:
        """
        Return a single race by ID with its status.

        Raises:
            InvalidRaceIdError: If race_id is not positive. The repository is not queried.
            RaceNotFoundError: If no race has that ID.
            ServiceError: If the lookup fails for any other reason.
        """
        validate_race_id(race_id)

        try:
            race = self._races_repo.get_race(race_id)
        except NoRowsError as exc:
            raise RaceNotFoundError(race_id) from exc
        except Exception as exc:  # noqa: BLE001 - anything else is an internal failure
            log.exception("Failed to get race", extra={"race_id": race_id})
            raise ServiceError("failed to get race") from exc

        return race.model_copy(update={"status": check_race_status(race)})


__all__ = ["RacingService", "validate_race_id"]
