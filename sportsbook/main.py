from __future__ import annotations

import json
import sys
from typing import Any, List, NoReturn, Optional

import typer

from sportsbook.config import get_settings
from sportsbook.domain.errors import DomainError, ErrorCode
from sportsbook.domain.models import ListEventsFilter, ListRacesFilter, SortBy, SortOrder
from sportsbook.infrastructure.db_factory import ConnectionManager
from sportsbook.repositories.events import SqliteEventsRepository
from sportsbook.repositories.races import SqliteRacesRepository
from sportsbook.services.racing import RacingService, validate_race_id
from sportsbook.services.sports import SportsService
from sportsbook.utils.logging import configure_logging

app = typer.Typer(help="Sportsbook racing and sports listings CLI.")
races_app = typer.Typer(help="List and look up races.")
events_app = typer.Typer(help="List sporting events.")
app.add_typer(races_app, name="races")
app.add_typer(events_app, name="events")

_EXIT_CODES = {
    ErrorCode.NOT_FOUND: 1,
    ErrorCode.INVALID_ARGUMENT: 2,
    ErrorCode.INTERNAL: 1,
}


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


def _races_repo() -> SqliteRacesRepository:
    repo = SqliteRacesRepository(ConnectionManager().connection(get_settings().racing_db_path))
    repo.init()
    return repo


def _events_repo() -> SqliteEventsRepository:
    repo = SqliteEventsRepository(ConnectionManager().connection(get_settings().sports_db_path))
    repo.init()
    return repo


def _echo(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


def _fail(exc: DomainError) -> NoReturn:
    typer.echo(json.dumps({"code": exc.code.value, "message": exc.message}), err=True)
    raise typer.Exit(code=_EXIT_CODES.get(exc.code, 1))


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"racing={settings.racing_db_path} | sports={settings.sports_db_path} | "
        f"env={settings.app_env} log_level={settings.log_level} "
        f"seed_races={settings.seed_race_count} seed={settings.seed_random_seed}"
    )


@app.command()
def init() -> None:
    """
    Create and seed both databases if they are empty.
    """
    _races_repo()
    _events_repo()
    typer.echo("Databases ready.")


@races_app.command("list")
def list_races(
    visible_only: Optional[bool] = typer.Option(
        None,
        "--visible-only/--hidden-only",
        help="Only visible races, or only hidden ones. Omit for all races.",
    ),
    meeting_ids: Optional[List[int]] = typer.Option(
        None,
        "--meeting-id",
        "-m",
        help="Restrict to these meeting IDs (repeatable).",
    ),
    sort_by: Optional[SortBy] = typer.Option(None, "--sort-by", case_sensitive=False),
    sort_order: Optional[SortOrder] = typer.Option(None, "--sort-order", case_sensitive=False),
) -> None:
    """
    List races with their derived status.
    """
    filter = ListRacesFilter(
        visible_only=visible_only,
        meeting_ids=meeting_ids or [],
        sort_by=sort_by,
        sort_order=sort_order,
    )
    races = RacingService(_races_repo()).list_races(filter)
    _echo({"races": [race.model_dump(mode="json") for race in races]})


# ignore_unknown_options lets negative IDs such as -5 parse as the argument
@races_app.command("get", context_settings={"ignore_unknown_options": True})
def get_race(race_id: int = typer.Argument(..., help="Race ID.")) -> None:
    """
    Show a single race by ID.
    """
    try:
        validate_race_id(race_id)
        race = RacingService(_races_repo()).get_race(race_id)
    except DomainError as exc:
        _fail(exc)
    _echo(race.model_dump(mode="json"))


@events_app.command("list")
def list_events(
    visible_only: bool = typer.Option(False, "--visible-only", help="Only visible events."),
    sort_by: Optional[SortBy] = typer.Option(None, "--sort-by", case_sensitive=False),
    sort_order: Optional[SortOrder] = typer.Option(None, "--sort-order", case_sensitive=False),
) -> None:
    """
    List sporting events with their derived status.
    """
    filter = ListEventsFilter(visible_only=visible_only, sort_by=sort_by, sort_order=sort_order)
    events = SportsService(_events_repo()).list_events(filter)
    _echo({"events": [event.model_dump(mode="json") for event in events]})


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
