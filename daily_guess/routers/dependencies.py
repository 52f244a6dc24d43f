from datetime import date

from fastapi import Query, Request

from daily_guess.errors import ValidationError
from daily_guess.services.catalog_service import CatalogService
from daily_guess.services.leaderboard_db import LeaderboardStore


def get_leaderboard_store(request: Request) -> LeaderboardStore:
    return request.app.state.leaderboard_store


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def resolve_day(request: Request, day: str | None = Query(default=None, alias="date")) -> date:
    """The ``date`` query parameter (YYYY-MM-DD), defaulting to the server's today."""
    if day is None:
        return request.app.state.today()
    try:
        return date.fromisoformat(day)
    except ValueError:
        raise ValidationError(f"Invalid date '{day}', expected YYYY-MM-DD")
