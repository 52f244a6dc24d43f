from apscheduler.schedulers.asyncio import AsyncIOScheduler
import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import async_sessionmaker
from starlette.middleware.cors import CORSMiddleware

from daily_guess.authentication.write_authorization import WriteAuthorization
from daily_guess.errors import CatalogUnavailable, GuessGameError, StorageUnavailable
from daily_guess.routers.employees import employees_router
from daily_guess.routers.health import health_router
from daily_guess.routers.leaderboard import leaderboard_router
from daily_guess.services.catalog_providers import (
    CatalogProvider,
    HumaCatalogProvider,
    MockCatalogProvider,
)
from daily_guess.services.catalog_service import CatalogService
from daily_guess.services.leaderboard_db import LeaderboardStore
from daily_guess import load_secrets

logging.basicConfig(level=logging.INFO)
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def build_catalog_provider() -> CatalogProvider:
    if load_secrets.catalog_source == "api":
        return HumaCatalogProvider(load_secrets.huma_api_url, load_secrets.huma_access_token)
    return MockCatalogProvider()


def create_app(
    Session: async_sessionmaker | None = None,
    catalog_service: CatalogService | None = None,
    write_authorization: WriteAuthorization | None = None,
    today: Callable[[], date] = date.today,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    if Session is None:
        from daily_guess.db import Session

    leaderboard_store = LeaderboardStore(Session, page_size=load_secrets.leaderboard_page_size)
    catalog_service = catalog_service or CatalogService(build_catalog_provider())
    write_authorization = write_authorization or WriteAuthorization(load_secrets.leaderboard_write_token)

    async def refresh_catalog() -> None:
        try:
            await catalog_service.refresh(today())
        except CatalogUnavailable as e:
            logging.error(f"Scheduled catalog refresh failed: {e}")

    @asynccontextmanager
    async def lifespan(app):
        """Create the leaderboard table and schedule the daily catalog refresh.
        This function is called to start the server.
        """
        try:
            await leaderboard_store.create_table()
        except StorageUnavailable:
            # keep serving; the store retries on the next request
            logging.warning("Leaderboard storage unavailable at startup")

        scheduler = AsyncIOScheduler()
        scheduler.add_job(refresh_catalog, "cron", hour=0, minute=1)
        scheduler.start()
        try:
            yield
        finally:
            scheduler.shutdown()
            logging.info("Stop Server")

    app = FastAPI(title="Daily Guess API", lifespan=lifespan)
    app.state.leaderboard_store = leaderboard_store
    app.state.catalog_service = catalog_service
    app.state.write_authorization = write_authorization
    app.state.today = today

    app.add_middleware(
        CORSMiddleware,
        allow_origins=load_secrets.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(GuessGameError)
    async def handle_game_error(request: Request, exc: GuessGameError):
        if exc.status_code >= 500:
            logging.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Malformed request body"})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logging.exception(f"Unexpected error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": str(exc) or "Internal server error"})

    app.include_router(leaderboard_router)
    app.include_router(employees_router)
    app.include_router(health_router)
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=load_secrets.server_port)
