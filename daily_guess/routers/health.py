from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from daily_guess.models.dc_models import HealthModel, StorageHealthModel
from daily_guess.routers.dependencies import get_leaderboard_store
from daily_guess.services.leaderboard_db import LeaderboardStore

health_router = APIRouter()


class HealthAPI:
    @staticmethod
    @health_router.get("/health", response_model=HealthModel)
    async def health(store: LeaderboardStore = Depends(get_leaderboard_store)):
        # the process answers even when storage is down; only the probe degrades
        if await store.ping():
            return HealthModel(status="ok", storage=StorageHealthModel(status="ok"))
        body = HealthModel(
            status="degraded",
            storage=StorageHealthModel(status="unavailable", error="Leaderboard storage is unreachable"),
        )
        return JSONResponse(status_code=503, content=body.model_dump(exclude_none=True))
