import logging

from fastapi import APIRouter, Depends, Request

from daily_guess.authentication.write_authorization import check_write_access
from daily_guess.converter import DataConverter
from daily_guess.errors import WriteNotAllowed
from daily_guess.models.dc_models import (
    LeaderboardModel,
    SubmitScoreModel,
    SubmitScoreResponseModel,
)
from daily_guess.routers.dependencies import get_leaderboard_store, resolve_day
from daily_guess.services.leaderboard_db import LeaderboardStore

leaderboard_router = APIRouter(prefix="/api")
data_converter = DataConverter()


class LeaderboardAPI:
    @staticmethod
    @leaderboard_router.get("/leaderboard", response_model=LeaderboardModel)
    async def get_leaderboard(
        day=Depends(resolve_day),
        store: LeaderboardStore = Depends(get_leaderboard_store),
    ):
        entries = await store.read(day)
        return data_converter.convert_entries_to_leaderboard(day, entries)

    @staticmethod
    @leaderboard_router.post("/leaderboard", response_model=SubmitScoreResponseModel)
    async def submit_score(
        request: Request,
        submission: SubmitScoreModel,
        may_write: bool = Depends(check_write_access),
        store: LeaderboardStore = Depends(get_leaderboard_store),
    ):
        if not may_write:
            raise WriteNotAllowed("Not allowed to submit scores. Please login again.")
        day = request.app.state.today()
        entry = await store.submit(day, submission.name, submission.score)
        logging.info(f"response: {entry}")
        return data_converter.convert_entry_to_submit_response(entry)
