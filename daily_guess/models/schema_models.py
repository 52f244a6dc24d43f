from pydantic import BaseModel
from uuid import UUID
from datetime import date, datetime


class LeaderboardEntrySchema(BaseModel):
    leaderboard_id: UUID
    player_name: str
    score: int
    date: date
    created_at: datetime

    class Config:
        from_attributes = True


class RankedLeaderboardEntrySchema(LeaderboardEntrySchema):
    rank: int
