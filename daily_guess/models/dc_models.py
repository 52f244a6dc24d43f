from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Any, List, Optional

from daily_guess.models.game_models import Employee


class SubmitScoreModel(BaseModel):
    # typed loosely so that submission_rules owns the validation messages
    name: Any = None
    score: Any = None


class LeaderboardRowModel(BaseModel):
    rank: int
    name: str
    score: int
    submitted_at: datetime = Field(serialization_alias="submittedAt")


class LeaderboardModel(BaseModel):
    date: date
    leaderboard: List[LeaderboardRowModel]


class SubmitResultModel(BaseModel):
    name: str
    score: int
    date: date
    submitted_at: datetime = Field(serialization_alias="submittedAt")


class SubmitScoreResponseModel(BaseModel):
    success: bool = True
    result: SubmitResultModel


class StorageHealthModel(BaseModel):
    status: str
    error: Optional[str] = None


class HealthModel(BaseModel):
    status: str
    storage: StorageHealthModel


class EmployeesModel(BaseModel):
    date: date
    employees: List[Employee]


class ErrorModel(BaseModel):
    error: str
