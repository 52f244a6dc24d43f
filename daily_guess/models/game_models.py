from datetime import date
from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

UNKNOWN = "-"


class HintType(str, Enum):
    department = "department"
    office = "office"
    teams = "teams"
    age = "age"
    supervisor = "supervisor"


class AttributeKind(str, Enum):
    categorical_single = "categorical_single"
    categorical_multi = "categorical_multi"
    numeric = "numeric"
    relational = "relational"


class HintResult(str, Enum):
    correct = "correct"
    incorrect = "incorrect"
    partial = "partial"
    higher = "higher"  # target is older than the guess
    lower = "lower"  # target is younger than the guess


class GameStatus(str, Enum):
    in_progress = "in_progress"
    won = "won"
    lost = "lost"


class Employee(BaseModel):
    id: str
    name: str
    first_name: str = ""
    surname: str = ""
    avatar_image_url: Optional[str] = None
    department: str = UNKNOWN
    office: str = UNKNOWN
    teams: List[str] = []
    age: Union[int, Literal["-"]] = UNKNOWN
    supervisor: str = UNKNOWN

    class Config:
        frozen = True


class Hint(BaseModel):
    type: HintType
    kind: AttributeKind
    value: str
    result: HintResult


class Guess(BaseModel):
    employee_id: str
    employee_name: str
    avatar_image_url: Optional[str] = None
    hints: List[Hint]
    is_correct: bool


class GameState(BaseModel):
    day: date
    status: GameStatus = GameStatus.in_progress
    guesses: List[Guess] = []
    max_guesses: int = Field(default=6, ge=1)
