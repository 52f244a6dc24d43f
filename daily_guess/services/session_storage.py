"""Client-local persistence of the game state, one file per player."""

import logging
import pathlib
from datetime import date

from pydantic import ValidationError as PydanticValidationError

from daily_guess.models.game_models import GameState

DEFAULT_STATE_PATH = pathlib.Path.home() / ".daily_guess" / "game_state.json"


class JsonSessionStorage:
    def __init__(self, path: pathlib.Path = DEFAULT_STATE_PATH):
        self.path = pathlib.Path(path)

    def load(self, day: date) -> GameState | None:
        """Return the stored state for ``day``, or None when there is nothing usable."""
        if not self.path.exists():
            return None
        try:
            state = GameState.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, PydanticValidationError) as e:
            logging.warning(f"Ignoring unreadable game state at {self.path}: {e}")
            return None
        if state.day != day:
            return None
        return state

    def save(self, state: GameState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
