"""Per-player, per-day game state machine.

    in_progress --(correct guess)--> won
    in_progress --(max_guesses reached)--> lost

won and lost are terminal. Rejected guesses leave the state untouched.
"""

from datetime import date
from typing import List

from daily_guess.domain.catalog import EmployeeCatalog
from daily_guess.domain.daily_selector import target_for
from daily_guess.domain.guess_evaluator import evaluate
from daily_guess.errors import DuplicateGuess, GameAlreadyOver, UnknownEntity
from daily_guess.models.game_models import Employee, GameState, GameStatus, Guess

MAX_GUESSES = 6


class GameSession:
    def __init__(
        self,
        catalog: EmployeeCatalog,
        day: date,
        max_guesses: int = MAX_GUESSES,
        state: GameState | None = None,
    ):
        self._catalog = catalog
        self._target = target_for(catalog, day)
        if state is None or state.day != day:
            state = GameState(day=day, max_guesses=max_guesses)
        self._state = state

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def day(self) -> date:
        return self._state.day

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def guesses(self) -> List[Guess]:
        return list(self._state.guesses)

    @property
    def is_over(self) -> bool:
        return self._state.status != GameStatus.in_progress

    @property
    def remaining_guesses(self) -> int:
        return self._state.max_guesses - len(self._state.guesses)

    @property
    def score(self) -> int | None:
        """Guesses taken to win; a lost or unfinished game has no score."""
        if self._state.status == GameStatus.won:
            return len(self._state.guesses)
        return None

    @property
    def revealed_target(self) -> Employee | None:
        if not self.is_over:
            return None
        return self._target

    def make_guess(self, employee_id: str) -> Guess:
        """Evaluate one guess and advance the state.

        Args:
            employee_id (str): id of the guessed employee; a display name is
                accepted as well

        Raises:
            GameAlreadyOver: the session is already won or lost
            UnknownEntity: no employee in the catalog matches
            DuplicateGuess: the employee was already guessed today

        Returns:
            Guess: the evaluated guess that was appended
        """
        if self.is_over:
            raise GameAlreadyOver(f"The game for {self.day.isoformat()} is already {self.status.value}")

        guessed = self._catalog.resolve(employee_id)
        if guessed is None:
            raise UnknownEntity(f"Unknown employee: {employee_id}")

        if any(previous.employee_id == guessed.id for previous in self._state.guesses):
            raise DuplicateGuess(f"{guessed.name} has already been guessed")

        guess = evaluate(self._target, guessed)
        guesses = self._state.guesses + [guess]

        if guess.is_correct:
            status = GameStatus.won
        elif len(guesses) >= self._state.max_guesses:
            status = GameStatus.lost
        else:
            status = GameStatus.in_progress

        self._state = self._state.model_copy(update={"guesses": guesses, "status": status})
        return guess
