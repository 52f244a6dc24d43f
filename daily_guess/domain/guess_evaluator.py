"""Attribute-by-attribute comparison of a guess against the target.

This is the only place hint results are computed; renderers read
``Hint.result`` and never compare values themselves.
"""

from typing import Sequence

from daily_guess.models.game_models import (
    UNKNOWN,
    AttributeKind,
    Employee,
    Guess,
    Hint,
    HintResult,
    HintType,
)


def compare_single(target_value: str, guess_value: str) -> HintResult:
    if guess_value == target_value:
        return HintResult.correct
    return HintResult.incorrect


def compare_multi(target_values: Sequence[str], guess_values: Sequence[str]) -> HintResult:
    target_set, guess_set = set(target_values), set(guess_values)
    if target_set == guess_set:
        return HintResult.correct
    if target_set & guess_set:
        return HintResult.partial
    return HintResult.incorrect


def compare_numeric(target_value, guess_value) -> HintResult:
    if target_value == guess_value:
        return HintResult.correct
    # direction is undefined when either side is unknown
    if target_value == UNKNOWN or guess_value == UNKNOWN:
        return HintResult.incorrect
    if target_value > guess_value:
        return HintResult.higher
    return HintResult.lower


def render_teams(teams: Sequence[str]) -> str:
    return ", ".join(teams) if teams else UNKNOWN


def evaluate(target: Employee, guess: Employee) -> Guess:
    """Compare ``guess`` to ``target`` and return the guess with its hints.

    Args:
        target (Employee): employee of the day
        guess (Employee): employee submitted by the player

    Returns:
        Guess: one hint per attribute, in display order, carrying the guessed
        employee's values
    """
    hints = [
        Hint(
            type=HintType.department,
            kind=AttributeKind.categorical_single,
            value=guess.department,
            result=compare_single(target.department, guess.department),
        ),
        Hint(
            type=HintType.office,
            kind=AttributeKind.categorical_single,
            value=guess.office,
            result=compare_single(target.office, guess.office),
        ),
        Hint(
            type=HintType.teams,
            kind=AttributeKind.categorical_multi,
            value=render_teams(guess.teams),
            result=compare_multi(target.teams, guess.teams),
        ),
        Hint(
            type=HintType.age,
            kind=AttributeKind.numeric,
            value=str(guess.age),
            result=compare_numeric(target.age, guess.age),
        ),
        Hint(
            type=HintType.supervisor,
            kind=AttributeKind.relational,
            value=guess.supervisor,
            result=compare_single(target.supervisor, guess.supervisor),
        ),
    ]
    return Guess(
        employee_id=guess.id,
        employee_name=guess.name,
        avatar_image_url=guess.avatar_image_url,
        hints=hints,
        is_correct=guess.id == target.id,
    )
