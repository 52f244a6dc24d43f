"""Leaderboard submission validation, applied before any storage access."""

from daily_guess.errors import InvalidSubmission

# largest value a 32-bit INTEGER column holds
MAX_SCORE = 2**31 - 1


def validate_player_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidSubmission("Name is required and must be a non-empty string")
    return name.strip()


def validate_score(score) -> int:
    # bool is an int subclass; 3.0 from a JSON body is accepted as 3
    if isinstance(score, bool):
        raise InvalidSubmission("Score must be a positive integer")
    if isinstance(score, float) and score.is_integer():
        score = int(score)
    if not isinstance(score, int) or score < 1:
        raise InvalidSubmission("Score must be a positive integer")
    if score > MAX_SCORE:
        raise InvalidSubmission(f"Score must not exceed {MAX_SCORE}")
    return score


def validate_submission(name, score) -> tuple[str, int]:
    """Return the trimmed name and the integer score.

    Raises:
        InvalidSubmission: empty name, or a score that is not an integer in 1..MAX_SCORE
    """
    return validate_player_name(name), validate_score(score)
