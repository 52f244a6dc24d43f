"""Terminal client for the daily game.

    python -m daily_guess.play guess "Ingrid Solberg"
    python -m daily_guess.play status
    python -m daily_guess.play submit --name Ingrid
"""

import argparse
import logging
import pathlib
import sys
from datetime import date
from typing import List

import requests

from daily_guess import load_secrets
from daily_guess.domain.catalog import EmployeeCatalog
from daily_guess.domain.game_session import GameSession
from daily_guess.errors import GuessGameError
from daily_guess.models.game_models import GameStatus, Guess, HintResult
from daily_guess.services.catalog_providers import (
    HumaCatalogProvider,
    MockCatalogProvider,
)
from daily_guess.services.session_storage import DEFAULT_STATE_PATH, JsonSessionStorage

RESULT_MARKS = {
    HintResult.correct: "✔",
    HintResult.incorrect: "✘",
    HintResult.partial: "~",
    HintResult.higher: "↑",  # the target is older
    HintResult.lower: "↓",
}


def format_guess(guess: Guess) -> str:
    cells = [f"{guess.employee_name}{' ✔' if guess.is_correct else ''}"]
    for hint in guess.hints:
        cells.append(f"{hint.type.value}: {hint.value} {RESULT_MARKS[hint.result]}")
    return " | ".join(cells)


def format_board(session: GameSession) -> List[str]:
    lines = [format_guess(guess) for guess in session.guesses]
    if session.status == GameStatus.won:
        lines.append(f"Congratulations! You found {session.revealed_target.name} in {session.score} guesses.")
    elif session.status == GameStatus.lost:
        lines.append(f"Game over. The employee of the day was {session.revealed_target.name}.")
    else:
        lines.append(f"Guesses: {len(session.guesses)} ({session.remaining_guesses} left)")
    return lines


def load_catalog(source: str, day: date) -> EmployeeCatalog:
    if source == "api":
        provider = HumaCatalogProvider(load_secrets.huma_api_url, load_secrets.huma_access_token)
    else:
        provider = MockCatalogProvider()
    return EmployeeCatalog(provider.list_entities(day))


def submit_score(url: str, name: str, score: int, token: str | None) -> dict:
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    response = requests.post(
        f"{url.rstrip('/')}/api/leaderboard",
        json={"name": name, "score": score},
        headers=headers,
        timeout=10,
    )
    body = response.json()
    if not response.ok:
        raise GuessGameError(body.get("error", f"Failed to submit score: {response.status_code}"))
    return body["result"]


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Guess the employee of the day")
    parser.add_argument("--date", type=date.fromisoformat, default=None, help="Game day (YYYY-MM-DD)")
    parser.add_argument("--source", choices=["mock", "api"], default=load_secrets.catalog_source)
    parser.add_argument("--state-file", type=pathlib.Path, default=DEFAULT_STATE_PATH)
    subparsers = parser.add_subparsers(dest="command", required=True)

    guess_parser = subparsers.add_parser("guess", help="Guess an employee by id or name")
    guess_parser.add_argument("employee", type=str)

    subparsers.add_parser("status", help="Show today's guesses")

    submit_parser = subparsers.add_parser("submit", help="Submit a won game to the leaderboard")
    submit_parser.add_argument("--name", type=str, required=True)
    submit_parser.add_argument("--url", type=str, default=f"http://localhost:{load_secrets.server_port}")
    submit_parser.add_argument("--token", type=str, default=None)
    return parser


def main(argv: List[str] | None = None) -> int:
    args = get_parser().parse_args(argv)
    day = args.date or date.today()
    storage = JsonSessionStorage(args.state_file)

    try:
        catalog = load_catalog(args.source, day)
        session = GameSession(
            catalog, day, max_guesses=load_secrets.max_guesses, state=storage.load(day)
        )

        if args.command == "guess":
            session.make_guess(args.employee)
            storage.save(session.state)
        elif args.command == "submit":
            if session.score is None:
                print("Only a won game can be submitted.", file=sys.stderr)
                return 1
            result = submit_score(args.url, args.name, session.score, args.token)
            print(f"Submitted: {result['name']} scored {result['score']} on {result['date']}")
            return 0
    except GuessGameError as e:
        print(str(e), file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"Could not reach the leaderboard: {e}", file=sys.stderr)
        return 1

    for line in format_board(session):
        print(line)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
