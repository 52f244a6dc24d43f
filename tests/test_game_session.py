"""Tests for the game state machine."""

from datetime import timedelta

import pytest

from daily_guess.domain.daily_selector import select_target
from daily_guess.domain.game_session import MAX_GUESSES, GameSession
from daily_guess.errors import DuplicateGuess, GameAlreadyOver, UnknownEntity
from daily_guess.models.game_models import GameStatus

from conftest import DAY


def _wrong_ids(catalog, day=DAY):
    target_id = select_target(catalog, day)
    return [employee_id for employee_id in catalog.ids if employee_id != target_id]


class TestWinning:
    def test_correct_first_guess_wins(self, catalog):
        session = GameSession(catalog, DAY)
        guess = session.make_guess(select_target(catalog, DAY))
        assert guess.is_correct
        assert session.status == GameStatus.won
        assert session.score == 1

    def test_score_counts_guesses(self, catalog):
        session = GameSession(catalog, DAY)
        for employee_id in _wrong_ids(catalog)[:3]:
            session.make_guess(employee_id)
        session.make_guess(select_target(catalog, DAY))
        assert session.status == GameStatus.won
        assert session.score == 4

    def test_guess_by_name(self, catalog):
        target = catalog.get(select_target(catalog, DAY))
        session = GameSession(catalog, DAY)
        session.make_guess(target.name.upper())
        assert session.status == GameStatus.won


class TestLosing:
    def test_max_wrong_guesses_lose(self, catalog):
        session = GameSession(catalog, DAY)
        for employee_id in _wrong_ids(catalog)[:MAX_GUESSES]:
            session.make_guess(employee_id)
        assert session.status == GameStatus.lost
        assert session.score is None

    def test_guess_after_loss_is_rejected(self, catalog):
        session = GameSession(catalog, DAY)
        for employee_id in _wrong_ids(catalog)[:MAX_GUESSES]:
            session.make_guess(employee_id)
        with pytest.raises(GameAlreadyOver):
            session.make_guess(select_target(catalog, DAY))
        assert len(session.guesses) == MAX_GUESSES
        assert session.status == GameStatus.lost

    def test_guess_after_win_is_rejected(self, catalog):
        session = GameSession(catalog, DAY)
        session.make_guess(select_target(catalog, DAY))
        with pytest.raises(GameAlreadyOver):
            session.make_guess(_wrong_ids(catalog)[0])
        assert len(session.guesses) == 1

    def test_custom_max_guesses(self, catalog):
        session = GameSession(catalog, DAY, max_guesses=2)
        for employee_id in _wrong_ids(catalog)[:2]:
            session.make_guess(employee_id)
        assert session.status == GameStatus.lost


class TestRejections:
    def test_duplicate_guess(self, catalog):
        session = GameSession(catalog, DAY)
        wrong = _wrong_ids(catalog)[0]
        session.make_guess(wrong)
        with pytest.raises(DuplicateGuess):
            session.make_guess(wrong)
        assert len(session.guesses) == 1
        assert session.status == GameStatus.in_progress

    def test_unknown_employee(self, catalog):
        session = GameSession(catalog, DAY)
        with pytest.raises(UnknownEntity):
            session.make_guess("nobody")
        assert session.guesses == []


class TestTargetVisibility:
    def test_hidden_while_in_progress(self, catalog):
        session = GameSession(catalog, DAY)
        session.make_guess(_wrong_ids(catalog)[0])
        assert session.revealed_target is None
        assert "target" not in session.state.model_dump()

    def test_revealed_when_over(self, catalog):
        session = GameSession(catalog, DAY)
        for employee_id in _wrong_ids(catalog)[:MAX_GUESSES]:
            session.make_guess(employee_id)
        assert session.revealed_target.id == select_target(catalog, DAY)


class TestRestore:
    def test_resume_same_day(self, catalog):
        first = GameSession(catalog, DAY)
        first.make_guess(_wrong_ids(catalog)[0])
        resumed = GameSession(catalog, DAY, state=first.state)
        assert len(resumed.guesses) == 1
        assert resumed.remaining_guesses == MAX_GUESSES - 1

    def test_new_day_starts_fresh(self, catalog):
        first = GameSession(catalog, DAY)
        first.make_guess(_wrong_ids(catalog)[0])
        next_day = DAY + timedelta(days=1)
        resumed = GameSession(catalog, next_day, state=first.state)
        assert resumed.guesses == []
        assert resumed.day == next_day
