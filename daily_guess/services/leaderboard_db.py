"""DB service layer for the leaderboard.

- Routers should not touch DB sessions directly; they call this module.
- This layer owns session/transaction boundaries: one session per call,
  released on every exit path by ``async with``.
- Connectivity failures surface as StorageUnavailable; data errors propagate.
"""

import logging
from datetime import date, datetime
from typing import List

from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import async_sessionmaker

from daily_guess.crud import CreateData, ReadData, UpsertData
from daily_guess.domain.submission_rules import validate_submission
from daily_guess.errors import StorageUnavailable
from daily_guess.models.schema_models import (
    LeaderboardEntrySchema,
    RankedLeaderboardEntrySchema,
)

LEADERBOARD_PAGE_SIZE = 100

STORAGE_ERRORS = (DBAPIError, OSError)


def is_unreachable(error: Exception) -> bool:
    """True for connectivity failures; data and integrity errors are not storage outages."""
    if isinstance(error, (OSError, OperationalError, InterfaceError)):
        return True
    return isinstance(error, DBAPIError) and error.connection_invalidated


class LeaderboardStore:
    def __init__(self, Session: async_sessionmaker, page_size: int = LEADERBOARD_PAGE_SIZE):
        self.Session: async_sessionmaker = Session
        self.page_size: int = page_size
        self._table_ready: bool = False

    async def create_table(self) -> None:
        try:
            async with self.Session() as session:
                async with session.begin():
                    await CreateData.create_table(session)
        except STORAGE_ERRORS as e:
            if not is_unreachable(e):
                raise
            logging.error(f"Failed to create leaderboard table: {e}")
            raise StorageUnavailable("Leaderboard storage is unavailable") from e
        self._table_ready = True

    async def _ensure_table(self) -> None:
        # retried on every request until the store has been reached once
        if not self._table_ready:
            await self.create_table()

    async def submit(
        self,
        day: date,
        player_name: str,
        score: int,
        submitted_at: datetime | None = None,
    ) -> LeaderboardEntrySchema:
        """Record a score, keeping the best (lowest) one per player and day.

        Args:
            day (date): leaderboard day
            player_name (str): free text, trimmed before storage
            score (int): positive number of guesses
            submitted_at (datetime, optional): defaults to now

        Raises:
            InvalidSubmission: before any storage access
            StorageUnavailable: the database could not be reached

        Returns:
            LeaderboardEntrySchema: the stored row after reconciliation
        """
        player_name, score = validate_submission(player_name, score)
        submitted_at = submitted_at or datetime.now()

        await self._ensure_table()
        try:
            async with self.Session() as session:
                async with session.begin():
                    entry = await UpsertData.upsert_best_score(
                        player_name, score, day, submitted_at, session
                    )
        except STORAGE_ERRORS as e:
            if not is_unreachable(e):
                raise
            logging.error(f"Failed to submit score for {player_name}: {e}")
            raise StorageUnavailable("Leaderboard storage is unavailable") from e

        logging.info(f"Stored score {entry.score} for {entry.player_name} on {entry.date}")
        return entry

    async def read(self, day: date, limit: int | None = None) -> List[RankedLeaderboardEntrySchema]:
        limit = self.page_size if limit is None else max(0, min(limit, self.page_size))

        await self._ensure_table()
        try:
            async with self.Session() as session:
                return await ReadData.read_leaderboard(day, limit, session)
        except STORAGE_ERRORS as e:
            if not is_unreachable(e):
                raise
            logging.error(f"Failed to read leaderboard for {day}: {e}")
            raise StorageUnavailable("Leaderboard storage is unavailable") from e

    async def ping(self) -> bool:
        try:
            async with self.Session() as session:
                await ReadData.ping(session)
        except STORAGE_ERRORS as e:
            logging.warning(f"Leaderboard storage ping failed: {e}")
            return False
        return True
