from datetime import date, datetime
from typing import List

from sqlalchemy import case, func, select, text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from uuid6 import uuid7

from daily_guess.models.schema_models import (
    LeaderboardEntrySchema,
    RankedLeaderboardEntrySchema,
)
from daily_guess.models.schemas import Base, Leaderboard


class CreateData:
    @staticmethod
    async def create_table(session: AsyncSession) -> None:
        """Create the leaderboard table if it does not exist yet"""
        conn = await session.connection()
        await conn.run_sync(Base.metadata.create_all)


class UpsertData:
    @staticmethod
    async def upsert_best_score(
        player_name: str,
        score: int,
        day: date,
        submitted_at: datetime,
        session: AsyncSession,
    ) -> LeaderboardEntrySchema:
        """Insert the score or merge it into the existing (player_name, date) row.

        The merge keeps the lower score and the timestamp that belongs to it,
        in one INSERT ... ON CONFLICT statement. Do not commit inside this call;
        the caller owns the transaction.

        Args:
            player_name (str): trimmed player name
            score (int): guesses taken to win
            day (date): leaderboard day
            submitted_at (datetime): time of this submission
            session (AsyncSession): session with an open transaction

        Returns:
            LeaderboardEntrySchema: the row as stored after the merge
        """
        conn = await session.connection()
        if conn.dialect.name == "postgresql":
            insert, least = postgresql.insert, func.least
        else:
            # sqlite's two-argument min() is a scalar function
            insert, least = sqlite.insert, func.min

        stmt = insert(Leaderboard).values(
            leaderboard_id=uuid7(),
            player_name=player_name,
            score=score,
            date=day,
            created_at=submitted_at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[Leaderboard.player_name, Leaderboard.date],
            set_={
                "score": least(Leaderboard.score, stmt.excluded.score),
                "created_at": case(
                    (stmt.excluded.score < Leaderboard.score, stmt.excluded.created_at),
                    else_=Leaderboard.created_at,
                ),
            },
        ).returning(
            Leaderboard.leaderboard_id,
            Leaderboard.player_name,
            Leaderboard.score,
            Leaderboard.date,
            Leaderboard.created_at,
        )
        result = await session.execute(stmt)
        row = result.one()
        return LeaderboardEntrySchema.model_validate(row)


class ReadData:
    @staticmethod
    async def read_leaderboard(day: date, limit: int, session: AsyncSession) -> List[RankedLeaderboardEntrySchema]:
        """Read the ranked leaderboard for one day

        Args:
            day (date): leaderboard day
            limit (int): maximum number of rows

        Returns:
            List[RankedLeaderboardEntrySchema]: lowest score first, earlier
            achiever first on ties, ranks starting at 1
        """
        stmt = (
            select(Leaderboard)
            .where(Leaderboard.date == day)
            .order_by(
                Leaderboard.score.asc(),
                Leaderboard.created_at.asc(),
                Leaderboard.player_name.asc(),
            )
            .limit(limit)
        )
        result = await session.execute(stmt)
        rows = result.scalars().all()
        return [
            RankedLeaderboardEntrySchema(
                rank=index + 1,
                **LeaderboardEntrySchema.model_validate(row).model_dump(),
            )
            for index, row in enumerate(rows)
        ]

    @staticmethod
    async def ping(session: AsyncSession) -> None:
        await session.execute(text("SELECT 1"))
