from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.schema import Column, Index, UniqueConstraint
from sqlalchemy.types import Date, DateTime, Integer, String, Uuid
from uuid6 import uuid7
from datetime import datetime


class Base(DeclarativeBase):
    pass


class Leaderboard(Base):
    __tablename__ = "leaderboard"
    leaderboard_id = Column(Uuid, primary_key=True, default=uuid7)
    player_name = Column(String, nullable=False)
    score = Column(Integer, nullable=False)
    date = Column(Date, nullable=False)
    # timestamp of the submission that achieved the stored score
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    __table_args__ = (
        # conflict target of the best-score upsert
        UniqueConstraint("player_name", "date", name="uq_leaderboard_player_date"),
        Index("ix_leaderboard_date_rank", "date", "score", "created_at"),
    )
