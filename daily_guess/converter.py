from datetime import date
from typing import List

from daily_guess.models.dc_models import (
    LeaderboardModel,
    LeaderboardRowModel,
    SubmitResultModel,
    SubmitScoreResponseModel,
)
from daily_guess.models.schema_models import (
    LeaderboardEntrySchema,
    RankedLeaderboardEntrySchema,
)


class DataConverter:
    """This class is used to convert stored leaderboard rows to response bodies."""

    def convert_entries_to_leaderboard(
        self, day: date, entries: List[RankedLeaderboardEntrySchema]
    ) -> LeaderboardModel:
        """Convert ranked rows to the leaderboard response
        Args:
            day (date): The requested leaderboard day
            entries (List[RankedLeaderboardEntrySchema]): Rows in rank order
        Returns:
            LeaderboardModel: The leaderboard for the day as sent to the client
        """
        return LeaderboardModel(
            date=day,
            leaderboard=[
                LeaderboardRowModel(
                    rank=entry.rank,
                    name=entry.player_name,
                    score=entry.score,
                    submitted_at=entry.created_at,
                )
                for entry in entries
            ],
        )

    def convert_entry_to_submit_response(self, entry: LeaderboardEntrySchema) -> SubmitScoreResponseModel:
        """Convert the reconciled row to the submission response

        Args:
            entry (LeaderboardEntrySchema): The row as stored after the upsert

        Returns:
            SubmitScoreResponseModel: success flag and the stored best score
        """
        return SubmitScoreResponseModel(
            success=True,
            result=SubmitResultModel(
                name=entry.player_name,
                score=entry.score,
                date=entry.date,
                submitted_at=entry.created_at,
            ),
        )
