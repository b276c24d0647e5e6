"""Pydantic schema for leaderboard rows."""

from pydantic import BaseModel


class LeaderboardEntry(BaseModel):
    user: str
    total_signals: int
    total_response_time: float
    fastest_response: float
    slowest_response: float
    average_response_time: float

    model_config = {"from_attributes": True}
