# streak models: usage streak, achievements and reward points per user

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field


class StreakState(BaseModel):
    user_id: str = Field(..., alias="userId")
    current_streak: int = Field(0, alias="currentStreak")
    longest_streak: int = Field(0, alias="longestStreak")
    last_active_date: Optional[date] = Field(None, alias="lastActiveDate")
    achievements: list[str] = Field(default_factory=list)
    points: int = 0

    model_config = {"populate_by_name": True}
