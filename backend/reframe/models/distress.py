# distress models: ordinal levels, per-entry records and recommendation events

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class DistressLevel(str, Enum):
    """ordinal distress level (low < moderate < high < severe)"""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    SEVERE = "severe"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __ge__(self, other):
        if isinstance(other, DistressLevel):
            return self.rank >= other.rank
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, DistressLevel):
            return self.rank > other.rank
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, DistressLevel):
            return self.rank <= other.rank
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, DistressLevel):
            return self.rank < other.rank
        return NotImplemented


_RANKS = {
    DistressLevel.LOW: 0,
    DistressLevel.MODERATE: 1,
    DistressLevel.HIGH: 2,
    DistressLevel.SEVERE: 3,
}


class DistressRecord(BaseModel):
    """distress assessment for one entry"""
    entry_id: Optional[str] = Field(None, alias="entryId")
    level: DistressLevel
    score: float = 0.0
    triggers: list[str] = Field(default_factory=list)
    should_show_support: bool = Field(False, alias="shouldShowSupport")
    recommendation: str = ""
    recommendation_shown: bool = Field(False, alias="recommendationShown")

    model_config = {"populate_by_name": True}


class RecommendationEvent(BaseModel):
    """a therapist-support prompt that was actually shown"""
    user_id: str = Field(..., alias="userId")
    category: str
    shown_at: datetime = Field(..., alias="shownAt")
    level: Optional[DistressLevel] = None
    message: str = ""

    model_config = {"populate_by_name": True}
