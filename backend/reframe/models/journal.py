# journal models: entry submission, stored entries and offline-queued entries
# an entry is enriched (mood, transformation, coaching) before it is ever persisted

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from reframe.config import settings
from reframe.models.content import CoachingResult, Transformation
from reframe.models.distress import DistressRecord, RecommendationEvent


class Mode(str, Enum):
    """transformation mode: picks the content table, not a subclass"""
    STANDARD = "standard"
    INNER_CHILD = "inner_child"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntryCreate(BaseModel):
    """payload for a journal submission from the host ui"""
    text: str = Field(..., min_length=settings.ENTRY_MIN_LENGTH, max_length=settings.ENTRY_MAX_LENGTH, description="free-form journal text")
    mood: Optional[str] = Field(None, description="mood chosen manually in the picker (authoritative)")
    tags: Optional[list[str]] = None
    chapter_id: Optional[str] = Field(None, alias="chapterId", description="life chapter reference")
    mode: Mode = Mode.STANDARD

    model_config = {"populate_by_name": True}

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must not be blank")
        return v

    @field_validator("mood")
    @classmethod
    def normalize_mood(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip().lower()
        return v or None


class Entry(BaseModel):
    """one enriched journal entry, as saved remotely or held in the queue"""
    id: str = ""
    user_id: str = Field(..., alias="userId")
    text: str
    mood: Optional[str] = None
    tags: Optional[list[str]] = None
    chapter_id: Optional[str] = Field(None, alias="chapterId")
    mode: Mode = Mode.STANDARD
    created_at: datetime = Field(default_factory=_utcnow, alias="createdAt")
    reframe: str = ""
    action_text: str = Field("", alias="actionText")
    action_completed: bool = Field(False, alias="actionCompleted")

    model_config = {"populate_by_name": True}

    @property
    def is_inner_child_mode(self) -> bool:
        return self.mode == Mode.INNER_CHILD

    def to_document(self) -> dict:
        """snake_case mongodb document (without the id, which the store assigns)"""
        doc = self.model_dump(exclude={"id"})
        doc["mode"] = self.mode.value
        doc["created_at"] = self.created_at.isoformat()
        doc["is_inner_child_mode"] = self.is_inner_child_mode
        return doc


class PendingEntry(Entry):
    """entry waiting in the local offline queue"""
    local_id: str = Field(..., alias="localId")


class SubmissionResult(BaseModel):
    """everything the ui renders after a submission"""
    entry: Entry
    mood_detected: bool = Field(False, alias="moodDetected")
    transformation: Transformation
    coaching: CoachingResult
    distress: Optional[DistressRecord] = None
    queued: bool = False
    pending_count: int = Field(0, alias="pendingCount")
    new_achievements: list[str] = Field(default_factory=list, alias="newAchievements")
    points_awarded: int = Field(0, alias="pointsAwarded")
    recommendation: Optional[RecommendationEvent] = None

    model_config = {"populate_by_name": True}


class ActionUpdate(BaseModel):
    """toggle for the step-3 action checkbox"""
    completed: bool


class SyncStatus(BaseModel):
    """offline indicator payload"""
    online: bool
    pending_count: int = Field(0, alias="pendingCount")
    flushed: int = 0

    model_config = {"populate_by_name": True}
