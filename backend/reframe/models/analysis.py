# analysis models: classification and no-save previews, follow-up action results

from typing import Optional
from pydantic import BaseModel, Field

from reframe.models.content import CoachingResult, Transformation
from reframe.models.distress import DistressRecord


class ClassifyRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=10000)


class ClassifyResponse(BaseModel):
    mood: Optional[str] = None


class PreviewResponse(BaseModel):
    """generated content for a draft, nothing persisted"""
    mood: Optional[str] = None
    mood_detected: bool = Field(False, alias="moodDetected")
    reframe: str
    transformation: Transformation
    coaching: CoachingResult
    distress: DistressRecord

    model_config = {"populate_by_name": True}


class InnerChildPrompt(BaseModel):
    intro: str
    question: str


class RewardResult(BaseModel):
    entry_id: str = Field(..., alias="entryId")
    action_completed: Optional[bool] = Field(None, alias="actionCompleted")
    points_awarded: int = Field(0, alias="pointsAwarded")

    model_config = {"populate_by_name": True}
