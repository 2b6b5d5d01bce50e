# generated content models: transformation steps and coaching replies

from typing import Optional
from pydantic import BaseModel, Field, model_validator


class TransformationStep(BaseModel):
    """one stage of the acknowledge -> reflect -> reframe -> act narrative"""
    index: int = Field(..., ge=0, le=3)
    title: str
    content: str
    action_prompt: Optional[str] = Field(None, alias="actionPrompt")
    # only step 3 carries the actionable description
    description: Optional[str] = None
    affirmations: Optional[list[str]] = None

    model_config = {"populate_by_name": True}


class Transformation(BaseModel):
    """exactly four ordered steps for a (mood, mode) pair"""
    mode: str
    mood: str
    steps: list[TransformationStep]

    @model_validator(mode="after")
    def check_steps(self):
        if [s.index for s in self.steps] != [0, 1, 2, 3]:
            raise ValueError("transformation must have steps indexed 0..3")
        if any(s.description for s in self.steps[:3]):
            raise ValueError("only the final step may carry an action description")
        return self

    @property
    def action_text(self) -> str:
        return self.steps[3].description or ""


class CopingTechnique(BaseModel):
    title: str
    description: str
    steps: list[str]


class CoachingResult(BaseModel):
    """short supportive reply with at most one coping technique"""
    message: str
    reflection_question: Optional[str] = Field(None, alias="reflectionQuestion")
    coping_technique: Optional[CopingTechnique] = Field(None, alias="copingTechnique")

    model_config = {"populate_by_name": True}
