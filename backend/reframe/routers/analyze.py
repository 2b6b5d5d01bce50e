# analyze router: live classification and draft previews
# nothing here touches the remote store, so it works offline too

from fastapi import APIRouter, Depends

from reframe.dependencies import get_current_user_id, get_pipeline
from reframe.models.analysis import ClassifyRequest, ClassifyResponse, InnerChildPrompt, PreviewResponse
from reframe.models.journal import EntryCreate
from reframe.services.classifier import classify
from reframe.services.distress import detect_distress
from reframe.services.pipeline import JournalPipeline
from reframe.services.transformation import random_inner_child_prompt

router = APIRouter(prefix="/analyze", tags=["analyze"])


@router.post("/classify", response_model=ClassifyResponse)
async def classify_text(body: ClassifyRequest):
    """suggest a mood while the user is typing"""
    return ClassifyResponse(mood=classify(body.text))


@router.post("/preview", response_model=PreviewResponse)
async def preview_entry(
    body: EntryCreate,
    user_id: str = Depends(get_current_user_id),
    pipeline: JournalPipeline = Depends(get_pipeline),
):
    """generate the transformation and coaching for a draft without saving it"""
    entry, detected, transformation, coaching = pipeline.enrich(user_id, body)
    return PreviewResponse(
        mood=entry.mood,
        mood_detected=detected,
        reframe=entry.reframe,
        transformation=transformation,
        coaching=coaching,
        distress=detect_distress(entry.text, entry.mood, 0),
    )


@router.get("/inner-child-prompt", response_model=InnerChildPrompt)
async def inner_child_prompt():
    return InnerChildPrompt(**random_inner_child_prompt())
