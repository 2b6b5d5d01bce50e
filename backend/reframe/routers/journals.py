# journals router: submit entries and follow up on saved ones
# submission never fails on a remote outage: the entry is queued and flagged

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from reframe.dependencies import get_current_user_id, get_pipeline
from reframe.models.analysis import RewardResult
from reframe.models.journal import ActionUpdate, EntryCreate, SubmissionResult, SyncStatus
from reframe.services.pipeline import JournalPipeline

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/journals", tags=["journals"])


@router.post("", response_model=SubmissionResult, status_code=status.HTTP_201_CREATED)
async def submit_journal(
    body: EntryCreate,
    user_id: str = Depends(get_current_user_id),
    pipeline: JournalPipeline = Depends(get_pipeline),
):
    """classify, transform, coach and save (or queue) a journal entry"""
    result = await pipeline.submit(user_id, body)
    if result.queued:
        logger.info(f"Entry {result.entry.id} queued for user {user_id} ({result.pending_count} pending)")
    return result


@router.get("/pending", response_model=SyncStatus)
async def pending_status(
    user_id: str = Depends(get_current_user_id),
    pipeline: JournalPipeline = Depends(get_pipeline),
):
    """offline indicator: online flag and how many entries wait for sync"""
    return SyncStatus(online=pipeline.connectivity.online, pending_count=len(pipeline.queue))


@router.patch("/{entry_id}/action", response_model=RewardResult)
async def update_action(
    entry_id: str,
    body: ActionUpdate,
    user_id: str = Depends(get_current_user_id),
    pipeline: JournalPipeline = Depends(get_pipeline),
):
    """mark the step-3 action as done (or undo it)"""
    points = await pipeline.set_action_completed(user_id, entry_id, body.completed)
    if points is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journal entry not found",
        )
    return RewardResult(entryId=entry_id, actionCompleted=body.completed, pointsAwarded=points)


@router.post("/{entry_id}/transformation-complete", response_model=RewardResult)
async def transformation_complete(
    entry_id: str,
    user_id: str = Depends(get_current_user_id),
    pipeline: JournalPipeline = Depends(get_pipeline),
):
    """user finished all four transformation steps"""
    points = await pipeline.complete_transformation(user_id, entry_id)
    if points is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journal entry not found",
        )
    return RewardResult(entryId=entry_id, pointsAwarded=points)
