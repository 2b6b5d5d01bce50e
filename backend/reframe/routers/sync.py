# sync router: connectivity notifications from the host
# the host calls /sync when the device comes back online

import logging

from fastapi import APIRouter, Depends

from reframe.dependencies import get_current_user_id, get_pipeline
from reframe.models.journal import SyncStatus
from reframe.services.pipeline import JournalPipeline

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/sync", tags=["sync"])


@router.post("", response_model=SyncStatus)
async def connectivity_restored(
    user_id: str = Depends(get_current_user_id),
    pipeline: JournalPipeline = Depends(get_pipeline),
):
    """device is online again: flush the offline queue"""
    flushed = await pipeline.on_connectivity_restored()
    return SyncStatus(online=True, pending_count=len(pipeline.queue), flushed=flushed)


@router.post("/offline", response_model=SyncStatus)
async def connectivity_lost(
    user_id: str = Depends(get_current_user_id),
    pipeline: JournalPipeline = Depends(get_pipeline),
):
    """device went offline: new submissions go to the queue"""
    pipeline.on_connectivity_lost()
    return SyncStatus(online=False, pending_count=len(pipeline.queue))
