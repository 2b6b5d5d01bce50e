# fastapi dependency injection
# provides the current user id (from the host's identity provider) and the pipeline

import logging
from fastapi import Depends, Header, HTTPException, status

from reframe.config import settings
from reframe.services.connectivity import Connectivity
from reframe.services.db import Database, get_db
from reframe.services.offline_queue import OfflineQueue
from reframe.services.pipeline import JournalPipeline
from reframe.services.store import RemoteStore

logger = logging.getLogger(__name__)

# one queue and one connectivity flag per process (one device/session)
connectivity = Connectivity(online=True)
offline_queue = OfflineQueue(settings.OFFLINE_QUEUE_PATH)


async def get_current_user_id(x_user_id: str = Header(None, alias="X-User-Id")) -> str:
    """the host passes the signed-in user's id; no authentication happens here"""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing user id",
        )
    return x_user_id.strip()


async def get_pipeline(db: Database = Depends(get_db)) -> JournalPipeline:
    return JournalPipeline(RemoteStore(db), offline_queue, connectivity)
