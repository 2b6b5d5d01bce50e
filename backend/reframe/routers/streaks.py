# streaks router: current streak, achievements and points for the signed-in user

from fastapi import APIRouter, Depends

from reframe.dependencies import get_current_user_id
from reframe.models.streak import StreakState
from reframe.services.db import Database, get_db
from reframe.services.store import RemoteStore

router = APIRouter(prefix="/streaks", tags=["streaks"])


@router.get("", response_model=StreakState)
async def get_streak(
    user_id: str = Depends(get_current_user_id),
    db: Database = Depends(get_db),
):
    return await RemoteStore(db).get_streak(user_id)
