# recommendation policy: throttled therapist-support prompt
# pure decision function plus a stateful gate that records what it shows

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from reframe.config import settings
from reframe.models.distress import DistressLevel, DistressRecord, RecommendationEvent

logger = logging.getLogger(__name__)


def should_recommend(
    level: DistressLevel,
    recent_levels: Iterable,
    days_since_last: Optional[float],
    cooldown_days: Optional[int] = None,
    lookback: Optional[int] = None,
) -> bool:
    """decide whether to surface the therapist-support prompt.

    - never inside the cooldown window (days_since_last=None means never shown)
    - never for a low level
    - always for severe
    - otherwise only for a sustained pattern: a strict majority of the last
      `lookback` recorded levels are moderate or above
    """
    cooldown = settings.RECOMMENDATION_COOLDOWN_DAYS if cooldown_days is None else cooldown_days
    window = settings.RECOMMENDATION_LOOKBACK if lookback is None else lookback

    if days_since_last is not None and days_since_last < cooldown:
        return False

    level = DistressLevel(level)
    if level == DistressLevel.LOW:
        return False
    if level == DistressLevel.SEVERE:
        return True

    levels = [DistressLevel(lv) for lv in list(recent_levels)[:window]]
    if not levels:
        return False
    elevated = sum(1 for lv in levels if lv >= DistressLevel.MODERATE)
    return elevated * 2 > len(levels)


def days_between(earlier: Optional[datetime], now: datetime) -> Optional[int]:
    """whole days elapsed, None when there is no earlier event"""
    if earlier is None:
        return None
    if earlier.tzinfo is None:
        earlier = earlier.replace(tzinfo=timezone.utc)
    return (now - earlier).days


class RecommendationPolicy:
    """
    Stateful gate around should_recommend.

    A "show" decision is written to the store before it is returned, so
    evaluating again in the same session lands inside the cooldown.
    """

    def __init__(self, store):
        self.store = store

    async def evaluate(
        self,
        user_id: str,
        record: DistressRecord,
        category: Optional[str],
        now: Optional[datetime] = None,
    ) -> Optional[RecommendationEvent]:
        if not record.should_show_support or record.level == DistressLevel.LOW:
            return None

        now = now or datetime.now(timezone.utc)
        recent_levels = await self.store.recent_distress_levels(user_id, settings.RECOMMENDATION_LOOKBACK)
        last_shown = await self.store.last_recommendation_time(user_id)
        since = days_between(last_shown, now)

        if not should_recommend(record.level, recent_levels, since):
            logger.info(f"Recommendation withheld for user {user_id} (level={record.level.value}, days_since_last={since})")
            return None

        event = RecommendationEvent(
            user_id=user_id,
            category=category or "general",
            shown_at=now,
            level=record.level,
            message=record.recommendation,
        )
        await self.store.insert_recommendation(event)
        logger.info(f"Therapist recommendation shown to user {user_id} (level={record.level.value})")
        return event
