# streak & achievement engine: post-commit side effects of a saved entry
# streak counts consecutive calendar days, achievements are granted once per user

import logging
from datetime import date, timedelta

from reframe.lexicon import ACHIEVEMENTS, REWARD_POINTS
from reframe.models.streak import StreakState

logger = logging.getLogger(__name__)


def advance_streak(state: StreakState, today: date) -> StreakState:
    """pure streak step: same day no-op, yesterday +1, any other gap resets to 1"""
    last = state.last_active_date
    if last == today:
        return state

    if last is not None and last == today - timedelta(days=1):
        current = state.current_streak + 1
    else:
        current = 1

    return state.model_copy(update={
        "current_streak": current,
        "longest_streak": max(state.longest_streak, current),
        "last_active_date": today,
    })


def crossed_achievements(streak: int, entry_count: int) -> list[str]:
    """every achievement key whose threshold is met, in table order"""
    metrics = {"streak": streak, "entries": entry_count}
    return [key for key, metric, threshold in ACHIEVEMENTS if metrics[metric] >= threshold]


class StreakEngine:
    """streak, achievement and reward bookkeeping against the remote store"""

    def __init__(self, store):
        self.store = store

    async def record_activity(self, user_id: str, today: date) -> StreakState:
        state = await self.store.get_streak(user_id)
        updated = advance_streak(state, today)
        if updated is not state:
            await self.store.save_streak(updated)
            logger.info(f"Streak for user {user_id}: {updated.current_streak} day(s)")
        return updated

    async def evaluate_achievements(self, user_id: str) -> set[str]:
        """grant newly crossed achievements. each key is persisted before it is
        returned, and keys already on record are never returned again."""
        state = await self.store.get_streak(user_id)
        entry_count = await self.store.count_entries(user_id)
        already = set(state.achievements)

        granted = set()
        for key in crossed_achievements(state.current_streak, entry_count):
            if key in already:
                continue
            await self.store.add_achievement(user_id, key)
            granted.add(key)

        if granted:
            logger.info(f"Achievements granted to user {user_id}: {sorted(granted)}")
        return granted

    async def award_rewards(self, user_id: str, event: str) -> int:
        """add the points for a reward event; unknown events award nothing"""
        points = REWARD_POINTS.get(event, 0)
        if points <= 0:
            logger.warning(f"No reward points configured for event '{event}'")
            return 0
        await self.store.add_points(user_id, points)
        return points
