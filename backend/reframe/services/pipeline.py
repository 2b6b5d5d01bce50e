# journal pipeline: one submission end to end
# classify -> generate -> persist (or queue) -> post-commit side effects
#
# nothing in here is allowed to fail the user's submission: remote errors
# degrade to a queued write, side-effect errors are logged and skipped.

import logging
import random
from datetime import date, datetime, timezone
from typing import Optional

from reframe.config import settings
from reframe.lexicon import CHALLENGING_MOODS
from reframe.models.content import CoachingResult, Transformation
from reframe.models.distress import DistressRecord
from reframe.models.journal import Entry, EntryCreate, SubmissionResult
from reframe.services.classifier import resolve_mood
from reframe.services.coaching import generate_coaching
from reframe.services.connectivity import Connectivity
from reframe.services.distress import detect_distress
from reframe.services.offline_queue import OfflineQueue
from reframe.services.recommendation import RecommendationPolicy
from reframe.services.store import RemoteStore
from reframe.services.streaks import StreakEngine
from reframe.services.transformation import generate_transformation, headline_reframe

logger = logging.getLogger(__name__)


class JournalPipeline:
    """
    Orchestrates a journal submission and the offline queue.

    Every collaborator is passed in (store, queue, connectivity, rng) so the
    whole flow runs deterministically in tests.
    """

    def __init__(
        self,
        store: RemoteStore,
        queue: OfflineQueue,
        connectivity: Connectivity,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.queue = queue
        self.connectivity = connectivity
        self.rng = rng or random.Random()
        self.streaks = StreakEngine(store)
        self.policy = RecommendationPolicy(store)

    # enrichment (pure, local)

    def enrich(
        self,
        user_id: str,
        payload: EntryCreate,
        now: Optional[datetime] = None,
    ) -> tuple[Entry, bool, Transformation, CoachingResult]:
        """classify and generate content for a submission without persisting it"""
        mood, detected = resolve_mood(payload.text, payload.mood)
        transformation = generate_transformation(mood, payload.text, payload.mode, self.rng)
        reframe = headline_reframe(transformation, self.rng)
        coaching = generate_coaching(mood, payload.text, reframe, self.rng)

        entry = Entry(
            user_id=user_id,
            text=payload.text,
            mood=mood,
            tags=payload.tags or None,
            chapter_id=payload.chapter_id,
            mode=payload.mode,
            created_at=now or datetime.now(timezone.utc),
            reframe=reframe,
            action_text=transformation.action_text,
        )
        return entry, detected, transformation, coaching

    # submission

    async def submit(
        self,
        user_id: str,
        payload: EntryCreate,
        now: Optional[datetime] = None,
    ) -> SubmissionResult:
        entry, detected, transformation, coaching = self.enrich(user_id, payload, now)

        if not self.connectivity.online:
            return self._queue_entry(entry, detected, transformation, coaching)

        if len(self.queue) > 0:
            await self.flush_queue()

        negative_count = await self._recent_negative_count(user_id)
        distress = detect_distress(entry.text, entry.mood, negative_count)

        try:
            entry_id = await self.store.insert_entry(entry)
        except Exception as e:
            logger.warning(f"Remote write failed, queuing entry for user {user_id}: {e}")
            return self._queue_entry(entry, detected, transformation, coaching, distress)

        entry.id = entry_id
        distress.entry_id = entry_id

        result = SubmissionResult(
            entry=entry,
            mood_detected=detected,
            transformation=transformation,
            coaching=coaching,
            distress=distress,
            pending_count=len(self.queue),
        )
        await self._after_commit(entry, result, entry.created_at.date())
        return result

    def _queue_entry(
        self,
        entry: Entry,
        detected: bool,
        transformation: Transformation,
        coaching: CoachingResult,
        distress: Optional[DistressRecord] = None,
    ) -> SubmissionResult:
        entry.id = self.queue.enqueue(entry)
        if distress is None:
            # no history offline: text and mood still get scored
            distress = detect_distress(entry.text, entry.mood, 0, entry.id)
        else:
            distress.entry_id = entry.id
        return SubmissionResult(
            entry=entry,
            mood_detected=detected,
            transformation=transformation,
            coaching=coaching,
            distress=distress,
            queued=True,
            pending_count=len(self.queue),
        )

    async def _recent_negative_count(self, user_id: str) -> int:
        try:
            moods = await self.store.recent_moods(user_id, settings.DISTRESS_LOOKBACK)
        except Exception as e:
            logger.warning(f"Could not load recent entries for user {user_id}: {e}")
            return 0
        return sum(1 for m in moods if m in CHALLENGING_MOODS)

    async def _after_commit(self, entry: Entry, result: SubmissionResult, today: date):
        """streak, achievements, points, recommendation, distress tracking, in that order"""
        user_id = entry.user_id

        try:
            await self.streaks.record_activity(user_id, today)
            result.new_achievements = sorted(await self.streaks.evaluate_achievements(user_id))
        except Exception as e:
            logger.warning(f"Could not update streak for user {user_id}: {e}")

        try:
            result.points_awarded = await self.streaks.award_rewards(user_id, "journal_entry")
        except Exception as e:
            logger.warning(f"Could not award points for user {user_id}: {e}")

        # the policy reads prior history only, so this entry's row goes in afterwards
        distress = result.distress
        try:
            event = await self.policy.evaluate(user_id, distress, entry.mood, entry.created_at)
            if event is not None:
                distress.recommendation_shown = True
                result.recommendation = event
        except Exception as e:
            logger.warning(f"Could not evaluate recommendation for entry {entry.id}: {e}")

        try:
            await self.store.insert_distress(user_id, distress, entry.created_at)
        except Exception as e:
            logger.warning(f"Could not record distress for entry {entry.id}: {e}")

    # offline queue reconciliation

    async def flush_queue(self) -> int:
        """push queued entries in fifo order; returns how many the store accepted.
        each entry is tried on its own so one bad record can't block the rest."""
        pending = self.queue.list_pending()
        if not pending:
            return 0

        committed = 0
        for item in pending:
            if not self.connectivity.online:
                logger.info(f"Connectivity lost mid-flush, {len(pending) - committed} entries stay queued")
                break
            try:
                await self.store.insert_entry(item)
            except Exception as e:
                logger.warning(f"Could not sync queued entry {item.local_id}: {e}")
                continue
            self.queue.remove(item.local_id)
            committed += 1

        logger.info(f"Offline sync: {committed}/{len(pending)} entries committed")
        return committed

    async def on_connectivity_restored(self) -> int:
        """host hook for the offline -> online transition"""
        self.connectivity.set_online(True)
        return await self.flush_queue()

    def on_connectivity_lost(self):
        self.connectivity.set_online(False)

    # follow-up actions on a saved entry

    async def set_action_completed(self, user_id: str, entry_id: str, completed: bool) -> Optional[int]:
        """flip the step-3 checkbox. returns points awarded, or None when the entry is unknown."""
        if not await self.store.set_action_completed(user_id, entry_id, completed):
            return None
        if not completed:
            return 0
        try:
            return await self.streaks.award_rewards(user_id, "action_completed")
        except Exception as e:
            logger.warning(f"Could not award action points for user {user_id}: {e}")
            return 0

    async def complete_transformation(self, user_id: str, entry_id: str) -> Optional[int]:
        """user walked through all four steps"""
        if await self.store.get_entry(user_id, entry_id) is None:
            return None
        try:
            return await self.streaks.award_rewards(user_id, "transformation_complete")
        except Exception as e:
            logger.warning(f"Could not award transformation points for user {user_id}: {e}")
            return 0
