# remote store: the rows the core reads and writes, keyed by user id
# thin async repository over the motor collections in services/db.py
#
# entry writes are upserts keyed on a deterministic entry_id, so replaying a
# queued entry after an ambiguous failure never creates a second row.

import hashlib
import logging
from datetime import date, datetime
from typing import Optional

from reframe.models.distress import DistressLevel, DistressRecord, RecommendationEvent
from reframe.models.journal import Entry
from reframe.models.streak import StreakState

logger = logging.getLogger(__name__)


def make_entry_id(entry: Entry) -> str:
    """md5 of user + text + creation time, truncated so it is stable across retries"""
    raw = f"{entry.user_id}:{entry.text}:{entry.created_at.isoformat()}"
    return hashlib.md5(raw.encode()).hexdigest()[:12]


def _parse_datetime(value) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_date(value) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


class RemoteStore:
    """async access to journal, distress, recommendation and streak rows"""

    def __init__(self, db):
        self.db = db

    # journal entries

    async def insert_entry(self, entry: Entry) -> str:
        """persist an entry (idempotent) and return its server id"""
        entry_id = make_entry_id(entry)
        doc = entry.to_document()
        doc.pop("local_id", None)
        doc["entry_id"] = entry_id
        await self.db.journal_entries.update_one(
            {"entry_id": entry_id},
            {"$setOnInsert": doc},
            upsert=True,
        )
        logger.info(f"Journal entry saved: {entry_id} for user {entry.user_id}")
        return entry_id

    async def get_entry(self, user_id: str, entry_id: str) -> Optional[dict]:
        return await self.db.journal_entries.find_one({"entry_id": entry_id, "user_id": user_id})

    async def set_action_completed(self, user_id: str, entry_id: str, completed: bool) -> bool:
        result = await self.db.journal_entries.update_one(
            {"entry_id": entry_id, "user_id": user_id},
            {"$set": {"action_completed": completed}},
        )
        return result.matched_count > 0

    async def count_entries(self, user_id: str) -> int:
        return await self.db.journal_entries.count_documents({"user_id": user_id})

    async def recent_moods(self, user_id: str, limit: int) -> list[Optional[str]]:
        """moods of the user's latest entries, newest first"""
        cursor = self.db.journal_entries.find(
            {"user_id": user_id},
            {"mood": 1, "created_at": 1},
        ).sort("created_at", -1).limit(limit)
        return [doc.get("mood") async for doc in cursor]

    # distress tracking

    async def insert_distress(self, user_id: str, record: DistressRecord, created_at: datetime):
        await self.db.distress_tracking.insert_one({
            "user_id": user_id,
            "journal_entry_id": record.entry_id,
            "distress_level": record.level.value,
            "score": record.score,
            "triggers": record.triggers,
            "recommendation_shown": record.recommendation_shown,
            "created_at": created_at.isoformat(),
        })

    async def recent_distress_levels(self, user_id: str, limit: int) -> list[DistressLevel]:
        cursor = self.db.distress_tracking.find(
            {"user_id": user_id},
            {"distress_level": 1, "created_at": 1},
        ).sort("created_at", -1).limit(limit)
        levels = []
        async for doc in cursor:
            try:
                levels.append(DistressLevel(doc.get("distress_level")))
            except ValueError:
                logger.warning(f"Skipping unknown distress level {doc.get('distress_level')!r}")
        return levels

    # therapist recommendations

    async def last_recommendation_time(self, user_id: str) -> Optional[datetime]:
        cursor = self.db.therapist_recommendations.find(
            {"user_id": user_id},
            {"shown_at": 1},
        ).sort("shown_at", -1).limit(1)
        docs = await cursor.to_list(length=1)
        if not docs:
            return None
        return _parse_datetime(docs[0].get("shown_at"))

    async def insert_recommendation(self, event: RecommendationEvent):
        await self.db.therapist_recommendations.insert_one({
            "user_id": event.user_id,
            "category": event.category,
            "level": event.level.value if event.level else None,
            "shown_at": event.shown_at.isoformat(),
        })

    # streaks, achievements, points

    async def get_streak(self, user_id: str) -> StreakState:
        doc = await self.db.user_streaks.find_one({"user_id": user_id})
        if not doc:
            return StreakState(user_id=user_id)
        return StreakState(
            user_id=user_id,
            current_streak=doc.get("current_streak", 0),
            longest_streak=doc.get("longest_streak", 0),
            last_active_date=_parse_date(doc.get("last_active_date")),
            achievements=list(doc.get("achievements", [])),
            points=doc.get("points", 0),
        )

    async def save_streak(self, state: StreakState):
        await self.db.user_streaks.update_one(
            {"user_id": state.user_id},
            {"$set": {
                "current_streak": state.current_streak,
                "longest_streak": state.longest_streak,
                "last_active_date": state.last_active_date.isoformat() if state.last_active_date else None,
            }},
            upsert=True,
        )

    async def add_achievement(self, user_id: str, key: str):
        await self.db.user_streaks.update_one(
            {"user_id": user_id},
            {"$addToSet": {"achievements": key}},
            upsert=True,
        )

    async def add_points(self, user_id: str, points: int):
        await self.db.user_streaks.update_one(
            {"user_id": user_id},
            {"$inc": {"points": points}},
            upsert=True,
        )
