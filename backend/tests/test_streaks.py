# tests for the streak & achievement engine
# daily streak rules, one-time achievement grants, reward points

from datetime import date, timedelta

import pytest

from reframe.models.streak import StreakState
from reframe.services.streaks import StreakEngine, advance_streak, crossed_achievements

TODAY = date(2025, 6, 10)


class TestAdvanceStreak:

    def test_first_activity_starts_at_one(self):
        state = advance_streak(StreakState(user_id="u1"), TODAY)
        assert state.current_streak == 1
        assert state.last_active_date == TODAY

    def test_yesterday_increments(self):
        state = StreakState(user_id="u1", current_streak=4, longest_streak=4, last_active_date=TODAY - timedelta(days=1))
        assert advance_streak(state, TODAY).current_streak == 5

    def test_gap_resets_to_one(self):
        state = StreakState(user_id="u1", current_streak=9, longest_streak=9, last_active_date=TODAY - timedelta(days=3))
        updated = advance_streak(state, TODAY)
        assert updated.current_streak == 1
        assert updated.longest_streak == 9

    def test_same_day_is_noop(self):
        state = StreakState(user_id="u1", current_streak=2, last_active_date=TODAY)
        assert advance_streak(state, TODAY) is state

    def test_longest_tracks_max(self):
        state = StreakState(user_id="u1", current_streak=3, longest_streak=3, last_active_date=TODAY - timedelta(days=1))
        assert advance_streak(state, TODAY).longest_streak == 4


class TestCrossedAchievements:

    def test_first_entry(self):
        assert crossed_achievements(1, 1) == ["first_entry"]

    def test_table_order(self):
        assert crossed_achievements(7, 10) == ["first_entry", "entries_10", "streak_3", "streak_7"]

    def test_nothing_yet(self):
        assert crossed_achievements(0, 0) == []


class TestStreakEngine:

    async def test_record_activity_persists(self, store, mock_db):
        engine = StreakEngine(store)
        state = await engine.record_activity("u1", TODAY)
        assert state.current_streak == 1
        doc = await mock_db.user_streaks.find_one({"user_id": "u1"})
        assert doc["current_streak"] == 1
        assert doc["last_active_date"] == "2025-06-10"

    async def test_consecutive_days(self, store):
        engine = StreakEngine(store)
        await engine.record_activity("u1", TODAY - timedelta(days=1))
        state = await engine.record_activity("u1", TODAY)
        assert state.current_streak == 2

    async def test_three_day_gap_resets(self, store):
        engine = StreakEngine(store)
        await engine.record_activity("u1", TODAY - timedelta(days=4))
        await engine.record_activity("u1", TODAY - timedelta(days=3))
        state = await engine.record_activity("u1", TODAY)
        assert state.current_streak == 1

    async def test_same_day_twice_does_not_write(self, store, mock_db):
        engine = StreakEngine(store)
        await engine.record_activity("u1", TODAY)
        writes = mock_db.user_streaks.write_count
        state = await engine.record_activity("u1", TODAY)
        assert state.current_streak == 1
        assert mock_db.user_streaks.write_count == writes

    async def test_achievements_granted_once(self, store, mock_db):
        await mock_db.journal_entries.insert_one({"user_id": "u1", "entry_id": "e1"})
        engine = StreakEngine(store)
        await engine.record_activity("u1", TODAY)

        first = await engine.evaluate_achievements("u1")
        second = await engine.evaluate_achievements("u1")
        assert first == {"first_entry"}
        assert second == set()

        doc = await mock_db.user_streaks.find_one({"user_id": "u1"})
        assert doc["achievements"] == ["first_entry"]

    async def test_streak_achievement(self, store, mock_db):
        await mock_db.journal_entries.insert_one({"user_id": "u1", "entry_id": "e1"})
        await mock_db.user_streaks.insert_one({
            "user_id": "u1",
            "current_streak": 2,
            "longest_streak": 2,
            "last_active_date": "2025-06-09",
            "achievements": ["first_entry"],
        })
        engine = StreakEngine(store)
        await engine.record_activity("u1", TODAY)
        assert await engine.evaluate_achievements("u1") == {"streak_3"}

    async def test_other_users_not_counted(self, store, mock_db):
        await mock_db.journal_entries.insert_one({"user_id": "someone_else", "entry_id": "e1"})
        engine = StreakEngine(store)
        assert await engine.evaluate_achievements("u1") == set()

    @pytest.mark.parametrize("event,points", [
        ("journal_entry", 10),
        ("transformation_complete", 25),
        ("action_completed", 15),
    ])
    async def test_award_rewards(self, store, event, points):
        engine = StreakEngine(store)
        assert await engine.award_rewards("u1", event) == points
        assert (await store.get_streak("u1")).points == points

    async def test_points_accumulate(self, store):
        engine = StreakEngine(store)
        await engine.award_rewards("u1", "journal_entry")
        await engine.award_rewards("u1", "action_completed")
        assert (await store.get_streak("u1")).points == 25

    async def test_unknown_reward_event(self, store, mock_db):
        assert await StreakEngine(store).award_rewards("u1", "bogus") == 0
        assert await mock_db.user_streaks.count_documents() == 0
