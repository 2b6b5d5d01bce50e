# tests for the offline queue and connectivity tracker
# durability, fifo order, removal, corrupt-file handling

import json
from datetime import datetime, timezone

from reframe.models.journal import Entry, Mode
from reframe.services.connectivity import Connectivity
from reframe.services.offline_queue import OfflineQueue, generate_offline_id


def _entry(text="Feeling anxious today", mood="anxious", minute=0):
    return Entry(
        user_id="u1",
        text=text,
        mood=mood,
        tags=["work"],
        mode=Mode.INNER_CHILD,
        created_at=datetime(2025, 6, 10, 12, minute, tzinfo=timezone.utc),
        reframe="You are safe now.",
        action_text="Rest for ten minutes.",
    )


class TestOfflineId:

    def test_format(self):
        local_id = generate_offline_id()
        prefix, millis, suffix = local_id.split("_")
        assert prefix == "offline"
        assert millis.isdigit()
        assert len(suffix) == 9

    def test_unique(self):
        assert len({generate_offline_id() for _ in range(50)}) == 50


class TestOfflineQueue:

    def test_empty_when_file_missing(self, queue):
        assert queue.list_pending() == []
        assert len(queue) == 0

    def test_enqueue_returns_local_id(self, queue):
        local_id = queue.enqueue(_entry())
        pending = queue.list_pending()
        assert len(pending) == 1
        assert pending[0].local_id == local_id
        assert pending[0].id == local_id

    def test_round_trip_keeps_fields(self, queue):
        queue.enqueue(_entry())
        item = queue.list_pending()[0]
        assert item.user_id == "u1"
        assert item.mood == "anxious"
        assert item.tags == ["work"]
        assert item.mode == Mode.INNER_CHILD
        assert item.created_at == datetime(2025, 6, 10, 12, 0, tzinfo=timezone.utc)
        assert item.action_text == "Rest for ten minutes."

    def test_fifo_order(self, queue):
        ids = [queue.enqueue(_entry(text=f"entry {i}", minute=i)) for i in range(4)]
        assert [p.local_id for p in queue.list_pending()] == ids

    def test_durable_across_instances(self, queue):
        local_id = queue.enqueue(_entry())
        reopened = OfflineQueue(queue.path)
        assert [p.local_id for p in reopened.list_pending()] == [local_id]

    def test_remove(self, queue):
        first = queue.enqueue(_entry(text="one"))
        second = queue.enqueue(_entry(text="two"))
        assert queue.remove(first) is True
        assert [p.local_id for p in queue.list_pending()] == [second]

    def test_remove_unknown_id(self, queue):
        queue.enqueue(_entry())
        assert queue.remove("offline_0_missing") is False
        assert len(queue) == 1

    def test_file_is_plain_json_list(self, queue):
        queue.enqueue(_entry())
        data = json.loads(queue.path.read_text())
        assert isinstance(data, list)
        assert data[0]["text"] == "Feeling anxious today"

    def test_corrupt_file_is_moved_aside(self, queue):
        queue.path.parent.mkdir(parents=True, exist_ok=True)
        queue.path.write_text("{not json")
        assert queue.list_pending() == []
        assert queue.path.with_suffix(".json.corrupt").exists()

    def test_undecodable_file_is_moved_aside(self, queue):
        queue.path.parent.mkdir(parents=True, exist_ok=True)
        queue.path.write_bytes(b"\xff\xfe\x00garbage")
        assert queue.list_pending() == []
        assert len(queue) == 0
        assert queue.path.with_suffix(".json.corrupt").exists()

        # the queue keeps working afterwards
        local_id = queue.enqueue(_entry())
        assert [p.local_id for p in queue.list_pending()] == [local_id]

    def test_invalid_rows_are_skipped_and_set_aside(self, queue):
        good = queue.enqueue(_entry(text="still valid"))
        rows = json.loads(queue.path.read_text())
        rows.insert(0, {"text": "missing fields"})
        rows.append("not even a dict")
        queue.path.write_text(json.dumps(rows))

        pending = queue.list_pending()
        assert [p.local_id for p in pending] == [good]
        assert len(queue) == 1

        rejected = json.loads(queue.path.with_suffix(".json.rejected").read_text())
        assert rejected == [{"text": "missing fields"}, "not even a dict"]
        assert len(json.loads(queue.path.read_text())) == 1

    def test_remove_tolerates_non_dict_rows(self, queue):
        local_id = queue.enqueue(_entry())
        rows = json.loads(queue.path.read_text())
        queue.path.write_text(json.dumps(["junk"] + rows))
        assert queue.remove(local_id) is True

    def test_requeue_of_pending_entry_gets_new_id(self, queue):
        first = queue.enqueue(_entry())
        item = queue.list_pending()[0]
        second = queue.enqueue(item)
        assert second != first
        assert len(queue) == 2


class TestConnectivity:

    def test_restored_transition(self):
        c = Connectivity(online=False)
        assert c.set_online(True) is True
        assert c.online is True

    def test_no_transition_when_already_online(self):
        c = Connectivity(online=True)
        assert c.set_online(True) is False

    def test_going_offline(self):
        c = Connectivity(online=True)
        assert c.set_online(False) is False
        assert c.online is False
