# shared fixtures for the reframe journal tests
# provides an in-memory motor mock, a tmp offline queue, the pipeline and httpx test clients

import random

import pytest
import pytest_asyncio
from unittest.mock import MagicMock
from bson import ObjectId
from pymongo.errors import AutoReconnect

from httpx import AsyncClient, ASGITransport

from reframe.main import app
from reframe.dependencies import get_current_user_id, get_pipeline
from reframe.services.connectivity import Connectivity
from reframe.services.db import get_db
from reframe.services.offline_queue import OfflineQueue
from reframe.services.pipeline import JournalPipeline
from reframe.services.store import RemoteStore


USER_ID = "user_alex"
OTHER_USER_ID = "user_jordan"


# async cursor mock

class AsyncCursorMock:
    """mock for motor's async cursor: supports async for and chained methods"""

    def __init__(self, data=None):
        self._data = list(data or [])
        self._index = 0

    def sort(self, key, direction=1):
        self._data.sort(key=lambda d: (d.get(key) is not None, d.get(key) or ""), reverse=direction == -1)
        return self

    def limit(self, n):
        self._data = self._data[:n]
        return self

    def __aiter__(self):
        self._index = 0
        return self

    async def __anext__(self):
        if self._index >= len(self._data):
            raise StopAsyncIteration
        item = self._data[self._index]
        self._index += 1
        return item

    async def to_list(self, length=None):
        if length is not None:
            return self._data[:length]
        return self._data


class MockCollection:
    """mock for a motor collection with async methods"""

    def __init__(self, data=None):
        self._data = data or []
        self.inserted = []
        self.write_count = 0

    def find(self, query=None, projection=None):
        results = self._data
        if query:
            results = [d for d in results if self._matches(d, query)]
        return AsyncCursorMock(results)

    async def find_one(self, query=None, projection=None):
        if not query:
            return self._data[0] if self._data else None
        for doc in self._data:
            if self._matches(doc, query):
                return doc
        return None

    async def insert_one(self, doc):
        self.write_count += 1
        oid = doc.get("_id", ObjectId())
        doc["_id"] = oid
        self._data.append(doc)
        self.inserted.append(doc)
        result = MagicMock()
        result.inserted_id = oid
        return result

    async def count_documents(self, query=None):
        if not query:
            return len(self._data)
        return len([d for d in self._data if self._matches(d, query)])

    async def update_one(self, query, update, upsert=False):
        self.write_count += 1
        result = MagicMock()
        result.matched_count = 0
        result.modified_count = 0
        result.upserted_id = None

        target = None
        for doc in self._data:
            if self._matches(doc, query):
                target = doc
                result.matched_count = 1
                break

        if target is None:
            if not upsert:
                return result
            target = dict(query)
            target["_id"] = ObjectId()
            target.update(update.get("$setOnInsert", {}))
            self._data.append(target)
            self.inserted.append(target)
            result.upserted_id = target["_id"]

        if "$set" in update:
            target.update(update["$set"])
        if "$inc" in update:
            for key, val in update["$inc"].items():
                target[key] = target.get(key, 0) + val
        if "$addToSet" in update:
            for key, val in update["$addToSet"].items():
                target.setdefault(key, [])
                if val not in target[key]:
                    target[key].append(val)
        result.modified_count = 1
        return result

    def _matches(self, doc, query):
        """equality matching, the only filter the store sends"""
        return all(doc.get(key) == value for key, value in query.items())


class FailingCollection(MockCollection):
    """collection whose writes fail like an unreachable server"""

    def __init__(self, data=None, fail_times=None):
        super().__init__(data)
        self.fail_times = fail_times  # None = always fail
        self.attempts = 0

    async def update_one(self, query, update, upsert=False):
        self.attempts += 1
        if self.fail_times is None or self.attempts <= self.fail_times:
            raise AutoReconnect("connection refused")
        return await super().update_one(query, update, upsert=upsert)


class MockDatabase:
    """mock database that mimics the Database class"""

    def __init__(self):
        self.journal_entries = MockCollection([])
        self.distress_tracking = MockCollection([])
        self.therapist_recommendations = MockCollection([])
        self.user_streaks = MockCollection([])

    async def connect(self):
        pass

    async def close(self):
        pass


@pytest.fixture
def mock_db():
    """create a fresh mock database for each test"""
    return MockDatabase()


@pytest.fixture
def failing_collection():
    """the FailingCollection class, for swapping into mock_db"""
    return FailingCollection


@pytest.fixture
def store(mock_db):
    return RemoteStore(mock_db)


@pytest.fixture
def queue(tmp_path):
    return OfflineQueue(tmp_path / "queue" / "pending_entries.json")


@pytest.fixture
def connectivity():
    return Connectivity(online=True)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def pipeline(store, queue, connectivity, rng):
    return JournalPipeline(store, queue, connectivity, rng=rng)


@pytest_asyncio.fixture
async def client(mock_db, pipeline):
    """httpx async client with the db and pipeline overridden, no user header"""

    async def override_get_db():
        return mock_db

    async def override_get_pipeline():
        return pipeline

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_pipeline] = override_get_pipeline

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def user_client(mock_db, pipeline):
    """client signed in as the test user"""

    async def override_get_db():
        return mock_db

    async def override_get_pipeline():
        return pipeline

    async def override_get_current_user_id():
        return USER_ID

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_pipeline] = override_get_pipeline
    app.dependency_overrides[get_current_user_id] = override_get_current_user_id

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
