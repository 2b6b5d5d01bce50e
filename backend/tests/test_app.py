# tests for the health check, app configuration and streaks router
# basic app-level tests

from tests.conftest import OTHER_USER_ID, USER_ID


class TestHealthCheck:
    """app health and config"""

    async def test_health_check(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["service"] == "reframe-api"
        assert "online" in data

    async def test_openapi_schema(self, client):
        resp = await client.get("/openapi.json")
        assert resp.status_code == 200
        schema = resp.json()
        assert schema["info"]["title"] == "Reframe Journal API"
        assert "/journals" in schema["paths"]
        assert "/sync" in schema["paths"]

    async def test_docs_available(self, client):
        resp = await client.get("/docs")
        assert resp.status_code == 200


class TestStreaks:
    """GET /streaks"""

    async def test_new_user_has_empty_streak(self, user_client):
        resp = await user_client.get("/streaks")
        assert resp.status_code == 200
        data = resp.json()
        assert data["currentStreak"] == 0
        assert data["longestStreak"] == 0
        assert data["lastActiveDate"] is None
        assert data["achievements"] == []
        assert data["points"] == 0

    async def test_streak_after_entry(self, user_client):
        await user_client.post("/journals", json={"text": "A calm and quiet morning with coffee"})
        data = (await user_client.get("/streaks")).json()
        assert data["currentStreak"] == 1
        assert data["longestStreak"] == 1
        assert data["lastActiveDate"] is not None
        assert data["achievements"] == ["first_entry"]
        assert data["points"] == 10

    async def test_streaks_are_per_user(self, client):
        await client.post(
            "/journals",
            json={"text": "A calm and quiet morning with coffee"},
            headers={"X-User-Id": USER_ID},
        )
        mine = await client.get("/streaks", headers={"X-User-Id": USER_ID})
        theirs = await client.get("/streaks", headers={"X-User-Id": OTHER_USER_ID})
        assert mine.json()["points"] == 10
        assert theirs.json()["points"] == 0

    async def test_streaks_requires_user(self, client):
        resp = await client.get("/streaks")
        assert resp.status_code == 401
