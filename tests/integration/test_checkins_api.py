"""Integration tests for check-ins, streaks and the achievements they unlock."""

from datetime import date, timedelta

import pytest
from httpx import AsyncClient

CHECKIN = {"sleep": "good", "food": "balanced", "focus": "sharp", "mood": "happy"}


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch):
    """Controllable calendar date for the check-in and stats routes."""

    class Clock:
        today = date(2026, 3, 1)

        def advance(self, days: int = 1) -> None:
            self.today += timedelta(days=days)

    c = Clock()
    for module in ("imara.checkins.router", "imara.stats.router"):
        monkeypatch.setattr(f"{module}.today", lambda: c.today)
    return c


class TestCreateCheckin:
    async def test_first_checkin(self, authed_client: AsyncClient, clock):
        response = await authed_client.post("/api/checkins", json={**CHECKIN, "tags": ["rest"]})
        assert response.status_code == 201
        checkin = response.json()["checkIn"]
        assert checkin["date"] == "2026-03-01"
        assert checkin["tags"] == ["rest"]
        assert checkin["notes"] == ""

        me = (await authed_client.get("/api/auth/me")).json()["user"]
        assert me["streak"] == {"current": 1, "longest": 1, "lastCheckInDate": "2026-03-01"}
        assert me["stats"]["totalCheckIns"] == 1
        assert me["stats"]["totalPoints"] == 10

    async def test_duplicate_rejected(self, authed_client: AsyncClient, clock):
        await authed_client.post("/api/checkins", json=CHECKIN)
        response = await authed_client.post("/api/checkins", json=CHECKIN)
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Already checked in today"}

        me = (await authed_client.get("/api/auth/me")).json()["user"]
        assert me["stats"]["totalCheckIns"] == 1

    async def test_missing_fields(self, authed_client: AsyncClient, clock):
        response = await authed_client.post("/api/checkins", json={"sleep": "good"})
        assert response.status_code == 400
        assert "food" in response.json()["error"]

    async def test_blank_field_rejected(self, authed_client: AsyncClient, clock):
        response = await authed_client.post("/api/checkins", json={**CHECKIN, "mood": "  "})
        assert response.status_code == 400

    async def test_requires_auth(self, client: AsyncClient):
        response = await client.post("/api/checkins", json=CHECKIN)
        assert response.status_code == 401


class TestStreakScenario:
    async def test_three_consecutive_days(self, authed_client: AsyncClient, clock):
        for _ in range(3):
            response = await authed_client.post("/api/checkins", json=CHECKIN)
            assert response.status_code == 201
            clock.advance()

        me = (await authed_client.get("/api/auth/me")).json()["user"]
        assert me["streak"]["current"] == 3
        assert me["stats"]["totalPoints"] == 35
        assert me["stats"]["achievementsCount"] == 2

        grants = (await authed_client.get("/api/achievements/user")).json()["achievements"]
        assert {g["achievementId"] for g in grants} == {"first_checkin", "streak_3"}
        assert all(g["achievement"]["id"] == g["achievementId"] for g in grants)

    async def test_gap_resets_streak(self, authed_client: AsyncClient, clock):
        await authed_client.post("/api/checkins", json=CHECKIN)
        clock.advance()
        await authed_client.post("/api/checkins", json=CHECKIN)
        clock.advance(3)
        await authed_client.post("/api/checkins", json=CHECKIN)

        streak = (await authed_client.get("/api/auth/me")).json()["user"]["streak"]
        assert streak["current"] == 1
        assert streak["longest"] == 2


class TestQueries:
    async def test_today(self, authed_client: AsyncClient, clock):
        before = (await authed_client.get("/api/checkins/today")).json()
        assert before == {"success": True, "checkIn": None, "hasCheckedInToday": False}

        await authed_client.post("/api/checkins", json=CHECKIN)
        after = (await authed_client.get("/api/checkins/today")).json()
        assert after["hasCheckedInToday"] is True
        assert after["checkIn"]["mood"] == "happy"

    async def test_list_newest_first_with_range(self, authed_client: AsyncClient, clock):
        for _ in range(4):
            await authed_client.post("/api/checkins", json=CHECKIN)
            clock.advance()

        data = (await authed_client.get("/api/checkins", params={"limit": 2})).json()
        assert [c["date"] for c in data["checkins"]] == ["2026-03-04", "2026-03-03"]
        assert data["pagination"] == {"page": 1, "limit": 2, "total": 4, "pages": 2}

        ranged = (await authed_client.get(
            "/api/checkins", params={"startDate": "2026-03-02", "endDate": "2026-03-03"}
        )).json()
        assert [c["date"] for c in ranged["checkins"]] == ["2026-03-03", "2026-03-02"]

    async def test_stats(self, authed_client: AsyncClient, clock):
        await authed_client.post("/api/checkins", json=CHECKIN)
        clock.advance()
        await authed_client.post("/api/checkins", json={**CHECKIN, "mood": "tired"})

        stats = (await authed_client.get("/api/checkins/stats")).json()["stats"]
        assert stats["total"] == 2
        assert stats["byMood"] == {"happy": 50, "tired": 50}
        assert stats["bySleep"] == {"good": 100}
        assert stats["streak"] == 2
        assert stats["consistency"] == 7

    async def test_calendar(self, authed_client: AsyncClient, clock):
        await authed_client.post("/api/checkins", json=CHECKIN)
        data = (await authed_client.get("/api/checkins/calendar", params={"year": 2026, "month": 3})).json()
        assert data["year"] == 2026
        assert data["month"] == 3
        assert data["data"]["2026-03-01"] == {
            "mood": "happy",
            "sleep": "good",
            "food": "balanced",
            "focus": "sharp",
        }

        empty = (await authed_client.get("/api/checkins/calendar", params={"year": 2026, "month": 2})).json()
        assert empty["data"] == {}

    async def test_summary(self, authed_client: AsyncClient, clock):
        await authed_client.post("/api/checkins", json=CHECKIN)
        stats = (await authed_client.get("/api/stats")).json()["stats"]
        assert stats["streak"] == 1
        assert stats["todayCheckin"] is True
        assert stats["todayMood"] is False
        assert stats["totalPoints"] == 10
        assert stats["user"]["totalCheckIns"] == 1

        clock.advance(3)
        stale = (await authed_client.get("/api/stats")).json()["stats"]
        assert stale["streak"] == 0
        assert stale["longestStreak"] == 1
