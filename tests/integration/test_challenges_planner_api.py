"""Integration tests for challenges, self-care planning, reminders and themes."""

from httpx import AsyncClient


class TestAchievementCatalog:
    async def test_catalog_public(self, client: AsyncClient):
        achievements = (await client.get("/api/achievements")).json()["achievements"]
        points = {a["id"]: a["points"] for a in achievements}
        assert points == {
            "first_checkin": 10,
            "streak_3": 25,
            "streak_7": 50,
            "first_journal": 15,
            "first_post": 20,
        }


class TestChallenges:
    async def test_list_active(self, client: AsyncClient):
        challenges = (await client.get("/api/challenges")).json()["challenges"]
        assert {c["id"] for c in challenges} == {"hydration_7", "gratitude_week"}
        assert all(c["isActive"] for c in challenges)

    async def test_join_once(self, authed_client: AsyncClient):
        response = await authed_client.post("/api/challenges/hydration_7/join")
        assert response.status_code == 201
        participation = response.json()["userChallenge"]
        assert participation["progress"] == 0
        assert participation["isCompleted"] is False
        assert participation["checkIns"] == []

        again = await authed_client.post("/api/challenges/hydration_7/join")
        assert again.status_code == 400
        assert again.json() == {"success": False, "error": "Already joined this challenge"}

    async def test_join_unknown(self, authed_client: AsyncClient):
        response = await authed_client.post("/api/challenges/nope/join")
        assert response.status_code == 404
        assert response.json()["error"] == "Challenge not found"

    async def test_user_challenges_embed_catalog(self, authed_client: AsyncClient):
        await authed_client.post("/api/challenges/gratitude_week/join")
        joined = (await authed_client.get("/api/challenges/user")).json()["challenges"]
        assert len(joined) == 1
        assert joined[0]["challengeId"] == "gratitude_week"
        assert joined[0]["challenge"]["title"] == "Gratitude Week"


class TestSelfCare:
    async def test_create_and_list_by_day(self, authed_client: AsyncClient):
        await authed_client.post("/api/selfcare", json={"title": "Yoga", "dayOfWeek": 3, "time": "07:00"})
        response = await authed_client.post("/api/selfcare", json={
            "title": "Bath",
            "dayOfWeek": 0,
            "time": "20:00",
            "duration": 30,
        })
        assert response.status_code == 201
        activity = response.json()["activity"]
        assert activity["category"] == "selfcare"
        assert activity["isRecurring"] is True
        assert activity["icon"] == "❤️"

        activities = (await authed_client.get("/api/selfcare")).json()["activities"]
        assert [a["title"] for a in activities] == ["Bath", "Yoga"]

    async def test_day_of_week_validated(self, authed_client: AsyncClient):
        response = await authed_client.post("/api/selfcare", json={"title": "Yoga", "dayOfWeek": 7, "time": "07:00"})
        assert response.status_code == 400

    async def test_delete_deactivates(self, authed_client: AsyncClient):
        created = (await authed_client.post(
            "/api/selfcare", json={"title": "Walk", "dayOfWeek": 1, "time": "18:00"}
        )).json()["activity"]
        response = await authed_client.delete(f"/api/selfcare/{created['id']}")
        assert response.json() == {"success": True}
        assert (await authed_client.get("/api/selfcare")).json()["activities"] == []


class TestReminders:
    async def test_create_defaults_and_sort(self, authed_client: AsyncClient):
        await authed_client.post("/api/reminders", json={"title": "Journal", "message": "Write", "time": "21:00"})
        response = await authed_client.post("/api/reminders", json={
            "title": "Water",
            "message": "Drink a glass",
            "time": "08:30",
            "daysOfWeek": [1, 3, 5],
        })
        assert response.status_code == 201
        assert response.json()["reminder"]["daysOfWeek"] == [1, 3, 5]

        reminders = (await authed_client.get("/api/reminders")).json()["reminders"]
        assert [r["time"] for r in reminders] == ["08:30", "21:00"]
        assert reminders[1]["daysOfWeek"] == [0, 1, 2, 3, 4, 5, 6]
        assert reminders[1]["type"] == "custom"

    async def test_missing_message(self, authed_client: AsyncClient):
        response = await authed_client.post("/api/reminders", json={"title": "Water", "time": "08:30"})
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: message"

    async def test_delete_unknown(self, authed_client: AsyncClient):
        response = await authed_client.delete("/api/reminders/missing")
        assert response.status_code == 404


class TestTheme:
    async def test_update_syncs_settings(self, authed_client: AsyncClient):
        response = await authed_client.put("/api/theme", json={
            "theme": "dark",
            "fontSize": "large",
            "reducedMotion": True,
        })
        assert response.status_code == 200
        theme = response.json()["theme"]
        assert theme["theme"] == "dark"
        assert theme["fontSize"] == "large"
        assert theme["reducedMotion"] is True
        assert theme["accentColor"] == "amber"

        me = (await authed_client.get("/api/auth/me")).json()["user"]
        assert me["settings"]["theme"] == "dark"
