"""Integration tests for registration, login and account endpoints."""

from httpx import AsyncClient

from tests.conftest import TEST_PASSWORD, register_user


class TestRegistration:
    async def test_register_returns_token_and_user(self, client: AsyncClient):
        data = await register_user(client)
        assert data["success"] is True
        assert data["token"]
        user = data["user"]
        assert user["email"] == "ada@example.com"
        assert user["streak"] == {"current": 0, "longest": 0, "lastCheckInDate": None}
        assert user["stats"]["totalPoints"] == 0
        assert user["settings"]["dailyReminderTime"] == "09:00"
        assert "passwordHash" not in user
        assert "password_hash" not in user

    async def test_duplicate_email_rejected(self, client: AsyncClient):
        await register_user(client)
        response = await client.post("/api/auth/register", json={
            "email": "ADA@example.com",
            "username": "other",
            "name": "Other",
            "password": TEST_PASSWORD,
        })
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Email already registered"}

    async def test_duplicate_username_rejected(self, client: AsyncClient):
        await register_user(client)
        response = await client.post("/api/auth/register", json={
            "email": "other@example.com",
            "username": "Ada",
            "name": "Other",
            "password": TEST_PASSWORD,
        })
        assert response.status_code == 400
        assert response.json()["error"] == "Username already taken"

    async def test_missing_fields(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={"email": "a@example.com"})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"].startswith("Missing required fields")

    async def test_weak_password(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={
            "email": "a@example.com",
            "username": "a",
            "name": "A",
            "password": "short",
        })
        assert response.status_code == 400
        assert "at least 8" in response.json()["error"]

    async def test_register_creates_theme_record(self, client: AsyncClient):
        data = await register_user(client)
        client.headers["Authorization"] = f"Bearer {data['token']}"
        theme = (await client.get("/api/theme")).json()["theme"]
        assert theme["userId"] == data["user"]["id"]
        assert theme["fontSize"] == "medium"


class TestLogin:
    async def test_login(self, client: AsyncClient, registered_user: dict):
        response = await client.post("/api/auth/login", json={
            "email": "ada@example.com",
            "password": TEST_PASSWORD,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["id"] == registered_user["user"]["id"]
        assert data["token"]

    async def test_wrong_password(self, client: AsyncClient, registered_user: dict):
        response = await client.post("/api/auth/login", json={
            "email": "ada@example.com",
            "password": "WrongPassword",
        })
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Invalid credentials"}

    async def test_unknown_email(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={
            "email": "nobody@example.com",
            "password": TEST_PASSWORD,
        })
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid credentials"


class TestProtectedRoutes:
    async def test_me_requires_token(self, client: AsyncClient):
        response = await client.get("/api/auth/me")
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "No token provided"}

    async def test_me_rejects_bad_token(self, client: AsyncClient):
        response = await client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid token"

    async def test_me(self, authed_client: AsyncClient):
        response = await authed_client.get("/api/auth/me")
        assert response.status_code == 200
        assert response.json()["user"]["username"] == "ada"

    async def test_update_profile(self, authed_client: AsyncClient):
        response = await authed_client.put("/api/auth/profile", json={"name": "Ada L.", "bio": "hello"})
        assert response.status_code == 200
        user = response.json()["user"]
        assert user["name"] == "Ada L."
        assert user["bio"] == "hello"

    async def test_update_settings_syncs_theme(self, authed_client: AsyncClient):
        response = await authed_client.put("/api/auth/settings", json={
            "theme": "dark",
            "accentColor": "teal",
            "emailNotifications": True,
        })
        assert response.status_code == 200
        settings = response.json()["settings"]
        assert settings["theme"] == "dark"
        assert settings["emailNotifications"] is True

        theme = (await authed_client.get("/api/theme")).json()["theme"]
        assert theme["theme"] == "dark"
        assert theme["accentColor"] == "teal"

    async def test_anonymous_name(self, authed_client: AsyncClient):
        response = await authed_client.get("/api/auth/anonymous-name")
        assert response.status_code == 200
        adjective, noun = response.json()["anonymousName"].split(" ")
        assert adjective in {"Calm", "Quiet", "Gentle", "Steady", "Brave", "Kind", "Wise", "Patient"}
        assert noun in {"Oak", "River", "Mountain", "Star", "Cloud", "Stone", "Wind", "Light"}
