"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from imara.config import get_settings
from imara.database import close_store, init_store
from imara.db.models import AppState, User
from imara.gamification.seed import default_state
from imara.main import create_app

TEST_PASSWORD = "SecurePass1"


@pytest.fixture(autouse=True)
def _test_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point every test at its own snapshot file."""
    monkeypatch.setenv("IMARA_DATA_FILE", str(tmp_path / "data.json"))
    monkeypatch.setenv("IMARA_SNAPSHOT_INTERVAL_SECONDS", "3600")
    monkeypatch.setenv("IMARA_LOG_FORMAT", "console")
    monkeypatch.setenv("IMARA_TIMEZONE", "UTC")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def data_file() -> Path:
    return Path(get_settings().data_file)


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP test client backed by a fresh snapshot file."""
    app = create_app()
    await init_store(get_settings().data_file)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await close_store()


@pytest.fixture
def state() -> AppState:
    """Default state (catalog only) for service-level tests."""
    return default_state()


@pytest.fixture
def user(state: AppState) -> User:
    """A user already present in ``state``."""
    u = User(email="ada@example.com", username="ada", name="Ada", password_hash="x")
    state.users.append(u)
    return u


async def register_user(
    client: AsyncClient,
    email: str = "ada@example.com",
    username: str = "ada",
    name: str = "Ada Lovelace",
    password: str = TEST_PASSWORD,
) -> dict:
    """Helper to register a user. Returns the response JSON."""
    response = await client.post("/api/auth/register", json={
        "email": email,
        "username": username,
        "name": name,
        "password": password,
    })
    assert response.status_code == 201, response.text
    return response.json()


@pytest_asyncio.fixture
async def registered_user(client: AsyncClient) -> dict:
    """Register the default user. Returns dict with token and user."""
    return await register_user(client)


@pytest_asyncio.fixture
async def authed_client(client: AsyncClient, registered_user: dict) -> AsyncClient:
    """Client carrying the registered user's bearer token."""
    client.headers["Authorization"] = f"Bearer {registered_user['token']}"
    return client
