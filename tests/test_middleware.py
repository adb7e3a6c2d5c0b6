"""Middleware tests: request ID, CORS, error envelope, persistence after writes."""

import json
from pathlib import Path

import pytest
from httpx import AsyncClient

from imara.middleware.error_handler import describe_validation_errors


@pytest.mark.asyncio
async def test_request_id_generated(client: AsyncClient) -> None:
    """Request ID is auto-generated when not provided."""
    response = await client.get("/health")
    assert "x-request-id" in response.headers
    assert len(response.headers["x-request-id"]) == 36  # UUID format


@pytest.mark.asyncio
async def test_request_id_preserved(client: AsyncClient) -> None:
    """Custom request ID is echoed back in response."""
    response = await client.get("/health", headers={"X-Request-Id": "test-abc-123"})
    assert response.headers["x-request-id"] == "test-abc-123"


@pytest.mark.asyncio
async def test_cors_preflight(client: AsyncClient) -> None:
    """CORS preflight returns access-control-allow-origin for configured origin."""
    response = await client.options(
        "/health",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


@pytest.mark.asyncio
async def test_cors_preview_deployments(client: AsyncClient) -> None:
    response = await client.options(
        "/health",
        headers={
            "Origin": "https://imara-preview.vercel.app",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.headers["access-control-allow-origin"] == "https://imara-preview.vercel.app"


@pytest.mark.asyncio
async def test_404_returns_envelope(client: AsyncClient) -> None:
    """Unknown paths return 404 with the error envelope."""
    response = await client.get("/nonexistent-path")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Route not found"}


@pytest.mark.asyncio
async def test_invalid_json_is_400(authed_client: AsyncClient) -> None:
    response = await authed_client.post(
        "/api/mood",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_write_reaches_snapshot(authed_client: AsyncClient, data_file: Path) -> None:
    """A successful mutation is on disk before the response returns."""
    await authed_client.post("/api/mood", json={"mood": "calm"})
    raw = json.loads(data_file.read_text())
    assert raw["moodEntries"][0]["mood"] == "calm"
    assert raw["users"][0]["stats"]["totalMoodEntries"] == 1


def test_describe_validation_errors() -> None:
    errors = [
        {"type": "missing", "loc": ("body", "sleep"), "msg": "Field required"},
        {"type": "missing", "loc": ("body", "mood"), "msg": "Field required"},
    ]
    assert describe_validation_errors(errors) == "Missing required fields: sleep, mood"
    assert describe_validation_errors([
        {"type": "less_than_equal", "loc": ("body", "intensity"), "msg": "Input should be less than or equal to 10"},
    ]) == "Invalid intensity: Input should be less than or equal to 10"
    assert describe_validation_errors([]) == "Invalid request"
