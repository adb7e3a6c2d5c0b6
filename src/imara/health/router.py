"""Health, version and service info endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from imara.config import get_settings
from imara.database import StateManager, get_store

router = APIRouter()

FEATURES = [
    "Daily Check-ins",
    "Journaling",
    "Habit Tracking",
    "Mood Tracking",
    "Community Posts",
    "Achievements",
    "Challenges",
    "Self-Care Planning",
    "Reminders",
]


@router.get("/health")
async def health(
    store: StateManager = Depends(get_store),  # noqa: B008
) -> dict[str, object]:
    """Liveness probe with record counts."""
    state = store.state
    return {
        "success": True,
        "message": "IMARA Backend is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": get_settings().app_version,
        "stats": {
            "users": len(state.users),
            "checkins": len(state.checkins),
            "journals": len(state.journals),
            "posts": len(state.community_posts),
        },
    }


@router.get("/version")
async def version() -> dict[str, object]:
    """Return API version and environment."""
    settings = get_settings()
    return {
        "success": True,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@router.get("/api/info")
async def info() -> dict[str, object]:
    settings = get_settings()
    return {
        "success": True,
        "app": settings.app_name,
        "version": settings.app_version,
        "features": FEATURES,
    }
