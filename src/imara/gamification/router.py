"""Achievement API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from imara.auth.dependencies import get_current_user
from imara.database import StateManager, get_store
from imara.db.models import User
from imara.gamification.schemas import (
    AchievementListResponse,
    UserAchievementDetail,
    UserAchievementListResponse,
)

router = APIRouter(prefix="/api/achievements", tags=["Achievements"])


# ── Public endpoints ──


@router.get("", response_model=AchievementListResponse)
async def list_achievements(store: StateManager = Depends(get_store)) -> AchievementListResponse:
    """Get the full achievement catalog."""
    return AchievementListResponse(achievements=store.state.achievements)


# ── Authenticated endpoints ──


@router.get("/user", response_model=UserAchievementListResponse)
async def list_user_achievements(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> UserAchievementListResponse:
    """Get the caller's grants, each with its catalog entry."""
    catalog = {a.id: a for a in store.state.achievements}
    items = [
        UserAchievementDetail(**ua.model_dump(), achievement=catalog.get(ua.achievement_id))
        for ua in store.state.user_achievements
        if ua.user_id == user.id
    ]
    return UserAchievementListResponse(achievements=items)
