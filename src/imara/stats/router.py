"""Dashboard summary endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from imara.auth.dependencies import get_current_user
from imara.checkins.service import user_checkins
from imara.database import StateManager, get_store
from imara.db.models import User
from imara.mood.service import user_moods
from imara.stats.aggregation import user_summary
from imara.stats.schemas import UserSummary, UserSummaryResponse
from imara.timeutils import today

router = APIRouter(prefix="/api/stats", tags=["Stats"])


@router.get("", response_model=UserSummaryResponse)
async def get_summary(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> UserSummaryResponse:
    """Counters, streak and today's activity for the dashboard."""
    summary = user_summary(
        user,
        user_checkins(store.state, user.id),
        user_moods(store.state, user.id),
        today(),
    )
    return UserSummaryResponse(stats=UserSummary(**summary))
