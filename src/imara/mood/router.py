"""Mood API endpoints."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from imara.auth.dependencies import get_current_user
from imara.config import get_settings
from imara.database import StateManager, get_store
from imara.db.models import User
from imara.mood.schemas import (
    MoodEntryResponse,
    MoodListResponse,
    MoodRequest,
    MoodStats,
    MoodStatsResponse,
)
from imara.mood.service import list_moods, record_mood, user_moods
from imara.stats.aggregation import mood_stats
from imara.timeutils import today

router = APIRouter(prefix="/api/mood", tags=["Mood"])


@router.post("", response_model=MoodEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_mood_entry(
    body: MoodRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> MoodEntryResponse:
    async with store.mutation() as state:
        entry = record_mood(state, user, body, today())
    return MoodEntryResponse(mood_entry=entry)


@router.get("", response_model=MoodListResponse)
async def get_mood_entries(
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> MoodListResponse:
    return MoodListResponse(mood_entries=list_moods(store.state, user.id, start_date, end_date))


@router.get("/stats", response_model=MoodStatsResponse)
async def get_mood_stats(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> MoodStatsResponse:
    """Mood distribution and triggers over the last 30 days."""
    stats = mood_stats(user_moods(store.state, user.id), today(), get_settings().stats_window_days)
    return MoodStatsResponse(stats=MoodStats(**stats))
