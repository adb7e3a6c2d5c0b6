"""Habit API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from imara.auth.dependencies import get_current_user
from imara.database import StateManager, get_store
from imara.db.models import User
from imara.habits.schemas import (
    HabitCompleteRequest,
    HabitCompleteResponse,
    HabitListResponse,
    HabitRequest,
    HabitResponse,
    HabitStats,
    HabitStatsResponse,
)
from imara.habits.service import (
    active_habits,
    create_habit,
    deactivate_habit,
    toggle_completion,
    user_completions,
)
from imara.schemas import SuccessResponse
from imara.stats.aggregation import habit_stats
from imara.timeutils import today

router = APIRouter(prefix="/api/habits", tags=["Habits"])


@router.post("", response_model=HabitResponse, status_code=status.HTTP_201_CREATED)
async def add_habit(
    body: HabitRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> HabitResponse:
    async with store.mutation() as state:
        habit = create_habit(state, user, body)
    return HabitResponse(habit=habit)


@router.get("", response_model=HabitListResponse)
async def list_habits(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> HabitListResponse:
    return HabitListResponse(habits=active_habits(store.state, user.id))


@router.get("/stats", response_model=HabitStatsResponse)
async def get_habit_stats(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> HabitStatsResponse:
    habits = [h for h in store.state.habits if h.user_id == user.id]
    stats = habit_stats(habits, user_completions(store.state, user.id), today())
    return HabitStatsResponse(stats=HabitStats(**stats))


@router.post("/{habit_id}/complete", response_model=HabitCompleteResponse)
async def complete_habit(
    habit_id: str,
    body: HabitCompleteRequest | None = None,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> HabitCompleteResponse:
    """Toggle completion for a day (today unless ``date`` is given)."""
    day = body.date if body is not None and body.date is not None else today()
    async with store.mutation() as state:
        habit, completed = toggle_completion(state, user, habit_id, day)
    return HabitCompleteResponse(habit=habit, completed=completed)


@router.delete("/{habit_id}", response_model=SuccessResponse)
async def delete_habit(
    habit_id: str,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> SuccessResponse:
    """Soft-delete: the habit is deactivated, its history kept."""
    async with store.mutation() as state:
        deactivate_habit(state, user, habit_id)
    return SuccessResponse()
