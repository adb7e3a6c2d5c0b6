"""Self-care planner and reminder endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from imara.auth.dependencies import get_current_user
from imara.database import StateManager, get_store
from imara.db.models import User
from imara.planner.schemas import (
    ReminderListResponse,
    ReminderRequest,
    ReminderResponse,
    SelfCareListResponse,
    SelfCareRequest,
    SelfCareResponse,
)
from imara.planner.service import (
    active_activities,
    active_reminders,
    create_activity,
    create_reminder,
    deactivate_activity,
    deactivate_reminder,
)
from imara.schemas import SuccessResponse

router = APIRouter(prefix="/api", tags=["Planner"])


# ---------------------------------------------------------------------------
# Self-care
# ---------------------------------------------------------------------------


@router.post("/selfcare", response_model=SelfCareResponse, status_code=status.HTTP_201_CREATED)
async def add_activity(
    body: SelfCareRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> SelfCareResponse:
    """Schedule a weekly self-care activity (``dayOfWeek`` 0 = Sunday)."""
    async with store.mutation() as state:
        activity = create_activity(state, user, body)
    return SelfCareResponse(activity=activity)


@router.get("/selfcare", response_model=SelfCareListResponse)
async def list_activities(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> SelfCareListResponse:
    return SelfCareListResponse(activities=active_activities(store.state, user.id))


@router.delete("/selfcare/{activity_id}", response_model=SuccessResponse)
async def remove_activity(
    activity_id: str,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> SuccessResponse:
    async with store.mutation() as state:
        deactivate_activity(state, user, activity_id)
    return SuccessResponse()


# ---------------------------------------------------------------------------
# Reminders
# ---------------------------------------------------------------------------


@router.post("/reminders", response_model=ReminderResponse, status_code=status.HTTP_201_CREATED)
async def add_reminder(
    body: ReminderRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> ReminderResponse:
    async with store.mutation() as state:
        reminder = create_reminder(state, user, body)
    return ReminderResponse(reminder=reminder)


@router.get("/reminders", response_model=ReminderListResponse)
async def list_reminders(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> ReminderListResponse:
    return ReminderListResponse(reminders=active_reminders(store.state, user.id))


@router.delete("/reminders/{reminder_id}", response_model=SuccessResponse)
async def remove_reminder(
    reminder_id: str,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> SuccessResponse:
    async with store.mutation() as state:
        deactivate_reminder(state, user, reminder_id)
    return SuccessResponse()
