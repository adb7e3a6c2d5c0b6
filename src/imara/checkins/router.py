"""Check-in API endpoints."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from imara.auth.dependencies import get_current_user
from imara.checkins.schemas import (
    CalendarResponse,
    CheckInListResponse,
    CheckInRequest,
    CheckInResponse,
    CheckInStats,
    CheckInStatsResponse,
    TodayCheckInResponse,
)
from imara.checkins.service import get_checkin_for_date, list_checkins, record_checkin, user_checkins
from imara.config import get_settings
from imara.database import StateManager, get_store
from imara.db.models import User
from imara.pagination import paginate
from imara.stats.aggregation import checkin_calendar, checkin_stats
from imara.timeutils import today

router = APIRouter(prefix="/api/checkins", tags=["Check-ins"])


@router.post("", response_model=CheckInResponse, status_code=status.HTTP_201_CREATED)
async def create_checkin(
    body: CheckInRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> CheckInResponse:
    """Record today's check-in. One per user per calendar day."""
    async with store.mutation() as state:
        checkin = record_checkin(state, user, body, today())
    return CheckInResponse(check_in=checkin)


@router.get("/today", response_model=TodayCheckInResponse)
async def get_today(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> TodayCheckInResponse:
    checkin = get_checkin_for_date(store.state, user.id, today())
    return TodayCheckInResponse(check_in=checkin, has_checked_in_today=checkin is not None)


@router.get("", response_model=CheckInListResponse)
async def get_checkins(
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    page: int = Query(1, ge=1),
    limit: int = Query(30, ge=1, le=100),
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> CheckInListResponse:
    """List check-ins, newest first."""
    items, pagination = paginate(list_checkins(store.state, user.id, start_date, end_date), page, limit)
    return CheckInListResponse(checkins=items, pagination=pagination)


@router.get("/stats", response_model=CheckInStatsResponse)
async def get_stats(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> CheckInStatsResponse:
    """Distribution of the last 30 days of check-ins."""
    stats = checkin_stats(
        user_checkins(store.state, user.id),
        user,
        today(),
        get_settings().stats_window_days,
    )
    return CheckInStatsResponse(stats=CheckInStats(**stats))


@router.get("/calendar", response_model=CalendarResponse)
async def get_calendar(
    year: int | None = Query(None, ge=1970, le=9999),
    month: int | None = Query(None, ge=1, le=12),
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> CalendarResponse:
    """Check-ins of one month keyed by ISO date. ``month`` is 1-12, defaults to the current one."""
    current = today()
    year = year or current.year
    month = month or current.month
    data = checkin_calendar(user_checkins(store.state, user.id), year, month)
    return CalendarResponse(year=year, month=month, data=data)
