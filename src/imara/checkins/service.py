"""Daily check-in recording and queries."""

from __future__ import annotations

from datetime import date

import structlog

from imara.checkins.schemas import CheckInRequest
from imara.db.models import AppState, CheckIn, User
from imara.errors import ConflictError
from imara.gamification.achievement_service import check_checkin_achievements
from imara.gamification.streak_service import advance_checkin_streak

logger = structlog.get_logger()


def user_checkins(state: AppState, user_id: str) -> list[CheckIn]:
    return [c for c in state.checkins if c.user_id == user_id]


def get_checkin_for_date(state: AppState, user_id: str, day: date) -> CheckIn | None:
    return next((c for c in state.checkins if c.user_id == user_id and c.date == day), None)


def record_checkin(state: AppState, user: User, body: CheckInRequest, today: date) -> CheckIn:
    """
    Store today's check-in, advance the streak and evaluate achievements.

    Raises:
        ConflictError: If the user already has a check-in for ``today``.
    """
    if get_checkin_for_date(state, user.id, today) is not None:
        msg = "Already checked in today"
        raise ConflictError(msg)

    checkin = CheckIn(
        user_id=user.id,
        date=today,
        sleep=body.sleep,
        food=body.food,
        focus=body.focus,
        mood=body.mood,
        notes=body.notes,
        tags=body.tags,
    )
    state.checkins.append(checkin)

    advance_checkin_streak(user.streak, today)
    user.stats.total_check_ins += 1
    granted = check_checkin_achievements(state, user)

    logger.info(
        "checkin_recorded",
        user_id=user.id,
        date=today.isoformat(),
        streak=user.streak.current,
        achievements=granted,
    )
    return checkin


def list_checkins(
    state: AppState,
    user_id: str,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[CheckIn]:
    """User's check-ins within the optional inclusive range, newest first."""
    result = [
        c
        for c in user_checkins(state, user_id)
        if (start_date is None or c.date >= start_date) and (end_date is None or c.date <= end_date)
    ]
    result.sort(key=lambda c: c.date, reverse=True)
    return result
