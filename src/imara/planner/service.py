"""Weekly self-care activities and reminders.

Neither is ever removed; deleting one only flips ``is_active``.
"""

from __future__ import annotations

import structlog

from imara.db.models import AppState, Reminder, SelfCareActivity, User
from imara.errors import NotFoundError
from imara.planner.schemas import ReminderRequest, SelfCareRequest

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Self-care
# ---------------------------------------------------------------------------


def create_activity(state: AppState, user: User, body: SelfCareRequest) -> SelfCareActivity:
    activity = SelfCareActivity(
        user_id=user.id,
        title=body.title,
        description=body.description,
        category=body.category or "selfcare",
        day_of_week=body.day_of_week,
        time=body.time,
        duration=body.duration,
    )
    state.self_care_activities.append(activity)
    logger.info("selfcare_created", user_id=user.id, activity_id=activity.id)
    return activity


def active_activities(state: AppState, user_id: str) -> list[SelfCareActivity]:
    """Active activities ordered by weekday, then time."""
    activities = [a for a in state.self_care_activities if a.user_id == user_id and a.is_active]
    activities.sort(key=lambda a: (a.day_of_week, a.time))
    return activities


def deactivate_activity(state: AppState, user: User, activity_id: str) -> SelfCareActivity:
    activity = next(
        (a for a in state.self_care_activities if a.id == activity_id and a.user_id == user.id),
        None,
    )
    if activity is None:
        msg = "Activity not found"
        raise NotFoundError(msg)
    activity.is_active = False
    return activity


# ---------------------------------------------------------------------------
# Reminders
# ---------------------------------------------------------------------------


def create_reminder(state: AppState, user: User, body: ReminderRequest) -> Reminder:
    reminder = Reminder(
        user_id=user.id,
        title=body.title,
        message=body.message,
        time=body.time,
    )
    if body.days_of_week:
        reminder.days_of_week = body.days_of_week
    state.reminders.append(reminder)
    logger.info("reminder_created", user_id=user.id, reminder_id=reminder.id)
    return reminder


def active_reminders(state: AppState, user_id: str) -> list[Reminder]:
    """Active reminders ordered by time of day."""
    reminders = [r for r in state.reminders if r.user_id == user_id and r.is_active]
    reminders.sort(key=lambda r: r.time)
    return reminders


def deactivate_reminder(state: AppState, user: User, reminder_id: str) -> Reminder:
    reminder = next((r for r in state.reminders if r.id == reminder_id and r.user_id == user.id), None)
    if reminder is None:
        msg = "Reminder not found"
        raise NotFoundError(msg)
    reminder.is_active = False
    return reminder
