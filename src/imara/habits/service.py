"""Habit definitions and per-day completion toggling."""

from __future__ import annotations

from datetime import date

import structlog

from imara.db.models import AppState, Habit, HabitCompletion, User
from imara.errors import NotFoundError
from imara.gamification.streak_service import recompute_habit_streak
from imara.habits.schemas import HabitRequest

logger = structlog.get_logger()


def get_user_habit(state: AppState, user_id: str, habit_id: str) -> Habit:
    """
    Raises:
        NotFoundError: If the habit does not exist or belongs to another user.
    """
    habit = next((h for h in state.habits if h.id == habit_id and h.user_id == user_id), None)
    if habit is None:
        msg = "Habit not found"
        raise NotFoundError(msg)
    return habit


def create_habit(state: AppState, user: User, body: HabitRequest) -> Habit:
    habit = Habit(
        user_id=user.id,
        name=body.name,
        emoji=body.emoji or "✨",
        category=body.category or "health",
        frequency=body.frequency or "daily",
        reminder_time=body.reminder_time or None,
    )
    state.habits.append(habit)
    logger.info("habit_created", user_id=user.id, habit_id=habit.id)
    return habit


def active_habits(state: AppState, user_id: str) -> list[Habit]:
    """Active habits, newest first."""
    habits = [h for h in reversed(state.habits) if h.user_id == user_id and h.is_active]
    habits.sort(key=lambda h: h.created_at, reverse=True)
    return habits


def toggle_completion(state: AppState, user: User, habit_id: str, day: date) -> tuple[Habit, bool]:
    """Flip the completion record for ``(habit, day)``, creating it on first use.

    Recomputes the habit streak and the user's completed-habit total.
    Returns the habit and the resulting completed flag.
    """
    habit = get_user_habit(state, user.id, habit_id)

    completion = next(
        (c for c in state.habit_completions if c.habit_id == habit.id and c.date == day),
        None,
    )
    if completion is None:
        completion = HabitCompletion(habit_id=habit.id, user_id=user.id, date=day)
        state.habit_completions.append(completion)
        habit.total_completions += 1
    else:
        completion.completed = not completion.completed
        if completion.completed:
            habit.total_completions += 1
        else:
            habit.total_completions = max(0, habit.total_completions - 1)

    recompute_habit_streak(habit, state.habit_completions)
    user.stats.total_habits_completed = sum(
        1 for c in state.habit_completions if c.user_id == user.id and c.completed
    )

    logger.info(
        "habit_toggled",
        user_id=user.id,
        habit_id=habit.id,
        date=day.isoformat(),
        completed=completion.completed,
        streak=habit.current_streak,
    )
    return habit, completion.completed


def deactivate_habit(state: AppState, user: User, habit_id: str) -> Habit:
    habit = get_user_habit(state, user.id, habit_id)
    habit.is_active = False
    logger.info("habit_deactivated", user_id=user.id, habit_id=habit.id)
    return habit


def user_completions(state: AppState, user_id: str) -> list[HabitCompletion]:
    return [c for c in state.habit_completions if c.user_id == user_id]
