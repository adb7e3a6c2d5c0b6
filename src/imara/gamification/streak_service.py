"""Streak tracking: consecutive-day runs for check-ins and habits."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from imara.db.models import Habit, HabitCompletion, Streak
from imara.errors import ConflictError
from imara.timeutils import days_between

logger = logging.getLogger(__name__)


def compute_streak(dates: Iterable[date], anchor: date | None = None) -> int:
    """Length of the run of consecutive calendar days ending at ``anchor``.

    ``anchor`` defaults to the most recent date. Walks backward one day at a
    time and stops at the first gap. A single date counts as 1 no matter how
    old it is; an anchor that is not itself in ``dates`` yields 0.
    """
    days = set(dates)
    if not days:
        return 0
    if anchor is None:
        anchor = max(days)

    streak = 0
    current = anchor
    while current in days:
        streak += 1
        current -= timedelta(days=1)
    return streak


def advance_checkin_streak(streak: Streak, today: date) -> Streak:
    """Apply today's check-in to the user's running streak (in place).

    1. No previous check-in: current = 1
    2. Last check-in was yesterday: current + 1
    3. Gap of more than one day: reset current to 1
    4. Same day (or a date before the last one): rejected

    ``longest`` only ever grows.
    """
    if streak.last_check_in_date is None:
        streak.current = 1
    else:
        diff = days_between(streak.last_check_in_date, today)
        if diff <= 0:
            msg = "Already checked in today"
            raise ConflictError(msg)
        if diff == 1:
            streak.current += 1
        else:
            logger.debug("streak_reset", extra={"previous": streak.current, "gap_days": diff})
            streak.current = 1

    streak.longest = max(streak.longest, streak.current)
    streak.last_check_in_date = today
    return streak


def recompute_habit_streak(habit: Habit, completions: Iterable[HabitCompletion]) -> int:
    """Rebuild ``habit.current_streak`` from its completed records.

    Recomputed from scratch because a toggle can remove any past day.
    ``longest_streak`` is a high-water mark and is never lowered.
    """
    completed_dates = [c.date for c in completions if c.habit_id == habit.id and c.completed]
    habit.current_streak = compute_streak(completed_dates)
    habit.longest_streak = max(habit.longest_streak, habit.current_streak)
    return habit.current_streak


def effective_current_streak(streak: Streak, today: date) -> int:
    """Streak as it stands today: 0 once a day has been missed.

    The stored value only changes on the next check-in; read views use this
    so a check-in from long ago does not keep showing an active streak.
    """
    if streak.last_check_in_date is None:
        return 0
    if days_between(streak.last_check_in_date, today) > 1:
        return 0
    return streak.current
