"""Windowed statistics over check-ins, moods, journals and habits.

All functions are pure: they take the records to aggregate plus an anchor
date and never touch the shared state. Percentages are rounded half-up to
whole numbers, so a distribution may drift a point or two from 100.
"""

from __future__ import annotations

import calendar
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta

from imara.db.models import CheckIn, Habit, HabitCompletion, JournalEntry, MoodEntry, User
from imara.gamification.streak_service import effective_current_streak
from imara.timeutils import window_start

DEFAULT_WINDOW_DAYS = 30


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator, not like ``round()`` (which rounds half to even)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def percent(part: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(round_half_up(part / total * 100))


def percent_distribution(values: Iterable[str]) -> dict[str, int]:
    """Share of each distinct value as a whole-number percentage."""
    counts = Counter(values)
    total = sum(counts.values())
    return {key: percent(count, total) for key, count in counts.items()}


def in_window(records: Iterable, anchor: date, days: int = DEFAULT_WINDOW_DAYS) -> list:
    """Records whose ``date`` falls within the last ``days`` dates up to ``anchor``."""
    start = window_start(anchor, days)
    return [r for r in records if r.date >= start]


def checkin_stats(
    checkins: Sequence[CheckIn],
    user: User,
    today: date,
    days: int = DEFAULT_WINDOW_DAYS,
) -> dict:
    recent = in_window(checkins, today, days)
    total = len(recent)
    return {
        "total": total,
        "by_mood": percent_distribution(c.mood for c in recent),
        "by_sleep": percent_distribution(c.sleep for c in recent),
        "by_food": percent_distribution(c.food for c in recent),
        "by_focus": percent_distribution(c.focus for c in recent),
        "streak": effective_current_streak(user.streak, today),
        "consistency": percent(total, days),
    }


def mood_stats(
    entries: Sequence[MoodEntry],
    today: date,
    days: int = DEFAULT_WINDOW_DAYS,
) -> dict:
    recent = in_window(entries, today, days)
    total = len(recent)

    triggers: Counter[str] = Counter()
    for entry in recent:
        triggers.update(entry.triggers)

    average = int(round_half_up(sum(e.intensity for e in recent) / total)) if total else 0
    return {
        "total_entries": total,
        "mood_distribution": percent_distribution(e.mood for e in recent),
        "average_intensity": average,
        "common_triggers": dict(triggers),
        "consistency": percent(total, days),
    }


def journal_stats(
    entries: Sequence[JournalEntry],
    now: datetime,
    days: int = DEFAULT_WINDOW_DAYS,
) -> dict:
    """Journal aggregates. The window is measured on ``created_at``.

    ``consistency`` is a fraction (entries per day, two decimals), unlike the
    whole-number percentages used elsewhere.
    """
    start = now - timedelta(days=days)
    recent = [e for e in entries if e.created_at >= start]
    total = len(recent)
    total_words = sum(e.word_count for e in recent)

    by_mood: Counter[str] = Counter(e.mood for e in recent if e.mood)
    return {
        "total_entries": total,
        "entries_by_mood": {mood: percent(count, total) for mood, count in by_mood.items()},
        "total_words": total_words,
        "average_words": int(round_half_up(total_words / total)) if total else 0,
        "consistency": round_half_up(total / days, 2) if total else 0,
    }


def habit_stats(
    habits: Sequence[Habit],
    completions: Sequence[HabitCompletion],
    today: date,
) -> dict:
    done = [c for c in completions if c.completed]
    return {
        "total_habits": len(habits),
        "active_habits": sum(1 for h in habits if h.is_active),
        "total_completions": len(done),
        "today_completions": sum(1 for c in done if c.date == today),
        "completion_rate": percent(len(done), len(habits)),
        "best_streak": max((h.longest_streak for h in habits), default=0),
    }


def user_summary(
    user: User,
    checkins: Sequence[CheckIn],
    moods: Sequence[MoodEntry],
    today: date,
) -> dict:
    return {
        "user": user.stats,
        "streak": effective_current_streak(user.streak, today),
        "longest_streak": user.streak.longest,
        "total_points": user.stats.total_points,
        "achievements": user.stats.achievements_count,
        "today_checkin": any(c.date == today for c in checkins),
        "today_mood": any(m.date == today for m in moods),
    }


def checkin_calendar(checkins: Sequence[CheckIn], year: int, month: int) -> dict[str, dict[str, str]]:
    """Map each check-in date of ``year``-``month`` to its categorical values."""
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    return {
        c.date.isoformat(): {"mood": c.mood, "sleep": c.sleep, "food": c.food, "focus": c.focus}
        for c in checkins
        if first <= c.date <= last
    }
