"""Mood entries. Append-only; several entries per day are allowed."""

from __future__ import annotations

from datetime import date

import structlog

from imara.db.models import AppState, MoodEntry, User
from imara.mood.schemas import MoodRequest

logger = structlog.get_logger()


def record_mood(state: AppState, user: User, body: MoodRequest, today: date) -> MoodEntry:
    entry = MoodEntry(
        user_id=user.id,
        mood=body.mood,
        intensity=body.intensity,
        notes=body.notes,
        triggers=body.triggers,
        date=today,
    )
    state.mood_entries.append(entry)
    user.stats.total_mood_entries += 1
    logger.info("mood_recorded", user_id=user.id, mood=entry.mood, intensity=entry.intensity)
    return entry


def user_moods(state: AppState, user_id: str) -> list[MoodEntry]:
    return [m for m in state.mood_entries if m.user_id == user_id]


def list_moods(
    state: AppState,
    user_id: str,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[MoodEntry]:
    """Entries in the optional inclusive range, newest day first."""
    result = [
        m
        for m in reversed(user_moods(state, user_id))
        if (start_date is None or m.date >= start_date) and (end_date is None or m.date <= end_date)
    ]
    result.sort(key=lambda m: (m.date, m.created_at), reverse=True)
    return result
