"""Journal entries and writing prompts."""

from __future__ import annotations

import random
from datetime import date

import structlog

from imara.db.models import AppState, JournalEntry, User
from imara.gamification.achievement_service import check_journal_achievements
from imara.journal.schemas import JournalRequest

logger = structlog.get_logger()

JOURNAL_PROMPTS = (
    "What's one small thing you're grateful for today?",
    "What challenged you today, and how did you handle it?",
    "What's something you learned about yourself today?",
    "How did you show yourself kindness today?",
    "What moment brought you peace today?",
    "What's a boundary you honored today?",
    "What's one step you took toward your goals today?",
    "How did you recharge your energy today?",
    "What made you smile today?",
    "What would you tell your past self about today?",
)

PROMPTS_PER_REQUEST = 5


def count_words(content: str) -> int:
    return len(content.split())


def create_entry(state: AppState, user: User, body: JournalRequest, today: date) -> JournalEntry:
    """Store a journal entry and award ``first_journal`` on the first one."""
    entry = JournalEntry(
        user_id=user.id,
        content=body.content,
        mood=body.mood,
        tags=body.tags,
        prompt=body.prompt,
        date=today,
        word_count=count_words(body.content),
    )
    state.journals.append(entry)
    user.stats.total_journal_entries += 1
    granted = check_journal_achievements(state, user)

    logger.info("journal_entry_created", user_id=user.id, word_count=entry.word_count, achievements=granted)
    return entry


def user_entries(state: AppState, user_id: str) -> list[JournalEntry]:
    return [j for j in state.journals if j.user_id == user_id]


def list_entries(
    state: AppState,
    user_id: str,
    *,
    start_date: date | None = None,
    end_date: date | None = None,
    mood: str | None = None,
    tag: str | None = None,
) -> list[JournalEntry]:
    """Filtered entries, most recently written first."""
    result = []
    for entry in reversed(user_entries(state, user_id)):
        if start_date is not None and entry.date < start_date:
            continue
        if end_date is not None and entry.date > end_date:
            continue
        if mood and entry.mood != mood:
            continue
        if tag and tag not in entry.tags:
            continue
        result.append(entry)
    result.sort(key=lambda e: e.created_at, reverse=True)
    return result


def random_prompts(count: int = PROMPTS_PER_REQUEST) -> list[str]:
    return random.sample(JOURNAL_PROMPTS, count)
