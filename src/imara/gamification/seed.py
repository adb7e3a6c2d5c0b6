"""Compiled-in catalog: 5 achievements and 2 challenges."""

from __future__ import annotations

import logging

from imara.db.models import Achievement, AppState, Challenge

logger = logging.getLogger(__name__)

ACHIEVEMENT_SEED_DATA: list[dict] = [
    {
        "id": "first_checkin",
        "title": "Getting Started",
        "description": "Complete your first daily check-in",
        "icon": "\U0001f3af",
        "points": 10,
        "category": "consistency",
        "color": "blue",
    },
    {
        "id": "streak_3",
        "title": "Three Day Streak",
        "description": "Check in for 3 consecutive days",
        "icon": "⚡",
        "points": 25,
        "category": "consistency",
        "color": "green",
    },
    {
        "id": "streak_7",
        "title": "Weekly Warrior",
        "description": "Check in for 7 consecutive days",
        "icon": "\U0001f4c5",
        "points": 50,
        "category": "consistency",
        "color": "purple",
    },
    {
        "id": "first_journal",
        "title": "Reflective Soul",
        "description": "Write your first journal entry",
        "icon": "\U0001f4d6",
        "points": 15,
        "category": "awareness",
        "color": "amber",
    },
    {
        "id": "first_post",
        "title": "Storyteller",
        "description": "Share your first community post",
        "icon": "\U0001f4ac",
        "points": 20,
        "category": "community",
        "color": "pink",
    },
]

CHALLENGE_SEED_DATA: list[dict] = [
    {
        "id": "hydration_7",
        "title": "7-Day Hydration Challenge",
        "description": "Drink 8 glasses of water daily for a week",
        "category": "wellness",
        "duration": 7,
        "points": 50,
        "icon": "\U0001f4a7",
        "color": "blue",
        "is_active": True,
    },
    {
        "id": "gratitude_week",
        "title": "Gratitude Week",
        "description": "Share one thing you're grateful for each day",
        "category": "mindfulness",
        "duration": 7,
        "points": 40,
        "icon": "\U0001f64f",
        "color": "green",
        "is_active": True,
    },
]


def seed_catalog(state: AppState) -> int:
    """Upsert the catalog into ``state`` by id. Returns number of entries seeded.

    Grants and user challenge records are never touched.
    """
    seeded = 0
    achievements = {a.id: i for i, a in enumerate(state.achievements)}
    for data in ACHIEVEMENT_SEED_DATA:
        achievement = Achievement(**data)
        if achievement.id in achievements:
            state.achievements[achievements[achievement.id]] = achievement
        else:
            state.achievements.append(achievement)
        seeded += 1

    challenges = {c.id: i for i, c in enumerate(state.challenges)}
    for data in CHALLENGE_SEED_DATA:
        challenge = Challenge(**data)
        if challenge.id in challenges:
            state.challenges[challenges[challenge.id]] = challenge
        else:
            state.challenges.append(challenge)
        seeded += 1

    logger.info("catalog_seeded", extra={"entries": seeded})
    return seeded


def default_state() -> AppState:
    """Fresh state: empty collections plus the catalog."""
    state = AppState()
    seed_catalog(state)
    return state
