"""Achievement grants with duplicate prevention and point accounting."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from imara.db.models import Achievement, AppState, User, UserAchievement

logger = logging.getLogger(__name__)

# Streak value -> achievement id. Matched exactly: a grant happens only on the
# check-in that lands the streak on that value.
STREAK_ACHIEVEMENT_MAP = {
    3: "streak_3",
    7: "streak_7",
}


def get_achievement(state: AppState, achievement_id: str) -> Achievement | None:
    """Fetch a catalog entry by id."""
    return next((a for a in state.achievements if a.id == achievement_id), None)


def has_achievement(state: AppState, user_id: str, achievement_id: str) -> bool:
    """Check if the user already holds a grant for ``achievement_id``."""
    return any(
        ua.user_id == user_id and ua.achievement_id == achievement_id
        for ua in state.user_achievements
    )


def try_grant(
    state: AppState,
    user_id: str,
    achievement_id: str,
    now: datetime | None = None,
) -> UserAchievement | None:
    """Grant an achievement to a user.

    Returns the new grant, or None if already held or the achievement is unknown.
    On grant the user's total points and achievement count are increased.
    """
    achievement = get_achievement(state, achievement_id)
    if achievement is None:
        logger.warning("achievement_unknown", extra={"achievement_id": achievement_id})
        return None

    if has_achievement(state, user_id, achievement_id):
        return None

    grant = UserAchievement(
        user_id=user_id,
        achievement_id=achievement_id,
        unlocked_at=now or datetime.now(timezone.utc),
    )
    state.user_achievements.append(grant)

    user = state.find_user(user_id)
    if user is not None:
        user.stats.total_points += achievement.points
        user.stats.achievements_count += 1

    logger.info(
        "achievement_granted",
        extra={"user_id": user_id, "achievement_id": achievement_id, "points": achievement.points},
    )
    return grant


def check_checkin_achievements(state: AppState, user: User) -> list[str]:
    """Evaluate check-in thresholds right after a check-in was recorded."""
    granted: list[str] = []
    if user.stats.total_check_ins == 1 and try_grant(state, user.id, "first_checkin"):
        granted.append("first_checkin")

    achievement_id = STREAK_ACHIEVEMENT_MAP.get(user.streak.current)
    if achievement_id and try_grant(state, user.id, achievement_id):
        granted.append(achievement_id)
    return granted


def check_journal_achievements(state: AppState, user: User) -> list[str]:
    if user.stats.total_journal_entries == 1 and try_grant(state, user.id, "first_journal"):
        return ["first_journal"]
    return []


def check_post_achievements(state: AppState, user: User) -> list[str]:
    post_count = sum(1 for p in state.community_posts if p.user_id == user.id)
    if post_count == 1 and try_grant(state, user.id, "first_post"):
        return ["first_post"]
    return []
