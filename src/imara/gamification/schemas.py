"""Achievement response schemas."""

from imara.db.models import Achievement, UserAchievement
from imara.schemas import SuccessResponse


class UserAchievementDetail(UserAchievement):
    achievement: Achievement | None = None


class AchievementListResponse(SuccessResponse):
    achievements: list[Achievement]


class UserAchievementListResponse(SuccessResponse):
    achievements: list[UserAchievementDetail]
