"""Dashboard summary schemas."""

from imara.db.base import CamelModel
from imara.db.models import UserStats
from imara.schemas import SuccessResponse


class UserSummary(CamelModel):
    user: UserStats
    streak: int
    longest_streak: int
    total_points: int
    achievements: int
    today_checkin: bool
    today_mood: bool


class UserSummaryResponse(SuccessResponse):
    stats: UserSummary
