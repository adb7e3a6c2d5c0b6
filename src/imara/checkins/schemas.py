"""Check-in request/response schemas."""

from pydantic import Field

from imara.db.base import CamelModel
from imara.db.models import CheckIn
from imara.schemas import Pagination, RequiredText, SuccessResponse


class CheckInRequest(CamelModel):
    sleep: RequiredText
    food: RequiredText
    focus: RequiredText
    mood: RequiredText
    notes: str = Field("", max_length=2000)
    tags: list[str] = Field(default_factory=list)


class CheckInResponse(SuccessResponse):
    check_in: CheckIn


class TodayCheckInResponse(SuccessResponse):
    check_in: CheckIn | None = None
    has_checked_in_today: bool


class CheckInListResponse(SuccessResponse):
    checkins: list[CheckIn]
    pagination: Pagination


class CheckInStats(CamelModel):
    total: int
    by_mood: dict[str, int]
    by_sleep: dict[str, int]
    by_food: dict[str, int]
    by_focus: dict[str, int]
    streak: int
    consistency: int


class CheckInStatsResponse(SuccessResponse):
    stats: CheckInStats


class CalendarDay(CamelModel):
    mood: str
    sleep: str
    food: str
    focus: str


class CalendarResponse(SuccessResponse):
    year: int
    month: int
    data: dict[str, CalendarDay]
