"""Self-care planner and reminder schemas."""

from pydantic import Field, field_validator

from imara.db.base import CamelModel
from imara.db.models import Reminder, SelfCareActivity
from imara.schemas import RequiredText, SuccessResponse

TIME_PATTERN = r"^\d{2}:\d{2}$"


class SelfCareRequest(CamelModel):
    title: RequiredText = Field(..., max_length=100)
    description: str = ""
    category: str | None = None
    day_of_week: int = Field(..., ge=0, le=6)
    time: str = Field(..., pattern=TIME_PATTERN)
    duration: int = Field(15, ge=1, le=1440)


class SelfCareResponse(SuccessResponse):
    activity: SelfCareActivity


class SelfCareListResponse(SuccessResponse):
    activities: list[SelfCareActivity]


class ReminderRequest(CamelModel):
    title: RequiredText = Field(..., max_length=100)
    message: RequiredText = Field(..., max_length=500)
    time: str = Field(..., pattern=TIME_PATTERN)
    days_of_week: list[int] | None = None

    @field_validator("days_of_week")
    @classmethod
    def check_days(cls, v: list[int] | None) -> list[int] | None:
        if v is None:
            return v
        if any(day < 0 or day > 6 for day in v):
            msg = "days must be between 0 and 6"
            raise ValueError(msg)
        return sorted(set(v))


class ReminderResponse(SuccessResponse):
    reminder: Reminder


class ReminderListResponse(SuccessResponse):
    reminders: list[Reminder]
