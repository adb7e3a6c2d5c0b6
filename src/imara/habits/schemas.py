"""Habit request/response schemas."""

import datetime as dt

from pydantic import Field

from imara.db.base import CamelModel
from imara.db.models import Habit
from imara.schemas import RequiredText, SuccessResponse


class HabitRequest(CamelModel):
    name: RequiredText = Field(..., max_length=100)
    emoji: str | None = None
    category: str | None = None
    frequency: str | None = None
    reminder_time: str | None = Field(None, pattern=r"^\d{2}:\d{2}$")


class HabitCompleteRequest(CamelModel):
    date: dt.date | None = None


class HabitResponse(SuccessResponse):
    habit: Habit


class HabitCompleteResponse(SuccessResponse):
    habit: Habit
    completed: bool


class HabitListResponse(SuccessResponse):
    habits: list[Habit]


class HabitStats(CamelModel):
    total_habits: int
    active_habits: int
    total_completions: int
    today_completions: int
    completion_rate: int
    best_streak: int


class HabitStatsResponse(SuccessResponse):
    stats: HabitStats
