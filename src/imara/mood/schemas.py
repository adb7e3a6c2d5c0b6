"""Mood tracking schemas."""

from pydantic import Field

from imara.db.base import CamelModel
from imara.db.models import MoodEntry
from imara.schemas import RequiredText, SuccessResponse


class MoodRequest(CamelModel):
    mood: RequiredText
    intensity: int = Field(5, ge=1, le=10)
    notes: str = ""
    triggers: list[str] = Field(default_factory=list)


class MoodEntryResponse(SuccessResponse):
    mood_entry: MoodEntry


class MoodListResponse(SuccessResponse):
    mood_entries: list[MoodEntry]


class MoodStats(CamelModel):
    total_entries: int
    mood_distribution: dict[str, int]
    average_intensity: int
    common_triggers: dict[str, int]
    consistency: int


class MoodStatsResponse(SuccessResponse):
    stats: MoodStats
