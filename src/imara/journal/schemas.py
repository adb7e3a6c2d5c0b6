"""Journal request/response schemas."""

from pydantic import Field

from imara.db.base import CamelModel
from imara.db.models import JournalEntry
from imara.schemas import Pagination, RequiredText, SuccessResponse


class JournalRequest(CamelModel):
    content: RequiredText = Field(..., max_length=20000)
    mood: str = ""
    tags: list[str] = Field(default_factory=list)
    prompt: str = ""


class JournalEntryResponse(SuccessResponse):
    entry: JournalEntry


class JournalListResponse(SuccessResponse):
    entries: list[JournalEntry]
    pagination: Pagination


class JournalStats(CamelModel):
    total_entries: int
    entries_by_mood: dict[str, int]
    total_words: int
    average_words: int
    consistency: float


class JournalStatsResponse(SuccessResponse):
    stats: JournalStats


class PromptsResponse(SuccessResponse):
    prompts: list[str]
