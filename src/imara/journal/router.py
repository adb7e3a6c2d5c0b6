"""Journal API endpoints."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from imara.auth.dependencies import get_current_user
from imara.config import get_settings
from imara.database import StateManager, get_store
from imara.db.models import User
from imara.journal.schemas import (
    JournalEntryResponse,
    JournalListResponse,
    JournalRequest,
    JournalStats,
    JournalStatsResponse,
    PromptsResponse,
)
from imara.journal.service import create_entry, list_entries, random_prompts, user_entries
from imara.pagination import paginate
from imara.stats.aggregation import journal_stats
from imara.timeutils import now, today

router = APIRouter(prefix="/api/journal", tags=["Journal"])


@router.post("", response_model=JournalEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_journal_entry(
    body: JournalRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> JournalEntryResponse:
    async with store.mutation() as state:
        entry = create_entry(state, user, body, today())
    return JournalEntryResponse(entry=entry)


@router.get("", response_model=JournalListResponse)
async def get_journal_entries(
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    mood: str | None = Query(None),
    tag: str | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> JournalListResponse:
    """List entries filtered by date range, mood and tag."""
    entries = list_entries(
        store.state,
        user.id,
        start_date=start_date,
        end_date=end_date,
        mood=mood,
        tag=tag,
    )
    items, pagination = paginate(entries, page, limit)
    return JournalListResponse(entries=items, pagination=pagination)


@router.get("/stats", response_model=JournalStatsResponse)
async def get_journal_stats(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> JournalStatsResponse:
    stats = journal_stats(user_entries(store.state, user.id), now(), get_settings().stats_window_days)
    return JournalStatsResponse(stats=JournalStats(**stats))


@router.get("/prompts", response_model=PromptsResponse)
async def get_prompts() -> PromptsResponse:
    """Five writing prompts in random order."""
    return PromptsResponse(prompts=random_prompts())
