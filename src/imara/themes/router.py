"""Theme endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from imara.auth.dependencies import get_current_user
from imara.database import StateManager, get_store
from imara.db.models import User
from imara.themes.schemas import ThemeResponse, ThemeUpdateRequest, ThemeView
from imara.themes.service import theme_view, upsert_theme

router = APIRouter(prefix="/api/theme", tags=["Theme"])


@router.get("", response_model=ThemeResponse)
async def get_theme(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> ThemeResponse:
    return ThemeResponse(theme=theme_view(store.state, user.id))


@router.put("", response_model=ThemeResponse)
async def update_theme(
    body: ThemeUpdateRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> ThemeResponse:
    async with store.mutation() as state:
        theme = upsert_theme(state, user, body)
    return ThemeResponse(theme=ThemeView.model_validate(theme, from_attributes=True))
