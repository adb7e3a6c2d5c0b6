"""Per-user appearance preferences."""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from imara.auth.service import get_theme
from imara.db.models import AppState, Theme, User
from imara.themes.schemas import ThemeUpdateRequest, ThemeView

logger = structlog.get_logger()


def theme_view(state: AppState, user_id: str) -> ThemeView:
    theme = get_theme(state, user_id)
    if theme is None:
        return ThemeView()
    return ThemeView.model_validate(theme, from_attributes=True)


def upsert_theme(state: AppState, user: User, body: ThemeUpdateRequest) -> Theme:
    """Create or update the theme record and mirror theme/accent onto user settings."""
    theme = get_theme(state, user.id)
    if theme is None:
        theme = Theme(user_id=user.id)
        state.themes.append(theme)

    if body.theme:
        theme.theme = body.theme
        user.settings.theme = body.theme
    if body.accent_color:
        theme.accent_color = body.accent_color
        user.settings.accent_color = body.accent_color
    if body.font_size:
        theme.font_size = body.font_size
    if body.reduced_motion is not None:
        theme.reduced_motion = body.reduced_motion
    theme.last_updated = datetime.now(timezone.utc)

    logger.info("theme_updated", user_id=user.id, theme=theme.theme)
    return theme
