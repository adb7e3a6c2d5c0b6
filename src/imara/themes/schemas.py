"""Theme preference schemas."""

import datetime as dt

from imara.db.base import CamelModel
from imara.schemas import SuccessResponse


class ThemeUpdateRequest(CamelModel):
    theme: str | None = None
    accent_color: str | None = None
    font_size: str | None = None
    reduced_motion: bool | None = None


class ThemeView(CamelModel):
    """A stored theme record, or the defaults when the user never saved one."""

    id: str | None = None
    user_id: str | None = None
    theme: str = "light"
    accent_color: str = "amber"
    font_size: str = "medium"
    reduced_motion: bool = False
    last_updated: dt.datetime | None = None


class ThemeResponse(SuccessResponse):
    theme: ThemeView
