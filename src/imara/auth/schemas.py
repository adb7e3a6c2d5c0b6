"""Request/response schemas for authentication and account endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from imara.db.base import CamelModel
from imara.db.models import Streak, UserSettings, UserStats
from imara.schemas import RequiredText, SuccessResponse

# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class RegisterRequest(CamelModel):
    """Email registration request."""

    email: EmailStr
    username: RequiredText = Field(..., max_length=32)
    name: RequiredText = Field(..., max_length=64)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower().strip()

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return v.strip()


class LoginRequest(CamelModel):
    """Login with email + password."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower().strip()


class ProfileUpdateRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=64)
    avatar: str | None = None
    bio: str | None = Field(None, max_length=500)


class SettingsUpdateRequest(CamelModel):
    notifications: bool | None = None
    email_notifications: bool | None = None
    theme: str | None = None
    accent_color: str | None = None
    daily_reminder_time: str | None = Field(None, pattern=r"^\d{2}:\d{2}$")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class UserResponse(CamelModel):
    """Public view of a user: everything but the credential hash."""

    id: str
    email: str
    username: str
    name: str
    avatar: str | None = None
    bio: str = ""
    streak: Streak
    stats: UserStats
    settings: UserSettings
    created_at: datetime
    last_active: datetime


class TokenResponse(SuccessResponse):
    token: str
    user: UserResponse


class MeResponse(SuccessResponse):
    user: UserResponse


class SettingsResponse(SuccessResponse):
    settings: UserSettings


class AnonymousNameResponse(SuccessResponse):
    anonymous_name: str
