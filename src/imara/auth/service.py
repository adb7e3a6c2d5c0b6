"""
Account business logic.

Handles registration, credential checks, profile and settings updates.
Every function operates on the live ``AppState`` and must be called inside
``StateManager.mutation()`` when it changes anything.
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from imara.auth.password import (
    PasswordStrengthError,
    check_needs_rehash,
    hash_password,
    validate_password_strength,
    verify_password,
)
from imara.auth.schemas import ProfileUpdateRequest, RegisterRequest, SettingsUpdateRequest
from imara.db.models import AppState, Theme, User, UserSettings
from imara.errors import AuthError, ConflictError, ValidationError

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# User queries
# ---------------------------------------------------------------------------


def get_user_by_email(state: AppState, email: str) -> User | None:
    """Fetch a user by email (case-insensitive)."""
    email = email.lower()
    return next((u for u in state.users if u.email.lower() == email), None)


def get_user_by_username(state: AppState, username: str) -> User | None:
    """Fetch a user by username (case-insensitive)."""
    username = username.lower()
    return next((u for u in state.users if u.username.lower() == username), None)


def get_theme(state: AppState, user_id: str) -> Theme | None:
    return next((t for t in state.themes if t.user_id == user_id), None)


# ---------------------------------------------------------------------------
# Registration / login
# ---------------------------------------------------------------------------


def register_user(state: AppState, body: RegisterRequest) -> User:
    """
    Create a user and their default theme record.

    Raises:
        ValidationError: If the password is too weak.
        ConflictError: If the email or username is already taken.
    """
    try:
        validate_password_strength(body.password)
    except PasswordStrengthError as e:
        raise ValidationError(str(e)) from e

    if get_user_by_email(state, body.email) is not None:
        msg = "Email already registered"
        raise ConflictError(msg)
    if get_user_by_username(state, body.username) is not None:
        msg = "Username already taken"
        raise ConflictError(msg)

    user = User(
        email=body.email,
        username=body.username,
        name=body.name,
        password_hash=hash_password(body.password),
    )
    state.users.append(user)
    state.themes.append(Theme(user_id=user.id))
    logger.info("user_registered", user_id=user.id, username=user.username)
    return user


def authenticate_user(state: AppState, email: str, password: str) -> User:
    """
    Check email + password and touch ``last_active``.

    Raises:
        AuthError: On unknown email or wrong password (same message for both).
    """
    user = get_user_by_email(state, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("login_failed", email=email)
        msg = "Invalid credentials"
        raise AuthError(msg)

    if check_needs_rehash(user.password_hash):
        user.password_hash = hash_password(password)

    user.last_active = datetime.now(timezone.utc)
    logger.info("user_logged_in", user_id=user.id)
    return user


# ---------------------------------------------------------------------------
# Profile / settings
# ---------------------------------------------------------------------------


def update_profile(user: User, body: ProfileUpdateRequest) -> User:
    if body.name:
        user.name = body.name
    if body.avatar is not None:
        user.avatar = body.avatar
    if body.bio is not None:
        user.bio = body.bio
    return user


def update_settings(state: AppState, user: User, body: SettingsUpdateRequest) -> UserSettings:
    """Apply the provided settings and mirror theme/accent onto the theme record."""
    settings = user.settings
    if body.notifications is not None:
        settings.notifications = body.notifications
    if body.email_notifications is not None:
        settings.email_notifications = body.email_notifications
    if body.theme:
        settings.theme = body.theme
    if body.accent_color:
        settings.accent_color = body.accent_color
    if body.daily_reminder_time:
        settings.daily_reminder_time = body.daily_reminder_time

    theme = get_theme(state, user.id)
    if theme is not None:
        if body.theme:
            theme.theme = body.theme
        if body.accent_color:
            theme.accent_color = body.accent_color
        theme.last_updated = datetime.now(timezone.utc)
    return settings
