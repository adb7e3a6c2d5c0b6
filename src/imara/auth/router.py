"""Authentication router: all /api/auth/* endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from imara.auth.dependencies import get_current_user
from imara.auth.jwt import create_access_token
from imara.auth.schemas import (
    AnonymousNameResponse,
    LoginRequest,
    MeResponse,
    ProfileUpdateRequest,
    RegisterRequest,
    SettingsResponse,
    SettingsUpdateRequest,
    TokenResponse,
    UserResponse,
)
from imara.auth.service import authenticate_user, register_user, update_profile, update_settings
from imara.community.service import anonymous_name
from imara.database import StateManager, get_store
from imara.db.models import User


router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def _user_response(user: User) -> UserResponse:
    """Build a UserResponse from a User model."""
    return UserResponse.model_validate(user, from_attributes=True)


def _token_response(user: User) -> TokenResponse:
    return TokenResponse(
        token=create_access_token(user.id, user.email),
        user=_user_response(user),
    )


# ---------------------------------------------------------------------------
# Registration / login
# ---------------------------------------------------------------------------


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    store: StateManager = Depends(get_store),
) -> TokenResponse:
    """Register with email + username + password."""
    async with store.mutation() as state:
        user = register_user(state, body)
    return _token_response(user)


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    store: StateManager = Depends(get_store),
) -> TokenResponse:
    """Log in with email + password."""
    async with store.mutation() as state:
        user = authenticate_user(state, body.email, body.password)
    return _token_response(user)


# ---------------------------------------------------------------------------
# Current user
# ---------------------------------------------------------------------------


@router.get("/me", response_model=MeResponse)
async def me(user: User = Depends(get_current_user)) -> MeResponse:
    return MeResponse(user=_user_response(user))


@router.put("/profile", response_model=MeResponse)
async def profile(
    body: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> MeResponse:
    """Update display name, avatar and bio."""
    async with store.mutation():
        update_profile(user, body)
    return MeResponse(user=_user_response(user))


@router.put("/settings", response_model=SettingsResponse)
async def settings(
    body: SettingsUpdateRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> SettingsResponse:
    """Update notification and appearance settings."""
    async with store.mutation() as state:
        updated = update_settings(state, user, body)
    return SettingsResponse(settings=updated)


@router.get("/anonymous-name", response_model=AnonymousNameResponse)
async def get_anonymous_name(_user: User = Depends(get_current_user)) -> AnonymousNameResponse:
    return AnonymousNameResponse(anonymous_name=anonymous_name())
