"""FastAPI authentication dependencies."""

from __future__ import annotations

import jwt
import structlog
from fastapi import Depends, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from imara.auth.jwt import verify_token
from imara.database import StateManager, get_store
from imara.db.models import User
from imara.errors import AuthError

logger = structlog.get_logger()

_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
    store: StateManager = Depends(get_store),
) -> User:
    """
    Extract and verify the bearer token, return the live User from state.

    Raises AuthError (401) on a missing, invalid or expired token, or when
    the user no longer exists.
    """
    if credentials is None or not credentials.credentials:
        msg = "No token provided"
        raise AuthError(msg)

    try:
        payload = verify_token(credentials.credentials, expected_type="access")
    except jwt.InvalidTokenError as e:
        logger.info("auth_rejected", error=str(e))
        msg = "Invalid token"
        raise AuthError(msg) from e

    user = store.state.find_user(str(payload.get("sub", "")))
    if user is None:
        msg = "User not found"
        raise AuthError(msg)
    return user
