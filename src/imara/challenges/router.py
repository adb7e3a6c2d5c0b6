"""Challenge API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from imara.auth.dependencies import get_current_user
from imara.challenges.schemas import (
    ChallengeListResponse,
    JoinChallengeResponse,
    UserChallengeListResponse,
)
from imara.challenges.service import active_challenges, join_challenge, user_challenges
from imara.database import StateManager, get_store
from imara.db.models import User

router = APIRouter(prefix="/api/challenges", tags=["Challenges"])


@router.get("", response_model=ChallengeListResponse)
async def list_challenges(store: StateManager = Depends(get_store)) -> ChallengeListResponse:
    return ChallengeListResponse(challenges=active_challenges(store.state))


@router.get("/user", response_model=UserChallengeListResponse)
async def list_user_challenges(
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> UserChallengeListResponse:
    """Challenges the caller joined, each with its catalog entry."""
    return UserChallengeListResponse(challenges=user_challenges(store.state, user.id))


@router.post("/{challenge_id}/join", response_model=JoinChallengeResponse, status_code=status.HTTP_201_CREATED)
async def join(
    challenge_id: str,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> JoinChallengeResponse:
    async with store.mutation() as state:
        participation = join_challenge(state, user, challenge_id)
    return JoinChallengeResponse(user_challenge=participation)
