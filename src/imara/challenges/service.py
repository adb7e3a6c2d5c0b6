"""Challenge catalog queries and participation."""

from __future__ import annotations

import structlog

from imara.challenges.schemas import UserChallengeDetail
from imara.db.models import AppState, Challenge, User, UserChallenge
from imara.errors import ConflictError, NotFoundError

logger = structlog.get_logger()


def active_challenges(state: AppState) -> list[Challenge]:
    return [c for c in state.challenges if c.is_active]


def join_challenge(state: AppState, user: User, challenge_id: str) -> UserChallenge:
    """
    Enrol the user in a challenge.

    Raises:
        NotFoundError: If the challenge does not exist.
        ConflictError: If the user already joined it.
    """
    challenge = next((c for c in state.challenges if c.id == challenge_id), None)
    if challenge is None:
        msg = "Challenge not found"
        raise NotFoundError(msg)

    if any(uc.user_id == user.id and uc.challenge_id == challenge_id for uc in state.user_challenges):
        msg = "Already joined this challenge"
        raise ConflictError(msg)

    participation = UserChallenge(user_id=user.id, challenge_id=challenge.id)
    state.user_challenges.append(participation)
    logger.info("challenge_joined", user_id=user.id, challenge_id=challenge.id)
    return participation


def user_challenges(state: AppState, user_id: str) -> list[UserChallengeDetail]:
    catalog = {c.id: c for c in state.challenges}
    return [
        UserChallengeDetail(**uc.model_dump(), challenge=catalog.get(uc.challenge_id))
        for uc in state.user_challenges
        if uc.user_id == user_id
    ]
