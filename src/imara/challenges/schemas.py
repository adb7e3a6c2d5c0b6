"""Challenge schemas."""

from imara.db.models import Challenge, UserChallenge
from imara.schemas import SuccessResponse


class UserChallengeDetail(UserChallenge):
    """A participation record with its catalog entry embedded."""

    challenge: Challenge | None = None


class ChallengeListResponse(SuccessResponse):
    challenges: list[Challenge]


class JoinChallengeResponse(SuccessResponse):
    user_challenge: UserChallenge


class UserChallengeListResponse(SuccessResponse):
    challenges: list[UserChallengeDetail]
