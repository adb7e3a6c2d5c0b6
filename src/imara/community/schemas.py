"""Community board schemas."""

from pydantic import Field

from imara.db.base import CamelModel
from imara.db.models import CommunityPost, PostReply
from imara.schemas import Pagination, RequiredText, SuccessResponse


class PostRequest(CamelModel):
    content: RequiredText = Field(..., max_length=5000)
    is_anonymous: bool = True


class ReplyRequest(CamelModel):
    content: RequiredText = Field(..., max_length=2000)
    is_anonymous: bool = True


class PostResponse(SuccessResponse):
    post: CommunityPost


class PostListResponse(SuccessResponse):
    posts: list[CommunityPost]
    pagination: Pagination


class LikeResponse(SuccessResponse):
    liked: bool
    like_count: int


class ReplyResponse(SuccessResponse):
    reply: PostReply


class ReplyListResponse(SuccessResponse):
    replies: list[PostReply]
    pagination: Pagination
