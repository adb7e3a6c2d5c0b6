"""Community API endpoints. Reading is public, writing needs a token."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from imara.auth.dependencies import get_current_user
from imara.community.schemas import (
    LikeResponse,
    PostListResponse,
    PostRequest,
    PostResponse,
    ReplyListResponse,
    ReplyRequest,
    ReplyResponse,
)
from imara.community.service import add_reply, create_post, list_posts, list_replies, toggle_like
from imara.database import StateManager, get_store
from imara.db.models import User
from imara.pagination import paginate

router = APIRouter(prefix="/api/community", tags=["Community"])


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


@router.post("/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_community_post(
    body: PostRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> PostResponse:
    """Publish a post, under a random anonymous name unless ``isAnonymous`` is false."""
    async with store.mutation() as state:
        post = create_post(state, user, body)
    return PostResponse(post=post)


@router.get("/posts", response_model=PostListResponse)
async def get_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=100),
    store: StateManager = Depends(get_store),
) -> PostListResponse:
    items, pagination = paginate(list_posts(store.state), page, limit)
    return PostListResponse(posts=items, pagination=pagination)


@router.post("/posts/{post_id}/like", response_model=LikeResponse)
async def like_post(
    post_id: str,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> LikeResponse:
    """Toggle the caller's like on a post."""
    async with store.mutation() as state:
        liked, count = toggle_like(state, user, post_id)
    return LikeResponse(liked=liked, like_count=count)


# ---------------------------------------------------------------------------
# Replies
# ---------------------------------------------------------------------------


@router.post("/posts/{post_id}/replies", response_model=ReplyResponse, status_code=status.HTTP_201_CREATED)
async def reply_to_post(
    post_id: str,
    body: ReplyRequest,
    user: User = Depends(get_current_user),
    store: StateManager = Depends(get_store),
) -> ReplyResponse:
    async with store.mutation() as state:
        reply = add_reply(state, user, post_id, body)
    return ReplyResponse(reply=reply)


@router.get("/posts/{post_id}/replies", response_model=ReplyListResponse)
async def get_replies(
    post_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=100),
    store: StateManager = Depends(get_store),
) -> ReplyListResponse:
    items, pagination = paginate(list_replies(store.state, post_id), page, limit)
    return ReplyListResponse(replies=items, pagination=pagination)
