"""Community posts, likes and replies."""

from __future__ import annotations

import random
from datetime import datetime, timezone

import structlog

from imara.community.schemas import PostRequest, ReplyRequest
from imara.db.models import AppState, CommunityPost, PostReply, User
from imara.errors import NotFoundError
from imara.gamification.achievement_service import check_post_achievements

logger = structlog.get_logger()

ANONYMOUS_ADJECTIVES = ("Calm", "Quiet", "Gentle", "Steady", "Brave", "Kind", "Wise", "Patient")
ANONYMOUS_NOUNS = ("Oak", "River", "Mountain", "Star", "Cloud", "Stone", "Wind", "Light")


def anonymous_name() -> str:
    """Random display name of the form "Adjective Noun"."""
    return f"{random.choice(ANONYMOUS_ADJECTIVES)} {random.choice(ANONYMOUS_NOUNS)}"


def _author_name(user: User, is_anonymous: bool) -> str:
    return anonymous_name() if is_anonymous else user.name


def get_post(state: AppState, post_id: str) -> CommunityPost:
    """
    Raises:
        NotFoundError: If no post has this id.
    """
    post = next((p for p in state.community_posts if p.id == post_id), None)
    if post is None:
        msg = "Post not found"
        raise NotFoundError(msg)
    return post


def create_post(state: AppState, user: User, body: PostRequest) -> CommunityPost:
    post = CommunityPost(
        user_id=user.id,
        content=body.content,
        author_name=_author_name(user, body.is_anonymous),
        is_anonymous=body.is_anonymous,
    )
    state.community_posts.append(post)
    granted = check_post_achievements(state, user)
    logger.info("post_created", user_id=user.id, post_id=post.id, achievements=granted)
    return post


def list_posts(state: AppState) -> list[CommunityPost]:
    """All posts, newest first."""
    return sorted(reversed(state.community_posts), key=lambda p: p.created_at, reverse=True)


def toggle_like(state: AppState, user: User, post_id: str) -> tuple[bool, int]:
    """Add or remove the user's like. Returns (liked, like count)."""
    post = get_post(state, post_id)
    if user.id in post.likes:
        post.likes.remove(user.id)
        liked = False
    else:
        post.likes.append(user.id)
        liked = True
    post.updated_at = datetime.now(timezone.utc)
    return liked, len(post.likes)


def add_reply(state: AppState, user: User, post_id: str, body: ReplyRequest) -> PostReply:
    post = get_post(state, post_id)
    reply = PostReply(
        post_id=post.id,
        user_id=user.id,
        content=body.content,
        author_name=_author_name(user, body.is_anonymous),
        is_anonymous=body.is_anonymous,
    )
    state.post_replies.append(reply)
    post.reply_count += 1
    post.updated_at = datetime.now(timezone.utc)
    logger.info("reply_created", user_id=user.id, post_id=post.id)
    return reply


def list_replies(state: AppState, post_id: str) -> list[PostReply]:
    """Replies to a post, oldest first."""
    return sorted((r for r in state.post_replies if r.post_id == post_id), key=lambda r: r.created_at)
