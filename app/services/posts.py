"""Post service: post list and post detail with its flat comment list.

Post list:
- Ordered by insertion (created_at ASC)
- Cached in Redis when available (posts are read-only through the API)

Post detail:
- Unknown post id -> NotFoundError (checked before reading comments)
- Comments ordered by created_at DESC, each with like count and likedByMe
"""

import logging

from redis.exceptions import RedisError
from sqlalchemy import func, select

from app.models import Comment, Like, Post, User
from app.schemas import CommentAuthor, CommentOut, PostDetail, PostSummary
from app.services.errors import NotFoundError
from app.services.identity import Identity
from app.services.session import store_session
from app.stores.redis import get_post_list_cache, set_post_list_cache

logger = logging.getLogger("uvicorn.error")


async def list_posts() -> list[PostSummary]:
    """Get all posts as {id, title}, oldest first."""
    cached = await _try_get_cached_posts()
    if cached is not None:
        return cached

    async with store_session() as session:
        result = await session.execute(
            select(Post.id, Post.title).order_by(Post.created_at.asc(), Post.id.asc())
        )
        posts = [PostSummary(id=row.id, title=row.title) for row in result]

    await _try_set_cached_posts(posts)
    return posts


async def get_post_detail(post_id: str, identity: Identity) -> PostDetail:
    """Get a post with its comments.

    Args:
        post_id: Post identifier.
        identity: Requesting identity (drives likedByMe).

    Returns:
        PostDetail with a flat comment list, newest first.

    Raises:
        NotFoundError: If the post does not exist.
    """
    async with store_session() as session:
        post = await session.get(Post, post_id)
        if post is None:
            raise NotFoundError(f"Post {post_id} not found")

        like_count = (
            select(func.count())
            .select_from(Like)
            .where(Like.comment_id == Comment.id)
            .correlate(Comment)
            .scalar_subquery()
        )
        rows = (
            await session.execute(
                select(Comment, User.name, like_count.label("like_count"))
                .join(User, User.id == Comment.user_id)
                .where(Comment.post_id == post_id)
                .order_by(Comment.created_at.desc(), Comment.id.desc())
            )
        ).all()

        liked_ids: set[str] = set()
        if identity.is_authenticated and rows:
            liked = await session.execute(
                select(Like.comment_id).where(
                    Like.user_id == identity.user_id,
                    Like.comment_id.in_([row.Comment.id for row in rows]),
                )
            )
            liked_ids = set(liked.scalars().all())

    comments = [
        CommentOut(
            id=row.Comment.id,
            message=row.Comment.message,
            parent_id=row.Comment.parent_id,
            created_at=row.Comment.created_at,
            user=CommentAuthor(id=row.Comment.user_id, name=row.name),
            like_count=row.like_count,
            liked_by_me=row.Comment.id in liked_ids,
        )
        for row in rows
    ]
    return PostDetail(id=post.id, title=post.title, body=post.body, comments=comments)


async def _try_get_cached_posts() -> list[PostSummary] | None:
    try:
        payload = await get_post_list_cache()
    except RuntimeError:
        # Redis not initialized (tests / minimal local env).
        return None
    except RedisError as e:
        logger.warning(f"Redis cache read failed: {e}")
        return None
    if not isinstance(payload, list):
        return None
    try:
        return [PostSummary(**item) for item in payload]
    except (TypeError, ValueError):
        return None


async def _try_set_cached_posts(posts: list[PostSummary]) -> None:
    try:
        await set_post_list_cache([p.model_dump() for p in posts])
    except RuntimeError:
        return
    except RedisError as e:
        logger.warning(f"Redis cache write failed: {e}")
