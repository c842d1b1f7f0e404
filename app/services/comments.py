"""Comment service: create, update, delete and like toggling.

Mutations are single conditional statements so there is no window between
an ownership/presence check and the write:
- update: UPDATE ... WHERE id AND post_id AND user_id RETURNING message
- delete: DELETE ... WHERE id AND post_id AND user_id
- toggle like: DELETE the (user, comment) row; if nothing was deleted,
  INSERT ... ON CONFLICT DO NOTHING

When a conditional write matches nothing, a follow-up lookup decides
between NotFoundError and AuthorizationError.
"""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Comment, Like, Post
from app.schemas import CommentAuthor, CommentOut, MessageResponse, UpdatedComment
from app.services.errors import AuthorizationError, NotFoundError, ValidationError
from app.services.identity import Identity, require_user
from app.services.session import store_session

logger = logging.getLogger("uvicorn.error")

EDIT_FORBIDDEN = "You do not have permission to edit this message"
DELETE_FORBIDDEN = "You do not have permission to delete this message"


def _require_message(message: str | None) -> str:
    if message is None or message == "":
        raise ValidationError("Message is required")
    return message


async def create_comment(
    post_id: str,
    identity: Identity,
    message: str | None,
    parent_id: str | None = None,
) -> CommentOut:
    """Create a comment (or a reply when parent_id is set).

    Raises:
        ValidationError: Empty message, or parent on a different post.
        AuthorizationError: No stand-in user.
        NotFoundError: Unknown post.
    """
    message = _require_message(message)
    user_id = require_user(identity)
    parent_id = parent_id or None

    async with store_session() as session:
        if await session.get(Post, post_id) is None:
            raise NotFoundError(f"Post {post_id} not found")

        if parent_id is not None:
            parent_post_id = await session.scalar(
                select(Comment.post_id).where(Comment.id == parent_id)
            )
            if parent_post_id != post_id:
                raise ValidationError(
                    "Parent comment must belong to the same post",
                    detail={"parentId": parent_id},
                )

        comment = Comment(
            message=message,
            user_id=user_id,
            post_id=post_id,
            parent_id=parent_id,
        )
        session.add(comment)
        await session.flush()

    logger.info(f"Comment {comment.id} created on post {post_id}")
    return CommentOut(
        id=comment.id,
        message=comment.message,
        parent_id=comment.parent_id,
        created_at=comment.created_at,
        user=CommentAuthor(id=user_id, name=identity.name or ""),
        like_count=0,
        liked_by_me=False,
    )


async def update_comment(
    post_id: str,
    comment_id: str,
    identity: Identity,
    message: str | None,
) -> UpdatedComment:
    """Replace a comment's message. Only the owner may do this."""
    message = _require_message(message)
    user_id = require_user(identity)

    async with store_session() as session:
        result = await session.execute(
            update(Comment)
            .where(
                Comment.id == comment_id,
                Comment.post_id == post_id,
                Comment.user_id == user_id,
            )
            .values(message=message)
            .returning(Comment.message)
        )
        updated = result.scalar_one_or_none()
        if updated is None:
            await _raise_missing_or_forbidden(session, post_id, comment_id, EDIT_FORBIDDEN)

    return UpdatedComment(message=updated)


async def delete_comment(post_id: str, comment_id: str, identity: Identity) -> MessageResponse:
    """Delete a comment. Replies and likes go with it (ON DELETE CASCADE)."""
    user_id = require_user(identity)

    async with store_session() as session:
        result = await session.execute(
            delete(Comment).where(
                Comment.id == comment_id,
                Comment.post_id == post_id,
                Comment.user_id == user_id,
            )
        )
        if result.rowcount == 0:
            await _raise_missing_or_forbidden(session, post_id, comment_id, DELETE_FORBIDDEN)

    logger.info(f"Comment {comment_id} deleted from post {post_id}")
    return MessageResponse(message="Comment deleted successfully")


async def toggle_like(post_id: str, comment_id: str, identity: Identity) -> bool:
    """Flip the requesting user's like on a comment.

    Returns:
        True if a like was added, False if one was removed.
    """
    user_id = require_user(identity)

    async with store_session() as session:
        exists = await session.scalar(
            select(Comment.id).where(Comment.id == comment_id, Comment.post_id == post_id)
        )
        if exists is None:
            raise NotFoundError(f"Comment {comment_id} not found")

        removed = await session.execute(
            delete(Like).where(Like.user_id == user_id, Like.comment_id == comment_id)
        )
        if removed.rowcount:
            return False

        await session.execute(_insert_like_if_absent(session, user_id, comment_id))
        return True


def _insert_like_if_absent(session: AsyncSession, user_id: str, comment_id: str):
    """Build an INSERT for the like row that is a no-op on conflict."""
    values = {"user_id": user_id, "comment_id": comment_id}
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return pg_insert(Like).values(**values).on_conflict_do_nothing(
            index_elements=["user_id", "comment_id"]
        )
    if dialect == "sqlite":
        return sqlite_insert(Like).values(**values).on_conflict_do_nothing(
            index_elements=["user_id", "comment_id"]
        )
    return insert(Like).values(**values)


async def _raise_missing_or_forbidden(
    session: AsyncSession,
    post_id: str,
    comment_id: str,
    forbidden_message: str,
) -> None:
    exists = await session.scalar(
        select(Comment.id).where(Comment.id == comment_id, Comment.post_id == post_id)
    )
    if exists is None:
        raise NotFoundError(f"Comment {comment_id} not found")
    raise AuthorizationError(forbidden_message)
