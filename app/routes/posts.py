"""Post and comment endpoints.

GET    /posts
GET    /posts/{post_id}
POST   /posts/{post_id}/comments
PUT    /posts/{post_id}/comments/{comment_id}
DELETE /posts/{post_id}/comments/{comment_id}
POST   /posts/{post_id}/comments/{comment_id}/toggleLike

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter

from app.routes.dependencies import CurrentIdentity
from app.schemas import (
    CommentOut,
    CreateCommentRequest,
    MessageResponse,
    PostDetail,
    PostSummary,
    ToggleLikeResponse,
    UpdateCommentRequest,
    UpdatedComment,
)
from app.services import comments as comment_service
from app.services import posts as post_service

router = APIRouter()


@router.get("", response_model=list[PostSummary])
async def list_posts(identity: CurrentIdentity) -> list[PostSummary]:
    """List posts as {id, title} in insertion order."""
    return await post_service.list_posts()


@router.get("/{post_id}", response_model=PostDetail)
async def get_post(post_id: str, identity: CurrentIdentity) -> PostDetail:
    """Get a post with its flat comment list (newest first)."""
    return await post_service.get_post_detail(post_id, identity)


@router.post("/{post_id}/comments", response_model=CommentOut)
async def create_comment(
    post_id: str,
    identity: CurrentIdentity,
    request: CreateCommentRequest | None = None,
) -> CommentOut:
    """Create a top-level comment or a reply (parentId).

    A missing body is treated as a missing message.
    """
    return await comment_service.create_comment(
        post_id,
        identity,
        message=request.message if request else None,
        parent_id=request.parent_id if request else None,
    )


@router.put("/{post_id}/comments/{comment_id}", response_model=UpdatedComment)
async def update_comment(
    post_id: str,
    comment_id: str,
    identity: CurrentIdentity,
    request: UpdateCommentRequest | None = None,
) -> UpdatedComment:
    message = request.message if request else None
    return await comment_service.update_comment(post_id, comment_id, identity, message)


@router.delete("/{post_id}/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(post_id: str, comment_id: str, identity: CurrentIdentity) -> MessageResponse:
    return await comment_service.delete_comment(post_id, comment_id, identity)


@router.post(
    "/{post_id}/comments/{comment_id}/toggleLike",
    response_model=ToggleLikeResponse,
)
async def toggle_like(post_id: str, comment_id: str, identity: CurrentIdentity) -> ToggleLikeResponse:
    """Add the like if absent, remove it if present."""
    added = await comment_service.toggle_like(post_id, comment_id, identity)
    return ToggleLikeResponse(add_like=added)
