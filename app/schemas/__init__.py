"""Pydantic schemas for API request/response validation."""

from app.schemas.common import ErrorDetail, ErrorResponse
from app.schemas.posts import (
    CommentAuthor,
    CommentOut,
    CreateCommentRequest,
    MessageResponse,
    PostDetail,
    PostSummary,
    ToggleLikeResponse,
    UpdateCommentRequest,
    UpdatedComment,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "CommentAuthor",
    "CommentOut",
    "CreateCommentRequest",
    "MessageResponse",
    "PostDetail",
    "PostSummary",
    "ToggleLikeResponse",
    "UpdateCommentRequest",
    "UpdatedComment",
]
