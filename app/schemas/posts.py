"""Schemas for the post and comment endpoints (/posts)."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


class PostSummary(BaseModel):
    """Entry in the post list."""

    id: str
    title: str


class CommentAuthor(BaseModel):
    id: str
    name: str


class CommentOut(BaseModel):
    """A comment as returned to the client (flat, with parent reference)."""

    id: str
    message: str
    parent_id: str | None = Field(alias="parentId", default=None)
    created_at: datetime = Field(alias="createdAt")
    user: CommentAuthor
    like_count: int = Field(alias="likeCount", ge=0, default=0)
    liked_by_me: bool = Field(alias="likedByMe", default=False)

    model_config = {"populate_by_name": True}

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; stored values are always UTC.
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)


class PostDetail(BaseModel):
    """Response payload for GET /posts/{id}.

    Comments are flat and ordered by creation time, newest first.
    """

    id: str
    title: str
    body: str
    comments: list[CommentOut] = Field(default_factory=list)


class CreateCommentRequest(BaseModel):
    """Request body for POST /posts/{id}/comments.

    `message` is optional at the schema level so a missing value yields the
    board's 400 response rather than a generic validation error.
    """

    message: str | None = None
    parent_id: str | None = Field(alias="parentId", default=None)

    model_config = {"populate_by_name": True}


class UpdateCommentRequest(BaseModel):
    message: str | None = None


class UpdatedComment(BaseModel):
    message: str


class MessageResponse(BaseModel):
    message: str


class ToggleLikeResponse(BaseModel):
    add_like: bool = Field(alias="addLike")

    model_config = {"populate_by_name": True}
