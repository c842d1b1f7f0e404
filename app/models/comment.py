"""Comment model.

Comments form a tree through `parent_id`. A parent always belongs to the
same post. Deleting a comment cascades to its replies and likes at the
database level.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.post import utcnow
from app.models.user import generate_id
from app.stores.postgres import Base


class Comment(Base):
    """A comment (or reply) on a post."""

    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    message: Mapped[str] = mapped_column(Text)

    # Relations
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    post_id: Mapped[str] = mapped_column(ForeignKey("posts.id", ondelete="CASCADE"), index=True)
    parent_id: Mapped[str | None] = mapped_column(
        ForeignKey("comments.id", ondelete="CASCADE"),
        index=True,
    )

    # Timestamps (python-side so ordering keeps sub-second resolution on every backend)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"<Comment {self.id} post={self.post_id}>"
