"""Post model.

Posts are read-only from the API's perspective; `created_at` keeps the
insertion order used by the post list.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.user import generate_id
from app.stores.postgres import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """A post that comments hang off."""

    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    title: Mapped[str] = mapped_column(String(300))
    body: Mapped[str] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Post {self.title!r}>"
