"""User model.

Users are created out of band (seed data) and never mutated by the API.
"""

from uuid import uuid4

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.stores.postgres import Base


def generate_id() -> str:
    """Generate unique row ID."""
    return str(uuid4())


class User(Base):
    """Board user."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(200), index=True)

    def __repr__(self) -> str:
        return f"<User {self.name}>"
