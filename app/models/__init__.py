"""SQLAlchemy ORM models.

Models represent database tables:
- users: Board users (seeded)
- posts: Read-only posts
- comments: Comment tree per post (parent_id)
- likes: (user, comment) like rows
"""

from app.models.user import User
from app.models.post import Post
from app.models.comment import Comment
from app.models.like import Like

__all__ = ["User", "Post", "Comment", "Like"]
