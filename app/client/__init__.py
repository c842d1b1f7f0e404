"""Board client: HTTP API wrapper, comment tree building and text views."""

from app.client.api import BoardClient, BoardClientError
from app.client.tree import CommentNode, build_comment_tree, group_by_parent
from app.client.views import PostDetailView, PostListView

__all__ = [
    "BoardClient",
    "BoardClientError",
    "CommentNode",
    "build_comment_tree",
    "group_by_parent",
    "PostDetailView",
    "PostListView",
]
