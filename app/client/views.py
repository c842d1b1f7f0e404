"""Text views for the board.

PostListView lists posts as links. PostDetailView holds the post and its
flat comment list, rebuilds the comment tree for rendering, and applies each
action's result to local state after the API call succeeds:
- reply/create: new comment is prepended
- edit: message replaced
- delete: comment and its replies removed
- like: likeCount +/- 1 and likedByMe flipped

Errors are not differentiated: `error` holds the server's message string.
"""

from typing import Any

from app.client.api import BoardClient, BoardClientError
from app.client.tree import CommentNode, build_comment_tree, group_by_parent


INDENT = "    "


class PostListView:
    """List of posts linking to their detail views."""

    def __init__(self, client: BoardClient):
        self.client = client
        self.posts: list[dict[str, Any]] = []
        self.error: str | None = None

    async def load(self) -> None:
        try:
            self.posts = await self.client.list_posts()
            self.error = None
        except BoardClientError as e:
            self.error = e.message

    def render(self) -> str:
        if self.error:
            return f"Error: {self.error}"
        return "\n".join(f"- {post['title']} (/posts/{post['id']})" for post in self.posts)


class PostDetailView:
    """A post with its nested comment thread."""

    def __init__(self, client: BoardClient, post_id: str):
        self.client = client
        self.post_id = post_id
        self.post: dict[str, Any] | None = None
        self.comments: list[dict[str, Any]] = []
        self.error: str | None = None

    async def load(self) -> None:
        try:
            post = await self.client.get_post(self.post_id)
        except BoardClientError as e:
            self.error = e.message
            return
        self.comments = list(post.get("comments") or [])
        self.post = {k: v for k, v in post.items() if k != "comments"}
        self.error = None

    @property
    def root_comments(self) -> list[CommentNode]:
        return build_comment_tree(self.comments)

    def get_replies(self, parent_id: str) -> list[dict[str, Any]]:
        """Direct replies to a comment, in display order."""
        return group_by_parent(self.comments).get(parent_id, [])

    async def create_comment(self, message: str, parent_id: str | None = None) -> dict[str, Any] | None:
        """Post a comment (a reply when parent_id is given)."""
        try:
            comment = await self.client.create_comment(self.post_id, message, parent_id)
        except BoardClientError as e:
            self.error = e.message
            return None
        self.comments.insert(0, comment)
        self.error = None
        return comment

    async def update_comment(self, comment_id: str, message: str) -> bool:
        try:
            updated = await self.client.update_comment(self.post_id, comment_id, message)
        except BoardClientError as e:
            self.error = e.message
            return False
        for comment in self.comments:
            if comment["id"] == comment_id:
                comment["message"] = updated["message"]
        self.error = None
        return True

    async def delete_comment(self, comment_id: str) -> bool:
        try:
            await self.client.delete_comment(self.post_id, comment_id)
        except BoardClientError as e:
            self.error = e.message
            return False
        removed = self._subtree_ids(comment_id)
        self.comments = [c for c in self.comments if c["id"] not in removed]
        self.error = None
        return True

    async def toggle_like(self, comment_id: str) -> bool | None:
        """Toggle the like; returns the server's addLike or None on error."""
        try:
            result = await self.client.toggle_comment_like(self.post_id, comment_id)
        except BoardClientError as e:
            self.error = e.message
            return None
        add_like = bool(result["addLike"])
        for comment in self.comments:
            if comment["id"] != comment_id:
                continue
            comment["likedByMe"] = add_like
            comment["likeCount"] = max(0, comment.get("likeCount", 0) + (1 if add_like else -1))
        self.error = None
        return add_like

    def _subtree_ids(self, comment_id: str) -> set[str]:
        groups = group_by_parent(self.comments)
        ids: set[str] = set()
        pending = [comment_id]
        while pending:
            current = pending.pop()
            if current in ids:
                continue
            ids.add(current)
            pending.extend(child["id"] for child in groups.get(current, []))
        return ids

    def render(self) -> str:
        lines: list[str] = []
        if self.error:
            lines.append(f"Error: {self.error}")
        if self.post is None:
            return "\n".join(lines) if lines else "Loading..."

        lines.append(self.post["title"])
        lines.append("")
        lines.append(self.post["body"])
        lines.append("")
        lines.append("Comments")
        stack = [(node, 0) for node in reversed(self.root_comments)]
        while stack:
            node, depth = stack.pop()
            lines.append(_render_comment(node.comment, depth))
            stack.extend((child, depth + 1) for child in reversed(node.children))
        return "\n".join(lines)


def _render_comment(comment: dict[str, Any], depth: int) -> str:
    heart = "♥" if comment.get("likedByMe") else "♡"
    author = (comment.get("user") or {}).get("name", "?")
    return (
        f"{INDENT * depth}{author} ({comment.get('createdAt', '')}): {comment['message']} "
        f"{heart} {comment.get('likeCount', 0)}"
    )
