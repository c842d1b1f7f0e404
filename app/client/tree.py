"""Comment tree reconstruction.

The API returns comments flat with a `parentId` reference. The tree is built
from an adjacency mapping (parent id -> children, in the order received) and
walked from the roots (parentId null). Nodes that cannot be reached from a
root (orphans, cycles) are skipped, and no node is emitted twice.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CommentNode:
    comment: dict[str, Any]
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.comment["id"]


def group_by_parent(comments: Iterable[Mapping[str, Any]]) -> dict[str | None, list[dict[str, Any]]]:
    """Map each parent id (None for top level) to its child comments."""
    groups: dict[str | None, list[dict[str, Any]]] = {}
    for comment in comments:
        groups.setdefault(comment.get("parentId"), []).append(dict(comment))
    return groups


def build_comment_tree(comments: Iterable[Mapping[str, Any]]) -> list[CommentNode]:
    """Build the comment forest for a post.

    Args:
        comments: Flat comments, each with "id" and "parentId".

    Returns:
        Root nodes in the input order, children nested in the same order.
    """
    groups = group_by_parent(comments)
    seen: set[str] = set()
    roots: list[CommentNode] = []

    # Iterative walk; deep reply chains must not hit the recursion limit.
    stack: list[tuple[str | None, list[CommentNode]]] = [(None, roots)]
    while stack:
        parent_id, siblings = stack.pop()
        for comment in groups.get(parent_id, []):
            comment_id = comment["id"]
            if comment_id in seen:
                continue
            seen.add(comment_id)
            node = CommentNode(comment=comment)
            siblings.append(node)
            stack.append((comment_id, node.children))

    return roots
