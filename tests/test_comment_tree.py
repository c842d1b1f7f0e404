"""Tests for client-side comment tree reconstruction."""

from app.client.tree import build_comment_tree, group_by_parent


def _c(comment_id: str, parent_id: str | None = None) -> dict:
    return {"id": comment_id, "parentId": parent_id, "message": comment_id}


def _shape(nodes) -> list:
    return [(node.id, _shape(node.children)) for node in nodes]


def test_group_by_parent_keeps_input_order() -> None:
    groups = group_by_parent([_c("a"), _c("b", "a"), _c("c"), _c("d", "a")])
    assert [c["id"] for c in groups[None]] == ["a", "c"]
    assert [c["id"] for c in groups["a"]] == ["b", "d"]


def test_build_nested_tree() -> None:
    comments = [_c("r1"), _c("r2"), _c("c1", "r1"), _c("g1", "c1"), _c("c2", "r1")]
    assert _shape(build_comment_tree(comments)) == [
        ("r1", [("c1", [("g1", [])]), ("c2", [])]),
        ("r2", []),
    ]


def test_orphans_are_skipped() -> None:
    tree = build_comment_tree([_c("r1"), _c("lost", "deleted-parent")])
    assert _shape(tree) == [("r1", [])]


def test_cycles_are_skipped_without_looping() -> None:
    comments = [_c("r1"), _c("a", "b"), _c("b", "a"), _c("self", "self")]
    assert _shape(build_comment_tree(comments)) == [("r1", [])]


def test_duplicate_ids_render_once() -> None:
    tree = build_comment_tree([_c("r1"), _c("x", "r1"), _c("x", "r1")])
    assert _shape(tree) == [("r1", [("x", [])])]


def test_deep_reply_chain() -> None:
    depth = 5000
    comments = [_c("n0")] + [_c(f"n{i}", f"n{i - 1}") for i in range(1, depth)]
    node = build_comment_tree(comments)[0]
    levels = 1
    while node.children:
        node = node.children[0]
        levels += 1
    assert levels == depth
