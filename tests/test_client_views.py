"""Tests for the board client and its text views."""

import httpx
import pytest
from httpx import ASGITransport

from app.client import BoardClient, BoardClientError, PostDetailView, PostListView
from app.main import app


@pytest.mark.asyncio
async def test_client_surfaces_server_error_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            401,
            json={"error": {"code": "UNAUTHORIZED", "message": "You do not have permission to edit this message", "detail": None}},
        )

    async with BoardClient(base_url="http://board", transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(BoardClientError) as excinfo:
            await client.update_comment("p1", "c1", "new")

    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "You do not have permission to edit this message"


@pytest.mark.asyncio
async def test_client_sends_expected_requests() -> None:
    seen: list[tuple[str, str, bytes]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path, request.content))
        return httpx.Response(200, json={"addLike": True})

    async with BoardClient(base_url="http://board", transport=httpx.MockTransport(handler)) as client:
        assert await client.toggle_comment_like("p1", "c1") == {"addLike": True}
        await client.create_comment("p1", "hi", parent_id="c1")

    assert seen[0][:2] == ("POST", "/posts/p1/comments/c1/toggleLike")
    assert seen[1][:2] == ("POST", "/posts/p1/comments")
    assert b'"parentId":"c1"' in seen[1][2].replace(b" ", b"")


@pytest.mark.asyncio
async def test_post_list_view_error_state() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    async with BoardClient(base_url="http://board", transport=httpx.MockTransport(handler)) as client:
        view = PostListView(client)
        await view.load()

    assert view.error == "boom"
    assert view.render() == "Error: boom"


@pytest.fixture
async def board_client(db):
    async with BoardClient(base_url="http://test", transport=ASGITransport(app=app)) as client:
        yield client


@pytest.mark.asyncio
async def test_post_list_view_renders_links(board_client: BoardClient, board: dict[str, str]):
    view = PostListView(board_client)
    await view.load()
    assert view.render().splitlines() == [
        f"- First post (/posts/{board['post_id']})",
        f"- Second post (/posts/{board['other_post_id']})",
    ]


@pytest.mark.asyncio
async def test_post_detail_view_thread_actions(board_client: BoardClient, board: dict[str, str]):
    view = PostDetailView(board_client, board["post_id"])
    await view.load()
    assert view.post["title"] == "First post"
    assert view.root_comments == []

    root = await view.create_comment("root comment")
    reply = await view.create_comment("a reply", parent_id=root["id"])
    assert [c["id"] for c in view.comments] == [reply["id"], root["id"]]
    assert [c["id"] for c in view.get_replies(root["id"])] == [reply["id"]]

    assert await view.toggle_like(reply["id"]) is True
    liked = next(c for c in view.comments if c["id"] == reply["id"])
    assert liked["likeCount"] == 1
    assert liked["likedByMe"] is True

    assert await view.update_comment(root["id"], "edited root") is True

    lines = view.render().splitlines()
    root_line = next(line for line in lines if "edited root" in line)
    reply_line = next(line for line in lines if "a reply" in line)
    assert root_line.startswith("Kyle")
    assert reply_line.startswith("    Kyle")
    assert reply_line.endswith("♥ 1")

    # Local state matches a fresh fetch.
    fresh = PostDetailView(board_client, board["post_id"])
    await fresh.load()
    assert fresh.render() == view.render()

    assert await view.delete_comment(root["id"]) is True
    assert view.comments == []


@pytest.mark.asyncio
async def test_post_detail_view_keeps_server_error(
    board_client: BoardClient,
    board: dict[str, str],
    sally_comment: str,
):
    view = PostDetailView(board_client, board["post_id"])
    await view.load()

    assert await view.create_comment("") is None
    assert view.error == "Message is required"

    assert await view.delete_comment(sally_comment) is False
    assert view.error == "You do not have permission to delete this message"
    assert [c["id"] for c in view.comments] == [sally_comment]
    assert view.render().startswith("Error: You do not have permission")


@pytest.mark.asyncio
async def test_post_detail_view_unknown_post(board_client: BoardClient, board: dict[str, str]):
    view = PostDetailView(board_client, "missing")
    await view.load()
    assert view.post is None
    assert view.error == "Post missing not found"


@pytest.mark.asyncio
async def test_post_detail_view_renders_deep_reply_chain() -> None:
    depth = 5000
    comments = [
        {
            "id": f"c{i}",
            "message": f"reply {i}",
            "parentId": f"c{i - 1}" if i else None,
            "createdAt": "2024-01-01T00:00:00Z",
            "user": {"id": "u1", "name": "Kyle"},
            "likeCount": 0,
            "likedByMe": False,
        }
        for i in range(depth)
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": "p1", "title": "Deep", "body": "b", "comments": comments})

    async with BoardClient(base_url="http://board", transport=httpx.MockTransport(handler)) as client:
        view = PostDetailView(client, "p1")
        await view.load()

    lines = view.render().splitlines()
    thread = lines[lines.index("Comments") + 1:]
    assert len(thread) == depth
    assert thread[0].startswith("Kyle (")
    assert thread[-1].startswith("    " * (depth - 1) + "Kyle (")
    assert "reply 4999" in thread[-1]


@pytest.mark.asyncio
async def test_post_detail_view_renders_siblings_in_order() -> None:
    def comment(cid: str, parent: str | None) -> dict:
        return {
            "id": cid,
            "message": cid,
            "parentId": parent,
            "createdAt": "t",
            "user": {"id": "u1", "name": "Kyle"},
            "likeCount": 1,
            "likedByMe": cid == "b",
        }

    comments = [comment("a", None), comment("a1", "a"), comment("a2", "a"), comment("b", None)]

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": "p1", "title": "T", "body": "B", "comments": comments})

    async with BoardClient(base_url="http://board", transport=httpx.MockTransport(handler)) as client:
        view = PostDetailView(client, "p1")
        await view.load()

    lines = view.render().splitlines()
    assert lines[lines.index("Comments") + 1:] == [
        "Kyle (t): a ♡ 1",
        "    Kyle (t): a1 ♡ 1",
        "    Kyle (t): a2 ♡ 1",
        "Kyle (t): b ♥ 1",
    ]
