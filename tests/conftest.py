"""Shared fixtures: a temporary SQLite board and an ASGI test client."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from app.main import app
from app.models import Comment, Post, User
from app.stores.postgres import close_db, create_tables, get_session, init_db


@pytest.fixture
async def db(tmp_path):
    """Fresh database per test (file-backed so every connection sees it)."""
    await init_db(f"sqlite+aiosqlite:///{tmp_path / 'board.db'}")
    await create_tables()
    yield
    await close_db()


@pytest.fixture
async def board(db) -> dict[str, str]:
    """Kyle (the stand-in user), Sally, and two posts without comments."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    async with get_session() as session:
        kyle = User(name="Kyle")
        sally = User(name="Sally")
        first = Post(title="First post", body="Hello board", created_at=base)
        second = Post(title="Second post", body="Another one", created_at=base + timedelta(minutes=1))
        session.add_all([kyle, sally, first, second])
        await session.flush()
        return {
            "kyle_id": kyle.id,
            "sally_id": sally.id,
            "post_id": first.id,
            "other_post_id": second.id,
        }


@pytest.fixture
async def sally_comment(board: dict[str, str]) -> str:
    """A comment on the first post owned by Sally (not the stand-in user)."""
    async with get_session() as session:
        comment = Comment(message="Sally was here", user_id=board["sally_id"], post_id=board["post_id"])
        session.add(comment)
        await session.flush()
        return comment.id


@pytest.fixture
async def client(db):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def count_rows():
    """Count rows of a model, optionally filtered."""

    async def _count(model, *where) -> int:
        async with get_session() as session:
            stmt = select(func.count()).select_from(model)
            if where:
                stmt = stmt.where(*where)
            return await session.scalar(stmt)

    return _count


@pytest.fixture
def get_comment():
    async def _get(comment_id: str) -> Comment | None:
        async with get_session() as session:
            return await session.get(Comment, comment_id)

    return _get
