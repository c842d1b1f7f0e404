import pytest

from app.settings import Settings


def test_client_url_becomes_single_cors_origin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIENT_URL", "https://board.example")
    assert Settings().cors_origins == ["https://board.example"]


def test_cors_origins_accepts_json_list(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", '["https://a.example", " https://b.example "]')
    assert Settings().cors_origins == ["https://a.example", "https://b.example"]


def test_plain_postgres_url_gets_asyncpg_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db.example:5432/board")
    settings = Settings()
    assert settings.async_database_url == "postgresql+asyncpg://u:p@db.example:5432/board"
    assert settings.database_connect_args == {}


def test_database_connect_args_from_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_CONNECT_ARGS", '{"ssl": false, "timeout": 20}')
    assert Settings().database_connect_args == {"ssl": False, "timeout": 20}
