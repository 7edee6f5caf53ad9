from game2048.db import SQLITE_FILE_PATH, build_database_url


def test_explicit_url_wins():
    url = build_database_url(url="sqlite+aiosqlite:///:memory:", host="db")
    assert url == "sqlite+aiosqlite:///:memory:"


def test_postgres_when_host_is_set():
    url = build_database_url(
        url=None, user="game", password="secret", host="db", port="5432", db_name="game2048"
    )
    assert url == "postgresql+asyncpg://game:secret@db:5432/game2048"


def test_sqlite_fallback():
    assert build_database_url(url=None, host=None) == f"sqlite+aiosqlite:///{SQLITE_FILE_PATH}"
