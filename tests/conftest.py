import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from game2048.db import create_tables
from game2048.services import game_db


class ScriptedRandom:
    """Random source that replays queued values.

    randrange falls back to 0 (first empty cell) and random to 0.5 (a 2 tile).
    """

    def __init__(self, randranges=(), randoms=()):
        self.randranges = list(randranges)
        self.randoms = list(randoms)

    def randrange(self, stop):
        value = self.randranges.pop(0) if self.randranges else 0
        assert 0 <= value < stop
        return value

    def random(self):
        return self.randoms.pop(0) if self.randoms else 0.5


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def session_factory(tmp_path, monkeypatch):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'game2048_test.sqlite3'}", poolclass=NullPool
    )
    asyncio.run(create_tables(engine))
    factory = async_sessionmaker(
        autocommit=False,
        class_=AsyncSession,
        autoflush=True,
        bind=engine,
        expire_on_commit=False,
    )
    monkeypatch.setattr(game_db, "Session", factory)
    yield factory
    asyncio.run(engine.dispose())
