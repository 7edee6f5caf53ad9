import pathlib

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from game2048 import load_secrets
from game2048.models.schemas import Base

SQLITE_FILE_PATH = pathlib.Path(__file__).parents[1] / "game2048.sqlite3"


def build_database_url(
    url: str | None = load_secrets.database_url,
    user: str | None = load_secrets.user,
    password: str | None = load_secrets.password,
    host: str | None = load_secrets.host,
    port: str | None = load_secrets.port,
    db_name: str | None = load_secrets.db_name,
) -> str:
    """DATABASE_URL if given, PostgreSQL when DB_HOST is set, else a local SQLite file"""
    if url:
        return url
    if host:
        return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db_name}"
    return f"sqlite+aiosqlite:///{SQLITE_FILE_PATH}"


engine = create_async_engine(build_database_url(), echo=False)

# Centralized session factory to avoid creating it in router modules.
Session = async_sessionmaker(
    autocommit=False,
    class_=AsyncSession,
    autoflush=True,
    bind=engine,
    expire_on_commit=False,
)


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create the game_state table if it does not exist yet."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
