from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)

from warehouse_api.config.settings import get_settings


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores REFERENCES clauses unless asked per connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str, *, echo: bool = False, **kwargs) -> AsyncEngine:
    engine = create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,  # connection health checks
        **kwargs,
    )
    if make_url(url).get_backend_name() == "sqlite":
        enable_sqlite_foreign_keys(engine)
    return engine


# Built on first use so importing the app never opens a pool.
@lru_cache()
def get_engine() -> AsyncEngine:
    settings = get_settings()
    kwargs = {}
    if make_url(settings.DATABASE_URL).get_backend_name() != "sqlite":
        kwargs["pool_size"] = settings.DB_POOL_SIZE
    return build_engine(settings.DATABASE_URL, echo=settings.SQLALCHEMY_ECHO, **kwargs)


@lru_cache()
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency. Yields a session and ensures it's closed after the request.

    Closing an AsyncSession rolls back whatever was not committed, which is also what
    happens when the request task is cancelled mid-statement.

    Usage:
        async def endpoint(db: AsyncSession = Depends(get_async_session)):
            await db.execute(...)
    """
    async with get_sessionmaker()() as session:
        yield session


async def dispose_engine() -> None:
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
        get_engine.cache_clear()
        get_sessionmaker.cache_clear()
