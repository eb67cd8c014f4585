from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from hoopstats.core.config import Settings
from hoopstats.db.base import Base


def _is_memory_url(url: str) -> bool:
    return url.startswith("sqlite") and (url.endswith("://") or ":memory:" in url)


def build_engine(settings: Settings) -> AsyncEngine:
    if _is_memory_url(settings.DATABASE_URL):
        # one shared connection, otherwise every session gets its own empty db
        return create_async_engine(
            settings.DATABASE_URL,
            echo=settings.SQL_ECHO,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_models(engine: AsyncEngine):
    # import the models so their tables are registered on Base.metadata
    from hoopstats.models import game_stat, player, team  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# FastAPI dependency: one session per request, from the app's own store
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.sessionmaker() as session:
        yield session
