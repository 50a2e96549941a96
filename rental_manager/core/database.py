"""
Async database engine, session factory and the declarative base.

The store is a single SQLite file reached through aiosqlite. Each request
gets its own ``AsyncSession`` via ``get_db``; code that needs several
independent sessions (the dashboard) opens them from ``async_session_maker``.
"""
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from rental_manager.core.config import settings


class Base(DeclarativeBase):
    pass


engine: AsyncEngine = create_async_engine(
    settings.database_url,
    echo=settings.db_echo,
    pool_pre_ping=True,
)

async_session_maker = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session; commit when the route returns, roll back on error."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create any missing tables."""
    # Register every mapped class on Base.metadata before create_all.
    from rental_manager.models.expense import Expense  # noqa: F401
    from rental_manager.models.invoice import Invoice  # noqa: F401
    from rental_manager.models.property import Property  # noqa: F401
    from rental_manager.models.tenant import Tenant  # noqa: F401
    from rental_manager.models.user import User  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    await engine.dispose()
