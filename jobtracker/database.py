"""Database configuration and session management."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import settings
from .models.base import Base


def _engine_options() -> dict:
    if settings.is_sqlite:
        return {}
    return {"pool_size": 5, "max_overflow": 10, "pool_pre_ping": True}


# Create async engine
engine: AsyncEngine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options(),
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency to get database session.

    Yields:
        AsyncSession: Database session

    Example:
        @app.get("/jobs")
        async def get_jobs(db: AsyncSession = Depends(get_db)):
            result = await db.execute(select(Job))
            return result.scalars().all()
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """Initialize database tables.

    Creates all tables defined in the models if they don't exist.
    Should be called during application startup.
    """
    async with engine.begin() as conn:
        # Import all models to ensure they are registered
        from .models import Job  # noqa: F401

        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Close database connections.

    Disposes the engine and closes all connections.
    Should be called during application shutdown.
    """
    await engine.dispose()
