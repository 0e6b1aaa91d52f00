from fastapi import Depends
from typing import Annotated

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlmodel import SQLModel

from lightbnb.core.config import settings


# Create database engine
async_engine = create_async_engine(
    settings.async_database_url,
    echo=settings.DB_ECHO,
    pool_size=15,
    max_overflow=15,
    pool_timeout=30,  # Time to wait before raising TimeoutError
    pool_recycle=180,
)

async_session_maker = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_async_session():
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db(engine=async_engine):
    """Create any missing tables for local development and tests."""
    # Register the table models on SQLModel.metadata
    import lightbnb.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all, checkfirst=True)


AsyncDBSession = Annotated[AsyncSession, Depends(get_async_session)]
