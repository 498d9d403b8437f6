"""Database session configuration"""

from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker

from app import config
from app.db.base import Base


def to_async_url(database_url: str | None) -> str:
    """
    Convert a database URL to the async driver format.

    postgresql:// and postgresql+asyncpg:// become postgresql+psycopg://,
    sqlite+aiosqlite:// is used as-is.
    """
    if not database_url:
        raise ValueError("DATABASE_URL environment variable is not set")

    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+psycopg://", 1)
    if database_url.startswith("postgresql+psycopg://"):
        return database_url
    if database_url.startswith("postgresql+asyncpg://"):
        # Legacy support: convert asyncpg URLs to psycopg
        return database_url.replace("postgresql+asyncpg://", "postgresql+psycopg://", 1)
    if database_url.startswith("sqlite+aiosqlite://"):
        return database_url
    raise ValueError(f"Unsupported database URL format: {database_url}")


def build_engine(database_url: str | None) -> AsyncEngine:
    """Create the async engine, with connection pooling for PostgreSQL"""
    url = to_async_url(database_url)
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False)

    return create_async_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        pool_timeout=config.DB_POOL_TIMEOUT,
        pool_recycle=config.DB_POOL_RECYCLE,
        echo=False,  # Set to True to see SQL queries in logs
    )


engine = build_engine(config.DATABASE_URL)

# Create async session factory
SessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function for FastAPI routes.

    Usage:
        @router.get("/example")
        async def example(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with SessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_models(target: AsyncEngine | None = None) -> None:
    """Create all tables known to the ORM metadata"""
    # Register ORM models on the metadata
    import app.db.models  # noqa: F401

    target = target or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

