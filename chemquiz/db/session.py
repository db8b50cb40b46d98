from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
    AsyncEngine,
)

from chemquiz.core.config import settings
from chemquiz.core.models import Base


# ----------------------------------------------------------------------
# 1. Database Manager Class
# ----------------------------------------------------------------------

class DatabaseManager:
    """
    Manages the SQLAlchemy AsyncEngine and the AsyncSession factory.

    The engine owns the bounded connection pool. It is created once at import
    time, shared read-only by every request and disposed of on shutdown.
    """

    def __init__(self, db_url: str, **engine_options):
        """
        Initializes the DatabaseManager with the database connection URL.

        Args:
            db_url (str): The connection string for the asynchronous database driver.
            engine_options: Extra keyword arguments for create_async_engine.
        """
        if not db_url.startswith("sqlite"):
            engine_options.setdefault("pool_size", settings.DB_POOL_SIZE)
            engine_options.setdefault("max_overflow", settings.DB_MAX_OVERFLOW)
            engine_options.setdefault("pool_timeout", settings.DB_POOL_TIMEOUT_SECONDS)

        self._engine: AsyncEngine = create_async_engine(
            db_url,
            # Checks connection validity on pool checkout.
            pool_pre_ping=True,
            echo=settings.DEBUG,
            **engine_options,
        )

        self._async_session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
            bind=self._engine,
        )

    async def create_all(self):
        """Create every mapped table that does not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def disconnect(self):
        """Close all pooled connections."""
        await self._engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self._async_session_factory() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Session inside an atomic transaction block.

        Commits when the block exits normally, rolls back on any exception.
        Use it to run a permission check and the guarded statement as one unit.
        """
        async with self._async_session_factory() as session:
            async with session.begin():
                yield session


# Initialize the DatabaseManager with the URL from settings
db_manager = DatabaseManager(settings.DATABASE_URL)


# ----------------------------------------------------------------------
# 2. FastAPI Dependency
# ----------------------------------------------------------------------

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The session is closed after the request has finished, regardless of
    whether an exception occurred.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session bound to the database.
    """
    async with db_manager.session() as session:
        yield session
