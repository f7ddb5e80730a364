"""
Asynchronous Database Module

This module owns the SQLAlchemy asyncio engine and session factory used by the
API. A single ``Database`` instance is created by the application lifespan and
kept on ``app.state``; request handlers receive one ``AsyncSession`` each
through the ``get_db_session`` dependency.

PostgreSQL is reached through asyncpg. Any other async URL SQLAlchemy accepts
(the test suite uses ``sqlite+aiosqlite``) works the same way.

**Security Note**: Avoid logging the connection URL; it carries the database
password.

Key Components:
    - Database: engine + session factory with table creation and a health probe.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.sql import text
from sqlmodel import SQLModel
from structlog import get_logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

import inkpost.domain.entities  # noqa: F401  registers the tables on SQLModel.metadata
from inkpost.core.exceptions import InkpostError

logger = get_logger(__name__)


class Database:
    """Async engine and session factory for one database.

    Attributes:
        engine (AsyncEngine): The SQLAlchemy asyncio engine.
        session_factory (async_sessionmaker): Produces request-scoped sessions.
    """

    def __init__(
        self,
        url: str,
        echo: bool = False,
        pool_size: Optional[int] = None,
        max_overflow: Optional[int] = None,
    ):
        engine_kwargs = {"echo": echo, "pool_pre_ping": True}
        # SQLite pools do not take sizing arguments
        if make_url(url).get_backend_name() != "sqlite":
            if pool_size is not None:
                engine_kwargs["pool_size"] = pool_size
            if max_overflow is not None:
                engine_kwargs["max_overflow"] = max_overflow

        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield an AsyncSession, rolling back if the caller raises.

        Rollbacks caused by an ``InkpostError`` are logged at debug level;
        anything else is logged as an error.

        Yields:
            AsyncSession: An asynchronous database session.
        """
        async with self.session_factory() as session:
            logger.debug("Async database session created")
            try:
                yield session
            except InkpostError as e:
                await session.rollback()
                logger.debug("Async database session rollback", error_code=e.code)
                raise
            except Exception:
                await session.rollback()
                logger.error("Async database session rollback due to error")
                raise
            finally:
                await session.close()
                logger.debug("Async database session closed")

    async def create_tables(self) -> None:
        """Create every table registered on ``SQLModel.metadata`` that is missing."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("database_tables_created", tables=list(SQLModel.metadata.tables.keys()))

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(OperationalError),
        reraise=True,
    )
    async def _probe(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def check_health(self) -> bool:
        """
        Performs a health check on the database connection.

        Connection errors are retried a few times with exponential backoff
        before the database is reported as unavailable.

        Returns:
            bool: True if the database answered ``SELECT 1``, False otherwise.
        """
        try:
            await self._probe()
        except Exception as e:
            logger.error("database_health_check_failed", error=str(e), error_type=type(e).__name__)
            return False
        logger.info("database_health_check_success")
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")
