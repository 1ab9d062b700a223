import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
    AsyncEngine,
)

from usermodel.core.config import settings
from usermodel.core.models import Base, ConstraintViolationError
import usermodel.api.v1.models  # noqa: F401  registers the mappers on Base.metadata

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# 1. Database Manager Class
# ----------------------------------------------------------------------

class DatabaseManager:
    """
    Manages the SQLAlchemy AsyncEngine and the AsyncSession factory.

    Encapsulates database connection setup, table creation and transactional
    session scopes. Integrity errors raised by the database are translated
    into ConstraintViolationError so callers never depend on driver errors.
    """

    def __init__(self, db_url: str, echo: bool = False):
        """
        Initializes the DatabaseManager with the database connection URL.

        Args:
            db_url (str): The connection string for the asynchronous database driver.
            echo (bool): Log generated SQL.
        """
        self._engine: AsyncEngine = create_async_engine(
            db_url,
            # Checks connection validity on pool checkout.
            pool_pre_ping=True,
            echo=echo,
        )

        self._async_session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
            bind=self._engine,
        )

    @property
    def engine(self) -> AsyncEngine:
        """
        Provides access to the configured SQLAlchemy AsyncEngine.

        Returns:
            AsyncEngine: The configured engine instance.
        """
        return self._engine

    @property
    def async_session_factory(self) -> async_sessionmaker[AsyncSession]:
        """
        Provides access to the configured asynchronous session maker.

        Returns:
            async_sessionmaker[AsyncSession]: The session factory.
        """
        return self._async_session_factory

    async def create_all(self) -> None:
        """Create every mapped table that does not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created.")

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for executing an atomic unit of work.

        Commits when the block completes, rolls back otherwise. Integrity
        errors (uniqueness, non-null) are re-raised as ConstraintViolationError.

        Yields:
            AsyncSession: A session inside an active transaction.
        """
        async with self._async_session_factory() as session:
            try:
                async with session.begin():
                    yield session
            except IntegrityError as e:
                logger.warning("Constraint violation, transaction rolled back: %s", e.orig)
                raise ConstraintViolationError(f"Persisting failed: {e.orig}") from e
            except ConstraintViolationError as e:
                logger.warning("Constraint violation, transaction rolled back: %s", e.message)
                raise


# Initialize the DatabaseManager with the URL from settings
db_manager = DatabaseManager(settings.ASYNC_DATABASE_URL, echo=bool(settings.DEBUG))

