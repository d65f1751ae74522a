import contextlib
import logging
from typing import Any, AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncConnection,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from expense_tracker.core.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Owns the async engine and session factory.
    Opened once at startup and closed at shutdown by the app lifespan.
    """

    def __init__(self, url: str, pooled: bool = False, engine_kwargs: Optional[dict[str, Any]] = None):
        self.url = url
        self._pooled = pooled
        self._engine_kwargs = engine_kwargs or {}
        self._engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> None:
        if self._engine is not None:
            return

        kwargs = dict(self._engine_kwargs)
        if not self._pooled:
            kwargs.setdefault("poolclass", NullPool)  # Disable pooling outside production

        self._engine = create_async_engine(self.url, echo=False, **kwargs)
        self._sessionmaker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,  # Manual control over flushing
        )
        logger.info("Database engine opened")

    async def close(self) -> None:
        if self._engine is None:
            raise Exception("DatabaseSessionManager is not initialized")
        await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        logger.info("Database engine closed")

    @contextlib.asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncConnection]:
        if self._engine is None:
            raise Exception("DatabaseSessionManager is not initialized")

        async with self._engine.begin() as connection:
            try:
                yield connection
            except Exception:
                await connection.rollback()
                raise

    @contextlib.asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._sessionmaker is None:
            raise Exception("DatabaseSessionManager is not initialized")

        session = self._sessionmaker()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        async with self.connect() as connection:
            await connection.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.connect() as connection:
            await connection.run_sync(Base.metadata.drop_all)
