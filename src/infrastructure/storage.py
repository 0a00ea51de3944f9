"""Profile store handles and backend selection.

The store is built once during application startup and owned by the app; it
is never created lazily from inside a request.
"""

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from core.config import Settings, StorageBackend
from domain.entities.profile import Profile
from infrastructure.database.session import create_engine, create_session_factory, init_schema
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.memory.memory_uow import InMemoryUnitOfWork

logger = structlog.get_logger()


class SQLProfileStore:
    """Durable store backed by a SQLAlchemy async engine."""

    name = StorageBackend.SQL.value

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._session_factory = create_session_factory(engine)

    @classmethod
    async def connect(cls, database_url: str, echo: bool = False) -> "SQLProfileStore":
        """Create the engine and make sure the schema exists."""
        engine = create_engine(database_url, echo=echo)
        await init_schema(engine)
        return cls(engine)

    def unit_of_work(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(self._session_factory)

    async def ping(self) -> None:
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def close(self) -> None:
        await self._engine.dispose()


class InMemoryProfileStore:
    """Ephemeral store; contents are lost when the process exits."""

    name = StorageBackend.MEMORY.value

    def __init__(self) -> None:
        self._table: dict[str, Profile] = {}

    def unit_of_work(self) -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(self._table)

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        self._table.clear()


async def build_profile_store(config: Settings) -> SQLProfileStore | InMemoryProfileStore:
    """Open the backend named by configuration."""
    if config.storage_backend == StorageBackend.MEMORY:
        logger.warning("profile_store_ephemeral", backend=StorageBackend.MEMORY.value)
        return InMemoryProfileStore()

    store = await SQLProfileStore.connect(config.async_database_url, echo=config.debug)
    logger.info("profile_store_ready", backend=StorageBackend.SQL.value)
    return store
