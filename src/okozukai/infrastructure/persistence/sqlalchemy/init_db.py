"""Schema management used by the ``okozukai db`` commands."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Registers every table on Base.metadata
import okozukai.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from okozukai.infrastructure.persistence.sqlalchemy.models.base import Base
from okozukai_config.settings import get_settings

logger = logging.getLogger(__name__)


def create_engine_from_settings() -> AsyncEngine:
    """Standalone engine for one-off commands, independent of the API's cached engine."""
    return create_async_engine(get_settings().database_url, echo=False, pool_pre_ping=True)


async def create_tables(engine: AsyncEngine) -> None:
    """Create whichever of journals, tags and transactions are missing.

    Existing tables are left untouched, so this is safe to run repeatedly.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Created missing tables: %s", ", ".join(sorted(Base.metadata.tables)))


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop every table and the data in it."""
    logger.warning("Dropping tables: %s", ", ".join(sorted(Base.metadata.tables)))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
