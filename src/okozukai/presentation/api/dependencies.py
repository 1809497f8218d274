"""Request-scoped dependencies: one engine per process, one session per request.

Routers take a ``RepoFactory`` and build services from it::

    service = TagService.from_factory(factory)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from okozukai.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from okozukai_config.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Resolve the configured database URL.

    For file-backed SQLite the parent directory is created on first use.

    Returns
    -------
    SQLAlchemy URL string
    """
    url = get_settings().database_url

    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database not in (None, "", ":memory:"):
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

    return url


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide async engine owning the connection pool."""
    url = get_database_url()
    logger.debug("Creating database engine for %s", make_url(url).render_as_string())
    return create_async_engine(url, echo=False, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    # Entities stay readable after commit for response serialization
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


def clear_engine_cache() -> None:
    """Forget the cached URL, engine and session maker (used by tests)."""
    get_database_url.cache_clear()
    get_engine.cache_clear()
    get_session_maker.cache_clear()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Open a session for the duration of one request.

    Yields
    ------
    AsyncSession bound to the shared engine
    """
    async with get_session_maker()() as session:
        yield session


async def get_repository_factory(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session=session)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
