"""Assembly of the Okozukai HTTP API.

Versioned resources live under /api/v1; /health and / stay unversioned.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from okozukai.infrastructure.persistence.sqlalchemy.models import Base
from okozukai.presentation.api.dependencies import get_engine, get_session_maker
from okozukai.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from okozukai.presentation.api.routers import (
    journals_router,
    tags_router,
    transactions_router,
)
from okozukai.presentation.api.schemas.common import HealthResponse
from okozukai_config.settings import Settings, get_settings
from okozukai_demo.seed import seed_demo_data

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Send log records to stdout once per process at the configured level."""
    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in ("okozukai", "okozukai_demo"):
        logging.getLogger(name).setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Journals",
        "description": """Named ledgers with a single primary currency.

**Lifecycle:**
- Created open
- Closed journals reject new, edited and deleted transactions
- Only closed journals can be deleted (their transactions go with them)
""",
    },
    {
        "name": "Tags",
        "description": """Labels attached to transactions.

- Names are unique
- Colours are assigned round-robin from a fixed palette
- Deleting a tag removes it from every transaction first
""",
    },
    {
        "name": "Transactions",
        "description": """Income (`In`) and spending (`Out`) within a journal.

**Filters** (shared by list, reports and export):
- `journal_id` (required)
- `from` / `to` (inclusive)
- `tag_ids` (any match, repeatable)
- `note_search` (case-insensitive)

**Reports:**
- `/summary` - totals in, out and net
- `/grouped` - by year and month with rollups
- `/spending-by-tag` - Out spending split evenly across shared tags
- `/spending-by-tag-monthly` - the same, per month
- `/export?format=json|csv` - file download
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Prepare the schema (and optional demo data) on startup, release the pool on exit."""
    logger.info("Okozukai API %s starting", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    if get_settings().seed_demo_data:
        await _seed_demo_data()

    yield

    await engine.dispose()
    logger.info("Okozukai API stopped, connection pool disposed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Create missing tables; exit the process when the database is unreachable."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Database refused the connection, aborting startup")
        raise SystemExit(1) from None
    logger.info("Database schema ready")


async def _seed_demo_data() -> None:
    logger.info("SEED_DEMO_DATA is set, loading demo data")
    async with get_session_maker()() as session:
        await seed_demo_data(session)


def create_v1_router() -> APIRouter:
    router = APIRouter()
    router.include_router(journals_router, prefix="/journals", tags=["Journals"])
    router.include_router(tags_router, prefix="/tags", tags=["Tags"])
    router.include_router(
        transactions_router,
        prefix="/transactions",
        tags=["Transactions"],
    )
    return router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application.

    Parameters
    ----------
    settings
        Settings to build from; ``get_settings()`` when omitted

    Returns
    -------
    FastAPI application with routers, CORS and error handlers installed
    """
    _configure_logging()
    settings = settings or get_settings()

    title = f"{settings.app_name} API"
    docs_enabled = settings.api_debug

    app = FastAPI(
        title=title,
        description=(
            "A **personal budgeting** backend: journals, tagged income and "
            "spending, and reports over them."
        ),
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        return HealthResponse(status="healthy", version=API_VERSION, api_versions=["v1"])

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """Name, version and entry points of the API."""
        return {
            "name": title,
            "version": API_VERSION,
            "docs": "/docs" if docs_enabled else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "journals": f"{API_V1_PREFIX}/journals",
                "tags": f"{API_V1_PREFIX}/tags",
                "transactions": f"{API_V1_PREFIX}/transactions",
            },
        }

    return app


app = create_app()
