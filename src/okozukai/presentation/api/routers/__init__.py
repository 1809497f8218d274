from okozukai.presentation.api.routers.journals import router as journals_router
from okozukai.presentation.api.routers.tags import router as tags_router
from okozukai.presentation.api.routers.transactions import (
    router as transactions_router,
)

__all__ = [
    "journals_router",
    "tags_router",
    "transactions_router",
]
