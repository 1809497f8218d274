"""Application services."""

from okozukai.application.services.journal_service import JournalService
from okozukai.application.services.tag_service import TagService
from okozukai.application.services.transaction_service import TransactionService

__all__ = [
    "JournalService",
    "TagService",
    "TransactionService",
]
