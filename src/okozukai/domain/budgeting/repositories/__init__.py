"""Repository interfaces for the budgeting domain."""

from okozukai.domain.budgeting.repositories.journal_repository import (
    JournalRepository,
)
from okozukai.domain.budgeting.repositories.tag_repository import TagRepository
from okozukai.domain.budgeting.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = ["JournalRepository", "TagRepository", "TransactionRepository"]
