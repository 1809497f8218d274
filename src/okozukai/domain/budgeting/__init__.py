"""Budgeting domain layer exports."""

# Entities
from okozukai.domain.budgeting.entities import Journal, Tag, Transaction

# Repository Interfaces
from okozukai.domain.budgeting.repositories import (
    JournalRepository,
    TagRepository,
    TransactionRepository,
)

# Domain Services
from okozukai.domain.budgeting.services import (
    TagColorService,
    TransactionReportService,
)

# Value Objects
from okozukai.domain.budgeting.value_objects import (
    ExportFormat,
    TransactionFilter,
    TransactionType,
)

__all__ = [
    # Value Objects
    "ExportFormat",
    "TransactionFilter",
    "TransactionType",
    # Entities
    "Journal",
    "Tag",
    "Transaction",
    # Repository Interfaces
    "JournalRepository",
    "TagRepository",
    "TransactionRepository",
    # Domain Services
    "TagColorService",
    "TransactionReportService",
]
