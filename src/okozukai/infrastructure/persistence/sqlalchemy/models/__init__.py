"""SQLAlchemy models for persistence layer."""

from okozukai.infrastructure.persistence.sqlalchemy.models.base import Base
from okozukai.infrastructure.persistence.sqlalchemy.models.budgeting import (
    JournalModel,
    TagModel,
    TransactionModel,
    transaction_tags,
)

__all__ = [
    "Base",
    "JournalModel",
    "TagModel",
    "TransactionModel",
    "transaction_tags",
]
