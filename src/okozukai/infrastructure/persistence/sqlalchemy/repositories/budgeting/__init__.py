"""Budgeting domain SQLAlchemy repositories."""

from okozukai.infrastructure.persistence.sqlalchemy.repositories.budgeting.journal_repository import (  # NOQA: E501
    JournalRepositorySQLAlchemy,
)
from okozukai.infrastructure.persistence.sqlalchemy.repositories.budgeting.tag_repository import (  # NOQA: E501
    TagRepositorySQLAlchemy,
)
from okozukai.infrastructure.persistence.sqlalchemy.repositories.budgeting.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)

__all__ = [
    "JournalRepositorySQLAlchemy",
    "TagRepositorySQLAlchemy",
    "TransactionRepositorySQLAlchemy",
]
