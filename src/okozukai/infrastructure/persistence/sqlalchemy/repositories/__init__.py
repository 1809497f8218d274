"""SQLAlchemy repository implementations."""

from okozukai.infrastructure.persistence.sqlalchemy.repositories.budgeting import (
    JournalRepositorySQLAlchemy,
    TagRepositorySQLAlchemy,
    TransactionRepositorySQLAlchemy,
)
from okozukai.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)

__all__ = [
    "JournalRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "TagRepositorySQLAlchemy",
    "TransactionRepositorySQLAlchemy",
]
