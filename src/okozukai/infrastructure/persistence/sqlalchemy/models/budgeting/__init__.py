"""Budgeting domain SQLAlchemy models."""

from okozukai.infrastructure.persistence.sqlalchemy.models.budgeting.journal_model import (  # NOQA: E501
    JournalModel,
)
from okozukai.infrastructure.persistence.sqlalchemy.models.budgeting.tag_model import (
    TagModel,
)
from okozukai.infrastructure.persistence.sqlalchemy.models.budgeting.transaction_model import (  # NOQA: E501
    TransactionModel,
    transaction_tags,
)

__all__ = [
    "JournalModel",
    "TagModel",
    "TransactionModel",
    "transaction_tags",
]
