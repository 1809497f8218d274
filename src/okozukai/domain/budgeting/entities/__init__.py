"""Domain entities for the budgeting bounded context."""

from okozukai.domain.budgeting.entities.journal import Journal
from okozukai.domain.budgeting.entities.tag import Tag
from okozukai.domain.budgeting.entities.transaction import Transaction

__all__ = ["Journal", "Tag", "Transaction"]
