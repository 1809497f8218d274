"""Transaction repository interface.

Every transaction returned by a finder carries its tags and its owning
journal, so callers never trigger lazy loading.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from okozukai.domain.budgeting.entities import Transaction
from okozukai.domain.budgeting.value_objects import TransactionFilter


class TransactionRepository(ABC):
    """Repository interface for Transaction entities."""

    @abstractmethod
    async def save(self, transaction: Transaction) -> None:
        """Save a transaction and its tag links."""

    @abstractmethod
    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        """Find transaction by ID."""

    @abstractmethod
    async def find_page(
        self,
        criteria: TransactionFilter,
        page: int,
        page_size: int,
    ) -> list[Transaction]:
        """Find one page of matching transactions.

        Ordered by ``occurred_at`` descending, then ``created_at`` descending.
        ``page`` is 1-based.
        """

    @abstractmethod
    async def find_matching(self, criteria: TransactionFilter) -> list[Transaction]:
        """Find all matching transactions (same ordering as ``find_page``)."""

    @abstractmethod
    async def delete(self, transaction_id: UUID) -> None:
        """Delete a transaction and its tag links."""
