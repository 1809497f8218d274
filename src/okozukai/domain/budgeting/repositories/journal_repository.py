"""Journal repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from okozukai.domain.budgeting.entities import Journal


class JournalRepository(ABC):
    """Repository interface for Journal entities."""

    @abstractmethod
    async def save(self, journal: Journal) -> None:
        """Save a journal (create or update)."""

    @abstractmethod
    async def find_by_id(self, journal_id: UUID) -> Optional[Journal]:
        """Find journal by ID."""

    @abstractmethod
    async def find_all(self) -> list[Journal]:
        """Find all journals, newest first."""

    @abstractmethod
    async def delete(self, journal_id: UUID) -> None:
        """Delete a journal together with its transactions and their tag links."""
