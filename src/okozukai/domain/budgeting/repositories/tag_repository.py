"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional
from uuid import UUID

from okozukai.domain.budgeting.entities import Tag


class TagRepository(ABC):
    """Repository interface for Tag entities.

    Name lookups compare the stored (trimmed) name exactly.
    """

    @abstractmethod
    async def save(self, tag: Tag) -> None:
        """Save a tag (create or update)."""

    @abstractmethod
    async def find_by_id(self, tag_id: UUID) -> Optional[Tag]:
        """Find tag by ID."""

    @abstractmethod
    async def find_by_ids(self, tag_ids: Iterable[UUID]) -> list[Tag]:
        """Find all tags whose ID is in ``tag_ids`` (unknown IDs are skipped)."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Tag]:
        """Find tag by its exact stored name."""

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""

    @abstractmethod
    async def count(self) -> int:
        """Count existing tags."""

    @abstractmethod
    async def detach_from_transactions(self, tag_id: UUID) -> None:
        """Remove the tag from every transaction that carries it."""

    @abstractmethod
    async def delete(self, tag_id: UUID) -> None:
        """Delete a tag."""
