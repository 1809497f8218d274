"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from okozukai.domain.budgeting.repositories import (
    JournalRepository,
    TagRepository,
    TransactionRepository,
)


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def journal_repository(self) -> JournalRepository:
        """Get journal repository."""
        ...

    def tag_repository(self) -> TagRepository:
        """Get tag repository."""
        ...

    def transaction_repository(self) -> TransactionRepository:
        """Get transaction repository."""
        ...
