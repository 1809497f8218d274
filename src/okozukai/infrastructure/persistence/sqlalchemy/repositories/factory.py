"""SQLAlchemy repository factory bound to one session."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from okozukai.infrastructure.persistence.sqlalchemy.repositories.budgeting import (
    JournalRepositorySQLAlchemy,
    TagRepositorySQLAlchemy,
    TransactionRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._journal_repo: JournalRepositorySQLAlchemy | None = None
        self._tag_repo: TagRepositorySQLAlchemy | None = None
        self._transaction_repo: TransactionRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def journal_repository(self) -> JournalRepositorySQLAlchemy:
        if self._journal_repo is None:
            self._journal_repo = JournalRepositorySQLAlchemy(self._session)
        return self._journal_repo

    def tag_repository(self) -> TagRepositorySQLAlchemy:
        if self._tag_repo is None:
            self._tag_repo = TagRepositorySQLAlchemy(self._session)
        return self._tag_repo

    def transaction_repository(self) -> TransactionRepositorySQLAlchemy:
        if self._transaction_repo is None:
            self._transaction_repo = TransactionRepositorySQLAlchemy(self._session)
        return self._transaction_repo
