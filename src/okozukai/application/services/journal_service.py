"""Journal lifecycle service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from okozukai.domain.budgeting.entities import Journal
from okozukai.domain.budgeting.exceptions import JournalNotClosedError
from okozukai.domain.budgeting.repositories import JournalRepository

if TYPE_CHECKING:
    from okozukai.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class JournalService:
    """Create, rename, close, reopen and delete journals.

    Lookups of unknown journals return ``None`` (or ``False`` for delete)
    so the presentation layer decides how to report them.
    """

    def __init__(self, journal_repository: JournalRepository):
        self._journal_repo = journal_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> JournalService:
        return cls(journal_repository=factory.journal_repository())

    async def list_journals(self) -> list[Journal]:
        return await self._journal_repo.find_all()

    async def get_journal(self, journal_id: UUID) -> Optional[Journal]:
        return await self._journal_repo.find_by_id(journal_id)

    async def create_journal(self, name: str, currency: str) -> Journal:
        journal = Journal.create(name, currency)
        await self._journal_repo.save(journal)
        logger.info(
            "Created journal %s (%s, %s)",
            journal.id,
            journal.name,
            journal.primary_currency,
        )
        return journal

    async def rename_journal(self, journal_id: UUID, name: str) -> Optional[Journal]:
        journal = await self._journal_repo.find_by_id(journal_id)
        if journal is None:
            logger.warning("Attempted to rename non-existent journal %s", journal_id)
            return None

        journal.rename(name)
        await self._journal_repo.save(journal)
        logger.info("Renamed journal %s to %s", journal.id, journal.name)
        return journal

    async def close_journal(self, journal_id: UUID) -> Optional[Journal]:
        journal = await self._journal_repo.find_by_id(journal_id)
        if journal is None:
            logger.warning("Attempted to close non-existent journal %s", journal_id)
            return None

        journal.close()
        await self._journal_repo.save(journal)
        logger.info("Closed journal %s", journal.id)
        return journal

    async def reopen_journal(self, journal_id: UUID) -> Optional[Journal]:
        journal = await self._journal_repo.find_by_id(journal_id)
        if journal is None:
            logger.warning("Attempted to reopen non-existent journal %s", journal_id)
            return None

        journal.reopen()
        await self._journal_repo.save(journal)
        logger.info("Reopened journal %s", journal.id)
        return journal

    async def delete_journal(self, journal_id: UUID) -> bool:
        """Delete a closed journal and everything recorded in it.

        Raises
        ------
        JournalNotClosedError
            If the journal is still open
        """
        journal = await self._journal_repo.find_by_id(journal_id)
        if journal is None:
            logger.warning("Attempted to delete non-existent journal %s", journal_id)
            return False

        if not journal.is_closed:
            raise JournalNotClosedError(journal.id)

        await self._journal_repo.delete(journal.id)
        logger.info("Deleted journal %s and its transactions", journal.id)
        return True
