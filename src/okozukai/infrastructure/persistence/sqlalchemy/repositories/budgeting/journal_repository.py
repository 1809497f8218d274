"""SQLAlchemy implementation of JournalRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from okozukai.domain.budgeting.entities import Journal
from okozukai.domain.budgeting.repositories import JournalRepository
from okozukai.domain.shared.time import to_utc
from okozukai.infrastructure.persistence.sqlalchemy.models import (
    JournalModel,
    TransactionModel,
    transaction_tags,
)

logger = logging.getLogger(__name__)


class JournalRepositorySQLAlchemy(JournalRepository):
    """SQLAlchemy implementation of journal repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, journal: Journal) -> None:
        model = await self._find_model_by_id(journal.id)

        if model:
            logger.debug("Updating existing journal: %s", journal.name)
            self._update_model_from_domain(model, journal)
        else:
            logger.debug("Creating new journal: %s", journal.name)
            model = self._create_model_from_domain(journal)
            self._session.add(model)

        await self._session.flush()
        logger.debug("Journal saved: %s (ID: %s)", journal.name, journal.id)

    async def find_by_id(self, journal_id: UUID) -> Optional[Journal]:
        model = await self._find_model_by_id(journal_id)

        if not model:
            return None

        return self._map_to_domain(model)

    async def find_all(self) -> list[Journal]:
        stmt = select(JournalModel).order_by(JournalModel.created_at.desc())
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def delete(self, journal_id: UUID) -> None:
        # Tag links first, then transactions, then the journal itself
        journal_transactions = select(TransactionModel.id).where(
            TransactionModel.journal_id == journal_id,
        )
        await self._session.execute(
            delete(transaction_tags).where(
                transaction_tags.c.transaction_id.in_(journal_transactions),
            ),
        )
        await self._session.execute(
            delete(TransactionModel).where(TransactionModel.journal_id == journal_id),
        )
        await self._session.execute(
            delete(JournalModel).where(JournalModel.id == journal_id),
        )
        await self._session.flush()
        logger.info("Journal deleted: %s", journal_id)

    async def _find_model_by_id(self, journal_id: UUID) -> Optional[JournalModel]:
        stmt = select(JournalModel).where(JournalModel.id == journal_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _create_model_from_domain(self, journal: Journal) -> JournalModel:
        return JournalModel(
            id=journal.id,
            name=journal.name,
            primary_currency=journal.primary_currency,
            is_closed=journal.is_closed,
            created_at=to_utc(journal.created_at),
        )

    def _update_model_from_domain(self, model: JournalModel, journal: Journal) -> None:
        model.name = journal.name
        model.primary_currency = journal.primary_currency
        model.is_closed = journal.is_closed

    @staticmethod
    def _map_to_domain(model: JournalModel) -> Journal:
        return Journal.reconstitute(
            id=model.id,
            name=model.name,
            primary_currency=model.primary_currency,
            is_closed=model.is_closed,
            created_at=model.created_at,
        )
