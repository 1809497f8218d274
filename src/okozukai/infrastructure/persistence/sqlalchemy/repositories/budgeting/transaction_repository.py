"""SQLAlchemy implementation of TransactionRepository.

Timestamps are written and compared in UTC so filtering behaves the same on
PostgreSQL and on SQLite, which stores datetimes without an offset.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from okozukai.domain.budgeting.entities import Journal, Tag, Transaction
from okozukai.domain.budgeting.repositories import TransactionRepository
from okozukai.domain.budgeting.value_objects import (
    TransactionFilter,
    TransactionType,
)
from okozukai.domain.shared.time import to_utc
from okozukai.infrastructure.persistence.sqlalchemy.models import (
    TagModel,
    TransactionModel,
)

logger = logging.getLogger(__name__)


class TransactionRepositorySQLAlchemy(TransactionRepository):
    """SQLAlchemy implementation of budget transaction repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, transaction: Transaction) -> None:
        model = await self._find_model_by_id(transaction.id)

        if model:
            logger.debug("Updating existing transaction: %s", transaction.id)
            self._update_model_from_domain(model, transaction)
        else:
            logger.debug("Creating new transaction: %s", transaction.id)
            model = self._create_model_from_domain(transaction)
            self._session.add(model)

        model.tags = await self._load_tag_models(transaction.tags)

        await self._session.flush()
        logger.debug(
            "Transaction saved: %s %s (ID: %s)",
            transaction.type.value,
            transaction.amount,
            transaction.id,
        )

    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        model = await self._find_model_by_id(transaction_id)

        if not model:
            return None

        return self._map_to_domain(model)

    async def find_page(
        self,
        criteria: TransactionFilter,
        page: int,
        page_size: int,
    ) -> list[Transaction]:
        stmt = self._ordered(self._filtered_query(criteria))
        stmt = stmt.offset((page - 1) * page_size).limit(page_size)
        return await self._execute_and_map(stmt)

    async def find_matching(self, criteria: TransactionFilter) -> list[Transaction]:
        stmt = self._ordered(self._filtered_query(criteria))
        return await self._execute_and_map(stmt)

    async def delete(self, transaction_id: UUID) -> None:
        model = await self._find_model_by_id(transaction_id)

        if model:
            # Tag links go with the row through the secondary relationship
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Transaction deleted: %s", transaction_id)

    # -------------------------------------------------------------------------
    # Query building
    # -------------------------------------------------------------------------

    @staticmethod
    def _base_query() -> Select:
        # Always refresh journal and tags from the database
        return select(TransactionModel).execution_options(populate_existing=True)

    def _filtered_query(self, criteria: TransactionFilter) -> Select:
        stmt = self._base_query().where(
            TransactionModel.journal_id == criteria.journal_id,
        )

        if criteria.date_from is not None:
            stmt = stmt.where(TransactionModel.occurred_at >= to_utc(criteria.date_from))
        if criteria.date_to is not None:
            stmt = stmt.where(TransactionModel.occurred_at <= to_utc(criteria.date_to))

        if criteria.tag_ids:
            stmt = stmt.where(
                TransactionModel.tags.any(TagModel.id.in_(criteria.tag_ids)),
            )

        if criteria.note_search:
            stmt = stmt.where(
                TransactionModel.note.icontains(
                    criteria.note_search.strip(),
                    autoescape=True,
                ),
            )

        return stmt

    @staticmethod
    def _ordered(stmt: Select) -> Select:
        return stmt.order_by(
            TransactionModel.occurred_at.desc(),
            TransactionModel.created_at.desc(),
        )

    async def _execute_and_map(self, stmt: Select) -> list[Transaction]:
        result = await self._session.execute(stmt)
        models = result.unique().scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def _find_model_by_id(
        self,
        transaction_id: UUID,
    ) -> Optional[TransactionModel]:
        stmt = self._base_query().where(TransactionModel.id == transaction_id)
        result = await self._session.execute(stmt)
        return result.unique().scalar_one_or_none()

    async def _load_tag_models(self, tags: tuple[Tag, ...]) -> list[TagModel]:
        if not tags:
            return []

        stmt = select(TagModel).where(TagModel.id.in_([tag.id for tag in tags]))
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    @staticmethod
    def _create_model_from_domain(transaction: Transaction) -> TransactionModel:
        return TransactionModel(
            id=transaction.id,
            journal_id=transaction.journal_id,
            type=transaction.type.value,
            amount=transaction.amount,
            occurred_at=to_utc(transaction.occurred_at),
            note=transaction.note,
            created_at=to_utc(transaction.created_at),
            tags=[],
        )

    @staticmethod
    def _update_model_from_domain(
        model: TransactionModel,
        transaction: Transaction,
    ) -> None:
        model.type = transaction.type.value
        model.amount = transaction.amount
        model.occurred_at = to_utc(transaction.occurred_at)
        model.note = transaction.note

    @staticmethod
    def _map_to_domain(model: TransactionModel) -> Transaction:
        journal_model = model.journal
        journal = Journal.reconstitute(
            id=journal_model.id,
            name=journal_model.name,
            primary_currency=journal_model.primary_currency,
            is_closed=journal_model.is_closed,
            created_at=journal_model.created_at,
        )
        tags = [
            Tag.reconstitute(id=tag.id, name=tag.name, color=tag.color)
            for tag in model.tags
        ]
        return Transaction.reconstitute(
            id=model.id,
            journal_id=model.journal_id,
            type=TransactionType(model.type),
            amount=Decimal(model.amount),
            occurred_at=model.occurred_at,
            note=model.note,
            created_at=model.created_at,
            tags=tags,
            journal=journal,
        )
