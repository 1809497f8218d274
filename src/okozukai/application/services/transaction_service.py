"""Transaction service: CRUD, listing, reports and export."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Optional
from uuid import UUID

from okozukai.application.dtos import ExportResult, TransactionExportDTO
from okozukai.domain.budgeting.entities import Tag, Transaction
from okozukai.domain.budgeting.exceptions import (
    JournalNotFoundError,
    UnknownTagError,
)
from okozukai.domain.budgeting.repositories import (
    JournalRepository,
    TagRepository,
    TransactionRepository,
)
from okozukai.domain.budgeting.services import TransactionReportService
from okozukai.domain.budgeting.value_objects import (
    ExportFormat,
    SpendingByTag,
    SpendingByTagMonthly,
    TransactionFilter,
    TransactionSummary,
    TransactionType,
    YearGroup,
)

if TYPE_CHECKING:
    from okozukai.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200
# Keeps the SQL OFFSET within a 64-bit integer
MAX_PAGE = 1_000_000


class TransactionService:
    """Application service for transactions within a journal.

    Reports and exports load every matching transaction and aggregate in
    memory through ``TransactionReportService``.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        journal_repository: JournalRepository,
        tag_repository: TagRepository,
    ):
        self._transaction_repo = transaction_repository
        self._journal_repo = journal_repository
        self._tag_repo = tag_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> TransactionService:
        return cls(
            transaction_repository=factory.transaction_repository(),
            journal_repository=factory.journal_repository(),
            tag_repository=factory.tag_repository(),
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    async def list_transactions(
        self,
        criteria: TransactionFilter,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[Transaction]:
        """
        List one page of transactions, newest first.

        Parameters
        ----------
        criteria
            Journal and optional date, tag and note filters
        page
            1-based page number, clamped to 1..MAX_PAGE
        page_size
            Values below 1 fall back to 50, values above 200 are capped

        Returns
        -------
        Transactions ordered by occurred_at then created_at, both descending
        """
        page = min(max(page, 1), MAX_PAGE)
        if page_size < 1:
            page_size = DEFAULT_PAGE_SIZE
        page_size = min(page_size, MAX_PAGE_SIZE)

        return await self._transaction_repo.find_page(criteria, page, page_size)

    async def get_transaction(self, transaction_id: UUID) -> Optional[Transaction]:
        return await self._transaction_repo.find_by_id(transaction_id)

    async def get_summary(self, criteria: TransactionFilter) -> TransactionSummary:
        transactions = await self._transaction_repo.find_matching(criteria)
        return TransactionReportService.summarize(transactions)

    async def get_grouped(self, criteria: TransactionFilter) -> list[YearGroup]:
        transactions = await self._transaction_repo.find_matching(criteria)
        logger.info("Building grouped transactions for %d records", len(transactions))
        return TransactionReportService.group_by_year_month(transactions)

    async def get_spending_by_tag(self, criteria: TransactionFilter) -> SpendingByTag:
        transactions = await self._transaction_repo.find_matching(criteria)
        logger.info(
            "Building spending-by-tag breakdown for %d records",
            len(transactions),
        )
        currency = await self._journal_currency(criteria.journal_id)
        return TransactionReportService.spending_by_tag(transactions, currency)

    async def get_spending_by_tag_monthly(
        self,
        criteria: TransactionFilter,
    ) -> SpendingByTagMonthly:
        transactions = await self._transaction_repo.find_matching(criteria)
        logger.info(
            "Building monthly spending-by-tag breakdown for %d records",
            len(transactions),
        )
        currency = await self._journal_currency(criteria.journal_id)
        return TransactionReportService.spending_by_tag_monthly(transactions, currency)

    async def export(
        self,
        criteria: TransactionFilter,
        format_value: str,
    ) -> ExportResult:
        """Collect matching transactions for export.

        The format is validated before anything is loaded.
        """
        export_format = ExportFormat.parse(format_value)
        transactions = await self._transaction_repo.find_matching(criteria)
        result = ExportResult(
            format=export_format,
            transactions=[TransactionExportDTO.from_transaction(t) for t in transactions],
        )
        logger.info(
            "Exporting %d transactions as %s",
            result.count,
            export_format.value.upper(),
        )
        return result

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    async def create_transaction(  # NOQA: PLR0913
        self,
        journal_id: UUID,
        type: TransactionType,
        amount: Decimal,
        occurred_at: datetime,
        note: Optional[str] = None,
        tag_ids: Iterable[UUID] = (),
    ) -> Transaction:
        """
        Record a new transaction in an open journal.

        Raises
        ------
        JournalNotFoundError
            If the journal does not exist
        JournalClosedError
            If the journal is closed
        UnknownTagError
            If any tag id does not resolve to a tag
        """
        journal = await self._journal_repo.find_by_id(journal_id)
        if journal is None:
            raise JournalNotFoundError(journal_id)

        transaction = Transaction.create(
            journal_id=journal.id,
            journal_is_closed=journal.is_closed,
            type=type,
            amount=amount,
            occurred_at=occurred_at,
            note=note,
        )
        transaction.set_tags(await self._resolve_tags(tag_ids))

        await self._transaction_repo.save(transaction)
        logger.info(
            "Created transaction %s of type %s with amount %s in journal %s",
            transaction.id,
            transaction.type.value,
            transaction.amount,
            journal.id,
        )

        created = await self._transaction_repo.find_by_id(transaction.id)
        if created is None:
            transaction.attach_journal(journal)
            return transaction
        return created

    async def update_transaction(  # NOQA: PLR0913
        self,
        transaction_id: UUID,
        type: TransactionType,
        amount: Decimal,
        occurred_at: datetime,
        note: Optional[str] = None,
        tag_ids: Iterable[UUID] = (),
    ) -> Optional[Transaction]:
        transaction = await self._transaction_repo.find_by_id(transaction_id)
        if transaction is None:
            logger.warning(
                "Attempted to update non-existent transaction %s",
                transaction_id,
            )
            return None

        journal = await self._journal_repo.find_by_id(transaction.journal_id)
        if journal is None:
            raise JournalNotFoundError(transaction.journal_id)

        transaction.update(
            journal_is_closed=journal.is_closed,
            type=type,
            amount=amount,
            occurred_at=occurred_at,
            note=note,
        )
        transaction.set_tags(await self._resolve_tags(tag_ids))

        await self._transaction_repo.save(transaction)
        logger.info("Updated transaction %s", transaction.id)

        return await self._transaction_repo.find_by_id(transaction.id) or transaction

    async def delete_transaction(self, transaction_id: UUID) -> bool:
        transaction = await self._transaction_repo.find_by_id(transaction_id)
        if transaction is None:
            logger.warning(
                "Attempted to delete non-existent transaction %s",
                transaction_id,
            )
            return False

        journal = await self._journal_repo.find_by_id(transaction.journal_id)
        if journal is None:
            raise JournalNotFoundError(transaction.journal_id)

        transaction.ensure_deletable(journal.is_closed)

        await self._transaction_repo.delete(transaction.id)
        logger.info("Deleted transaction %s", transaction.id)
        return True

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _resolve_tags(self, tag_ids: Iterable[UUID]) -> list[Tag]:
        distinct_ids = list(dict.fromkeys(tag_ids))
        if not distinct_ids:
            return []

        tags = await self._tag_repo.find_by_ids(distinct_ids)
        if len(tags) != len(distinct_ids):
            found = {tag.id for tag in tags}
            raise UnknownTagError([i for i in distinct_ids if i not in found])
        return tags

    async def _journal_currency(self, journal_id: UUID) -> str:
        journal = await self._journal_repo.find_by_id(journal_id)
        return journal.primary_currency if journal else ""
