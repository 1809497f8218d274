"""Transactions router: CRUD, reports and export endpoints."""

import logging
from datetime import datetime
from io import BytesIO
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import StreamingResponse

from okozukai.application.services import TransactionService
from okozukai.application.services.transaction_service import MAX_PAGE
from okozukai.domain.budgeting.entities import Transaction
from okozukai.domain.budgeting.value_objects import (
    PeriodRollup,
    SpendingByTagItem,
    TransactionFilter,
    YearGroup,
)
from okozukai.domain.shared.exceptions import ErrorCode, ValidationError
from okozukai.infrastructure.export import TransactionExportRenderer
from okozukai.presentation.api.dependencies import RepoFactory
from okozukai.presentation.api.schemas.reports import (
    MonthGroupResponse,
    PeriodRollupResponse,
    SpendingByTagItemResponse,
    SpendingByTagMonthlyResponse,
    SpendingByTagMonthResponse,
    SpendingByTagResponse,
    SummaryResponse,
    YearGroupResponse,
)
from okozukai.presentation.api.schemas.transactions import (
    TransactionCreateRequest,
    TransactionResponse,
    TransactionTagResponse,
    TransactionUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Type aliases for query parameters using Annotated
# Defaults go after '=', not inside Query()
JournalIdFilter = Annotated[UUID, Query(description="Journal to read from")]
DateFromFilter = Annotated[
    Optional[datetime],
    Query(alias="from", description="Inclusive lower bound on occurred_at"),
]
DateToFilter = Annotated[
    Optional[datetime],
    Query(alias="to", description="Inclusive upper bound on occurred_at"),
]
TagIdsFilter = Annotated[
    Optional[list[UUID]],
    Query(description="Match transactions carrying any of these tags"),
]
NoteSearchFilter = Annotated[
    Optional[str],
    Query(description="Case-insensitive substring of the note"),
]
PageParam = Annotated[int, Query(le=MAX_PAGE, description="1-based page number")]
PageSizeParam = Annotated[int, Query(description="Items per page (capped at 200)")]
FormatParam = Annotated[str, Query(description="'json' or 'csv'")]


def _build_filter(
    journal_id: UUID,
    date_from: Optional[datetime],
    date_to: Optional[datetime],
    tag_ids: Optional[list[UUID]],
    note_search: Optional[str],
) -> TransactionFilter:
    return TransactionFilter(
        journal_id=journal_id,
        date_from=date_from,
        date_to=date_to,
        tag_ids=tuple(tag_ids or ()),
        note_search=note_search,
    )


def _transaction_to_response(txn: Transaction) -> TransactionResponse:
    """Flatten a transaction with its journal name, currency and tags."""
    return TransactionResponse(
        id=txn.id,
        journal_id=txn.journal_id,
        journal_name=txn.journal_name,
        currency=txn.currency,
        type=txn.type.value,
        amount=txn.amount,
        occurred_at=txn.occurred_at,
        note=txn.note,
        tags=[
            TransactionTagResponse(id=tag.id, name=tag.name, color=tag.color)
            for tag in txn.tags
        ],
    )


def _rollup_to_response(rollup: PeriodRollup) -> PeriodRollupResponse:
    return PeriodRollupResponse(
        currency=rollup.currency,
        opening=rollup.opening,
        total_in=rollup.total_in,
        total_out=rollup.total_out,
        net_change=rollup.net_change,
        closing=rollup.closing,
    )


def _year_to_response(year: YearGroup) -> YearGroupResponse:
    return YearGroupResponse(
        year=year.year,
        months=[
            MonthGroupResponse(
                year=month.year,
                month=month.month,
                transactions=[_transaction_to_response(t) for t in month.transactions],
                rollups=[_rollup_to_response(r) for r in month.rollups],
            )
            for month in year.months
        ],
        rollups=[_rollup_to_response(r) for r in year.rollups],
    )


def _spending_item_to_response(item: SpendingByTagItem) -> SpendingByTagItemResponse:
    return SpendingByTagItemResponse(
        tag_id=item.tag_id,
        tag_name=item.tag_name,
        total_out=item.total_out,
    )


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Transaction not found",
    )


# -----------------------------------------------------------------------------
# Listing and reports (declared before /{transaction_id})
# -----------------------------------------------------------------------------


@router.get(
    "",
    summary="List transactions",
    responses={
        200: {"description": "One page of transactions, newest first"},
        400: {"description": "'from' is after 'to'"},
    },
)
async def list_transactions(  # NOQA: PLR0913
    factory: RepoFactory,
    journal_id: JournalIdFilter,
    date_from: DateFromFilter = None,
    date_to: DateToFilter = None,
    tag_ids: TagIdsFilter = None,
    note_search: NoteSearchFilter = None,
    page: PageParam = 1,
    page_size: PageSizeParam = 50,
) -> list[TransactionResponse]:
    """
    List transactions of a journal.

    Supports filtering by:
    - Date range (`from` / `to`, both inclusive)
    - Tags (any of the given `tag_ids`)
    - Note text (`note_search`, case-insensitive)

    Paging values below 1 or a page size above 200 are clamped; a page
    beyond 1,000,000 is rejected with 422.
    """
    criteria = _build_filter(journal_id, date_from, date_to, tag_ids, note_search)
    if criteria.has_inverted_range:
        msg = "'from' must be on or before 'to'."
        raise ValidationError(msg, code=ErrorCode.INVALID_DATE_RANGE)

    service = TransactionService.from_factory(factory)
    transactions = await service.list_transactions(criteria, page, page_size)
    return [_transaction_to_response(txn) for txn in transactions]


@router.get(
    "/summary",
    summary="Totals for the filtered transactions",
)
async def get_summary(  # NOQA: PLR0913
    factory: RepoFactory,
    journal_id: JournalIdFilter,
    date_from: DateFromFilter = None,
    date_to: DateToFilter = None,
    tag_ids: TagIdsFilter = None,
    note_search: NoteSearchFilter = None,
) -> SummaryResponse:
    criteria = _build_filter(journal_id, date_from, date_to, tag_ids, note_search)
    summary = await TransactionService.from_factory(factory).get_summary(criteria)
    return SummaryResponse(
        currency=summary.currency,
        total_in=summary.total_in,
        total_out=summary.total_out,
        net=summary.net,
    )


@router.get(
    "/grouped",
    summary="Transactions grouped by year and month",
)
async def get_grouped(  # NOQA: PLR0913
    factory: RepoFactory,
    journal_id: JournalIdFilter,
    date_from: DateFromFilter = None,
    date_to: DateToFilter = None,
    tag_ids: TagIdsFilter = None,
    note_search: NoteSearchFilter = None,
) -> list[YearGroupResponse]:
    """
    Group the filtered transactions by year, then month (both newest first).

    Each year and month carries a rollup with an opening balance of zero.
    """
    criteria = _build_filter(journal_id, date_from, date_to, tag_ids, note_search)
    years = await TransactionService.from_factory(factory).get_grouped(criteria)
    return [_year_to_response(year) for year in years]


@router.get(
    "/spending-by-tag",
    summary="Out spending per tag",
)
async def get_spending_by_tag(  # NOQA: PLR0913
    factory: RepoFactory,
    journal_id: JournalIdFilter,
    date_from: DateFromFilter = None,
    date_to: DateToFilter = None,
    tag_ids: TagIdsFilter = None,
    note_search: NoteSearchFilter = None,
) -> SpendingByTagResponse:
    """
    Attribute Out spending to tags.

    A transaction with several tags is split evenly between them; untagged
    spending is reported under 'Untagged'.
    """
    criteria = _build_filter(journal_id, date_from, date_to, tag_ids, note_search)
    report = await TransactionService.from_factory(factory).get_spending_by_tag(
        criteria,
    )
    return SpendingByTagResponse(
        currency=report.currency,
        items=[_spending_item_to_response(item) for item in report.items],
    )


@router.get(
    "/spending-by-tag-monthly",
    summary="Out spending per tag, per month",
)
async def get_spending_by_tag_monthly(  # NOQA: PLR0913
    factory: RepoFactory,
    journal_id: JournalIdFilter,
    date_from: DateFromFilter = None,
    date_to: DateToFilter = None,
    tag_ids: TagIdsFilter = None,
    note_search: NoteSearchFilter = None,
) -> SpendingByTagMonthlyResponse:
    criteria = _build_filter(journal_id, date_from, date_to, tag_ids, note_search)
    report = await TransactionService.from_factory(
        factory,
    ).get_spending_by_tag_monthly(criteria)
    return SpendingByTagMonthlyResponse(
        currency=report.currency,
        months=[
            SpendingByTagMonthResponse(
                year=month.year,
                month=month.month,
                items=[_spending_item_to_response(item) for item in month.items],
            )
            for month in report.months
        ],
    )


@router.get(
    "/export",
    summary="Download transactions as JSON or CSV",
    response_class=StreamingResponse,
    responses={
        200: {
            "description": "File download",
            "content": {"application/json": {}, "text/csv": {}},
        },
        400: {"description": "Unsupported export format"},
    },
)
async def export_transactions(  # NOQA: PLR0913
    factory: RepoFactory,
    journal_id: JournalIdFilter,
    format: FormatParam = "json",
    date_from: DateFromFilter = None,
    date_to: DateToFilter = None,
    tag_ids: TagIdsFilter = None,
    note_search: NoteSearchFilter = None,
) -> StreamingResponse:
    criteria = _build_filter(journal_id, date_from, date_to, tag_ids, note_search)
    result = await TransactionService.from_factory(factory).export(criteria, format)
    content = TransactionExportRenderer().render(result)

    return StreamingResponse(
        BytesIO(content),
        media_type=result.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{result.file_name}"',
        },
    )


# -----------------------------------------------------------------------------
# Single transactions
# -----------------------------------------------------------------------------


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Record a transaction",
    responses={
        201: {"description": "Transaction created"},
        400: {"description": "Invalid amount, type, note or tag ids"},
        404: {"description": "Journal not found"},
        409: {"description": "Journal is closed"},
    },
)
async def create_transaction(
    request: TransactionCreateRequest,
    factory: RepoFactory,
) -> TransactionResponse:
    service = TransactionService.from_factory(factory)

    try:
        txn = await service.create_transaction(
            journal_id=request.journal_id,
            type=request.type,
            amount=request.amount,
            occurred_at=request.occurred_at,
            note=request.note,
            tag_ids=request.tag_ids,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Domain errors are answered by the registered exception handlers
        raise

    logger.info("Transaction created: %s", txn.id)
    return _transaction_to_response(txn)


@router.get(
    "/{transaction_id}",
    summary="Get transaction details",
    responses={
        200: {"description": "Transaction details"},
        404: {"description": "Transaction not found"},
    },
)
async def get_transaction(
    transaction_id: UUID,
    factory: RepoFactory,
) -> TransactionResponse:
    txn = await TransactionService.from_factory(factory).get_transaction(
        transaction_id,
    )
    if txn is None:
        raise _not_found()
    return _transaction_to_response(txn)


@router.put(
    "/{transaction_id}",
    summary="Update a transaction",
    responses={
        200: {"description": "Transaction updated"},
        400: {"description": "Invalid amount, type, note or tag ids"},
        404: {"description": "Transaction not found"},
        409: {"description": "Journal is closed"},
    },
)
async def update_transaction(
    transaction_id: UUID,
    request: TransactionUpdateRequest,
    factory: RepoFactory,
) -> TransactionResponse:
    """Replace type, amount, date, note and tags of a transaction."""
    service = TransactionService.from_factory(factory)

    try:
        txn = await service.update_transaction(
            transaction_id=transaction_id,
            type=request.type,
            amount=request.amount,
            occurred_at=request.occurred_at,
            note=request.note,
            tag_ids=request.tag_ids,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if txn is None:
        raise _not_found()
    return _transaction_to_response(txn)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a transaction",
    responses={
        204: {"description": "Transaction deleted"},
        404: {"description": "Transaction not found"},
        409: {"description": "Journal is closed"},
    },
)
async def delete_transaction(transaction_id: UUID, factory: RepoFactory) -> None:
    service = TransactionService.from_factory(factory)

    try:
        deleted = await service.delete_transaction(transaction_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if not deleted:
        raise _not_found()
