"""Journals router for journal lifecycle endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from okozukai.application.services import JournalService
from okozukai.domain.budgeting.entities import Journal
from okozukai.presentation.api.dependencies import RepoFactory
from okozukai.presentation.api.schemas.journals import (
    JournalCreateRequest,
    JournalResponse,
    JournalUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _journal_to_response(journal: Journal) -> JournalResponse:
    return JournalResponse(
        id=journal.id,
        name=journal.name,
        primary_currency=journal.primary_currency,
        is_closed=journal.is_closed,
        created_at=journal.created_at,
    )


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Journal not found",
    )


@router.get(
    "",
    summary="List journals",
    responses={200: {"description": "All journals, newest first"}},
)
async def list_journals(factory: RepoFactory) -> list[JournalResponse]:
    service = JournalService.from_factory(factory)
    journals = await service.list_journals()
    return [_journal_to_response(journal) for journal in journals]


@router.get(
    "/{journal_id}",
    summary="Get journal",
    responses={
        200: {"description": "Journal details"},
        404: {"description": "Journal not found"},
    },
)
async def get_journal(journal_id: UUID, factory: RepoFactory) -> JournalResponse:
    service = JournalService.from_factory(factory)
    journal = await service.get_journal(journal_id)
    if journal is None:
        raise _not_found()
    return _journal_to_response(journal)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a journal",
    responses={
        201: {"description": "Journal created"},
        400: {"description": "Invalid name or currency"},
    },
)
async def create_journal(
    request: JournalCreateRequest,
    factory: RepoFactory,
) -> JournalResponse:
    """Create an open journal with a primary currency."""
    service = JournalService.from_factory(factory)

    try:
        journal = await service.create_journal(request.name, request.primary_currency)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Domain errors are answered by the registered exception handlers
        raise

    logger.info("Journal created: %s", journal.id)
    return _journal_to_response(journal)


@router.put(
    "/{journal_id}",
    summary="Rename a journal",
    responses={
        200: {"description": "Journal renamed"},
        400: {"description": "Invalid name"},
        404: {"description": "Journal not found"},
    },
)
async def update_journal(
    journal_id: UUID,
    request: JournalUpdateRequest,
    factory: RepoFactory,
) -> JournalResponse:
    service = JournalService.from_factory(factory)

    try:
        journal = await service.rename_journal(journal_id, request.name)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if journal is None:
        raise _not_found()
    return _journal_to_response(journal)


@router.delete(
    "/{journal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a closed journal",
    responses={
        204: {"description": "Journal and its transactions deleted"},
        404: {"description": "Journal not found"},
        409: {"description": "Journal is still open"},
    },
)
async def delete_journal(journal_id: UUID, factory: RepoFactory) -> None:
    """
    Delete a journal together with all of its transactions.

    Only closed journals can be deleted.
    """
    service = JournalService.from_factory(factory)

    try:
        deleted = await service.delete_journal(journal_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if not deleted:
        raise _not_found()


@router.post(
    "/{journal_id}/close",
    summary="Close a journal",
    responses={
        200: {"description": "Journal closed (idempotent)"},
        404: {"description": "Journal not found"},
    },
)
async def close_journal(journal_id: UUID, factory: RepoFactory) -> JournalResponse:
    """Close a journal. Its transactions can no longer be added, edited or removed."""
    service = JournalService.from_factory(factory)

    try:
        journal = await service.close_journal(journal_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if journal is None:
        raise _not_found()
    return _journal_to_response(journal)


@router.post(
    "/{journal_id}/reopen",
    summary="Reopen a journal",
    responses={
        200: {"description": "Journal reopened (idempotent)"},
        404: {"description": "Journal not found"},
    },
)
async def reopen_journal(journal_id: UUID, factory: RepoFactory) -> JournalResponse:
    service = JournalService.from_factory(factory)

    try:
        journal = await service.reopen_journal(journal_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if journal is None:
        raise _not_found()
    return _journal_to_response(journal)
