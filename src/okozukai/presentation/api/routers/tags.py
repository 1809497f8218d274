"""Tags router for tag management endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from okozukai.application.services import TagService
from okozukai.domain.budgeting.entities import Tag
from okozukai.presentation.api.dependencies import RepoFactory
from okozukai.presentation.api.schemas.tags import (
    TagCreateRequest,
    TagResponse,
    TagUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _tag_to_response(tag: Tag) -> TagResponse:
    return TagResponse(id=tag.id, name=tag.name, color=tag.color)


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Tag not found",
    )


@router.get(
    "",
    summary="List tags",
    responses={200: {"description": "All tags ordered by name"}},
)
async def list_tags(factory: RepoFactory) -> list[TagResponse]:
    service = TagService.from_factory(factory)
    return [_tag_to_response(tag) for tag in await service.list_tags()]


@router.get(
    "/{tag_id}",
    summary="Get tag",
    responses={
        200: {"description": "Tag details"},
        404: {"description": "Tag not found"},
    },
)
async def get_tag(tag_id: UUID, factory: RepoFactory) -> TagResponse:
    service = TagService.from_factory(factory)
    tag = await service.get_tag(tag_id)
    if tag is None:
        raise _not_found()
    return _tag_to_response(tag)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a tag",
    responses={
        201: {"description": "Tag created with an automatically assigned colour"},
        400: {"description": "Invalid name"},
        409: {"description": "A tag with this name already exists"},
    },
)
async def create_tag(request: TagCreateRequest, factory: RepoFactory) -> TagResponse:
    service = TagService.from_factory(factory)

    try:
        tag = await service.create_tag(request.name)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Domain errors are answered by the registered exception handlers
        raise

    logger.info("Tag created: %s", tag.id)
    return _tag_to_response(tag)


@router.put(
    "/{tag_id}",
    summary="Rename a tag",
    responses={
        200: {"description": "Tag renamed"},
        400: {"description": "Invalid name"},
        404: {"description": "Tag not found"},
        409: {"description": "A tag with this name already exists"},
    },
)
async def update_tag(
    tag_id: UUID,
    request: TagUpdateRequest,
    factory: RepoFactory,
) -> TagResponse:
    service = TagService.from_factory(factory)

    try:
        tag = await service.rename_tag(tag_id, request.name)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if tag is None:
        raise _not_found()
    return _tag_to_response(tag)


@router.delete(
    "/{tag_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a tag",
    responses={
        204: {"description": "Tag removed from all transactions and deleted"},
        404: {"description": "Tag not found"},
    },
)
async def delete_tag(tag_id: UUID, factory: RepoFactory) -> None:
    service = TagService.from_factory(factory)

    try:
        deleted = await service.delete_tag(tag_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if not deleted:
        raise _not_found()
