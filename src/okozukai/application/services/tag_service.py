"""Tag management service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from okozukai.domain.budgeting.entities import Tag
from okozukai.domain.budgeting.exceptions import DuplicateTagError
from okozukai.domain.budgeting.repositories import TagRepository
from okozukai.domain.budgeting.services import TagColorService

if TYPE_CHECKING:
    from okozukai.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class TagService:
    """Create, rename and delete tags while keeping names unique."""

    def __init__(self, tag_repository: TagRepository):
        self._tag_repo = tag_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> TagService:
        return cls(tag_repository=factory.tag_repository())

    async def list_tags(self) -> list[Tag]:
        return await self._tag_repo.find_all()

    async def get_tag(self, tag_id: UUID) -> Optional[Tag]:
        return await self._tag_repo.find_by_id(tag_id)

    async def create_tag(self, name: str) -> Tag:
        normalized = Tag.normalize_name(name)

        if await self._tag_repo.find_by_name(normalized) is not None:
            raise DuplicateTagError(normalized)

        # Not atomic: concurrent creates may pick the same colour.
        color = TagColorService.color_for(await self._tag_repo.count())
        tag = Tag.create(normalized, color)
        await self._tag_repo.save(tag)

        logger.info("Created tag %s (%s, %s)", tag.id, tag.name, tag.color)
        return tag

    async def rename_tag(self, tag_id: UUID, name: str) -> Optional[Tag]:
        tag = await self._tag_repo.find_by_id(tag_id)
        if tag is None:
            logger.warning("Attempted to rename non-existent tag %s", tag_id)
            return None

        normalized = Tag.normalize_name(name)
        existing = await self._tag_repo.find_by_name(normalized)
        if existing is not None and existing.id != tag.id:
            raise DuplicateTagError(normalized)

        tag.rename(normalized)
        await self._tag_repo.save(tag)
        logger.info("Renamed tag %s to %s", tag.id, tag.name)
        return tag

    async def delete_tag(self, tag_id: UUID) -> bool:
        tag = await self._tag_repo.find_by_id(tag_id)
        if tag is None:
            logger.warning("Attempted to delete non-existent tag %s", tag_id)
            return False

        await self._tag_repo.detach_from_transactions(tag.id)
        await self._tag_repo.delete(tag.id)
        logger.info("Deleted tag %s (%s)", tag.id, tag.name)
        return True
