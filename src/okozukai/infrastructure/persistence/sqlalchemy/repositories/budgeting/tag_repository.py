"""SQLAlchemy implementation of TagRepository."""

from __future__ import annotations

import logging
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from okozukai.domain.budgeting.entities import Tag
from okozukai.domain.budgeting.exceptions import DuplicateTagError
from okozukai.domain.budgeting.repositories import TagRepository
from okozukai.infrastructure.persistence.sqlalchemy.models import (
    TagModel,
    transaction_tags,
)

logger = logging.getLogger(__name__)


class TagRepositorySQLAlchemy(TagRepository):
    """SQLAlchemy implementation of tag repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, tag: Tag) -> None:
        model = await self._find_model_by_id(tag.id)

        if model:
            logger.debug("Updating existing tag: %s", tag.name)
            model.name = tag.name
            model.color = tag.color
        else:
            logger.debug("Creating new tag: %s", tag.name)
            model = self._create_model_from_domain(tag)
            self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Keep session usable after a failed flush
            await self._session.rollback()

            msg = str(getattr(exc, "orig", exc))
            # Unique name violation (supports SQLite and PostgreSQL)
            if "uq_tags_name" in msg or "tags.name" in msg:
                raise DuplicateTagError(tag.name) from exc

            error_msg = f"Failed to save tag due to database constraint: {msg}"
            raise ValueError(error_msg) from exc

        logger.debug("Tag saved: %s (ID: %s)", tag.name, tag.id)

    async def find_by_id(self, tag_id: UUID) -> Optional[Tag]:
        model = await self._find_model_by_id(tag_id)
        return self._map_to_domain(model) if model else None

    async def find_by_ids(self, tag_ids: Iterable[UUID]) -> list[Tag]:
        ids = list(tag_ids)
        if not ids:
            return []

        stmt = select(TagModel).where(TagModel.id.in_(ids))
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_name(self, name: str) -> Optional[Tag]:
        stmt = select(TagModel).where(TagModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_all(self) -> list[Tag]:
        stmt = select(TagModel).order_by(TagModel.name)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(TagModel)
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def detach_from_transactions(self, tag_id: UUID) -> None:
        await self._session.execute(
            delete(transaction_tags).where(transaction_tags.c.tag_id == tag_id),
        )
        await self._session.flush()

    async def delete(self, tag_id: UUID) -> None:
        model = await self._find_model_by_id(tag_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Tag deleted: %s", tag_id)

    async def _find_model_by_id(self, tag_id: UUID) -> Optional[TagModel]:
        stmt = select(TagModel).where(TagModel.id == tag_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _create_model_from_domain(tag: Tag) -> TagModel:
        return TagModel(id=tag.id, name=tag.name, color=tag.color)

    @staticmethod
    def _map_to_domain(model: TagModel) -> Tag:
        return Tag.reconstitute(id=model.id, name=model.name, color=model.color)
