"""SQLAlchemy model for journals."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from okozukai.infrastructure.persistence.sqlalchemy.models.base import Base


class JournalModel(Base):
    """Database model for journals."""

    __tablename__ = "journals"

    # Primary key (UUID from domain)
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    primary_currency: Mapped[str] = mapped_column(String(3), nullable=False)
    is_closed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Domain timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<JournalModel(id={self.id}, name={self.name}, "
            f"currency={self.primary_currency}, closed={self.is_closed})>"
        )
