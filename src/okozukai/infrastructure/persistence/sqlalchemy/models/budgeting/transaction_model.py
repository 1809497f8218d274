"""SQLAlchemy model for budget transactions and their tag links."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Table,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from okozukai.infrastructure.persistence.sqlalchemy.models.base import Base
from okozukai.infrastructure.persistence.sqlalchemy.models.budgeting.journal_model import (  # NOQA: E501
    JournalModel,
)
from okozukai.infrastructure.persistence.sqlalchemy.models.budgeting.tag_model import (
    TagModel,
)

transaction_tags = Table(
    "transaction_tags",
    Base.metadata,
    Column(
        "transaction_id",
        Uuid,
        ForeignKey("transactions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Uuid,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Index("ix_transaction_tags_tag_id", "tag_id"),
)


class TransactionModel(Base):
    """Database model for budget transactions."""

    __tablename__ = "transactions"

    __table_args__ = (
        # Every query is journal-scoped and ordered by date
        Index("ix_transactions_journal_occurred_at", "journal_id", "occurred_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    journal_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("journals.id", ondelete="CASCADE"),
        nullable=False,
    )

    type: Mapped[str] = mapped_column(String(3), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    occurred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    note: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Domain timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    # Relationships
    journal: Mapped[JournalModel] = relationship(
        "JournalModel",
        lazy="joined",  # Name and currency are part of every read
    )
    tags: Mapped[list[TagModel]] = relationship(
        "TagModel",
        secondary=transaction_tags,
        lazy="selectin",
        order_by="TagModel.name",
    )

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, type={self.type}, "
            f"amount={self.amount}, occurred_at={self.occurred_at})>"
        )
