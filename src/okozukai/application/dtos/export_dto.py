"""DTOs for transaction export."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from okozukai.domain.budgeting.value_objects import ExportFormat

if TYPE_CHECKING:
    from okozukai.domain.budgeting.entities import Transaction

CSV_HEADER: tuple[str, ...] = (
    "Id",
    "JournalId",
    "JournalName",
    "Currency",
    "Type",
    "Amount",
    "OccurredAt",
    "Note",
    "Tags",
)
TAG_SEPARATOR = "|"


@dataclass(frozen=True)
class TransactionExportDTO:
    """Flattened transaction record for export."""

    id: str
    journal_id: str
    journal_name: str
    currency: str
    type: str
    amount: str
    occurred_at: str
    note: Optional[str]
    tags: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "journal_id": self.journal_id,
            "journal_name": self.journal_name,
            "currency": self.currency,
            "type": self.type,
            "amount": self.amount,
            "occurred_at": self.occurred_at,
            "note": self.note,
            "tags": list(self.tags),
        }

    def to_csv_row(self) -> list[str]:
        """Values in ``CSV_HEADER`` order; tag names joined by '|'."""
        return [
            self.id,
            self.journal_id,
            self.journal_name,
            self.currency,
            self.type,
            self.amount,
            self.occurred_at,
            self.note or "",
            TAG_SEPARATOR.join(self.tags),
        ]

    @classmethod
    def from_transaction(cls, txn: Transaction) -> TransactionExportDTO:
        return cls(
            id=str(txn.id),
            journal_id=str(txn.journal_id),
            journal_name=txn.journal_name,
            currency=txn.currency,
            type=txn.type.value,
            amount=str(txn.amount),
            occurred_at=txn.occurred_at.isoformat(),
            note=txn.note,
            tags=tuple(tag.name for tag in txn.tags),
        )


@dataclass(frozen=True)
class ExportResult:
    """Transactions selected for export together with the requested format."""

    format: ExportFormat
    transactions: list[TransactionExportDTO]

    @property
    def count(self) -> int:
        return len(self.transactions)

    @property
    def media_type(self) -> str:
        return self.format.media_type

    @property
    def file_name(self) -> str:
        return self.format.file_name
