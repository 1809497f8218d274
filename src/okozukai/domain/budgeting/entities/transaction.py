"""Transaction entity."""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import TYPE_CHECKING, Iterable, Optional
from uuid import UUID, uuid4

from okozukai.domain.budgeting.exceptions import (
    InvalidAmountError,
    InvalidTransactionTypeError,
    JournalClosedError,
)
from okozukai.domain.budgeting.value_objects.transaction_type import TransactionType
from okozukai.domain.shared.exceptions import ValidationError
from okozukai.domain.shared.time import ensure_tz_aware, utc_now

if TYPE_CHECKING:
    from okozukai.domain.budgeting.entities.journal import Journal
    from okozukai.domain.budgeting.entities.tag import Tag

MAX_NOTE_LENGTH = 500
AMOUNT_QUANTUM = Decimal("0.01")


class Transaction:
    """
    A single dated money movement (In or Out) within a journal.

    Invariants:
    - ``amount`` is strictly positive with two decimal places
    - Cannot be created, updated or deleted while the owning journal is closed
    - Tags are unique by identity
    """

    def __init__(  # NOQA: PLR0913
        self,
        journal_id: UUID,
        type: TransactionType,
        amount: Decimal,
        occurred_at: datetime,
        note: Optional[str] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        tags: Optional[Iterable[Tag]] = None,
        journal: Optional[Journal] = None,
    ):
        """
        Initialize a transaction.

        Parameters
        ----------
        journal_id
            Owning journal
        type
            In or Out
        amount
            Strictly positive amount (rounded to two decimal places)
        occurred_at
            When the money moved (naive values are treated as UTC)
        note
            Optional free text, blank becomes None
        id
            Transaction ID (generated if not provided)
        created_at
            System creation timestamp (defaults to now)
        tags
            Attached tags, deduplicated by ID
        journal
            Loaded owning journal, provides name and currency for display
        """
        self._id = id if id is not None else uuid4()
        self._journal_id = journal_id
        self._type = self._coerce_type(type)
        self._amount = self._normalize_amount(amount)
        self._occurred_at = ensure_tz_aware(occurred_at)
        self._note = self._normalize_note(note)
        self._created_at = ensure_tz_aware(created_at) if created_at else utc_now()
        self._tags: list[Tag] = []
        self._journal = journal
        if tags:
            self.set_tags(tags)

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        journal_id: UUID,
        journal_is_closed: bool,
        type: TransactionType,
        amount: Decimal,
        occurred_at: datetime,
        note: Optional[str] = None,
    ) -> Transaction:
        if journal_is_closed:
            msg = "Cannot add a transaction to a closed journal."
            raise JournalClosedError(msg, journal_id)

        return cls(
            journal_id=journal_id,
            type=type,
            amount=amount,
            occurred_at=occurred_at,
            note=note,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        journal_id: UUID,
        type: TransactionType,
        amount: Decimal,
        occurred_at: datetime,
        note: Optional[str],
        created_at: datetime,
        tags: Iterable[Tag],
        journal: Optional[Journal] = None,
    ) -> Transaction:
        return cls(
            id=id,
            journal_id=journal_id,
            type=type,
            amount=amount,
            occurred_at=occurred_at,
            note=note,
            created_at=created_at,
            tags=tags,
            journal=journal,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def journal_id(self) -> UUID:
        return self._journal_id

    @property
    def type(self) -> TransactionType:
        return self._type

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def occurred_at(self) -> datetime:
        return self._occurred_at

    @property
    def note(self) -> Optional[str]:
        return self._note

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def tags(self) -> tuple[Tag, ...]:
        return tuple(self._tags)

    @property
    def journal(self) -> Optional[Journal]:
        return self._journal

    @property
    def journal_name(self) -> str:
        return self._journal.name if self._journal else ""

    @property
    def currency(self) -> str:
        return self._journal.primary_currency if self._journal else ""

    @property
    def is_out(self) -> bool:
        return self._type is TransactionType.OUT

    def update(  # NOQA: PLR0913
        self,
        journal_is_closed: bool,
        type: TransactionType,
        amount: Decimal,
        occurred_at: datetime,
        note: Optional[str] = None,
    ) -> None:
        if journal_is_closed:
            msg = "Cannot modify a transaction in a closed journal."
            raise JournalClosedError(msg, self._journal_id)

        self._type = self._coerce_type(type)
        self._amount = self._normalize_amount(amount)
        self._occurred_at = ensure_tz_aware(occurred_at)
        self._note = self._normalize_note(note)

    def ensure_deletable(self, journal_is_closed: bool) -> None:
        if journal_is_closed:
            msg = "Cannot delete a transaction from a closed journal."
            raise JournalClosedError(msg, self._journal_id)

    def set_tags(self, tags: Iterable[Tag]) -> None:
        unique: dict[UUID, Tag] = {}
        for tag in tags:
            unique[tag.id] = tag
        self._tags = list(unique.values())

    def attach_journal(self, journal: Journal) -> None:
        if journal.id != self._journal_id:
            msg = "Journal does not own this transaction"
            raise ValidationError(msg)
        self._journal = journal

    @staticmethod
    def _coerce_type(value: TransactionType | str) -> TransactionType:
        try:
            return TransactionType(value)
        except ValueError as exc:
            raise InvalidTransactionTypeError(value) from exc

    @staticmethod
    def _normalize_amount(amount: Decimal) -> Decimal:
        try:
            value = Decimal(str(amount)).quantize(AMOUNT_QUANTUM, ROUND_HALF_EVEN)
        except (InvalidOperation, ValueError) as exc:
            raise InvalidAmountError(amount) from exc
        if value <= 0:
            raise InvalidAmountError(amount)
        return value

    @staticmethod
    def _normalize_note(note: Optional[str]) -> Optional[str]:
        if note is None or not note.strip():
            return None

        trimmed = note.strip()
        if len(trimmed) > MAX_NOTE_LENGTH:
            msg = f"Note must be {MAX_NOTE_LENGTH} characters or fewer."
            raise ValidationError(msg)
        return trimmed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self._id}, type={self._type.value}, "
            f"amount={self._amount}, occurred_at={self._occurred_at.isoformat()})"
        )
