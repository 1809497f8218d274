"""Journal entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from okozukai.domain.shared.exceptions import ErrorCode, ValidationError
from okozukai.domain.shared.time import ensure_tz_aware, utc_now

MAX_NAME_LENGTH = 100
CURRENCY_CODE_LENGTH = 3


class Journal:
    """
    A named ledger holding transactions in a single primary currency.

    Lifecycle:
    - Created open
    - Can be closed (no transactions may be added, edited or removed) and reopened
    - Can only be deleted once closed; deletion cascades to its transactions
    """

    def __init__(
        self,
        name: str,
        primary_currency: str,
        id: Optional[UUID] = None,
        is_closed: bool = False,
        created_at: Optional[datetime] = None,
    ):
        """
        Initialize a journal.

        Parameters
        ----------
        name
            Display name (trimmed, non-blank, at most 100 characters)
        primary_currency
            3-letter currency code (trimmed and upper-cased)
        id
            Journal ID (generated if not provided, used for reconstitution)
        is_closed
            Whether the journal is closed (defaults to False)
        created_at
            Creation timestamp (defaults to now, used for reconstitution)
        """
        self._id = id if id is not None else uuid4()
        self._name = self._normalize_name(name)
        self._primary_currency = self._normalize_currency(primary_currency)
        self._is_closed = is_closed
        self._created_at = ensure_tz_aware(created_at) if created_at else utc_now()

    @classmethod
    def create(cls, name: str, currency: str) -> "Journal":
        return cls(name=name, primary_currency=currency)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        primary_currency: str,
        is_closed: bool,
        created_at: datetime,
    ) -> "Journal":
        return cls(
            id=id,
            name=name,
            primary_currency=primary_currency,
            is_closed=is_closed,
            created_at=created_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def primary_currency(self) -> str:
        return self._primary_currency

    @property
    def is_closed(self) -> bool:
        return self._is_closed

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def rename(self, new_name: str) -> None:
        self._name = self._normalize_name(new_name)

    def close(self) -> None:
        self._is_closed = True

    def reopen(self) -> None:
        self._is_closed = False

    @staticmethod
    def _normalize_name(name: Optional[str]) -> str:
        if not name or not name.strip():
            msg = "Journal name is required."
            raise ValidationError(msg, code=ErrorCode.INVALID_NAME)

        trimmed = name.strip()
        if len(trimmed) > MAX_NAME_LENGTH:
            msg = f"Journal name must be {MAX_NAME_LENGTH} characters or fewer."
            raise ValidationError(msg, code=ErrorCode.INVALID_NAME)
        return trimmed

    @staticmethod
    def _normalize_currency(currency: Optional[str]) -> str:
        if not currency or not currency.strip():
            msg = "Primary currency is required."
            raise ValidationError(msg, code=ErrorCode.INVALID_CURRENCY)

        normalized = currency.strip().upper()
        if len(normalized) != CURRENCY_CODE_LENGTH:
            msg = "Primary currency must be a 3-letter ISO code."
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_CURRENCY,
                details={"currency": currency},
            )
        return normalized

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Journal):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Journal(id={self._id}, name={self._name!r}, "
            f"currency={self._primary_currency}, closed={self._is_closed})"
        )
