"""Budgeting domain exceptions."""

from typing import Sequence
from uuid import UUID

from okozukai.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidAmountError(ValidationError):
    """Raised when a transaction amount is zero or negative."""

    def __init__(self, amount: object) -> None:
        super().__init__(
            message="Amount must be greater than zero.",
            code=ErrorCode.INVALID_AMOUNT,
            details={"amount": str(amount)},
        )


class InvalidTransactionTypeError(ValidationError):
    """Raised when a transaction type is neither 'In' nor 'Out'."""

    def __init__(self, value: object) -> None:
        super().__init__(
            message=f"Invalid transaction type '{value}'. Valid types: In, Out",
            code=ErrorCode.INVALID_TRANSACTION_TYPE,
            details={"value": str(value)},
        )


class UnknownTagError(ValidationError):
    """Raised when a transaction references tag ids that do not exist."""

    def __init__(self, tag_ids: Sequence[UUID]) -> None:
        super().__init__(
            message="One or more tag IDs are invalid.",
            code=ErrorCode.INVALID_TAG_REFERENCE,
            details={"tag_ids": [str(tag_id) for tag_id in tag_ids]},
        )


class JournalNotFoundError(EntityNotFoundError):
    """Raised when a journal cannot be found."""

    def __init__(self, journal_id: UUID) -> None:
        super().__init__(
            message=f"Journal '{journal_id}' not found",
            code=ErrorCode.JOURNAL_NOT_FOUND,
            details={"journal_id": str(journal_id)},
        )


class JournalClosedError(ConflictError):
    """Raised when a transaction is created, changed or removed in a closed journal."""

    def __init__(self, message: str, journal_id: UUID | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.JOURNAL_CLOSED,
            details={"journal_id": str(journal_id) if journal_id else None},
        )


class JournalNotClosedError(ConflictError):
    """Raised when deleting a journal that is still open."""

    def __init__(self, journal_id: UUID) -> None:
        super().__init__(
            message="Only closed journals can be deleted.",
            code=ErrorCode.JOURNAL_NOT_CLOSED,
            details={"journal_id": str(journal_id)},
        )


class DuplicateTagError(ConflictError):
    """Raised when a tag name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"Tag '{name}' already exists.",
            code=ErrorCode.DUPLICATE_TAG,
            details={"name": name},
        )
