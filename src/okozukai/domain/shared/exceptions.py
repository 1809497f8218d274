"""Exception hierarchy shared by every domain package.

Each exception carries an ``ErrorCode``. The API layer turns the code into
an HTTP status, so domain code never needs to know about HTTP.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in the ``code`` field of errors.

    Clients branch on these values; renaming one is a breaking change.
    """

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_CURRENCY = "INVALID_CURRENCY"
    INVALID_NAME = "INVALID_NAME"
    INVALID_TRANSACTION_TYPE = "INVALID_TRANSACTION_TYPE"
    INVALID_TAG_REFERENCE = "INVALID_TAG_REFERENCE"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    JOURNAL_NOT_FOUND = "JOURNAL_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    DUPLICATE_TAG = "DUPLICATE_TAG"
    JOURNAL_CLOSED = "JOURNAL_CLOSED"
    JOURNAL_NOT_CLOSED = "JOURNAL_NOT_CLOSED"

    # 500
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of all errors raised by domain and application code.

    Attributes
    ----------
    message
        Text returned to API clients as ``detail``
    code
        Error code, defaults to the class's ``default_code``
    details
        Extra context for logs; never sent to clients
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name}({self.message!r}, code={self.code.value!r}, details={self.details!r})"


class ValidationError(DomainException):
    """Input is malformed or violates a business rule."""

    default_code = ErrorCode.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    """A referenced entity does not exist."""

    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The request clashes with the current state of the data."""

    default_code = ErrorCode.CONFLICT
