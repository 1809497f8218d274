"""Translation of domain errors into HTTP responses.

Every error leaves the API in the same shape::

    {"detail": "<message safe for end users>", "code": "<ErrorCode value>"}

Routers never catch domain exceptions themselves; they roll back the
session and re-raise so the handlers registered here answer uniformly.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from okozukai.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from okozukai.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred"

BAD_REQUEST_CODES = frozenset(
    {
        ErrorCode.VALIDATION_ERROR,
        ErrorCode.INVALID_FORMAT,
        ErrorCode.INVALID_AMOUNT,
        ErrorCode.INVALID_CURRENCY,
        ErrorCode.INVALID_NAME,
        ErrorCode.INVALID_TRANSACTION_TYPE,
        ErrorCode.INVALID_TAG_REFERENCE,
        ErrorCode.INVALID_DATE_RANGE,
    },
)
NOT_FOUND_CODES = frozenset({ErrorCode.ENTITY_NOT_FOUND, ErrorCode.JOURNAL_NOT_FOUND})
CONFLICT_CODES = frozenset(
    {
        ErrorCode.CONFLICT,
        ErrorCode.DUPLICATE_TAG,
        ErrorCode.JOURNAL_CLOSED,
        ErrorCode.JOURNAL_NOT_CLOSED,
    },
)

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    **dict.fromkeys(BAD_REQUEST_CODES, status.HTTP_400_BAD_REQUEST),
    **dict.fromkeys(NOT_FOUND_CODES, status.HTTP_404_NOT_FOUND),
    **dict.fromkeys(CONFLICT_CODES, status.HTTP_409_CONFLICT),
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Checked in order when a code has no explicit status
_STATUS_BY_EXCEPTION_TYPE: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain exception: by code first, then by class."""
    mapped = ERROR_CODE_TO_STATUS.get(exc.code)
    if mapped is not None:
        return mapped

    for exc_type, status_code in _STATUS_BY_EXCEPTION_TYPE:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _error_json(status_code: int, message: str, code: ErrorCode) -> JSONResponse:
    body = ErrorResponse(detail=message, code=code.value)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the domain and catch-all handlers on ``app``.

    Parameters
    ----------
    app
        Application to register the handlers on
    """

    @app.exception_handler(DomainException)
    async def handle_domain_exception(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = status_for(exc)
        logger.warning(
            "%s %s -> %d %s: %s %s",
            request.method,
            request.url.path,
            status_code,
            exc.code.value,
            exc.message,
            exc.details,
        )
        return _error_json(status_code, exc.message, exc.code)

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        # Full traceback goes to the log only
        logger.exception(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _error_json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            INTERNAL_ERROR_MESSAGE,
            ErrorCode.INTERNAL_ERROR,
        )
